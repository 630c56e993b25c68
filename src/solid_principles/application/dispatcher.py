"""Variant dispatcher.

Invokes a named operation on an object known only through its capability
contracts. Whether the operation is supported is decided by the capability
set the variant declares, never by the caller inspecting concrete types.
"""
from typing import Any, Optional

from solid_principles.domain.base.capability import Capability, Variant
from solid_principles.domain.base.exceptions import NotSupportedError
from solid_principles.domain.base.ports import LoggingPort


class VariantDispatcher:
    """Calls capability operations on variants.

    Failures are never caught here; deciding whether to log and continue or
    to propagate belongs to the caller.
    """

    def __init__(self, logger: Optional[LoggingPort] = None):
        self._logger = logger

    def supports(self, variant: Any, operation: str) -> bool:
        """Check whether a variant supports an operation."""
        contract = Capability.contract_for(operation)
        if isinstance(variant, Variant) and contract is not None:
            return variant.supports(contract)
        # Objects outside the capability model are supported structurally
        return callable(getattr(variant, operation, None))

    def invoke(self, variant: Any, operation: str, *args: Any, **kwargs: Any) -> Any:
        """
        Invoke an operation on a variant.

        Args:
            variant: Object implementing one or more capability contracts
            operation: Name of the operation to invoke
            *args: Positional operation arguments
            **kwargs: Keyword operation arguments

        Returns:
            Whatever the variant's operation returns

        Raises:
            NotSupportedError: If the variant lacks the capability owning
                the operation
        """
        if not self.supports(variant, operation):
            raise NotSupportedError(operation, type(variant).__name__)

        if self._logger is not None:
            self._logger.debug(
                f"Dispatching {operation} to {type(variant).__name__}",
                operation=operation,
            )
        return getattr(variant, operation)(*args, **kwargs)
