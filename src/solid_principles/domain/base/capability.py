"""Capability contracts and the variant base class.

A capability contract is an abstract class declaring a small set of named
operations. Contracts are declared with ``contract=True``::

    class Flying(Capability, contract=True):
        operations = ("fly",)

        @abstractmethod
        def fly(self) -> None:
            ...

Declaring a contract records which contract owns each operation, so a caller
holding only an operation name can find out whether a variant supports it
without ever looking at the variant's concrete type.

Variants subclass ``Variant`` and compose only the contracts they need. An
operation a variant does not support is simply absent from it.
"""
from abc import ABC
from typing import ClassVar, Dict, FrozenSet, Optional, Tuple, Type


class Capability(ABC):
    """Base class for all capability contracts."""

    operations: ClassVar[Tuple[str, ...]] = ()

    _contracts: ClassVar[Dict[str, Type["Capability"]]] = {}

    def __init_subclass__(cls, contract: bool = False, **kwargs):
        super().__init_subclass__(**kwargs)
        cls._is_contract = contract
        if not contract:
            return

        # All operations are checked before any is registered
        for operation in cls.operations:
            existing = Capability._contracts.get(operation)
            if existing is not None and _contract_key(existing) != _contract_key(cls):
                raise ValueError(
                    f"Operation '{operation}' is already declared by "
                    f"{existing.__name__}"
                )
        for operation in cls.operations:
            Capability._contracts[operation] = cls

    @classmethod
    def is_contract(cls) -> bool:
        """Check whether this class declares a contract rather than a variant."""
        return cls.__dict__.get("_is_contract", False)

    @staticmethod
    def contract_for(operation: str) -> Optional[Type["Capability"]]:
        """Get the contract owning an operation, if any."""
        return Capability._contracts.get(operation)

    @staticmethod
    def declared_operations() -> Dict[str, Type["Capability"]]:
        """Get a copy of the operation to contract mapping."""
        return dict(Capability._contracts)


def _contract_key(contract: Type[Capability]) -> Tuple[str, str]:
    # Re-importing a module re-declares its contracts under new class objects.
    return contract.__module__, contract.__qualname__


class Variant:
    """Base class for concrete variants of one or more capability contracts."""

    @classmethod
    def capabilities(cls) -> FrozenSet[Type[Capability]]:
        """Get every contract this variant implements."""
        return frozenset(
            klass
            for klass in cls.__mro__
            if isinstance(klass, type)
            and issubclass(klass, Capability)
            and klass.is_contract()
        )

    def supports(self, contract: Type[Capability]) -> bool:
        """Check whether this variant belongs to a capability set."""
        return contract in self.capabilities()

    @property
    def variant_name(self) -> str:
        return type(self).__name__
