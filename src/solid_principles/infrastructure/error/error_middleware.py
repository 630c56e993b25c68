"""Error handling middleware: log recoverable failures and continue."""

import functools
from typing import Callable, Optional, Tuple, Type, TypeVar

from solid_principles.domain.base.exceptions import DomainException
from solid_principles.domain.base.ports import LoggingPort

T = TypeVar("T")

RecoverableErrors = Tuple[Type[BaseException], ...]


class ErrorMiddleware:
    """Middleware turning recoverable failures into a single error log line."""

    def __init__(
        self,
        logger: LoggingPort,
        recover: RecoverableErrors = (DomainException,),
    ):
        """
        Initialize the middleware.

        Args:
            logger: Logger receiving one error line per recovered failure
            recover: Exception types to log and swallow; others propagate
        """
        self._logger = logger
        self._recover = recover

    def wrap_handler(self, handler_func: Callable[..., T]) -> Callable[..., Optional[T]]:
        """
        Wrap a handler function with error handling.

        Args:
            handler_func: The handler function to wrap

        Returns:
            Wrapped handler returning None after logging a recovered failure
        """

        @functools.wraps(handler_func)
        def wrapped_handler(*args, **kwargs):
            try:
                return handler_func(*args, **kwargs)
            except self._recover as e:
                self._logger.error(str(e), error_type=type(e).__name__)
                return None

        return wrapped_handler


def with_error_logging(
    logger: LoggingPort,
    recover: RecoverableErrors = (DomainException,),
):
    """
    Decorator for logging recoverable failures instead of raising them.

    Args:
        logger: Logger receiving the error lines
        recover: Exception types to recover from

    Returns:
        Decorator function
    """
    middleware = ErrorMiddleware(logger, recover)

    def decorator(func: Callable[..., T]) -> Callable[..., Optional[T]]:
        return middleware.wrap_handler(func)

    return decorator
