"""Translation of store failures into domain errors."""

import functools
from typing import Awaitable, Callable, TypeVar

import logfire
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from qna.domain.error import DependencyError

T = TypeVar("T")

# Connection loss, refused connections and pool exhaustion
STORE_UNAVAILABLE = (OperationalError, InterfaceError, PoolTimeoutError, OSError)


def store_operation(
    func: Callable[..., Awaitable[T]],
) -> Callable[..., Awaitable[T]]:
    """Re-raise store outages from a repository method as DependencyError.

    Integrity and programming errors are left alone: they signal a bug,
    not an unavailable store.
    """

    @functools.wraps(func)
    async def wrapper(*args, **kwargs) -> T:
        try:
            return await func(*args, **kwargs)
        except STORE_UNAVAILABLE as e:
            operation = func.__qualname__
            logfire.error("Store unavailable", operation=operation, error=str(e))
            raise DependencyError(operation, e) from e

    return wrapper
