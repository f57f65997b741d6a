"""Outcome of a resource call.

Resource calls never raise on transport failures. They return one of:

- ``Ok(value)``: the call succeeded and the body was parsed
- ``Empty()``: the call succeeded but the store sent no body
- ``Failed(reason)``: the request did not complete; already logged

An ``Ok`` holding a response with zero items is a real answer, unlike
``Empty`` or ``Failed``.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from magento_access.exceptions import MagentoTransportError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful call carrying the parsed value."""

    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Empty:
    """Successful call without a response body."""

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> None:
        return None


@dataclass(frozen=True, slots=True)
class Failed:
    """Call that failed at the transport or HTTP level."""

    reason: str
    error: MagentoTransportError | None = None

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> None:
        return None


ApiResult = Ok[T] | Empty | Failed
