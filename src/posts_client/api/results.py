"""
Call Results

Every API operation resolves to exactly one of three outcomes:

- ``Success``: the server answered with a 2xx status; ``body`` holds the
  decoded post(s), or ``None`` when the response had no content.
- ``Failure``: the server answered with any other status; there is no
  decoded body, only the status code and the raw error text.
- ``TransportError``: no response was received at all (DNS, connect,
  timeout); ``cause`` holds the underlying exception.
"""

from dataclasses import dataclass, field
from typing import Generic, Mapping, Optional, TypeVar, Union


T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """The server accepted the request."""
    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Optional[T] = None

    @property
    def is_successful(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """The server answered with a non-2xx status."""
    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    error_body: str = ""

    @property
    def is_successful(self) -> bool:
        return False


@dataclass(frozen=True)
class TransportError:
    """No response was received."""
    cause: Exception

    @property
    def is_successful(self) -> bool:
        return False


CallResult = Union[Success[T], Failure, TransportError]
