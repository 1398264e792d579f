#!/usr/bin/env python3
"""
Request lifecycle states.

A ResultState is one of four variants:

- NoneState: no request has been made yet
- Loading: a request is in flight
- Success(data): the request produced a body
- Error(error, exception): the request failed

An Error carries ``error`` for a well-formed but unsuccessful response and
``exception`` for a transport or serialization fault. Both may be empty when a
failed response had no body.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar('T')


class StateKind(str, Enum):
    """Tag identifying a ResultState variant."""
    NONE = "none"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class ResultState(Generic[T]):
    """Base class of the request lifecycle states."""

    kind: StateKind

    @property
    def is_terminal(self) -> bool:
        """True for the states that end an emission sequence."""
        return self.kind in (StateKind.SUCCESS, StateKind.ERROR)


@dataclass(frozen=True)
class NoneState(ResultState[T]):
    """No request has been made yet."""
    kind = StateKind.NONE


@dataclass(frozen=True)
class Loading(ResultState[T]):
    """Request in flight, no payload."""
    kind = StateKind.LOADING


@dataclass(frozen=True)
class Success(ResultState[T]):
    """Request completed with a body."""
    data: T
    kind = StateKind.SUCCESS


@dataclass(frozen=True)
class Error(ResultState[T]):
    """Request failed, either as a response or as a fault."""
    error: Optional[T] = None
    exception: Optional[BaseException] = None
    kind = StateKind.ERROR

    @property
    def is_fault(self) -> bool:
        """True when the failure was a raised fault rather than a response."""
        return self.exception is not None

    def describe(self) -> str:
        """Short human readable cause."""
        if self.exception is not None:
            return f"{type(self.exception).__name__}: {self.exception}"
        message = getattr(self.error, 'message', None)
        if message:
            return message
        status = getattr(self.error, 'status', None)
        if status:
            return f"request failed with status '{status}'"
        return "request failed without a response body"
