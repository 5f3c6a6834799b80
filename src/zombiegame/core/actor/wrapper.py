from __future__ import annotations

from typing import Any


class Shared[T]:
    """Hand a member to an Actor by reference instead of by ownership.

    An Actor built with `weapon=Shared(w)` stores `w` itself and records that it
    does not own it. Only the shallow copy path and callers asking for sharing on
    purpose should use this.
    """

    __slots__ = ("_member",)

    def __init__(self, member: T) -> None:
        self._member = member

    def unwrap(self) -> T:
        """Return the wrapped object itself."""
        return self._member

    def __repr__(self) -> str:
        return f"Shared({self._member!r})"


WrappedMember = Shared  # | Borrowed | ... if more holding modes are added


def is_wrapped(value: Any) -> bool:
    """Check whether a value arrived through a holding-mode wrapper."""
    return isinstance(value, WrappedMember)


def get_member(value: Any | WrappedMember[Any]) -> Any:
    """Get the underlying object, unwrapping if necessary."""
    if isinstance(value, WrappedMember):
        return value.unwrap()
    return value
