"""Wildcard marker and lightweight type tags used by override instructions."""

from __future__ import annotations

from dataclasses import dataclass


class Any:
    """Wildcard value: matches any argument and means "leave untouched"."""

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Any):
            return True
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        if isinstance(other, Any):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash(Any)

    def __repr__(self) -> str:
        return "Any"

    __str__ = __repr__


ANY_TYPE = Any
ANY = Any()
DONT_SET = Any()
DONT_OVERRIDE_RETURN = Any()


@dataclass
class TypedInfo:
    """A type tag that may or may not have been set."""

    type_: object = None
    is_set: bool = False

    def create(self, type_: object) -> "TypedInfo":
        """Record ``type_`` as this tag's type and return the tag."""
        self.type_ = type_
        self.is_set = True
        return self

    def is_type(self, type_: object) -> bool:
        """Return True if the tag is set and holds ``type_``."""
        return self.is_set and self.type_ == type_