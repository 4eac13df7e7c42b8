"""Applying instructed argument values to the arguments of a call."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Sequence

from .records import ArgData, ArgsDataActionInfo
from .types import Any


@dataclass(eq=True)
class Ref:
    """A mutable cell passed for an argument the callee may write to."""

    value: object = None
    assignable: bool = True


@dataclass(frozen=True)
class Const:
    """Wraps an argument the callee must not modify."""

    value: object = None


class ConstArgError(TypeError):
    """An instruction tried to set a read-only argument."""


class NonAssignableArgError(TypeError):
    """An instruction tried to set an argument that cannot be assigned."""


def modify_args(args_data: Sequence[ArgData], args: Sequence[object]) -> list:
    """Apply instructed values to ``args`` in order and return the new argument list.

    ``Ref`` arguments are updated in place; plain values are replaced in the
    returned list. Wildcard arguments are skipped. Raises ``ConstArgError`` or
    ``NonAssignableArgError`` at the first argument that cannot take its value,
    after the earlier ones have been applied.
    """
    if len(args_data) < len(args):
        raise IndexError(
            f"{len(args)} arguments given but only {len(args_data)} argument values"
        )
    modified = []
    for data, arg in zip(args_data, args):
        if isinstance(arg, Any) or not data.is_set:
            modified.append(arg)
            continue
        if isinstance(arg, Const):
            raise ConstArgError("cannot set a const argument")
        if isinstance(arg, Ref):
            if not arg.assignable:
                raise NonAssignableArgError("argument is not assignable")
            arg.value = copy.copy(data.value)
            modified.append(arg)
        else:
            modified.append(copy.copy(data.value))
    return modified


def modify_args_by_action(
    instance: object, args: list, action_info: ArgsDataActionInfo
) -> None:
    """Run the instructed argument action, if one is set."""
    if action_info.data_action_set:
        action_info.data_action(instance, args)