"""Checking that a call's arguments can take an instruction's argument values."""

from __future__ import annotations

from typing import Sequence

from .matching import type_matches
from .records import ArgData, OverrideData


def _arg_data_type(arg_data: ArgData) -> object:
    if arg_data.type_ is not None:
        return arg_data.type_
    return type(arg_data.value)


def _action_types_match(types: Sequence[object], args: Sequence[object]) -> bool:
    return all(
        type_ is None or type_matches(arg, type_) for type_, arg in zip(types, args)
    )


def _data_types_match(args_data: Sequence[ArgData], args: Sequence[object]) -> bool:
    return all(
        not arg_data.is_set or type_matches(arg, _arg_data_type(arg_data))
        for arg_data, arg in zip(args_data, args)
    )


def arguments_data_matches(data: OverrideData, args: Sequence[object]) -> bool:
    """Return True if the instruction's argument values or action fit ``args``.

    An argument action is checked against its declared types when their count
    equals the argument count; otherwise the instructed argument values must
    have one entry per argument, and each set entry must fit its argument's
    type. A call with no arguments never matches.
    """
    if not args:
        return False

    action_info = data.arguments_data_action_info
    if action_info.data_action_set and len(action_info.data_types) == len(args):
        return _action_types_match(action_info.data_types, args)

    if len(data.arguments_data_info) == len(args):
        return _data_types_match(data.arguments_data_info, args)

    return False