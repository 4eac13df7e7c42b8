"""Deciding whether an instruction applies to a call."""

from __future__ import annotations

from typing import Sequence

from .args_modifier import Const, Ref
from .records import ArgData, OverrideData
from .status import OverrideStatus
from .types import Any


class ArgComparisonError(TypeError):
    """An argument could not be compared with its condition value."""

    def __init__(self, message: str):
        super().__init__(message)
        self.status = OverrideStatus.CHECK_ARG_MISSING_INEQUAL_OPERATOR_ERROR


def value_of(arg: object) -> object:
    """Return the value behind a ``Ref`` or ``Const`` wrapper, or ``arg`` itself."""
    if isinstance(arg, (Ref, Const)):
        return arg.value
    return arg


def _is_instance(value: object, type_: type) -> bool:
    if isinstance(value, bool) and type_ is not bool and issubclass(bool, type_):
        return type_ is object
    return isinstance(value, type_)


def type_matches(value: object, type_: object) -> bool:
    """Return True if ``value``, or the value it wraps, is of ``type_``.

    ``None`` and the wildcard type match anything; ``bool`` does not count as ``int``.
    """
    if type_ is None or type_ is Any:
        return True
    if not isinstance(type_, type):
        return False
    return _is_instance(value, type_) or _is_instance(value_of(value), type_)


def _is_wildcard(condition: ArgData) -> bool:
    return not condition.is_set or isinstance(condition.value, Any)


def args_types_match(conditions: Sequence[ArgData], args: Sequence[object]) -> bool:
    """Return True if the count matches and each set condition fits its argument's type."""
    if len(conditions) != len(args):
        return False
    for condition, arg in zip(conditions, args):
        if _is_wildcard(condition):
            continue
        expected = condition.type_ if condition.type_ is not None else type(condition.value)
        if not type_matches(arg, expected):
            return False
    return True


def args_values_match(conditions: Sequence[ArgData], args: Sequence[object]) -> bool:
    """Return True if every set condition equals its argument.

    A ``Ref`` condition matches only that same ``Ref``; other conditions are
    compared with the value behind the argument. Raises ``ArgComparisonError``
    if a value cannot be compared.
    """
    for index, (condition, arg) in enumerate(zip(conditions, args)):
        if _is_wildcard(condition):
            continue
        if isinstance(condition.value, Ref):
            matched = arg is condition.value
        else:
            try:
                matched = bool(value_of(arg) == condition.value)
            except TypeError as exc:
                raise ArgComparisonError(
                    f"argument {index} cannot be compared with its condition"
                ) from exc
        if not matched:
            return False
    return True


def _is_reference_type(return_type: object) -> bool:
    return isinstance(return_type, type) and issubclass(return_type, Ref)


def return_data_matches(data: OverrideData, return_type: object) -> bool:
    """Return True if the instruction's return value or action fits ``return_type``."""
    return_info = data.return_data_info
    action_info = data.return_data_action_info
    if return_info.data_set:
        if return_info.data_type != return_type:
            return False
        return not _is_reference_type(return_type) or return_info.return_reference
    if action_info.data_action_set:
        if action_info.data_type != return_type:
            return False
        return not _is_reference_type(return_type) or action_info.return_reference
    return return_info.return_any


def _fail(
    data: OverrideData, instance: object, args: list, status: OverrideStatus
) -> bool:
    if data.result is not None:
        data.result.add_status(status)
    if data.result_action_info.otherwise_action_set:
        data.result_action_info.otherwise_action(instance, args)
    return False


def meets_requirements(
    data: OverrideData, instance: object, args: Sequence[object]
) -> bool:
    """Return True if the call satisfies the instruction's conditions.

    A failed value, predicate or call-count check records its status on the
    instruction's result and runs its otherwise action. A type or count
    mismatch simply returns False. Raises ``ArgComparisonError`` when an
    argument cannot be compared.
    """
    condition = data.condition_info
    arg_list = list(args)

    if condition.args_condition:
        if not args_types_match(condition.args_condition, arg_list):
            return False
        if not args_values_match(condition.args_condition, arg_list):
            return _fail(
                data, instance, arg_list, OverrideStatus.MATCHING_CONDITION_VALUE_FAILED
            )

    if condition.data_condition_set and not condition.lambda_condition(
        instance, arg_list
    ):
        return _fail(
            data, instance, arg_list, OverrideStatus.MATCHING_CONDITION_ACTION_FAILED
        )

    if condition.times_exhausted():
        return _fail(
            data, instance, arg_list, OverrideStatus.MATCHING_OVERRIDE_TIMES_FAILED
        )

    return True