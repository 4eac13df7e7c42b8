"""Chainable builder that fills in one override instruction."""

from __future__ import annotations

from typing import Optional

from .args_modifier import Ref
from .records import (
    ArgData,
    ArgsAction,
    ArgsCondition,
    ExpectedType,
    OverrideData,
    ReturnAction,
)
from .status import OverrideResult
from .types import Any

_INFER = object()


def _is_reference_type(type_: object) -> bool:
    return isinstance(type_, type) and issubclass(type_, Ref)


def _arg_data(value: object) -> ArgData:
    if isinstance(value, Any):
        return ArgData()
    return ArgData(value=value, is_set=True)


class Instruction:
    """Describes how calls to one function should be overridden.

    Every setter returns the instruction itself so calls can be chained;
    ``assigns_result`` returns the result log instead.
    """

    def __init__(self, data: Optional[OverrideData] = None):
        self.data = data if data is not None else OverrideData()

    def __repr__(self) -> str:
        return f"Instruction({self.data!r})"

    @property
    def result(self) -> Optional[OverrideResult]:
        """The result log attached to this instruction, if any."""
        return self.data.result

    def _ensure_result(self) -> OverrideResult:
        if self.data.result is None:
            self.data.result = OverrideResult()
        return self.data.result

    # Conditions ---------------------------------------------------------------

    def times(self, times: int) -> "Instruction":
        """Apply the instruction at most ``times`` times; -1 means no limit."""
        if times < -1:
            raise ValueError("times must be -1 or a non-negative count")
        self.data.condition_info.times = times
        return self

    def when_called_with(self, *args: object) -> "Instruction":
        """Apply only when the arguments equal ``args``; ``ANY`` matches anything."""
        self.data.condition_info.args_condition = [_arg_data(arg) for arg in args]
        return self

    def if_(self, condition: ArgsCondition) -> "Instruction":
        """Apply only when ``condition(instance, args)`` is true."""
        self.data.condition_info.lambda_condition = condition
        return self

    def otherwise_do(self, action: ArgsAction) -> "Instruction":
        """Run ``action(instance, args)`` when a call fails to meet the conditions."""
        self.data.result_action_info.otherwise_action = action
        return self

    def when_called_expectedly_do(self, action: ArgsAction) -> "Instruction":
        """Run ``action(instance, args)`` whenever the instruction is applied."""
        self.data.result_action_info.correct_action = action
        return self

    # Returns ------------------------------------------------------------------

    def returns(self, value: object, return_type: object = _INFER) -> "Instruction":
        """Return ``value`` instead of running the function.

        ``return_type`` defaults to the type of ``value``. A wildcard value
        means the return value is left alone.
        """
        if isinstance(value, Any):
            return self.returns_any()
        if return_type is _INFER:
            return_type = type(value)
        info = self.data.return_data_info
        info.data = value
        info.data_type = return_type
        info.data_set = True
        info.return_any = False
        info.return_reference = _is_reference_type(return_type)
        return self

    def returns_void(self) -> "Instruction":
        """Return early from a function that returns nothing."""
        info = self.data.return_data_info
        info.data = None
        info.data_type = None
        info.data_set = True
        info.return_any = False
        info.return_reference = False
        return self

    def returns_any(self) -> "Instruction":
        """Match the call but leave the function's own return value in place."""
        info = self.data.return_data_info
        info.data = None
        info.data_type = None
        info.data_set = False
        info.return_any = True
        info.return_reference = False
        return self

    def returns_by_action(
        self, action: ReturnAction, return_type: object
    ) -> "Instruction":
        """Return what ``action(instance, args, return_info)`` produces."""
        info = self.data.return_data_action_info
        info.data_action = action
        info.data_type = return_type
        info.return_reference = _is_reference_type(return_type)
        return self

    # Arguments ----------------------------------------------------------------

    def set_args(self, *args: object) -> "Instruction":
        """Assign ``args`` to the call's arguments; ``DONT_SET`` leaves one alone."""
        self.data.arguments_data_info = [_arg_data(arg) for arg in args]
        return self

    def set_args_by_action(self, action: ArgsAction, *args: object) -> "Instruction":
        """Let ``action(instance, args)`` rewrite the arguments.

        ``args`` are the expected argument types; the wildcard type leaves a
        position unchecked.
        """
        info = self.data.arguments_data_action_info
        info.data_action = action
        info.data_types = [None if type_ is Any else type_ for type_ in args]
        return self

    # Results and expectations -------------------------------------------------

    def assigns_result(self) -> OverrideResult:
        """Attach a result log to the instruction and return it."""
        return self._ensure_result()

    def expected(self) -> "Instruction":
        """Report a failure unless the instruction is applied as often as set."""
        self._ensure_result()
        self.data.expected = ExpectedType.TRIGGERED
        return self

    def expected_not_called(self) -> "Instruction":
        """Report a failure if the instruction is applied as often as set."""
        self._ensure_result()
        self.data.expected = ExpectedType.NOT_TRIGGERED
        return self