"""The registry of override instructions and the entry point functions call."""

from __future__ import annotations

import functools
from typing import Callable, Optional

from .arg_matching import arguments_data_matches
from .args_modifier import (
    ConstArgError,
    NonAssignableArgError,
    modify_args,
    modify_args_by_action,
)
from .instruction import Instruction
from .matching import ArgComparisonError, meets_requirements, return_data_matches, type_matches
from .records import ExpectedType, OverrideData
from .report import failed_expects, failed_report, override_results
from .status import OverrideResult, OverrideStatus
from .types import TypedInfo


def process_function_name(function_name: str) -> str:
    """Strip template arguments and spaces from a function name."""
    return function_name.split("<", 1)[0].replace(" ", "")


class NoOverride:
    """Marker returned when the real function body should run."""

    _instance: Optional["NoOverride"] = None

    def __new__(cls) -> "NoOverride":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_OVERRIDE"


NO_OVERRIDE = NoOverride()


class Overrider:
    """Holds override instructions and applies them to calls.

    A return type of ``None`` stands for a function that returns nothing.
    """

    def __init__(self) -> None:
        self.override_datas: dict[str, list[OverrideData]] = {}
        self.passthrough = OverrideData()
        self.unexpected_passthrough: list[str] = []

    # Instructions -------------------------------------------------------------

    def instruct(self, function_name: str, instance: object = None) -> Instruction:
        """Add an instruction for ``function_name``, optionally for one instance."""
        data = OverrideData(instance=instance)
        name = process_function_name(function_name)
        self.override_datas.setdefault(name, []).append(data)
        return Instruction(data)

    def instruct_passthrough(self) -> Instruction:
        """Return an instruction describing calls that nothing overrides."""
        return Instruction(self.passthrough)

    def remove_instructs(self, function_name: str) -> None:
        """Drop every instruction for ``function_name``."""
        self.override_datas.pop(process_function_name(function_name), None)

    def reset_passthrough(self) -> None:
        """Forget the passthrough instruction and its recorded calls."""
        self.passthrough = OverrideData()
        self.unexpected_passthrough.clear()

    def clear_all_instructs(self) -> None:
        """Drop every instruction, including the passthrough one."""
        self.override_datas.clear()
        self.reset_passthrough()

    # Calls --------------------------------------------------------------------

    def override(
        self,
        function_name: str,
        return_type: object,
        *args: object,
        instance: object = None,
    ) -> object:
        """Apply the first matching instruction to a call.

        Returns the value the function should return, or ``NO_OVERRIDE`` when
        the real body should run. Instructed argument values are written into
        ``Ref`` arguments.
        """
        name = process_function_name(function_name)
        arg_list = list(args)
        match = self._find(name, return_type, instance, arg_list)
        if match is None:
            self.passthrough_called(name)
            return NO_OVERRIDE

        data, override_args, override_return = match
        if override_args and not self._override_args(
            data, instance, arg_list, not override_return
        ):
            return NO_OVERRIDE

        if override_return:
            if data.return_data_info.return_any:
                self._call_expected(data, instance, arg_list)
                return NO_OVERRIDE
            return self._override_return(data, return_type, instance, arg_list)

        if not override_args:
            self._call_expected(data, instance, arg_list)
        return NO_OVERRIDE

    def passthrough_called(self, function_name: str) -> None:
        """Record a call that no instruction overrode."""
        condition = self.passthrough.condition_info
        condition.called_times += 1
        expected = self.passthrough.expected
        if expected is ExpectedType.TRIGGERED:
            if condition.times >= 0 and condition.called_times > condition.times:
                self.unexpected_passthrough.append(function_name)
        elif expected is ExpectedType.NOT_TRIGGERED:
            if condition.times == -1 and condition.called_times > 0:
                self.unexpected_passthrough.append(function_name)

    def overridable(
        self, return_type: object, name: Optional[str] = None
    ) -> Callable[[Callable], Callable]:
        """Decorate a function so its calls go through this overrider first."""

        def decorator(func: Callable) -> Callable:
            function_name = name if name is not None else func.__name__

            @functools.wraps(func)
            def wrapper(*args: object) -> object:
                outcome = self.override(function_name, return_type, *args)
                if outcome is NO_OVERRIDE:
                    return func(*args)
                return outcome

            return wrapper

        return decorator

    # Reports ------------------------------------------------------------------

    def failed_functions(self) -> list[str]:
        """Return the names of functions whose expectations were not met."""
        return failed_expects(
            self.override_datas, self.passthrough, self.unexpected_passthrough
        )

    def override_results(self, function_name: str) -> list[OverrideResult]:
        """Return the result logs of the instructions for ``function_name``."""
        return override_results(self.override_datas, process_function_name(function_name))

    def failed_report(self) -> str:
        """Return a readable report of every failed expectation."""
        return failed_report(self.override_datas, self.failed_functions())

    # Internals ----------------------------------------------------------------

    def _find(
        self, name: str, return_type: object, instance: object, args: list
    ) -> Optional[tuple[OverrideData, bool, bool]]:
        datas = self.override_datas.get(name)
        if not datas:
            return None

        for data in datas:
            if data.instance is not None and data.instance is not instance:
                continue

            override_args = False
            if data.arguments_data_info or data.arguments_data_action_info.data_action_set:
                if not arguments_data_matches(data, args):
                    continue
                override_args = True

            override_return = False
            return_info = data.return_data_info
            if (
                return_info.data_set
                or return_info.return_any
                or data.return_data_action_info.data_action_set
            ):
                if not return_data_matches(data, return_type):
                    continue
                override_return = True

            try:
                meets = meets_requirements(data, instance, args)
            except ArgComparisonError as exc:
                for other in datas:
                    if other.result is not None:
                        other.result.add_status(exc.status)
                continue
            if not meets:
                continue

            return data, override_args, override_return
        return None

    def _override_args(
        self, data: OverrideData, instance: object, args: list, last_override: bool
    ) -> bool:
        status = OverrideStatus.OVERRIDE_SUCCESS
        if data.arguments_data_action_info.data_action_set:
            modify_args_by_action(instance, args, data.arguments_data_action_info)
        else:
            try:
                modify_args(data.arguments_data_info, args)
            except ConstArgError:
                status = OverrideStatus.MODIFY_CONST_ARG_ERROR
            except NonAssignableArgError:
                status = OverrideStatus.MODIFY_NON_ASSIGNABLE_ARG_ERROR

        if data.result is not None:
            data.result.add_status(status)

        if status is OverrideStatus.OVERRIDE_SUCCESS:
            if last_override:
                self._call_expected(data, instance, args)
            return True

        self._call_unexpected(data, instance, args, status)
        return False

    def _override_return(
        self, data: OverrideData, return_type: object, instance: object, args: list
    ) -> object:
        action_info = data.return_data_action_info
        if return_type is None:
            if action_info.data_action_set:
                action_info.data_action(instance, args, TypedInfo().create(None))
            self._call_expected(data, instance, args)
            return None

        if data.return_data_info.data_set:
            self._call_expected(data, instance, args)
            return data.return_data_info.data

        if action_info.data_action_set:
            value = action_info.data_action(
                instance, args, TypedInfo().create(return_type)
            )
            if type_matches(value, return_type):
                self._call_expected(data, instance, args)
                return value
            self._call_unexpected(
                data, instance, args, OverrideStatus.RETURN_ACTION_TYPE_MISMATCH
            )
        return NO_OVERRIDE

    @staticmethod
    def _call_expected(data: OverrideData, instance: object, args: list) -> None:
        if data.result_action_info.correct_action_set:
            data.result_action_info.correct_action(instance, args)
        data.condition_info.called_times += 1
        if data.result is not None:
            data.result.add_status(OverrideStatus.OVERRIDE_SUCCESS)

    @staticmethod
    def _call_unexpected(
        data: OverrideData, instance: object, args: list, status: OverrideStatus
    ) -> None:
        if data.result_action_info.otherwise_action_set:
            data.result_action_info.otherwise_action(instance, args)
        data.condition_info.called_times += 1
        if data.result is not None:
            data.result.add_status(status)


class Overridable(Overrider):
    """An object that carries its own overrider, so its methods can be instructed."""