"""Records that describe a single override instruction and its parts."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Optional

ArgsCondition = Callable[[object, list], bool]
ArgsAction = Callable[[object, list], None]
ReturnAction = Callable[[object, list, object], object]


class ExpectedType(Enum):
    """Whether an instruction is expected to fire, expected not to, or neither."""

    NOT_SET = auto()
    TRIGGERED = auto()
    NOT_TRIGGERED = auto()


@dataclass
class ArgData:
    """A value for one argument, either to compare against or to assign."""

    value: object = None
    type_: object = None
    is_set: bool = False


@dataclass
class ConditionInfo:
    """Conditions that decide whether an instruction applies to a call."""

    lambda_condition: Optional[ArgsCondition] = None
    args_condition: list[ArgData] = field(default_factory=list)
    times: int = -1
    called_times: int = 0

    @property
    def data_condition_set(self) -> bool:
        return self.lambda_condition is not None

    def times_exhausted(self) -> bool:
        """Return True if a call limit is set and has been reached."""
        return self.times >= 0 and self.called_times >= self.times


@dataclass
class ArgsDataActionInfo:
    """An action that rewrites arguments, with the argument types it expects.

    A ``None`` entry in ``data_types`` means that position's type is not checked.
    """

    data_action: Optional[ArgsAction] = None
    data_types: list = field(default_factory=list)

    @property
    def data_action_set(self) -> bool:
        return self.data_action is not None

    @property
    def data_types_set(self) -> list[bool]:
        return [type_ is not None for type_ in self.data_types]


@dataclass
class ReturnDataInfo:
    """A fixed value to return instead of running the function."""

    data: object = None
    data_type: object = None
    data_set: bool = False
    return_any: bool = False
    return_reference: bool = False


@dataclass
class ReturnDataActionInfo:
    """An action that produces the value to return."""

    data_action: Optional[ReturnAction] = None
    data_type: object = None
    return_reference: bool = False

    @property
    def data_action_set(self) -> bool:
        return self.data_action is not None


@dataclass
class ResultActionInfo:
    """Callbacks run when an instruction fires or fails to."""

    correct_action: Optional[ArgsAction] = None
    otherwise_action: Optional[ArgsAction] = None

    @property
    def correct_action_set(self) -> bool:
        return self.correct_action is not None

    @property
    def otherwise_action_set(self) -> bool:
        return self.otherwise_action is not None


@dataclass
class OverrideData:
    """Everything one instruction holds for a function."""

    condition_info: ConditionInfo = field(default_factory=ConditionInfo)
    return_data_info: ReturnDataInfo = field(default_factory=ReturnDataInfo)
    return_data_action_info: ReturnDataActionInfo = field(
        default_factory=ReturnDataActionInfo
    )
    arguments_data_info: list[ArgData] = field(default_factory=list)
    arguments_data_action_info: ArgsDataActionInfo = field(
        default_factory=ArgsDataActionInfo
    )
    result_action_info: ResultActionInfo = field(default_factory=ResultActionInfo)
    instance: object = None
    result: object = None
    expected: ExpectedType = ExpectedType.NOT_SET