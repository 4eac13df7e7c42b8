"""Outcomes of override attempts and the result log an instruction keeps."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class OverrideStatus(Enum):
    """What happened when a call met an override instruction."""

    NO_OVERRIDE = auto()
    OVERRIDE_SUCCESS = auto()
    MATCHING_CONDITION_VALUE_FAILED = auto()
    MATCHING_CONDITION_ACTION_FAILED = auto()
    MATCHING_OVERRIDE_TIMES_FAILED = auto()
    RETURN_ACTION_TYPE_MISMATCH = auto()
    MODIFY_CONST_ARG_ERROR = auto()
    MODIFY_NON_ASSIGNABLE_ARG_ERROR = auto()
    CHECK_ARG_MISSING_INEQUAL_OPERATOR_ERROR = auto()
    INTERNAL_MISSING_CHECK_ERROR = auto()

    def __str__(self) -> str:
        return self.name


@dataclass
class OverrideResult:
    """The statuses recorded for one instruction, oldest first."""

    statuses: list[OverrideStatus] = field(default_factory=list)

    def add_status(self, status: OverrideStatus) -> None:
        """Record ``status`` as the latest outcome."""
        self.statuses.append(status)

    def all_statuses(self) -> list[OverrideStatus]:
        """Return a copy of every recorded status, oldest first."""
        return list(self.statuses)

    def last_status(self) -> OverrideStatus:
        """Return the latest status, or ``NO_OVERRIDE`` if none was recorded."""
        return self.statuses[-1] if self.statuses else OverrideStatus.NO_OVERRIDE

    def last_status_succeed(self) -> bool:
        """Return True if the latest status is a successful override."""
        return self.last_status() is OverrideStatus.OVERRIDE_SUCCESS