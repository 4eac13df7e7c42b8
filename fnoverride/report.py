"""Summaries of which override expectations were not met."""

from __future__ import annotations

from typing import Mapping, Sequence

from .records import ExpectedType, OverrideData
from .status import OverrideResult

PASSTHROUGH = "Passthrough"


def _instruction_failed(data: OverrideData) -> bool:
    condition = data.condition_info
    if data.expected is ExpectedType.TRIGGERED:
        if condition.times >= 0 and condition.called_times != condition.times:
            return True
        return condition.times == -1 and condition.called_times == 0
    if data.expected is ExpectedType.NOT_TRIGGERED:
        if condition.times >= 0 and condition.called_times == condition.times:
            return True
        return condition.times == -1 and condition.called_times > 0
    return False


def _passthrough_failed(passthrough: OverrideData) -> bool:
    condition = passthrough.condition_info
    if passthrough.expected is ExpectedType.TRIGGERED:
        if condition.times >= 0:
            return condition.called_times != condition.times
        return condition.times == -1 and condition.called_times == 0
    if passthrough.expected is ExpectedType.NOT_TRIGGERED:
        return condition.times >= 0 and condition.called_times == condition.times
    return False


def failed_expects(
    override_datas: Mapping[str, Sequence[OverrideData]],
    passthrough: OverrideData,
    unexpected_passthrough: Sequence[str],
) -> list[str]:
    """Return the names of functions whose expectations were not met.

    Only instructions with a result log are considered. A failed passthrough
    expectation adds ``"Passthrough"``; every function that reached the
    passthrough unexpectedly is listed with a ``" (Passthrough)"`` suffix.
    """
    failed = [
        name
        for name, datas in override_datas.items()
        if any(data.result is not None and _instruction_failed(data) for data in datas)
    ]
    if _passthrough_failed(passthrough):
        failed.append(PASSTHROUGH)
    failed.extend(f"{name} ({PASSTHROUGH})" for name in unexpected_passthrough)
    return failed


def override_results(
    override_datas: Mapping[str, Sequence[OverrideData]], function_name: str
) -> list[OverrideResult]:
    """Return the result logs of every instruction for ``function_name``."""
    return [
        data.result
        for data in override_datas.get(function_name, ())
        if data.result is not None
    ]


def failed_report(
    override_datas: Mapping[str, Sequence[OverrideData]],
    failed_functions: Sequence[str],
) -> str:
    """Return a readable report of the statuses behind each failed function."""
    parts = []
    for name in failed_functions:
        parts.append(f"{name}(): \n")
        for index, result in enumerate(override_results(override_datas, name)):
            parts.append(f"    Instruct[{index}]: \n")
            for status_index, status in enumerate(result.all_statuses()):
                parts.append(f"        Status[{status_index}]: {status.name}\n")
    return "".join(parts)