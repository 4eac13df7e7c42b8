import pytest

from fnoverride.records import ExpectedType, OverrideData
from fnoverride.report import failed_expects, failed_report, override_results
from fnoverride.status import OverrideResult, OverrideStatus


def _data(expected, times=-1, called=0, with_result=True):
    data = OverrideData(expected=expected)
    data.condition_info.times = times
    data.condition_info.called_times = called
    if with_result:
        data.result = OverrideResult()
    return data


@pytest.mark.parametrize(
    "expected, times, called, fails",
    [
        (ExpectedType.TRIGGERED, -1, 0, True),
        (ExpectedType.TRIGGERED, -1, 3, False),
        (ExpectedType.TRIGGERED, 2, 1, True),
        (ExpectedType.TRIGGERED, 2, 2, False),
        (ExpectedType.TRIGGERED, 2, 3, True),
        (ExpectedType.NOT_TRIGGERED, -1, 0, False),
        (ExpectedType.NOT_TRIGGERED, -1, 1, True),
        (ExpectedType.NOT_TRIGGERED, 2, 2, True),
        (ExpectedType.NOT_TRIGGERED, 2, 1, False),
        (ExpectedType.NOT_SET, -1, 0, False),
    ],
)
def test_failed_expects_for_functions(expected, times, called, fails):
    datas = {"func": [_data(expected, times, called)]}
    result = failed_expects(datas, OverrideData(), [])
    assert result == (["func"] if fails else [])


def test_instruction_without_result_is_ignored():
    datas = {"func": [_data(ExpectedType.TRIGGERED, with_result=False)]}
    assert failed_expects(datas, OverrideData(), []) == []


def test_function_listed_once_for_several_failures():
    datas = {
        "func": [_data(ExpectedType.TRIGGERED), _data(ExpectedType.TRIGGERED)],
        "other": [_data(ExpectedType.TRIGGERED, called=1)],
    }
    assert failed_expects(datas, OverrideData(), []) == ["func"]


def test_passthrough_expected_but_never_called():
    passthrough = _data(ExpectedType.TRIGGERED, with_result=False)
    assert failed_expects({}, passthrough, []) == ["Passthrough"]


def test_passthrough_not_triggered_without_times_adds_only_unexpected_names():
    passthrough = _data(ExpectedType.NOT_TRIGGERED, called=3, with_result=False)
    assert failed_expects({}, passthrough, ["g"]) == ["g (Passthrough)"]


def test_passthrough_failure_comes_before_unexpected_names():
    passthrough = _data(ExpectedType.TRIGGERED, times=1, called=2, with_result=False)
    result = failed_expects({}, passthrough, ["g"])
    assert result == ["Passthrough", "g (Passthrough)"]


def test_override_results_only_returns_attached_results():
    with_result = _data(ExpectedType.TRIGGERED)
    without = _data(ExpectedType.TRIGGERED, with_result=False)
    datas = {"func": [with_result, without]}
    assert override_results(datas, "func") == [with_result.result]
    assert override_results(datas, "missing") == []


def test_failed_report_lists_statuses():
    data = _data(ExpectedType.TRIGGERED)
    data.result.add_status(OverrideStatus.MATCHING_CONDITION_VALUE_FAILED)
    datas = {"func": [data]}
    report = failed_report(datas, failed_expects(datas, OverrideData(), []))
    assert report == (
        "func(): \n"
        "    Instruct[0]: \n"
        "        Status[0]: MATCHING_CONDITION_VALUE_FAILED\n"
    )


def test_failed_report_is_empty_without_failures():
    datas = {"func": [_data(ExpectedType.TRIGGERED, called=1)]}
    assert failed_report(datas, failed_expects(datas, OverrideData(), [])) == ""