import pytest

from fnoverride.args_modifier import (
    Const,
    ConstArgError,
    NonAssignableArgError,
    Ref,
    modify_args,
    modify_args_by_action,
)
from fnoverride.records import ArgData, ArgsDataActionInfo
from fnoverride.types import ANY


def _set(value):
    return ArgData(value=value, type_=type(value), is_set=True)


def test_ref_arguments_are_updated_in_place():
    float_ref = Ref(2.0)
    bool_ref = Ref(False)
    string_ref = Ref("")
    modify_args(
        [ArgData(), _set(1.0), _set(True), _set("test")],
        [5, float_ref, bool_ref, string_ref],
    )
    assert float_ref.value == 1.0
    assert bool_ref.value is True
    assert string_ref.value == "test"


def test_unset_data_leaves_arguments_alone():
    string_ref = Ref("keep")
    result = modify_args([ArgData(), ArgData()], [1, string_ref])
    assert result == [1, string_ref]
    assert string_ref.value == "keep"


def test_plain_values_replaced_in_returned_list():
    result = modify_args([_set("test2"), ArgData()], ["test", 3])
    assert result == ["test2", 3]


def test_wildcard_argument_is_skipped():
    result = modify_args([_set(9), _set(4)], [ANY, 1])
    assert len(result) == 2
    assert result[0] is ANY
    assert result[1] == 4


def test_const_argument_without_data_passes():
    const_arg = Const(1)
    assert modify_args([ArgData()], [const_arg]) == [const_arg]


def test_const_argument_with_data_raises_after_earlier_args():
    first = Ref(0)
    with pytest.raises(ConstArgError):
        modify_args([_set(4), _set(2.0)], [first, Const(1.0)])
    assert first.value == 4


def test_non_assignable_ref_raises():
    with pytest.raises(NonAssignableArgError):
        modify_args([_set("x")], [Ref("y", assignable=False)])


def test_assigned_value_is_a_copy():
    source = [1, 2]
    target = Ref([])
    modify_args([_set(source)], [target])
    source.append(3)
    assert target.value == [1, 2]


def test_too_few_argument_values_raise():
    with pytest.raises(IndexError):
        modify_args([_set(1)], [Ref(0), Ref(0)])


def test_modify_args_by_action_runs_action():
    seen = []

    def action(instance, args):
        seen.append(instance)
        args[0].value = "changed"

    target = Ref("original")
    modify_args_by_action("me", [target], ArgsDataActionInfo(data_action=action))
    assert target.value == "changed"
    assert seen == ["me"]


def test_modify_args_by_action_without_action_keeps_args():
    target = Ref("original")
    args = [target]
    modify_args_by_action(None, args, ArgsDataActionInfo())
    assert args == [Ref("original")]