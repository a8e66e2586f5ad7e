import pytest

from argcheck.checks import gt, gte, not_null
from argcheck.errors import InvalidCheckError
from argcheck.messages.args import ABSENT
from argcheck.messages.pipeline import (
    create_error,
    custom_message,
    prefab_message,
    render_failure_message,
)
from argcheck.messages.render import system_id


def test_prefab_message_for_relation():
    assert render_failure_message(gt, 1, arg_name="count", target=3) == "count must be > 3 (was 1)"


def test_prefab_message_for_negated_relation():
    assert render_failure_message(gt, 5, arg_name="count", negated=True, target=3) == "count must be <= 3 (was 5)"


def test_prefab_message_for_predicate():
    assert prefab_message(not_null, False, "name", None) == "name must not be null"


def test_fallback_for_unregistered_test():
    assert render_failure_message(lambda x: False, 7, arg_name="count") == "Invalid value for count: 7"


def test_custom_message_takes_precedence():
    msg = render_failure_message(gte, 3, arg_name="count", target=10, message="${name} must be >= ${obj}")
    assert msg == "count must be >= 10"


def test_custom_message_sees_all_slots():
    msg = custom_message("${test}|${arg}|${type}|${name}|${obj}|${0}|${1}", ("a", "b"), gte, "count", 3, target=10)
    assert msg == "gte|3|int|count|10|a|b"


def test_custom_message_extra_args():
    msg = render_failure_message(gte, 3, arg_name="count", target=10, message="${name} must be >= ${0}", msg_args=[10])
    assert msg == "count must be >= 10"


def test_custom_message_unresolved_tokens_survive():
    msg = render_failure_message(gt, "subject", arg_name="s", message="${arg} is ${5}", msg_args=(1, 2, 3))
    assert msg == "subject is ${5}"


def test_custom_message_for_predicate_has_null_obj():
    assert custom_message("${obj}", (), not_null, "x", None, target=ABSENT) == "null"


def test_custom_message_ignores_negation():
    msg = render_failure_message(gt, 5, arg_name="count", negated=True, target=3, message="bad ${name}")
    assert msg == "bad count"


def test_custom_message_with_declared_type():
    assert custom_message("${type} ${name}", (), gt, None, 3.0, declared_type=int) == "int int"


def test_custom_message_must_not_be_none():
    with pytest.raises(InvalidCheckError):
        custom_message(None, (), gt, "x", 1)


def test_create_error_uses_factory():
    err = create_error(KeyError, "missing")
    assert isinstance(err, KeyError)
    assert err.args == ("missing",)


class Broken:
    def __str__(self) -> str:
        raise RuntimeError("boom")


def test_custom_message_with_unprintable_subject():
    value = Broken()
    msg = render_failure_message(gt, value, arg_name="x", target=1, message="${arg} bad")
    assert msg == f"{system_id(value)} bad"


def test_prefab_message_with_unprintable_subject():
    value = Broken()
    msg = render_failure_message(lambda v: False, value, arg_name="x")
    assert msg == f"Invalid value for x: {system_id(value)}"
