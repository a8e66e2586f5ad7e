import dataclasses

import pytest

from argcheck.checks import gt, lte, not_null
from argcheck.errors import InvalidCheckError
from argcheck.messages.args import ABSENT, DEFAULT_ARG_NAME, MsgArgs


def test_name_prefers_explicit_name():
    assert MsgArgs(not_null, False, "size", 3).name() == "size"


def test_name_falls_back_to_runtime_type():
    assert MsgArgs(not_null, False, None, 3).name() == "int"


def test_name_falls_back_to_declared_type():
    assert MsgArgs(not_null, False, None, None, declared_type=int).name() == "int"


def test_name_defaults_to_argument():
    args = MsgArgs(not_null, False, None, None)
    assert args.name() == DEFAULT_ARG_NAME == "argument"


def test_declared_type_wins_over_runtime_type():
    args = MsgArgs(gt, False, None, True, declared_type=int)
    assert args.type_name() == "int"


def test_type_and_name():
    assert MsgArgs(not_null, False, "size", 3).type_and_name() == "int size"
    assert MsgArgs(not_null, False, None, 3).type_and_name() == "int"
    assert MsgArgs(not_null, False, "size", None).type_and_name() == "size"
    assert MsgArgs(not_null, False, None, None).type_and_name() == "argument"


def test_polarity_words():
    affirmative = MsgArgs(gt, False, "x", 1, target=2)
    assert affirmative.not_() == ""
    assert affirmative.not_not() == " not"
    assert affirmative.flip().not_() == " not"


def test_flip_returns_new_bundle():
    args = MsgArgs(gt, False, "x", 1, target=2)
    flipped = args.flip(test=lte)
    assert flipped is not args
    assert args.negated is False
    assert args.test is gt
    assert flipped.negated is True
    assert flipped.test is lte
    assert flipped.target == 2


def test_bundle_is_frozen():
    args = MsgArgs(gt, False, "x", 1, target=2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        args.negated = True


def test_target_absent_for_predicates():
    args = MsgArgs(not_null, False, "x", None)
    assert args.target is ABSENT
    assert args.is_relation is False
    assert args.obj is None


def test_none_target_is_still_a_relation():
    args = MsgArgs(gt, False, "x", 1, target=None)
    assert args.is_relation is True


def test_subject_and_target_keep_identity():
    subject, target = [1], [2]
    args = MsgArgs(gt, False, "x", subject, target=target).flip()
    assert args.subject is subject
    assert args.target is target


def test_test_must_not_be_none():
    with pytest.raises(InvalidCheckError):
        MsgArgs(None, False, "x", 1)


def test_absent_is_falsy_singleton():
    assert not ABSENT
    assert type(ABSENT)() is ABSENT
