"""Turning a failed test into the message handed to the error factory."""

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from argcheck.errors import InvalidCheckError
from argcheck.messages.args import ABSENT, MsgArgs
from argcheck.messages.registry import default_registry
from argcheck.messages.template import format_message

E = TypeVar("E", bound=BaseException)


def custom_message(
    message: str | None,
    msg_args: Sequence[Any],
    test: Any,
    arg_name: str | None,
    subject: Any,
    declared_type: type | None = None,
    target: Any = ABSENT,
) -> str:
    """Fill in a caller-supplied ``${...}`` template.

    The template sees the test name, the subject, its type name, the
    argument name and the relation target as ``${test}``, ``${arg}``,
    ``${type}``, ``${name}`` and ``${obj}``, followed by ``msg_args`` as
    ``${0}``, ``${1}``, ...
    """
    if message is None:
        raise InvalidCheckError("message must not be None")
    args = MsgArgs(test, False, arg_name, subject, declared_type, target)
    prefix = (
        default_registry().name_of(test),
        subject,
        args.type_name(),
        args.name(),
        args.obj,
    )
    return format_message(message, (*prefix, *msg_args))


def prefab_message(
    test: Any,
    negated: bool,
    arg_name: str | None,
    subject: Any,
    declared_type: type | None = None,
    target: Any = ABSENT,
) -> str:
    """Message from the formatter registered for ``test``, or a generic one."""
    args = MsgArgs(test, negated, arg_name, subject, declared_type, target)
    return default_registry().format(args)


def render_failure_message(
    test: Any,
    subject: Any,
    *,
    arg_name: str | None = None,
    negated: bool = False,
    declared_type: type | None = None,
    target: Any = ABSENT,
    message: str | None = None,
    msg_args: Sequence[Any] = (),
) -> str:
    """Describe why ``subject`` failed ``test``.

    Uses ``message`` as a custom template when given, otherwise the prefab
    message registered for ``test``.

    Parameters
    ----------
    test
        The test that failed.
    subject
        The value that failed it.
    arg_name
        Name of the argument, if known.
    negated
        Whether the test was applied in its negated form.
    declared_type
        Type to report instead of the subject's runtime type.
    target
        Relation target; leave as :data:`~argcheck.messages.args.ABSENT`
        for predicates.
    message
        Custom ``${...}`` template.
    msg_args
        Extra arguments for the custom template.

    Returns
    -------
    str
        The finished message.
    """
    if message is not None:
        return custom_message(message, msg_args, test, arg_name, subject, declared_type, target)
    return prefab_message(test, negated, arg_name, subject, declared_type, target)


def create_error(exc_factory: Callable[[str], E], message: str) -> E:
    """Build the error for ``message``; what kind of error is up to the factory."""
    return exc_factory(message)
