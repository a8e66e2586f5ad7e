"""Building blocks for prefab message formatters.

A formatter is a plain function from :class:`MsgArgs` to a message. Most
built-in tests share one of two sentence shapes::

    <name> must[ not] <predicate>[ (was <value>)]
    <name> must[ not] <relation> <target>[ (was <value>)]

The helpers here build formatters for those shapes so that catalog entries
only have to supply the phrase.
"""

from collections.abc import Callable
from typing import Any

from argcheck.messages.args import MsgArgs
from argcheck.messages.render import render_value

Formatter = Callable[[MsgArgs], str]


def was(value: Any) -> str:
    return f" (was {render_value(value)})"


def _predicate(args: MsgArgs, phrase: str, negative: bool, show_arg: bool) -> str:
    polarity = args.not_not() if negative else args.not_()
    msg = f"{args.name()} must{polarity} {phrase}"
    return msg + was(args.subject) if show_arg else msg


def _relation(args: MsgArgs, phrase: str, negative: bool, show_arg: bool) -> str:
    polarity = args.not_not() if negative else args.not_()
    msg = f"{args.name()} must{polarity} {phrase} {render_value(args.obj)}"
    return msg + was(args.subject) if show_arg else msg


def _build(
    shape: Callable[[MsgArgs, str, bool, bool], str],
    phrase: str,
    negative: bool,
    show_arg_if_affirmative: bool,
    show_arg_if_negated: bool,
) -> Formatter:
    def formatter(args: MsgArgs) -> str:
        show_arg = show_arg_if_negated if args.negated else show_arg_if_affirmative
        return shape(args, phrase, negative, show_arg)

    return formatter


def format_predicate(
    phrase: str,
    show_arg: bool = False,
    show_arg_if_negated: bool | None = None,
) -> Formatter:
    """Formatter for an affirmatively phrased predicate.

    Parameters
    ----------
    phrase
        Predicate text following "must", e.g. ``"be even"``.
    show_arg
        Append ``(was <value>)`` when the test failed in its affirmative form.
    show_arg_if_negated
        Same for the negated form. Defaults to ``show_arg``.

    Examples
    --------
    >>> fmt = format_predicate("be parsable as integer", True)
    >>> fmt(MsgArgs("integer", False, "count", "78ab45"))
    'count must be parsable as integer (was 78ab45)'
    """
    negated = show_arg if show_arg_if_negated is None else show_arg_if_negated
    return _build(_predicate, phrase, False, show_arg, negated)


def format_negative_predicate(
    phrase: str,
    show_arg: bool = False,
    show_arg_if_negated: bool | None = None,
) -> Formatter:
    """Formatter for a negatively phrased predicate such as ``not_null``.

    ``phrase`` is given affirmatively (``"be null"``); the affirmative form
    of the test renders as "must not be null".
    """
    negated = show_arg if show_arg_if_negated is None else show_arg_if_negated
    return _build(_predicate, phrase, True, show_arg, negated)


def format_relation(
    phrase: str,
    show_arg: bool = True,
    show_arg_if_negated: bool | None = None,
) -> Formatter:
    """Formatter for a relation, e.g. ``format_relation(">")``."""
    negated = show_arg if show_arg_if_negated is None else show_arg_if_negated
    return _build(_relation, phrase, False, show_arg, negated)


def format_negative_relation(
    phrase: str,
    show_arg: bool = True,
    show_arg_if_negated: bool | None = None,
) -> Formatter:
    """Formatter for a negatively phrased relation, e.g. ``not_contains``."""
    negated = show_arg if show_arg_if_negated is None else show_arg_if_negated
    return _build(_relation, phrase, True, show_arg, negated)
