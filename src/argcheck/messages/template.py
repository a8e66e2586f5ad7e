"""Placeholder substitution for custom failure messages.

Custom messages use ``${...}`` tokens rather than ``%``- or ``{}``-style
fields, so that ordinary braces and percent signs in a message need no
escaping. Five names refer to well-known values of the failed check::

    ${test}   name of the test that failed
    ${arg}    the value being checked
    ${type}   simple type name of that value
    ${name}   the argument name
    ${obj}    the object of a relation (None for predicates)

An integer token ``${n}`` refers to the n-th extra message argument.

Examples
--------
>>> format_message("${name} must be >= ${0}", ["gte", 3, "int", "count", 10, 10])
'count must be >= 10'

Malformed input is never an error. Unknown tokens, out-of-range indices
and unterminated tokens are copied to the output as written.
"""

import logging
from collections.abc import Iterator, Sequence
from typing import Any

from argcheck.messages.render import system_id

logger = logging.getLogger(__name__)

WELL_KNOWN = ("test", "arg", "type", "name", "obj")

_NAMED = {name: i for i, name in enumerate(WELL_KNOWN)}


def _scan(fmt: str) -> Iterator[tuple[bool, str]]:
    """Split ``fmt`` into literal chunks and token bodies.

    Yields ``(False, text)`` for text to copy verbatim and ``(True, body)``
    for the body of each complete ``${body}`` token.
    """
    i = 0
    end = len(fmt)
    while i < end:
        dollar = fmt.find("$", i)
        if dollar == -1:
            yield False, fmt[i:]
            return
        if dollar > i:
            yield False, fmt[i:dollar]
        if dollar + 1 == end or fmt[dollar + 1] != "{":
            yield False, "$"
            i = dollar + 1
            continue
        close = fmt.find("}", dollar + 2)
        if close == -1:
            # unterminated: keep "${" and whatever followed it
            yield False, fmt[dollar:]
            return
        yield True, fmt[dollar + 2 : close]
        i = close + 1


def _index_of(body: str) -> int | None:
    if body in _NAMED:
        return _NAMED[body]
    if body.isascii() and body.isdigit():
        return int(body) + len(WELL_KNOWN)
    return None


def _text(value: Any) -> str:
    if value is None:
        return "null"
    try:
        return str(value)
    except Exception:
        logger.debug("Could not stringify %s, falling back to identity", type(value), exc_info=True)
        return system_id(value)


def format_message(fmt: str, args: Sequence[Any]) -> str:
    """Substitute ``${...}`` tokens in ``fmt`` with values from ``args``.

    Parameters
    ----------
    fmt
        The raw message template.
    args
        Positional argument vector: the five well-known values followed by
        the caller's extra message arguments.

    Returns
    -------
    str
        The message with every resolvable token replaced. Tokens that cannot
        be resolved are left in place as ``${body}``.
    """
    parts: list[str] = []
    for is_token, text in _scan(fmt):
        if not is_token:
            parts.append(text)
            continue
        idx = _index_of(text)
        if idx is None or idx >= len(args):
            logger.debug("Unresolved message token ${%s} in %r", text, fmt)
            parts.append("${" + text + "}")
        else:
            parts.append(_text(args[idx]))
    return "".join(parts)


def _escape(text: str) -> str:
    return text.replace("{", "{{").replace("}", "}}")


def normalize(fmt: str) -> str:
    """Rewrite a ``${...}`` template into a :meth:`str.format` template.

    Named tokens become ``{0}`` to ``{4}``, ``${n}`` becomes ``{n+5}``.
    Literal braces are doubled so the result can be passed to
    :meth:`str.format` as is. Unrecognised tokens are kept literally.

    Unlike :func:`format_message`, the result does not know how many
    arguments will be supplied; formatting it with too few arguments
    raises :class:`IndexError`.
    """
    parts: list[str] = []
    for is_token, text in _scan(fmt):
        if not is_token:
            parts.append(_escape(text))
            continue
        idx = _index_of(text)
        parts.append(_escape("${" + text + "}") if idx is None else "{%d}" % idx)
    return "".join(parts)
