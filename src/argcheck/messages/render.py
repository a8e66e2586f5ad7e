"""Stringification of checked values for use inside error messages."""

import logging
from collections.abc import Collection, Mapping
from enum import Enum
from itertools import islice
from numbers import Number
from typing import Any

from argcheck.config import get_settings

logger = logging.getLogger(__name__)

ELLIPSIS = "..."


class ValueKind(Enum):
    """Closed set of value shapes the renderer distinguishes."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    TEXT = "text"
    ENUMERATOR = "enumerator"
    TYPE = "type"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    DISPLAYABLE = "displayable"
    OPAQUE = "opaque"


def classify(value: Any) -> ValueKind:
    """Return the :class:`ValueKind` of ``value``."""
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    # before NUMBER: IntEnum members are ints too
    if isinstance(value, Enum):
        return ValueKind.ENUMERATOR
    if isinstance(value, Number):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.TEXT
    if isinstance(value, type):
        return ValueKind.TYPE
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, Collection) and not isinstance(value, (bytes, bytearray, memoryview)):
        return ValueKind.SEQUENCE
    cls = type(value)
    if cls.__str__ is not object.__str__ or cls.__repr__ is not object.__repr__:
        return ValueKind.DISPLAYABLE
    return ValueKind.OPAQUE


def short_type_name(cls: type) -> str:
    """Simple name of a class, e.g. ``OrderedDict``."""
    return cls.__name__


def type_name(cls: type) -> str:
    """Qualified name of a class; builtins are not prefixed with their module."""
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def identity_tag(value: Any) -> str:
    """Identity-derived tag: equal but distinct objects get different tags."""
    return format(id(value), "x")


def system_id(value: Any) -> str:
    """``<short type name>@<identity tag>``, or ``"null"`` for None."""
    if value is None:
        return "null"
    return f"{short_type_name(type(value))}@{identity_tag(value)}"


def ellipsis(text: str) -> str:
    width = get_settings().max_text_width
    if len(text) <= width:
        return text
    return text[:width] + ELLIPSIS


def _render_text(text: str) -> str:
    if not text.strip():
        return ellipsis(f'"{text}"')
    return ellipsis(text)


def _implode(items: list[str], truncated: bool) -> str:
    if truncated:
        items.append(ELLIPSIS)
    return ", ".join(items)


def _render_sequence(value: Collection) -> str:
    limit = get_settings().max_elements
    head = list(islice(iter(value), limit + 1))
    truncated = len(head) > limit
    items = [_render(e, nested=True) for e in head[:limit]]
    return f"{system_id(value)}: [{_implode(items, truncated)}]"


def _render_mapping(value: Mapping) -> str:
    limit = get_settings().max_elements
    head = list(islice(iter(value.items()), limit + 1))
    truncated = len(head) > limit
    items = [f"{_render(k, nested=True)}: {_render(v, nested=True)}" for k, v in head[:limit]]
    return f"{system_id(value)}: {{{_implode(items, truncated)}}}"


def _render(value: Any, nested: bool) -> str:
    kind = classify(value)
    match kind:
        case ValueKind.NULL:
            return "null"
        case ValueKind.BOOLEAN | ValueKind.NUMBER | ValueKind.ENUMERATOR:
            return str(value)
        case ValueKind.TEXT:
            return _render_text(value)
        case ValueKind.TYPE:
            return type_name(value)
        case ValueKind.SEQUENCE | ValueKind.MAPPING if nested:
            return system_id(value)
        case ValueKind.SEQUENCE:
            return _render_sequence(value)
        case ValueKind.MAPPING:
            return _render_mapping(value)
        case ValueKind.DISPLAYABLE:
            return ellipsis(str(value))
        case _:
            return system_id(value)


def render_value(value: Any) -> str:
    """Render ``value`` for display in an error message.

    Never raises: if the value's own ``__str__``/``__iter__`` fails, the
    value is shown as ``<type>@<identity tag>`` instead.
    """
    try:
        return _render(value, nested=False)
    except Exception:
        logger.debug("Could not stringify %s, falling back to identity", type(value), exc_info=True)
        return system_id(value)
