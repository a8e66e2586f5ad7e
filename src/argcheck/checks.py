"""Built-in tests with predefined error messages.

Every test here is a plain module-level function. Pass the function itself
(not a call to it) to :meth:`Check.is_ <argcheck.check.Check.is_>`::

    Check.that(count, "count").is_(not_null).is_(gte, 0)

The messages are registered against these exact function objects. A lambda
doing the same thing as :func:`gte` is a different test and gets the
generic "Invalid value" message.

None of the tests except :func:`null`, :func:`not_null`, :func:`empty`,
:func:`not_empty`, :func:`blank`, :func:`not_blank` and :func:`null_or`
guard against None. Chain a :func:`not_null` check first.
"""

import os
from collections.abc import Collection, Mapping
from pathlib import Path
from typing import Any

from argcheck.messages.args import MsgArgs
from argcheck.messages.formatters import (
    Formatter,
    format_negative_predicate,
    format_negative_relation,
    format_predicate,
    format_relation,
)
from argcheck.messages.registry import CatalogEntry
from argcheck.messages.render import render_value, system_id, type_name


def _size(value: Any) -> int:
    return len(value)


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, bytes, Collection)):
        return len(value) == 0
    return False


def _is_deep_not_empty(value: Any) -> bool:
    if _is_empty(value):
        return False
    if isinstance(value, (str, bytes)):
        return True
    if isinstance(value, Mapping):
        return all(_is_deep_not_empty(v) for v in value.values())
    if isinstance(value, Collection):
        return all(_is_deep_not_empty(e) for e in value)
    return True


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def null(value: Any) -> bool:
    return value is None


def not_null(value: Any) -> bool:
    return value is not None


def yes(value: Any) -> bool:
    return value is True


def no(value: Any) -> bool:
    return value is False


def empty(value: Any) -> bool:
    """None, or a string or collection of length zero."""
    return _is_empty(value)


def not_empty(value: Any) -> bool:
    return not _is_empty(value)


def none_null(value: Any) -> bool:
    """Not None, and (for collections) no element or mapping value is None."""
    if value is None:
        return False
    if isinstance(value, Mapping):
        return all(v is not None for v in value.values())
    if isinstance(value, Collection) and not isinstance(value, (str, bytes)):
        return all(e is not None for e in value)
    return True


def deep_not_empty(value: Any) -> bool:
    """Not empty, and recursively no empty elements or mapping values."""
    return _is_deep_not_empty(value)


def blank(value: str | None) -> bool:
    return value is None or not value.strip()


def not_blank(value: str | None) -> bool:
    return value is not None and bool(value.strip())


def integer(value: str) -> bool:
    """A string parsable by :class:`int`."""
    try:
        int(value)
    except ValueError:
        return False
    return True


def even(value: int) -> bool:
    return value % 2 == 0


def odd(value: int) -> bool:
    return value % 2 != 0


def positive(value: int | float) -> bool:
    return value > 0


def negative(value: int | float) -> bool:
    return value < 0


def zero(value: int | float) -> bool:
    return value == 0


def file_exists(path: str | os.PathLike) -> bool:
    """A regular file exists at ``path``."""
    return Path(path).is_file()


def directory(path: str | os.PathLike) -> bool:
    return Path(path).is_dir()


def readable(path: str | os.PathLike) -> bool:
    return Path(path).exists() and os.access(path, os.R_OK)


def writable(path: str | os.PathLike) -> bool:
    return Path(path).exists() and os.access(path, os.W_OK)


# ---------------------------------------------------------------------------
# Relations
# ---------------------------------------------------------------------------


def equal_to(value: Any, other: Any) -> bool:
    return value == other


def not_equal_to(value: Any, other: Any) -> bool:
    return value != other


def same_as(value: Any, other: Any) -> bool:
    return value is other


def not_same_as(value: Any, other: Any) -> bool:
    return value is not other


def instance_of(value: Any, cls: type | tuple[type, ...]) -> bool:
    return isinstance(value, cls)


def null_or(value: Any, other: Any) -> bool:
    """None, or equal to ``other``."""
    return value is None or value == other


def contains(collection: Collection, element: Any) -> bool:
    return element in collection


def not_contains(collection: Collection, element: Any) -> bool:
    return element not in collection


def in_(element: Any, collection: Collection) -> bool:
    return element in collection


def not_in(element: Any, collection: Collection) -> bool:
    return element not in collection


def has_key(mapping: Mapping, key: Any) -> bool:
    return key in mapping


def key_in(key: Any, mapping: Mapping) -> bool:
    return key in mapping


def has_value(mapping: Mapping, value: Any) -> bool:
    return value in mapping.values()


def value_in(value: Any, mapping: Mapping) -> bool:
    return value in mapping.values()


def superset_of(collection: Collection, other: Collection) -> bool:
    return all(e in collection for e in other)


def subset_of(collection: Collection, other: Collection) -> bool:
    return all(e in other for e in collection)


def starts_with(value: str, prefix: str) -> bool:
    return value.startswith(prefix)


def ends_with(value: str, suffix: str) -> bool:
    return value.endswith(suffix)


def has_substr(value: str, substr: str) -> bool:
    return substr in value


def substring_of(value: str, other: str) -> bool:
    return value in other


def equals_ignore_case(value: str, other: str) -> bool:
    return value.casefold() == other.casefold()


def eq(value: int | float, other: int | float) -> bool:
    return value == other


def ne(value: int | float, other: int | float) -> bool:
    return value != other


def gt(value: int | float, other: int | float) -> bool:
    return value > other


def gte(value: int | float, other: int | float) -> bool:
    return value >= other


def lt(value: int | float, other: int | float) -> bool:
    return value < other


def lte(value: int | float, other: int | float) -> bool:
    return value <= other


def multiple_of(value: int, other: int) -> bool:
    return value % other == 0


def size_equals(value: Collection, size: int) -> bool:
    return _size(value) == size


def size_gt(value: Collection, size: int) -> bool:
    return _size(value) > size


def size_gte(value: Collection, size: int) -> bool:
    return _size(value) >= size


def size_lt(value: Collection, size: int) -> bool:
    return _size(value) < size


def size_lte(value: Collection, size: int) -> bool:
    return _size(value) <= size


def in_range(value: int | float, bounds: tuple[Any, Any]) -> bool:
    """``bounds[0] <= value < bounds[1]``."""
    low, high = bounds
    return low <= value < high


def in_range_closed(value: int | float, bounds: tuple[Any, Any]) -> bool:
    """``bounds[0] <= value <= bounds[1]``."""
    low, high = bounds
    return low <= value <= high


def index_of(index: int, sequence: Collection) -> bool:
    """A valid index into ``sequence`` (negative indices are not)."""
    return 0 <= index < len(sequence)


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------


def _msg_yes(args: MsgArgs) -> str:
    return f"{args.name()} must be true (was {render_value(args.subject)})"


def _msg_no(args: MsgArgs) -> str:
    return f"{args.name()} must be false (was {render_value(args.subject)})"


def _msg_none_null(args: MsgArgs) -> str:
    if args.negated:
        return f"{args.name()} must be null or contain one or more null values (was {render_value(args.subject)})"
    return f"{args.name()} must not be null or contain null values (was {render_value(args.subject)})"


def _msg_deep_not_empty(args: MsgArgs) -> str:
    if args.negated:
        return f"{args.name()} must be empty or contain one or more empty values (was {render_value(args.subject)})"
    return f"{args.type_and_name()} must not be empty or contain empty values (was {render_value(args.subject)})"


def _msg_file_exists(args: MsgArgs) -> str:
    path = Path(args.subject)
    if args.negated:
        return f"File already exists: {path.absolute()}"
    if path.is_dir():
        return f"{args.name()} must not be a directory (was {path})"
    return f"No such file: {path.absolute()}"


def _msg_directory(args: MsgArgs) -> str:
    path = Path(args.subject)
    if args.negated:
        return f"Directory already exists: {path.absolute()}"
    if path.is_file():
        return f"{args.name()} must not be a file (was {path})"
    return f"No such directory: {path.absolute()}"


def _msg_access(mode: str) -> Formatter:
    def formatter(args: MsgArgs) -> str:
        path = Path(args.subject)
        if not path.exists():
            return f"No such file/directory: {path.absolute()}"
        kind = "Directory" if path.is_dir() else "File"
        return f"{kind} must{args.not_()} be {mode}: {path.absolute()}"

    return formatter


def _msg_same_as(args: MsgArgs) -> str:
    return f"{args.name()} must be {system_id(args.obj)} (was {system_id(args.subject)})"


def _msg_not_same_as(args: MsgArgs) -> str:
    return f"{args.name()} must not be {system_id(args.obj)}"


def _msg_instance_of(args: MsgArgs) -> str:
    classes = args.obj if isinstance(args.obj, tuple) else (args.obj,)
    expected = " or ".join(type_name(c) for c in classes)
    if args.negated:
        return f"{args.name()} must not be instance of {expected} (was {render_value(args.subject)})"
    return f"{args.name()} must be instance of {expected} (was {type_name(type(args.subject))})"


def _msg_size(phrase: str) -> Formatter:
    def formatter(args: MsgArgs) -> str:
        return f"len({args.name()}) must{args.not_()} {phrase} {args.obj} (was {_size(args.subject)})"

    return formatter


def _msg_size_not_equals(args: MsgArgs) -> str:
    return f"len({args.name()}) must{args.not_not()} be equal to {args.obj}"


def _msg_size_equals(args: MsgArgs) -> str:
    if args.negated:
        return _msg_size_not_equals(args.flip())
    return _msg_size("be equal to")(args)


def _msg_range(low_op: str, high_op: str, out_low: str, out_high: str) -> Formatter:
    def formatter(args: MsgArgs) -> str:
        low, high = args.obj
        if args.negated:
            return f"{args.name()} must be {out_low} {low} or {out_high} {high} (was {render_value(args.subject)})"
        return f"{args.name()} must be {low_op} {low} and {high_op} {high} (was {render_value(args.subject)})"

    return formatter


def _msg_index_of(args: MsgArgs) -> str:
    size = len(args.obj)
    if args.negated:
        return f"{args.name()} must be < 0 or >= {size} (was {args.subject})"
    return f"{args.name()} must be >= 0 and < {size} (was {args.subject})"


def _entry(test: Any, formatter: Formatter) -> CatalogEntry:
    return CatalogEntry(test=test, name=test.__name__, formatter=formatter)


CATALOG: tuple[CatalogEntry, ...] = (
    # null and empty
    _entry(null, format_predicate("be null", True)),
    _entry(not_null, format_negative_predicate("be null")),
    _entry(yes, _msg_yes),
    _entry(no, _msg_no),
    _entry(empty, format_predicate("be empty", True)),
    _entry(not_empty, format_negative_predicate("be null or empty", True)),
    _entry(none_null, _msg_none_null),
    _entry(deep_not_empty, _msg_deep_not_empty),
    # strings
    _entry(blank, format_predicate("be null or blank", True)),
    _entry(not_blank, format_negative_predicate("be null or blank", True)),
    _entry(integer, format_predicate("be an integer", True)),
    # numbers
    _entry(even, format_predicate("be even", True)),
    _entry(odd, format_predicate("be odd", True)),
    _entry(positive, format_predicate("be positive", True)),
    _entry(negative, format_predicate("be negative", True)),
    _entry(zero, format_predicate("be 0", True, False)),
    # files
    _entry(file_exists, _msg_file_exists),
    _entry(directory, _msg_directory),
    _entry(readable, _msg_access("readable")),
    _entry(writable, _msg_access("writable")),
    # objects
    _entry(equal_to, format_relation("be equal to")),
    _entry(not_equal_to, format_negative_relation("be equal to", False)),
    _entry(same_as, _msg_same_as),
    _entry(not_same_as, _msg_not_same_as),
    _entry(instance_of, _msg_instance_of),
    _entry(null_or, format_relation("be null or")),
    # collections and mappings
    _entry(contains, format_relation("contain", False)),
    _entry(not_contains, format_negative_relation("contain", False)),
    _entry(in_, format_relation("be element of")),
    _entry(not_in, format_negative_relation("be element of")),
    _entry(has_key, format_relation("contain key", False)),
    _entry(key_in, format_relation("be key in")),
    _entry(has_value, format_relation("contain value", False)),
    _entry(value_in, format_relation("be value in")),
    _entry(superset_of, format_relation("be superset of")),
    _entry(subset_of, format_relation("be subset of")),
    # strings
    _entry(starts_with, format_relation("start with")),
    _entry(ends_with, format_relation("end with")),
    _entry(has_substr, format_relation("contain")),
    _entry(substring_of, format_relation("be substring of")),
    _entry(equals_ignore_case, format_relation("be equal ignoring case to")),
    # numbers
    _entry(eq, format_relation("be equal to")),
    _entry(ne, format_negative_relation("be equal to", False)),
    _entry(gt, format_relation("be >")),
    _entry(gte, format_relation("be >=")),
    _entry(lt, format_relation("be <")),
    _entry(lte, format_relation("be <=")),
    _entry(multiple_of, format_relation("be multiple of")),
    _entry(in_range, _msg_range(">=", "<", "<", ">=")),
    _entry(in_range_closed, _msg_range(">=", "<=", "<", ">")),
    _entry(index_of, _msg_index_of),
    # sizes
    _entry(size_equals, _msg_size_equals),
    _entry(size_gt, _msg_size("be >")),
    _entry(size_gte, _msg_size("be >=")),
    _entry(size_lt, _msg_size("be <")),
    _entry(size_lte, _msg_size("be <=")),
)

COMPLEMENTS: tuple[tuple[Any, Any], ...] = (
    (null, not_null),
    (yes, no),
    (empty, not_empty),
    (blank, not_blank),
    (even, odd),
    (equal_to, not_equal_to),
    (same_as, not_same_as),
    (contains, not_contains),
    (in_, not_in),
    (eq, ne),
    (gt, lte),
    (gte, lt),
    (size_gt, size_lte),
    (size_gte, size_lt),
)
