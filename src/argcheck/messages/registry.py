"""Lookup of prefab message formatters by test identity."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from argcheck.errors import InvalidCheckError
from argcheck.messages.args import MsgArgs
from argcheck.messages.formatters import Formatter
from argcheck.messages.render import render_value, short_type_name

logger = logging.getLogger(__name__)

ERR_INVALID_VALUE = "Invalid value for {}: {}"


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """A built-in test together with its display name and formatter."""

    test: Callable[..., bool]
    name: str
    formatter: Formatter


class FormatterRegistry:
    """Identity-keyed, read-only map from tests to formatters.

    Keys are compared by identity, never by equality: two separately
    created but identical lambdas are different tests, and a test object
    with a custom ``__eq__`` only ever matches itself.

    Formatters are written for the affirmative phrasing. For tests listed
    in ``complements`` the negated case is delegated to the complementary
    test's formatter (``is_not(gt, 3)`` reads as "must be <= 3").

    Parameters
    ----------
    entries
        Catalog of built-in tests.
    complements
        Pairs of tests whose affirmative phrasings are each other's negation.

    Raises
    ------
    InvalidCheckError
        If a test is registered twice, or the complement table names an
        unregistered test, pairs a test with itself, or lists a test in
        more than one pair.
    """

    def __init__(
        self,
        entries: Iterable[CatalogEntry],
        complements: Iterable[tuple[Any, Any]] = (),
    ) -> None:
        raw: dict[int, tuple[Any, Formatter]] = {}
        names: dict[int, tuple[Any, str]] = {}
        for entry in entries:
            key = id(entry.test)
            if key in raw:
                raise InvalidCheckError(f"Duplicate formatter for test {entry.name}")
            raw[key] = (entry.test, entry.formatter)
            names[key] = (entry.test, entry.name)

        partner: dict[int, Any] = {}
        for one, two in complements:
            if one is two:
                raise InvalidCheckError(f"Test {self._describe(one, names)} cannot complement itself")
            for test in (one, two):
                if id(test) not in raw:
                    raise InvalidCheckError(f"Complement {self._describe(test, names)} is not registered")
                if id(test) in partner:
                    raise InvalidCheckError(f"Test {self._describe(test, names)} has more than one complement")
            partner[id(one)] = two
            partner[id(two)] = one

        formatters: dict[int, tuple[Any, Formatter]] = {}
        for key, (test, formatter) in raw.items():
            if key in partner:
                other = partner[key]
                formatter = self._delegating(formatter, other, raw[id(other)][1])
            formatters[key] = (test, formatter)

        self._formatters: Mapping[int, tuple[Any, Formatter]] = MappingProxyType(formatters)
        self._names: Mapping[int, tuple[Any, str]] = MappingProxyType(names)
        self._complements: Mapping[int, Any] = MappingProxyType(partner)
        logger.debug("Registered %d formatters, %d complementary pairs", len(formatters), len(partner) // 2)

    @staticmethod
    def _describe(test: Any, names: Mapping[int, tuple[Any, str]]) -> str:
        hit = names.get(id(test))
        if hit is not None and hit[0] is test:
            return hit[1]
        return getattr(test, "__name__", short_type_name(type(test)))

    @staticmethod
    def _delegating(affirmative: Formatter, other: Any, other_formatter: Formatter) -> Formatter:
        def formatter(args: MsgArgs) -> str:
            if args.negated:
                return other_formatter(args.flip(test=other))
            return affirmative(args)

        return formatter

    def __len__(self) -> int:
        return len(self._formatters)

    def __contains__(self, test: Any) -> bool:
        return self.lookup(test) is not None

    def lookup(self, test: Any) -> Formatter | None:
        hit = self._formatters.get(id(test))
        if hit is None or hit[0] is not test:
            return None
        return hit[1]

    def complement_of(self, test: Any) -> Any | None:
        if self.lookup(test) is None:
            return None
        return self._complements.get(id(test))

    def name_of(self, test: Any) -> str:
        """Display name of ``test`` as used by the ``${test}`` token."""
        return self._describe(test, self._names)

    def format(self, args: MsgArgs) -> str:
        """Produce the message for a failed test, falling back to a generic one."""
        formatter = self.lookup(args.test)
        if formatter is None:
            logger.debug("No formatter registered for %s", self.name_of(args.test))
            return ERR_INVALID_VALUE.format(args.name(), render_value(args.subject))
        return formatter(args)


_lock = threading.Lock()
_default: FormatterRegistry | None = None


def default_registry() -> FormatterRegistry:
    """The registry of all tests in :mod:`argcheck.checks`, built on first use."""
    global _default
    if _default is None:
        with _lock:
            if _default is None:
                from argcheck.checks import CATALOG, COMPLEMENTS

                _default = FormatterRegistry(CATALOG, COMPLEMENTS)
    return _default
