"""Arguments passed to prefab message formatters."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Final

from argcheck.errors import InvalidCheckError
from argcheck.messages.render import short_type_name

DEFAULT_ARG_NAME: Final = "argument"


class _Absent:
    """Marker for "no relation target", which is not the same as a None target."""

    _instance: _Absent | None = None

    def __new__(cls) -> _Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT: Final = _Absent()


@dataclass(frozen=True, slots=True)
class MsgArgs:
    """Everything a formatter needs to describe a failed test.

    Attributes
    ----------
    test
        The test that failed. Only used as a lookup key, never called.
    negated
        Whether the test was applied in its "must not" form
        (``is_not`` / ``not_has``).
    arg_name
        Name of the argument or property, or None if the caller gave none.
    subject
        The value that failed the test.
    declared_type
        Set when the subject went through the integer-specialized path, so
        its type is reported as ``int`` whatever numeric type it arrived as.
    target
        The object of the relation, or :data:`ABSENT` for predicates.
    """

    test: Any
    negated: bool
    arg_name: str | None
    subject: Any
    declared_type: type | None = None
    target: Any = ABSENT

    def __post_init__(self) -> None:
        if self.test is None:
            raise InvalidCheckError("test must not be None")

    @property
    def is_relation(self) -> bool:
        return self.target is not ABSENT

    @property
    def obj(self) -> Any:
        """The relation target, with :data:`ABSENT` mapped to None."""
        return None if self.target is ABSENT else self.target

    def resolved_type(self) -> type | None:
        if self.declared_type is not None:
            return self.declared_type
        if self.subject is not None:
            return type(self.subject)
        return None

    def type_name(self) -> str | None:
        cls = self.resolved_type()
        return None if cls is None else short_type_name(cls)

    def name(self) -> str:
        """Argument name, else the subject's type name, else ``"argument"``."""
        if self.arg_name is not None:
            return self.arg_name
        return self.type_name() or DEFAULT_ARG_NAME

    def type_and_name(self) -> str:
        """``"int size"`` style rendering of type and name."""
        tname = self.type_name()
        if self.arg_name is None:
            return tname or DEFAULT_ARG_NAME
        if tname is None:
            return self.arg_name
        return f"{tname} {self.arg_name}"

    def not_(self) -> str:
        return " not" if self.negated else ""

    def not_not(self) -> str:
        return "" if self.negated else " not"

    def flip(self, test: Any = None) -> MsgArgs:
        """Return a copy with ``negated`` toggled and optionally another test."""
        if test is None:
            return replace(self, negated=not self.negated)
        return replace(self, negated=not self.negated, test=test)
