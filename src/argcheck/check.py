"""Fluent precondition checks.

Examples
--------
>>> Check.that(count, "count").is_(not_null).is_(gte, 0)
>>> Check.on(KeyError, key, "key").is_(in_, table.keys())
>>> Check.that(name, "name").is_(not_blank, message="${name} is required")

Each test method returns the ``Check`` itself, so tests can be chained. The
first test that fails raises the error produced by the check's error
factory (``ValueError`` unless specified otherwise). Later tests are not
evaluated.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Callable, Sequence
from typing import Any, Generic, NoReturn, TypeVar

from argcheck import checks
from argcheck.errors import InvalidCheckError
from argcheck.getters import property_name
from argcheck.messages.args import ABSENT, DEFAULT_ARG_NAME
from argcheck.messages.pipeline import create_error, render_failure_message
from argcheck.messages.registry import default_registry
from argcheck.messages.render import render_value, short_type_name

logger = logging.getLogger(__name__)

T = TypeVar("T")

ExceptionFactory = Callable[[str], BaseException]

DEFAULT_EXC_FACTORY: ExceptionFactory = ValueError


class Check(Generic[T]):
    """A value under test, plus how to report a failed test.

    Parameters
    ----------
    value
        The value to check.
    arg_name
        Name used for the value in error messages. When omitted, messages
        refer to the value by its type name.
    exc_factory
        Turns a failure message into the exception to raise.
    """

    def __init__(
        self,
        value: T,
        arg_name: str | None = None,
        exc_factory: ExceptionFactory = DEFAULT_EXC_FACTORY,
    ) -> None:
        self._value = value
        self._arg_name = arg_name
        self._exc_factory = exc_factory

    @classmethod
    def that(cls, value: T, name: str | None = None) -> Check[T]:
        return cls(value, name)

    @classmethod
    def that_int(cls, value: Any, name: str | None = None) -> IntCheck:
        """Check an integral value; messages report its type as ``int``."""
        return IntCheck(value, name)

    @classmethod
    def on(cls, exc_factory: ExceptionFactory, value: T, name: str | None = None) -> Check[T]:
        """Like :meth:`that`, but failures raise ``exc_factory(message)``."""
        return cls(value, name, exc_factory)

    @classmethod
    def not_null(
        cls,
        value: T,
        name: str | None = None,
        exc_factory: ExceptionFactory = DEFAULT_EXC_FACTORY,
    ) -> Check[T]:
        """Shortcut for ``Check.on(exc_factory, value, name).is_(not_null)``."""
        return cls(value, name, exc_factory).is_(checks.not_null)

    @property
    def arg_name(self) -> str | None:
        return self._arg_name

    @property
    def declared_type(self) -> type | None:
        return None

    def ok(self, transform: Callable[[T], Any] | None = None) -> Any:
        """Return the value, optionally passed through ``transform``."""
        return self._value if transform is None else transform(self._value)

    def int_value(self) -> int:
        if isinstance(self._value, int) and not isinstance(self._value, bool):
            return self._value
        raise InvalidCheckError(f"Cannot return int value for {self._display_name()} (was {render_value(self._value)})")

    def is_(
        self,
        test: Callable[..., bool],
        target: Any = ABSENT,
        *,
        message: str | None = None,
        msg_args: Sequence[Any] = (),
    ) -> Check[T]:
        """Verify that the value passes ``test``.

        Parameters
        ----------
        test
            A predicate ``f(value)``, or a relation ``f(value, target)`` when
            ``target`` is given.
        target
            The object of the relation.
        message
            Custom message template. See :mod:`argcheck.messages.template`.
        msg_args
            Values for ``${0}``, ``${1}``, ... in ``message``.

        Returns
        -------
        Check
            This check, for chaining.
        """
        if self._apply(test, self._tested_value(), target):
            return self
        self._fail(test, False, self._arg_name, self._value, self.declared_type, target, message, msg_args)

    def is_not(
        self,
        test: Callable[..., bool],
        target: Any = ABSENT,
        *,
        message: str | None = None,
        msg_args: Sequence[Any] = (),
    ) -> Check[T]:
        """Verify that the value does *not* pass ``test``."""
        if not self._apply(test, self._tested_value(), target):
            return self
        self._fail(test, True, self._arg_name, self._value, self.declared_type, target, message, msg_args)

    def has(
        self,
        getter: Callable[[T], Any],
        test: Callable[..., bool],
        target: Any = ABSENT,
        *,
        prop: str | None = None,
        message: str | None = None,
        msg_args: Sequence[Any] = (),
    ) -> Check[T]:
        """Verify that a property of the value passes ``test``.

        ``getter`` extracts the property; ``prop`` names it in messages.
        Without ``prop`` a name is derived from the getter where possible
        (``len``, :func:`operator.attrgetter`, named functions).
        """
        value = getter(self._value)
        if self._apply(test, value, target):
            return self
        name = property_name(self._display_name(), getter, prop)
        self._fail(test, False, name, value, None, target, message, msg_args)

    def not_has(
        self,
        getter: Callable[[T], Any],
        test: Callable[..., bool],
        target: Any = ABSENT,
        *,
        prop: str | None = None,
        message: str | None = None,
        msg_args: Sequence[Any] = (),
    ) -> Check[T]:
        """Verify that a property of the value does *not* pass ``test``."""
        value = getter(self._value)
        if not self._apply(test, value, target):
            return self
        name = property_name(self._display_name(), getter, prop)
        self._fail(test, True, name, value, None, target, message, msg_args)

    def _tested_value(self) -> Any:
        return self._value

    def _display_name(self) -> str:
        if self._arg_name is not None:
            return self._arg_name
        cls = self.declared_type or (None if self._value is None else type(self._value))
        return DEFAULT_ARG_NAME if cls is None else short_type_name(cls)

    @staticmethod
    def _apply(test: Callable[..., bool], value: Any, target: Any) -> bool:
        if target is ABSENT:
            return bool(test(value))
        return bool(test(value, target))

    def _fail(
        self,
        test: Callable[..., bool],
        negated: bool,
        name: str | None,
        value: Any,
        declared_type: type | None,
        target: Any,
        message: str | None,
        msg_args: Sequence[Any],
    ) -> NoReturn:
        msg = render_failure_message(
            test,
            value,
            arg_name=name,
            negated=negated,
            declared_type=declared_type,
            target=target,
            message=message,
            msg_args=msg_args,
        )
        logger.debug("Check %s failed: %s", default_registry().name_of(test), msg)
        raise create_error(self._exc_factory, msg)


class IntCheck(Check[Any]):
    """Check on an integral value.

    Accepts anything :func:`operator.index` accepts except ``bool``. Tests
    receive the plain ``int``; messages show the original value and report
    its type as ``int``.
    """

    def __init__(
        self,
        value: Any,
        arg_name: str | None = None,
        exc_factory: ExceptionFactory = DEFAULT_EXC_FACTORY,
    ) -> None:
        if isinstance(value, bool):
            raise InvalidCheckError.not_applicable("that_int", value)
        try:
            self._int = operator.index(value)
        except TypeError:
            raise InvalidCheckError.not_applicable("that_int", value) from None
        super().__init__(value, arg_name, exc_factory)

    @property
    def declared_type(self) -> type | None:
        return int

    def int_value(self) -> int:
        return self._int

    def _tested_value(self) -> int:
        return self._int


def fail(message: str, *msg_args: Any) -> NoReturn:
    """Raise ``ValueError``; ``message`` is ``str.format``-ed with ``msg_args``."""
    raise DEFAULT_EXC_FACTORY(message.format(*msg_args) if msg_args else message)


def fail_on(exc_factory: ExceptionFactory, message: str = "Invalid argument", *msg_args: Any) -> NoReturn:
    """Raise ``exc_factory(message)``."""
    raise exc_factory(message.format(*msg_args) if msg_args else message)
