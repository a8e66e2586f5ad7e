"""Names for properties checked through :meth:`Check.has <argcheck.check.Check.has>`."""

import operator
from collections.abc import Callable
from typing import Any

DEFAULT_PROPERTY_NAME = "property"


def property_name(arg_name: str, getter: Callable[[Any], Any], explicit: str | None = None) -> str:
    """Derive a display name for ``getter`` applied to the argument.

    Examples
    --------
    >>> property_name("employee", len)
    'len(employee)'
    >>> property_name("employee", operator.attrgetter("age"))
    'employee.age'
    >>> property_name("employee", operator.itemgetter("age"))
    "employee['age']"
    >>> property_name("employee", lambda e: e.age, "age")
    'employee.age'
    """
    if explicit is not None:
        return f"{arg_name}.{explicit}"
    if getter is len:
        return f"len({arg_name})"
    if isinstance(getter, (operator.attrgetter, operator.itemgetter)):
        # both reduce to (cls, (arg, ...))
        getter_args = getter.__reduce__()[1]
        if len(getter_args) != 1:
            return f"{arg_name}.{DEFAULT_PROPERTY_NAME}"
        if isinstance(getter, operator.attrgetter):
            return f"{arg_name}.{getter_args[0]}"
        return f"{arg_name}[{getter_args[0]!r}]"
    name = getattr(getter, "__name__", None)
    if name is None or name == "<lambda>":
        return f"{arg_name}.{DEFAULT_PROPERTY_NAME}"
    return f"{arg_name}.{name}"
