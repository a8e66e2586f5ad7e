"""Failure message generation: prefab formatters and custom templates."""

from argcheck.messages.args import ABSENT, DEFAULT_ARG_NAME, MsgArgs
from argcheck.messages.formatters import (
    Formatter,
    format_negative_predicate,
    format_negative_relation,
    format_predicate,
    format_relation,
)
from argcheck.messages.pipeline import (
    create_error,
    custom_message,
    prefab_message,
    render_failure_message,
)
from argcheck.messages.registry import CatalogEntry, FormatterRegistry, default_registry
from argcheck.messages.render import ValueKind, classify, render_value
from argcheck.messages.template import format_message, normalize

__all__ = [
    "ABSENT",
    "DEFAULT_ARG_NAME",
    "MsgArgs",
    # Formatters
    "Formatter",
    "format_predicate",
    "format_negative_predicate",
    "format_relation",
    "format_negative_relation",
    # Registry
    "CatalogEntry",
    "FormatterRegistry",
    "default_registry",
    # Pipeline
    "render_failure_message",
    "custom_message",
    "prefab_message",
    "create_error",
    # Rendering and templates
    "ValueKind",
    "classify",
    "render_value",
    "format_message",
    "normalize",
]
