"""
Attribute normalization.

Explicit attribute mappings are merged over the selector seed, then split
into renderable attributes, event handlers and raw inner HTML so nothing
downstream has to look at key prefixes again.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .core import CLASS, DANGEROUS_HTML, EVENT_PREFIX, STYLE, attr, check_value, to_text

CAMEL_CASE_PATTERN = re.compile(r"([A-Z])")


def _css_property(key: str) -> str:
    """fontSize -> font-size, WebkitTransform -> -webkit-transform"""
    return CAMEL_CASE_PATTERN.sub(r"-\1", str(key)).lower()


def normalize_style(style: Any) -> str:
    """Convert a style string or mapping to a CSS declaration string."""
    if isinstance(style, str):
        return style
    if isinstance(style, Mapping):
        return "; ".join(f"{_css_property(key)}: {to_text(value)}" for key, value in style.items())
    return ""


def normalize_class(class_name: Any) -> str:
    """Convert a class string or sequence to a space separated class list."""
    if isinstance(class_name, str):
        return class_name
    if isinstance(class_name, (list, tuple)):
        return " ".join(to_text(name) for name in class_name if name)
    return ""


@dataclass(slots=True)
class AttributeSet:
    """Attributes of one tag, split by how they are emitted."""

    attrs: dict[str, Any]
    events: dict[str, Callable[..., Any]] = field(default_factory=dict)
    inner_html: Any = None


def prepare_attributes(seed: dict[str, Any], explicit: Mapping[str, Any] | None) -> AttributeSet:
    """Merge ``explicit`` over the selector ``seed``.

    Explicit keys replace seed keys outright (an explicit ``class`` does not
    append to shorthand classes). Non-callable event values are dropped.
    """
    attrs = dict(seed)
    events: dict[str, Callable[..., Any]] = {}

    if explicit is not None:
        for key, value in explicit.items():
            check_value(value, key)
            if isinstance(key, str) and key.startswith(EVENT_PREFIX):
                if callable(value):
                    events[key[len(EVENT_PREFIX) :]] = value
                continue
            attrs[key] = value

        if STYLE in explicit:
            attrs[STYLE] = normalize_style(attrs[STYLE])
        if CLASS in explicit:
            attrs[CLASS] = normalize_class(attrs[CLASS])

    inner_html = attrs.pop(DANGEROUS_HTML, None)
    return AttributeSet(attrs=attrs, events=events, inner_html=inner_html)


def render_attrs(attrs: Mapping[str, Any]) -> str:
    """Render attributes in mapping order, each with a leading space."""
    parts = []
    for key, value in attrs.items():
        result = attr(str(key), value)
        if result.content:
            parts.append(f" {result.content}")
    return "".join(parts)
