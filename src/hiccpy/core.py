"""
Shared constants, escaping and safe-markup primitives.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from .errors import NullValueError, UndefinedValueError

# Special tags
FRAGMENT = ":<>"

# Attribute names
DANGEROUS_HTML = "dangerouslySetInnerHTML"
CLASS = "class"
ID = "id"
STYLE = "style"

# Event bindings
EVENT_PREFIX = "on:"
DATA_ID = "data-hiccpy-id"
ID_PREFIX = "hiccpy-"

# Selector delimiters
ID_DELIMITER = "#"
CLASS_DELIMITER = "."

# Limits
MAX_DEPTH = 100
MAX_TAG_CACHE_SIZE = 1000

# Error messages
ERROR_NULL = "None values are not allowed. Use False instead."
ERROR_UNDEFINED = "Undefined values are not allowed. Use False instead."
ERROR_ATTR_NULL = 'Attribute "{key}" has a None value. Use False instead.'
ERROR_ATTR_UNDEFINED = 'Attribute "{key}" has an undefined value. Use False instead.'

# HTML5 void elements, plus the legacy command/keygen/menuitem
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "command",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "menuitem",
        "param",
        "source",
        "track",
        "wbr",
    }
)

_ESCAPES = str.maketrans(
    {"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;", "'": "&#39;"}
)


class _Undefined:
    """Marker for a value that was never provided."""

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()


@runtime_checkable
class Renderable(Protocol):
    """Protocol for objects that can render themselves as HTML."""

    def __html__(self) -> str: ...


@dataclass(frozen=True, slots=True)
class SafeHTML:
    """
    Marks content as already escaped/safe.
    Immutable and hashable for use as cache keys.
    """

    content: str

    def __html__(self) -> str:
        return self.content

    def __str__(self) -> str:
        return self.content

    def __bool__(self) -> bool:
        return bool(self.content)

    def __add__(self, other: SafeHTML | str) -> SafeHTML:
        if isinstance(other, SafeHTML):
            return SafeHTML(self.content + other.content)
        return SafeHTML(self.content + escape(other))

    def __radd__(self, other: SafeHTML | str) -> SafeHTML:
        if isinstance(other, SafeHTML):
            return SafeHTML(other.content + self.content)
        return SafeHTML(escape(other) + self.content)


def raw(content: str) -> SafeHTML:
    """Mark a string as safe/pre-escaped HTML. Use with caution."""
    return SafeHTML(content)


def to_text(value: Any) -> str:
    """Convert a leaf or attribute value to its textual form."""
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    return str(value)


def escape(value: Any) -> str:
    """Escape ``& < > " '`` after converting the value to text."""
    return to_text(value).translate(_ESCAPES)


def check_value(value: Any, key: str | None = None) -> None:
    """Raise if ``value`` is None or UNDEFINED.

    ``key`` names the attribute when checking an attribute value.
    """
    if value is None:
        if key is None:
            raise NullValueError(ERROR_NULL, context={"element": value})
        raise NullValueError(ERROR_ATTR_NULL.format(key=key), context={"key": key, "value": value})
    if value is UNDEFINED:
        if key is None:
            raise UndefinedValueError(ERROR_UNDEFINED, context={"element": value})
        raise UndefinedValueError(
            ERROR_ATTR_UNDEFINED.format(key=key), context={"key": key, "value": value}
        )


def attr(name: str, value: Any) -> SafeHTML:
    """
    Build a safe HTML attribute.

    - False: returns empty (attribute omitted)
    - True: returns just the attribute name (boolean attribute)
    - anything else: returns name="escaped_value"
    - None or UNDEFINED: raises
    """
    check_value(value, name)
    if value is False:
        return SafeHTML("")
    if value is True:
        return SafeHTML(name)
    return SafeHTML(f'{name}="{escape(value)}"')
