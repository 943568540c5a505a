"""
Element shapes.

Any value can appear in an element position. ``classify`` inspects its
shape once and returns one of the node types below; the renderer dispatches
on the node type only.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias

from .core import FRAGMENT, check_value


@dataclass(frozen=True, slots=True)
class Skip:
    """``False``: renders nothing."""


@dataclass(frozen=True, slots=True)
class Text:
    """Primitive leaf, rendered as escaped text."""

    value: Any


@dataclass(frozen=True, slots=True)
class Markup:
    """Object implementing ``__html__``, rendered verbatim."""

    value: Any


@dataclass(frozen=True, slots=True)
class Items:
    """Implicit list. Each item renders independently, in order."""

    items: tuple[Any, ...]


@dataclass(frozen=True, slots=True)
class FragmentNode:
    """``[":<>", *children]``: children without a wrapping tag."""

    children: tuple[Any, ...]


@dataclass(frozen=True, slots=True)
class ComponentCall:
    """``[fn, props?, *children]``"""

    component: Callable[..., Any]
    props: dict[str, Any]
    children: list[Any]


@dataclass(frozen=True, slots=True)
class TagNode:
    """``[selector, attrs?, *children]``"""

    selector: str
    attrs: Mapping[str, Any] | None
    children: tuple[Any, ...]


Node: TypeAlias = Skip | Text | Markup | Items | FragmentNode | ComponentCall | TagNode

SKIP = Skip()


def _is_selector(value: Any) -> bool:
    return isinstance(value, str) and not hasattr(value, "__html__")


def classify(element: Any) -> Node:
    """Determine the shape of ``element``.

    Raises NullValueError / UndefinedValueError for missing values.
    """
    check_value(element)

    if element is False:
        return SKIP

    if hasattr(element, "__html__"):
        return Markup(element)

    if not isinstance(element, (list, tuple)):
        # Generators and other lazy iterables always flatten
        if isinstance(element, Iterable) and not isinstance(element, (str, bytes, Mapping)):
            return Items(tuple(element))
        return Text(element)

    if not element:
        return Items(())

    first, rest = element[0], element[1:]

    if callable(first):
        if rest and isinstance(rest[0], Mapping):
            return ComponentCall(first, dict(rest[0]), list(rest[1:]))
        return ComponentCall(first, {}, list(rest))

    if not _is_selector(first):
        return Items(tuple(element))

    if first == FRAGMENT:
        return FragmentNode(tuple(rest))

    if rest and isinstance(rest[0], Mapping):
        return TagNode(first, rest[0], tuple(rest[1:]))
    return TagNode(first, None, tuple(rest))
