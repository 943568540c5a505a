"""
Event binding bookkeeping.

While rendering with bindings, every tag carrying ``on:<event>`` handlers gets
a synthetic ``data-hiccpy-id`` marker, and the handlers are recorded against
that id in document order.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from itertools import count
from typing import Any

from .core import ID_PREFIX
from .surface import Container, Surface, default_surface


@dataclass(frozen=True, slots=True)
class Binding:
    """Handlers for one rendered element, keyed by event name."""

    id: str
    events: dict[str, Callable[..., Any]]


class BindingRecorder:
    """Hands out element ids and collects bindings for one render call."""

    def __init__(self, id_prefix: str = ID_PREFIX):
        self.id_prefix = id_prefix
        self.bindings: list[Binding] = []
        self._ids = count(1)

    def next_id(self) -> str:
        return f"{self.id_prefix}{next(self._ids)}"

    def record(self, events: dict[str, Callable[..., Any]]) -> str:
        """Record ``events`` under a fresh id and return the id."""
        binding_id = self.next_id()
        self.bindings.append(Binding(binding_id, dict(events)))
        return binding_id


@dataclass(slots=True)
class RenderResult:
    """Rendered markup plus the handlers to attach to it."""

    markup: str
    bindings: list[Binding] = field(default_factory=list)

    def __html__(self) -> str:
        return self.markup

    def __str__(self) -> str:
        return self.markup

    def attach(self, container: Container | str, surface: Surface | None = None) -> Container:
        """Write the markup into ``container`` and register the bindings."""
        target = default_surface if surface is None else surface
        return target.attach(container, self.markup, self.bindings)
