"""
In-memory presentation surface.

A ``Surface`` holds named ``Container``s. Attaching a render result writes its
markup into a container and registers the recorded handlers against the
elements' synthetic ids, so they can later be fired with ``dispatch``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .core import DATA_ID, escape
from .errors import ContainerNotFound

if TYPE_CHECKING:
    from .bindings import Binding

logger = logging.getLogger(__name__)

Handler = Callable[..., Any]


def _normalize_key(key: str) -> str:
    return key.removeprefix("#")


@dataclass
class Container:
    """A region of the surface holding markup and its listeners."""

    key: str
    content: str = ""
    listeners: dict[str, dict[str, list[Handler]]] = field(default_factory=dict)

    def __html__(self) -> str:
        return self.content

    def has_element(self, element_id: str) -> bool:
        return f'{DATA_ID}="{escape(element_id)}"' in self.content

    def add_listener(self, element_id: str, event: str, handler: Handler) -> None:
        self.listeners.setdefault(element_id, {}).setdefault(event, []).append(handler)

    def handlers(self, element_id: str, event: str) -> list[Handler]:
        return list(self.listeners.get(element_id, {}).get(event, []))

    def dispatch(self, element_id: str, event: str, payload: Any = None) -> list[Any]:
        """Call every handler for ``event`` on ``element_id`` with ``payload``."""
        return [handler(payload) for handler in self.handlers(element_id, event)]

    def clear(self) -> None:
        self.content = ""
        self.listeners.clear()


class Surface:
    """Registry of containers addressed by key (``"app"`` or ``"#app"``)."""

    def __init__(self) -> None:
        self._containers: dict[str, Container] = {}

    @property
    def containers(self) -> dict[str, Container]:
        return self._containers.copy()

    def mount(self, key: str, content: str = "") -> Container:
        """Register a container, or return the existing one."""
        name = _normalize_key(key)
        if name not in self._containers:
            self._containers[name] = Container(key=name, content=content)
        return self._containers[name]

    def unmount(self, key: str) -> None:
        self._containers.pop(_normalize_key(key), None)

    def resolve(self, container: Container | str) -> Container:
        if isinstance(container, Container):
            return container
        found = (
            self._containers.get(_normalize_key(container)) if isinstance(container, str) else None
        )
        if found is None:
            raise ContainerNotFound(
                f'Container "{container}" not found', context={"selector": container}
            )
        return found

    def write(self, container: Container | str, markup: str) -> Container:
        """Replace the container's content, dropping its listeners."""
        target = self.resolve(container)
        target.clear()
        target.content = markup
        return target

    def attach(
        self, container: Container | str, markup: str, bindings: Iterable[Binding] = ()
    ) -> Container:
        target = self.write(container, markup)
        attached = 0
        for binding in bindings:
            if not target.has_element(binding.id):
                logger.warning(f"Element {binding.id} not found in container '{target.key}'")
                continue
            for event, handler in binding.events.items():
                target.add_listener(binding.id, event, handler)
            attached += 1
        logger.info(f"Attached {attached} bindings to container '{target.key}'")
        return target

    def cleanup(self, container: Container | str) -> Container:
        target = self.resolve(container)
        target.clear()
        logger.info(f"Cleared container '{target.key}'")
        return target


default_surface = Surface()


def cleanup(container: Container | str, surface: Surface | None = None) -> Container:
    """Clear a container's content and listeners."""
    target = default_surface if surface is None else surface
    return target.cleanup(container)
