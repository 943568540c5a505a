"""
Element interpreter.

Renders nested list/tuple literals to HTML:

    html(["ul.menu", [["li", item] for item in items]])
    html([Card, {"title": "Hi"}, ["p", "body"]])
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

from .attributes import prepare_attributes, render_attrs
from .bindings import BindingRecorder, RenderResult
from .config import RenderConfig
from .core import DATA_ID, VOID_ELEMENTS, escape, to_text
from .errors import MaxDepthExceeded
from .nodes import ComponentCall, FragmentNode, Items, Markup, Skip, TagNode, Text, classify
from .selectors import TagCache, tag_cache


def _accepts_children(component: Callable[..., Any]) -> bool:
    try:
        parameters = inspect.signature(component).parameters.values()
    except (TypeError, ValueError):
        return True
    return any(
        param.name == "children" or param.kind is inspect.Parameter.VAR_KEYWORD
        for param in parameters
    )


def _inner_html(value: Any) -> str:
    if hasattr(value, "__html__"):
        return value.__html__()
    return to_text(value)


class Renderer:
    """
    Interprets element trees.

    Each renderer owns its limits and selector cache; the module level
    ``html`` and ``render`` functions share a default instance bound to the
    process-wide cache.
    """

    def __init__(self, config: RenderConfig | None = None, cache: TagCache | None = None):
        self.config = config or RenderConfig()
        self.cache = cache if cache is not None else TagCache(self.config.cache_size)

    def html(self, *elements: Any) -> str:
        """Render elements to an HTML string."""
        buffer: list[str] = []
        self._render_root(elements, buffer, None)
        return "".join(buffer)

    def render(self, *elements: Any) -> RenderResult:
        """Render elements, collecting ``on:<event>`` handlers as bindings."""
        buffer: list[str] = []
        recorder = BindingRecorder(self.config.id_prefix)
        self._render_root(elements, buffer, recorder)
        return RenderResult("".join(buffer), recorder.bindings)

    def _render_root(
        self, elements: tuple[Any, ...], buffer: list[str], recorder: BindingRecorder | None
    ) -> None:
        # html("div", "x") is the same element as html(["div", "x"])
        if len(elements) == 1:
            self._render(elements[0], buffer, recorder, 0)
        else:
            self._render(list(elements), buffer, recorder, 0)

    def _render(
        self, element: Any, buffer: list[str], recorder: BindingRecorder | None, depth: int
    ) -> None:
        if depth > self.config.max_depth:
            raise MaxDepthExceeded(
                f"Maximum nesting depth {self.config.max_depth} exceeded",
                context={"depth": depth, "max_depth": self.config.max_depth},
            )

        match classify(element):
            case Skip():
                return
            case Text(value):
                buffer.append(escape(value))
            case Markup(value):
                buffer.append(value.__html__())
            case Items(items):
                self._render_children(items, buffer, recorder, depth)
            case FragmentNode(children):
                self._render_children(children, buffer, recorder, depth)
            case ComponentCall() as call:
                self._render(self._call_component(call), buffer, recorder, depth + 1)
            case TagNode() as tag:
                self._render_tag(tag, buffer, recorder, depth)

    def _render_children(
        self,
        children: tuple[Any, ...],
        buffer: list[str],
        recorder: BindingRecorder | None,
        depth: int,
    ) -> None:
        for child in children:
            self._render(child, buffer, recorder, depth + 1)

    def _call_component(self, call: ComponentCall) -> Any:
        props = dict(call.props)
        if _accepts_children(call.component):
            props["children"] = call.children
        elif call.children:
            name = getattr(call.component, "__name__", repr(call.component))
            raise TypeError(f"{name}() was given children but takes no 'children' parameter")
        return call.component(**props)

    def _render_tag(
        self, node: TagNode, buffer: list[str], recorder: BindingRecorder | None, depth: int
    ) -> None:
        tag_name, seed = self.cache.parse(node.selector)
        attributes = prepare_attributes(seed, node.attrs)

        if recorder is not None and attributes.events:
            attributes.attrs[DATA_ID] = recorder.record(attributes.events)

        buffer.append(f"<{tag_name}{render_attrs(attributes.attrs)}>")

        # Void tags drop children and inner HTML
        if tag_name in VOID_ELEMENTS:
            return

        if attributes.inner_html:
            buffer.append(_inner_html(attributes.inner_html))
        else:
            self._render_children(node.children, buffer, recorder, depth)

        buffer.append(f"</{tag_name}>")


default_renderer = Renderer(cache=tag_cache)


def html(*elements: Any) -> str:
    """
    Render one or more elements to HTML.

    A single argument is rendered as-is; several are read as one element
    literal, so ``html("p", "x")`` equals ``html(["p", "x"])``.
    """
    return default_renderer.html(*elements)


def render(*elements: Any) -> RenderResult:
    """Render elements and collect event bindings for ``RenderResult.attach``."""
    return default_renderer.render(*elements)
