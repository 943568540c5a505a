"""FastAPI integration: HTML responses and bound event dispatch."""

from __future__ import annotations

import logging
from inspect import isawaitable
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from .core import FRAGMENT
from .errors import ContainerNotFound
from .renderer import Renderer, default_renderer
from .surface import Surface, default_surface

logger = logging.getLogger(__name__)

EVENTS_PREFIX = "/__hiccpy"


class EventPayload(BaseModel):
    """Body posted when a bound element fires an event."""

    detail: dict[str, Any] = {}


def render_html(
    *elements: Any, status_code: int = 200, renderer: Renderer | None = None
) -> HTMLResponse:
    """Render elements into an HTMLResponse."""
    active = default_renderer if renderer is None else renderer
    return HTMLResponse(active.html(*elements), status_code=status_code)


def add_event_routes(
    app: FastAPI,
    surface: Surface | None = None,
    *,
    prefix: str = EVENTS_PREFIX,
    renderer: Renderer | None = None,
) -> None:
    """
    Expose attached handlers over HTTP.

    ``POST {prefix}/{container}/{element_id}/{event}`` fires the handlers
    bound to that element and responds with whatever they return, rendered.

    Usage:
        result = render(["button", {"on:click": increment}, "+1"])
        result.attach("counter")
        add_event_routes(app)
    """
    target = default_surface if surface is None else surface
    active = default_renderer if renderer is None else renderer

    @app.post(f"{prefix}/{{container}}/{{element_id}}/{{event}}", response_class=HTMLResponse)
    async def dispatch_event(
        container: str, element_id: str, event: str, payload: EventPayload | None = None
    ) -> HTMLResponse:
        try:
            found = target.resolve(container)
        except ContainerNotFound as exc:
            raise HTTPException(status_code=404, detail=exc.message)

        if not found.handlers(element_id, event):
            raise HTTPException(
                status_code=404, detail=f"No '{event}' handler bound to {element_id}"
            )

        logger.info(f"Dispatching '{event}' to {element_id} in '{found.key}'")
        results = []
        for result in found.dispatch(element_id, event, payload or EventPayload()):
            if isawaitable(result):
                result = await result
            if result is not None:
                results.append(result)
        return HTMLResponse(active.html([FRAGMENT, *results]))
