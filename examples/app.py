"""
Example leaderboard app using hiccpy with FastAPI.

Run with: uvicorn examples.app:app --reload
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from fastapi import FastAPI
from pydantic import BaseModel

from hiccpy import RenderConfig, Renderer, default_surface, fragment
from hiccpy.elements import (
    a,
    body,
    button,
    div,
    footer,
    h1,
    h2,
    head,
    header,
    html_el,
    li,
    link,
    main,
    meta_,
    nav,
    p,
    section,
    span,
    title,
    ul,
)
from hiccpy.fastapi import EventPayload, add_event_routes, render_html

logging.basicConfig(level=logging.INFO)

renderer = Renderer(RenderConfig.load(Path(__file__).parent.parent))
app = FastAPI()


# Models


class User(BaseModel):
    id: int
    username: str
    points: int = 0
    is_admin: bool = False


@dataclass
class Stats:
    total_commits: int
    participants: int
    days_remaining: int


USERS = [
    User(id=2, username="alice", points=1200),
    User(id=1, username="bob", points=420, is_admin=True),
    User(id=3, username="charlie", points=380),
]


# Components


class SafeDoctype:
    def __html__(self):
        return "<!DOCTYPE html>"


def Layout(page_title, children):
    return fragment(
        SafeDoctype(),
        html_el(
            head(
                meta_(charset="utf-8"),
                title(page_title),
                link(rel="stylesheet", href="https://unpkg.com/@picocss/pico@2/css/pico.min.css"),
            ),
            body(
                header(nav(ul(li(a("Leaderboard", href="/"))), class_="container")),
                main(*children, class_="container"),
                footer(p("Made with hiccpy"), class_="container"),
            ),
            lang="en",
        ),
    )


def StatCard(label, value):
    return ["article.stat", ["h3", f"{value:,}"], ["small", label]]


def UserRow(user, rank):
    return [
        "li",
        {"class": ["user", user.is_admin and "admin"]},
        span(f"#{rank} "),
        ["strong", user.username],
        span(f" {user.points} pts", style={"fontWeight": "bold"}),
    ]


def Counter(count):
    return div(
        span(count, id="count"),
        button("+1", type="button", on_click=increment),
        id="counter",
    )


# State and handlers

clicks = {"value": 0}


def increment(event: EventPayload):
    clicks["value"] += event.detail.get("step", 1)
    return span(clicks["value"], id="count")


# Routes


@app.get("/")
async def index():
    stats = Stats(total_commits=12_847, participants=342, days_remaining=18)
    page = [
        Layout,
        {"page_title": "Leaderboard"},
        h1("Leaderboard"),
        section(
            [StatCard, {"label": "Commits", "value": stats.total_commits}],
            [StatCard, {"label": "Participants", "value": stats.participants}],
            [StatCard, {"label": "Days left", "value": stats.days_remaining}],
            class_="grid",
        ),
        h2("Top users"),
        ["ol", [[UserRow, {"user": user, "rank": rank}] for rank, user in enumerate(USERS, 1)]],
        h2("Counter"),
        ["div#counter-root", {"dangerouslySetInnerHTML": counter_markup()}],
    ]
    return render_html(page, renderer=renderer)


def counter_markup() -> str:
    result = renderer.render([Counter, {"count": clicks["value"]}])
    default_surface.mount("counter")
    result.attach("counter")
    return result.markup


add_event_routes(app, renderer=renderer)
