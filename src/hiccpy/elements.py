"""
HTML element factories for pure-Python composition.

Factories return plain element literals, so they mix freely with
hand-written lists:

    from hiccpy.elements import button, div, h1, section

    section(
        h1("Welcome"),
        ["p", "Hello ", name],
        div(
            button("Click me", type="button", on_click=handle_click),
            class_="actions",
        ),
        class_="hero",
        id="main",
    )
"""

from __future__ import annotations

from typing import Any

from .core import EVENT_PREFIX, FRAGMENT


def _attr_name(key: str) -> str:
    """Map a Python keyword to an attribute name."""
    # on_click -> on:click
    if key.startswith("on_"):
        return EVENT_PREFIX + key[3:]
    # class_ -> class, for_ -> for
    if key.endswith("_"):
        key = key[:-1]
    # snake_case -> kebab-case
    return key.replace("_", "-")


def _make_element(tag: str):
    """Factory for creating element functions."""

    def element(*children: Any, **attrs: Any) -> list[Any]:
        return [tag, {_attr_name(key): value for key, value in attrs.items()}, *children]

    element.__name__ = tag
    element.__doc__ = f"Create a <{tag}> element."
    return element


def fragment(*children: Any) -> list[Any]:
    """Group children without a wrapper element."""
    return [FRAGMENT, *children]


# Document structure
html_el = _make_element("html")  # Avoid shadowing hiccpy.html
head = _make_element("head")
body = _make_element("body")
title = _make_element("title")

# Sections
section = _make_element("section")
article = _make_element("article")
aside = _make_element("aside")
header = _make_element("header")
footer = _make_element("footer")
nav = _make_element("nav")
main = _make_element("main")
div = _make_element("div")

# Headings
h1 = _make_element("h1")
h2 = _make_element("h2")
h3 = _make_element("h3")
h4 = _make_element("h4")
h5 = _make_element("h5")
h6 = _make_element("h6")

# Text content
p = _make_element("p")
pre = _make_element("pre")
blockquote = _make_element("blockquote")
ol = _make_element("ol")
ul = _make_element("ul")
li = _make_element("li")
dl = _make_element("dl")
dt = _make_element("dt")
dd = _make_element("dd")

# Inline text
a = _make_element("a")
span = _make_element("span")
strong = _make_element("strong")
em = _make_element("em")
small = _make_element("small")
code = _make_element("code")

# Forms
form = _make_element("form")
label = _make_element("label")
input_ = _make_element("input")
button = _make_element("button")
select = _make_element("select")
option = _make_element("option")
textarea = _make_element("textarea")
fieldset = _make_element("fieldset")
legend = _make_element("legend")

# Tables
table = _make_element("table")
thead = _make_element("thead")
tbody = _make_element("tbody")
tr = _make_element("tr")
th = _make_element("th")
td = _make_element("td")

# Media
img = _make_element("img")
source = _make_element("source")
video = _make_element("video")
audio = _make_element("audio")

# Other
br = _make_element("br")
hr = _make_element("hr")
link = _make_element("link")
meta_ = _make_element("meta")
script = _make_element("script")
style = _make_element("style")
template = _make_element("template")
