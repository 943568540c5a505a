"""
hiccpy - HTML from nested Python lists

Elements are plain data: ``["div#main.card", {"title": "x"}, "Hello"]``.
Tags, fragments, function components and lists of children nest freely and
render to escaped HTML, optionally with event handlers recorded for
attaching to a surface.
"""

from .core import (
    CLASS,
    DANGEROUS_HTML,
    DATA_ID,
    ERROR_ATTR_NULL,
    ERROR_ATTR_UNDEFINED,
    ERROR_NULL,
    ERROR_UNDEFINED,
    EVENT_PREFIX,
    FRAGMENT,
    ID,
    ID_PREFIX,
    MAX_DEPTH,
    MAX_TAG_CACHE_SIZE,
    STYLE,
    UNDEFINED,
    VOID_ELEMENTS,
    Renderable,
    SafeHTML,
    attr,
    escape,
    raw,
)
from .errors import (
    ContainerNotFound,
    HiccpyError,
    InvalidTagFormat,
    InvalidTagName,
    MaxDepthExceeded,
    MultipleIds,
    NullValueError,
    SelectorError,
    UndefinedValueError,
)
from .attributes import normalize_class, normalize_style
from .selectors import TagCache, parse_tag, tag_cache
from .config import RenderConfig
from .surface import Container, Surface, cleanup, default_surface
from .bindings import Binding, RenderResult
from .renderer import Renderer, default_renderer, html, render
from .elements import fragment

__version__ = "0.1.0"
__all__ = [
    # Rendering
    "html",
    "render",
    "fragment",
    "cleanup",
    "Renderer",
    "RenderConfig",
    "RenderResult",
    "Binding",
    "default_renderer",
    # Safe markup
    "SafeHTML",
    "Renderable",
    "raw",
    "attr",
    "escape",
    # Selectors and attributes
    "parse_tag",
    "TagCache",
    "tag_cache",
    "normalize_style",
    "normalize_class",
    # Surface
    "Surface",
    "Container",
    "default_surface",
    # Errors
    "HiccpyError",
    "NullValueError",
    "UndefinedValueError",
    "MaxDepthExceeded",
    "SelectorError",
    "InvalidTagName",
    "InvalidTagFormat",
    "MultipleIds",
    "ContainerNotFound",
    # Constants
    "FRAGMENT",
    "EVENT_PREFIX",
    "CLASS",
    "ID",
    "STYLE",
    "DANGEROUS_HTML",
    "DATA_ID",
    "ID_PREFIX",
    "VOID_ELEMENTS",
    "MAX_DEPTH",
    "MAX_TAG_CACHE_SIZE",
    "UNDEFINED",
    "ERROR_NULL",
    "ERROR_UNDEFINED",
    "ERROR_ATTR_NULL",
    "ERROR_ATTR_UNDEFINED",
]
