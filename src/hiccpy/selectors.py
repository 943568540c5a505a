"""
Tag selector parsing.

A selector is a tag name followed by ``#id`` and ``.class`` segments in any
order, e.g. ``div.card#main.active``. Parsed selectors are memoized in a
bounded, insertion-ordered cache.
"""

from __future__ import annotations

import logging
import re
import threading
from collections import OrderedDict

from .core import CLASS, ID, ID_DELIMITER, MAX_TAG_CACHE_SIZE
from .errors import InvalidTagFormat, InvalidTagName, MultipleIds

logger = logging.getLogger(__name__)

TAG_NAME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9-]*$")
WHITESPACE_PATTERN = re.compile(r"\s")
TAG_PREFIX_PATTERN = re.compile(r"[^#.]*")
SEGMENT_PATTERN = re.compile(r"([#.])([^#.]*)")

ParsedTag = tuple[str, dict[str, str]]


def validate_tag_name(tag_name: str) -> None:
    """Reject anything that is not a plain tag identifier."""
    if not TAG_NAME_PATTERN.match(tag_name):
        raise InvalidTagName(f'Invalid tag name: "{tag_name}"', context={"tag_name": tag_name})


def _parse(selector: str) -> ParsedTag:
    if WHITESPACE_PATTERN.search(selector):
        raise InvalidTagFormat(
            f'Invalid tag format - spaces not allowed: "{selector}"', context={"tag": selector}
        )

    # Always matches, possibly empty; an empty name fails validation
    tag_name = TAG_PREFIX_PATTERN.match(selector).group()
    validate_tag_name(tag_name)

    element_id: str | None = None
    classes: list[str] = []
    for delimiter, value in SEGMENT_PATTERN.findall(selector, len(tag_name)):
        if delimiter == ID_DELIMITER and element_id is not None:
            raise MultipleIds(f'Multiple IDs not allowed: "{selector}"', context={"tag": selector})
        if not value:
            raise InvalidTagFormat(f'Invalid tag format: "{selector}"', context={"tag": selector})
        if delimiter == ID_DELIMITER:
            element_id = value
        else:
            classes.append(value)

    attrs: dict[str, str] = {}
    if element_id is not None:
        attrs[ID] = element_id
    if classes:
        attrs[CLASS] = " ".join(classes)
    return tag_name, attrs


class TagCache:
    """
    Bounded cache of parsed selectors.

    Eviction is oldest-inserted first. Lookups hand back a fresh attribute
    dict so callers may mutate it freely.
    """

    def __init__(self, maxsize: int = MAX_TAG_CACHE_SIZE):
        self.maxsize = maxsize
        self._entries: OrderedDict[str, ParsedTag] = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, selector: object) -> bool:
        return selector in self._entries

    def get(self, selector: str) -> ParsedTag | None:
        with self._lock:
            cached = self._entries.get(selector)
        if cached is None:
            return None
        return cached[0], dict(cached[1])

    def set(self, selector: str, tag_name: str, attrs: dict[str, str]) -> None:
        with self._lock:
            if selector not in self._entries:
                while len(self._entries) >= self.maxsize:
                    evicted, _ = self._entries.popitem(last=False)
                    logger.debug(f"evicted selector {evicted!r} from tag cache")
            self._entries[selector] = (tag_name, dict(attrs))

    def parse(self, selector: str) -> ParsedTag:
        """Parse ``selector``, serving repeats from the cache."""
        cached = self.get(selector)
        if cached is not None:
            return cached
        tag_name, attrs = _parse(selector)
        self.set(selector, tag_name, attrs)
        return tag_name, dict(attrs)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def cache_info(self) -> dict[str, int]:
        return {"size": len(self._entries), "maxsize": self.maxsize}


tag_cache = TagCache()


def parse_tag(selector: str, cache: TagCache | None = None) -> ParsedTag:
    """Split a selector into ``(tag_name, {"id": ..., "class": ...})``."""
    return (tag_cache if cache is None else cache).parse(selector)
