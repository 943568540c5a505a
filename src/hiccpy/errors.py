"""Exceptions raised while rendering element trees."""

from __future__ import annotations

from typing import Any, Literal

ErrorCode = Literal[
    "NULL_VALUE",
    "UNDEFINED_VALUE",
    "MAX_DEPTH_EXCEEDED",
    "INVALID_TAG_NAME",
    "INVALID_TAG_FORMAT",
    "MULTIPLE_IDS",
    "CONTAINER_NOT_FOUND",
]


class HiccpyError(Exception):
    """Base exception for hiccpy operations."""

    code: ErrorCode

    def __init__(self, message: str, *, context: dict[str, Any] | None = None) -> None:
        self.message = message
        self.context = context or {}
        super().__init__(message)


class NullValueError(HiccpyError):
    code = "NULL_VALUE"


class UndefinedValueError(HiccpyError):
    code = "UNDEFINED_VALUE"


class MaxDepthExceeded(HiccpyError):
    code = "MAX_DEPTH_EXCEEDED"


class SelectorError(HiccpyError):
    """A tag selector could not be parsed."""


class InvalidTagName(SelectorError):
    code = "INVALID_TAG_NAME"


class InvalidTagFormat(SelectorError):
    code = "INVALID_TAG_FORMAT"


class MultipleIds(SelectorError):
    code = "MULTIPLE_IDS"


class ContainerNotFound(HiccpyError):
    code = "CONTAINER_NOT_FOUND"


__all__ = [
    "ErrorCode",
    "HiccpyError",
    "NullValueError",
    "UndefinedValueError",
    "MaxDepthExceeded",
    "SelectorError",
    "InvalidTagName",
    "InvalidTagFormat",
    "MultipleIds",
    "ContainerNotFound",
]
