"""Title validation and request path routing.

Every titled operation is reached through ``/<operation>/<title>``. The
title is later used to build a file name, so the path must match
``TITLE_PATH_PATTERN`` exactly before anything touches the page store.
"""

import re
from enum import Enum
from typing import Callable, NamedTuple

from fastapi import HTTPException, Request, status

# Titles are alphanumeric only: no separators, no dots, no traversal
TITLE_PATTERN = re.compile(r"[a-zA-Z0-9]+")
TITLE_PATH_PATTERN = re.compile(r"/(edit|save|view)/([a-zA-Z0-9]+)")

LIST_PATH = "/"


class Operation(str, Enum):
    EDIT = "edit"
    SAVE = "save"
    VIEW = "view"
    LIST = "list"


class Route(NamedTuple):
    """A resolved request path."""

    operation: Operation
    title: str | None = None


def is_valid_title(title: str) -> bool:
    """Return True if ``title`` is a non-empty alphanumeric page title."""
    return TITLE_PATTERN.fullmatch(title) is not None


def operation_path(operation: Operation, title: str) -> str:
    """Build the request path for a titled operation."""
    return f"/{operation.value}/{title}"


def resolve(path: str) -> Route | None:
    """Resolve a request path to an operation.

    Returns None for anything that is not the listing root or an exact
    ``/<edit|save|view>/<title>`` path.
    """
    if path == LIST_PATH:
        return Route(Operation.LIST)
    m = TITLE_PATH_PATTERN.fullmatch(path)
    if m is None:
        return None
    return Route(Operation(m.group(1)), m.group(2))


def require_title(operation: Operation) -> Callable[[Request], str]:
    """Create a dependency that extracts the title for ``operation``.

    The request path is checked as a whole, so a route parameter that the
    framework accepted (e.g. ``foo-bar``) is still rejected with 404.
    """

    def dependency(request: Request) -> str:
        route = resolve(request.scope["path"])
        if route is None or route.operation is not operation:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return route.title

    return dependency
