"""Rewrites bracketed page references into links."""

import re

from markupsafe import Markup

from tinywiki.core.routing import Operation, operation_path

# Pattern for page links: [PageName]
PAGE_LINK_PATTERN = re.compile(r"\[([a-zA-Z0-9]+)\]")


def _as_text(body: bytes | str) -> str:
    if isinstance(body, bytes):
        return body.decode("utf-8", errors="replace")
    return body


def _link(m: re.Match) -> str:
    title = m.group(1)
    return f'<a href="{operation_path(Operation.VIEW, title)}">{title}</a>'


def render_links(body: bytes | str) -> Markup:
    """Render a page body with ``[Title]`` references turned into links.

    Nothing else in the body is escaped: the result is marked as safe
    HTML so templates embed it verbatim. Whether the referenced pages
    exist is not checked.

    Args:
        body: Raw page body.

    Returns:
        HTML fragment.
    """
    return Markup(PAGE_LINK_PATTERN.sub(_link, _as_text(body)))
