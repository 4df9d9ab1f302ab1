"""Page operations: edit, save, view and list."""

import logging
from typing import NamedTuple

from markupsafe import Markup

from tinywiki.core.exceptions import PageNotFoundError
from tinywiki.core.links import render_links
from tinywiki.core.models import Page
from tinywiki.core.routing import Operation, operation_path
from tinywiki.core.storage import Storage

logger = logging.getLogger(__name__)

EDIT_TEMPLATE = "edit.html"
VIEW_TEMPLATE = "view.html"
LIST_TEMPLATE = "list.html"


class Render(NamedTuple):
    """Render ``page`` with the named template."""

    template: str
    page: Page
    body_html: Markup | None = None


class Redirect(NamedTuple):
    """Send the client to another path."""

    location: str


class PageController:
    """Orchestrates the page store and the link renderer per operation.

    Storage errors other than a missing page are not handled here; they
    propagate to the caller.
    """

    def __init__(self, storage: Storage):
        self.storage = storage

    async def edit(self, title: str) -> Render:
        """Edit form for an existing page, or a blank one for a new page."""
        try:
            page = await self.storage.load_page(title)
        except PageNotFoundError:
            logger.debug("Editing new page %s", title)
            page = Page(title=title)
        return Render(EDIT_TEMPLATE, page)

    async def save(self, title: str, body: str | bytes) -> Redirect:
        """Store the submitted body and redirect to the page view."""
        if isinstance(body, str):
            body = body.encode("utf-8")
        await self.storage.save_page(Page(title=title, body=body))
        logger.info("Saved page %s", title)
        return Redirect(operation_path(Operation.VIEW, title))

    async def view(self, title: str) -> Render | Redirect:
        """Render a page, or redirect to its edit form if it does not exist."""
        try:
            page = await self.storage.load_page(title)
        except PageNotFoundError:
            logger.debug("Page %s not found, redirecting to edit", title)
            return Redirect(operation_path(Operation.EDIT, title))
        return Render(VIEW_TEMPLATE, page, render_links(page.body))

    async def list_pages(self) -> Render:
        """List all pages."""
        titles = await self.storage.list_titles()
        return Render(LIST_TEMPLATE, Page(index=titles))
