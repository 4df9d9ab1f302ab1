"""Storage abstraction for wiki pages."""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path

from tinywiki.core.exceptions import InvalidTitleError, PageNotFoundError, StorageError
from tinywiki.core.models import Page
from tinywiki.core.routing import is_valid_title

logger = logging.getLogger(__name__)

# Owner read/write only
PAGE_FILE_MODE = 0o600


class Storage(ABC):
    """Abstract base class for page storage."""

    @abstractmethod
    async def load_page(self, title: str) -> Page:
        """Load a page by title. Raises PageNotFoundError if missing."""
        ...

    @abstractmethod
    async def save_page(self, page: Page) -> None:
        """Save a page, replacing any existing body."""
        ...

    @abstractmethod
    async def list_titles(self) -> list[str]:
        """List the titles of all stored pages, in no particular order."""
        ...


class FileStorage(Storage):
    """File-based storage implementation.

    Each page is a single file in a flat directory, named after its title
    plus a fixed suffix: ``HomePage`` is stored as ``HomePage.txt``.
    Concurrent saves of the same title are not coordinated; the last
    completed write wins.
    """

    def __init__(self, base_path: Path, suffix: str = ".txt"):
        self.base_path = Path(base_path)
        self.suffix = suffix
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _title_to_filename(self, title: str) -> str:
        """Convert page title to filename."""
        return title + self.suffix

    def _filename_to_title(self, filename: str) -> str:
        """Convert filename to page title."""
        return filename.removesuffix(self.suffix)

    def _get_path(self, title: str) -> Path:
        """Get full path for a page."""
        if not is_valid_title(title):
            raise InvalidTitleError(title)
        return self.base_path / self._title_to_filename(title)

    async def load_page(self, title: str) -> Page:
        """Load a page by title."""
        path = self._get_path(title)
        try:
            body = path.read_bytes()
        except FileNotFoundError:
            raise PageNotFoundError(title) from None
        except OSError as e:
            raise StorageError(str(e)) from e
        logger.debug("Loaded page %s (%d bytes)", title, len(body))
        return Page(title=title, body=body)

    async def save_page(self, page: Page) -> None:
        """Save a page."""
        path = self._get_path(page.title)
        try:
            # The mode only applies when the file is created
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, PAGE_FILE_MODE)
            with os.fdopen(fd, "wb") as f:
                f.write(page.body)
        except OSError as e:
            raise StorageError(str(e)) from e
        logger.debug("Saved page %s (%d bytes)", page.title, len(page.body))

    async def list_titles(self) -> list[str]:
        """List all page titles."""
        titles = []
        try:
            with os.scandir(self.base_path) as entries:
                for entry in entries:
                    if entry.is_file(follow_symlinks=False) and entry.name.endswith(
                        self.suffix
                    ):
                        titles.append(self._filename_to_title(entry.name))
        except OSError as e:
            raise StorageError(str(e)) from e
        return titles
