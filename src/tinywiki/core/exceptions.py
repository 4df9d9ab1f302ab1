"""Exceptions raised by the wiki core."""


class WikiError(Exception):
    """Base class for wiki errors."""


class PageNotFoundError(WikiError):
    def __init__(self, title: str):
        self.title = title
        super().__init__(f"Page '{title}' not found")


class InvalidTitleError(WikiError):
    def __init__(self, title: str):
        self.title = title
        super().__init__(f"Invalid page title {title!r}")


class StorageError(WikiError):
    """The page directory could not be read or written."""
