"""Exceptions raised by sword_reader."""

from typing import Optional


class SwordReaderError(Exception):
    """Base class for every error raised by this package."""


class InvalidInputError(SwordReaderError, TypeError):
    """A parser was handed something that is not text."""


class UnknownNamespaceError(InvalidInputError):
    """A lexicon namespace other than Hebrew or Greek was given where a companion is needed."""


class InvalidCodeError(SwordReaderError, ValueError):
    """A Strong's code is non-numeric or outside 1-99999."""


class ApiError(SwordReaderError):
    """The search API failed or returned something unusable."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class LexiconEntryNotFoundError(ApiError):
    """The lexicon module has no entry for the requested code."""
