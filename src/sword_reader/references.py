"""Find scripture citations in plain text and build cross-reference lookup keys."""

import re
from typing import Optional

from .errors import InvalidInputError
from .models import ScriptureReference

__all__ = [
    "ScriptureReference",
    "extract_references",
    "lookup_key_for",
    "parse_reference",
    "to_lookup_key",
]


# Optional ordinal, a book word (or a capitalized "Song of Solomon" name), chapter:verse
_CITATION_RE = re.compile(
    r"(?<![A-Za-z0-9:])"
    r"((?:[1-3]\s?)?(?:[A-Z][a-z]+\s+of\s+[A-Z][a-z]+|[A-Za-z]+)\s+\d+:\d+)"
)

_REFERENCE_RE = re.compile(
    r"^\s*((?:[1-3]\s?)?[A-Za-z][A-Za-z. ]*?)\s+(\d+)(?:\s*:\s*(\d+))?\s*:?\s*$"
)

_COLON_SPACING_RE = re.compile(r"\s*:\s*")


def _require_text(value, what: str) -> str:
    if not isinstance(value, str):
        raise InvalidInputError(f"Expected {what} text, got {type(value).__name__}")
    return value


def extract_references(text: str) -> list[str]:
    """
    Pull "Book C:V" citations out of a plain-text search result.

    Matching is purely syntactic: book names are not checked. Results are
    trimmed and keep source order, duplicates included.
    """
    _require_text(text, "search result")
    return [match.group(1).strip() for match in _CITATION_RE.finditer(text)]


def to_lookup_key(reference: str) -> str:
    """
    Normalize a reference into the key the TSK cross-reference module expects.

    "John 3 : 16" -> "John 3:16:". Applying it to its own output changes nothing.
    """
    key = _COLON_SPACING_RE.sub(":", _require_text(reference, "reference").strip())
    return key.rstrip(":") + ":"


def parse_reference(text: str) -> Optional[ScriptureReference]:
    """Parse "1 John 3:16" or "Genesis 1" into a ScriptureReference; None if it doesn't fit."""
    match = _REFERENCE_RE.match(_require_text(text, "reference"))
    if not match:
        return None
    book = re.sub(r"\s+", " ", match.group(1)).strip()
    verse = int(match.group(3)) if match.group(3) else None
    return ScriptureReference(book, int(match.group(2)), verse)


def lookup_key_for(reference: ScriptureReference) -> str:
    return to_lookup_key(str(reference))
