"""Parse SWORD LaTeX output into a chapter header and verses."""

import logging
import re
from enum import Enum
from typing import Optional

from .annotations import Token, annotate_tokens, scan, strip_markup
from .errors import InvalidInputError
from .models import ChapterHeader, DocumentNode, ParsedDocument, Verse

logger = logging.getLogger(__name__)


CHAPTER_COMMAND = "swordchapter"
VERSE_COMMAND = "swordverse"
END_COMMAND = "end"

_VERSE_NUMBER_RE = re.compile(r"[0-9]+")


class _State(Enum):
    OUTSIDE = "outside"
    IN_VERSE = "in_verse"


def _chapter_header(token: Token) -> Optional[ChapterHeader]:
    if token.name != CHAPTER_COMMAND or len(token.args) < 2:
        return None
    return ChapterHeader(
        canonical_id=strip_markup(token.args[0]).strip(),
        title=strip_markup(token.args[1]).strip(),
    )


def _verse_number(token: Token) -> Optional[str]:
    """Verse number of a \\swordverse{osis}{title}{N} command, else None."""
    if token.name != VERSE_COMMAND or len(token.args) < 3:
        return None
    number = token.args[2].strip()
    return number if _VERSE_NUMBER_RE.fullmatch(number) else None


def _is_document_end(token: Token) -> bool:
    return token.name == END_COMMAND and token.args[:1] == ("document",)


def parse_document(markup: str) -> ParsedDocument:
    """
    Parse a SWORD LaTeX document (a chapter, a single verse, or bare text).

    The first ``\\swordchapter`` gives the header. Each ``\\swordverse`` owns
    the text up to the next verse command or ``\\end{document}``, and that
    text is annotated with `annotate_tokens`. If no verse command is found
    in non-blank input, the whole input becomes one unnumbered verse.

    Raises:
        InvalidInputError: if `markup` is not a string.
    """
    if not isinstance(markup, str):
        raise InvalidInputError(f"Expected markup text, got {type(markup).__name__}")

    tokens = list(scan(markup))
    header: Optional[ChapterHeader] = None
    verses: list[Verse] = []

    state = _State.OUTSIDE
    number: Optional[str] = None
    body: list[Token] = []

    def close_verse():
        if state is _State.IN_VERSE:
            verses.append(Verse(number, annotate_tokens(body)))

    for token in tokens:
        if token.name == CHAPTER_COMMAND:
            if header is None:
                header = _chapter_header(token)
            continue

        verse_number = _verse_number(token)
        if verse_number is not None:
            close_verse()
            state, number, body = _State.IN_VERSE, verse_number, []
            continue

        if _is_document_end(token):
            close_verse()
            state, number, body = _State.OUTSIDE, None, []
            continue

        if state is _State.IN_VERSE:
            body.append(token)

    close_verse()

    if not verses and markup.strip():
        logger.debug("No verse commands found; treating input as a single verse")
        verses.append(Verse(None, annotate_tokens(tokens)))

    nodes: list[DocumentNode] = []
    if header is not None:
        nodes.append(header)
    nodes.extend(verses)
    return ParsedDocument(nodes)
