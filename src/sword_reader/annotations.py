"""
Markup scanning and Strong's / divine-name annotation.

SWORD's LaTeX output marks up verse text with commands such as
``\\swordstrong{Hebrew}{00430}`` and ``\\sworddivinename{Lord}``. Some
modules instead leave bare tokens like ``H0430`` in the text. This module
turns either form into an `AnnotatedText`.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from . import codes
from .errors import InvalidCodeError, InvalidInputError
from .models import AnnotatedText, Annotation, AnnotationKind, Segment

logger = logging.getLogger(__name__)


# =============================================================================
# Scanner
# =============================================================================

STRONG_COMMAND = "swordstrong"
DIVINE_NAME_COMMAND = "sworddivinename"

_COMMAND_NAME_RE = re.compile(r"[A-Za-z]+")
_SPACING_ESCAPES = {"\\", ",", ";", ":", " ", "\t", "\n", "\r"}


@dataclass(frozen=True)
class Token:
    """A run of literal text (`name` is None) or a command with its brace groups."""

    text: str = ""
    name: Optional[str] = None
    args: tuple[str, ...] = ()

    @property
    def is_command(self) -> bool:
        return self.name is not None


def _read_group(source: str, pos: int) -> tuple[str, int]:
    """Read a brace group starting at `source[pos] == "{"`; nested groups are kept."""
    depth = 0
    start = pos + 1
    while pos < len(source):
        ch = source[pos]
        if ch == "\\":
            pos += 2
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return source[start:pos], pos + 1
        pos += 1
    # Unclosed group runs to the end of input
    return source[start:], len(source)


def scan(source: str) -> Iterator[Token]:
    """
    Split markup into text and command tokens.

    Stray braces are dropped. ``\\\\`` and spacing escapes become a space,
    other escaped punctuation becomes the literal character, and a lone
    trailing backslash is dropped.
    """
    buf = []
    pos = 0
    end = len(source)

    while pos < end:
        ch = source[pos]

        if ch == "\\":
            match = _COMMAND_NAME_RE.match(source, pos + 1)
            if match:
                if buf:
                    yield Token(text="".join(buf))
                    buf = []
                pos = match.end()
                args = []
                while pos < end and source[pos] == "{":
                    arg, pos = _read_group(source, pos)
                    args.append(arg)
                yield Token(name=match.group(), args=tuple(args))
                continue

            escaped = source[pos + 1] if pos + 1 < end else ""
            if escaped in _SPACING_ESCAPES:
                buf.append(" ")
            elif escaped and escaped not in "{}":
                buf.append(escaped)
            pos += 2
            continue

        if ch not in "{}":
            buf.append(ch)
        pos += 1

    if buf:
        yield Token(text="".join(buf))


def strip_markup(source: str) -> str:
    """Plain text of `source` with every command and brace removed."""
    return "".join(token.text for token in scan(source) if not token.is_command)


# =============================================================================
# Annotation
# =============================================================================

# Letter prefix, optional zero, 1-5 digits; not part of a longer word or number
_BARE_STRONG_RE = re.compile(r"([HG])0?([0-9]{1,5})(?![0-9])")
_WORD_CHAR_RE = re.compile(r"[A-Za-z0-9_]")
_SPACE_RE = re.compile(r"\s+")


def _strong_segment(namespace: str, raw_code: str) -> Optional[Segment]:
    namespace = strip_markup(namespace).strip()
    if not namespace:
        return None
    try:
        code = codes.to_canonical(strip_markup(raw_code))
    except InvalidCodeError:
        logger.debug("Dropping Strong's command with invalid code %r", raw_code)
        return None
    annotation = Annotation(AnnotationKind.LEXICON_NUMBER, namespace, code)
    return Segment(annotation.label, annotation)


def _command_segment(token: Token) -> Optional[Segment]:
    if token.name == STRONG_COMMAND and len(token.args) >= 2:
        return _strong_segment(token.args[0], token.args[1])

    if token.name == DIVINE_NAME_COMMAND and token.args:
        word = _SPACE_RE.sub(" ", strip_markup(token.args[0])).strip()
        if word:
            return Segment(word, Annotation(AnnotationKind.THEONYM))
        return None

    return None


def _explicit_pass(tokens: Iterable[Token]) -> list[Segment]:
    segments: list[Segment] = []
    for token in tokens:
        if token.is_command:
            segment = _command_segment(token)
            if segment is None:
                continue
        else:
            segment = Segment(token.text)

        if segment.annotation is None and segments and segments[-1].annotation is None:
            segments[-1] = Segment(segments[-1].text + segment.text)
        else:
            segments.append(segment)
    return segments


def _split_bare_tokens(text: str, preceding: str) -> list[Segment]:
    """Promote bare H/G tokens in a plain run; `preceding` is the character emitted before it."""
    segments = []
    last = 0
    for match in _BARE_STRONG_RE.finditer(text):
        before = text[match.start() - 1] if match.start() else preceding
        if before and _WORD_CHAR_RE.match(before):
            continue
        code = int(match.group(2))
        if code == 0:
            continue

        if match.start() > last:
            segments.append(Segment(text[last:match.start()]))
        annotation = Annotation(
            AnnotationKind.LEXICON_NUMBER, codes.namespace_for_prefix(match.group(1)), code
        )
        # Bare tokens keep their source spelling; only the annotation is canonical
        segments.append(Segment(match.group(0), annotation))
        last = match.end()

    if last < len(text):
        segments.append(Segment(text[last:]))
    return segments


def _bare_pass(segments: list[Segment]) -> list[Segment]:
    result: list[Segment] = []
    last_char = ""
    for segment in segments:
        if segment.annotation is None:
            result.extend(_split_bare_tokens(segment.text, last_char))
        else:
            result.append(segment)
        last_char = segment.text[-1:] or last_char
    return result


def _normalize_space(segments: list[Segment]) -> tuple[Segment, ...]:
    result: list[Segment] = []
    for segment in segments:
        if segment.annotation is not None:
            result.append(segment)
            continue
        text = _SPACE_RE.sub(" ", segment.text)
        if not result or result[-1].text.endswith(" "):
            text = text.lstrip(" ")
        if text:
            result.append(Segment(text))

    if result and result[-1].annotation is None:
        tail = result[-1].text.rstrip(" ")
        if tail:
            result[-1] = Segment(tail)
        else:
            result.pop()
    return tuple(result)


def annotate_tokens(tokens: Iterable[Token]) -> AnnotatedText:
    """Annotate already-scanned tokens; see `extract_annotations`."""
    segments = _explicit_pass(tokens)
    segments = _bare_pass(segments)
    return AnnotatedText(_normalize_space(segments))


def extract_annotations(text: str) -> AnnotatedText:
    """
    Resolve Strong's numbers and divine names in a span of verse markup.

    Explicit ``\\swordstrong`` / ``\\sworddivinename`` commands are applied
    first. Every other command is removed along with its arguments. Bare
    tokens such as ``H0430`` left in the plain text are then promoted to
    the same annotation, keeping their spelling in the text. The result has
    collapsed whitespace and no residual markup, so running this again on
    ``result.text`` returns the same text.

    Raises:
        InvalidInputError: if `text` is not a string.
    """
    if not isinstance(text, str):
        raise InvalidInputError(f"Expected markup text, got {type(text).__name__}")
    return annotate_tokens(scan(text))
