"""Parse Strong's lexicon entries and Hebrew/Greek word-mapping dumps."""

import logging
import re
from typing import Optional, Union

from bs4 import BeautifulSoup

from . import codes
from .errors import InvalidCodeError, InvalidInputError
from .models import LexiconEntry, LexiconPair, LexiconPairTable

logger = logging.getLogger(__name__)


_LINE_BREAK_RE = re.compile(r"<br\s*/?>|\r?\n", re.IGNORECASE)
_FOOTER_RE = re.compile(r"^\(.*\)$")
_KEY_ECHO_RE = re.compile(r"^\d{1,5}:\s*")
# "elohim    2316    theos" / "agapao \t00157\tahab"
_PAIR_RE = re.compile(r"^(.+?)\s+0?(\d{1,5})\s+(.+?)$")


# =============================================================================
# Word Mappings
# =============================================================================

def _parse_pair_line(line: str) -> Optional[LexiconPair]:
    line = _KEY_ECHO_RE.sub("", line)
    match = _PAIR_RE.match(line)
    if not match:
        logger.debug("Skipping unrecognized lexicon pair line %r", line)
        return None

    try:
        code = codes.to_canonical(match.group(2))
    except InvalidCodeError:
        logger.debug("Skipping lexicon pair line with invalid code %r", line)
        return None

    return LexiconPair(
        source_word=match.group(1).strip(),
        target_code=code,
        target_word=match.group(3).strip(),
    )


def parse_lexicon_pairs(raw: str, source_namespace: str) -> LexiconPairTable:
    """
    Parse a HebrewGreek / GreekHebrew dump into word pairs.

    Lines are separated by ``<br>`` tags or newlines. Blank lines and the
    "(HebrewGreek)" footer are skipped, and so is a leading "00430:" echo
    of the lookup key. Rows that do not look like
    "word  code  word" are dropped rather than failing the whole table.

    Raises:
        InvalidInputError: if `raw` is not a string.
        UnknownNamespaceError: if `source_namespace` is neither Hebrew nor Greek.
    """
    if not isinstance(raw, str):
        raise InvalidInputError(f"Expected lexicon pair text, got {type(raw).__name__}")

    table = LexiconPairTable(
        source_namespace=source_namespace,
        target_namespace=codes.companion_namespace(source_namespace),
    )

    for line in _LINE_BREAK_RE.split(raw):
        line = line.strip()
        if not line or _FOOTER_RE.match(line):
            continue
        pair = _parse_pair_line(line)
        if pair is not None:
            table.pairs.append(pair)

    return table


# =============================================================================
# Lexicon Entries
# =============================================================================

def _text_of(fragment) -> str:
    if not fragment:
        return ""
    return BeautifulSoup(str(fragment), "html.parser").get_text(strip=True)


def parse_lexicon_entry(payload: dict, namespace: str, code: Union[str, int]) -> LexiconEntry:
    """
    Build a LexiconEntry from a Strongs{Hebrew,Greek} API response.

    The ``parsed`` block supplies the fields. Headword and transliteration
    lose their HTML tags, and the definition is kept as HTML. Without a
    ``parsed`` block the raw HTML becomes the definition.
    """
    if not isinstance(payload, dict):
        raise InvalidInputError(f"Expected lexicon payload, got {type(payload).__name__}")

    code = codes.to_canonical(code)
    parsed = payload.get("parsed")
    if not parsed:
        return LexiconEntry(
            namespace=namespace,
            code=code,
            entry=codes.label(namespace, code),
            word="",
            transliteration="",
            definition=(payload.get("raw_html") or "").strip(),
        )

    return LexiconEntry(
        namespace=namespace,
        code=code,
        entry=_text_of(parsed.get("entry")) or codes.label(namespace, code),
        word=_text_of(parsed.get("word")),
        transliteration=_text_of(parsed.get("transliteration")).strip("()"),
        definition=(parsed.get("definition") or "").strip(),
    )
