"""
SWORD Reader - Parses scripture LaTeX, search results, TSK cross references and
Strong's lexicon dumps returned by a SWORD text-search API.
"""

from .annotations import extract_annotations, strip_markup
from .client import SwordClient
from .codes import GREEK, HEBREW, to_canonical, to_wire_form
from .crossrefs import parse_cross_references
from .errors import (
    ApiError,
    InvalidCodeError,
    InvalidInputError,
    LexiconEntryNotFoundError,
    SwordReaderError,
    UnknownNamespaceError,
)
from .lexicon import parse_lexicon_entry, parse_lexicon_pairs
from .markup import parse_document
from .models import (
    AnnotatedText,
    Annotation,
    AnnotationKind,
    ChapterHeader,
    LexiconEntry,
    LexiconPair,
    LexiconPairTable,
    ParsedDocument,
    ScriptureReference,
    Segment,
    Verse,
)
from .references import extract_references, lookup_key_for, parse_reference, to_lookup_key

__all__ = [
    "AnnotatedText",
    "Annotation",
    "AnnotationKind",
    "ApiError",
    "ChapterHeader",
    "GREEK",
    "HEBREW",
    "InvalidCodeError",
    "InvalidInputError",
    "LexiconEntry",
    "LexiconEntryNotFoundError",
    "LexiconPair",
    "LexiconPairTable",
    "ParsedDocument",
    "ScriptureReference",
    "Segment",
    "SwordClient",
    "SwordReaderError",
    "UnknownNamespaceError",
    "Verse",
    "extract_annotations",
    "extract_references",
    "lookup_key_for",
    "parse_cross_references",
    "parse_document",
    "parse_lexicon_entry",
    "parse_lexicon_pairs",
    "parse_reference",
    "strip_markup",
    "to_canonical",
    "to_lookup_key",
    "to_wire_form",
]

__version__ = "0.1.0"
