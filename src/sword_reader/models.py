"""Data models for parsed scripture markup, references and lexicon data."""

import html
import json
import re
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Optional, Union

from . import codes


class AnnotationKind(Enum):
    """Kinds of inline annotation found in verse text."""

    LEXICON_NUMBER = "lexicon_number"
    THEONYM = "theonym"


@dataclass(frozen=True)
class Annotation:
    """A Strong's number or divine-name marker attached to a run of verse text."""

    kind: AnnotationKind
    namespace: Optional[str] = None  # e.g. "Hebrew", "Greek"; None for theonyms
    code: Optional[int] = None  # canonical, unpadded

    @property
    def label(self) -> str:
        """Display label such as "H430"; empty for theonyms."""
        if self.kind is AnnotationKind.LEXICON_NUMBER:
            return codes.label(self.namespace, self.code)
        return ""

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "namespace": self.namespace, "code": self.code}


@dataclass(frozen=True)
class Segment:
    """A run of display text, annotated or plain."""

    text: str
    annotation: Optional[Annotation] = None


@dataclass(frozen=True)
class AnnotatedText:
    """Display-ready text made of plain and annotated segments."""

    segments: tuple[Segment, ...] = ()

    @property
    def text(self) -> str:
        return "".join(segment.text for segment in self.segments)

    @property
    def annotations(self) -> list[Annotation]:
        return [s.annotation for s in self.segments if s.annotation is not None]

    def spans(self) -> list[tuple[int, int, Annotation]]:
        """(start, end, annotation) offsets into `text`."""
        spans = []
        pos = 0
        for segment in self.segments:
            end = pos + len(segment.text)
            if segment.annotation is not None:
                spans.append((pos, end, segment.annotation))
            pos = end
        return spans

    def to_html(self) -> str:
        """Render with the span classes the reader's stylesheet expects."""
        parts = []
        for segment in self.segments:
            text = html.escape(segment.text)
            annotation = segment.annotation
            if annotation is None:
                parts.append(text)
            elif annotation.kind is AnnotationKind.THEONYM:
                parts.append(f'<span class="divine-name">{text}</span>')
            else:
                parts.append(
                    f'<span class="strong-number" data-module="{html.escape(annotation.namespace)}"'
                    f' data-strong="{annotation.code}">{text}</span>'
                )
        return "".join(parts)

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "annotations": [
                {"start": start, "end": end, **annotation.to_dict()}
                for start, end, annotation in self.spans()
            ],
        }

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class ScriptureReference:
    """A citation such as "1 John 3:16" or "Genesis 1"."""

    book: str  # may carry a leading ordinal, e.g. "1 John"
    chapter: int
    verse: Optional[int] = None

    def __str__(self) -> str:
        if self.verse is None:
            return f"{self.book} {self.chapter}"
        return f"{self.book} {self.chapter}:{self.verse}"


_TITLE_CHAPTER_RE = re.compile(r"^(.*?)\s*(\d+)$")


@dataclass(frozen=True)
class ChapterHeader:
    """The \\swordchapter header of a document."""

    canonical_id: str  # OSIS-style id, e.g. "Gen.1"
    title: str  # e.g. "Genesis 1"

    @property
    def clean_title(self) -> str:
        """Title without a trailing ":N" verse suffix."""
        return re.sub(r":\d+$", "", self.title)

    @property
    def book(self) -> str:
        match = _TITLE_CHAPTER_RE.match(self.clean_title)
        return match.group(1).strip() if match else self.clean_title.strip()

    @property
    def chapter(self) -> Optional[int]:
        match = _TITLE_CHAPTER_RE.match(self.clean_title)
        return int(match.group(2)) if match else None


@dataclass(frozen=True)
class Verse:
    """One verse; `number` is None for the unnumbered fallback verse."""

    number: Optional[str]
    text: AnnotatedText = field(default_factory=AnnotatedText)


DocumentNode = Union[ChapterHeader, Verse]


@dataclass
class ParsedDocument:
    """Ordered nodes of a parsed markup document: at most one header, then verses."""

    nodes: list[DocumentNode] = field(default_factory=list)

    @property
    def header(self) -> Optional[ChapterHeader]:
        for node in self.nodes:
            if isinstance(node, ChapterHeader):
                return node
        return None

    @property
    def verses(self) -> list[Verse]:
        return [node for node in self.nodes if isinstance(node, Verse)]

    def verse_reference(self, verse: Verse) -> Optional[ScriptureReference]:
        """Full reference for a numbered verse, taken from the chapter header."""
        header = self.header
        if header is None or verse.number is None or header.chapter is None:
            return None
        return ScriptureReference(header.book, header.chapter, int(verse.number))

    def to_html(self) -> str:
        parts = ['<div class="scripture">']
        for node in self.nodes:
            if isinstance(node, ChapterHeader):
                parts.append(f"<h2>{html.escape(node.clean_title)}</h2>")
                continue
            number = ""
            if node.number is not None:
                reference = self.verse_reference(node)
                if reference is not None:
                    number = (
                        f'<sup><a href="#" class="bible-verse-link" '
                        f'data-ref="{html.escape(str(reference))}">{node.number}</a></sup> '
                    )
                else:
                    number = f"<sup>{node.number}</sup> "
            parts.append(f"<p>{number}<span>{node.text.to_html()}</span></p>")
        parts.append("</div>")
        return "".join(parts)

    def to_dict(self) -> dict:
        nodes = []
        for node in self.nodes:
            if isinstance(node, ChapterHeader):
                nodes.append({"type": "chapter", "osis": node.canonical_id, "title": node.title})
            else:
                nodes.append({"type": "verse", "number": node.number, **node.text.to_dict()})
        return {"nodes": nodes}

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


@dataclass(frozen=True)
class LexiconPair:
    """One row of a Hebrew-Greek (or Greek-Hebrew) word mapping."""

    source_word: str  # e.g. "elohim"
    target_code: int  # canonical Strong's code in the companion lexicon
    target_word: str  # e.g. "theos"


@dataclass
class LexiconPairTable:
    """Parsed word mappings from one lexicon namespace to its companion."""

    source_namespace: str
    target_namespace: str
    pairs: list[LexiconPair] = field(default_factory=list)

    def target_label(self, pair: LexiconPair) -> str:
        return codes.label(self.target_namespace, pair.target_code)

    def __len__(self) -> int:
        return len(self.pairs)

    def __iter__(self):
        return iter(self.pairs)

    def to_dict(self) -> dict:
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


@dataclass
class LexiconEntry:
    """A Strong's dictionary entry with HTML stripped from the headword fields."""

    namespace: str
    code: int
    entry: str  # entry heading as the lexicon prints it
    word: str  # original-language lemma
    transliteration: str
    definition: str  # may contain HTML

    @property
    def label(self) -> str:
        return codes.label(self.namespace, self.code)

    def to_dict(self) -> dict:
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
