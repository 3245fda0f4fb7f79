#!/usr/bin/env python3
"""
CLI for the SWORD reader: read chapters, search phrases, follow cross
references and look up Strong's numbers.

Usage:
    sword-reader chapter Genesis 1              # Chapter as JSON
    sword-reader chapter John 3 --html          # Chapter as HTML
    sword-reader search "living water"          # Matching references
    sword-reader xrefs "John 3:16"              # TSK cross references
    sword-reader strongs 430 --pairs            # Lexicon entry + Greek links
    sword-reader parse chapter.tex              # Parse a local LaTeX file
"""

import argparse
import logging
from pathlib import Path
from typing import Optional

from . import codes, config
from .client import SwordClient
from .errors import SwordReaderError
from .markup import parse_document
from .models import ParsedDocument


# =============================================================================
# Output
# =============================================================================

def print_document(document: ParsedDocument, as_html: bool = False):
    if as_html:
        print(document.to_html())
    else:
        print(document.to_json())


def print_lines(lines: list[str], empty_message: str):
    if not lines:
        print(empty_message)
        return
    for line in lines:
        print(line)


# =============================================================================
# Commands
# =============================================================================

def cmd_parse(args, client: SwordClient) -> int:
    try:
        latex = Path(args.file).read_text(encoding="utf-8")
    except OSError as e:
        print(f"❌ Cannot read {args.file}: {e}")
        return 1
    print_document(parse_document(latex), args.html)
    return 0


def cmd_chapter(args, client: SwordClient) -> int:
    document = client.fetch_chapter(args.book, args.chapter, args.module)
    if not document.verses:
        print(f"❌ Nothing found for {args.book} {args.chapter} ({args.module})")
        return 1
    print_document(document, args.html)
    return 0


def cmd_verse(args, client: SwordClient) -> int:
    text = client.verse_text(args.reference, args.module)
    print(text or "Not found.")
    return 0


def cmd_search(args, client: SwordClient) -> int:
    references = client.search_references(args.phrase, args.module)
    print_lines(references, "No matches found.")
    return 0


def cmd_xrefs(args, client: SwordClient) -> int:
    references = client.cross_references(args.reference)
    print_lines(references, "No cross-references found.")
    return 0


def cmd_strongs(args, client: SwordClient) -> int:
    entry = client.lookup_lexicon(args.code, args.namespace)
    print(entry.to_json())

    if args.pairs:
        table = client.lexicon_pairs(args.code, args.namespace)
        print()
        print(f"Related {table.source_namespace} ↔ {table.target_namespace} links")
        print("=" * 60)
        print_lines(
            [f"{p.source_word} → {table.target_label(p)} {p.target_word}" for p in table],
            f"No {table.source_namespace}↔{table.target_namespace} links.",
        )
    return 0


# =============================================================================
# CLI Entry Point
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sword-reader",
        description="Read scripture, cross references and Strong's entries from a SWORD search API.",
    )
    parser.add_argument(
        "--api-base",
        type=str,
        default=config.API_BASE,
        help=f"API base URL (default: {config.API_BASE})"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log HTTP requests and skipped input"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("parse", help="Parse a local SWORD LaTeX file")
    p.add_argument("file", help="Path to the LaTeX file")
    p.add_argument("--html", action="store_true", help="Print HTML instead of JSON")
    p.set_defaults(func=cmd_parse)

    p = sub.add_parser("chapter", help="Fetch and parse a chapter")
    p.add_argument("book", help="Book name (e.g. 'Genesis', '1 Peter')")
    p.add_argument("chapter", type=int, help="Chapter number")
    p.add_argument("--html", action="store_true", help="Print HTML instead of JSON")
    p.set_defaults(func=cmd_chapter)

    p = sub.add_parser("verse", help="Print the plain text of a reference")
    p.add_argument("reference", help="e.g. 'John 3:16'")
    p.set_defaults(func=cmd_verse)

    p = sub.add_parser("search", help="Find verses containing every word of a phrase")
    p.add_argument("phrase")
    p.set_defaults(func=cmd_search)

    p = sub.add_parser("xrefs", help="List TSK cross references for a verse")
    p.add_argument("reference", help="e.g. 'John 3:16'")
    p.set_defaults(func=cmd_xrefs)

    p = sub.add_parser("strongs", help="Look up a Strong's number")
    p.add_argument("code", help="Strong's number, padded or not (e.g. 430, 00430)")
    p.add_argument(
        "--namespace", "-n",
        choices=[codes.HEBREW, codes.GREEK],
        default=codes.HEBREW,
        help=f"Lexicon (default: {codes.HEBREW})"
    )
    p.add_argument("--pairs", action="store_true", help="Also list companion-lexicon links")
    p.set_defaults(func=cmd_strongs)

    for name in ("chapter", "verse", "search"):
        sub.choices[name].add_argument(
            "--module", "-m",
            type=str,
            default=config.DEFAULT_MODULE,
            help=f"Bible module (default: {config.DEFAULT_MODULE})"
        )

    return parser


def main(argv: Optional[list[str]] = None, client: Optional[SwordClient] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    client = client or SwordClient(base_url=args.api_base)
    try:
        return args.func(args, client)
    except SwordReaderError as e:
        print(f"❌ Error: {e}")
        return 1


if __name__ == "__main__":
    exit(main())
