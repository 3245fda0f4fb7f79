"""Extract citations from Treasury of Scripture Knowledge (TSK) entries."""

from bs4 import BeautifulSoup

from .errors import InvalidInputError


def parse_cross_references(markup: str) -> list[str]:
    """
    Collect every citation inside ``<scripRef>`` tags, in document order.

    A tag may hold several citations separated by semicolons; they are
    flattened into one list. Duplicates are kept, and markup without any
    tags gives an empty list.
    """
    if not isinstance(markup, str):
        raise InvalidInputError(f"Expected cross-reference markup, got {type(markup).__name__}")

    references = []
    if not markup:
        return references

    # html.parser lower-cases tag names
    soup = BeautifulSoup(markup, "html.parser")
    for tag in soup.find_all("scripref"):
        # Unclosed tags nest; text belongs to its innermost scripRef only
        text = "".join(
            s for s in tag.find_all(string=True) if s.find_parent("scripref") is tag
        )
        for piece in text.split(";"):
            piece = piece.strip()
            if piece:
                references.append(piece)

    return references
