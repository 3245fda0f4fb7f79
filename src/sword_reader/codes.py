"""Strong's code normalization and lexicon namespace helpers."""

import re
from typing import Union

from .errors import InvalidCodeError, UnknownNamespaceError


# =============================================================================
# Constants
# =============================================================================

HEBREW = "Hebrew"
GREEK = "Greek"

WIRE_WIDTH = 5
MAX_CODE = 99999

_PREFIXES = {HEBREW: "H", GREEK: "G"}
_NAMESPACES_BY_PREFIX = {prefix: ns for ns, prefix in _PREFIXES.items()}
_COMPANIONS = {HEBREW: GREEK, GREEK: HEBREW}

_DIGITS_RE = re.compile(r"[0-9]{1,5}")


# =============================================================================
# Code Conversion
# =============================================================================

def to_canonical(raw: Union[str, int]) -> int:
    """
    Convert a Strong's number to its canonical integer form.

    Leading whitespace and zeros are dropped, so "00430", " 430 " and 430
    all give 430.

    Raises:
        InvalidCodeError: if the value is not 1-5 digits or is zero.
    """
    if isinstance(raw, bool):
        raise InvalidCodeError(f"Not a Strong's code: {raw!r}")

    if isinstance(raw, int):
        code = raw
    elif isinstance(raw, str):
        digits = raw.strip().lstrip("0")
        if not digits:
            raise InvalidCodeError(f"Strong's code is zero or empty: {raw!r}")
        if not _DIGITS_RE.fullmatch(digits):
            raise InvalidCodeError(f"Not a Strong's code: {raw!r}")
        code = int(digits)
    else:
        raise InvalidCodeError(f"Not a Strong's code: {raw!r}")

    if not 1 <= code <= MAX_CODE:
        raise InvalidCodeError(f"Strong's code out of range: {raw!r}")
    return code


def to_wire_form(code: Union[str, int]) -> str:
    """Zero-pad a code to the five characters the lexicon modules expect."""
    return str(to_canonical(code)).zfill(WIRE_WIDTH)


# =============================================================================
# Namespaces
# =============================================================================

def display_prefix(namespace: str) -> str:
    """Single-letter label prefix: H, G, or the namespace's first letter."""
    if namespace in _PREFIXES:
        return _PREFIXES[namespace]
    return namespace[:1].upper()


def namespace_for_prefix(prefix: str) -> str:
    return _NAMESPACES_BY_PREFIX[prefix.upper()]


def companion_namespace(namespace: str) -> str:
    """Hebrew -> Greek and Greek -> Hebrew."""
    try:
        return _COMPANIONS[namespace]
    except KeyError:
        raise UnknownNamespaceError(
            f"Unknown lexicon namespace: {namespace!r} (expected {HEBREW} or {GREEK})"
        ) from None


def pair_module(namespace: str) -> str:
    """Name of the module mapping words of `namespace` to its companion."""
    return f"{namespace}{companion_namespace(namespace)}"


def lexicon_module(namespace: str) -> str:
    companion_namespace(namespace)
    return f"Strongs{namespace}"


def label(namespace: str, code: int) -> str:
    return f"{display_prefix(namespace)}{code}"
