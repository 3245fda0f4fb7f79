"""HTTP client for the scripture search API."""

import logging
from typing import Optional, Union

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from . import codes, config
from .crossrefs import parse_cross_references
from .errors import ApiError, LexiconEntryNotFoundError
from .lexicon import parse_lexicon_entry, parse_lexicon_pairs
from .markup import parse_document
from .models import LexiconEntry, LexiconPairTable, ParsedDocument
from .references import extract_references, to_lookup_key

logger = logging.getLogger(__name__)


# =============================================================================
# Session
# =============================================================================

def build_session() -> requests.Session:
    """A keep-alive session that retries throttled and 5xx responses."""
    session = requests.Session()
    session.headers.update({
        "User-Agent": config.USER_AGENT,
        "Accept": "application/json",
    })
    adapter = HTTPAdapter(
        max_retries=Retry(
            total=config.MAX_RETRIES,
            backoff_factor=config.RETRY_BACKOFF,
            status_forcelist=config.RETRY_STATUS,
        )
    )
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


# =============================================================================
# Client
# =============================================================================

class SwordClient:
    """
    Fetches text, cross references and lexicon data, and hands the payloads
    to the parsers.

    The Bible module is passed to every call explicitly; the client keeps
    no notion of a "current" version or reference.
    """

    def __init__(
        self,
        base_url: str = config.API_BASE,
        session: Optional[requests.Session] = None,
        timeout: float = config.REQUEST_TIMEOUT,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session or build_session()
        self.timeout = timeout

    def _get_json(self, endpoint: str, params: dict) -> dict:
        url = f"{self.base_url}/{endpoint}"
        logger.debug("GET %s %s", url, params)
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("Request to %s failed: %s", url, e)
            raise ApiError(f"Request to {endpoint} failed: {e}") from e

        if not response.ok:
            logger.warning("API returned %s for %s", response.status_code, url)
            raise ApiError(f"API returned {response.status_code}", response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise ApiError(f"API returned invalid JSON for {endpoint}") from e

        if not isinstance(data, dict):
            raise ApiError(f"API returned unexpected payload for {endpoint}")
        return data

    # -------------------------------------------------------------------------
    # Text search
    # -------------------------------------------------------------------------

    def search_text(
        self,
        query: str,
        module: str = config.DEFAULT_MODULE,
        *,
        output_format: str = "plain",
        search_type: Optional[str] = None,
    ) -> str:
        """Run a /search query and return its `result` text ("" when absent)."""
        params = {
            "module": module,
            "query": query,
            "output_format": output_format,
            "output_encoding": config.OUTPUT_ENCODING,
            "variant": config.VARIANT,
            "locale": config.LOCALE,
        }
        if search_type:
            params["search_type"] = search_type
        if output_format == "LaTeX":
            params["option_filters"] = config.LATEX_OPTION_FILTERS

        data = self._get_json("search", params)
        return data.get("result") or ""

    def fetch_document(self, query: str, module: str = config.DEFAULT_MODULE) -> ParsedDocument:
        """Fetch LaTeX for a reference or chapter and parse it."""
        latex = self.search_text(query, module, output_format="LaTeX")
        return parse_document(latex)

    def fetch_chapter(
        self, book: str, chapter: int, module: str = config.DEFAULT_MODULE
    ) -> ParsedDocument:
        return self.fetch_document(f"{book} {chapter}", module)

    def search_references(self, phrase: str, module: str = config.DEFAULT_MODULE) -> list[str]:
        """References of every verse containing all the words of `phrase`."""
        result = self.search_text(phrase, module, search_type="multiword")
        return extract_references(result)

    def verse_text(self, reference: str, module: str = config.DEFAULT_MODULE) -> str:
        return self.search_text(reference, module).strip()

    # -------------------------------------------------------------------------
    # Commentaries / lexicons
    # -------------------------------------------------------------------------

    def cross_references(self, reference: str) -> list[str]:
        """TSK cross references for a verse such as "John 3:16"."""
        data = self._get_json(
            "commentaries",
            {"module": config.CROSS_REFERENCE_MODULE, "strongs": to_lookup_key(reference)},
        )
        return parse_cross_references(data.get("raw_html") or "")

    def lookup_lexicon(self, code: Union[str, int], namespace: str) -> LexiconEntry:
        """
        Look up a Strong's entry.

        Raises:
            InvalidCodeError: if `code` is not a valid Strong's number.
            LexiconEntryNotFoundError: if the lexicon has no such entry.
        """
        wire = codes.to_wire_form(code)
        try:
            data = self._get_json(
                "commentaries", {"module": codes.lexicon_module(namespace), "strongs": wire}
            )
        except ApiError as e:
            if e.status_code == 404:
                raise LexiconEntryNotFoundError(
                    f"No entry for {wire} ({namespace})", e.status_code
                ) from e
            raise
        return parse_lexicon_entry(data, namespace, code)

    def lexicon_pairs(self, code: Union[str, int], namespace: str) -> LexiconPairTable:
        """Words that `code` maps to in the companion lexicon."""
        data = self._get_json(
            "commentaries",
            {"module": codes.pair_module(namespace), "strongs": codes.to_wire_form(code)},
        )
        return parse_lexicon_pairs(data.get("raw_html") or "", namespace)
