"""
document_source.py

Fetch a web page and expose the text fragments PhraseDensity scores.

The pipeline only needs four things from a page:

- the ``<title>`` text,
- the ``content`` of every ``<meta name="description">``, space-joined,
- the text of each ``<h1>``..``<h4>`` element, in document order,
- the visible body text.

:class:`HtmlDocumentSource` downloads the page once with ``requests`` (with a
bounded timeout) and answers those questions from a BeautifulSoup tree.
:class:`ParsedDocument` is the plain, network-free snapshot the pipeline
consumes; tests and callers with pre-fetched HTML can build it directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, FrozenSet, List, Optional
import re

import requests
from bs4 import BeautifulSoup, Tag
from bs4.element import PreformattedString

from .exceptions import SourceUnavailableError


USER_AGENT = "Mozilla/5.0 (compatible; PhraseDensity/0.1)"
DEFAULT_TIMEOUT = 7.0

# Elements whose text is never rendered
_INVISIBLE_TAGS: FrozenSet[str] = frozenset({"script", "style", "noscript", "template"})
# Document metadata, skipped when a page has no <body> element
_HEAD_TAGS: FrozenSet[str] = frozenset({"head", "title", "meta", "link", "base"})

# Elements rendered on their own line; their text never runs into a neighbour's
_BLOCK_TAGS: FrozenSet[str] = frozenset(
    {
        "address", "article", "aside", "blockquote", "body", "br", "caption",
        "dd", "details", "div", "dl", "dt", "fieldset", "figcaption", "figure",
        "footer", "form", "h1", "h2", "h3", "h4", "h5", "h6", "head", "header",
        "hr", "html", "li", "main", "nav", "ol", "p", "pre", "section",
        "summary", "table", "tbody", "td", "tfoot", "th", "thead", "title",
        "tr", "ul",
    }
)

# <meta name="..."> is matched case-insensitively, like the HTML attribute value
_DESCRIPTION_NAME_RE = re.compile(r"^\s*description\s*$", re.IGNORECASE)


@dataclass
class ParsedDocument:
    """
    Text fragments of one document.

    Attributes
    ----------
    url:
        Address the document was loaded from.
    title:
        ``<title>`` text (empty if absent).
    meta_description:
        Concatenated ``content`` of all ``<meta name="description">`` tags,
        each preceded by a single space.
    headings:
        Heading level → heading texts in document order.
    body:
        Visible body text, whitespace-normalized.
    """

    url: str = ""
    title: str = ""
    meta_description: str = ""
    headings: Dict[int, List[str]] = field(default_factory=dict)
    body: str = ""

    def headings_at(self, level: int) -> List[str]:
        return list(self.headings.get(level, []))


class HtmlDocumentSource:
    """
    Download and parse an HTML page.

    Construction performs the request. Any failure (malformed URL,
    connection error, timeout, HTTP error status) is raised as
    :class:`SourceUnavailableError`; nothing is retried.
    """

    def __init__(
        self,
        url: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
        heading_levels: int = 4,
        logger: Optional[Callable[[str], None]] = None,
    ) -> None:
        """
        Parameters
        ----------
        url:
            Page to analyze.
        timeout:
            Seconds allowed for connect + read.
        session:
            Optional ``requests.Session`` (connection reuse, testing).
        heading_levels:
            Highest heading level captured by :meth:`document`.
        logger:
            Optional logging callback.
        """
        self.url = url
        self.timeout = float(timeout)
        self.heading_levels = heading_levels
        self.logger = logger
        owns_session = session is None
        self._session = requests.Session() if owns_session else session
        try:
            self._soup = self._fetch()
        finally:
            if owns_session:
                self._session.close()

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------
    def _fetch(self) -> BeautifulSoup:
        self._log(f"[HtmlDocumentSource] GET {self.url} (timeout={self.timeout}s)")
        try:
            response = self._session.get(
                self.url,
                headers={"User-Agent": USER_AGENT},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except (requests.RequestException, ValueError) as exc:
            self._log(f"[HtmlDocumentSource] failed: {exc}")
            raise SourceUnavailableError(url=self.url) from exc

        return BeautifulSoup(response.text, "html.parser")

    def _log(self, message: str) -> None:
        if self.logger is not None:
            self.logger(message)

    # ------------------------------------------------------------------
    # Fragments
    # ------------------------------------------------------------------
    def title(self) -> str:
        tag = self._soup.title
        if tag is None:
            return ""
        return _normalize_ws(tag.get_text())

    def meta_description(self) -> str:
        parts: List[str] = []
        for meta in self._soup.find_all("meta", attrs={"name": _DESCRIPTION_NAME_RE}):
            parts.append(" ")
            parts.append(meta.get("content", ""))
        return "".join(parts)

    def headings(self, level: int) -> List[str]:
        return [element_text(h) for h in self._soup.find_all(f"h{level}")]

    def body(self) -> str:
        body = self._soup.body
        if body is not None:
            return element_text(body)
        # html.parser only builds <body> when the page spells it out
        return element_text(self._soup, skip=_INVISIBLE_TAGS | _HEAD_TAGS)

    def document(self) -> ParsedDocument:
        """Snapshot every fragment the pipeline needs."""
        headings = {
            level: self.headings(level) for level in range(1, self.heading_levels + 1)
        }
        return ParsedDocument(
            url=self.url,
            title=self.title(),
            meta_description=self.meta_description(),
            headings=headings,
            body=self.body(),
        )


def element_text(root: Tag, skip: FrozenSet[str] = _INVISIBLE_TAGS) -> str:
    """
    Rendered text of ``root``, whitespace-normalized.

    Block-level elements are separated by a space; inline markup is not, so
    ``web<b>site</b>`` reads ``website``. Elements named in ``skip`` and
    comments/doctype nodes contribute nothing. The tree is not modified.
    """
    parts: List[str] = []
    _collect_text(root, parts, skip)
    return _normalize_ws("".join(parts))


def _collect_text(node: Tag, parts: List[str], skip: FrozenSet[str]) -> None:
    for child in node.children:
        if isinstance(child, Tag):
            if child.name in skip:
                continue
            block = child.name in _BLOCK_TAGS
            if block:
                parts.append(" ")
            _collect_text(child, parts, skip)
            if block:
                parts.append(" ")
        elif not isinstance(child, PreformattedString):
            parts.append(str(child))


def _normalize_ws(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()
