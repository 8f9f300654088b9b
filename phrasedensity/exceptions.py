"""
exceptions.py

Exception hierarchy for PhraseDensity.

Only the document collaborator raises hard errors. Phrase extraction,
aggregation and ranking degrade to empty results on degenerate text.
"""

from __future__ import annotations


class PhraseDensityError(Exception):
    """Base class for all PhraseDensity errors."""


class SourceUnavailableError(PhraseDensityError):
    """
    The document at a URL could not be retrieved or parsed.

    Raised once per run by :class:`HtmlDocumentSource`; it is never retried
    and the run is aborted without a partial ranking.
    """

    DEFAULT_MESSAGE = "Please check URL and Internet Connectivity, and try again."

    def __init__(self, message: str = DEFAULT_MESSAGE, url: str = "") -> None:
        super().__init__(message)
        self.url = url
