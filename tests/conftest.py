from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest
import requests

from phrasedensity.document_source import ParsedDocument


SAMPLE_HTML = """<html><head><title> Ocean  View Hotels </title>
<meta name="description" content="Best ocean views">
<meta name="description" content="Seaside deals">
<meta name="keywords" content="ignored words">
<script>var headScript = "hidden";</script>
</head><body><h1>Ocean View</h1><h2>First sub</h2><h2>Second <b>sub</b></h2>
<h4>Tiny</h4><p>Body text here.</p><script>var y = "also hidden";</script>
<style>.a { color: red; }</style></body></html>"""


class FakeResponse:
    def __init__(self, text: str, status_code: int = 200) -> None:
        self.text = text
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


class FakeSession:
    """Stands in for requests.Session; records every call."""

    def __init__(
        self,
        text: str = SAMPLE_HTML,
        status_code: int = 200,
        error: Optional[Exception] = None,
    ) -> None:
        self.text = text
        self.status_code = status_code
        self.error = error
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return FakeResponse(self.text, self.status_code)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def ocean_document() -> ParsedDocument:
    return ParsedDocument(
        url="https://example.com/ocean-view/hotels",
        title="Ocean View Hotels",
        meta_description=" Ocean view deals",
        headings={1: ["City Life"]},
        body="ocean view city life",
    )
