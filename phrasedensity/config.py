"""
config.py

Run configuration for PhraseDensity.

All per-source weights, window sizes and ranking limits live in a single
validated pydantic model so that a run can be described (and reproduced)
from one object. ``AnalysisConfig().model_dump()`` is what ends up in
``RankingResult.config``.
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, Field


class AnalysisConfig(BaseModel):
    """
    Weights and limits for one keyword-density analysis.

    Attributes
    ----------
    url_weight, title_weight, metadata_weight, body_weight:
        Relevance added per phrase occurrence found in that source.
    header_weight:
        Base weight for ``<h1>``. Level ``h`` uses
        ``header_weight * 2 ** (1 - h)``.
    heading_levels:
        Heading levels scanned, ``h1`` through ``h{heading_levels}``.
    max_words:
        Longest n-gram extracted (shortest is always 2 words).
    min_score:
        Relevance floor. Phrases scoring ``<= min_score`` are not ranked.
    top_n:
        Number of score groups (or phrases in flat mode) reported.
    timeout:
        Seconds allowed for fetching the document.
    group_by_score:
        ``True`` groups phrases sharing an identical score into one rank.
        ``False`` ranks phrases individually.
    """

    url_weight: float = Field(2.0, ge=0.0, description="Weight of phrases found in the URL path.")
    title_weight: float = Field(3.5, ge=0.0, description="Weight of phrases found in <title>.")
    metadata_weight: float = Field(
        3.0, ge=0.0, description="Weight of phrases found in <meta name='description'>."
    )
    header_weight: float = Field(1.0, ge=0.0, description="Weight of phrases found in <h1>.")
    body_weight: float = Field(0.01, ge=0.0, description="Weight of phrases found in body text.")

    heading_levels: int = Field(4, ge=1, le=6, description="Heading levels scanned (h1..hN).")
    max_words: int = Field(4, ge=2, description="Maximum number of words per phrase.")

    min_score: float = Field(1.0, description="Relevance floor (exclusive).")
    top_n: int = Field(5, ge=1, description="Number of ranks reported.")
    timeout: float = Field(7.0, gt=0.0, description="Fetch timeout in seconds.")
    group_by_score: bool = Field(
        True, description="Group phrases with bit-identical scores into one rank."
    )

    def heading_weight(self, level: int) -> float:
        """Weight for heading level ``level`` (1.0, 0.5, 0.25, 0.125 by default)."""
        return self.header_weight * 2.0 ** (1 - level)

    def as_dict(self) -> Dict[str, Any]:
        return self.model_dump()
