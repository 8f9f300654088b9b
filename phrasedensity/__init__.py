"""
PhraseDensity

Weighted n-gram keyword density analysis for web pages.

High-level API
--------------
- PhraseExtractor         → weighted 2..N-word phrases from one text fragment
- ScoreAggregator         → merge fragment scores into one global map
- Ranker                  → group by exact score, top-N ranking
- KeywordDensityAnalyzer  → URL/title/meta/headings/body pipeline
- HtmlDocumentSource      → fetch + parse a page into ParsedDocument
- Visualization helpers:
    * plot_ranking_bars
"""

from importlib.metadata import PackageNotFoundError, version


# Core APIs
from .phrase_extractor import PhraseExtractor, PhraseOccurrence, tokenize
from .score_aggregator import ScoreAggregator
from .ranker import Ranker, RankingResult, ScoreGroup, format_keywords
from .config import AnalysisConfig
from .document_source import HtmlDocumentSource, ParsedDocument
from .pipeline import (
    KeywordDensityAnalyzer,
    SourceFragment,
    analyze_document,
    build_fragments,
    nth_index,
    url_fragment,
)
from .exceptions import PhraseDensityError, SourceUnavailableError
from .report import render_ranking

# Visualization APIs
from .ranking_viz import plot_ranking_bars


# ---------------------------------------------------------------------
# Runtime version (single source of truth = pyproject.toml)
# ---------------------------------------------------------------------
try:
    __version__ = version("phrasedensity")
except PackageNotFoundError:
    # Fallback when running directly from a clone without installation
    __version__ = "0.0.0"

__all__ = [
    "PhraseExtractor",
    "PhraseOccurrence",
    "tokenize",
    "ScoreAggregator",
    "Ranker",
    "RankingResult",
    "ScoreGroup",
    "format_keywords",
    "AnalysisConfig",
    "HtmlDocumentSource",
    "ParsedDocument",
    "KeywordDensityAnalyzer",
    "SourceFragment",
    "analyze_document",
    "build_fragments",
    "nth_index",
    "url_fragment",
    "PhraseDensityError",
    "SourceUnavailableError",
    "render_ranking",
    "plot_ranking_bars",
    "__version__",
]
