"""
pipeline.py

End-to-end keyword-density analysis for one document.

Given a ParsedDocument (or a URL to fetch one from), the pipeline:

1. Builds the ordered list of weighted text fragments:
   URL path, title, meta description, every heading h1..h4 in document
   order, then body text.
2. Extracts weighted n-grams from each fragment (PhraseExtractor).
3. Merges every fragment into one global score map, strictly in that
   order (ScoreAggregator). The fixed order makes float totals, and
   therefore exact-score grouping, reproducible bit for bit.
4. Ranks the global map (Ranker).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

from .config import AnalysisConfig
from .document_source import HtmlDocumentSource, ParsedDocument
from .phrase_extractor import PhraseExtractor, PhraseOccurrence
from .ranker import Ranker, RankingResult
from .score_aggregator import ScoreAggregator


# Delimiters used to cut the path out of a URL: text after the 3rd "/" and
# before the first "?".
PATH_DELIMITER = "/"
PATH_DELIMITER_OCCURRENCE = 3
QUERY_DELIMITER = "?"


@dataclass
class SourceFragment:
    source: str    # "url", "title", "meta", "h1".."h4", "body"
    text: str
    weight: float


def nth_index(text: str, ch: str, n: int) -> int:
    """
    Index of the ``n``-th occurrence (1-based) of ``ch`` in ``text``.

    Returns -1 if ``ch`` occurs fewer than ``n`` times or ``n < 1``.
    """
    if n < 1:
        return -1
    index = -1
    for _ in range(n):
        index = text.find(ch, index + 1)
        if index == -1:
            return -1
    return index


def url_fragment(url: str) -> str:
    """
    Path portion of ``url`` used as a scoring fragment.

    ``"http://example.com/a/b/c?x=1"`` → ``"a/b/c"``. A ``?`` that occurs
    before the path start is ignored and the path runs to the end.
    """
    start = nth_index(url, PATH_DELIMITER, PATH_DELIMITER_OCCURRENCE)
    if start == -1:
        # No third slash means no path; the URL contributes no phrases.
        return ""
    end = nth_index(url, QUERY_DELIMITER, 1)
    return url[start + 1 : end if end > start else len(url)]


def build_fragments(
    document: ParsedDocument,
    config: AnalysisConfig,
    url: Optional[str] = None,
) -> List[SourceFragment]:
    """Weighted fragments of ``document`` in merge order."""
    url = document.url if url is None else url
    fragments = [
        SourceFragment("url", url_fragment(url), config.url_weight),
        SourceFragment("title", document.title, config.title_weight),
        SourceFragment("meta", document.meta_description, config.metadata_weight),
    ]
    for level in range(1, config.heading_levels + 1):
        weight = config.heading_weight(level)
        for heading in document.headings_at(level):
            fragments.append(SourceFragment(f"h{level}", heading, weight))
    fragments.append(SourceFragment("body", document.body, config.body_weight))
    return fragments


class KeywordDensityAnalyzer:
    """
    Rank the phrases that best describe a document.

    Responsibilities
    ----------------
    - Turn a document into weighted source fragments.
    - Run PhraseExtractor on each fragment and merge the results into a
      fresh ScoreAggregator (one per analysis; nothing is shared between
      runs).
    - Rank the final map with Ranker and attach the run configuration.
    """

    def __init__(
        self,
        config: Optional[AnalysisConfig] = None,
        extractor: Optional[PhraseExtractor] = None,
        source_factory: Optional[Callable[..., HtmlDocumentSource]] = None,
        logger: Optional[Callable[[str], None]] = None,
    ) -> None:
        """
        Parameters
        ----------
        config:
            Weights and limits; defaults to ``AnalysisConfig()``.
        extractor:
            Phrase extractor; defaults to ``PhraseExtractor()``.
        source_factory:
            Callable ``(url, timeout=..., heading_levels=..., logger=...)``
            returning an object with a ``document()`` method. Defaults to
            :class:`HtmlDocumentSource`.
        logger:
            Optional logging callback used when ``verbose=True``. Falls back
            to ``print``.
        """
        self.config = config or AnalysisConfig()
        self.extractor = extractor or PhraseExtractor()
        self.source_factory = source_factory or HtmlDocumentSource
        self.logger = logger

    def _log(self, message: str, verbose: bool = True) -> None:
        if not verbose:
            return
        if self.logger is not None:
            self.logger(message)
        else:
            print(message)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def analyze(
        self,
        document: ParsedDocument,
        url: Optional[str] = None,
        verbose: bool = False,
    ) -> RankingResult:
        """
        Score and rank ``document``.

        Parameters
        ----------
        document:
            Parsed fragments of the page.
        url:
            URL whose path is scored; defaults to ``document.url``.
        verbose:
            Log one line per pipeline stage.

        Returns
        -------
        RankingResult
            Top-N score groups plus the run configuration in ``.config``.
        """
        cfg = self.config
        url = document.url if url is None else url
        sub_logger = self._log if verbose else None

        if nth_index(url, PATH_DELIMITER, PATH_DELIMITER_OCCURRENCE) == -1:
            self._log(f"[Pipeline] no path in URL {url!r}; skipping URL phrases.", verbose)

        fragments = build_fragments(document, cfg, url=url)
        self._log(f"[Pipeline] {len(fragments)} fragments to score.", verbose)

        aggregator = ScoreAggregator(logger=sub_logger)
        for fragment in fragments:
            phrases = self.extractor.extract(fragment.text, cfg.max_words, fragment.weight)
            aggregator.merge(phrases, source=fragment.source)

        self._log(f"[Pipeline] {len(aggregator)} distinct phrases scored.", verbose)

        ranker = Ranker(
            min_score=cfg.min_score,
            top_n=cfg.top_n,
            group_by_score=cfg.group_by_score,
            logger=sub_logger,
        )
        result = ranker.rank(aggregator.scores)
        result.config.update(
            {
                "url": url,
                "num_fragments": aggregator.fragments_merged,
                "source_counts": dict(aggregator.source_counts),
                "analysis": cfg.as_dict(),
            }
        )
        return result

    def analyze_url(self, url: str, verbose: bool = False) -> RankingResult:
        """
        Fetch ``url`` and rank it.

        Raises
        ------
        SourceUnavailableError
            The page could not be fetched or parsed. No ranking is produced.
        """
        source = self.source_factory(
            url,
            timeout=self.config.timeout,
            heading_levels=self.config.heading_levels,
            logger=self._log if verbose else None,
        )
        return self.analyze(source.document(), url=url, verbose=verbose)

    def trace_occurrences(
        self,
        document: ParsedDocument,
        url: Optional[str] = None,
    ) -> List[PhraseOccurrence]:
        """Every phrase occurrence of every fragment, in merge order."""
        occurrences: List[PhraseOccurrence] = []
        for fragment in build_fragments(document, self.config, url=url):
            occurrences.extend(
                self.extractor.extract_occurrences(
                    fragment.text,
                    self.config.max_words,
                    fragment.weight,
                    source=fragment.source,
                )
            )
        return occurrences


def analyze_document(
    document: ParsedDocument,
    config: Optional[AnalysisConfig] = None,
) -> RankingResult:
    """Shortcut for ``KeywordDensityAnalyzer(config).analyze(document)``."""
    return KeywordDensityAnalyzer(config=config).analyze(document)
