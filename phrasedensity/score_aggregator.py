"""
score_aggregator.py

Running phrase → relevance totals for one analysis run.
"""

from __future__ import annotations

from typing import Callable, Dict, Mapping, Optional


class ScoreAggregator:
    """
    Accumulate fragment-level phrase scores into one global map.

    The global map is a plain insertion-ordered ``dict``. A phrase is
    inserted the first time any fragment contributes to it and is never
    removed, so the iteration order is fully determined by the order in
    which fragments are merged. Downstream ranking relies on that order to
    break ties, and on the merge order to get bit-identical float totals.

    One aggregator corresponds to one analysis run; create a new one for
    the next document.
    """

    def __init__(self, logger: Optional[Callable[[str], None]] = None) -> None:
        self._scores: Dict[str, float] = {}
        self.source_counts: Dict[str, int] = {}
        self.fragments_merged = 0
        self.logger = logger

    @property
    def scores(self) -> Dict[str, float]:
        """The live global map (phrase → accumulated relevance)."""
        return self._scores

    def merge(self, fragment: Mapping[str, float], source: str = "") -> Dict[str, float]:
        """
        Add every phrase weight of ``fragment`` to the global totals.

        Parameters
        ----------
        fragment:
            Phrase → weight mapping, typically the Counter returned by
            :meth:`PhraseExtractor.extract`.
        source:
            Optional source label (``"title"``, ``"h2"``, ...) used only for
            bookkeeping in :attr:`source_counts`.

        Returns
        -------
        Dict[str, float]
            The updated global map (same object on every call).
        """
        scores = self._scores
        for phrase, weight in fragment.items():
            scores[phrase] = scores.get(phrase, 0.0) + weight

        self.fragments_merged += 1
        if source:
            self.source_counts[source] = self.source_counts.get(source, 0) + len(fragment)

        if self.logger is not None and fragment:
            self.logger(
                f"[ScoreAggregator] merged {len(fragment)} phrases"
                f"{' from ' + source if source else ''}; {len(scores)} total."
            )
        return scores

    def __len__(self) -> int:
        return len(self._scores)

    def __contains__(self, phrase: object) -> bool:
        return phrase in self._scores
