"""
ranker.py

Ranking of accumulated phrase scores for PhraseDensity.

- Takes the global phrase → relevance map built by ScoreAggregator.
- Drops phrases at or below a relevance floor.
- Groups the survivors by *exact* relevance value, keeping phrases in the
  order in which they are first met while scanning the map.
- Orders groups by descending relevance and keeps the top-N.
- Produces a structured RankingResult with:
    * ScoreGroup objects (score + ordered phrase list)
    * a ranking DataFrame (one row per ranked phrase)
    * a config dict describing the run.

Grouping is bit-exact on floats. Two phrases whose totals differ only in the
last ulp land in different groups, and unrelated phrases whose sums happen to
coincide share a group. Pass ``group_by_score=False`` to rank phrases
individually instead.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

import numpy as np
import pandas as pd


# ---------------------------------------------------------------------
# Dataclasses for ranking results
# ---------------------------------------------------------------------


@dataclass
class ScoreGroup:
    """
    Phrases sharing one relevance value.

    Attributes
    ----------
    score:
        Total relevance shared by every member.
    phrases:
        Member phrases in first-seen order.
    """

    score: float
    phrases: List[str]

    @property
    def keywords(self) -> str:
        return format_keywords(self.phrases)


@dataclass
class RankingResult:
    """
    Output of :meth:`Ranker.rank`.

    Attributes
    ----------
    groups:
        ScoreGroup objects ordered by descending score (at most ``top_n``).
    ranking_df:
        One row per ranked phrase. Columns:
            - 'rank'        : 1-based rank of the phrase's group
            - 'relevance'   : total relevance
            - 'phrase'      : phrase string
            - 'n_words'     : number of words in the phrase
            - 'position'    : index of the phrase inside its group
    config:
        Parameters and counts of this ranking (floor, top_n, grouping mode,
        number of scored and qualifying phrases, plus anything the caller
        attached such as the analysis config).
    """

    groups: List[ScoreGroup]
    ranking_df: pd.DataFrame
    config: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.groups

    def as_tuples(self) -> List[Tuple[float, List[str]]]:
        """``[(score, [phrase, ...]), ...]`` in rank order."""
        return [(g.score, list(g.phrases)) for g in self.groups]

    def __len__(self) -> int:
        return len(self.groups)


def format_keywords(phrases: Iterable[str]) -> str:
    """Comma-join phrases for display: ``"a, b, c"``."""
    return ", ".join(phrases)


# ---------------------------------------------------------------------
# Ranker
# ---------------------------------------------------------------------


class Ranker:
    """
    Turn a global phrase → relevance map into an ordered top-N ranking.

    The ranker never mutates its input. Ties inside a group are broken by
    the iteration order of the input mapping, so a reproducible ranking
    needs a reproducibly ordered map (ScoreAggregator guarantees this when
    fragments are merged in a fixed order).
    """

    def __init__(
        self,
        min_score: float = 1.0,
        top_n: int = 5,
        group_by_score: bool = True,
        logger: Optional[Callable[[str], None]] = None,
    ) -> None:
        """
        Parameters
        ----------
        min_score:
            Relevance floor. Phrases with ``score <= min_score`` are dropped.
        top_n:
            Number of groups (or phrases in flat mode) returned.
        group_by_score:
            If True, phrases with identical scores share a rank. If False,
            phrases are sorted individually (stable, descending).
        logger:
            Optional logging callback; receives short progress messages.
        """
        self.min_score = float(min_score)
        self.top_n = int(top_n)
        self.group_by_score = group_by_score
        self.logger = logger

    def _log(self, message: str, verbose: bool = True) -> None:
        if not verbose:
            return
        if self.logger is not None:
            self.logger(message)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def rank(
        self,
        scores: Mapping[str, float],
        min_score: Optional[float] = None,
        top_n: Optional[int] = None,
    ) -> RankingResult:
        """
        Rank phrases by accumulated relevance.

        Parameters
        ----------
        scores:
            Phrase → total relevance. Iteration order is the tie-break.
        min_score, top_n:
            Per-call overrides of the constructor values.

        Returns
        -------
        RankingResult
            Ranked groups; empty when no phrase clears the floor or
            ``top_n <= 0``.
        """
        floor = self.min_score if min_score is None else float(min_score)
        limit = self.top_n if top_n is None else int(top_n)

        df = self._qualifying_frame(scores, floor)

        if limit <= 0 or df.empty:
            groups: List[ScoreGroup] = []
        elif self.group_by_score:
            groups = self._group_by_exact_score(df)[:limit]
        else:
            ordered = df.sort_values("relevance", ascending=False, kind="stable").head(limit)
            groups = [
                ScoreGroup(score=float(score), phrases=[phrase])
                for phrase, score in zip(ordered["phrase"], ordered["relevance"])
            ]

        self._log(
            f"[Ranker] {len(df)} of {len(scores)} phrases above {floor}; "
            f"{len(groups)} rank(s) reported."
        )

        config = {
            "min_score": floor,
            "top_n": limit,
            "group_by_score": self.group_by_score,
            "num_phrases_scored": len(scores),
            "num_phrases_qualifying": int(len(df)),
        }
        return RankingResult(
            groups=groups,
            ranking_df=self._build_ranking_df(groups),
            config=config,
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _qualifying_frame(scores: Mapping[str, float], floor: float) -> pd.DataFrame:
        """Phrases strictly above ``floor``, in input iteration order."""
        phrases = list(scores.keys())
        values = np.fromiter(
            (scores[p] for p in phrases), dtype=np.float64, count=len(phrases)
        )
        mask = values > floor
        return pd.DataFrame(
            {
                "phrase": [p for p, keep in zip(phrases, mask) if keep],
                "relevance": values[mask],
            }
        )

    @staticmethod
    def _group_by_exact_score(df: pd.DataFrame) -> List[ScoreGroup]:
        """
        Bucket phrases by bit-identical relevance.

        ``groupby(sort=False)`` keeps each bucket's rows in frame order, which
        is the first-seen order of the input mapping.
        """
        groups = [
            ScoreGroup(score=float(score), phrases=list(members))
            for score, members in df.groupby("relevance", sort=False)["phrase"]
        ]
        groups.sort(key=lambda g: g.score, reverse=True)
        return groups

    @staticmethod
    def _build_ranking_df(groups: List[ScoreGroup]) -> pd.DataFrame:
        rows = [
            {
                "rank": rank,
                "relevance": group.score,
                "phrase": phrase,
                "n_words": len(phrase.split()),
                "position": position,
            }
            for rank, group in enumerate(groups, start=1)
            for position, phrase in enumerate(group.phrases)
        ]
        return pd.DataFrame(
            rows, columns=["rank", "relevance", "phrase", "n_words", "position"]
        )
