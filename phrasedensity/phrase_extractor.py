"""
phrase_extractor.py

PhraseExtractor: sliding-window n-gram extraction with per-fragment
relevance weights.

Main features
-------------
- ASCII tokenization: text is lowercased and split on every run of
  characters outside ``a-z`` (digits, punctuation, whitespace and any
  non-ASCII letter all act as separators).
- Every contiguous window of 2..``max_words`` tokens becomes a candidate
  phrase; candidates of 4 characters or fewer are dropped.
- Each kept occurrence adds the fragment weight to the phrase, so a phrase
  repeated inside one fragment accumulates within that fragment.
- Optional PhraseOccurrence metadata for each kept window (source,
  window length, token position, weight).

Quick usage
-----------
    from phrasedensity.phrase_extractor import PhraseExtractor

    extractor = PhraseExtractor()
    scores = extractor.extract("the Quick quick fox", max_words=2, weight=1.0)

    print(scores.most_common(3))
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterator, List, Tuple
import re


# Minimum number of words in an n-gram
MIN_WORDS = 2

# A phrase must be strictly longer than this many characters
MIN_PHRASE_LEN = 4

_SEPARATOR_RE = re.compile(r"[^a-z]+")
_WHITESPACE_RE = re.compile(r"\s+")


@dataclass
class PhraseOccurrence:
    phrase: str        # normalized phrase (the ranking key)
    source: str        # "url", "title", "meta", "h1".."h4", "body" or caller-defined
    n_words: int       # window length
    position: int      # index of the first token of the window
    weight: float      # relevance contributed by this occurrence


def tokenize(text: str) -> List[str]:
    """
    Lowercase ``text`` and split it into runs of ASCII letters.

    Separator runs at either end of the string do not produce empty tokens.

    Example
    -------
        tokenize("Hello, World 2024!") -> ["hello", "world"]
    """
    if not text:
        return []
    return [tok for tok in _SEPARATOR_RE.split(text.lower()) if tok]


def normalize_phrase(phrase: str) -> str:
    """Trim and collapse internal whitespace runs to a single space."""
    return _WHITESPACE_RE.sub(" ", phrase.strip())


# ---------------------------------------------------------------------------
# ---------- Main PhraseExtractor class – weighted n-gram extraction ----------
# ---------------------------------------------------------------------------


class PhraseExtractor:
    """
    Weighted n-gram extraction for one text fragment at a time.

    This class is responsible for:
      * Tokenizing a fragment into lowercase ASCII words
      * Enumerating all contiguous word windows of length 2..max_words
      * Filtering out phrases that are too short to be meaningful
      * Accumulating the fragment weight per phrase occurrence

    The output of :meth:`extract` is a fresh ``Counter`` from
    phrase → weight which can be merged directly by :class:`ScoreAggregator`.

    The extractor holds no state between calls; the same instance can be
    used for every fragment of a run.
    """

    def __init__(
        self,
        min_words: int = MIN_WORDS,
        min_phrase_len: int = MIN_PHRASE_LEN,
    ) -> None:
        """
        Parameters
        ----------
        min_words:
            Shortest window considered. Must be at least 2.
        min_phrase_len:
            Phrases must be strictly longer than this many characters.
        """
        if min_words < MIN_WORDS:
            raise ValueError(f"min_words must be >= {MIN_WORDS}")
        if min_phrase_len < 0:
            raise ValueError("min_phrase_len must be >= 0")

        self.min_words = min_words
        self.min_phrase_len = min_phrase_len

    def extract(self, text: str, max_words: int, weight: float) -> Counter:
        """
        Extract weighted phrases from a single fragment.

        Parameters
        ----------
        text:
            Any string; may be empty.
        max_words:
            Longest window, in words. Values below ``min_words`` yield an
            empty result.
        weight:
            Relevance added per kept occurrence. Zero and negative values
            are propagated as-is.

        Returns
        -------
        Counter
            Phrase → accumulated weight for this fragment alone.
        """
        phrases: Counter = Counter()
        for phrase, _k, _i in self._iter_windows(tokenize(text), max_words):
            phrases[phrase] += weight
        return phrases

    def extract_occurrences(
        self,
        text: str,
        max_words: int,
        weight: float,
        source: str = "",
    ) -> List[PhraseOccurrence]:
        """
        Same windows as :meth:`extract`, returned one record per occurrence.

        Records are ordered by window length, then by start position. Summing
        ``weight`` per ``phrase`` reproduces :meth:`extract`.
        """
        return [
            PhraseOccurrence(
                phrase=phrase,
                source=source,
                n_words=k,
                position=i,
                weight=weight,
            )
            for phrase, k, i in self._iter_windows(tokenize(text), max_words)
        ]

    # -------------------------
    # Window enumeration
    # -------------------------
    def _iter_windows(
        self, words: List[str], max_words: int
    ) -> Iterator[Tuple[str, int, int]]:
        """Yield ``(phrase, k, i)`` for every window that passes the length filter."""
        for k in range(self.min_words, max_words + 1):
            for i in range(len(words) - k + 1):
                phrase = normalize_phrase(" ".join(words[i : i + k]))
                if len(phrase) > self.min_phrase_len:
                    yield phrase, k, i
