"""
report.py

Plain-text rendering of a RankingResult for the console.
"""

from __future__ import annotations

from typing import List

from .ranker import RankingResult, format_keywords


HEADER = "Rank\tRelevance\tKeywords"
RULE = "----\t---------\t--------"

FOOTNOTES = (
    "- Higher the rank, the most relevant is the keyword\n"
    "- Relevance is relative\n"
    "- The list of keywords are comma separated"
)

NO_KEYWORDS_MESSAGE = "No keywords found."


def format_relevance(value: float) -> str:
    """
    Three-decimal relevance without a leading zero below one.

    ``3.5`` → ``"3.500"``, ``0.25`` → ``".250"``.
    """
    text = f"{abs(value):.3f}"
    if text.startswith("0."):
        text = text[1:]
    if value < 0 and text.strip("0.") != "":
        text = "-" + text
    return text


def render_ranking(result: RankingResult) -> str:
    """
    Rank / Relevance / Keywords table followed by the reading notes.

    An empty ranking renders as :data:`NO_KEYWORDS_MESSAGE`.
    """
    if result.is_empty:
        return NO_KEYWORDS_MESSAGE

    lines: List[str] = [HEADER, RULE]
    for rank, group in enumerate(result.groups, start=1):
        lines.append(
            f"{rank}\t{format_relevance(group.score)}\t\t{format_keywords(group.phrases)}"
        )
    return "\n".join(lines) + "\n\n\n" + FOOTNOTES
