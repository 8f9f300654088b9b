"""
phrasedensity.smoke_test

Minimal end-to-end smoke test for PhraseDensity.

Usage (from your project root or any directory where the env is active):

    python -m phrasedensity.smoke_test

What it does:
- Builds a small in-memory ParsedDocument (no network access).
- Runs KeywordDensityAnalyzer over URL, title, meta, headings and body.
- Prints the ranked keyword table to stdout.
"""

from __future__ import annotations

from typing import Any, Dict

from .document_source import ParsedDocument
from .pipeline import KeywordDensityAnalyzer
from .report import render_ranking


def run_smoke_test(verbose: bool = True) -> Dict[str, Any]:
    """
    Run a small end-to-end test of the main pipeline.

    Returns
    -------
    result : dict
        A dictionary containing:
        - "document"     (ParsedDocument)
        - "ranking"      (RankingResult)
        - "occurrences"  (list of PhraseOccurrence)
    """
    document = ParsedDocument(
        url="https://travel.example.com/guides/ocean-view-hotels?ref=home",
        title="Ocean View Hotels | Seaside Travel Guide",
        meta_description=" Compare ocean view hotels and seaside travel deals.",
        headings={
            1: ["Ocean View Hotels"],
            2: ["Best seaside travel tips", "Ocean view rooms on a budget"],
            3: ["Booking your ocean view room"],
            4: [],
        },
        body=(
            "Ocean view hotels are the most requested rooms on the coast. "
            "Seaside travel is busiest in summer, so book ocean view rooms "
            "early. Our seaside travel guide lists ocean view hotels by price."
        ),
    )

    log = print if verbose else None
    if verbose:
        print("[smoke_test] Starting PhraseDensity smoke test...")

    analyzer = KeywordDensityAnalyzer(logger=log)
    ranking = analyzer.analyze(document, verbose=verbose)
    occurrences = analyzer.trace_occurrences(document)

    if verbose:
        print(
            f"[smoke_test] {len(occurrences)} phrase occurrences across "
            f"{ranking.config['num_fragments']} fragments."
        )
        print(render_ranking(ranking))
        print("[smoke_test] Smoke test completed successfully ✅")

    return {
        "document": document,
        "ranking": ranking,
        "occurrences": occurrences,
    }


def main() -> None:
    """
    CLI entrypoint for: python -m phrasedensity.smoke_test
    """
    run_smoke_test(verbose=True)


if __name__ == "__main__":
    main()
