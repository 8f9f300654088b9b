# ranking_viz.py

"""
ranking_viz.py

Visualization helpers for PhraseDensity.

This module is intentionally thin and UI-agnostic. It renders the ranked
phrases as a horizontal bar chart, one bar per phrase colored by rank.

The chart reads RankingResult.ranking_df and returns a Plotly Figure
object, so it can be used in notebooks, Streamlit, Dash, etc.
"""

from __future__ import annotations

from typing import Optional

import plotly.express as px
import plotly.graph_objects as go

from .ranker import RankingResult


# ---------------------------------------------------------------------
# Ranked phrases (one bar per phrase)
# ---------------------------------------------------------------------


def plot_ranking_bars(
    result: RankingResult,
    *,
    width: int = 800,
    height: Optional[int] = None,
    title: Optional[str] = None,
) -> go.Figure:
    """
    Plot one horizontal bar per ranked phrase, colored by rank.

    Parameters
    ----------
    result:
        Output of Ranker.rank() or KeywordDensityAnalyzer.analyze().
    width, height:
        Figure size in pixels. Height defaults to 30px per phrase.
    title:
        Optional title. If None, a default one is constructed.

    Returns
    -------
    plotly.graph_objects.Figure
        Bar chart, highest relevance on top.
    """
    df = result.ranking_df.copy()
    if df.empty:
        raise ValueError("RankingResult has no ranked phrases to plot.")

    df["rank_label"] = "Rank " + df["rank"].astype(str)
    # Plotly draws the first category at the bottom of a horizontal bar chart
    df = df.iloc[::-1]

    fig = px.bar(
        df,
        x="relevance",
        y="phrase",
        color="rank_label",
        orientation="h",
        hover_data={"rank": True, "relevance": ":.3f", "rank_label": False},
        labels={"relevance": "Relevance", "phrase": "Keyword", "rank_label": "Rank"},
        width=width,
        height=height or max(200, 30 * len(df) + 100),
    )

    fig.update_layout(
        title=title or f"Top {len(result.groups)} Keyword Ranks",
        plot_bgcolor="white",
        xaxis=dict(showgrid=True, gridcolor="rgb(204, 204, 204)"),
        yaxis=dict(showgrid=False),
        hoverlabel=dict(font_size=13),
    )
    return fig
