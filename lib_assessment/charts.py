"""Plotly figures for the four trait percentages."""

from __future__ import annotations

import plotly.graph_objects as go  # type: ignore[import-untyped]

from lib_assessment.engine.scorer import DetailedScores


# Spoke order of the radar chart.
RADAR_ORDER: tuple[str, ...] = ("extroversion", "thinking", "feeling", "introversion")
BAR_ORDER: tuple[str, ...] = ("extroversion", "introversion", "thinking", "feeling")

TRAIT_COLORS: dict[str, str] = {
    "extroversion": "#3B82F6",
    "introversion": "#8B5CF6",
    "thinking": "#10B981",
    "feeling": "#F59E0B",
}


def _label(trait: str) -> str:
    return trait.capitalize()


def radar_figure(scores: DetailedScores, personality_type: str = "") -> go.Figure:
    values = [getattr(scores, t) for t in RADAR_ORDER]
    labels = [_label(t) for t in RADAR_ORDER]
    fig = go.Figure(go.Scatterpolar(
        r=[*values, values[0]],
        theta=[*labels, labels[0]],
        fill="toself",
        name=personality_type or "Score",
        line_color="#8B5CF6",
    ))
    fig.update_layout(
        polar={"radialaxis": {"visible": True, "range": [0, 100]}},
        showlegend=False,
        height=380,
        margin={"t": 60, "b": 30},
    )
    if personality_type:
        fig.update_layout(title=f"Personality Profile: {personality_type}")
    return fig


def bar_figure(scores: DetailedScores) -> go.Figure:
    fig = go.Figure(go.Bar(
        x=[_label(t) for t in BAR_ORDER],
        y=[getattr(scores, t) for t in BAR_ORDER],
        marker_color=[TRAIT_COLORS[t] for t in BAR_ORDER],
        text=[f"{getattr(scores, t)}%" for t in BAR_ORDER],
        textposition="outside",
    ))
    fig.update_layout(
        yaxis={"range": [0, 110], "title": "Score (%)"},
        height=380,
        margin={"t": 30, "b": 30},
    )
    return fig
