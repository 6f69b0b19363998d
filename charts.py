# charts.py
from __future__ import annotations

from typing import Dict, List, Union

import plotly.graph_objects as go

from roaster import Stats

SLICE_COLORS = ("#FFD700", "#FF4500")  # gold, orange-red

Slice = Dict[str, Union[str, int]]


def to_chart_slices(stats: Stats) -> List[Slice]:
    return [
        {"label": "Generated", "value": stats.generated},
        {"label": "Saved", "value": stats.saved},
    ]


def pie_figure(stats: Stats, height: int = 200) -> go.Figure:
    """Generated-vs-saved pie, styled for the dark card it sits in."""
    slices = to_chart_slices(stats)
    fig = go.Figure(
        go.Pie(
            labels=[s["label"] for s in slices],
            values=[s["value"] for s in slices],
            marker=dict(colors=list(SLICE_COLORS)),
            textinfo="none",
            hovertemplate="%{label}: %{value}<extra></extra>",
            sort=False,
        )
    )
    fig.update_layout(
        height=height,
        margin=dict(l=8, r=8, t=8, b=8),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        showlegend=False,
    )
    return fig
