"""Tests for charts - slice derivation and the pie figure."""

import plotly.graph_objects as go

from charts import SLICE_COLORS, pie_figure, to_chart_slices
from roaster import Stats


class TestChartSlices:
    def test_fresh_stats(self):
        assert to_chart_slices(Stats()) == [
            {"label": "Generated", "value": 0},
            {"label": "Saved", "value": 0},
        ]

    def test_follows_stats(self):
        slices = to_chart_slices(Stats(generated=11, saved=2, streak=4, best_streak=9))
        assert [s["value"] for s in slices] == [11, 2]


class TestPieFigure:
    def test_single_pie_trace(self):
        fig = pie_figure(Stats(generated=5, saved=1))
        assert isinstance(fig, go.Figure)
        assert len(fig.data) == 1
        pie = fig.data[0]
        assert list(pie.labels) == ["Generated", "Saved"]
        assert list(pie.values) == [5, 1]
        assert tuple(pie.marker.colors) == SLICE_COLORS

    def test_transparent_background_and_no_legend(self):
        layout = pie_figure(Stats()).layout
        assert layout.paper_bgcolor == "rgba(0,0,0,0)"
        assert layout.plot_bgcolor == "rgba(0,0,0,0)"
        assert layout.showlegend is False

    def test_hover_shows_label_and_value(self):
        pie = pie_figure(Stats(generated=3, saved=1)).data[0]
        assert pie.hovertemplate == "%{label}: %{value}<extra></extra>"
        assert pie.textinfo == "none"

    def test_height(self):
        assert pie_figure(Stats(), height=320).layout.height == 320
