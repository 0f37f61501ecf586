"""
Unit tests for the visualization module.
"""

import os

import pytest

from copd_prs.exceptions import VisualizationError
from copd_prs.lookup import resolve_query
from copd_prs.visualization import bucket_values, build_prs_chart, has_chart_data, save_chart


class TestBucketValues:
    """Test spreading the score over the three buckets."""

    def test_only_result_bucket_is_non_zero(self, loaded_store):
        result = resolve_query("ABC", loaded_store)
        values = bucket_values(result)

        assert list(values) == ["Low", "Medium", "High"]
        assert values["Low"] == 0
        assert values["Medium"] == pytest.approx(0.5)
        assert values["High"] == 0

    def test_high(self, loaded_store):
        values = bucket_values(resolve_query("HHIP", loaded_store))
        assert values["High"] == pytest.approx(1.05)
        assert values["Low"] == values["Medium"] == 0

    def test_zero_score_has_no_chart_data(self, loaded_store):
        values = bucket_values(resolve_query("ZERO", loaded_store))
        assert not has_chart_data(values)


class TestBuildChart:
    """Test the plotly bar chart."""

    def test_chart_layout(self, loaded_store):
        fig = build_prs_chart(resolve_query("ABC", loaded_store))
        bar = fig.data[0]

        assert list(bar.x) == ["Low", "Medium", "High"]
        assert list(bar.y) == pytest.approx([0, 0.5, 0])
        assert list(bar.marker.color) == ["green", "orange", "red"]
        assert fig.layout.title.text == "PRS Distribution for ABC"
        assert fig.layout.yaxis.title.text == "Total PRS Score"
        assert fig.layout.showlegend is False

    def test_zero_score_suppresses_chart(self, loaded_store):
        assert build_prs_chart(resolve_query("ZERO", loaded_store)) is None


class TestSaveChart:
    """Test saving charts."""

    def test_save_html(self, loaded_store, tmp_path):
        fig = build_prs_chart(resolve_query("ABC", loaded_store))
        written = save_chart(fig, tmp_path, "prs_chart_ABC", formats=["html", "json"])

        assert len(written) == 2
        for path in written:
            assert os.path.exists(path)

    def test_unsupported_format(self, loaded_store, tmp_path):
        fig = build_prs_chart(resolve_query("ABC", loaded_store))
        with pytest.raises(VisualizationError):
            save_chart(fig, tmp_path, "prs_chart_ABC", formats=["gif"])
