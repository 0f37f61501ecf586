"""
Unit tests for the reporting module.
"""

from unittest.mock import patch

import pytest

from copd_prs.exceptions import ReportingError
from copd_prs.reporting import generate_html_report, render_report
from copd_prs.session import LookupSession


class TestHtmlReport:
    """Test HTML report generation."""

    def test_report_with_table_and_chart(self, loaded_store, output_dir):
        outcome = LookupSession(store=loaded_store).search("ABC")
        report_path = generate_html_report(outcome, output_dir=output_dir, source="copd_data.json")

        assert report_path.exists()
        assert report_path.name.startswith("prs_report_ABC_")
        content = report_path.read_text(encoding="utf-8")
        assert "<table class='gene-table'>" in content
        assert "0.5000" in content
        assert "Medium" in content
        assert "copd_data.json" in content
        assert "plotly" in content.lower()

    def test_report_for_error(self, loaded_store, output_dir):
        outcome = LookupSession(store=loaded_store).search("rs000")
        report_path = generate_html_report(outcome, output_dir=output_dir)

        content = report_path.read_text(encoding="utf-8")
        assert "SNP ID RS000 not found in the database." in content
        assert "gene-table" not in content.split("</style>")[1]

    def test_report_placeholder(self, loaded_store):
        outcome = LookupSession(store=loaded_store).search("ZERO")
        content = render_report(outcome)

        assert "No PRS data available for ZERO" in content

    def test_unsafe_characters_in_filename(self, loaded_store, output_dir):
        outcome = LookupSession(store=loaded_store).search("../../etc")
        report_path = generate_html_report(outcome, output_dir=output_dir)

        assert report_path.parent == output_dir
        assert "/" not in report_path.name.replace("prs_report_", "")

    def test_write_failure(self, loaded_store, output_dir):
        outcome = LookupSession(store=loaded_store).search("ABC")
        with patch("copd_prs.reporting.open", side_effect=PermissionError("read-only"), create=True):
            with pytest.raises(ReportingError):
                generate_html_report(outcome, output_dir=output_dir)
