"""
Unit tests for the table module.
"""

import pytest
from rich.table import Table

from copd_prs.data_store import DataStore
from copd_prs.lookup import resolve_query
from copd_prs.table import build_table, format_cell, render_console_table, render_html_table


class TestFormatCell:
    """Test display formatting of field values."""

    @pytest.mark.parametrize("value,expected", [
        (0.123456, "0.1235"),
        (0.2, "0.2000"),
        (3, "3"),
        (3.0, "3"),
        (-1.5, "-1.5000"),
        ("rs1", "rs1"),
        (None, "null"),
        (True, "true"),
        (False, "false"),
    ])
    def test_format(self, value, expected):
        assert format_cell(value) == expected


class TestBuildTable:
    """Test the table projection."""

    def test_columns_come_from_first_record(self, loaded_store):
        result = resolve_query("ABC", loaded_store)
        frame = build_table(result.matched_records)

        assert list(frame.columns) == ["Gene Name", "SNP ID", "Effect Size (Beta)"]
        assert frame.values.tolist() == [
            ["ABC", "rs1", "0.3000"],
            ["ABC", "rs2", "0.2000"],
        ]

    def test_extra_fields_are_shown(self, loaded_store):
        result = resolve_query("HHIP", loaded_store)
        frame = build_table(result.matched_records)

        assert list(frame.columns) == ["Gene Name", "SNP ID", "Chromosome", "Effect Size (Beta)"]
        assert frame.iloc[0]["Chromosome"] == "4"
        assert frame.iloc[0]["Effect Size (Beta)"] == "0.6000"

    def test_missing_fields_are_blank(self):
        store = DataStore().replace([
            {"Gene Name": "G", "SNP ID": "rs1", "Tissue": "lung"},
            {"Gene Name": "G", "SNP ID": "rs2"},
        ])
        frame = build_table(store.records)

        assert list(frame.columns) == ["Gene Name", "SNP ID", "Tissue", "Effect Size (Beta)"]
        assert frame.iloc[1]["Tissue"] == ""

    def test_empty(self):
        frame = build_table([])
        assert frame.empty


class TestRenderers:
    """Test HTML and console renderers."""

    def test_html_table(self, loaded_store):
        result = resolve_query("ABC", loaded_store)
        html = render_html_table(result.matched_records)

        assert html.startswith("<table class='gene-table'>")
        assert "<th>Gene Name</th>" in html
        assert "<td>0.2000</td>" in html
        assert html.count("<tr>") == 3

    def test_html_is_escaped(self):
        store = DataStore().replace([{"Gene Name": "G", "SNP ID": "rs1", "Note": "<b>x</b>"}])
        html = render_html_table(store.records)

        assert "&lt;b&gt;x&lt;/b&gt;" in html
        assert "<b>x</b>" not in html

    def test_console_table(self, loaded_store):
        result = resolve_query("rs1", loaded_store)
        table = render_console_table(result)

        assert isinstance(table, Table)
        assert table.row_count == 2
        assert "ABC" in str(table.title)
        assert "RS1" in str(table.title)
