"""
Table module for COPD PRS Lookup.
Projects matched variant records into display tables for HTML and the console.
"""

import html
import math
from numbers import Integral, Real
from typing import Any, List, Sequence

import pandas as pd
from rich.table import Table

from copd_prs.models import QueryResult, VariantRecord


def format_cell(value: Any) -> str:
    """
    Format a field value for display.

    Non-integer numbers are shown with 4 decimal places; everything else is
    shown as-is.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Integral):
        return str(value)
    if isinstance(value, Real):
        number = float(value)
        if math.isfinite(number) and number.is_integer():
            return str(int(number))
        if math.isfinite(number):
            return f"{number:.4f}"
        return str(number)
    return str(value)


def table_columns(records: Sequence[VariantRecord]) -> List[str]:
    """Column headers, taken from the first record's fields."""
    if not records:
        return []
    return list(records[0].columns)


def build_table(records: Sequence[VariantRecord]) -> pd.DataFrame:
    """
    Build the display table for a set of matched records.

    Args:
        records: Matched records in store order

    Returns:
        DataFrame of formatted strings, one row per record, columns from the
        first record. Fields a record lacks are left blank.
    """
    columns = table_columns(records)
    rows = [
        [format_cell(record.get(column)) if column in record.columns else "" for column in columns]
        for record in records
    ]
    return pd.DataFrame(rows, columns=columns)


def render_html_table(records: Sequence[VariantRecord]) -> str:
    """Render matched records as an HTML gene table."""
    frame = build_table(records)

    parts = ["<table class='gene-table'><tr>"]
    for column in frame.columns:
        parts.append(f"<th>{html.escape(str(column))}</th>")
    parts.append("</tr>")

    for row in frame.itertuples(index=False, name=None):
        parts.append("<tr>")
        for value in row:
            parts.append(f"<td>{html.escape(value)}</td>")
        parts.append("</tr>")

    parts.append("</table>")
    return "".join(parts)


def render_console_table(result: QueryResult) -> Table:
    """Build a rich table for a lookup result."""
    frame = build_table(result.matched_records)

    title = f"{result.resolved_gene_name} variants"
    if result.via_snp:
        title += f" (via {result.query})"
    table = Table(title=title, show_lines=False)

    for column in frame.columns:
        justify = "right" if column == "Effect Size (Beta)" else "left"
        table.add_column(str(column), justify=justify)

    for row in frame.itertuples(index=False, name=None):
        table.add_row(*row)

    return table
