"""
Reporting module for COPD PRS Lookup.
Writes a standalone HTML page for a search: gene table and PRS chart, or the
error message / placeholder the lookup page would show.
"""

import time
import logging
from pathlib import Path
from typing import Optional

import plotly.io as pio
from jinja2 import Template

from copd_prs.config import DEFAULT_EFFECT_SIZE
from copd_prs.exceptions import ReportingError
from copd_prs.session import SearchOutcome

# Configure logging
log = logging.getLogger("copd-prs")

REPORT_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>COPD PRS Lookup - {{ title }}</title>
    <style>
        body {
            font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
            margin: 0;
            padding: 20px;
            background-color: #f8f9fa;
        }
        .container {
            max-width: 1100px;
            margin: 0 auto;
            background-color: white;
            padding: 30px;
            border-radius: 10px;
            box-shadow: 0 0 20px rgba(0,0,0,0.1);
        }
        h1 {
            color: #2c3e50;
            border-bottom: 2px solid #3498db;
            padding-bottom: 10px;
        }
        .error { color: red; }
        .summary span { margin-right: 24px; }
        .table-container { overflow-x: auto; margin-top: 20px; }
        .gene-table { width: 100%; border-collapse: collapse; }
        .gene-table th, .gene-table td {
            padding: 8px 12px;
            border: 1px solid #dee2e6;
            text-align: left;
        }
        .gene-table th { background-color: #e9ecef; }
        .plot-container {
            margin: 30px 0;
            border: 1px solid #e0e0e0;
            border-radius: 10px;
            padding: 20px;
        }
        .placeholder {
            display: flex;
            align-items: center;
            justify-content: center;
            min-height: 200px;
            color: #6c757d;
        }
        .footer { margin-top: 30px; color: #6c757d; font-size: 0.9em; }
    </style>
</head>
<body>
    <div class="container">
        <h1>COPD PRS Lookup</h1>
        <p>Query: <strong>{{ query if query else "(empty)" }}</strong></p>

        {% if message %}
        <p class="error">{{ message }}</p>
        {% endif %}

        {% if result %}
        <div class="summary">
            <span>Gene: <strong>{{ result.resolved_gene_name }}</strong></span>
            <span>Variants: <strong>{{ result.record_count }}</strong></span>
            <span>Total PRS Score: <strong>{{ "%.4f"|format(result.prs_score) }}</strong></span>
            <span>Bucket: <strong>{{ result.bucket.value }}</strong></span>
        </div>
        <div class="table-container">
            {{ table_html | safe }}
        </div>
        {% endif %}

        <div class="plot-container">
            {% if chart_html %}
            {{ chart_html | safe }}
            {% else %}
            <div class="placeholder"><p>{{ placeholder_text }}</p></div>
            {% endif %}
        </div>

        <div class="footer">
            <p>Data source: {{ source }} | Generated on {{ generated_at }}</p>
            <p>The PRS shown is the sum of per-variant effect sizes; variants without an
            effect size count as {{ default_beta }}. It is not a validated risk score.</p>
        </div>
    </div>
</body>
</html>
"""


def render_report(outcome: SearchOutcome, source: Optional[str] = None, default_beta: float = DEFAULT_EFFECT_SIZE) -> str:
    """
    Render the HTML page for a search outcome.

    Args:
        outcome: Search outcome from LookupSession.search
        source: Data source shown in the footer
        default_beta: Effect size assumed for variants without one

    Returns:
        HTML document as a string
    """
    chart_html = None
    if outcome.chart is not None:
        try:
            chart_html = pio.to_html(outcome.chart, full_html=False, include_plotlyjs="cdn")
        except Exception as e:
            log.warning(f"Failed to convert PRS chart to HTML: {e}")
            chart_html = "<p>Error generating plot.</p>"

    placeholder_text = outcome.placeholder_text
    if chart_html is None and not placeholder_text:
        placeholder_text = "No PRS data available"

    template = Template(REPORT_TEMPLATE)
    return template.render(
        title=outcome.label,
        query=outcome.query,
        message=outcome.message,
        result=outcome.result,
        table_html=outcome.table_html,
        chart_html=chart_html,
        placeholder_text=placeholder_text,
        source=source or "N/A",
        default_beta=default_beta,
        generated_at=time.strftime("%Y-%m-%d %H:%M:%S"),
    )


def generate_html_report(
    outcome: SearchOutcome,
    output_dir=".",
    source: Optional[str] = None,
    default_beta: float = DEFAULT_EFFECT_SIZE,
) -> Path:
    """
    Write the HTML page for a search outcome.

    Args:
        outcome: Search outcome from LookupSession.search
        output_dir: Directory to save the report
        source: Data source shown in the footer
        default_beta: Effect size assumed for variants without one

    Returns:
        Path to the generated HTML report
    """
    output_dir = Path(output_dir)
    timestamp = time.strftime("%Y%m%d-%H%M%S")
    report_path = output_dir / f"prs_report_{outcome.file_label}_{timestamp}.html"

    log.info(f"Generating HTML report: {report_path}")
    html_content = render_report(outcome, source=source, default_beta=default_beta)

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        with open(report_path, "w", encoding="utf-8") as f:
            f.write(html_content)
    except OSError as e:
        raise ReportingError(f"Could not write report {report_path}", details=str(e)) from e

    log.info(f"HTML report generated successfully: {report_path}")
    return report_path
