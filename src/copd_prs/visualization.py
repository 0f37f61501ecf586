"""
Visualization module for COPD PRS Lookup.
Builds the Low/Medium/High PRS bar chart for a lookup result.
"""

import os
import logging
from typing import Dict, Iterable, Optional

import plotly.graph_objects as go

from copd_prs.config import BUCKET_COLORS, BUCKET_LABELS
from copd_prs.exceptions import VisualizationError
from copd_prs.models import QueryResult

# Configure logging
log = logging.getLogger("copd-prs")


def bucket_values(result: QueryResult) -> Dict[str, float]:
    """
    Spread a result's score over the three buckets.

    Only the result's own bucket carries the score; the other two are zero.
    """
    return {
        label: (result.prs_score if result.bucket.value == label else 0.0)
        for label in BUCKET_LABELS
    }


def has_chart_data(values: Dict[str, float]) -> bool:
    """Return True if any bucket has a positive value."""
    return any(value > 0 for value in values.values())


def no_data_message(gene_name: str) -> str:
    return f"No PRS data available for {gene_name}"


def build_prs_chart(result: QueryResult) -> Optional[go.Figure]:
    """
    Create the PRS distribution bar chart for a result.

    Args:
        result: Lookup result

    Returns:
        Plotly figure, or None when no bucket has data
    """
    values = bucket_values(result)
    if not has_chart_data(values):
        log.info(no_data_message(result.resolved_gene_name))
        return None

    fig = go.Figure(
        data=[
            go.Bar(
                x=list(BUCKET_LABELS),
                y=[values[label] for label in BUCKET_LABELS],
                name=f"PRS Distribution for {result.resolved_gene_name}",
                marker_color=list(BUCKET_COLORS),
            )
        ]
    )

    fig.update_layout(
        title=f"PRS Distribution for {result.resolved_gene_name}",
        showlegend=False,
        yaxis=dict(title="Total PRS Score", rangemode="tozero"),
        template="plotly_white",
    )
    return fig


def save_chart(fig: go.Figure, output_dir, filename: str, formats: Optional[Iterable[str]] = None):
    """
    Save a chart in one or more formats.

    Args:
        fig: Plotly figure
        output_dir: Directory to save the chart in
        filename: Base filename without extension
        formats: Formats to write (default: ['html']). png and svg need kaleido.

    Returns:
        List of written file paths
    """
    formats = list(formats) if formats else ["html"]
    os.makedirs(output_dir, exist_ok=True)

    written = []
    for fmt in formats:
        path = os.path.join(output_dir, f"{filename}.{fmt}")
        try:
            if fmt == "html":
                fig.write_html(path, include_plotlyjs="cdn")
            elif fmt == "json":
                fig.write_json(path)
            elif fmt in ("png", "svg"):
                fig.write_image(path)
            else:
                raise VisualizationError(f"Unsupported chart format: {fmt}")
        except VisualizationError:
            raise
        except Exception as e:
            raise VisualizationError(f"Failed to save chart as {fmt}", details=str(e)) from e
        written.append(path)

    log.info(f"Saved visualization: {filename} in formats: {formats}")
    return written
