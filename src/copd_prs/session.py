"""
Session module for COPD PRS Lookup.

A LookupSession plays the part of the lookup page: it owns the data store, the
current result message, table and chart, and turns each search into a
SearchOutcome the CLI and reports can display.
"""

import logging
import re
from concurrent.futures import Future
from typing import Optional

import plotly.graph_objects as go

from copd_prs.config import LookupConfig
from copd_prs.data_store import DataStore
from copd_prs.exceptions import (
    DataUnavailableError,
    EmptyQueryError,
    GeneNotFoundError,
    LoadError,
    QueryError,
    SnpNotFoundError,
)
from copd_prs.lookup import normalize_query, resolve_query
from copd_prs.models import QueryResult
from copd_prs.table import render_html_table
from copd_prs.visualization import build_prs_chart, no_data_message

# Configure logging
log = logging.getLogger("copd-prs")

INITIAL_PLACEHOLDER = "Enter a Gene Name or SNP ID to view PRS data"
SEARCHING_PLACEHOLDER = "Searching for PRS data..."


def safe_filename(label: str) -> str:
    """Reduce a label to characters that are safe in a single file name."""
    cleaned = re.sub(r"[^A-Za-z0-9_-]+", "_", label).strip("_")
    return cleaned or "query"


def load_error_message(source_name: str) -> str:
    return f"Error loading initial gene data ({source_name}). Check console for details."


def query_error_message(error: QueryError) -> str:
    """
    Map a query error to the message shown to the user.

    Args:
        error: Error raised by resolve_query

    Returns:
        User-facing message
    """
    if isinstance(error, EmptyQueryError):
        return "Please enter a Gene Name or SNP ID."
    if isinstance(error, DataUnavailableError):
        return "Data is unavailable. Please check the console for loading errors."
    if isinstance(error, SnpNotFoundError):
        return f"SNP ID {error.snp_id} not found in the database."
    if isinstance(error, GeneNotFoundError):
        return f"Gene {error.gene_name} not found."
    return error.message


class SearchOutcome:
    """Everything the presentation layer needs to show for one search."""

    def __init__(
        self,
        query: str,
        result: Optional[QueryResult] = None,
        error: Optional[QueryError] = None,
        message: Optional[str] = None,
        table_html: Optional[str] = None,
        chart: Optional[go.Figure] = None,
        placeholder_text: Optional[str] = None,
    ):
        self.query = query
        self.result = result
        self.error = error
        self.message = message
        self.table_html = table_html
        self.chart = chart
        self.placeholder_text = placeholder_text

    @property
    def ok(self) -> bool:
        return self.error is None and self.result is not None

    @property
    def label(self) -> str:
        """Gene name for successful searches, otherwise the query as typed."""
        if self.result is not None:
            return self.result.resolved_gene_name
        return self.query or "empty-query"

    @property
    def file_label(self) -> str:
        """Label reduced to a safe file name component."""
        return safe_filename(self.label)

    def __repr__(self):
        status = "ok" if self.ok else type(self.error).__name__
        return f"SearchOutcome(query={self.query!r}, status={status})"


class LookupSession:
    """Lookup page state: data store, result area, chart and placeholder."""

    def __init__(self, config: Optional[LookupConfig] = None, store: Optional[DataStore] = None):
        """
        Initialize a session.

        Args:
            config: Runtime configuration. Defaults to LookupConfig().
            store: Data store to search. A new empty store is created if None.
        """
        self.config = config or LookupConfig()
        self.store = store if store is not None else DataStore(default_beta=self.config.default_beta)

        self.result_message: Optional[str] = None
        self.table_html: Optional[str] = None
        self.chart: Optional[go.Figure] = None
        self.placeholder_text: Optional[str] = INITIAL_PLACEHOLDER
        self.last_outcome: Optional[SearchOutcome] = None
        self._load_future: Optional[Future] = None

    def start(self, source: Optional[str] = None) -> Future:
        """
        Begin loading the dataset in the background.

        Args:
            source: Data source override. Defaults to the configured source.

        Returns:
            Future for the load
        """
        source = source or self.config.data_source
        self._load_future = self.store.load_in_background(source, timeout=self.config.timeout)
        self._load_future.add_done_callback(self._on_load_done)
        return self._load_future

    def _on_load_done(self, future: Future) -> None:
        error = future.exception()
        if isinstance(error, LoadError):
            self.result_message = load_error_message(self.config.source_name)

    def wait_until_loaded(self, timeout: Optional[float] = None) -> bool:
        """
        Block until the background load finishes.

        Args:
            timeout: Seconds to wait, or None to wait indefinitely

        Returns:
            True if the store is ready, False if the load failed
        """
        if self._load_future is None:
            return self.store.is_ready()
        try:
            self._load_future.result(timeout=timeout)
        except LoadError:
            self.result_message = load_error_message(self.config.source_name)
            return False
        return self.store.is_ready()

    def _reset(self) -> None:
        self.result_message = None
        self.table_html = None
        self.chart = None
        self.placeholder_text = SEARCHING_PLACEHOLDER

    def search(self, raw_input: Optional[str]) -> SearchOutcome:
        """
        Run one lookup and update the session display state.

        Args:
            raw_input: Gene name or SNP id as typed

        Returns:
            SearchOutcome describing the table, chart or error to show
        """
        self._reset()
        query = normalize_query(raw_input)

        try:
            result = resolve_query(raw_input, self.store)
        except QueryError as e:
            log.debug(f"Query {query!r} failed: {e}")
            self.result_message = query_error_message(e)
            outcome = SearchOutcome(
                query=query,
                error=e,
                message=self.result_message,
                placeholder_text=self.placeholder_text,
            )
            self.last_outcome = outcome
            return outcome

        self.table_html = render_html_table(result.matched_records)
        self.result_message = None

        # A new figure per render; the previous chart is dropped, not updated
        self.chart = build_prs_chart(result)
        if self.chart is None:
            self.placeholder_text = no_data_message(result.resolved_gene_name)
        else:
            self.placeholder_text = None

        outcome = SearchOutcome(
            query=query,
            result=result,
            table_html=self.table_html,
            chart=self.chart,
            placeholder_text=self.placeholder_text,
        )
        self.last_outcome = outcome
        return outcome
