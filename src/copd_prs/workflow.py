"""
Workflow module for COPD PRS Lookup.
Handles logging set-up, the start-up data load and the query loop.
"""

import logging
import webbrowser
from typing import Iterable, List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.prompt import Prompt

from copd_prs.config import LookupConfig
from copd_prs.exceptions import ConfigurationError, ReportingError, VisualizationError
from copd_prs.reporting import generate_html_report
from copd_prs.session import LookupSession, SearchOutcome
from copd_prs.table import render_console_table
from copd_prs.visualization import save_chart

# Configure logging
log = logging.getLogger("copd-prs")
console = Console()

EXIT_OK = 0
EXIT_QUERY_FAILED = 1
EXIT_LOAD_FAILED = 2

QUIT_WORDS = {"quit", "exit", "q"}


def setup_logging(verbose: bool = False) -> None:
    """Route the copd-prs logger through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, console=console)],
    )
    log.setLevel(logging.DEBUG if verbose else logging.INFO)


def print_configuration(config: LookupConfig) -> None:
    """
    Print configuration information.

    Args:
        config: LookupConfig instance
    """
    console.print("[bold]COPD PRS Lookup[/]")
    console.print("Configuration:")
    console.print(f"  Data Source: {config.data_source}")
    console.print(f"  Default Effect Size: {config.default_beta}")
    console.print(f"  Output Directory: {config.output_dir}")
    console.print(f"  HTML Reports: {'Enabled' if config.write_report else 'Disabled'}")
    console.print("")


def display_outcome(outcome: SearchOutcome) -> None:
    """
    Print a search outcome to the console.

    Args:
        outcome: Search outcome from LookupSession.search
    """
    if not outcome.ok:
        console.print(f"[red]{outcome.message}[/]")
        return

    result = outcome.result
    console.print(render_console_table(result))
    console.print(
        f"Total PRS Score: [bold]{result.prs_score:.4f}[/]  "
        f"Bucket: [bold]{result.bucket.value}[/]  "
        f"Variants: {result.record_count}"
    )
    if outcome.chart is None:
        console.print(f"[yellow]{outcome.placeholder_text}[/]")


def write_outputs(outcome: SearchOutcome, config: LookupConfig) -> Optional[str]:
    """
    Write the HTML report and chart for an outcome as configured.

    Args:
        outcome: Search outcome
        config: LookupConfig instance

    Returns:
        Path of the written report, or None
    """
    report_path = None

    if config.save_chart and outcome.chart is not None:
        try:
            save_chart(outcome.chart, config.output_dir, f"prs_chart_{outcome.file_label}")
        except VisualizationError as e:
            log.error(f"Error saving chart: {e}")

    if config.write_report:
        try:
            report_path = generate_html_report(
                outcome,
                output_dir=config.output_dir,
                source=config.data_source,
                default_beta=config.default_beta,
            )
        except ReportingError as e:
            log.error(f"Error generating report: {e}")
            return None

        console.print(f"Report: {report_path}")
        if config.open_browser:
            webbrowser.open(f"file://{report_path.resolve()}")

    return str(report_path) if report_path else None


def run_queries(session: LookupSession, queries: Iterable[str]) -> List[SearchOutcome]:
    """
    Run queries in order, displaying and saving each outcome.

    Args:
        session: Loaded LookupSession
        queries: Raw query strings

    Returns:
        List of outcomes
    """
    outcomes = []
    for query in queries:
        outcome = session.search(query)
        display_outcome(outcome)
        write_outputs(outcome, session.config)
        outcomes.append(outcome)
    return outcomes


def interactive_loop(session: LookupSession) -> List[SearchOutcome]:
    """Prompt for queries until the user quits."""
    outcomes = []
    while True:
        try:
            raw = Prompt.ask("Gene Name or SNP ID", console=console, default="")
        except (EOFError, KeyboardInterrupt):
            console.print("")
            break
        if raw.strip().lower() in QUIT_WORDS:
            break
        outcomes.extend(run_queries(session, [raw]))
    return outcomes


def run_lookup_workflow(args) -> int:
    """
    Run the lookup workflow for parsed CLI arguments.

    Args:
        args: Namespace from copd_prs.cli.parse_args

    Returns:
        Process exit code
    """
    setup_logging(getattr(args, "verbose", False))

    try:
        config = LookupConfig.from_args(args)
    except ConfigurationError as e:
        log.error(f"Invalid configuration: {e}")
        return EXIT_LOAD_FAILED

    print_configuration(config)

    session = LookupSession(config)
    session.start()

    if not session.wait_until_loaded():
        console.print(f"[red]{session.result_message}[/]")
        return EXIT_LOAD_FAILED

    console.print(f"Loaded {len(session.store)} variant records from {config.source_name}")

    outcomes = run_queries(session, getattr(args, "queries", []) or [])
    if getattr(args, "interactive", False):
        outcomes.extend(interactive_loop(session))

    if any(not outcome.ok for outcome in outcomes):
        return EXIT_QUERY_FAILED
    return EXIT_OK
