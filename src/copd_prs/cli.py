"""
Command-line interface module for COPD PRS Lookup.
Handles argument parsing and configuration.
"""

import argparse
import sys
from pathlib import Path

from copd_prs.config import DEFAULT_DATA_SOURCE, DEFAULT_EFFECT_SIZE, DEFAULT_OUTPUT_DIR, DEFAULT_TIMEOUT
from copd_prs.workflow import run_lookup_workflow


def parse_args(argv=None):
    """
    Parse command-line arguments for COPD PRS Lookup.

    Args:
        argv: Argument list. Defaults to sys.argv[1:].

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(description="COPD PRS Lookup: gene / SNP variant table and PRS bucket")

    # Query arguments
    parser.add_argument("queries", nargs="*",
                        help="Gene names or SNP IDs (rs...) to look up")
    parser.add_argument("--interactive", "-i", action="store_true",
                        help="Prompt for queries until 'quit'")

    # Data arguments
    parser.add_argument("--data-source", type=str, default=DEFAULT_DATA_SOURCE,
                        help="Path or HTTP(S) URL of the variant JSON dataset")
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT,
                        help="Request timeout in seconds for remote data sources")
    parser.add_argument("--default-beta", type=float, default=DEFAULT_EFFECT_SIZE,
                        help="Effect size used for variants without one")

    # Output options
    parser.add_argument("--output-dir", type=str, default=DEFAULT_OUTPUT_DIR,
                        help="Output directory for reports and charts")
    parser.add_argument("--no-report", action="store_true",
                        help="Skip HTML report generation")
    parser.add_argument("--save-chart", action="store_true",
                        help="Save the PRS chart as a standalone HTML file")
    parser.add_argument("--open-browser", action="store_true",
                        help="Automatically open reports in browser")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")

    # Parse arguments
    args = parser.parse_args(argv)

    # Convert string paths to Path objects
    args.output_dir = Path(args.output_dir)

    return args


def main(argv=None):
    """Console script entry point."""
    return run_lookup_workflow(parse_args(argv))


if __name__ == "__main__":
    sys.exit(main())
