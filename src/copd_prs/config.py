"""
Configuration module for COPD PRS Lookup.
Holds dataset constants, score thresholds and the runtime configuration object.
"""

from pathlib import Path
from typing import Optional

from copd_prs.exceptions import ConfigurationError

# Dataset shipped alongside the lookup page
DEFAULT_DATA_SOURCE = "copd_data.json"

# Source field names
GENE_NAME_KEY = "Gene Name"
SNP_ID_KEY = "SNP ID"
EFFECT_SIZE_KEY = "Effect Size (Beta)"

# Placeholder beta for records without an effect size
DEFAULT_EFFECT_SIZE = 0.2

# Bucket thresholds: Low < 0.5 <= Medium < 1.0 <= High
LOW_THRESHOLD = 0.5
HIGH_THRESHOLD = 1.0

BUCKET_LABELS = ("Low", "Medium", "High")
BUCKET_COLORS = ("green", "orange", "red")

# Prefixes that mark a query as a SNP identifier. "R S" is accepted as well
# as "RS" for compatibility with the lookup page.
SNP_PREFIXES = ("RS", "R S")

DEFAULT_TIMEOUT = 30.0
DEFAULT_OUTPUT_DIR = "output"


class LookupConfig:
    """Runtime configuration for a lookup session."""

    def __init__(
        self,
        data_source: str = DEFAULT_DATA_SOURCE,
        output_dir: Path = Path(DEFAULT_OUTPUT_DIR),
        timeout: float = DEFAULT_TIMEOUT,
        default_beta: float = DEFAULT_EFFECT_SIZE,
        write_report: bool = True,
        save_chart: bool = False,
        open_browser: bool = False,
    ):
        """
        Initialize and validate the configuration.

        Args:
            data_source: Local path or HTTP(S) URL of the variant JSON dataset
            output_dir: Directory for HTML reports and saved charts
            timeout: Request timeout in seconds for remote data sources
            default_beta: Effect size used when a record has none
            write_report: Whether to write an HTML report per query
            save_chart: Whether to save the PRS chart next to the report
            open_browser: Whether to open generated reports in a browser
        """
        if not data_source or not str(data_source).strip():
            raise ConfigurationError("Data source must not be empty")
        if timeout is None or timeout <= 0:
            raise ConfigurationError("Timeout must be positive", details=str(timeout))
        if default_beta is None or default_beta < 0:
            raise ConfigurationError("Default effect size must not be negative", details=str(default_beta))

        self.data_source = str(data_source).strip()
        self.output_dir = Path(output_dir)
        self.timeout = float(timeout)
        self.default_beta = float(default_beta)
        self.write_report = write_report
        self.save_chart = save_chart
        self.open_browser = open_browser

    @classmethod
    def from_args(cls, args) -> "LookupConfig":
        """
        Build a configuration from a parsed CLI namespace.

        Args:
            args: Namespace produced by ``copd_prs.cli.parse_args``

        Returns:
            LookupConfig instance
        """
        return cls(
            data_source=getattr(args, "data_source", DEFAULT_DATA_SOURCE),
            output_dir=getattr(args, "output_dir", Path(DEFAULT_OUTPUT_DIR)),
            timeout=getattr(args, "timeout", DEFAULT_TIMEOUT),
            default_beta=getattr(args, "default_beta", DEFAULT_EFFECT_SIZE),
            write_report=not getattr(args, "no_report", False),
            save_chart=getattr(args, "save_chart", False),
            open_browser=getattr(args, "open_browser", False),
        )

    @property
    def source_name(self) -> str:
        """Short display name of the data source (file name or last URL segment)."""
        name = self.data_source.rstrip("/").split("/")[-1]
        return name or self.data_source

    def __repr__(self):
        return (
            f"LookupConfig(data_source={self.data_source!r}, output_dir={str(self.output_dir)!r}, "
            f"timeout={self.timeout}, default_beta={self.default_beta})"
        )
