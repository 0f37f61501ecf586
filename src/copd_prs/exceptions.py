"""
Exceptions module for COPD PRS Lookup.
Defines custom exception classes for better error handling.
"""


class CopdPrsError(Exception):
    """Base exception class for all COPD PRS Lookup errors."""

    def __init__(self, message="An error occurred in COPD PRS Lookup", details=None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self):
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class LoadError(CopdPrsError):
    """Exception raised when the variant dataset cannot be fetched or parsed."""

    def __init__(self, message="Error loading variant data", details=None):
        super().__init__(message, details)


class ConfigurationError(CopdPrsError):
    """Exception raised for errors related to configuration."""

    def __init__(self, message="Error with configuration", details=None):
        super().__init__(message, details)


class VisualizationError(CopdPrsError):
    """Exception raised for errors related to visualization."""

    def __init__(self, message="Error generating visualization", details=None):
        super().__init__(message, details)


class ReportingError(CopdPrsError):
    """Exception raised for errors related to report generation."""

    def __init__(self, message="Error generating report", details=None):
        super().__init__(message, details)


class QueryError(CopdPrsError):
    """Base class for user-input-level lookup errors. The user may retry with another query."""

    def __init__(self, message="Error resolving query", details=None):
        super().__init__(message, details)


class EmptyQueryError(QueryError):
    """Raised when the query is empty after trimming."""

    def __init__(self, message="Query is empty", details=None):
        super().__init__(message, details)


class DataUnavailableError(QueryError):
    """Raised when a query arrives before the variant data is ready."""

    def __init__(self, message="Variant data is not available", details=None):
        super().__init__(message, details)


class SnpNotFoundError(QueryError):
    """Raised when a SNP identifier is not present in the dataset."""

    def __init__(self, snp_id, details=None):
        self.snp_id = snp_id
        super().__init__(f"SNP ID {snp_id} not found", details)


class GeneNotFoundError(QueryError):
    """Raised when no record matches the requested gene."""

    def __init__(self, gene_name, details=None):
        self.gene_name = gene_name
        super().__init__(f"Gene {gene_name} not found", details)
