"""dashboard.errors

Central error types to keep error handling consistent.

A chart whose columns cannot be inferred is not an error (the payload is None);
only loading failures are raised.
"""


class DashboardError(Exception):
    """Base dashboard error."""


class ConfigError(DashboardError):
    """Raised when required configuration is missing or invalid."""


class DataLoadError(DashboardError):
    """Raised when the CSV source cannot be fetched or parsed."""


class DataParseError(DataLoadError):
    """Raised when CSV text is malformed (ragged rows, bad quoting)."""
