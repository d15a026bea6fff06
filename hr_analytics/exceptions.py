"""Exceptions for operational pipeline failures.

Data-quality problems are reported as data, not raised; these cover
inputs the pipeline cannot process at all.
"""

from typing import Any


class PipelineError(Exception):
    """Base exception for all pipeline errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class IngestError(PipelineError):
    """Raised when a source table cannot be loaded into its expected shape."""

    def __init__(self, message: str, table_name: str | None = None, **kwargs):
        details = kwargs.pop("details", {})
        if table_name:
            details["table_name"] = table_name
        super().__init__(message, details=details)


class QualityGateError(PipelineError):
    """Raised when the output quality gate fails and is configured to stop the run."""

    def __init__(self, message: str, failed_tables: list[str] | None = None, **kwargs):
        details = kwargs.pop("details", {})
        if failed_tables:
            details["failed_tables"] = failed_tables
        super().__init__(message, details=details)
