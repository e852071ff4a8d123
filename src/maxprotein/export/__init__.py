"""Output formatters."""

from maxprotein.export.formatters import (
    JSONFormatter,
    TableFormatter,
    TextFormatter,
    format_result,
)

__all__ = ["TableFormatter", "JSONFormatter", "TextFormatter", "format_result"]
