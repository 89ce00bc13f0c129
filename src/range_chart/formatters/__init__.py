"""Output formatting for terminal and tables."""

from range_chart.formatters.text import TextFormatter
from range_chart.formatters.table import TableFormatter

__all__ = ["TextFormatter", "TableFormatter"]
