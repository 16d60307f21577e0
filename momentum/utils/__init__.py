"""Utility functions for momentum."""

from momentum.utils.date_parser import ParsedDate, parse_date
from momentum.utils.logging import configure_logging

__all__ = ["ParsedDate", "parse_date", "configure_logging"]
