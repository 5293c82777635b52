"""
Shared utilities for SCRIBE.

Common functionality used across contexts:
- Logger setup
- Timestamp and date formatting
"""

from scribe.utils.timestamp import format_date, now

__all__ = ["format_date", "now"]
