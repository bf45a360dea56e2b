"""
Shared utilities for dotbatch.

- Logger setup with provenance tracking
- Timestamp formatting
"""

from dotbatch.utils.timestamp import format_duration, now

__all__ = ["format_duration", "now"]
