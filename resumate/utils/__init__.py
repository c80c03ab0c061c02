"""
Shared utilities for resumate.

Common functionality used across contexts:
- Logger setup with provenance tracking
- Timestamps for session directories
"""

from resumate.utils.timestamp import now

__all__ = ["now"]
