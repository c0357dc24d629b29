"""
mdsummary - mdBook SUMMARY.md generator.

Scans a documentation tree and writes the navigation index mdBook renders.
"""

from .config import Settings
from .core import SummaryEntry, SummaryError
from .entry_points import collect_entries, generate_summary

__version__ = "0.1.0"

__all__ = [
    'Settings',
    'SummaryEntry',
    'SummaryError',
    'collect_entries',
    'generate_summary',
]
