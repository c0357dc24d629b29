"""
Summary generation components.

Title extraction, directory completion, traversal and rendering of the
mdBook SUMMARY.md navigation index.
"""

from .title_extractor import TitleExtractor
from .tree_completer import TreeCompleter
from .entry_collector import EntryCollector
from .summary_renderer import SummaryRenderer

__all__ = [
    'TitleExtractor',
    'TreeCompleter',
    'EntryCollector',
    'SummaryRenderer',
]
