"""
Summary Rendering Component.

Sorts the collected entries and renders them as mdBook SUMMARY.md lines.
"""

from typing import Iterable, List

from ..core.constants import INDENT_UNIT, LIST_MARKER, SUMMARY_HEADER
from ..core.models import SummaryEntry
from ..utils.fs_utils import LineWriter


class SummaryRenderer:
    """
    Renders summary entries as a nested Markdown link list.
    
    Entries are ordered by their path components and indented by the
    number of directories above them.
    """
    
    @staticmethod
    def sort_entries(entries: Iterable[SummaryEntry]) -> List[SummaryEntry]:
        """
        Sort entries by path components, then title.
        
        Args:
            entries: Entries in any order
            
        Returns:
            New sorted list
        """
        return sorted(entries, key=SummaryEntry.sort_key)
    
    @staticmethod
    def render_line(entry: SummaryEntry) -> str:
        """
        Render one entry as a list item.
        
        Args:
            entry: Summary entry
            
        Returns:
            Line like "  - [Title](dir/page.md)"
        """
        indent = INDENT_UNIT * entry.depth
        return f"{indent}{LIST_MARKER} [{entry.title}]({entry.path.as_posix()})"
    
    @staticmethod
    def render_summary(entries: Iterable[SummaryEntry]) -> List[str]:
        """
        Render the complete summary.
        
        Args:
            entries: Collected entries
            
        Returns:
            Header line followed by one line per sorted entry
        """
        lines = [SUMMARY_HEADER]
        for entry in SummaryRenderer.sort_entries(entries):
            lines.append(SummaryRenderer.render_line(entry))
        return lines
    
    @staticmethod
    def write_summary(entries: Iterable[SummaryEntry], writer: LineWriter) -> int:
        """
        Write the rendered summary to an open LineWriter.
        
        Returns:
            Number of entry lines written (header excluded)
        """
        lines = SummaryRenderer.render_summary(entries)
        for line in lines:
            writer.write_line(line)
        return len(lines) - 1
