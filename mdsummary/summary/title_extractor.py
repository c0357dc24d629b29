"""
Title Extraction Component.

Responsible for resolving the title of a single document, either from its
file name or from the first line carrying the title marker.
"""

from pathlib import Path
from typing import Optional

from ..core.models import SummaryEntry
from ..utils.path_utils import relative_path, title_from_filename


class TitleExtractor:
    """
    Resolves document titles.
    
    Documents whose title cannot be resolved yield None and are left out
    of the summary.
    """
    
    @staticmethod
    def strip_marker(line: str, marker: str) -> str:
        """
        Remove every leading occurrence of marker from line.
        
        Args:
            line: Trimmed line starting with marker
            marker: Title marker (non-empty)
            
        Returns:
            Remainder of the line, not re-trimmed
        """
        while marker and line.startswith(marker):
            line = line[len(marker):]
        return line
    
    @staticmethod
    def extract_title(path, marker: str) -> Optional[str]:
        """
        Read the title from a document's content.
        
        Args:
            path: Document path
            marker: Prefix identifying the title line (e.g. "# ")
            
        Returns:
            Title from the first matching line, or None if the file
            cannot be read or no line matches
        """
        try:
            with open(path, 'r', encoding='utf-8', errors='replace') as f:
                for line in f:
                    trimmed = line.strip()
                    if not trimmed.startswith(marker):
                        continue
                    
                    title = TitleExtractor.strip_marker(trimmed, marker)
                    if title:
                        return title
        except OSError:
            return None
        
        return None
    
    @staticmethod
    def find_entry(
        path,
        base_path,
        marker: str,
        title_from_name: bool = False
    ) -> Optional[SummaryEntry]:
        """
        Build the summary entry for one document.
        
        Args:
            path: Document path (under base_path)
            base_path: Documentation root
            marker: Title marker used when reading content
            title_from_name: Use the file name instead of the content
            
        Returns:
            SummaryEntry, or None if the document has no title
            
        Raises:
            NotABasePathError: If base_path is not a prefix of path
        """
        if title_from_name:
            title = title_from_filename(path)
        else:
            title = TitleExtractor.extract_title(path, marker)
            if title is None:
                return None
        
        return SummaryEntry(path=relative_path(Path(path), base_path), title=title)
