"""
Tree Completion Component.

Collects the entries of a single directory and synthesizes an index entry
for directories without a README.md, so every directory of the book has a
navigable landing page.
"""

from typing import List

from ..core.constants import INDEX_FILE_NAME
from ..core.models import SummaryEntry
from ..utils.fs_utils import PathLister
from ..utils.path_utils import is_summary_file, relative_path
from .title_extractor import TitleExtractor


class TreeCompleter:
    """
    Handles one directory of the documentation tree.
    
    Appends an entry for each titled document directly inside the directory,
    plus one placeholder README.md entry when the directory has none.
    """
    
    def __init__(self, path_lister: PathLister, logger=None):
        """
        Initialize tree completer.
        
        Args:
            path_lister: Glob capability used to list the directory
            logger: Optional logger
        """
        self.path_lister = path_lister
        self.logger = logger
        self.extractor = TitleExtractor()
    
    def handle_directory(
        self,
        directory,
        base_path,
        marker: str,
        title_from_name: bool,
        entries: List[SummaryEntry]
    ) -> int:
        """
        Append the entries of a directory.
        
        Args:
            directory: Directory to handle (base_path or below)
            base_path: Documentation root
            marker: Title marker
            title_from_name: Derive titles from file names
            entries: Collection to append to
            
        Returns:
            Number of synthesized index entries (0 or 1)
        """
        for doc_path in self.path_lister.list_documents(directory):
            if is_summary_file(doc_path, base_path):
                continue
            
            entry = self.extractor.find_entry(doc_path, base_path, marker, title_from_name)
            if entry is None:
                if self.logger:
                    self.logger.info(f"No title found, skipping: {doc_path}")
                continue
            entries.append(entry)
        
        if self.path_lister.has_index(directory):
            return 0
        
        # Root placeholder gets the empty name of the root itself
        relative_dir = relative_path(directory, base_path)
        entries.append(SummaryEntry(
            path=relative_dir / INDEX_FILE_NAME,
            title=relative_dir.name
        ))
        if self.logger:
            self.logger.info(f"Missing {INDEX_FILE_NAME}, added placeholder for: {relative_dir}")
        
        return 1
