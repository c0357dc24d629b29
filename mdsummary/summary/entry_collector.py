"""
Entry Collection Component.

Walks the documentation root and gathers the summary entries, either
document by document (flat scan) or directory by directory with index
completion (tree-complete).
"""

from typing import List

from ..core.constants import INDEX_FILE_NAME, ROOT_INDEX_TITLE
from ..core.models import SummaryEntry
from ..utils.fs_utils import PathLister
from ..utils.path_utils import is_summary_file
from .title_extractor import TitleExtractor
from .tree_completer import TreeCompleter


class EntryCollector:
    """
    Orchestrates the traversal of the documentation root.
    
    Entries are returned in enumeration order; the final order is imposed
    by the renderer.
    """
    
    def __init__(self, path_lister: PathLister, logger=None):
        """
        Initialize entry collector.
        
        Args:
            path_lister: Glob capability used for every listing
            logger: Optional logger
        """
        self.path_lister = path_lister
        self.logger = logger
        
        # Initialize components
        self.extractor = TitleExtractor()
        self.completer = TreeCompleter(path_lister, logger=logger)
    
    def collect(
        self,
        base_path,
        trim_str: str,
        title_from_name: bool = False,
        create_readmes: bool = False
    ) -> List[SummaryEntry]:
        """
        Main collection entry point.
        
        Args:
            base_path: Documentation root
            trim_str: Title marker
            title_from_name: Derive titles from file names
            create_readmes: Tree-complete mode instead of flat scan
            
        Returns:
            Unsorted list of summary entries
        """
        if create_readmes:
            return self.collect_tree_complete(base_path, trim_str, title_from_name)
        return self.collect_flat(base_path, trim_str, title_from_name)
    
    def collect_tree_complete(
        self,
        base_path,
        trim_str: str,
        title_from_name: bool = False
    ) -> List[SummaryEntry]:
        """
        Visit every directory, synthesizing missing index entries.
        
        Args:
            base_path: Documentation root
            trim_str: Title marker
            title_from_name: Derive titles from file names
            
        Returns:
            Seeded root entry followed by the entries of each directory
        """
        entries = [SummaryEntry(path=INDEX_FILE_NAME, title=ROOT_INDEX_TITLE)]
        
        synthesized = 0
        directories = self.path_lister.list_directories(base_path)
        for directory in directories:
            synthesized += self.completer.handle_directory(
                directory, base_path, trim_str, title_from_name, entries
            )
        
        if self.logger:
            self.logger.info(
                f"Visited {len(directories)} directories, "
                f"{synthesized} placeholder index entries added"
            )
        
        return entries
    
    def collect_flat(
        self,
        base_path,
        trim_str: str,
        title_from_name: bool = False
    ) -> List[SummaryEntry]:
        """
        Visit every document under the root, without index completion.
        
        Args:
            base_path: Documentation root
            trim_str: Title marker
            title_from_name: Derive titles from file names
            
        Returns:
            One entry per titled document
        """
        entries = []
        
        for doc_path in self.path_lister.list_all_documents(base_path):
            if is_summary_file(doc_path, base_path):
                continue
            
            entry = self.extractor.find_entry(doc_path, base_path, trim_str, title_from_name)
            if entry is None:
                if self.logger:
                    self.logger.info(f"No title found, skipping: {doc_path}")
                continue
            entries.append(entry)
        
        return entries
