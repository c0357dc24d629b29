"""
Entry points for SUMMARY.md generation.

Wires settings, traversal and rendering into a single run.
"""

from pathlib import Path
from typing import List, Optional, TextIO

from .config import Settings
from .core.exceptions import InvalidBasePathError
from .core.models import SummaryEntry
from .summary import EntryCollector, SummaryRenderer
from .utils import GlobPathLister, LineWriter, PathLister, path_to_str


def validate_base_path(base_path) -> Path:
    """
    Check that the documentation root is usable.
    
    Raises:
        InvalidBasePathError: If the path is undecodable or not a directory
    """
    path_to_str(base_path)
    base_path = Path(base_path)
    if not base_path.is_dir():
        raise InvalidBasePathError(f"Base path is not a directory: {base_path}")
    return base_path


def collect_entries(
    settings: Settings,
    path_lister: Optional[PathLister] = None,
    logger=None
) -> List[SummaryEntry]:
    """
    Gather the summary entries for the configured root.
    
    Args:
        settings: Run settings
        path_lister: Glob capability (local filesystem by default)
        logger: Optional logger
        
    Returns:
        Entries sorted in summary order
    """
    collector = EntryCollector(path_lister or GlobPathLister(), logger=logger)
    entries = collector.collect(settings.base_path, **settings.get_collector_config())
    return SummaryRenderer.sort_entries(entries)


def generate_summary(
    settings: Settings,
    path_lister: Optional[PathLister] = None,
    logger=None,
    stream: Optional[TextIO] = None
) -> List[SummaryEntry]:
    """
    Generate <base_path>/SUMMARY.md.
    
    Args:
        settings: Run settings
        path_lister: Glob capability (local filesystem by default)
        logger: Optional logger
        stream: Echo target for verbose mode (stdout by default)
        
    Returns:
        Entries written, in summary order
        
    Raises:
        SummaryError: On any fatal error; nothing is retried
    """
    validate_base_path(settings.base_path)
    
    entries = collect_entries(settings, path_lister=path_lister, logger=logger)
    
    with LineWriter(settings.summary_path, verbose=settings.verbose, stream=stream) as writer:
        SummaryRenderer.write_summary(entries, writer)
    
    return entries
