"""Utilities package - Path math and filesystem collaborators."""

from .path_utils import (
    relative_path,
    title_from_filename,
    path_to_str,
    is_summary_file
)

from .fs_utils import (
    PathLister,
    GlobPathLister,
    LineWriter
)

__all__ = [
    # Path utils
    'relative_path',
    'title_from_filename',
    'path_to_str',
    'is_summary_file',
    
    # Filesystem utils
    'PathLister',
    'GlobPathLister',
    'LineWriter'
]
