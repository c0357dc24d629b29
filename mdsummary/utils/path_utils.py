"""
Path utilities for SUMMARY.md generation.

Relative path computation and filename-derived titles.
"""
from pathlib import Path, PurePosixPath

from ..core.constants import INDEX_STEM, SUMMARY_FILE_NAME
from ..core.exceptions import InvalidBasePathError, NotABasePathError


def relative_path(path, base_path) -> PurePosixPath:
    """
    Build a file's or directory's path relative to the documentation root.
    
    Args:
        path: Path found under the root
        base_path: Documentation root
    
    Returns:
        Root-relative path with forward slashes ('.' for the root itself)
    
    Raises:
        NotABasePathError: If base_path is not a prefix of path
    """
    try:
        relative = Path(path).relative_to(Path(base_path))
    except ValueError:
        raise NotABasePathError(path, base_path) from None
    return PurePosixPath(*relative.parts)


def title_from_filename(path) -> str:
    """
    Derive a title from a document's file name.
    
    README documents are titled after their directory.
    
    Args:
        path: Document path
    
    Returns:
        File stem, or the parent directory name for README
    """
    path = Path(path)
    if path.stem != INDEX_STEM:
        return path.stem
    return path.parent.name or path.absolute().parent.name


def path_to_str(path) -> str:
    """
    Render a path as text usable in a glob pattern.
    
    Raises:
        InvalidBasePathError: If the path holds undecodable bytes
    """
    text = str(path)
    try:
        text.encode('utf-8')
    except UnicodeEncodeError:
        raise InvalidBasePathError(f"given path should be a string: {text!r}") from None
    return text


def is_summary_file(path, base_path) -> bool:
    """Check whether path is the generated SUMMARY.md of base_path."""
    return Path(path) == Path(base_path) / SUMMARY_FILE_NAME
