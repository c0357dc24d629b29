"""
Core domain model for SUMMARY.md generation.

A pure data structure without traversal or rendering logic.
"""
from dataclasses import dataclass
from pathlib import PurePath, PurePosixPath
from typing import Tuple


@dataclass(frozen=True)
class SummaryEntry:
    """One navigable node of the generated index: a root-relative path and its title."""
    path: PurePosixPath
    title: str

    def __post_init__(self):
        # Accept plain strings and OS paths, always store forward slashes
        if type(self.path) is not PurePosixPath:
            object.__setattr__(self, 'path', PurePosixPath(*PurePath(self.path).parts))

    @property
    def depth(self) -> int:
        """Number of path components before the file name."""
        return len(self.path.parts) - 1

    def sort_key(self) -> Tuple[Tuple[str, ...], str]:
        """Component-wise path order, then title."""
        return (self.path.parts, self.title)
