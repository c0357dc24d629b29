"""
Errors that abort a SUMMARY.md run.

Per-document problems (unreadable file, no title line) are not errors:
those documents are skipped.
"""


class SummaryError(Exception):
    """Base class for fatal summary generation errors."""


class InvalidBasePathError(SummaryError):
    """The base path is not usable as the documentation root."""


class NotABasePathError(SummaryError):
    """A path was made relative to a base that is not one of its prefixes."""

    def __init__(self, path, base_path):
        self.path = path
        self.base_path = base_path
        super().__init__(
            f"Given a base path that is not actually a base path for current directory: "
            f"'{base_path}' is not a prefix of '{path}'"
        )


class GlobPatternError(SummaryError):
    """A path listing pattern was rejected."""


class SummaryWriteError(SummaryError):
    """The summary file could not be created or written."""
