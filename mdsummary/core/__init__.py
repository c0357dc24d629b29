"""Core package - Domain model, constants and errors."""

from .models import SummaryEntry
from .constants import (
    INDEX_FILE_NAME,
    ROOT_INDEX_TITLE,
    SUMMARY_FILE_NAME,
    SUMMARY_HEADER,
    DEFAULT_BASE_PATH,
    DEFAULT_TRIM_STR
)
from .exceptions import (
    SummaryError,
    InvalidBasePathError,
    NotABasePathError,
    GlobPatternError,
    SummaryWriteError
)

__all__ = [
    'SummaryEntry',
    'INDEX_FILE_NAME',
    'ROOT_INDEX_TITLE',
    'SUMMARY_FILE_NAME',
    'SUMMARY_HEADER',
    'DEFAULT_BASE_PATH',
    'DEFAULT_TRIM_STR',
    'SummaryError',
    'InvalidBasePathError',
    'NotABasePathError',
    'GlobPatternError',
    'SummaryWriteError'
]
