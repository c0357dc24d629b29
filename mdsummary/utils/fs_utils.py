"""
Filesystem collaborators: path listing by glob pattern and the summary line sink.
"""
import glob
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, TextIO

from ..core.constants import (
    ALL_DIRS_PATTERN,
    ALL_DOCS_PATTERN,
    DOCS_IN_DIR_PATTERN,
    INDEX_IN_DIR_PATTERN,
    SUMMARY_FILE_NAME
)
from ..core.exceptions import GlobPatternError, SummaryWriteError
from .path_utils import path_to_str


class PathLister(ABC):
    """
    Lists paths matching a glob-style pattern.
    
    Implementations only provide glob(); the helpers below build the
    patterns used by the summary traversal.
    """
    
    @abstractmethod
    def glob(self, pattern: str) -> List[Path]:
        """
        Return the paths matching pattern.
        
        Raises:
            GlobPatternError: If the pattern cannot be evaluated
        """
        pass
    
    @staticmethod
    def _escaped(directory) -> str:
        return glob.escape(path_to_str(directory).rstrip('/') or '/')
    
    def list_documents(self, directory) -> List[Path]:
        """Documents directly inside directory."""
        return self.glob(DOCS_IN_DIR_PATTERN.format(dir=self._escaped(directory)))
    
    def has_index(self, directory) -> bool:
        """Whether directory holds an index document."""
        return len(self.glob(INDEX_IN_DIR_PATTERN.format(dir=self._escaped(directory)))) > 0
    
    def list_all_documents(self, root) -> List[Path]:
        """Documents anywhere under root."""
        return self.glob(ALL_DOCS_PATTERN.format(dir=self._escaped(root)))
    
    def list_directories(self, root) -> List[Path]:
        """Root and every directory below it."""
        return self.glob(ALL_DIRS_PATTERN.format(dir=self._escaped(root)))


class GlobPathLister(PathLister):
    """PathLister backed by the local filesystem."""
    
    @staticmethod
    def validate_pattern(pattern: str):
        """
        Reject patterns glob would silently match nothing with.
        
        Raises:
            GlobPatternError: On NUL bytes or a malformed recursive wildcard
        """
        if "\x00" in pattern:
            raise GlobPatternError(f"Failed to read glob pattern {pattern!r}: embedded null byte")
        for component in pattern.split("/"):
            if "**" in component and component != "**":
                raise GlobPatternError(
                    f"Failed to read glob pattern {pattern!r}: "
                    f"recursive wildcards must form a single path component"
                )
    
    def glob(self, pattern: str) -> List[Path]:
        self.validate_pattern(pattern)
        try:
            matches = glob.glob(pattern, recursive=True, include_hidden=True)
        except (ValueError, OSError) as e:
            raise GlobPatternError(f"Failed to read glob pattern '{pattern}': {e}") from e
        return [Path(match) for match in sorted(matches)]


class LineWriter:
    """
    Line sink over the summary file.
    
    Use as a context manager; every written line is echoed to `stream`
    (stdout by default) when verbose. File names holding undecodable bytes
    are written back byte for byte.
    """
    
    def __init__(self, path, verbose: bool = False, stream: Optional[TextIO] = None):
        self.path = Path(path)
        self.verbose = verbose
        self.stream = stream
        self._file = None
        self.lines_written = 0
    
    def __enter__(self):
        try:
            self._file = open(self.path, 'w', encoding='utf-8', errors='surrogateescape', newline='\n')
        except OSError as e:
            raise SummaryWriteError(f"Failed to create {SUMMARY_FILE_NAME} at {self.path}: {e}") from e
        return self
    
    def __exit__(self, exc_type, exc, tb):
        if self._file is not None:
            self._file.close()
            self._file = None
        return False
    
    def write_line(self, line: str):
        """Append one line to the file."""
        if self._file is None:
            raise SummaryWriteError(f"{self.path} is not open for writing")
        try:
            self._file.write(line + '\n')
        except (OSError, UnicodeError) as e:
            raise SummaryWriteError(f"Unable to write to file {self.path}: {e}") from e
        self.lines_written += 1
        
        if self.verbose:
            self._echo(line)
    
    def _echo(self, line: str):
        try:
            print(line, file=self.stream)
        except UnicodeEncodeError:
            # Undecodable file names are shown escaped on the console
            print(line.encode('utf-8', 'backslashreplace').decode('utf-8'), file=self.stream)
