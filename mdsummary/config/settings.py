"""
Configuration management using Pydantic Settings.

Environment variables (overridden by command-line arguments):
- MDSUMMARY_BASE_PATH: Documentation root to scan
- MDSUMMARY_VERBOSE: Echo SUMMARY.md lines to stdout
- MDSUMMARY_TRIM_STR: Marker prefix of the title line
- MDSUMMARY_TITLE_FROM_NAME: Take titles from file names
- MDSUMMARY_CREATE_READMES: Add index entries for directories without README.md
"""
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.constants import DEFAULT_BASE_PATH, DEFAULT_TRIM_STR, SUMMARY_FILE_NAME


class Settings(BaseSettings):
    """Run settings, built once at startup and passed explicitly."""
    
    model_config = SettingsConfigDict(
        env_prefix="MDSUMMARY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )
    
    # Documentation root
    base_path: Path = Field(default=Path(DEFAULT_BASE_PATH))
    
    # Output
    verbose: bool = Field(default=False)
    
    # Title resolution
    trim_str: str = Field(default=DEFAULT_TRIM_STR)
    title_from_name: bool = Field(default=False)
    
    # Traversal mode
    create_readmes: bool = Field(default=False)
    
    @field_validator("trim_str")
    @classmethod
    def trim_str_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("trim_str must not be empty")
        return value
    
    @property
    def summary_path(self) -> Path:
        """Location of the generated SUMMARY.md."""
        return self.base_path / SUMMARY_FILE_NAME
    
    def get_collector_config(self) -> dict:
        """Get entry collection options as dictionary."""
        return {
            'trim_str': self.trim_str,
            'title_from_name': self.title_from_name,
            'create_readmes': self.create_readmes,
        }
