#!/usr/bin/env python3
"""
Command-line interface for SUMMARY.md generation.

Produces an mdBook SUMMARY.md file from a documentation tree.
"""
import argparse
import logging
import sys

from pydantic import ValidationError

from .config import Settings
from .core.constants import DEFAULT_BASE_PATH, DEFAULT_TRIM_STR
from .core.exceptions import SummaryError
from .entry_points import generate_summary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='mdsummary',
        description='Program to produce a mdbook SUMMARY.md file from doc tree. `-h` for help.'
    )
    parser.add_argument('base_path', nargs='?', default=None,
                        help=f'MD src documentation root (default: {DEFAULT_BASE_PATH})')
    parser.add_argument('-v', '--verbose', action='store_true', default=None, help='Verbose mode')
    parser.add_argument('--trim_str', '--trim-str', dest='trim_str', default=None,
                        help=f'Trim string to retrieve title from a file (default: "{DEFAULT_TRIM_STR}")')
    parser.add_argument('--title_from_name', '--title-from-name', dest='title_from_name',
                        action='store_true', default=None, help='Get titles from MD file names')
    parser.add_argument('--create_readmes', '--create-readmes', dest='create_readmes',
                        action='store_true', default=None,
                        help='Create README.md entries in dirs when not already present')
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    """Build settings; options not given on the command line fall back to the environment."""
    overrides = {
        key: value for key, value in vars(args).items()
        if value is not None
    }
    return Settings(**overrides)


def configure_logging(verbose: bool) -> logging.Logger:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr
    )
    return logging.getLogger('mdsummary')


def main(argv=None):
    args = build_parser().parse_args(argv)
    
    try:
        settings = settings_from_args(args)
    except ValidationError as e:
        print(f"❌ Error: invalid configuration\n{e}", file=sys.stderr)
        sys.exit(1)
    
    logger = configure_logging(settings.verbose)
    
    try:
        entries = generate_summary(settings, logger=logger)
    except SummaryError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)
    
    print(f"✓ Wrote {len(entries)} entries to {settings.summary_path}", file=sys.stderr)


if __name__ == '__main__':
    main()
