"""
Constants for SUMMARY.md generation.
"""

# Extension of the documents that make up the book
DOC_EXTENSION = '.md'

# Directory landing page
INDEX_FILE_NAME = 'README.md'
INDEX_STEM = 'README'

# Title of the entry seeded for the book root in tree-complete mode
ROOT_INDEX_TITLE = 'README'

# Generated navigation file, written inside the base path
SUMMARY_FILE_NAME = 'SUMMARY.md'

# First line of every generated SUMMARY.md
SUMMARY_HEADER = '# https://github.com/rust-lang-nursery/mdBook/issues/677'

# Rendering
INDENT_UNIT = '  '
LIST_MARKER = '-'

# Defaults for the command line / environment
DEFAULT_BASE_PATH = 'src/'
DEFAULT_TRIM_STR = '# '

# Glob patterns, formatted with an escaped directory path
DOCS_IN_DIR_PATTERN = '{dir}/*' + DOC_EXTENSION
INDEX_IN_DIR_PATTERN = '{dir}/' + INDEX_FILE_NAME
ALL_DOCS_PATTERN = '{dir}/**/*' + DOC_EXTENSION
ALL_DIRS_PATTERN = '{dir}/**/'
