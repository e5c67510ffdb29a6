"""Literal constants used by helperdocs."""

APP_NAME = "helperdocs"

SCRIPT_SUFFIX = ".sh"
PAGE_SUFFIX = ".md"
GROUP_INDEX_NAME = "README.md"
README_NAME = "README.md"
DOCS_DIR_NAME = "docs"
HELPERS_DIR_NAME = "helpers"

SHEBANG_PREFIX = "#!"
HEADER_DIVIDER = "#" + "=" * 74
FOOTER_DIVIDER = "#" + "-" * 74
TITLE_PREFIX = "# "
TITLE_SEPARATOR = " - "
DESCRIPTION_MARKER = "# @description:"
EXAMPLE_MARKER = "# @example:"

# Longest prefix first.
COMMENT_PREFIXES = ("#  ", "# ")

README_DOCS_START_MARKER = "<!-- docs:start -->"
README_DOCS_END_MARKER = "<!-- docs:end -->"

SCRIPT_CODE_LANGUAGE = "bash"
VIEW_SCRIPT_LABEL = "View Script"
TOC_HEADING = "Table of Contents"

ERROR_PREFIX = "ERROR:"
BUILD_START_TEXT = "Building docs..."
BUILD_DONE_TEXT = "Completed building docs"
