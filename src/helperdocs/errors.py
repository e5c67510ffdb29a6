"""Typed exceptions for helperdocs."""

from __future__ import annotations

from pathlib import Path


class HelperDocsError(Exception):
    """Base exception for helperdocs failures."""


class ConfigError(HelperDocsError):
    """Raised when the group registry file is invalid."""


class MalformedScriptHeaderError(HelperDocsError):
    """Raised when a script's leading comment block breaks the header grammar."""

    def __init__(self, script_id: str, reason: str) -> None:
        super().__init__(f"Malformed script header in {script_id}: {reason}")
        self.script_id = script_id
        self.reason = reason


class UnsupportedScriptTypeError(HelperDocsError):
    """Raised when a section directory holds an entry that is not a bash script."""

    def __init__(self, entry_id: str) -> None:
        super().__init__(f"Only bash scripts are supported: {entry_id}")
        self.entry_id = entry_id


class MissingHelperConfigError(HelperDocsError):
    """Raised when a group id has no entry in the group registry."""

    def __init__(self, group_id: str) -> None:
        super().__init__(f"No helper config found for {group_id}")
        self.group_id = group_id


class DuplicatePagePathError(HelperDocsError):
    """Raised when two scripts would render to the same documentation page."""

    def __init__(self, page_path: str, first_script: str, second_script: str) -> None:
        super().__init__(
            f"Scripts {first_script} and {second_script} both map to page {page_path}"
        )
        self.page_path = page_path
        self.first_script = first_script
        self.second_script = second_script


class MissingReadmeMarkersError(HelperDocsError):
    """Raised when the README lacks the generated-docs marker pair."""


class DocsIOError(HelperDocsError):
    """Raised when reading or writing a file fails."""

    def __init__(self, action: str, path: Path) -> None:
        super().__init__(f"Failed to {action}: {path}")
        self.path = path
