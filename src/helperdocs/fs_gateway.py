"""Filesystem access for helper scripts and generated documents."""

from __future__ import annotations

from pathlib import Path

from .errors import DocsIOError


def list_section_entries(helpers_dir: Path, group_id: str, section: str) -> list[str]:
    """Return entry names of one section directory, sorted by name."""
    section_dir = helpers_dir / group_id / section
    try:
        children = list(section_dir.iterdir())
    except OSError as exc:
        raise DocsIOError("read directory", section_dir) from exc
    return sorted(child.name for child in children)


def read_script_text(helpers_dir: Path, group_id: str, section: str, entry_name: str) -> str:
    script_path = helpers_dir / group_id / section / entry_name
    try:
        with open(script_path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except OSError as exc:
        raise DocsIOError("read script", script_path) from exc
    except UnicodeDecodeError as exc:
        raise DocsIOError("decode script", script_path) from exc


def read_text_file(path: Path) -> str:
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except OSError as exc:
        raise DocsIOError("read file", path) from exc
    except UnicodeDecodeError as exc:
        raise DocsIOError("decode file", path) from exc


def write_text_if_changed(path: Path, content: str) -> bool:
    """Write `content` to `path` unless it already holds exactly that text.

    Creates parent directories as needed. Returns True when the file was written.
    """
    try:
        if path.is_file() and path.read_bytes() == content.encode("utf-8"):
            return False
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as exc:
        raise DocsIOError("write file", path) from exc
    return True
