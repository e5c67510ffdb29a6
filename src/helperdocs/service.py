"""End-to-end documentation run."""

from __future__ import annotations

from collections.abc import Sequence
from functools import partial
from pathlib import Path

from .aggregator import aggregate
from .assembler import patch_readme, render_all
from .fs_gateway import (
    list_section_entries,
    read_script_text,
    read_text_file,
    write_text_if_changed,
)
from .logging_utils import log_event
from .models import DocGroup, GenerationReport, ProjectPaths


def generate_docs(paths: ProjectPaths, groups: Sequence[DocGroup]) -> GenerationReport:
    """Regenerate script pages, group indexes, and the README table of contents.

    Extraction, rendering, and the README marker check all finish before the
    first write. Writes go README, then script pages, then group indexes, and
    are not rolled back if a later write fails.
    """
    log_event("docs_run_start", root=paths.root, group_count=len(groups))

    data = aggregate(
        groups,
        locate=partial(list_section_entries, paths.helpers_dir),
        read=partial(read_script_text, paths.helpers_dir),
    )
    rendered = render_all(groups, data.toc, data.records)
    readme_text = patch_readme(read_text_file(paths.readme), rendered.readme_fragment)

    report = GenerationReport(record_count=len(data.records))
    _write(report, "readme", paths.readme, readme_text)
    for rel_path, content in rendered.script_pages.items():
        _write(report, "script_page", paths.docs_dir / rel_path, content)
    for rel_path, content in rendered.group_indexes.items():
        _write(report, "group_index", paths.docs_dir / rel_path, content)

    log_event(
        "docs_run_complete",
        record_count=report.record_count,
        written=len(report.written_paths),
        unchanged=len(report.unchanged_paths),
    )
    return report


def _write(report: GenerationReport, kind: str, path: Path, content: str) -> None:
    if write_text_if_changed(path, content):
        report.written_paths.append(path)
        log_event("file_written", kind=kind, path=path)
    else:
        report.unchanged_paths.append(path)
        log_event("file_unchanged", kind=kind, path=path)
