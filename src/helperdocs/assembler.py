"""Markdown documents for script pages, group indexes, and the README."""

from __future__ import annotations

from collections.abc import Sequence

from .constants import (
    DOCS_DIR_NAME,
    GROUP_INDEX_NAME,
    HELPERS_DIR_NAME,
    README_DOCS_END_MARKER,
    README_DOCS_START_MARKER,
    SCRIPT_CODE_LANGUAGE,
    TOC_HEADING,
    VIEW_SCRIPT_LABEL,
)
from .config import find_group
from .errors import MissingReadmeMarkersError
from .markdown import (
    Block,
    BulletList,
    CodeBlock,
    Heading,
    Link,
    Paragraph,
    link_entry,
    render_document,
    text,
)
from .models import DocGroup, RenderedDocs, ScriptRecord, TocEntry

# Script pages live at docs/<group>/<section>/<page>.md
_PAGE_TO_ROOT = "../../.."


def build_script_page(record: ScriptRecord) -> list[Block]:
    source_link = f"{_PAGE_TO_ROOT}/{HELPERS_DIR_NAME}/{record.script_path}"
    return [
        Heading(1, text(record.title)),
        Paragraph(text(record.summary)),
        Heading(2, text("Description")),
        Paragraph(text(record.description)),
        Heading(2, text("Usage")),
        Paragraph(text(record.example)),
        Heading(2, text("Script")),
        CodeBlock(record.raw_source, SCRIPT_CODE_LANGUAGE),
        Paragraph((Link(VIEW_SCRIPT_LABEL, source_link),)),
    ]


def build_group_index(group: DocGroup, records: Sequence[ScriptRecord]) -> list[Block]:
    items = tuple(
        link_entry(r.title, f"./{r.section}/{r.page_name}", r.summary) for r in records
    )
    return [
        Heading(1, text(group.title)),
        Paragraph(text(group.summary)),
        Heading(2, text(TOC_HEADING)),
        BulletList(items),
    ]


def build_readme_toc(toc: Sequence[TocEntry]) -> list[Block]:
    blocks: list[Block] = []
    for entry in toc:
        index_target = f"./{DOCS_DIR_NAME}/{entry.group_id}/{GROUP_INDEX_NAME}"
        items = tuple(
            link_entry(r.title, f"./{DOCS_DIR_NAME}/{r.page_path}", r.summary)
            for r in entry.records
        )
        blocks.append(Heading(3, (Link(entry.title, index_target),)))
        blocks.append(Paragraph(text(entry.summary)))
        blocks.append(BulletList(items))
    return blocks


def render_group_indexes(
    groups: Sequence[DocGroup],
    records: Sequence[ScriptRecord],
) -> dict[str, str]:
    """Render one index page per group, keyed by docs-relative path.

    Raises:
        MissingHelperConfigError: If a record names a group the registry lacks.
    """
    by_group: dict[str, list[ScriptRecord]] = {g.group_id: [] for g in groups}
    for record in records:
        group = find_group(groups, record.group_id)
        by_group[group.group_id].append(record)

    return {
        group.index_path: render_document(build_group_index(group, by_group[group.group_id]))
        for group in groups
    }


def render_all(
    groups: Sequence[DocGroup],
    toc: Sequence[TocEntry],
    records: Sequence[ScriptRecord],
) -> RenderedDocs:
    return RenderedDocs(
        readme_fragment=render_document(build_readme_toc(toc)),
        script_pages={r.page_path: render_document(build_script_page(r)) for r in records},
        group_indexes=render_group_indexes(groups, records),
    )


def patch_readme(readme_text: str, fragment: str) -> str:
    """Replace the text between the docs markers with `fragment`.

    Everything up to and including the start marker, and from the end
    marker on, is kept byte for byte.

    Raises:
        MissingReadmeMarkersError: If a marker is absent or the end marker
            precedes the start marker.
    """
    start = readme_text.find(README_DOCS_START_MARKER)
    if start < 0:
        raise MissingReadmeMarkersError(
            f"README start marker not found: {README_DOCS_START_MARKER}"
        )
    content_start = start + len(README_DOCS_START_MARKER)
    end = readme_text.find(README_DOCS_END_MARKER, content_start)
    if end < 0:
        if readme_text.find(README_DOCS_END_MARKER) >= 0:
            raise MissingReadmeMarkersError("README end marker precedes the start marker")
        raise MissingReadmeMarkersError(
            f"README end marker not found: {README_DOCS_END_MARKER}"
        )

    body = fragment.strip("\n")
    generated = f"\n{body}\n" if body else "\n"
    return readme_text[:content_start] + generated + readme_text[end:]
