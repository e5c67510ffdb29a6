"""Registry walk that collects script records in documentation order."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .constants import SCRIPT_SUFFIX
from .errors import DuplicatePagePathError, UnsupportedScriptTypeError
from .extractor import extract_script_docs
from .logging_utils import log_event
from .models import DocGroup, GenerationData, ScriptRecord, TocEntry

LocateFn = Callable[[str, str], Sequence[str]]
ReadFn = Callable[[str, str, str], str]


def is_script_name(entry_name: str) -> bool:
    return entry_name.endswith(SCRIPT_SUFFIX) and len(entry_name) > len(SCRIPT_SUFFIX)


def aggregate(
    groups: Sequence[DocGroup],
    *,
    locate: LocateFn,
    read: ReadFn,
) -> GenerationData:
    """Extract every script of every group/section.

    Order is registry order, then declared section order, then the order the
    locator returns entries in. Any non-script entry, or two scripts sharing
    one page path, aborts the whole run.
    """
    toc: list[TocEntry] = []
    records: list[ScriptRecord] = []
    # page_path -> script that claimed it
    page_owners: dict[str, str] = {}

    for group in groups:
        group_records: list[ScriptRecord] = []
        for section in group.sections:
            for entry_name in locate(group.group_id, section):
                entry_id = f"{group.group_id}/{section}/{entry_name}"
                if not is_script_name(entry_name):
                    raise UnsupportedScriptTypeError(entry_id)

                raw_text = read(group.group_id, section, entry_name)
                record = extract_script_docs(
                    raw_text,
                    group_id=group.group_id,
                    section=section,
                    script_name=entry_name,
                )
                if not record.file_stem:
                    raise UnsupportedScriptTypeError(entry_id)
                if record.page_path in page_owners:
                    raise DuplicatePagePathError(
                        record.page_path, page_owners[record.page_path], entry_id
                    )
                page_owners[record.page_path] = entry_id

                log_event(
                    "script_extracted",
                    script=entry_id,
                    title=record.title,
                )
                records.append(record)
                group_records.append(record)

        toc.append(
            TocEntry(
                title=group.title,
                summary=group.summary,
                group_id=group.group_id,
                records=tuple(group_records),
            )
        )

    return GenerationData(toc=tuple(toc), records=tuple(records))
