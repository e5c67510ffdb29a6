"""Header comment grammar for helper scripts.

A documented script looks like this::

    #!/usr/bin/env bash
    #==========================================================================
    # Build - Builds an image
    #==========================================================================
    # @description:
    #   Builds the image from the local Dockerfile.
    #
    # @example:
    #   ./build.sh my-image
    #--------------------------------------------------------------------------

Parsing happens in two passes: every line is classified into a token, then the
token stream is split on header dividers and the first two non-blank segments
are parsed as the title line and the body.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .constants import (
    COMMENT_PREFIXES,
    DESCRIPTION_MARKER,
    EXAMPLE_MARKER,
    FOOTER_DIVIDER,
    HEADER_DIVIDER,
    SCRIPT_SUFFIX,
    SHEBANG_PREFIX,
    TITLE_PREFIX,
    TITLE_SEPARATOR,
)
from .errors import MalformedScriptHeaderError
from .models import ScriptRecord
from .naming import kebab_case


class TokenKind(Enum):
    HEADER_DIVIDER = "header_divider"
    FOOTER_DIVIDER = "footer_divider"
    DESCRIPTION_MARKER = "description_marker"
    EXAMPLE_MARKER = "example_marker"
    TEXT = "text"


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    # For markers: the remainder of the line after the marker.
    text: str
    line_no: int


def tokenize(text: str) -> list[Token]:
    """Classify each line of a shebang-free script body."""
    tokens: list[Token] = []
    for line_no, line in enumerate(text.split("\n"), start=1):
        if line == HEADER_DIVIDER:
            tokens.append(Token(TokenKind.HEADER_DIVIDER, "", line_no))
        elif line == FOOTER_DIVIDER:
            tokens.append(Token(TokenKind.FOOTER_DIVIDER, "", line_no))
        elif line.startswith(DESCRIPTION_MARKER):
            rest = line[len(DESCRIPTION_MARKER):]
            tokens.append(Token(TokenKind.DESCRIPTION_MARKER, rest, line_no))
        elif line.startswith(EXAMPLE_MARKER):
            rest = line[len(EXAMPLE_MARKER):]
            tokens.append(Token(TokenKind.EXAMPLE_MARKER, rest, line_no))
        else:
            tokens.append(Token(TokenKind.TEXT, line, line_no))
    return tokens


def strip_shebang(text: str) -> str:
    """Drop exactly one leading shebang line, if present."""
    if not text.startswith(SHEBANG_PREFIX):
        return text
    newline_pos = text.find("\n")
    if newline_pos < 0:
        return ""
    return text[newline_pos + 1:]


def extract_script_docs(
    raw_text: str,
    *,
    group_id: str,
    section: str,
    script_name: str,
) -> ScriptRecord:
    """Parse one script into a ScriptRecord.

    Raises:
        MalformedScriptHeaderError: If the header grammar is not satisfied.
    """
    script_id = f"{group_id}/{section}/{script_name}"
    normalized = raw_text.replace("\r\n", "\n")
    tokens = tokenize(strip_shebang(normalized))

    segments = _split_segments(tokens)
    if len(segments) < 2:
        raise MalformedScriptHeaderError(
            script_id, "expected a title line and a body between header dividers"
        )

    title, summary = _parse_title(segments[0], script_id)
    description, example = _parse_body(segments[1], script_id)

    stem_source = script_name
    if stem_source.endswith(SCRIPT_SUFFIX):
        stem_source = stem_source[: -len(SCRIPT_SUFFIX)]

    return ScriptRecord(
        group_id=group_id,
        section=section,
        script_name=script_name,
        file_stem=kebab_case(stem_source),
        title=title,
        summary=summary,
        description=description,
        example=example,
        raw_source=raw_text,
    )


def clean_comment_block(lines: list[str]) -> str:
    """Strip one comment prefix per line and trim the joined block."""
    cleaned: list[str] = []
    for line in lines:
        if line == "#":
            cleaned.append("")
            continue
        for prefix in COMMENT_PREFIXES:
            if line.startswith(prefix):
                line = line[len(prefix):]
                break
        cleaned.append(line)
    return "\n".join(cleaned).strip()


def _split_segments(tokens: list[Token]) -> list[list[Token]]:
    segments: list[list[Token]] = []
    current: list[Token] = []
    for token in tokens:
        if token.kind is TokenKind.HEADER_DIVIDER:
            segments.append(current)
            current = []
        else:
            current.append(token)
    segments.append(current)
    return [segment for segment in segments if not _is_blank(segment)]


def _is_blank(segment: list[Token]) -> bool:
    return all(t.kind is TokenKind.TEXT and not t.text.strip() for t in segment)


def _parse_title(segment: list[Token], script_id: str) -> tuple[str, str]:
    lines = [t for t in segment if t.kind is not TokenKind.TEXT or t.text.strip()]
    if len(lines) != 1 or lines[0].kind is not TokenKind.TEXT:
        raise MalformedScriptHeaderError(
            script_id, "title segment must be a single '# <Title> - <Summary>' line"
        )

    line = lines[0].text
    if not line.startswith(TITLE_PREFIX):
        raise MalformedScriptHeaderError(
            script_id, f"line {lines[0].line_no}: title line must start with '{TITLE_PREFIX}'"
        )

    title, separator, summary = line[len(TITLE_PREFIX):].partition(TITLE_SEPARATOR)
    if not separator:
        raise MalformedScriptHeaderError(
            script_id, f"line {lines[0].line_no}: missing '{TITLE_SEPARATOR}' between title and summary"
        )

    title = title.strip()
    summary = summary.strip()
    if not title or not summary:
        raise MalformedScriptHeaderError(
            script_id, f"line {lines[0].line_no}: title and summary must be non-empty"
        )
    return title, summary


def _parse_body(segment: list[Token], script_id: str) -> tuple[str, str]:
    footer_index = next(
        (i for i, t in enumerate(segment) if t.kind is TokenKind.FOOTER_DIVIDER),
        None,
    )
    if footer_index is None:
        raise MalformedScriptHeaderError(script_id, "missing footer divider")

    header = segment[:footer_index]
    description_index = _find_single_marker(header, TokenKind.DESCRIPTION_MARKER, script_id)
    example_index = _find_single_marker(header, TokenKind.EXAMPLE_MARKER, script_id)
    if example_index < description_index:
        raise MalformedScriptHeaderError(
            script_id, "'@example:' must come after '@description:'"
        )

    description_lines = [header[description_index].text] + [
        t.text for t in header[description_index + 1:example_index]
    ]
    example_lines = [header[example_index].text] + [
        t.text for t in header[example_index + 1:]
    ]
    return clean_comment_block(description_lines), clean_comment_block(example_lines)


def _find_single_marker(header: list[Token], kind: TokenKind, script_id: str) -> int:
    marker = DESCRIPTION_MARKER if kind is TokenKind.DESCRIPTION_MARKER else EXAMPLE_MARKER
    indexes = [i for i, t in enumerate(header) if t.kind is kind]
    if not indexes:
        raise MalformedScriptHeaderError(script_id, f"missing '{marker}' marker")
    if len(indexes) > 1:
        lines = ", ".join(str(header[i].line_no) for i in indexes)
        raise MalformedScriptHeaderError(
            script_id, f"duplicated '{marker}' marker (lines {lines})"
        )
    return indexes[0]
