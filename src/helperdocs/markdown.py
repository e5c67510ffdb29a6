"""Markdown block values and their serializer.

Renderers build a list of blocks; `render_document` is the only place that
turns them into text.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class PlainText:
    text: str


@dataclass(frozen=True, slots=True)
class Link:
    label: str
    target: str


Inline = Union[PlainText, Link]
RichText = tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Heading:
    level: int
    content: RichText

    def __post_init__(self) -> None:
        if not 1 <= self.level <= 3:
            raise ValueError(f"Heading level must be 1-3, got {self.level}")


@dataclass(frozen=True, slots=True)
class Paragraph:
    content: RichText


@dataclass(frozen=True, slots=True)
class BulletList:
    items: tuple[RichText, ...]


@dataclass(frozen=True, slots=True)
class CodeBlock:
    code: str
    language: str = ""


Block = Union[Heading, Paragraph, BulletList, CodeBlock]

_BACKTICK_RUN_RE = re.compile(r"`{3,}")


def text(value: str) -> RichText:
    """Wrap a plain string as rich text."""
    return (PlainText(value),)


def link_entry(label: str, target: str, summary: str) -> RichText:
    """Rich text for `[label](target): summary` list entries."""
    return (Link(label, target), PlainText(": "), PlainText(summary))


def render_inline(content: RichText) -> str:
    parts: list[str] = []
    for fragment in content:
        if isinstance(fragment, Link):
            parts.append(f"[{fragment.label}]({fragment.target})")
        else:
            parts.append(fragment.text)
    return "".join(parts)


def render_block(block: Block) -> str:
    """Render one block; an empty string means the block is omitted."""
    if isinstance(block, Heading):
        return f"{'#' * block.level} {render_inline(block.content)}"
    if isinstance(block, Paragraph):
        return render_inline(block.content)
    if isinstance(block, BulletList):
        return "\n".join(f"- {render_inline(item)}" for item in block.items)
    if isinstance(block, CodeBlock):
        return _render_code_block(block)
    raise TypeError(f"Unsupported markdown block: {type(block).__name__}")


def render_document(blocks: Sequence[Block]) -> str:
    """Join rendered blocks with blank lines; the result ends with one newline."""
    rendered = [render_block(block) for block in blocks]
    body = "\n\n".join(chunk for chunk in rendered if chunk)
    return body + "\n" if body else ""


def _render_code_block(block: CodeBlock) -> str:
    longest = max((len(m.group(0)) for m in _BACKTICK_RUN_RE.finditer(block.code)), default=2)
    fence = "`" * max(3, longest + 1)
    code = block.code.rstrip("\n")
    return f"{fence}{block.language}\n{code}\n{fence}"
