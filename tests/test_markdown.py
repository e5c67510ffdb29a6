"""Tests for markdown blocks and serialization."""

import pytest

from helperdocs.markdown import (
    BulletList,
    CodeBlock,
    Heading,
    Link,
    Paragraph,
    PlainText,
    link_entry,
    render_block,
    render_document,
    text,
)


def test_heading_levels():
    assert render_block(Heading(1, text("Title"))) == "# Title"
    assert render_block(Heading(3, (Link("Docker", "./docs/docker/README.md"),))) == (
        "### [Docker](./docs/docker/README.md)"
    )


@pytest.mark.parametrize("level", [0, 4])
def test_heading_level_out_of_range(level):
    with pytest.raises(ValueError):
        Heading(level, text("x"))


def test_rich_text_fragments_are_chained():
    content = (Link("Build", "./build.md"), PlainText(": "), PlainText("Builds an image"))
    assert render_block(Paragraph(content)) == "[Build](./build.md): Builds an image"


def test_link_entry():
    assert render_block(BulletList((link_entry("A", "./a.md", "Does A"),))) == "- [A](./a.md): Does A"


def test_code_block_with_language():
    assert render_block(CodeBlock("echo hi\n", "bash")) == "```bash\necho hi\n```"


def test_code_block_fence_grows_around_backticks():
    rendered = render_block(CodeBlock("cat <<EOF\n```\nEOF", "bash"))
    assert rendered.startswith("````bash\n")
    assert rendered.endswith("\n````")


def test_document_joins_blocks_with_blank_lines():
    doc = render_document([
        Heading(1, text("Title")),
        Paragraph(text("Summary")),
        BulletList((text("one"), text("two"))),
    ])
    assert doc == "# Title\n\nSummary\n\n- one\n- two\n"


def test_empty_blocks_are_omitted():
    doc = render_document([
        Heading(2, text("Description")),
        Paragraph(text("")),
        BulletList(()),
        Heading(2, text("Usage")),
    ])
    assert doc == "## Description\n\n## Usage\n"


def test_empty_document():
    assert render_document([]) == ""
