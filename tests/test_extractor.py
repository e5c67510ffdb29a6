"""Tests for the script header grammar."""

import pytest

from helperdocs.errors import MalformedScriptHeaderError
from helperdocs.extractor import (
    TokenKind,
    clean_comment_block,
    extract_script_docs,
    strip_shebang,
    tokenize,
)

from test_helpers import FOOTER, HEADER, build_script


def _extract(raw: str, script_name: str = "build.sh"):
    return extract_script_docs(raw, group_id="docker", section="scripts", script_name=script_name)


def test_extracts_all_fields():
    raw = build_script()
    record = _extract(raw)

    assert record.title == "Build"
    assert record.summary == "Builds an image"
    assert record.description == "Builds the image from the local Dockerfile."
    assert record.example == "./build.sh my-image"
    assert record.raw_source == raw
    assert record.group_id == "docker"
    assert record.section == "scripts"
    assert record.script_name == "build.sh"
    assert record.file_stem == "build"


def test_multiline_description_keeps_inner_lines():
    raw = build_script(description="First line.\n\nSecond paragraph.\n  indented")
    record = _extract(raw)
    assert record.description == "First line.\n\nSecond paragraph.\n  indented"


def test_one_space_prefix_is_stripped():
    raw = "\n".join([
        HEADER,
        "# Clean - Removes containers",
        HEADER,
        "# @description:",
        "# Removes stopped containers.",
        "# @example:",
        "# ./clean.sh",
        FOOTER,
        "",
    ])
    record = _extract(raw, "clean.sh")
    assert record.description == "Removes stopped containers."
    assert record.example == "./clean.sh"


def test_summary_splits_on_first_separator_only():
    raw = build_script(title="Tag", summary="Tags an image - with a version")
    record = _extract(raw)
    assert record.title == "Tag"
    assert record.summary == "Tags an image - with a version"


def test_empty_description_and_example_are_allowed():
    raw = build_script(description="", example="")
    record = _extract(raw)
    assert record.description == ""
    assert record.example == ""


def test_text_on_marker_line_is_included():
    raw = "\n".join([
        HEADER,
        "# Prune - Prunes images",
        HEADER,
        "# @description: Prunes dangling images.",
        "# @example: ./prune.sh",
        FOOTER,
        "",
    ])
    record = _extract(raw, "prune.sh")
    assert record.description == "Prunes dangling images."
    assert record.example == "./prune.sh"


def test_works_without_shebang():
    raw = build_script().split("\n", 1)[1]
    assert _extract(raw).title == "Build"


def test_crlf_line_endings_are_accepted():
    raw = build_script().replace("\n", "\r\n")
    record = _extract(raw)
    assert record.title == "Build"
    assert record.example == "./build.sh my-image"
    assert record.raw_source == raw


def test_code_after_footer_is_ignored():
    raw = build_script(body="# @example: not a marker\n" + HEADER + "\necho done\n")
    record = _extract(raw)
    assert record.example == "./build.sh my-image"


def test_file_stem_is_kebab_case():
    record = _extract(build_script(), "buildImage_fast.sh")
    assert record.file_stem == "build-image-fast"
    assert record.page_name == "build-image-fast.md"
    assert record.page_path == "docker/scripts/build-image-fast.md"
    assert record.script_path == "docker/scripts/buildImage_fast.sh"


def test_identical_input_yields_identical_record():
    raw = build_script()
    assert _extract(raw) == _extract(raw)


@pytest.mark.parametrize(
    "mutate",
    [
        pytest.param(lambda s: s.replace(HEADER + "\n", ""), id="header-divider"),
        pytest.param(lambda s: s.replace("# @description:\n", ""), id="description-marker"),
        pytest.param(lambda s: s.replace("# @example:\n", ""), id="example-marker"),
        pytest.param(lambda s: s.replace(FOOTER + "\n", ""), id="footer-divider"),
    ],
)
def test_missing_structure_is_rejected(mutate):
    raw = mutate(build_script())
    with pytest.raises(MalformedScriptHeaderError) as exc_info:
        _extract(raw)
    assert exc_info.value.script_id == "docker/scripts/build.sh"


def test_missing_title_separator_is_rejected():
    raw = build_script().replace("# Build - Builds an image", "# Build: Builds an image")
    with pytest.raises(MalformedScriptHeaderError, match="missing ' - '"):
        _extract(raw)


def test_markers_out_of_order_are_rejected():
    raw = "\n".join([
        HEADER,
        "# Build - Builds an image",
        HEADER,
        "# @example:",
        "#  ./build.sh",
        "# @description:",
        "#  Builds.",
        FOOTER,
        "",
    ])
    with pytest.raises(MalformedScriptHeaderError, match="must come after"):
        _extract(raw)


def test_duplicated_marker_is_rejected():
    raw = build_script().replace("# @example:\n", "# @example:\n# @example:\n")
    with pytest.raises(MalformedScriptHeaderError, match="duplicated '# @example:'"):
        _extract(raw)


def test_footer_before_example_is_rejected():
    raw = build_script().replace("# @example:\n", FOOTER + "\n# @example:\n", 1)
    with pytest.raises(MalformedScriptHeaderError, match="missing '# @example:'"):
        _extract(raw)


def test_empty_title_is_rejected():
    raw = build_script().replace("# Build - Builds an image", "#  - Builds an image")
    with pytest.raises(MalformedScriptHeaderError, match="non-empty"):
        _extract(raw)


def test_strip_shebang_removes_only_first_line():
    assert strip_shebang("#!/bin/bash\n#!/not/a/shebang\n") == "#!/not/a/shebang\n"
    assert strip_shebang("#!/bin/bash") == ""
    assert strip_shebang("echo hi\n") == "echo hi\n"


def test_tokenize_classifies_lines():
    kinds = [t.kind for t in tokenize("\n".join([HEADER, "# @description: x", "# @example:", FOOTER, "echo"]))]
    assert kinds == [
        TokenKind.HEADER_DIVIDER,
        TokenKind.DESCRIPTION_MARKER,
        TokenKind.EXAMPLE_MARKER,
        TokenKind.FOOTER_DIVIDER,
        TokenKind.TEXT,
    ]


def test_divider_of_wrong_width_is_plain_text():
    assert tokenize("#" + "=" * 73)[0].kind is TokenKind.TEXT


def test_clean_comment_block_prefers_two_space_prefix():
    assert clean_comment_block(["#  a", "# b", "#", "#   c"]) == "a\nb\n\n c"
