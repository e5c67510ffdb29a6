import pytest

from helperdocs.naming import kebab_case


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("build", "build"),
        ("buildImage", "build-image"),
        ("docker_clean_all", "docker-clean-all"),
        ("Remove Dangling", "remove-dangling"),
        ("HTTPServer", "http-server"),
        ("compose-up", "compose-up"),
        ("v2Release", "v-2-release"),
        ("__init__", "init"),
        ("café", "cafe"),
    ],
)
def test_kebab_case(raw, expected):
    assert kebab_case(raw) == expected


def test_kebab_case_without_words_is_empty():
    assert kebab_case("___") == ""
