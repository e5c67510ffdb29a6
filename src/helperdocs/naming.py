"""File stem normalization."""

from __future__ import annotations

import re
import unicodedata

# Word runs: an uppercase-led word, an all-caps run not followed by lowercase,
# a lowercase run, or a digit run.
_WORD_RE = re.compile(r"[A-Z]?[a-z]+|[A-Z]+(?![a-z])|\d+")


def kebab_case(text: str) -> str:
    """Convert a script identifier into a lowercase, hyphen-joined stem.

    Splits on any non-alphanumeric character and on case boundaries:
    "buildImage" -> "build-image", "docker_clean_all" -> "docker-clean-all",
    "HTTPServer" -> "http-server".
    """
    normalized = unicodedata.normalize("NFKD", text)
    ascii_text = normalized.encode("ascii", "ignore").decode("ascii")
    words = _WORD_RE.findall(ascii_text)
    return "-".join(word.lower() for word in words)
