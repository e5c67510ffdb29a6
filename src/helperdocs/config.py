"""Documentation group registry."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from .errors import ConfigError, MissingHelperConfigError
from .models import DocGroup, RegistryFile

DEFAULT_GROUPS: tuple[DocGroup, ...] = (
    DocGroup(
        title="🐳 Docker",
        summary="Helpful scripts, tools, and resources for working with Docker.",
        group_id="docker",
        sections=("scripts",),
    ),
)


def find_group(groups: Sequence[DocGroup], group_id: str) -> DocGroup:
    for group in groups:
        if group.group_id == group_id:
            return group
    raise MissingHelperConfigError(group_id)


def load_groups(path: Path) -> tuple[DocGroup, ...]:
    """Load a registry file of the form {"groups": [...]}.

    Raises:
        ConfigError: If the file cannot be read or does not describe a valid,
            non-empty registry with unique group ids.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Failed to read config file: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Config file is not valid JSON: {path}: {exc}") from exc

    try:
        registry = RegistryFile.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file: {path}: {exc}") from exc

    groups = tuple(registry.groups)
    if not groups:
        raise ConfigError(f"Config file declares no groups: {path}")

    seen: set[str] = set()
    for group in groups:
        if group.group_id in seen:
            raise ConfigError(f"Duplicate group id in config file: {group.group_id}")
        seen.add(group.group_id)
    return groups
