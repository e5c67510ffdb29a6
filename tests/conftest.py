"""Pytest configuration and fixtures for helperdocs tests."""

import logging

import pytest

from helperdocs.models import DocGroup


@pytest.fixture(autouse=True)
def _restore_logging():
    """Undo setup_logging() side effects on the root logger."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    logging.disable(logging.NOTSET)


@pytest.fixture
def docker_group():
    return DocGroup(
        title="Docker",
        summary="Docker helpers.",
        group_id="docker",
        sections=("scripts",),
    )
