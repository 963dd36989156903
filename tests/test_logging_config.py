from __future__ import annotations

import logging

import pytest

from core.logging_config import LOG_LEVEL_ENV, setup_logging


@pytest.fixture
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)


def test_explicit_level(restore_root_level):
    setup_logging("debug")
    assert restore_root_level.level == logging.DEBUG


def test_level_from_environment(restore_root_level, monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "WARNING")
    setup_logging()
    assert restore_root_level.level == logging.WARNING


def test_unknown_level_falls_back_to_info(restore_root_level):
    setup_logging("chatty")
    assert restore_root_level.level == logging.INFO
