from __future__ import annotations

import logging
import os

import pytest


@pytest.fixture(autouse=True)
def _clean_liftlog_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.startswith("LIFTLOG_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
