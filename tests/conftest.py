from unittest.mock import MagicMock

import pytest


@pytest.fixture(autouse=True)
def scass_env(monkeypatch):
    monkeypatch.setenv("SCASS_LOG_JSON", "0")
    monkeypatch.setenv("SCASS_LOG_LEVEL", "WARNING")


@pytest.fixture
def logger():
    return MagicMock()


@pytest.fixture
def project(tmp_path):
    """A small source tree with a few risky markers."""
    root = tmp_path / "project"
    (root / "pkg").mkdir(parents=True)
    (root / "a.py").write_text("import os\n\n# TODO fix\nprint('x')\n", encoding="utf-8")
    (root / "pkg" / "util.go").write_text("package pkg\n// FIXME: racy\nfunc F() {}\n", encoding="utf-8")
    (root / "pkg" / "notes.txt").write_text("nothing to see\n", encoding="utf-8")
    return root
