#!/usr/bin/env python3
"""
Shared fixtures: a monorepo on disk, with a python sub-project inside it
"""
from __future__ import annotations

import pathlib as pl

import pytest

from monopy._interface import REPORTS_ENV

ROOT_PYPROJECT = """
[tool.black]
line-length = 140

[tool.monopy]
min_python = "3.10"
"""

@pytest.fixture(autouse=True)
def no_reports_env(monkeypatch):
    monkeypatch.delenv(REPORTS_ENV, raising=False)

@pytest.fixture
def monorepo(tmp_path) -> pl.Path:
    root = tmp_path / "repo"
    (root / ".git").mkdir(parents=True)
    (root / "pyproject.toml").write_text(ROOT_PYPROJECT)
    return root

@pytest.fixture
def project(monorepo) -> pl.Path:
    """ a sub-project with a requirements.txt and no tests """
    proj = monorepo / "connectors" / "source-example"
    proj.mkdir(parents=True)
    (proj / "requirements.txt").write_text("-e ../../libs/common\n")
    (proj / "setup.py").write_text("from setuptools import setup\nsetup(name='source-example')\n")
    return proj
