#!/usr/bin/env python3
"""

"""
from __future__ import annotations

import logging as logmod

import pytest

from monopy._interface import DEFAULT_PIP, MIN_PYTHON, REPORTS_ENV
from monopy.config import BuildProperties, MonopyConfig, PythonExtension
from monopy.errors import ConfigError
from monopy.locs import ProjectLocs

logging = logmod.root

class TestBuildProperties:

    def test_default(self):
        assert(BuildProperties().reports_folder is None)

    def test_from_env(self):
        props = BuildProperties.from_env({REPORTS_ENV: "reports"})
        assert(props.reports_folder == "reports")

    def test_from_env_empty(self):
        assert(BuildProperties.from_env({REPORTS_ENV: ""}).reports_folder is None)

    def test_from_args(self):
        props = BuildProperties.from_args(["run", "check", "reports_folder=build/reports"], env={})
        assert(props.reports_folder == "build/reports")

    def test_from_args_falls_back_to_env(self):
        props = BuildProperties.from_args(["run", "check"], env={REPORTS_ENV: "from_env"})
        assert(props.reports_folder == "from_env")

    def test_extension_is_frozen(self):
        ext = PythonExtension("source_example")
        with pytest.raises(AttributeError):
            ext.module_directory = "other"

class TestMonopyConfig:

    def test_defaults_without_files(self, tmp_path):
        config = MonopyConfig.load(tmp_path / "pyproject.toml")
        assert(config.module_directory is None)
        assert(config.min_python == MIN_PYTHON)
        assert(config.pip == DEFAULT_PIP)
        assert(config.strip_prefixes == [])
        assert(config.log_level is None)

    def test_monorepo_values(self, project, monorepo):
        config = MonopyConfig.load(project / "pyproject.toml", monorepo / "pyproject.toml")
        assert(config.min_python == "3.10")

    def test_project_overrides_monorepo(self, project, monorepo):
        (project / "pyproject.toml").write_text('[tool.monopy]\nmin_python = "3.11"\nmodule_directory = "source_example"\n')
        config = MonopyConfig.load(project / "pyproject.toml", monorepo / "pyproject.toml")
        assert(config.min_python == "3.11")
        assert(config.module_directory == "source_example")

    def test_nested_tables(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text('[tool.monopy.report]\nstrip_prefixes = ["> Task"]\n\n[tool.monopy.logging]\nlevel = "info"\n')
        config = MonopyConfig.load(tmp_path / "pyproject.toml")
        assert(config.strip_prefixes == ["> Task"])
        assert(config.log_level == "info")

    def test_bad_toml(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text("[tool.monopy\n")
        with pytest.raises(ConfigError):
            MonopyConfig.load(tmp_path / "pyproject.toml")

class TestProjectLocs:

    def test_finds_monorepo(self, project, monorepo):
        locs = ProjectLocs.build(project)
        assert(locs.root_project == monorepo.resolve())
        assert(locs.rcfile == monorepo.resolve() / "pyproject.toml")
        assert(locs.project_path == ":connectors:source-example")

    def test_root_hint(self, project, monorepo):
        locs = ProjectLocs.build(project, root_hint="..")
        assert(locs.root_project == (monorepo / "connectors").resolve())
        assert(locs.project_path == ":source-example")

    def test_no_monorepo(self, tmp_path):
        locs = ProjectLocs.build(tmp_path)
        assert(locs.root_project == tmp_path.resolve())
        assert(locs.project_path == f":{tmp_path.name}")

    def test_reports_relative_to_root(self, project):
        locs = ProjectLocs.build(project, reports="reports")
        assert(locs.reports == project.resolve() / "reports")

    def test_venv(self, project):
        locs = ProjectLocs.build(project)
        assert(locs.venv_python == project.resolve() / ".venv" / "bin" / "python")
        assert(locs.package_manifests == [project.resolve() / "setup.py"])
