#!/usr/bin/env python3
"""
Locations of a python sub-project, and of the monorepo it sits in
"""
##-- imports
from __future__ import annotations

import logging as logmod
import pathlib as pl
from dataclasses import dataclass, field

from monopy._interface import (BUILD_DIR, PYPROJECT, PYTEST_CACHE_DIR,
                               PYTEST_INI, REQUIREMENTS, ROOT_MARKER,
                               SETUP_PY, VENV_DIR)
##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

def find_root_project(start:pl.Path) -> None|pl.Path:
    """ the nearest ancestor (or start itself) holding a .git """
    for candidate in [start, *start.parents]:
        if (candidate / ROOT_MARKER).exists():
            return candidate

    return None

@dataclass
class ProjectLocs:
    """
    root         : the python sub-project
    root_project : the monorepo, which holds the shared pyproject.toml
    reports      : optional folder tool reports are collected into
    """

    root         : pl.Path
    root_project : pl.Path          = field(default=None)
    reports      : None | pl.Path   = field(default=None)
    _venv        : str              = field(default=VENV_DIR)
    _build       : str              = field(default=BUILD_DIR)

    def __post_init__(self):
        self.root = pl.Path(self.root).resolve()
        match self.root_project:
            case None:
                self.root_project = self.root
            case _:
                self.root_project = pl.Path(self.root_project).resolve()

        if self.reports is not None:
            self.reports = (self.root / self.reports).resolve()

    @staticmethod
    def build(root:pl.Path, root_hint:None|str=None, reports:None|str=None) -> ProjectLocs:
        root = pl.Path(root).resolve()
        match root_hint:
            case str() | pl.Path():
                root_project = root / root_hint
            case None:
                root_project = find_root_project(root) or root

        return ProjectLocs(root, root_project=root_project, reports=reports)

    ##-- venv
    @property
    def venv(self) -> pl.Path:
        return self.root / self._venv

    @property
    def venv_python(self) -> pl.Path:
        return self.venv / "bin" / "python"

    @property
    def pytest_cache(self) -> pl.Path:
        return self.root / PYTEST_CACHE_DIR

    ##-- end venv

    ##-- outputs
    @property
    def build_dir(self) -> pl.Path:
        return self.root / self._build

    def marker(self, name:str) -> pl.Path:
        return self.build_dir / name

    ##-- end outputs

    ##-- inputs
    @property
    def requirements(self) -> pl.Path:
        return self.root / REQUIREMENTS

    @property
    def setup_py(self) -> pl.Path:
        return self.root / SETUP_PY

    @property
    def pyproject(self) -> pl.Path:
        return self.root / PYPROJECT

    @property
    def rcfile(self) -> pl.Path:
        """ the shared tool config, at the monorepo root """
        return self.root_project / PYPROJECT

    @property
    def pytest_config(self) -> pl.Path:
        local = self.root / PYTEST_INI
        return local if local.exists() else self.rcfile

    @property
    def package_manifests(self) -> list[pl.Path]:
        return [x for x in [self.setup_py, self.pyproject] if x.exists()]

    ##-- end inputs

    @property
    def project_path(self) -> str:
        """ ':' separated path of the project from the monorepo root, eg: ':connectors:source-foo' """
        try:
            parts = self.root.relative_to(self.root_project).parts
        except ValueError:
            parts = ()

        if not bool(parts):
            parts = (self.root.name,)

        return ":" + ":".join(parts)

    def __str__(self):
        return f"** [root: {self.root}]  [monorepo: {self.root_project}]  [reports: {self.reports}]"
