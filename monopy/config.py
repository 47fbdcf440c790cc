#!/usr/bin/env python3
"""
Configuration surface of a python sub-project:

- PythonExtension : set by the project itself, in its dodo file or its pyproject.toml
- BuildProperties : supplied from outside, as doit command line vars or the environment
- MonopyConfig    : the [tool.monopy] tables of the project and monorepo pyproject.toml's
"""
##-- imports
from __future__ import annotations

import logging as logmod
import os
import pathlib as pl
from dataclasses import dataclass
from typing import Any, Iterable

import doit
import tomlguard
from tomlguard import TomlGuard

from monopy._interface import (DEFAULT_PIP, MIN_PYTHON, REPORTS_ENV,
                               REPORTS_VAR, TOOL_TABLE)
from monopy.errors import ConfigError
##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

@dataclass(frozen=True)
class PythonExtension:
    module_directory : None | str = None

@dataclass(frozen=True)
class BuildProperties:
    reports_folder : None | str = None

    @staticmethod
    def from_env(env:None|dict=None) -> BuildProperties:
        """ doit's command line vars win over the environment """
        env     = os.environ if env is None else env
        reports = doit.get_var(REPORTS_VAR, None) or env.get(REPORTS_ENV, None)
        return BuildProperties(reports_folder=reports or None)

    @staticmethod
    def from_args(args:Iterable[str], env:None|dict=None) -> BuildProperties:
        """ read doit style `name=value` args, falling back to the environment """
        prefix = f"{REPORTS_VAR}="
        for arg in args:
            if arg.startswith(prefix) and bool(arg[len(prefix):]):
                return BuildProperties(reports_folder=arg[len(prefix):])

        return BuildProperties.from_env(env)

def read_pyproject(fpath:pl.Path) -> TomlGuard:
    if not fpath.exists():
        return TomlGuard({})

    try:
        return tomlguard.read(fpath.read_text())
    except Exception as err:
        raise ConfigError("Failed to read %s : %s", fpath, err) from err

class MonopyConfig:
    """ [tool.monopy] lookups, preferring the project's table over the monorepo's """

    def __init__(self, project:TomlGuard, monorepo:None|TomlGuard=None):
        self._sources = [project] if monorepo is None else [project, monorepo]

    @staticmethod
    def load(project:pl.Path, monorepo:None|pl.Path=None) -> MonopyConfig:
        logging.debug("Loading Config: %s, %s", project, monorepo)
        local = read_pyproject(project)
        if monorepo is None or monorepo == project:
            return MonopyConfig(local)

        return MonopyConfig(local, read_pyproject(monorepo))

    def get(self, *path:str, default:Any=None) -> Any:
        for source in self._sources:
            current = getattr(source.on_fail(None).tool, TOOL_TABLE)
            for key in path:
                current = getattr(current, key)
            match current():
                case None:
                    continue
                case val:
                    return val

        return default

    @property
    def module_directory(self) -> None|str:
        return self.get("module_directory")

    @property
    def root(self) -> None|str:
        return self.get("root")

    @property
    def min_python(self) -> str:
        return str(self.get("min_python", default=MIN_PYTHON))

    @property
    def pip(self) -> list[str]:
        return list(self.get("pip", default=DEFAULT_PIP))

    @property
    def strip_prefixes(self) -> list[str]:
        return list(self.get("report", "strip_prefixes", default=[]))

    @property
    def log_level(self) -> None|str:
        return self.get("logging", "level")

    @property
    def log_format(self) -> None|str:
        return self.get("logging", "format")
