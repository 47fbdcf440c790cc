#!/usr/bin/env python3
"""
Predicates evaluated while configuring a project, before any task is built.

pytest exits with code 5 when it collects no tests, which doit would read
as a failure. So a test task is only planned when its directory holds
something pytest would collect: a file named test_*.py or *_test.py
"""
##-- imports
from __future__ import annotations

import logging as logmod
import os
import pathlib as pl
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from monopy._interface import PYENV_DIR, TEST_FILE_RE

if TYPE_CHECKING:
    from monopy.locs import ProjectLocs
##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

@dataclass(frozen=True)
class Skip:
    name   : str
    reason : str

@dataclass(frozen=True)
class Register:
    name        : str
    directory   : pl.Path
    data_file   : pl.Path
    test_config : pl.Path

    @property
    def coverage_name(self) -> str:
        return f"_{self.name}Coverage"

TestTaskPlan : TypeAlias = Skip | Register

def has_test_files(directory:pl.Path) -> bool:
    """ Stops on the first matching file """
    if not directory.is_dir():
        return False

    for _, _, files in os.walk(directory):
        if any(TEST_FILE_RE.match(x) for x in files):
            return True

    return False

def plan_test_task(locs:ProjectLocs, test_dir:str, name:str) -> TestTaskPlan:
    directory = locs.root / test_dir
    if not has_test_files(directory):
        logging.debug("No test files in %s, skipping %s", directory, name)
        return Skip(name, f"no test files in {test_dir}")

    return Register(name,
                    directory=directory,
                    data_file=directory / f".coverage.{name}",
                    test_config=locs.pytest_config)

def pyenv_in_path(path:None|str=None) -> bool:
    """ Whether any entry of PATH passes through a pyenv directory """
    if path is None:
        path = os.environ.get("PATH")
    if not bool(path):
        return False

    for entry in path.split(os.pathsep):
        if PYENV_DIR in entry.split(os.sep):
            return True

    return False

def python_binary(path:None|str=None) -> str:
    # pyenv shims provide 'python', not necessarily 'python3'
    return "python" if pyenv_in_path(path) else "python3"
