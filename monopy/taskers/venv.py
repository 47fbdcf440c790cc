#!/usr/bin/env python3
"""
Creating, provisioning and removing a project's virtualenv
"""
##-- imports
from __future__ import annotations

import logging as logmod
import shutil

from doit.tools import config_changed

from monopy.taskers.base import PythonTasker
from monopy.utils.detection import python_binary
##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class CleanVenv(PythonTasker):
    """ remove the project's venv and pytest cache """
    venv_dep = None

    def __init__(self, name="cleanPythonVenv", locs=None, props=None):
        super().__init__(name, locs, props)

    def task_detail(self, task):
        task.actions.append(self.remove_dirs)
        return task

    def remove_dirs(self):
        for target in [self.locs.venv, self.locs.pytest_cache]:
            if not target.exists():
                logging.debug("%s - N/A '%s'", self.name, target)
                continue

            logging.info("%s - removing tree '%s'", self.name, target)
            shutil.rmtree(target)

class CheckPython(PythonTasker):
    """ check the interpreter version, then create the venv """
    venv_dep = None

    def __init__(self, name="checkPython", locs=None, props=None, binary=None, min_python="3.9"):
        super().__init__(name, locs, props)
        self.binary     = binary or python_binary()
        self.min_python = tuple(int(x) for x in min_python.split("."))

    def task_detail(self, task):
        version_check = f"import sys; sys.exit(sys.version_info < {self.min_python!r})"
        task.actions += [
            (self.log, [f"Checking {self.binary} >= {'.'.join(map(str, self.min_python))}", logmod.INFO]),
            self.cmd(self.binary, "-c", version_check),
            self.cmd(self.binary, "-m", "venv", self.locs.venv),
        ]
        task.uptodate.append(self.venv_exists)
        return task

class PipInstall(PythonTasker):
    """ install pinned tool versions into the venv """
    venv_dep = "checkPython"

    def __init__(self, name="pipInstall", locs=None, props=None, pins=None):
        super().__init__(name, locs, props)
        self.pins = list(pins or [])

    def task_detail(self, task):
        if not bool(self.pins):
            return task

        task.actions.append(self.python("pip", "install", *self.pins))
        task.uptodate += [self.venv_exists, config_changed({"pip": self.pins})]
        return task
