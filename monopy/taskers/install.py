#!/usr/bin/env python3
"""
Installing a project's dependencies into its venv.

Each install writes `pip freeze` into a marker under build/,
so doit can tell when it is up to date.
"""
##-- imports
from __future__ import annotations

import logging as logmod

from monopy._interface import LOCAL_REQS_EXTRAS, MAIN_EXTRAS, TEST_EXTRAS
from monopy.errors import MissingManifestError
from monopy.taskers.base import PythonTasker
##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class InstallLocalReqs(PythonTasker):
    """ install the project's local requirements

    By convention requirements.txt only holds dependencies whose source is in the monorepo.
    Without one, setup.py is installed with its dev and tests extras instead.
    """

    def __init__(self, name="installLocalReqs", locs=None, props=None):
        super().__init__(name, locs, props)

    def task_detail(self, task):
        marker = self.locs.marker("installedlocalreqs.txt")
        if self.locs.requirements.exists():
            task.actions += [
                self.python("pip", "install", "-r", self.locs.requirements.name),
                self.python("pip", "freeze", save="frozen"),
                (self.write_to, [marker, "frozen"]),
            ]
            task.file_dep.append(self.locs.requirements)
            task.targets.append(marker)
            task.uptodate.append(self.venv_exists)
        elif self.locs.setup_py.exists():
            task.actions.append(self.python("pip", "install", LOCAL_REQS_EXTRAS))
        else:
            raise MissingManifestError("Python module lacks %s and %s: %s",
                                       self.locs.requirements.name,
                                       self.locs.setup_py.name,
                                       self.locs.root)

        return task

class _ExtrasInstall(PythonTasker):

    extras      = None
    marker_name = None

    def task_detail(self, task):
        marker = self.locs.marker(self.marker_name)
        task.actions += [
            self.python("pip", "install", self.extras),
            self.python("pip", "freeze", save="frozen"),
            (self.write_to, [marker, "frozen"]),
        ]
        task.file_dep += self.locs.package_manifests
        task.targets.append(marker)
        task.uptodate.append(self.venv_exists)
        return task

class InstallReqs(_ExtrasInstall):
    """ install the project with its main extras """

    extras      = MAIN_EXTRAS
    marker_name = "installedreqs.txt"

    def __init__(self, name="installReqs", locs=None, props=None):
        super().__init__(name, locs, props)

class InstallTestReqs(_ExtrasInstall):
    """ install the project with its tests extras """

    extras      = TEST_EXTRAS
    marker_name = "installedtestreqs.txt"

    def __init__(self, name="installTestReqs", locs=None, props=None):
        super().__init__(name, locs, props)
