#!/usr/bin/env python3
"""
Utility classes for building tasks with a bit of structure
"""
##-- imports
from __future__ import annotations

import logging as logmod
import pathlib as pl
from typing import TYPE_CHECKING, ClassVar

from monopy.config import BuildProperties
from monopy.utils.commander import CommanderMixin
from monopy.utils.task_graph import TaskSpec

if TYPE_CHECKING:
    from doit.task import Task as DoitTask
    from monopy.locs import ProjectLocs
    from monopy.utils.task_graph import TaskGraph
##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class PythonTasker(CommanderMixin):
    """ Util Class for building a single task into a project's graph

    Subclasses override `task_detail`, returning None to not register anything
    """
    # every task running the venv interpreter needs the venv built first
    venv_dep : ClassVar[None|str] = "pipInstall"

    def __init__(self, name:str, locs:ProjectLocs, props:None|BuildProperties=None):
        assert(name is not None)
        assert(locs is not None)
        self.name  = name
        self.locs  = locs
        self.props = props or BuildProperties()

    @property
    def doc(self) -> str:
        try:
            split_doc = [x for x in self.__class__.__doc__.split("\n") if bool(x)]
            return ":: " + split_doc[0].strip() if bool(split_doc) else ""
        except AttributeError:
            return ":: "

    def default_task(self) -> TaskSpec:
        return TaskSpec(name=self.name,
                        doc=self.doc,
                        task_dep=[self.venv_dep] if self.venv_dep else [])

    def task_detail(self, task:TaskSpec) -> None|TaskSpec:
        return task

    def register(self, graph:TaskGraph) -> None|TaskSpec:
        logging.debug("Building Task for: %s", self.name)
        match self.task_detail(self.default_task()):
            case None:
                return None
            case TaskSpec() as task:
                return graph.register(task)
            case _ as val:
                raise TypeError("Task Detail returned an unexpected value", self.name, val)

    def venv_exists(self, task, values) -> bool:
        """ uptodate check: anything installed into the venv is gone with it """
        return self.locs.venv_python.exists()

    def log(self, msg, level=logmod.DEBUG):
        logging.log(level, msg)

    def write_to(self, fpath:pl.Path, key:str, task:DoitTask):
        fpath.parent.mkdir(parents=True, exist_ok=True)
        fpath.write_text(task.values.get(key, None) or "")
