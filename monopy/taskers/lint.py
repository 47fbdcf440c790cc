#!/usr/bin/env python3
"""
Lint, format and type checks.

The *Report tasks never fail the build on findings,
and when a reports folder is set, their output is appended to a report file there.
"""
##-- imports
from __future__ import annotations

import logging as logmod
import pathlib as pl

from monopy._interface import REPORT_FILES
from monopy.taskers.base import PythonTasker
from monopy.utils.reports import append_report
##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class FlakeCheck(PythonTasker):
    """ lint the project with flake8 """

    def __init__(self, name="flakeCheck", locs=None, props=None):
        super().__init__(name, locs, props)

    def task_detail(self, task):
        task.actions.append(self.python("pflake8", "--config", self.locs.rcfile, "./"))
        return task

class MypyCheck(PythonTasker):
    """ type check the project's module """

    def __init__(self, name="mypyCheck", locs=None, props=None, module=None):
        super().__init__(name, locs, props)
        self.module = module

    def task_detail(self, task):
        if self.module is None:
            return None

        task.actions.append(self.python("mypy", "-m", self.module, "--config-file", self.locs.rcfile))
        return task

class ToolReport(PythonTasker):
    """ run a tool for its report """

    def __init__(self, name, locs=None, props=None, module=None, args=None, report=None, force=False):
        super().__init__(name, locs, props)
        self.module = module
        self.args   = list(args or [])
        self.report = report
        self.forced = force

    @property
    def target(self) -> None|pl.Path:
        if self.locs.reports is None or self.report is None:
            return None

        return self.locs.reports / self.report

    def task_detail(self, task):
        task.verbosity = 2
        match self.target:
            case None:
                task.actions.append(self.python(self.module, *self.args, force=self.forced))
            case pl.Path() as target:
                task.actions += [
                    self.python(self.module, *self.args, force=self.forced, save="report"),
                    (self.capture_report, [target]),
                ]

        return task

    def capture_report(self, target, task):
        """ Write the output the way a build log shows it, headers included """
        header = f"{self.locs.project_path}:{self.name}"
        append_report(target,
                      header,
                      self.python_header(self.module, *self.args),
                      task.values.get("report", None) or "")

def isort_report(locs, props=None) -> ToolReport:
    return ToolReport("isortReport", locs, props,
                      module="isort",
                      args=[f"--settings-file={locs.rcfile}", "--diff", "--quiet", "./"],
                      report=REPORT_FILES["isortReport"])

def black_report(locs, props=None) -> ToolReport:
    return ToolReport("blackReport", locs, props,
                      module="black",
                      args=["--config", locs.rcfile, "--diff", "--quiet", "./"],
                      report=REPORT_FILES["blackReport"])

def flake_report(locs, props=None) -> ToolReport:
    return ToolReport("flakeReport", locs, props,
                      module="pflake8",
                      args=["--exit-zero", "--config", locs.rcfile, "./"],
                      report=REPORT_FILES["flakeReport"])

def mypy_report(locs, props=None) -> ToolReport:
    # mypy exits non-zero on any finding
    return ToolReport("mypyReport", locs, props,
                      module="mypy",
                      args=["--config-file", locs.rcfile, "./"],
                      report=REPORT_FILES["mypyReport"],
                      force=True)
