#!/usr/bin/env python3
"""
Coverage wrapped test runs, built from a planned test task.
"""
##-- imports
from __future__ import annotations

import logging as logmod

from monopy._interface import COVERAGE_XML, TEMP_COVERAGE
from monopy.taskers.base import PythonTasker
from monopy.utils.reports import relocate
##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class CoverageRun(PythonTasker):
    """ run pytest on a test directory under coverage """

    def __init__(self, plan, locs=None, props=None):
        super().__init__(plan.coverage_name, locs, props)
        self.plan = plan

    def task_detail(self, task):
        task.verbosity = 2
        task.actions.append(self.python("coverage", "run",
                                        f"--data-file={self.plan.data_file}",
                                        f"--rcfile={self.locs.rcfile}",
                                        "-m", "pytest", "-s", self.plan.directory,
                                        "-c", self.plan.test_config))
        return task

class CoverageReport(PythonTasker):
    """ report the coverage of a test run

    Coverage exits non-zero when it has no data to report, so failures are ignored.
    With a reports folder it writes xml, which is moved into the folder.
    """

    def __init__(self, plan, locs=None, props=None):
        super().__init__(plan.name, locs, props)
        self.plan = plan

    def coverage_args(self) -> list:
        if self.locs.reports is None:
            return ["report", f"--data-file={self.plan.data_file}", f"--rcfile={self.locs.rcfile}", "--skip-empty"]

        return ["xml", f"--data-file={self.plan.data_file}", f"--rcfile={self.locs.rcfile}", f"-o{TEMP_COVERAGE}"]

    def task_detail(self, task):
        task.verbosity = 2
        task.actions.append(self.python("coverage", *self.coverage_args(), force=True))
        if self.locs.reports is not None:
            task.actions.append(self.move_report)

        return task

    def move_report(self):
        relocate(self.locs.root / TEMP_COVERAGE, self.locs.reports / COVERAGE_XML)
