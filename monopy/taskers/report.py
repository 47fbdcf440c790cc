#!/usr/bin/env python3
"""
The aggregate report task
"""
##-- imports
from __future__ import annotations

import logging as logmod

from monopy._interface import PYTHON_LOG_PREFIX
from monopy.taskers.base import PythonTasker
from monopy.utils.reports import strip_report_folder
##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class PythonReport(PythonTasker):
    """ collect the tool reports, removing build log lines from them """
    venv_dep = None

    def __init__(self, name="pythonReport", locs=None, props=None, extra_prefixes=None):
        super().__init__(name, locs, props)
        self.extra_prefixes = list(extra_prefixes or [])

    @property
    def prefixes(self) -> list[str]:
        return [self.locs.project_path, PYTHON_LOG_PREFIX, *self.extra_prefixes]

    def task_detail(self, task):
        if self.locs.reports is not None:
            task.actions.append(self.clean_reports)
        return task

    def clean_reports(self):
        if not self.locs.reports.exists():
            logging.warning("No Reports Folder: %s", self.locs.reports)
            return

        strip_report_folder(self.locs.reports, self.prefixes)
