#!/usr/bin/env python3
"""
The python sub-project plugin: registers the tasks of a project into its graph,
and wires the edges between them.

Task order, and so edge targets, is:
venv -> reports -> installs -> checks -> tests -> aggregate report
"""
##-- imports
from __future__ import annotations

import logging as logmod
import pathlib as pl
from typing import TYPE_CHECKING

from monopy._interface import INTEGRATION_TEST_DIR, UNIT_TEST_DIR
from monopy.config import BuildProperties, MonopyConfig, PythonExtension
from monopy.locs import ProjectLocs
from monopy.taskers import install, lint, report, testing, venv
from monopy.utils.detection import Register, Skip, plan_test_task, python_binary
from monopy.utils.reports import reset_folder
from monopy.utils.task_graph import TaskGraph

if TYPE_CHECKING:
    from monopy.utils.task_graph import TaskSpec
##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class PythonPlugin:
    """ Configures one python sub-project """

    def __init__(self, locs:ProjectLocs, extension:None|PythonExtension=None, props:None|BuildProperties=None, config:None|MonopyConfig=None):
        self.locs      = locs
        self.extension = extension or PythonExtension()
        self.props     = props or BuildProperties()
        self.config    = config or MonopyConfig.load(locs.pyproject, locs.rcfile)

    def apply(self, graph:TaskGraph) -> TaskGraph:
        logging.info("Configuring Python Project: %s", self.locs)
        locs, props = self.locs, self.props

        ##-- venv
        venv.CleanVenv(locs=locs, props=props).register(graph)
        graph.depends_on("clean", "cleanPythonVenv")

        venv.CheckPython(locs=locs, props=props,
                         binary=python_binary(),
                         min_python=self.config.min_python).register(graph)
        venv.PipInstall(locs=locs, props=props, pins=self.config.pip).register(graph)
        ##-- end venv

        ##-- reports
        isort_report = lint.isort_report(locs, props).register(graph)
        black_report = lint.black_report(locs, props).register(graph)
        lint.FlakeCheck(locs=locs, props=props).register(graph)
        flake_report = lint.flake_report(locs, props).register(graph)
        mypy_report  = lint.mypy_report(locs, props).register(graph)
        ##-- end reports

        ##-- installs
        install.InstallLocalReqs(locs=locs, props=props).register(graph)
        install.InstallReqs(locs=locs, props=props).register(graph)
        graph.depends_on("installReqs", "installLocalReqs")
        graph.depends_on("check", "installReqs", "flakeCheck")

        install.InstallTestReqs(locs=locs, props=props).register(graph)
        graph.depends_on("installTestReqs", "installReqs")
        ##-- end installs

        match self.extension.module_directory:
            case None:
                pass
            case str() as module:
                lint.MypyCheck(locs=locs, props=props, module=module).register(graph)
                graph.depends_on("mypyCheck", "installTestReqs")
                graph.depends_on("check", "mypyCheck")

        ##-- tests
        self.add_test_task(graph, plan_test_task(locs, UNIT_TEST_DIR, "unitTest"))
        graph.depends_on_matching("check", lambda x: x.name == "unitTest")

        self.add_test_task(graph, plan_test_task(locs, INTEGRATION_TEST_DIR, "customIntegrationTests"))
        ##-- end tests

        ##-- aggregate report
        report.PythonReport(locs=locs, props=props,
                            extra_prefixes=self.config.strip_prefixes).register(graph)
        graph.depends_on("pythonReport", black_report.name, isort_report.name, flake_report.name, mypy_report.name)

        if locs.reports is not None:
            reset_folder(locs.reports)
            graph.depends_on(mypy_report.name, "installReqs")
        ##-- end aggregate report

        return graph

    def add_test_task(self, graph:TaskGraph, plan:Skip|Register) -> None|TaskSpec:
        match plan:
            case Skip(name=name, reason=reason):
                logging.info("Not Adding %s: %s", name, reason)
                return None
            case Register():
                run = testing.CoverageRun(plan, locs=self.locs, props=self.props).register(graph)
                graph.depends_on(run.name, "installTestReqs")
                test = testing.CoverageReport(plan, locs=self.locs, props=self.props).register(graph)
                graph.depends_on(test.name, run.name)
                return test

def apply(root:pl.Path|str=".", module_directory:None|str=None, reports_folder:None|str=None, graph:None|TaskGraph=None) -> TaskGraph:
    """ Build the task graph of the python project at root.

    module_directory falls back to [tool.monopy] module_directory,
    reports_folder to the doit var `reports_folder`, then $MONOPY_REPORTS_FOLDER
    """
    root     = pl.Path(root).resolve()
    config   = MonopyConfig.load(root / "pyproject.toml")
    props    = BuildProperties(reports_folder) if reports_folder else BuildProperties.from_env()
    locs     = ProjectLocs.build(root, root_hint=config.root, reports=props.reports_folder)
    config   = MonopyConfig.load(locs.pyproject, locs.rcfile)
    ext      = PythonExtension(module_directory or config.module_directory)
    graph    = graph or TaskGraph.lifecycle()
    return PythonPlugin(locs, ext, props, config).apply(graph)
