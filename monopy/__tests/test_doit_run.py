#!/usr/bin/env python3
"""
Running built graphs through doit, with the venv's tools replaced by
small python scripts
"""
from __future__ import annotations

import logging as logmod
import sys

import pytest

from doit.cmd_base import ModuleTaskLoader
from doit.doit_cmd import DoitMain

import monopy
from monopy.__main__ import DOIT_CONFIG, main
from monopy.locs import ProjectLocs
from monopy.utils.commander import CommanderMixin

logging = logmod.root

# "module first-arg" or "module" -> (stdout, exit code)
STUBS = {
    "pip freeze"   : ("requests==2.31.0", 0),
    "black"        : ("-x=1\n+x = 1", 0),
    "coverage xml" : ("No data to report.", 1),
}

def stub_python_args(self, module, *args) -> list[str]:
    key       = " ".join([module, *[str(x) for x in args[:1]]])
    out, code = STUBS.get(key, STUBS.get(module, (module, 0)))
    return [sys.executable, "-c", f"import sys; print({out!r}); sys.exit({code})"]

def fake_venv(graph, root) -> ProjectLocs:
    locs = ProjectLocs.build(root)

    def make_venv():
        locs.venv_python.parent.mkdir(parents=True, exist_ok=True)
        locs.venv_python.touch()

    graph.named("checkPython").actions[:] = [make_venv]
    return locs

def run_doit(graph, root, *args) -> int:
    loader = ModuleTaskLoader({"python_tasks": graph, "DOIT_CONFIG": dict(DOIT_CONFIG)})
    return DoitMain(loader, extra_config={"GLOBAL": {"dep_file": str(root / ".doit.db")}}).run(list(args))

@pytest.fixture
def stubbed(monkeypatch):
    monkeypatch.setattr(CommanderMixin, "python_args", stub_python_args)

class TestDoitRun:

    def test_cli_lists_tasks(self, project, capsys):
        assert(main(["-C", str(project), "list", "--all"]) == 0)
        listed = capsys.readouterr().out
        assert("pipInstall" in listed)
        assert("pythonReport" in listed)

    def test_pip_install_reruns_after_clean(self, project):
        graph = monopy.apply(project)
        locs  = fake_venv(graph, project)
        runs  = []
        graph.named("pipInstall").actions[:] = [lambda: runs.append("pipInstall")]

        assert(run_doit(graph, project, "run", "pipInstall") == 0)
        assert(run_doit(graph, project, "run", "pipInstall") == 0)
        assert(runs == ["pipInstall"])

        assert(run_doit(graph, project, "run", "clean") == 0)
        assert(not locs.venv.exists())

        assert(run_doit(graph, project, "run", "pipInstall") == 0)
        assert(runs == ["pipInstall", "pipInstall"])
        assert(locs.venv_python.exists())

    def test_install_markers_hold_freeze_output(self, project, stubbed):
        graph = monopy.apply(project)
        locs  = fake_venv(graph, project)
        assert(run_doit(graph, project, "run", "installTestReqs") == 0)
        for name in ["installedlocalreqs.txt", "installedreqs.txt", "installedtestreqs.txt"]:
            assert(locs.marker(name).read_text() == "requests==2.31.0\n")

    def test_reports_are_captured_then_stripped(self, project, stubbed):
        graph = monopy.apply(project, reports_folder="reports")
        fake_venv(graph, project)
        assert(run_doit(graph, project, "run", "pythonReport") == 0)
        reports = project / "reports"
        assert((reports / "black.diff").read_text() == "-x=1\n+x = 1\n")
        assert((reports / "mypy.log").read_text() == "mypy\n")
        assert((reports / "flake.txt").read_text() == "pflake8\n")
        assert(not (reports / "black.diff.1").exists())

    def test_failing_coverage_keeps_unit_test_green(self, project, stubbed, caplog):
        (project / "unit_tests").mkdir()
        (project / "unit_tests" / "test_source.py").write_text("def test_basic():\n    assert(True)\n")
        graph = monopy.apply(project, reports_folder="reports")
        fake_venv(graph, project)
        assert(run_doit(graph, project, "run", "unitTest") == 0)
        assert(any("Task Failure Overridden: unitTest" in x.getMessage() for x in caplog.records))
        assert(not (project / "reports" / "coverage.xml").exists())
