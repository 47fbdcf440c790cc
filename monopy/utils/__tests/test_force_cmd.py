#!/usr/bin/env python3
"""

"""
from __future__ import annotations

import logging as logmod
import sys

import pytest

from doit.action import CmdAction
from doit.exceptions import TaskFailed

from monopy.utils.force_cmd import ForceCmd

logging = logmod.root

FAILING = [sys.executable, "-c", "import sys; print('no data'); sys.exit(1)"]

class TestForceCmd:

    def test_plain_cmd_fails(self):
        action = CmdAction(FAILING, shell=False)
        assert(isinstance(action.execute(), TaskFailed))

    def test_failure_overridden(self, caplog):
        action = ForceCmd(FAILING, shell=False)
        with caplog.at_level(logmod.WARNING):
            assert(action.execute() is None)

        assert(any("Task Failure Overridden" in x for x in caplog.messages))

    def test_failure_keeps_output(self):
        action = ForceCmd(FAILING, shell=False, save_out="report")
        action.execute()
        assert(action.values['report'].strip() == "no data")

    def test_custom_handler(self):
        seen   = []
        action = ForceCmd(FAILING, shell=False, handler=seen.append)
        action.execute()
        assert(len(seen) == 1)
        assert(isinstance(seen[0], TaskFailed))

    def test_success_passes_through(self):
        action = ForceCmd([sys.executable, "-c", "print('fine')"], shell=False, save_out="report")
        assert(action.execute() is None)
        assert(action.values['report'].strip() == "fine")
