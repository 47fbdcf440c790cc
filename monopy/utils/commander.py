#!/usr/bin/env python3
"""
Mixin for building doit actions, run from the project root
"""
##-- imports
from __future__ import annotations

import logging as logmod
import pathlib as pl
from types import FunctionType, MethodType

from doit.action import CmdAction

from monopy._interface import PYTHON_LOG_PREFIX
from monopy.utils.force_cmd import ForceCmd
##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class CommanderMixin:
    """ Needs a `locs` attribute providing `root` and `venv_python` """

    def _cmd_form(self, cmd, *args, **kwargs):
        match cmd:
            case FunctionType() | MethodType():
                return (cmd, list(args), kwargs)
            case str() | pl.Path():
                return [str(x) for x in [cmd, *args]]
            case list():
                assert(not bool(args))
                assert(not bool(kwargs))
                return [str(x) for x in cmd]
            case _:
                raise TypeError("Unexpected action form: ", cmd)

    def cmd(self, cmd:list|callable, *args, save=None, **kwargs) -> CmdAction:
        logging.debug("Cmd: %s Args: %s kwargs: %s", cmd, args, kwargs)
        return CmdAction(self._cmd_form(cmd, *args, **kwargs), shell=False, save_out=save, cwd=self.locs.root)

    def force(self, cmd:list|callable, *args, handler=None, save=None, **kwargs) -> ForceCmd:
        logging.debug("Forcing Cmd: %s Args: %s kwargs: %s", cmd, args, kwargs)
        return ForceCmd(self._cmd_form(cmd, *args, **kwargs), shell=False, handler=handler, save_out=save, cwd=self.locs.root)

    def python_args(self, module:str, *args) -> list[str]:
        return [str(self.locs.venv_python), "-m", module, *[str(x) for x in args]]

    def python(self, module:str, *args, save=None, force=False) -> CmdAction:
        """ run `python -m module args` with the project venv's interpreter """
        call = self.force if force else self.cmd
        return call(self.python_args(module, *args), save=save)

    def python_header(self, module:str, *args) -> str:
        return " ".join([PYTHON_LOG_PREFIX, *self.python_args(module, *args)])
