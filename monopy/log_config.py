#!/usr/bin/env python3
"""
Logging setup for the monopy cli.
The library itself only ever gets loggers, it never configures them.
"""
# Imports:
from __future__ import annotations

import logging as logmod
import sys
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from monopy.config import MonopyConfig

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

PRINTER_NAME    : Final[str] = "monopy._printer"
STREAM_FORMAT   : Final[str] = "{levelname:<8} : {message}"
INITIAL_FORMAT  : Final[str] = "{levelname:<8} : INIT : {message}"
PRINTER_FORMAT  : Final[str] = "{message}"

class MonopyLogConfig:
    """ Utility class to setup stdout logging.
      Also creates a 'printer' logger, so instead of using `print`,
      monopy can notify the user without the message
      going through the root logger's format.
    """

    def __init__(self):
        self.root           = logmod.root
        self.printer        = logmod.getLogger(PRINTER_NAME)
        self.stream_handler = logmod.StreamHandler(sys.stdout)
        self.print_handler  = logmod.StreamHandler(sys.stdout)

        self.stream_handler.setFormatter(logmod.Formatter(INITIAL_FORMAT, style="{"))
        self.print_handler.setFormatter(logmod.Formatter(PRINTER_FORMAT, style="{"))
        self.root.addHandler(self.stream_handler)
        self.root.setLevel(logmod.WARNING)

        self.printer.addHandler(self.print_handler)
        self.printer.setLevel(logmod.INFO)
        self.printer.propagate = False
        logging.debug("Post Log Setup")

    def setup(self, config:MonopyConfig) -> None:
        """ a setup that uses config values """
        fmt = config.log_format or STREAM_FORMAT
        self.stream_handler.setFormatter(logmod.Formatter(fmt, style="{"))
        match config.log_level:
            case None:
                pass
            case str() as level:
                self.set_level(level.upper())

    def set_level(self, level:int|str) -> None:
        self.root.setLevel(level)
        self.stream_handler.setLevel(level)

    def teardown(self) -> None:
        self.root.removeHandler(self.stream_handler)
        self.printer.removeHandler(self.print_handler)
