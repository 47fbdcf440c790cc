#!/usr/bin/env python3
"""
The monopy cli runner.
Builds the graph of a project, then hands the remaining args to doit
"""
# Imports:
from __future__ import annotations

import argparse
import logging as logmod
import pathlib as pl
import sys

from doit.cmd_base import ModuleTaskLoader
from doit.doit_cmd import DoitMain

##-- logging
logging         = logmod.root
##-- end logging

DOIT_CONFIG = {
    "default_tasks"   : ["check"],
    "verbosity"       : 1,
}

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="monopy",
                                     description="Run the doit tasks of a python sub-project",
                                     epilog="Remaining args go to doit, eg: monopy run check reports_folder=reports")
    parser.add_argument("-C", "--directory", default=".", help="the python sub-project")
    parser.add_argument("--module-directory", default=None, help="module to type check")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser

def main(argv:None|list[str]=None) -> int:
    from monopy.config import BuildProperties, MonopyConfig
    from monopy.errors import MonopyError
    from monopy.log_config import MonopyLogConfig
    from monopy.plugin import apply

    log_config       = MonopyLogConfig()
    args, doit_args  = build_parser().parse_known_args(argv)
    root             = pl.Path(args.directory).resolve()
    log_config.setup(MonopyConfig.load(root / "pyproject.toml"))
    if args.verbose:
        log_config.set_level(logmod.DEBUG)

    try:
        props = BuildProperties.from_args(doit_args)
        graph = apply(root, module_directory=args.module_directory, reports_folder=props.reports_folder)
        loader = ModuleTaskLoader({"python_tasks": graph, "DOIT_CONFIG": DOIT_CONFIG})
        return DoitMain(loader, extra_config={"GLOBAL": {"dep_file": str(root / ".doit.db")}}).run(doit_args)
    except MonopyError as err:
        log_config.printer.error("%s %s", err.general_msg, err)
        return 1
    finally:
        log_config.teardown()

if __name__ == "__main__":
    sys.exit(main())
