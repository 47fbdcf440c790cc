#!/usr/bin/env python3
"""
Monopy : doit task graphs for the python sub-projects of a monorepo.

In a sub-project's dodo.py:

    import pathlib as pl
    import monopy
    python_tasks = monopy.apply(pl.Path(), module_directory="source_example")

"""
# Imports:
from __future__ import annotations

import logging as logmod

from ._interface import __version__
from .config import BuildProperties, PythonExtension
from .plugin import PythonPlugin, apply
from .utils.task_graph import TaskGraph, TaskSpec

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging
