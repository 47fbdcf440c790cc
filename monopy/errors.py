#!/usr/bin/env python3
"""
These are the monopy specific errors that can occur
"""
# Imports:
from __future__ import annotations

import logging as logmod

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class MonopyError(Exception):
    """
      The base class for all monopy errors
      will try to % format the first argument with remaining args in str()
    """
    general_msg = "Non-Specific Monopy Error:"

    def __str__(self):
        try:
            return self.args[0] % self.args[1:]
        except TypeError:
            return str(self.args)

class ConfigError(MonopyError):
    """ The project could not be configured """
    general_msg = "Monopy Config Error:"
    pass

class MissingManifestError(ConfigError):
    """ A python sub-project has neither a requirements.txt nor a setup.py """
    general_msg = "Missing Dependency Manifest:"
    pass

class TaskGraphError(MonopyError):
    """ Registering a task or an edge would break the graph """
    general_msg = "Task Graph Error:"
    pass

class DuplicateTaskError(TaskGraphError):
    general_msg = "Duplicate Task:"
    pass

class UnknownTaskError(TaskGraphError, KeyError):
    general_msg = "Unknown Task:"

    def __str__(self):
        return MonopyError.__str__(self)
