##-- imports
from __future__ import annotations

import logging as logmod

from doit.action import CmdAction
from doit.exceptions import TaskError, TaskFailed
##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class ForceCmd(CmdAction):
    """
    A CmdAction that overrides failures
    useful if something (*cough* coverage *cough*)
    returns bad status codes when it has nothing to report
    """

    def __init__(self, *args, handler=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.handler = handler or self.default_handler

    def default_handler(self, result):
        name = getattr(self.task, "name", None)
        logging.warning("Task Failure Overridden: %s : %s", name, result.message)
        return None

    def execute(self, *args, **kwargs):
        result = super().execute(*args, **kwargs)

        if isinstance(result, (TaskError, TaskFailed)):
            if self.save_out:
                self.values[self.save_out] = getattr(self, "out", None) or ""
            return self.handler(result)

        return result
