#!/usr/bin/env python3
"""
The per-project graph of task specs, handed to doit as a task creator.

Edges are checked as they are added: they may only point at registered
tasks, and may not close a cycle.
Matching edges (`depends_on_matching`) also connect tasks registered after them.
"""
##-- imports
from __future__ import annotations

import logging as logmod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Iterator

import networkx as nx
from doit.task import Task as DoitTask
from doit.task import dict_to_task

from monopy.errors import DuplicateTaskError, TaskGraphError, UnknownTaskError

if TYPE_CHECKING:
    TaskPredicate = Callable[["TaskSpec"], bool]
##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

@dataclass
class TaskSpec:
    """ A named unit of work, and the names of the tasks it needs to run after """

    name           : str
    actions        : list             = field(default_factory=list)
    task_dep       : list[str]        = field(default_factory=list)
    file_dep       : list             = field(default_factory=list)
    targets        : list             = field(default_factory=list)
    uptodate       : list             = field(default_factory=list)
    clean          : bool|list        = field(default_factory=list)
    doc            : str              = ""
    verbosity      : int              = 1
    meta           : dict             = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "name"      : self.name,
            "actions"   : list(self.actions),
            "task_dep"  : list(self.task_dep),
            "file_dep"  : [str(x) for x in self.file_dep],
            "targets"   : [str(x) for x in self.targets],
            "uptodate"  : list(self.uptodate),
            "clean"     : self.clean,
            "doc"       : self.doc,
            "verbosity" : self.verbosity,
            "meta"      : dict(self.meta),
        }

class TaskGraph:
    """ The DAG of task specs for one project configuration.

    The network holds an edge dep -> task for every dependency,
    so a node's predecessors are what it needs to run after.

    Exposes `create_doit_tasks`, so an instance at module level
    of a dodo file is picked up by doit's loader.
    """

    def __init__(self, name:str="python"):
        self.name                                   = name
        self.network   : nx.DiGraph                 = nx.DiGraph()
        self._matching : dict[str, list[TaskPredicate]] = {}

        # Wrap in a lambda because MethodType does not behave as we need it to
        self.create_doit_tasks = lambda *a, **kw: self._build(*a, **kw)
        self.create_doit_tasks.__dict__['basename'] = name

    @staticmethod
    def lifecycle(name:str="python") -> TaskGraph:
        """ A graph holding the lifecycle tasks every project already has """
        graph = TaskGraph(name)
        graph.register(TaskSpec("clean", doc=":: clean the project"))
        graph.register(TaskSpec("check", doc=":: run all checks"))
        return graph

    def __contains__(self, name:str) -> bool:
        return name in self.network

    def __iter__(self) -> Iterator[TaskSpec]:
        return (data['spec'] for _, data in self.network.nodes(data=True))

    def __len__(self) -> int:
        return len(self.network)

    def register(self, spec:TaskSpec) -> TaskSpec:
        if spec.name in self.network:
            raise DuplicateTaskError("Task already registered: %s", spec.name)

        for dep in spec.task_dep:
            if dep not in self.network:
                raise UnknownTaskError("%s depends on unregistered task: %s", spec.name, dep)

        logging.debug("Registering Task: %s", spec.name)
        self.network.add_node(spec.name, spec=spec)
        for dep in spec.task_dep:
            self.network.add_edge(dep, spec.name)

        for name, preds in self._matching.items():
            if any(pred(spec) for pred in preds):
                self.depends_on(name, spec.name)

        return spec

    def named(self, name:str) -> TaskSpec:
        try:
            return self.network.nodes[name]['spec']
        except KeyError:
            raise UnknownTaskError("No task named: %s", name) from None

    def depends_on(self, name:str, *deps:str) -> TaskSpec:
        """ Add edges so each dep runs before name """
        spec = self.named(name)
        for dep in deps:
            self.named(dep)
            if dep in spec.task_dep:
                continue
            if dep == name or nx.has_path(self.network, name, dep):
                raise TaskGraphError("Edge would create a cycle: %s -> %s", name, dep)

            spec.task_dep.append(dep)
            self.network.add_edge(dep, name)

        return spec

    def depends_on_matching(self, name:str, pred:TaskPredicate) -> None:
        """ Depend on every task satisfying pred, including those registered later """
        self.named(name)
        self._matching.setdefault(name, []).append(pred)
        for spec in self.matching(pred):
            if spec.name != name:
                self.depends_on(name, spec.name)

    def deps_of(self, name:str, transitive:bool=False) -> list[str]:
        """ Dependencies in declaration order, breadth first when transitive """
        direct = list(self.named(name).task_dep)
        if not transitive:
            return direct

        found : list[str] = []
        queue = direct
        while bool(queue):
            current = queue.pop(0)
            if current in found:
                continue
            found.append(current)
            queue += self.named(current).task_dep

        return found

    def matching(self, pred:TaskPredicate) -> list[TaskSpec]:
        return [x for x in self if pred(x)]

    def validate(self) -> None:
        if not nx.is_directed_acyclic_graph(self.network):
            raise TaskGraphError("Task network isn't a DAG: %s", self.name)

    def _build(self, **kwargs) -> Iterator[DoitTask]:
        self.validate()
        for spec in self:
            logging.debug("Building Task for: %s", spec.name)
            yield dict_to_task(spec.to_dict())
