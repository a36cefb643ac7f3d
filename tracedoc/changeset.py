# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple

from .log import ChangeSetError, debug
from .paths import normalize_path, compile_path


__all__ = ["Rule", "ChangeSet", "changeset"]


Rule = namedtuple("Rule", ("func", "paths"))


class ChangeSet(object):
    """A compiled set of path-triggered callbacks.

    Rules are sequences on the form (callback, path1, path2, ...):

    - without paths the callback is a root watcher, called on every dispatch
      as callback(doc);
    - with one path it is called as callback(doc, value) when that path changed;
    - with more paths it is called once as callback(doc, value1, value2, ...)
      when any of the paths changed.

    Use ChangeSet.build (or `changeset`) to create one.
    """

    def __init__(self):
        self.rules = []
        self.root_watchers = []
        self.watchers = {}
        self.mappings = []
        self.accessors = {}

    @property
    def watching_count(self):
        "Number of distinct single paths watched."
        return len(self.watchers)

    def _accessor(self, path):
        if path not in self.accessors:
            self.accessors[path] = compile_path(path)

    def _add_watcher(self, path, func):
        funcs = self.watchers.get(path)
        if funcs is None:
            self.watchers[path] = func
        elif isinstance(funcs, list):
            funcs.append(func)
        else:
            self.watchers[path] = [funcs, func]

    def add(self, rule):
        rule = tuple(rule)
        if not rule or not callable(rule[0]):
            raise ChangeSetError(
                "Rule must start with a callable, not %r." % (rule[0] if rule else None,))
        func = rule[0]
        paths = tuple(normalize_path(p) for p in rule[1:])
        rule = Rule(func, paths)
        self.rules.append(rule)

        if not paths:
            self.root_watchers.append(func)
        elif len(paths) == 1:
            self._add_watcher(paths[0], func)
            self._accessor(paths[0])
        else:
            self.mappings.append(rule)
            for p in paths:
                self._accessor(p)
        return rule

    @classmethod
    def build(cls, rules):
        """Compile a list of rules into a changeset.

        Raises ChangeSetError if any rule does not start with a callable.
        """
        cs = cls()
        for rule in rules:
            cs.add(rule)
        debug("Built changeset: %d root watchers, %d watched paths, %d mappings",
              len(cs.root_watchers), cs.watching_count, len(cs.mappings))
        return cs

    def __repr__(self):
        return "<ChangeSet rules=%d root=%d watching=%d mappings=%d>" % (
            len(self.rules), len(self.root_watchers), self.watching_count,
            len(self.mappings))


changeset = ChangeSet.build
