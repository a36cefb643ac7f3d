# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .diff_format import Diff, value_of
from .log import debug


__all__ = ["mapchange", "mapupdate", "dispatch_strategies"]


dispatch_strategies = ("auto", "watchers", "changes")


def _call_watchers(doc, funcs, v):
    v = value_of(v)
    if isinstance(funcs, list):
        for func in funcs:
            func(doc, v)
    else:
        funcs(doc, v)


def _call_mapping(doc, rule, diff, accessors):
    args = []
    for path in rule.paths:
        if path in diff:
            args.append(value_of(diff[path]))
        else:
            args.append(accessors[path](doc))
    rule.func(doc, *args)


def mapchange(doc, changeset, diff=None, strategy="auto"):
    """Invoke the callbacks of changeset matching the paths in diff.

    A missing diff is treated as an empty one, doc itself is never
    committed or modified here. Returns the diff.

    The strategy only picks which side of the single path lookup to
    iterate ("watchers" or "changes"), "auto" iterates the smaller one.
    """
    if strategy not in dispatch_strategies:
        raise ValueError("Unknown dispatch strategy %r, expected one of %r." % (
            strategy, dispatch_strategies))
    if diff is None:
        diff = Diff()
    n = getattr(diff, "n", len(diff))
    if n == 0:
        return diff

    watchers = changeset.watchers
    if strategy == "auto":
        strategy = "watchers" if n > changeset.watching_count else "changes"
    debug("Dispatching %d changes against %d watched paths by %s",
          n, changeset.watching_count, strategy)

    if strategy == "watchers":
        for path, funcs in watchers.items():
            if path in diff:
                _call_watchers(doc, funcs, diff[path])
    else:
        for path, v in diff.items():
            funcs = watchers.get(path)
            if funcs is not None:
                _call_watchers(doc, funcs, v)

    accessors = changeset.accessors
    for rule in changeset.mappings:
        for path in rule.paths:
            if path in diff:
                _call_mapping(doc, rule, diff, accessors)
                break

    for func in changeset.root_watchers:
        func(doc)

    return diff


def mapupdate(doc, changeset, *extra):
    """Invoke every rule of changeset with live values from doc.

    Each callback is called as callback(doc, *extra, *values), whatever
    has changed or not.
    """
    accessors = changeset.accessors
    for rule in changeset.rules:
        values = [accessors[p](doc) for p in rule.paths]
        rule.func(doc, *(extra + tuple(values)))
