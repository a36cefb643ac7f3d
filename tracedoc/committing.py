# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .diff_format import Diff, Removed, validate_diff
from .document import Document
from .log import debug


__all__ = ["commit"]


def join_key(prefix, key):
    "Dotted path of key below prefix, prefix None meaning the root."
    if prefix is None:
        return str(key)
    return "%s.%s" % (prefix, key)


def _commit(doc, diff, prefix):
    """Clear pending changes of doc and its dirty children.

    Entries are written into diff when it is not None. Returns
    whether anything changed below doc.
    """
    if doc._ignore:
        # State is left as is, including the dirty flag
        return False

    doc._dirty = False
    changed = False

    if doc._changed_values:
        changed = True
        changes = doc._changed_values
        doc._changed_values = {}
        if diff is not None:
            stage = doc._stage
            for key in changes:
                diff.record(join_key(prefix, key), stage.get(key, Removed))

    for key, value in list(doc._stage.items()):
        if not isinstance(value, Document) or not value._dirty:
            continue
        if diff is None:
            changed = _commit(value, None, None) or changed
            continue

        path = join_key(prefix, key)
        if value._opaque:
            child_changed = _commit(value, None, None)
        else:
            n = diff.n
            _commit(value, diff, path)
            child_changed = diff.n != n
        if child_changed:
            if path not in diff:
                # Whole subtree entry for opaque children and ancestors of changed leaves
                diff.record(path, value)
            changed = True

    return changed


def commit(doc, diff=False):
    """Commit all pending changes of doc.

    If diff is True a new Diff is returned, mapping the dotted path of
    every changed value to its new value. A Diff instance can be passed
    instead to collect the entries into it. Otherwise the changes are
    just cleared and a boolean telling whether there were any is returned.
    """
    if diff is True:
        diff = Diff()
    elif diff is False or diff is None:
        changed = _commit(doc, None, None)
        debug("Committed document, changed: %s", changed)
        return changed
    validate_diff(diff)

    n = diff.n
    _commit(doc, diff, None)
    debug("Committed document, %d diff entries", diff.n - n)
    return diff
