# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import DiffFormatError


class _Sentinel(object):
    def __init__(self, name):
        self._name = name

    def __repr__(self):
        return self._name

    def __bool__(self):
        return False


# Sentinel for an absent value, allows None as a value
Missing = _Sentinel("Missing")

# Sentinel stored in a diff for a key that was deleted
Removed = _Sentinel("Removed")


class Diff(dict):
    """Flat mapping from dotted path to changed value.

    Values are scalars, whole child documents (opaque subtrees and
    markers for ancestors of changed leaves) or the `Removed` sentinel.

    The entry counter `n` is maintained by commit and is what dispatch
    uses to decide whether there is anything to do at all.
    """
    def __init__(self, *args, **kwargs):
        super(Diff, self).__init__(*args, **kwargs)
        self.n = len(self)

    def record(self, path, value):
        "Store value at path and count the entry."
        self[path] = value
        self.n += 1

    def removed(self):
        "Paths that were deleted."
        return sorted(k for k, v in self.items() if v is Removed)

    def __repr__(self):
        return "Diff(n=%d, %s)" % (self.n, dict.__repr__(self))


def value_of(v):
    "Translate a diff value to what callbacks see, Removed becomes None."
    return None if v is Removed else v


def validate_diff(diff):
    """Check wheter a diff is well formed.

    Raises a DiffFormatError if not well formed.
    """
    if not isinstance(diff, Diff):
        raise DiffFormatError("Diff must be a Diff instance, not '{}'.".format(
            type(diff).__name__))
    for k in diff:
        if not isinstance(k, str):
            raise DiffFormatError(
                "Invalid diff path '{}' of type '{}'. Expecting str.".format(k, type(k)))
    if diff.n < len(diff):
        raise DiffFormatError(
            "Diff counts {} entries but holds {}.".format(diff.n, len(diff)))


def is_valid_diff(diff):
    """Checks wheter a diff is well formed.

    Returns a boolean indicating the well-formedness of the diff.
    """
    try:
        validate_diff(diff)
    except DiffFormatError:
        return False
    return True


def diff_to_json(diff):
    """Convert a diff to a json-able dict.

    Documents are converted to plain dicts/lists, removed paths are
    listed separately since None is a valid value.
    """
    from .document import is_document
    validate_diff(diff)
    changes = {}
    for path in sorted(diff):
        v = diff[path]
        if v is Removed:
            continue
        elif is_document(v):
            changes[path] = v.to_builtin()
        else:
            changes[path] = v
    return {"n": diff.n, "changes": changes, "removed": diff.removed()}
