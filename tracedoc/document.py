# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections.abc import Mapping, MutableMapping

from .diff_format import Missing


__all__ = ["Document", "is_document"]


def is_document(obj):
    "Return True if obj is a tracked Document."
    return isinstance(obj, Document)


def is_structured(value):
    "Values written recursively into a child document instead of stored as is."
    return isinstance(value, (dict, list, Document))


def _items_of(value):
    if isinstance(value, Document):
        return list(value._stage.items())
    elif isinstance(value, Mapping):
        return list(value.items())
    else:
        return list(enumerate(value))


def _same(current, value):
    # Documents compare by identity, scalars by type and value
    if current is value:
        return True
    if isinstance(current, Document) or isinstance(value, Document):
        return False
    if current is Missing or value is Missing:
        return False
    return type(current) is type(value) and current == value


class Document(MutableMapping):
    """A nested key/value tree which records its own changes.

    Writes through item assignment are intercepted: each level keeps the
    set of keys changed since the last commit together with the value
    each key held when the interval started. Nested dicts and lists are
    stored as owned child documents, with a back reference to the parent
    used to propagate the dirty flag upwards.

    Use `tracedoc.commit` to collect and clear the recorded changes.
    """

    def __init__(self, init=None):
        self._stage = {}
        # Changed keys mapped to their value at the start of the interval
        self._changed_values = {}
        self._dirty = False
        self._parent = None
        self._ignore = False
        self._opaque = False
        if init is not None:
            self._assign_items(_items_of(init))

    # Mapping protocol

    def __getitem__(self, key):
        return self._stage[key]

    def __setitem__(self, key, value):
        current = self._stage.get(key, Missing)
        if _same(current, value):
            return
        if is_structured(value):
            self._change_recursively(key, value)
        else:
            self._change_value(key, value)

    def __delitem__(self, key):
        if key not in self._stage:
            raise KeyError(key)
        self._change_value(key, Missing)

    def __contains__(self, key):
        return key in self._stage

    def __iter__(self):
        return iter(self._stage)

    def __len__(self):
        return len(self._stage)

    def __repr__(self):
        return "<Document{}{}{} {}>".format(
            "^" if self._parent is not None else "",
            "*" if self._dirty else "",
            "~" if self._ignore else "",
            repr(self._stage),
        )

    # Change interception

    def _mark_dirty(self):
        if self._dirty:
            return
        self._dirty = True
        parent = self._parent
        while parent is not None and not parent._dirty:
            parent._dirty = True
            parent = parent._parent

    def _change_value(self, key, value):
        current = self._stage.get(key, Missing)
        if key not in self._changed_values:
            # First write in this interval defines the baseline
            self._changed_values[key] = current
        if isinstance(current, Document) and current._parent is self:
            current._parent = None
        if value is Missing:
            del self._stage[key]
        else:
            self._stage[key] = value
        self._mark_dirty()

    def _change_recursively(self, key, value):
        items = _items_of(value)
        child = self._stage.get(key, Missing)
        fresh = not isinstance(child, Document)
        if fresh:
            previous = child
            baseline = self._changed_values.get(key, Missing)
            child = Document()
            child._parent = self
            if isinstance(baseline, Document):
                # Rebuild from the version the last commit saw
                child._assign_items(_items_of(baseline))
            self._stage[key] = child
        child._assign_items(items)
        if fresh and not child._dirty:
            # Nothing recorded inside the new child, report it at this level
            if key not in self._changed_values:
                self._changed_values[key] = previous
            self._mark_dirty()
        else:
            self._changed_values.pop(key, None)

    def _assign_items(self, items):
        wanted = set(k for k, _ in items)
        for k in [k for k in self._stage if k not in wanted]:
            del self[k]
        for k, v in items:
            self[k] = v

    # Public helpers

    @property
    def dirty(self):
        return self._dirty

    @property
    def parent(self):
        return self._parent

    @property
    def ignored(self):
        return self._ignore

    @property
    def opaque(self):
        return self._opaque

    @property
    def changed_keys(self):
        "Keys changed at this level since the last commit."
        return list(self._changed_values)

    def changes(self):
        "List of (key, old value, current value) pending at this level."
        return [(k, old, self._stage.get(k, Missing))
                for k, old in self._changed_values.items()]

    def assign(self, value):
        """Replace the whole content with value (a mapping, list or document).

        Keys absent from value are deleted, the rest written, so only
        actual differences are recorded.
        """
        self._assign_items(_items_of(value))

    def mark_changed(self, key):
        """Report key on next commit even if its value is unchanged."""
        if key in self._changed_values:
            return
        self._changed_values[key] = self._stage.get(key, Missing)
        self._mark_dirty()

    def set_ignore(self, enable):
        """Exclude this subtree from commits while enable is true."""
        self._ignore = bool(enable)
        if not enable and self._dirty:
            # Changes were held back while ignored, make them reachable again
            parent = self._parent
            while parent is not None:
                parent._dirty = True
                parent = parent._parent

    def set_opaque(self, enable):
        """Report this subtree as one value on commit while enable is true."""
        self._opaque = bool(enable)

    def sequence_length(self):
        "Number of contiguous integer keys starting at 0."
        n = 0
        while n in self._stage:
            n += 1
        return n

    def insert(self, index, value=Missing):
        """Insert value before index, shifting later items up.

        With a single argument the value is appended.
        """
        n = self.sequence_length()
        if value is Missing:
            index, value = n, index
        for i in range(n - 1, index - 1, -1):
            self[i + 1] = self[i]
        self[index] = value

    def remove(self, index=None):
        """Remove and return the item at index (default last), shifting later items down."""
        n = self.sequence_length()
        if index is None:
            index = n - 1
        if index not in self._stage:
            raise IndexError("remove index out of range: %r" % (index,))
        value = self._stage[index]
        del self[index]
        for i in range(index + 1, n):
            self[i - 1] = self[i]
        if index < n - 1:
            del self[n - 1]
        return value

    def to_builtin(self):
        """Return a plain copy built from dicts and lists.

        Pure sequences (keys 0..n-1) become lists.
        """
        def convert(v):
            return v.to_builtin() if isinstance(v, Document) else v
        n = self.sequence_length()
        if n and n == len(self._stage):
            return [convert(self._stage[i]) for i in range(n)]
        return {k: convert(v) for k, v in self._stage.items()}
