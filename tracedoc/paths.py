# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections.abc import Mapping, Sequence
from functools import lru_cache
import re

from .document import Document


__all__ = ["normalize_path", "split_path", "compile_path"]


_r_index = re.compile(r"\[(-?\d+)\]")
_r_leading_dots = re.compile(r"^\.+")
r_is_int = re.compile(r"^-?\d+$")


def normalize_path(path):
    "Rewrite a path on the form 'a[3].b' into 'a.3.b'."
    return _r_leading_dots.sub("", _r_index.sub(r".\1", path))


def split_path(path):
    "Split a normalized path into segments, integer-strings become ints."
    if not path:
        return ()
    return tuple(int(p) if r_is_int.match(p) else p for p in path.split("."))


def _lookup(obj, key):
    if isinstance(obj, (Document, Mapping)):
        if key in obj:
            return obj[key]
        if isinstance(key, int) and str(key) in obj:
            return obj[str(key)]
        return None
    if isinstance(obj, Sequence) and not isinstance(obj, str) and isinstance(key, int):
        try:
            return obj[key]
        except IndexError:
            return None
    return None


@lru_cache(maxsize=None)
def compile_path(path):
    """Return a function resolving path against a document.

    The function returns None as soon as a segment can not be found,
    it never raises for missing structure. Compiled functions are
    cached per normalized path.
    """
    segments = split_path(normalize_path(path))

    def accessor(doc):
        obj = doc
        for key in segments:
            obj = _lookup(obj, key)
            if obj is None:
                return None
        return obj

    accessor.path = ".".join(str(s) for s in segments)
    return accessor
