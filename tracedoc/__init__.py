# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diff_format import Diff, Missing, Removed
from .document import Document, is_document
from .committing import commit
from .paths import normalize_path, compile_path
from .changeset import ChangeSet, Rule, changeset
from .dispatch import mapchange, mapupdate
from .prettyprint import dump
from .log import TracedocError, ChangeSetError, DiffFormatError


__all__ = [
    "__version__",
    "Document", "is_document",
    "Diff", "Missing", "Removed",
    "commit",
    "normalize_path", "compile_path",
    "ChangeSet", "Rule", "changeset",
    "mapchange", "mapupdate",
    "dump",
    "TracedocError", "ChangeSetError", "DiffFormatError",
    ]
