# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from tracedoc import commit


class Recorder(object):
    """Makes callbacks recording their arguments, in call order."""

    def __init__(self):
        self.calls = []

    def __call__(self, name):
        def callback(doc, *args):
            self.calls.append((name,) + args)
        callback.__name__ = name
        return callback

    def names(self):
        return [c[0] for c in self.calls]

    def clear(self):
        del self.calls[:]


def committed(doc):
    "Commit doc, discarding the diff, and return it."
    commit(doc)
    return doc
