# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pytest

from tracedoc import Diff, DiffFormatError, Document, Removed, commit


def test_first_commit_reports_everything():
    doc = Document({"a": 0, "b": {"x": 1, "y": 2}})
    d = commit(doc, True)
    assert isinstance(d, Diff)
    assert set(d) == {"a", "b", "b.x", "b.y"}
    assert d["a"] == 0
    assert d["b.x"] == 1
    assert d["b"] is doc["b"]
    assert d.n == 4
    assert not doc.dirty
    assert not doc["b"].dirty


def test_commit_is_idempotent(doc):
    d = commit(doc, True)
    assert d == {}
    assert d.n == 0
    assert commit(doc) is False
    assert commit(doc) is False


def test_boolean_commit(doc):
    doc["b"]["y"] = 3
    assert commit(doc) is True
    assert commit(doc) is False
    assert commit(doc, True).n == 0


def test_leaf_and_ancestor_marker(doc):
    doc["b"]["y"] = 3
    d = commit(doc, True)
    assert d == {"b.y": 3, "b": doc["b"]}
    assert d["b"] is doc["b"]
    assert d.n == 2


def test_deep_markers(nested_doc):
    nested_doc["p"]["q"]["r"]["v"] = 2
    d = commit(nested_doc, True)
    assert sorted(d) == ["p", "p.q", "p.q.r", "p.q.r.v"]
    assert d["p.q.r.v"] == 2
    assert d["p.q"] is nested_doc["p"]["q"]


def test_opaque_collapse():
    doc = Document({"c": {"a": 3, "b": 4}})
    doc["c"].set_opaque(True)
    d = commit(doc, True)
    assert list(d) == ["c"]
    assert d["c"] is doc["c"]

    doc["c"]["a"] = 5
    d = commit(doc, True)
    assert list(d) == ["c"]
    assert d.n == 1
    assert d["c"]["a"] == 5
    assert not doc["c"].dirty
    assert commit(doc, True).n == 0


def test_opaque_inside_opaque():
    doc = Document({"c": {"d": {"e": 1}}})
    doc["c"].set_opaque(True)
    commit(doc)
    doc["c"]["d"]["e"] = 2
    d = commit(doc, True)
    assert list(d) == ["c"]
    assert not doc["c"]["d"].dirty


def test_removal_sentinel(doc):
    del doc["a"]
    d = commit(doc, True)
    assert d["a"] is Removed
    assert d.removed() == ["a"]
    assert d.n == 1


def test_noop_write_produces_nothing(doc):
    doc["a"] = 0
    assert not doc.dirty
    assert commit(doc, True) == {}


def test_write_and_revert_still_reported(doc):
    doc["a"] = 1
    doc["a"] = 0
    assert commit(doc, True) == {"a": 0}


def test_sequence_shift(doc):
    doc["l"].insert(1, 15)
    d = commit(doc, True)
    assert d == {"l.1": 15, "l.2": 20, "l.3": 30, "l": doc["l"]}


def test_sequence_remove(doc):
    doc["l"].remove(0)
    d = commit(doc, True)
    assert d == {"l.0": 20, "l.1": 30, "l.2": Removed, "l": doc["l"]}


def test_mark_changed_reemits(doc):
    doc["b"].mark_changed("x")
    d = commit(doc, True)
    assert d == {"b.x": 1, "b": doc["b"]}


def test_mark_changed_on_child_key(doc):
    doc.mark_changed("b")
    d = commit(doc, True)
    assert d["b"] is doc["b"]
    assert d.n == 1


def test_replace_child_with_scalar(doc):
    doc["b"] = 5
    assert commit(doc, True) == {"b": 5}
    doc["b"] = {"x": 1}
    d = commit(doc, True)
    assert d == {"b.x": 1, "b": doc["b"]}


def test_empty_child_replacing_scalar(doc):
    doc["a"] = {}
    d = commit(doc, True)
    assert d["a"] is doc["a"]
    assert d.n == 1


def test_ignored_subtree_skipped(doc):
    doc["b"].set_ignore(True)
    doc["b"]["x"] = 5
    doc["a"] = 1
    d = commit(doc, True)
    assert d == {"a": 1}
    # Pending changes stay in the ignored subtree
    assert doc["b"].dirty
    assert doc["b"].changed_keys == ["x"]
    assert commit(doc, True) == {}

    doc["b"].set_ignore(False)
    d = commit(doc, True)
    assert d == {"b.x": 5, "b": doc["b"]}


def test_ignored_from_first_commit():
    doc = Document({"a": 1, "b": {"x": 1}})
    doc["b"].set_ignore(True)
    assert commit(doc, True) == {"a": 1}
    doc["b"].set_ignore(False)
    assert commit(doc, True) == {"b.x": 1, "b": doc["b"]}


def test_unignore_deep_subtree_after_intervening_commits(nested_doc):
    q = nested_doc["p"]["q"]
    q.set_ignore(True)
    q["r"]["v"] = 2
    assert commit(nested_doc, True) == {}

    nested_doc["p"]["w"] = 1
    assert commit(nested_doc, True) == {"p.w": 1, "p": nested_doc["p"]}
    q["r"]["v"] = 3
    assert commit(nested_doc, True) == {}

    q.set_ignore(False)
    d = commit(nested_doc, True)
    assert sorted(d) == ["p", "p.q", "p.q.r", "p.q.r.v"]
    assert d["p.q.r.v"] == 3
    assert not q.dirty


def test_commit_into_given_diff(doc):
    d = Diff()
    doc["a"] = 1
    assert commit(doc, d) is d
    doc["b"]["x"] = 2
    commit(doc, d)
    assert d == {"a": 1, "b.x": 2, "b": doc["b"]}
    assert d.n == 3


def test_integer_keys_in_paths():
    doc = Document([{"x": 1}, {"x": 2}])
    commit(doc)
    doc[1]["x"] = 3
    d = commit(doc, True)
    assert d == {"1.x": 3, "1": doc[1]}


def test_commit_rejects_plain_dict(doc):
    doc["a"] = 1
    with pytest.raises(DiffFormatError):
        commit(doc, {})
    # Nothing was consumed
    assert doc.changed_keys == ["a"]
