# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pytest

from tracedoc import ChangeSet, ChangeSetError, Rule, changeset


def test_rules_sorted_by_arity(recorder):
    root = recorder("root")
    fa = recorder("a")
    fxy = recorder("xy")
    cs = changeset([
        (root,),
        (fa, "a"),
        (fxy, "b.x", "b[1]"),
    ])
    assert cs.root_watchers == [root]
    assert cs.watchers == {"a": fa}
    assert cs.watching_count == 1
    assert cs.mappings == [Rule(fxy, ("b.x", "b.1"))]
    assert [r.func for r in cs.rules] == [root, fa, fxy]


def test_same_path_collects_callbacks(recorder):
    f1, f2, f3 = recorder("1"), recorder("2"), recorder("3")
    cs = changeset([(f1, "a"), (f2, "a"), (f3, "[0]")])
    assert cs.watchers["a"] == [f1, f2]
    assert cs.watchers["0"] is f3
    assert cs.watching_count == 2


def test_paths_normalized_and_compiled(recorder):
    cs = changeset([
        (recorder("x"), "items[2].name"),
        (recorder("y"), "a", ".b"),
    ])
    assert set(cs.watchers) == {"items.2.name"}
    assert set(cs.accessors) == {"items.2.name", "a", "b"}


def test_non_callable_rule_rejected(recorder):
    with pytest.raises(ChangeSetError):
        changeset([(recorder("ok"), "a"), ("A", recorder("bad"), "a")])
    with pytest.raises(TypeError):
        changeset([()])


def test_build_is_classmethod():
    cs = ChangeSet.build([])
    assert isinstance(cs, ChangeSet)
    assert cs.watching_count == 0
    assert "rules=0" in repr(cs)
