# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging
import os

from pytest import fixture, skip

from tracedoc import Document

from .utils import Recorder, committed


def testspath():
    return os.path.abspath(os.path.dirname(__file__))


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture(scope='session')
def filespath():
    return os.path.join(testspath(), "files")


@fixture
def recorder():
    return Recorder()


@fixture
def doc():
    """A committed document with a scalar, a nested mapping and a list"""
    return committed(Document({
        "a": 0,
        "b": {"x": 1, "y": 2},
        "l": [10, 20, 30],
    }))


@fixture
def nested_doc():
    return committed(Document({"p": {"q": {"r": {"v": 1}}, "w": 0}}))


@fixture
def reset_log():
    # clear root logger handlers before test and reset afterwards
    handlers = list(logging.getLogger().handlers)
    logging.getLogger().handlers[:] = []
    yield
    logging.getLogger().handlers[:] = handlers
