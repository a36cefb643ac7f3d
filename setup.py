#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

TRACEDOC_PATH = HERE / "tracedoc"


def get_version(path):
    with open(path) as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)


VERSION = get_version(TRACEDOC_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name='tracedoc',
      version=VERSION,
      description='Change tracking documents with path based change dispatch',
      long_description=LONG_DESCRIPTION,
      long_description_content_type='text/markdown',
      license='BSD',
      python_requires='>=3.8',
      packages=find_packages(exclude=['tracedoc.tests', 'tracedoc.tests.*']),
      install_requires=[
          'colorama',
          'traitlets>=5',
      ],
      extras_require={
          'test': [
              'pytest>=6.0',
          ],
      },
      entry_points={
          'console_scripts': [
              'tracedoc = tracedoc.__main__:main_dispatch',
              'tdshow = tracedoc.tdshowapp:main',
              'tddiff = tracedoc.tddiffapp:main',
          ],
      },
      )
