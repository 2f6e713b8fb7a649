#! /usr/bin/env python

"""
<Program Name>
  setup.py

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  BUILD SOURCE DISTRIBUTION

  The following shell command generates a b64buffer source archive that
  can be distributed to other users.  The packaged source is saved to the
  'dist' folder in the current directory.

  $ python setup.py sdist


  INSTALLATION OPTIONS

  pip - installing and managing Python packages (recommended):

  # Installing from local source archive.
  $ pip install <path to archive>

  # Or from the root directory of the unpacked archive.
  $ pip install .


  RUNNING THE TESTS

  $ cd tests && python aggregate_tests.py
"""

from setuptools import setup
from setuptools import find_packages


with open('README.rst') as file_object:
  long_description = file_object.read()

setup(
  name = 'b64buffer',
  version = '0.1.0',
  description = 'RFC4648 base64 encoding and decoding into growable byte'
      ' buffers, with rollback on failed decodes',
  license = 'MIT',
  long_description = long_description,
  long_description_content_type = 'text/x-rst',
  keywords = 'base64, rfc4648, codec, buffer',
  classifiers = [
    'Development Status :: 4 - Beta',
    'Intended Audience :: Developers',
    'License :: OSI Approved :: MIT License',
    'Natural Language :: English',
    'Operating System :: OS Independent',
    'Programming Language :: Python :: 3',
    'Programming Language :: Python :: 3.9',
    'Programming Language :: Python :: 3.10',
    'Programming Language :: Python :: 3.11',
    'Programming Language :: Python :: 3.12',
    'Programming Language :: Python :: Implementation :: CPython',
    'Topic :: Software Development'
  ],
  python_requires = "~=3.9",
  packages = find_packages(exclude=['tests']),
  scripts = []
)
