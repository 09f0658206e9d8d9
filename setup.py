#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""dosdate2str package definition."""

import io
import re

from setuptools import setup, find_packages


def load_requirements(fname):
    """Read requirement specifiers, skipping comments and blank lines."""
    with io.open(fname) as f:
        return [line.strip() for line in f
                if line.strip() and not line.startswith('#')]


def _get_attribute(name):
    """Get version information from __init__.py."""
    with io.open('dosdate2str/__init__.py') as f:
        return re.search(r"{}\s*=\s*'([^']+)'\s*".format(name),
                         f.read()).group(1)


def _get_readme():
    """Get contents of README.rst."""
    with io.open('README.rst') as readme:
        return readme.read()


setup(name=_get_attribute('__name__'),
      version=_get_attribute('__version__'),
      description='Decode MS-DOS packed dates into YYYY-MM-DD strings',
      long_description=_get_readme(),
      long_description_content_type='text/x-rst',
      author=_get_attribute('__author__'),
      license=_get_attribute('__license__'),
      packages=find_packages(exclude=['tests']),
      keywords=['DOS', 'FAT', 'ZIP', 'DOSTIME', 'date'],
      python_requires='>=3.6',
      install_requires=load_requirements("requirements/install.txt"),
      extras_require={
          'test': load_requirements("requirements/test.txt"),
      },
      entry_points={
          'console_scripts': [
              'hex2be2dostime2date2str = '
              'dosdate2str.DosDateCli:hex2be2dostime2date2str',
              'int2dostime2date2str = '
              'dosdate2str.DosDateCli:int2dostime2date2str',
          ],
      },
      classifiers=[
          'Development Status :: 4 - Beta',
          'Intended Audience :: Developers',
          'License :: OSI Approved :: MIT License',
          'Operating System :: OS Independent',
          'Programming Language :: Python :: 3 :: Only',
          'Programming Language :: Python :: 3',
          'Topic :: Software Development :: Libraries',
          'Topic :: Software Development :: Libraries :: Python Modules',
          'Topic :: System :: Filesystems'],
      )
