#!/usr/bin/env python
#
# For developement:
#
#   pip install -e .[dev]
#
# For packaging first install the latest versions of the tooling:
#
#   pip install --upgrade pip setuptools wheel twine
#

import os

from setuptools import setup, find_packages


# Fetch version without importing the package
version_globals = {}  # type: ignore
with open(os.path.join('pywhich', 'version.py')) as fd:
    exec(fd.read(), version_globals)


setup(
    name='pywhich',
    version=version_globals['__version__'],
    license='GPL-2.0-or-later',
    description='Print the full path of executables, the Unix which utility.',
    long_description=open('README.md').read(),
    long_description_content_type="text/markdown",
    classifiers=(
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: GNU General Public License v2 or later (GPLv2+)",
        "Operating System :: POSIX",
        "Programming Language :: Python :: 3",
        "Programming Language :: Unix Shell",
        "Topic :: System :: Shells",
        "Topic :: Utilities",
    ),
    keywords='which path executable alias shell',

    packages=find_packages(exclude=['docs', 'tests']),
    python_requires='>=3.6',

    install_requires=[
        "docopt>=0.6.2,<0.7",
    ],
    extras_require={
        "dev": [
            "pytest",
        ],
    },

    package_data={},
    data_files=[],

    entry_points={
        "console_scripts": [
            "pywhich=pywhich.__main__:main",
        ],
    }
)
