from io import StringIO

import pytest

from pywhich.env import Environment
from pywhich.options import SearchOptions
from pywhich.search import Searcher


@pytest.fixture
def make_exe():
    """ Creates a script file, executable unless another *mode* is given
    """
    def make(directory, name, mode=0o755):
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_text('#!/bin/sh\n')
        path.chmod(mode)
        return path

    return make


@pytest.fixture
def searcher_for():
    """ Builds a Searcher writing into a StringIO available as ``.out``
    """
    def build(environ=None, **flags):
        env = Environment(environ or {})
        return Searcher(SearchOptions(**flags), env, out=StringIO())

    return build
