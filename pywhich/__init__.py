from .version import __version__


class WhichError(Exception):
    """ Base class for the errors that abort a lookup run.
    """


class CwdError(WhichError):
    """ The current working directory could not be determined, neither from
        the system nor from ``$PWD``. Paths can't be normalized without it.
    """

    def __init__(self, message="Can't get current working directory"):
        super().__init__(message)


from .env import Environment
from .path import iter_path_elements, is_absolute_program, split_program, \
    expand_tilde, normalize
from .probe import FileStatus, file_status, probe
from .options import SearchOptions
from .search import Searcher
from .alias import AliasEntry, AliasScanner, parse_alias, tokenize_commands


__all__ = [
    'WhichError', 'CwdError',
    'Environment',
    'SearchOptions', 'Searcher',
    'AliasEntry', 'AliasScanner',
    'which',
]


def which(name: str, *, path_list=None, show_all=False):
    """ Programmatic lookup, returns the list of normalized paths where
        *name* was found (at most one unless *show_all* is set).

        The display options do not apply here, paths are always absolute.
    """
    from io import StringIO

    env = Environment()
    if path_list is None:
        path_list = env.path

    out = StringIO()
    searcher = Searcher(SearchOptions(show_all=show_all), env, out=out)
    searcher.search(name, path_list)
    return out.getvalue().splitlines()
