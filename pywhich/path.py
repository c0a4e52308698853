"""
Search path handling.

A search path is a ``:`` separated list of directories. Empty elements
(``PATH=/bin::/usr/bin`` or a leading/trailing ``:``) stand for the current
directory, the same as in POSIX shells.

When the command name itself contains a path, like ``./configure`` or
``~/bin/tool``, the search path is not consulted at all. The name is split
into its directory and basename and that directory is the only element
probed::

    >>> split_program('bin/tool')
    ('./bin', 'tool')

Paths found are normalized before displaying them, ``.`` and ``..``
segments get resolved without touching the filesystem, so symlinks are
kept as they are. When ``..`` would go above the root the original path is
kept unresolved.
"""
import logging

from typing import Iterator, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from pywhich.env import Environment


logger = logging.getLogger(__name__)

SEPARATOR = ':'


def iter_path_elements(path_list: Optional[str]) -> Iterator[str]:
    """ Yields the directories in a search path, in order.
    """
    if not path_list:
        return

    for element in path_list.split(SEPARATOR):
        yield element or '.'


def is_absolute_program(name: str) -> bool:
    """ Checks if the name refers to a path instead of a command to search.
    """
    return '/' in name or name.startswith(('.', '~'))


def split_program(name: str) -> Tuple[str, str]:
    """ Splits a path-like command name into the directory to probe and the
        name to look for in it.
    """
    if not name.startswith(('.', '/', '~')):
        name = './' + name

    idx = name.rfind('/')
    if idx < 0:
        # names like `.hidden` or `~foo` without any slash
        return '.', name
    if idx == 0:
        return '/', name[1:]

    return name[:idx], name[idx+1:]


def expand_tilde(element: str, env: 'Environment') -> Optional[str]:
    """ Expands ``~`` and ``~user`` at the start of a path element.

        Returns None when the home directory can't be found.
    """
    if not element.startswith('~'):
        return element

    head, sep, rest = element.partition('/')
    home = env.user_home(head[1:])
    if home is None:
        return None

    home = home.rstrip('/')
    if not sep:
        return home or '/'

    return home + sep + rest


def normalize(path: str, cwd: str = '/') -> str:
    """ Canonical absolute form of a path.

        Relative paths are resolved against *cwd* (absolute and ending with a
        slash). Repeated slashes and ``.`` segments are dropped and ``..``
        removes its parent segment. A trailing slash is kept, a trailing
        ``.`` or ``..`` leaves one too.

        If ``..`` tries to go above the root the *path* is returned as given.
    """
    full = path if path.startswith('/') else cwd + path

    segments = []
    for segment in full.split('/'):
        if segment in ('', '.'):
            continue

        if segment == '..':
            if not segments:
                logger.debug('Path goes above the root, kept as is: %s', path)
                return path
            segments.pop()
            continue

        segments.append(segment)

    if not segments:
        return '/'

    result = '/' + '/'.join(segments)
    if full.endswith(('/', '/.', '/..')):
        result += '/'

    return result


def is_under(path: str, directory: Optional[str]) -> bool:
    """ Checks if *path* starts with *directory* (which ends with a slash)
    """
    return bool(directory) and path.startswith(directory)


def relative_display(path: str, directory: str, prefix: str) -> str:
    """ Replaces the *directory* at the start of *path* by *prefix*.

        >>> relative_display('/home/alice/bin/tool', '/home/alice/', '~/')
        '~/bin/tool'
    """
    if not is_under(path, directory):
        return path

    return prefix + path[len(directory):]
