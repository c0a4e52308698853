import sys
import logging

from pywhich.env import Environment
from pywhich.options import SearchOptions
from pywhich.path import iter_path_elements, is_absolute_program, split_program, \
    expand_tilde, normalize, is_under, relative_display
from pywhich.probe import probe

from typing import Iterator, Optional, TextIO, Tuple


logger = logging.getLogger(__name__)


class Searcher:
    """
    Looks up command names in a search path and prints where they are.

    One line is written for each match, with only the first one unless the
    ``show_all`` option is set. Lines are prefixed by a tab when searching
    on behalf of an alias.
    """
    __slots__ = ('options', 'env', 'out')

    def __init__(self, options: SearchOptions, env: Environment,
                 out: Optional[TextIO] = None) -> None:
        self.options = options
        self.env = env
        self.out = out or sys.stdout

    def candidates(self, name: str, path_list: Optional[str]) -> Iterator[Tuple[str, bool]]:
        """ Yields every executable found for *name* as a pair of its path
            and whether the path element it came from started with a dot.
        """
        if is_absolute_program(name):
            directory, name = split_program(name)
            elements = iter([directory])  # type: Iterator[str]
        else:
            elements = iter_path_elements(path_list)

        for element in elements:
            if element.startswith('~'):
                expanded = expand_tilde(element, self.env)
                if expanded is None or self.options.skip_tilde:
                    logger.debug('Skipping %s', element)
                    continue
                element = expanded

            if self.options.skip_dot and not element.startswith('/'):
                logger.debug('Skipping relative %s', element)
                continue

            found = probe(element, name)
            if found:
                yield found, element.startswith('.')

    def search(self, name: str, path_list: Optional[str], indent: bool = False) -> bool:
        """ Prints the matches for *name*, returns False if there were none.
        """
        printed = set()
        for found, from_dot in self.candidates(name, path_list):
            line = self.display(self.clean_up(found), from_dot)
            if line is None or line in printed:
                continue

            self.out.write('{}{}\n'.format('\t' if indent else '', line))
            printed.add(line)

            if not self.options.show_all:
                break

        return bool(printed)

    def clean_up(self, path: str) -> str:
        # the working directory is only needed for relative paths
        cwd = '/' if path.startswith('/') else self.env.cwd
        return normalize(path, cwd)

    def display(self, full_path: str, from_dot: bool) -> Optional[str]:
        """ Formats a normalized match according to the show/skip options.

            Returns None when the match must be skipped, that's the case for
            matches under ``$HOME`` with ``skip_tilde``.
        """
        opts = self.options
        in_home = (opts.show_tilde or opts.skip_tilde) and is_under(full_path, self.env.home)

        if opts.show_dot and from_dot and not (opts.skip_tilde and in_home) \
                and is_under(full_path, self.env.cwd):
            return relative_display(full_path, self.env.cwd, './')

        if in_home:
            if opts.skip_tilde:
                logger.debug('Skipping %s inside HOME', full_path)
                return None
            if opts.show_tilde:
                return relative_display(full_path, self.env.home, '~/')

        return full_path

    def failure(self, name: str, path_list: Optional[str]) -> Tuple[str, str]:
        """ The name and where it was looked for, to report it wasn't found.
        """
        if is_absolute_program(name):
            directory, name = split_program(name)
            return name, directory

        return name, path_list or ''
