import sys

from typing import Any, Dict, Iterator, List, Optional, TextIO


FLAGS = (
    'skip_dot', 'skip_tilde', 'skip_alias', 'read_alias',
    'show_dot', 'show_tilde', 'show_all', 'tty_only',
)

# Long options whose effect depends on where they appear relative to
# --tty-only, see `SearchOptions.from_docopt`
ORDERED = ('--skip-dot', '--skip-tilde', '--show-dot', '--show-tilde', '--tty-only')


class SearchOptions:
    """
    Flags controlling a lookup run. Instances are immutable, use
    :meth:`replace` to derive a modified copy.
    """
    __slots__ = FLAGS

    def __init__(self, **flags: bool) -> None:
        unknown = set(flags) - set(FLAGS)
        if unknown:
            raise TypeError('Unknown options: {}'.format(', '.join(sorted(unknown))))

        for name in FLAGS:
            object.__setattr__(self, name, bool(flags.get(name, False)))

    def __setattr__(self, name, value):
        raise AttributeError('SearchOptions is immutable')

    def replace(self, **changes: bool) -> 'SearchOptions':
        flags = self.as_dict()
        flags.update(changes)
        return SearchOptions(**flags)

    def as_dict(self) -> Dict[str, bool]:
        return {name: getattr(self, name) for name in FLAGS}

    def __eq__(self, other):
        if not isinstance(other, SearchOptions):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self):
        enabled = [name for name in FLAGS if getattr(self, name)]
        return 'SearchOptions({})'.format(', '.join(enabled))

    @classmethod
    def from_docopt(cls, args: Dict[str, Any], argv: List[str], *,
                    isatty: bool, euid: int) -> 'SearchOptions':
        """ Builds the options from the docopt result.

            The ``--skip-*`` and ``--show-*`` flags are applied walking *argv*
            from left to right: once ``--tty-only`` is seen and stdout is not a
            terminal, any of them found further right is turned off. Flags on
            its left keep their effect.
        """
        flags = {
            # repeated flags come as counts
            'show_all': bool(args['--all']),
            'read_alias': bool(args['--read-alias']),
            'skip_alias': bool(args['--skip-alias']),
        }

        tty_only = False
        for option in ordered_options(argv):
            if option == '--tty-only':
                tty_only = not isatty
            elif option == '--show-tilde':
                # root always gets full paths
                flags['show_tilde'] = not tty_only and euid != 0
            else:
                flags[option[2:].replace('-', '_')] = not tty_only

        flags['tty_only'] = tty_only
        if flags['skip_alias']:
            flags['read_alias'] = False

        return cls(**flags)

    def check_home(self, home: Optional[str], program: str,
                   err: Optional[TextIO] = None) -> 'SearchOptions':
        """ Tilde options need ``$HOME``, turn them off when it's missing.
        """
        if home or not (self.show_tilde or self.skip_tilde):
            return self

        flag = '--show-tilde' if self.show_tilde else '--skip-tilde'
        print('{}: {}: Environment variable HOME not set'.format(program, flag),
              file=err or sys.stderr)

        return self.replace(show_tilde=False, skip_tilde=False)


def ordered_options(argv: List[str]) -> Iterator[str]:
    """ Yields the order sensitive long options found in *argv*, expanding
        unambiguous prefixes (``--show-t``) the way docopt accepts them.
    """
    for arg in argv:
        if arg == '--':
            break

        if not arg.startswith('--'):
            continue

        matches = [opt for opt in ORDERED if opt.startswith(arg)]
        if arg in ORDERED:
            yield arg
        elif len(matches) == 1:
            yield matches[0]
