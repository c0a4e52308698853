"""
pywhich %version% -- print full path of executables

Usage:
  %program% [options]... [--] [PROGRAMNAME...]

Options:
  -v --version      Print version and exit successfully.
  -V                Print version and exit successfully.
  --help            Print this help and exit successfully.
  --skip-dot        Skip directories in PATH that start with a dot.
  --skip-tilde      Skip directories in PATH that start with a tilde.
  --show-dot        Don't expand a dot to current directory in output.
  --show-tilde      Output a tilde for HOME directory for non-root.
  --tty-only        Stop processing options on the right if not on tty.
  -a --all          Print all matches in PATH, not just the first.
  -i --read-alias   Read list of aliases from stdin.
  --skip-alias      Ignore option --read-alias; don't read stdin.
  --debug           Enables debug mode.

Note that --tty-only only affects the --skip-* and --show-* options given
after it, the ones on its left are always applied.
"""
import os
import sys
import re
import platform
import logging
from pathlib import PurePath

from docopt import docopt

import pywhich
from pywhich import CwdError
from pywhich.env import Environment
from pywhich.options import SearchOptions
from pywhich.search import Searcher
from pywhich.alias import AliasScanner


# Start logs in default level
logging.basicConfig(level=logging.WARN)

# exit status when the run can't even start, what `exit(-1)` gives in C
FATAL_STATUS = 255


def version_text():
    return 'pywhich v{} ({} {} - {} {})'.format(
        pywhich.__version__,
        platform.python_implementation(),
        platform.python_version(),
        platform.system(),
        platform.machine())


def lookup(names, options, env, program):
    """ Resolves every name, reading aliases first when asked to.

        Returns the number of names that couldn't be found.
    """
    path_list = env.path
    searcher = Searcher(options, env, out=sys.stdout)

    resolved = set()
    if options.read_alias:
        if sys.stdin.isatty():
            print('{}: --read-alias, -i: Warning: stdin is a tty.'.format(program),
                  file=sys.stderr)

        scanner = AliasScanner(searcher, names, path_list)
        scanner.scan(sys.stdin)
        resolved = scanner.resolved

    fail_count = 0
    for idx, name in enumerate(names):
        if idx in resolved:
            continue

        if not searcher.search(name, path_list):
            print('{}: no {} in ({})'.format(program, *searcher.failure(name, path_list)),
                  file=sys.stderr)
            fail_count += 1

    return fail_count


# setup.py entrypoint will call this directly
def main(argv=None, environ=None):
    if argv is None:
        argv = sys.argv[1:]

    program = PurePath(sys.argv[0]).name
    if program == '__main__.py':
        program = 'pywhich'

    opts = dict(version=pywhich.__version__, program=program)
    doc = re.sub(r'%([A-Za-z_]+)%', lambda m: opts[m.group(1)], __doc__)
    # flags may be repeated like getopt allows, docopt gives their counts
    args = docopt(doc, help=False, argv=argv)

    if args['--help']:
        print(doc.strip(), file=sys.stderr)
        raise SystemExit(0)

    if args['--version'] or args['-V']:
        print(version_text())
        raise SystemExit(0)

    if args['--debug']:
        logging.getLogger('').setLevel(logging.DEBUG)

    names = args['PROGRAMNAME']
    if not names:
        print(doc.strip(), file=sys.stderr)
        raise SystemExit(FATAL_STATUS)

    env = Environment(environ)
    options = SearchOptions.from_docopt(
        args, argv, isatty=sys.stdout.isatty(), euid=os.geteuid())
    options = options.check_home(env.home, program)

    try:
        if options.show_dot:
            env.cwd  # fail early, it'll be needed for the output
        fail_count = lookup(names, options, env, program)
    except CwdError as ex:
        print('{}: {}'.format(program, ex), file=sys.stderr)
        raise SystemExit(FATAL_STATUS)

    raise SystemExit(fail_count)


# needed for `python -m pywhich` to work
if __name__ == '__main__':
    main()
