"""
Alias definitions scanner.

Reads lines as printed by the shell's ``alias`` builtin::

    alias ll='ls -la'
    alias lsgrep='ls | grep --color=auto'

When the name of an alias is one of the programs we were asked about, the
definition is echoed and the first word of every command in its value is
looked up, indented with a tab.

Only that single line shape is understood, shell functions or multi-line
definitions are not.
"""
import re
import logging
from enum import Enum

from typing import Iterable, List, Optional, Set, TextIO, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from pywhich.search import Searcher


logger = logging.getLogger(__name__)

BLANKS = ' \t\r\n'
QUOTES = '\'"'
OPERATORS = '|&'

# characters a backslash escapes inside double quotes
DQUOTE_ESCAPES = '"\\$`'

ALIAS_RE = re.compile(r'''
    ^[ \t]*
    (?:alias)?[ \t]*
    (?P<name>[^ \t=]*)
    [ \t]*=?[ \t]*
    (?P<value>.*)
''', re.X | re.S)


class State(Enum):
    DEFAULT = 'default'          # before or inside a command word
    AFTER_TOKEN = 'after_token'  # skipping the arguments of a command
    IN_QUOTE = 'in_quote'        # quoted string among those arguments


class AliasEntry:
    __slots__ = ('name', 'commands', 'line')

    def __init__(self, name: str, commands: Tuple[str, ...], line: str) -> None:
        self.name = name
        self.commands = commands
        self.line = line

    def __repr__(self):
        return 'AliasEntry({!r}, {!r})'.format(self.name, self.commands)


def unquote(text: str) -> str:
    """ Removes the quoting of the right hand side of an alias definition.

        bash quotes the whole value and prints single quotes inside it as
        ``'\\''``, so quotes may open and close several times::

            >>> unquote("'echo '\\\\''hi'\\\\'''")
            "echo 'hi'"

        The value ends at the first unquoted line break.
    """
    result = []
    current = None  # the quote currently open
    idx = 0
    while idx < len(text):
        ch = text[idx]

        if current == "'":
            if ch == current:
                current = None
            else:
                result.append(ch)
        elif current == '"':
            if ch == current:
                current = None
            elif ch == '\\' and text[idx+1:idx+2] and text[idx+1] in DQUOTE_ESCAPES:
                idx += 1
                result.append(text[idx])
            else:
                result.append(ch)
        elif ch in QUOTES:
            current = ch
        elif ch == '\\' and idx + 1 < len(text):
            idx += 1
            result.append(text[idx])
        elif ch in '\r\n':
            break
        else:
            result.append(ch)

        idx += 1

    return ''.join(result)


def tokenize_commands(value: str) -> List[str]:
    """ Extracts the command names from the (unquoted) value of an alias.

        The value may chain several commands with ``|``, ``||``, ``&`` or
        ``&&``; the first word of each one is returned. Operators escaped
        with a backslash or inside quotes don't separate commands.
    """
    commands = []
    word = []  # type: List[str]
    state = State.DEFAULT
    nested = None

    def flush():
        if word:
            commands.append(''.join(word))
            del word[:]

    idx = 0
    while idx < len(value):
        ch = value[idx]

        if state is State.DEFAULT:
            if ch == '\\' and idx + 1 < len(value):
                idx += 1
                word.append(value[idx])
            elif ch in BLANKS and not word:
                pass
            elif ch in BLANKS or ch in OPERATORS:
                flush()
                state = State.AFTER_TOKEN
                continue  # the operator is handled in AFTER_TOKEN
            else:
                word.append(ch)

        elif state is State.AFTER_TOKEN:
            if ch == '\\':
                idx += 1
            elif ch in QUOTES:
                nested = ch
                state = State.IN_QUOTE
            elif ch in OPERATORS:
                # a doubled operator is a single separator
                if value[idx+1:idx+2] == ch:
                    idx += 1
                state = State.DEFAULT

        elif state is State.IN_QUOTE:
            if ch == '\\' and nested == '"':
                idx += 1
            elif ch == nested:
                state = State.AFTER_TOKEN

        idx += 1

    flush()
    return commands


def parse_alias(line: str) -> Optional[AliasEntry]:
    """ Parses a ``[alias] NAME=VALUE`` line, None if there is no name.
    """
    match = ALIAS_RE.match(line)
    if not match or not match.group('name'):
        return None

    commands = tokenize_commands(unquote(match.group('value')))
    return AliasEntry(match.group('name'), tuple(commands), line)


class AliasScanner:
    """
    Matches alias definitions against the programs given on the command line.

    Programs resolved through an alias are recorded by their index in
    :attr:`resolved`, so they can be left out from the regular lookup.
    """

    def __init__(self, searcher: 'Searcher', names: Iterable[str],
                 path_list: Optional[str], out: Optional[TextIO] = None) -> None:
        self.searcher = searcher
        self.names = tuple(names)
        self.path_list = path_list
        self.out = out or searcher.out
        self.resolved = set()  # type: Set[int]

    def scan_line(self, line: str) -> bool:
        """ Processes one definition, returns True if it matched a program.
        """
        entry = parse_alias(line)
        if entry is None:
            return False

        for idx, name in enumerate(self.names):
            if idx in self.resolved or name != entry.name:
                continue

            self.out.write(line if line.endswith('\n') else line + '\n')
            logger.debug('Alias %s runs %r', name, entry.commands)

            if not self.searcher.options.show_all:
                self.resolved.add(idx)

            for command in entry.commands:
                # with --all the program is still looked up by itself,
                # unless the alias runs a command of the same name
                if command == name:
                    self.resolved.add(idx)
                self.searcher.search(command, self.path_list, indent=True)

            # a single program per definition
            return True

        return False

    def scan(self, lines: Iterable[str]) -> int:
        """ Processes every line, returns how many matched.
        """
        return sum(1 for line in lines if self.scan_line(line))
