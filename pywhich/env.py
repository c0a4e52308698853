import os
import pwd

from pywhich import CwdError

from typing import Mapping, Optional


class Environment:
    """
    Context for a lookup run.

    The home directory and the current working directory are resolved the
    first time they are needed and then kept for the lifetime of the
    instance. Both are stored terminated by a ``/`` so they can be used
    as plain string prefixes.
    """
    __slots__ = ('environ', '_home', '_cwd')

    UNSET = object()

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self.environ = os.environ if environ is None else environ
        self._home = self.UNSET
        self._cwd = None

    @property
    def path(self) -> Optional[str]:
        return self.environ.get('PATH')

    @property
    def home(self) -> Optional[str]:
        """ ``$HOME`` with a trailing slash or None when it's not set
        """
        if self._home is self.UNSET:
            home = self.environ.get('HOME')
            if home:
                self._home = home if home.endswith('/') else home + '/'
            else:
                self._home = None

        return self._home

    @property
    def cwd(self) -> str:
        """ Absolute current working directory with a trailing slash.

            Falls back to ``$PWD`` if the system can't tell us, and raises
            :class:`CwdError` when neither gives an absolute path.
        """
        if self._cwd is None:
            try:
                cwd = os.getcwd()
            except OSError:
                cwd = self.environ.get('PWD', '')

            if not cwd.startswith('/'):
                raise CwdError()

            self._cwd = cwd if cwd.endswith('/') else cwd + '/'

        return self._cwd

    def user_home(self, user: str = '') -> Optional[str]:
        """ Home directory used for tilde expansion.

            A bare ``~`` uses ``$HOME`` and falls back to the password
            database for the current user, ``~name`` always looks up the
            password database. Returns None for unknown users.
        """
        if not user:
            home = self.environ.get('HOME')
            if home:
                return home
            user_id = os.getuid()
            try:
                return pwd.getpwuid(user_id).pw_dir
            except KeyError:
                return None

        try:
            return pwd.getpwnam(user).pw_dir
        except KeyError:
            return None
