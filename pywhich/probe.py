import os
import stat
import logging
from enum import IntFlag

from typing import Optional


logger = logging.getLogger(__name__)


class FileStatus(IntFlag):
    NONE = 0
    EXISTS = 1
    EXECUTABLE = 2
    DIRECTORY = 4


def _can_execute(path: str) -> bool:
    # the shell checks against the effective ids, not the real ones
    if os.access in os.supports_effective_ids:
        return os.access(path, os.X_OK, effective_ids=True)
    return os.access(path, os.X_OK)


def file_status(path: str) -> FileStatus:
    """ Stats *path* once and reports what the shell would care about.

        Directories are never executable in the shell sense, even when they
        have the x bits set.
    """
    try:
        st = os.stat(path)
    except (OSError, ValueError):
        return FileStatus.NONE

    if stat.S_ISDIR(st.st_mode):
        return FileStatus.EXISTS | FileStatus.DIRECTORY

    status = FileStatus.EXISTS
    if _can_execute(path):
        status |= FileStatus.EXECUTABLE

    return status


def probe(directory: str, name: str) -> Optional[str]:
    """ Returns ``directory/name`` if it exists and we can execute it.
    """
    full_path = directory + '/' + name
    status = file_status(full_path)
    logger.debug('Probed %s: %r', full_path, status)

    if FileStatus.EXISTS in status and FileStatus.EXECUTABLE in status:
        return full_path

    return None
