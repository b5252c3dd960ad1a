"""
Reading of plain and compressed log files
"""

import bz2
import gzip
import io
import os
import sys


class LogFileError(Exception):
    """
    Exceptions raised opening log files
    """
    pass


def open_logfile(path, encoding='utf-8'):
    """Open log file

    Try opening logfile in gz, bz2 and raw text formats. Undecodable bytes
    are replaced, so every line can be read as text.
    """
    path = os.path.expanduser(os.path.expandvars(path))
    if not os.path.isfile(path):
        raise LogFileError('No such file: {0}'.format(path))

    for opener in (gzip.open, bz2.open):
        fd = opener(path, 'rt', encoding=encoding, errors='replace')
        try:
            fd.readline()
            fd.seek(0)
            return fd
        except (OSError, EOFError):
            fd.close()

    try:
        return open(path, 'r', encoding=encoding, errors='replace')
    except IOError as e:
        raise LogFileError('Error opening logfile {0}: {1}'.format(path, e))


def open_stdin(encoding='utf-8'):
    """
    Return stdin as text stream replacing undecodable bytes
    """
    return io.TextIOWrapper(sys.stdin.buffer, encoding=encoding, errors='replace')
