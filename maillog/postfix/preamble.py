"""
Common preamble of postfix syslog lines

Every line starts with the same fields regardless of the process that
logged it:

    Jul 25 00:00:01 host postfix/qmgr[32099]: 77A8F1409B022: removed
    |---- date ---| host |service|process pid  |- queue id -|

The preamble owns the raw line. Fields are stored as offsets into it and
sliced only when accessed.
"""

from enum import Enum

from maillog.postfix.errors import ParseError, PostfixParseError
from maillog.postfix.scanner import ABSENT, is_queue_id, parse_uint

# Length of syslog date field, like 'Sep  3 00:00:03'
DATE_LEN = 15


class Process(Enum):
    """
    Postfix processes recognized in the preamble
    """
    ANVIL = 'anvil'
    BOUNCE = 'bounce'
    CLEANUP = 'cleanup'
    LMTP = 'lmtp'
    LOCAL = 'local'
    PICKUP = 'pickup'
    PIPE = 'pipe'
    QMGR = 'qmgr'
    SCACHE = 'scache'
    SMTP = 'smtp'
    SMTPD = 'smtpd'
    TLSMGR = 'tlsmgr'
    VIRTUAL = 'virtual'

    def __str__(self):
        return self.value


PROCESS_NAMES = dict((process.value, process) for process in Process)


def line_end(line):
    """
    Return length of line without trailing newline
    """
    if line.endswith('\r\n'):
        return len(line) - 2
    if line.endswith('\n'):
        return len(line) - 1
    return len(line)


class Preamble(object):
    """Parsed line preamble

    Offsets are (start, end) positions in raw. A missing queue id is
    stored as (0, 0) and returned as None. Preambles are read-only.
    """
    __slots__ = (
        'raw', 'end', 'host_e', 'service_s', 'service_e', 'process', 'pid',
        'queue_id_s', 'queue_id_e',
    )

    def __init__(self, raw, end, host_e, service_s, service_e, process, pid, queue_id_s=0, queue_id_e=0):
        values = (raw, end, host_e, service_s, service_e, process, pid, queue_id_s, queue_id_e)
        for attr, value in zip(self.__slots__, values):
            object.__setattr__(self, attr, value)

    def __setattr__(self, attr, value):
        raise AttributeError('Preamble is read-only')

    def __delattr__(self, attr):
        raise AttributeError('Preamble is read-only')

    def __repr__(self):
        return 'Preamble(raw={0!r}, host_e={1}, service_s={2}, service_e={3}, process={4}, pid={5}, queue_id_s={6}, queue_id_e={7})'.format(
            self.raw,
            self.host_e,
            self.service_s,
            self.service_e,
            self.process,
            self.pid,
            self.queue_id_s,
            self.queue_id_e,
        )

    @property
    def date(self):
        return self.raw[:DATE_LEN]

    @property
    def host(self):
        return self.raw[DATE_LEN + 1:self.host_e]

    @property
    def service(self):
        return self.raw[self.service_s:self.service_e]

    @property
    def queue_id(self):
        if (self.queue_id_s, self.queue_id_e) == ABSENT:
            return None
        return self.raw[self.queue_id_s:self.queue_id_e]

    @property
    def has_queue_id(self):
        return (self.queue_id_s, self.queue_id_e) != ABSENT

    @classmethod
    def parse(cls, config, line):
        """Parse line preamble

        Returns None for lines matching configured noise, otherwise tuple
        (preamble, cursor) where cursor is the position following the queue
        id, or following the process id when no queue id was found.

        Raises PostfixParseError for lines with broken preamble.
        """
        end = line_end(line)
        if end < DATE_LEN + 2:
            raise PostfixParseError(ParseError.DATE_TOO_SHORT, line)

        host_e = line.find(' ', DATE_LEN + 1, end)
        if host_e == -1:
            raise PostfixParseError(ParseError.NON_ENDING_HOST, line)

        service_s = host_e + 1
        if config.is_noise(line[service_s:end]):
            return None

        colon = line.find(':', service_s, end)
        if colon == -1:
            raise PostfixParseError(ParseError.MISSING_PROCESS, line)

        service_e = line.find('/', service_s, colon)
        if service_e == -1:
            raise PostfixParseError(ParseError.NON_ENDING_SERVICE, line)

        bracket = line.find('[', service_e + 1, colon)
        if bracket == -1:
            raise PostfixParseError(ParseError.NON_ENDING_PROCESS, line)

        # Multi-instance services like postfix/submission/smtpd end at the last slash
        service_e = line.rfind('/', service_s, bracket)

        # Instance names like smtpd.local are matched by the base name
        keyword = line[service_e + 1:bracket]
        if keyword in config.process_noise:
            return None
        try:
            process = PROCESS_NAMES[keyword.split('.', 1)[0]]
        except KeyError:
            raise PostfixParseError(ParseError.UNKNOWN_PROCESS, line)

        if not line.startswith(']: ', colon - 1, end):
            raise PostfixParseError(ParseError.BAD_PROCESS_ID, line)
        pid = parse_uint(line[bracket + 1:colon - 1], ParseError.BAD_PROCESS_ID, line)

        queue_id_s = colon + 2
        queue_id_e = line.find(':', queue_id_s, end)
        if queue_id_e != -1 and is_queue_id(line[queue_id_s:queue_id_e]):
            preamble = cls(line, end, host_e, service_s, service_e, process, pid, queue_id_s, queue_id_e)
            return preamble, queue_id_e + 1

        preamble = cls(line, end, host_e, service_s, service_e, process, pid)
        return preamble, colon + 1
