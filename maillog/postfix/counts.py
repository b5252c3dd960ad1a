"""
Counting of decoded postfix messages by type
"""

from collections import OrderedDict

from maillog.log import Logger
from maillog.postfix.config import ParserConfig
from maillog.postfix.messages import MESSAGE_TYPES
from maillog.postfix.parse import parse_line

COUNTER_LABELS = {
    'bounce': 'Bounce',
    'pickup': 'Pickups',
    'forward': 'Forwards',
    'forward_error': 'ForwardErrors',
    'smtpd': 'Smtpd',
    'smtpd_forward': 'SmtpdForward',
    'smtpd_login': 'SmtpdLogin',
    'cleanup': 'Cleanups',
    'qmgr': 'Qmgr',
    'qmgr_removed': 'QmgrRemoved',
    'qmgr_expired': 'QmgrExpired',
    'reject': 'Rejects',
}


class PostfixCounters(OrderedDict):
    """
    Number of lines read, ignored and parsed per message kind
    """
    def __init__(self):
        super(PostfixCounters, self).__init__()
        self.lines = 0
        self.ignored = 0
        for message_type in MESSAGE_TYPES:
            self[message_type.kind] = 0

    def add(self, message):
        if message is None:
            self.ignored += 1
        else:
            self[message.kind] += 1

    def report(self):
        """
        Return counters as list of text lines
        """
        lines = [
            'Read {0:d} lines'.format(self.lines),
            'Ignored: {0:d}'.format(self.ignored),
        ]
        for kind, count in self.items():
            lines.append('{0}: {1:d}'.format(COUNTER_LABELS[kind], count))
        return lines


class PostfixLogCounter(object):
    """Count postfix log lines

    Parse errors are not handled here: PostfixParseError from the first
    broken line stops processing. The broken line is included in the
    number of lines read.
    """
    def __init__(self, config=None, log=None):
        self.config = config is not None and config or ParserConfig()
        self.counters = PostfixCounters()
        self.log = log is not None and log or Logger('postfix-counts').default_stream

    def process(self, line):
        self.counters.lines += 1
        message = parse_line(line, self.config)
        if message is None:
            self.log.debug('ignored: {0}'.format(line.rstrip()))
        self.counters.add(message)
        return message

    def process_lines(self, lines):
        for line in lines:
            self.process(line)
        return self.counters
