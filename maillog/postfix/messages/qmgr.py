"""
Parser for postfix queue manager messages

Queue manager lines have three shapes after the queue id:

    77A8F1409B022: removed
    BB3B220B19: from=<>, status=expired, returned to sender
    77A8F1409B022: from=<a@b.c>, size=665, nrcpt=1 (queue active)
"""

from maillog.postfix.errors import ParseError, PostfixParseError
from maillog.postfix.messages.base import Message
from maillog.postfix.scanner import expect, find, is_diagnostic, parse_uint, starts

EXPIRED = '>, status=expired, returned to sender'
QUEUE_ACTIVE = ' (queue active)'


class QmgrRemoved(Message):
    """
    Message removed from the queue
    """
    __slots__ = ()
    kind = 'qmgr_removed'


class QmgrExpired(Message):
    """
    Message expired in queue and was returned to sender
    """
    __slots__ = ('from_s', 'from_e')
    kind = 'qmgr_expired'
    fields = ('sender',)

    def __init__(self, preamble, from_s, from_e):
        super(QmgrExpired, self).__init__(preamble, from_s=from_s, from_e=from_e)

    @property
    def sender(self):
        return self.span(self.from_s, self.from_e)


class Qmgr(Message):
    """
    Message added to the active queue
    """
    __slots__ = ('from_s', 'from_e', 'size', 'nrcpt')
    kind = 'qmgr'
    fields = ('sender', 'size', 'nrcpt')

    def __init__(self, preamble, from_s, from_e, size, nrcpt):
        super(Qmgr, self).__init__(preamble, from_s=from_s, from_e=from_e, size=size, nrcpt=nrcpt)

    @property
    def sender(self):
        return self.span(self.from_s, self.from_e)


def parse(preamble, pos):
    if not preamble.has_queue_id:
        if is_diagnostic(preamble, pos):
            return None
        raise PostfixParseError(ParseError.QMGR_NO_QUEUE_ID, preamble.raw)

    if starts(preamble, pos, ' removed'):
        return QmgrRemoved(preamble)

    from_s = expect(preamble, pos, ' from=<', ParseError.QMGR_NO_FROM)
    from_e = find(preamble, from_s, '>', ParseError.QMGR_BAD_FROM)

    if starts(preamble, from_e, EXPIRED):
        return QmgrExpired(preamble, from_s, from_e)

    pos = expect(preamble, from_e, '>, size=', ParseError.QMGR_NO_SIZE)
    size_e = find(preamble, pos, ',', ParseError.QMGR_BAD_SIZE)
    size = parse_uint(preamble.raw[pos:size_e], ParseError.QMGR_SIZE_NOT_INT, preamble.raw, bits=64)

    pos = expect(preamble, size_e, ', nrcpt=', ParseError.QMGR_NO_NRCPT)
    nrcpt_e = find(preamble, pos, ' ', ParseError.QMGR_BAD_NRCPT)
    if not starts(preamble, nrcpt_e, QUEUE_ACTIVE):
        raise PostfixParseError(ParseError.QMGR_NOT_ACTIVE, preamble.raw)
    nrcpt = parse_uint(preamble.raw[pos:nrcpt_e], ParseError.QMGR_NRCPT_NOT_INT, preamble.raw)

    return Qmgr(preamble, from_s, from_e, size, nrcpt)
