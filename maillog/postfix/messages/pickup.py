"""
Parser for postfix pickup messages

    12C172090B: uid=106 from=<root@example.com>
"""

from maillog.postfix.errors import ParseError, PostfixParseError
from maillog.postfix.messages.base import Message
from maillog.postfix.scanner import expect, find, is_diagnostic, parse_uint, strip_brackets


class Pickup(Message):
    """
    Message picked up from the local maildrop queue
    """
    __slots__ = ('uid', 'from_s', 'from_e')
    kind = 'pickup'
    fields = ('uid', 'sender')

    def __init__(self, preamble, uid, from_s, from_e):
        super(Pickup, self).__init__(preamble, uid=uid, from_s=from_s, from_e=from_e)

    @property
    def sender(self):
        return self.span(self.from_s, self.from_e)


def parse(preamble, pos):
    if not preamble.has_queue_id:
        if is_diagnostic(preamble, pos):
            return None
        raise PostfixParseError(ParseError.PICKUP_NO_QUEUE_ID, preamble.raw)

    pos = expect(preamble, pos, ' uid=', ParseError.PICKUP_NO_UID)
    uid_e = find(preamble, pos, ' ', ParseError.PICKUP_BAD_UID)
    uid = parse_uint(preamble.raw[pos:uid_e], ParseError.PICKUP_UID_NOT_INT, preamble.raw)

    # Sender may or may not be in angle brackets
    pos = expect(preamble, uid_e + 1, 'from=', ParseError.PICKUP_NO_FROM)
    from_s, from_e = strip_brackets(preamble.raw, pos, preamble.end)
    return Pickup(preamble, uid, from_s, from_e)
