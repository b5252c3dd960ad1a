"""
Parser for postfix bounce messages

    7C091208A3: sender non-delivery notification: A270E20915
"""

from maillog.postfix.errors import ParseError, PostfixParseError
from maillog.postfix.messages.base import Message
from maillog.postfix.scanner import expect, is_diagnostic, is_queue_id

NOTIFICATION = ' sender non-delivery notification: '


class Bounce(Message):
    """
    Non-delivery notification queued back to the sender

    child_queue_id is the queue id of the notification message
    """
    __slots__ = ('child_queue_id_s', 'child_queue_id_e')
    kind = 'bounce'
    fields = ('child_queue_id',)

    def __init__(self, preamble, child_queue_id_s, child_queue_id_e):
        super(Bounce, self).__init__(
            preamble,
            child_queue_id_s=child_queue_id_s,
            child_queue_id_e=child_queue_id_e,
        )

    @property
    def child_queue_id(self):
        return self.span(self.child_queue_id_s, self.child_queue_id_e)


def parse(preamble, pos):
    if not preamble.has_queue_id:
        if is_diagnostic(preamble, pos):
            return None
        raise PostfixParseError(ParseError.BOUNCE_NO_QUEUE_ID, preamble.raw)

    pos = expect(preamble, pos, NOTIFICATION, ParseError.BOUNCE_NO_NOTIFICATION)
    if not is_queue_id(preamble.raw[pos:preamble.end]):
        raise PostfixParseError(ParseError.BOUNCE_BAD_QUEUE_ID, preamble.raw)
    return Bounce(preamble, pos, preamble.end)
