"""
Parser for reject, discard and warn records

Both smtpd and cleanup log access and content check results in the same
format after the action verb:

    89EF32091D: discard: DATA from x[1.2.3.4]: <DATA>: Data command;
        from=<a@b.c> to=<d@e.f> proto=SMTP helo=<gmail.com>

Cleanup appends an explanation after the helo field:

    4F9D8C0A: reject: header Subject: spam from x[1.2.3.4];
        from=<a@b.c> to=<d@e.f> proto=ESMTP helo=<x>: 5.7.1 Go away
"""

from enum import Enum

from maillog.postfix.errors import ParseError, PostfixParseError
from maillog.postfix.messages.base import Message
from maillog.postfix.scanner import ABSENT, expect, find, starts


class RejectReason(Enum):
    REJECT = 'reject'
    DISCARD = 'discard'
    WARN = 'warn'

    def __str__(self):
        return self.value


class RejectProto(Enum):
    SMTP = 'SMTP'
    ESMTP = 'ESMTP'

    def __str__(self):
        return self.value


PROTOCOLS = dict((proto.value, proto) for proto in RejectProto)


class Reject(Message):
    """
    Message rejected, discarded or flagged by access or content checks
    """
    __slots__ = (
        'reason', 'message_s', 'message_e', 'from_s', 'from_e', 'to_s', 'to_e',
        'proto', 'helo_s', 'helo_e', 'explanation_s', 'explanation_e',
    )
    kind = 'reject'
    fields = ('reason', 'message', 'sender', 'recipient', 'proto', 'helo', 'explanation')

    def __init__(self, preamble, reason, message, sender, recipient, proto, helo, explanation):
        super(Reject, self).__init__(
            preamble,
            reason=reason,
            message_s=message[0],
            message_e=message[1],
            from_s=sender[0],
            from_e=sender[1],
            to_s=recipient[0],
            to_e=recipient[1],
            proto=proto,
            helo_s=helo[0],
            helo_e=helo[1],
            explanation_s=explanation[0],
            explanation_e=explanation[1],
        )

    @property
    def message(self):
        return self.span(self.message_s, self.message_e)

    @property
    def sender(self):
        return self.span(self.from_s, self.from_e)

    @property
    def recipient(self):
        return self.span(self.to_s, self.to_e)

    @property
    def helo(self):
        return self.span(self.helo_s, self.helo_e)

    @property
    def explanation(self):
        return self.span(self.explanation_s, self.explanation_e)


def parse(preamble, pos, reason):
    """Parse reject record

    pos must point to the start of the message, after the action verb.
    """
    # Message text may contain semicolons, it ends at the from field
    message_e = preamble.raw.find('; from=<', pos, preamble.end)
    if message_e == -1:
        find(preamble, pos, ';', ParseError.REJECT_BAD_MESSAGE)
        raise PostfixParseError(ParseError.REJECT_NO_FROM, preamble.raw)
    message = (pos, message_e)

    from_s = message_e + len('; from=<')
    from_e = find(preamble, from_s, '>', ParseError.REJECT_BAD_FROM)
    pos = from_e

    recipient = ABSENT
    if starts(preamble, pos, '> to=<'):
        to_s = pos + len('> to=<')
        pos = find(preamble, to_s, '>', ParseError.REJECT_BAD_TO)
        recipient = (to_s, pos)

    proto_s = expect(preamble, pos, '> proto=', ParseError.REJECT_NO_PROTO)
    proto_e = find(preamble, proto_s, ' ', ParseError.REJECT_BAD_PROTO)
    try:
        proto = PROTOCOLS[preamble.raw[proto_s:proto_e]]
    except KeyError:
        raise PostfixParseError(ParseError.REJECT_UNKNOWN_PROTO, preamble.raw)

    helo_s = expect(preamble, proto_e, ' helo=<', ParseError.REJECT_NO_HELO)
    helo_e = find(preamble, helo_s, '>', ParseError.REJECT_BAD_HELO)

    explanation = ABSENT
    if starts(preamble, helo_e, '>: '):
        explanation = (helo_e + len('>: '), preamble.end)

    return Reject(preamble, reason, message, (from_s, from_e), recipient, proto, (helo_s, helo_e), explanation)
