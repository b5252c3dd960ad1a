"""
Parser for postfix cleanup messages

    A071220883: message-id=<20150803220001.5E2AA52093C@example.com>
    A071220883: resent-message-id=<20150803220001.5E2AA52093C@example.com>

Header and body check results (reject, discard, warning) are parsed by
the reject parser.
"""

from maillog.postfix.errors import ParseError, PostfixParseError
from maillog.postfix.messages import reject
from maillog.postfix.messages.base import Message
from maillog.postfix.messages.reject import RejectReason
from maillog.postfix.scanner import is_diagnostic, starts, strip_brackets

VERBS = (
    (' reject: ', RejectReason.REJECT),
    (' discard: ', RejectReason.DISCARD),
    (' warning: ', RejectReason.WARN),
)

MESSAGE_ID = ' message-id='
RESENT_MESSAGE_ID = ' resent-message-id='


class Cleanup(Message):
    """
    Message-ID of a message processed by cleanup

    resent is True for resent-message-id records
    """
    __slots__ = ('message_id_s', 'message_id_e', 'resent')
    kind = 'cleanup'
    fields = ('message_id', 'resent')

    def __init__(self, preamble, message_id_s, message_id_e, resent=False):
        super(Cleanup, self).__init__(preamble, message_id_s=message_id_s, message_id_e=message_id_e, resent=resent)

    @property
    def message_id(self):
        return self.span(self.message_id_s, self.message_id_e)


def parse(preamble, pos):
    if not preamble.has_queue_id:
        if is_diagnostic(preamble, pos):
            return None
        raise PostfixParseError(ParseError.CLEANUP_NO_QUEUE_ID, preamble.raw)

    for verb, reason in VERBS:
        if starts(preamble, pos, verb):
            return reject.parse(preamble, pos + len(verb), reason)

    if starts(preamble, pos, MESSAGE_ID):
        resent = False
        pos += len(MESSAGE_ID)
    elif starts(preamble, pos, RESENT_MESSAGE_ID):
        resent = True
        pos += len(RESENT_MESSAGE_ID)
    else:
        raise PostfixParseError(ParseError.CLEANUP_NO_MESSAGE_ID, preamble.raw)

    message_id_s, message_id_e = strip_brackets(preamble.raw, pos, preamble.end)
    return Cleanup(preamble, message_id_s, message_id_e, resent)
