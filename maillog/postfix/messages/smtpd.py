"""
Parser for postfix smtpd messages

    84ED020916: client=mx.example.com[178.33.254.192]
    84ED020916: client=localhost[127.0.0.1], orig_queue_id=67D8720887,
        orig_client=mx.example.com[178.33.254.192]
    87E611409B022: client=host[1.2.3.4], sasl_method=LOGIN,
        sasl_username=firstname.lastname

Discard, reject and warn records are parsed by the reject parser. Lines
without queue id (connect, disconnect, warnings) are ignored.
"""

from enum import Enum

from maillog.postfix.errors import ParseError, PostfixParseError
from maillog.postfix.messages import reject
from maillog.postfix.messages.base import Message
from maillog.postfix.messages.reject import RejectReason
from maillog.postfix.scanner import expect, find, is_queue_id, starts

VERBS = (
    (' discard: ', RejectReason.DISCARD),
    (' reject: ', RejectReason.REJECT),
    (' warn: ', RejectReason.WARN),
)


class SaslMethod(Enum):
    LOGIN = 'LOGIN'
    PLAIN = 'PLAIN'

    def __str__(self):
        return self.value


SASL_METHODS = dict((method.value, method) for method in SaslMethod)


class Smtpd(Message):
    """
    Client connection accepted for a new message
    """
    __slots__ = ('client_s', 'client_e')
    kind = 'smtpd'
    fields = ('client',)

    def __init__(self, preamble, client_s, client_e, **values):
        super(Smtpd, self).__init__(preamble, client_s=client_s, client_e=client_e, **values)

    @property
    def client(self):
        return self.span(self.client_s, self.client_e)


class SmtpdForward(Smtpd):
    """
    Message reinjected from a content filter, with the original queue id
    and client
    """
    __slots__ = ('orig_queue_id_s', 'orig_queue_id_e', 'orig_client_s', 'orig_client_e')
    kind = 'smtpd_forward'
    fields = ('client', 'orig_queue_id', 'orig_client')

    def __init__(self, preamble, client_s, client_e, orig_queue_id, orig_client):
        super(SmtpdForward, self).__init__(
            preamble,
            client_s,
            client_e,
            orig_queue_id_s=orig_queue_id[0],
            orig_queue_id_e=orig_queue_id[1],
            orig_client_s=orig_client[0],
            orig_client_e=orig_client[1],
        )

    @property
    def orig_queue_id(self):
        return self.span(self.orig_queue_id_s, self.orig_queue_id_e)

    @property
    def orig_client(self):
        return self.span(self.orig_client_s, self.orig_client_e)


class SmtpdLogin(Smtpd):
    """
    Client authenticated with SASL
    """
    __slots__ = ('sasl_method', 'sasl_username_s', 'sasl_username_e')
    kind = 'smtpd_login'
    fields = ('client', 'sasl_method', 'sasl_username')

    def __init__(self, preamble, client_s, client_e, sasl_method, sasl_username):
        super(SmtpdLogin, self).__init__(
            preamble,
            client_s,
            client_e,
            sasl_method=sasl_method,
            sasl_username_s=sasl_username[0],
            sasl_username_e=sasl_username[1],
        )

    @property
    def sasl_username(self):
        return self.span(self.sasl_username_s, self.sasl_username_e)


def parse_forward(preamble, client_s, client_e):
    pos = client_e + len(', orig_queue_id=')
    orig_queue_id_e = find(preamble, pos, ',', ParseError.SMTPD_BAD_ORIG_QUEUE_ID)
    if not is_queue_id(preamble.raw[pos:orig_queue_id_e]):
        raise PostfixParseError(ParseError.SMTPD_ORIG_QUEUE_ID_NOT_HEX, preamble.raw)
    orig_queue_id = (pos, orig_queue_id_e)

    pos = expect(preamble, orig_queue_id_e, ', orig_client=', ParseError.SMTPD_NO_ORIG_CLIENT)
    return SmtpdForward(preamble, client_s, client_e, orig_queue_id, (pos, preamble.end))


def parse_login(preamble, client_s, client_e):
    pos = client_e + len(', sasl_method=')
    method_e = find(preamble, pos, ',', ParseError.SMTPD_BAD_SASL_METHOD)
    try:
        method = SASL_METHODS[preamble.raw[pos:method_e]]
    except KeyError:
        raise PostfixParseError(ParseError.SMTPD_UNKNOWN_SASL_METHOD, preamble.raw)

    pos = expect(preamble, method_e, ', sasl_username=', ParseError.SMTPD_NO_SASL_USERNAME)
    return SmtpdLogin(preamble, client_s, client_e, method, (pos, preamble.end))


def parse(preamble, pos):
    if not preamble.has_queue_id:
        return None

    for verb, reason in VERBS:
        if starts(preamble, pos, verb):
            return reject.parse(preamble, pos + len(verb), reason)

    client_s = expect(preamble, pos, ' client=', ParseError.SMTPD_NO_CLIENT)
    client_e = preamble.raw.find(',', client_s, preamble.end)
    if client_e == -1:
        return Smtpd(preamble, client_s, preamble.end)

    if starts(preamble, client_e, ', orig_queue_id='):
        return parse_forward(preamble, client_s, client_e)
    if starts(preamble, client_e, ', sasl_method='):
        return parse_login(preamble, client_s, client_e)
    raise PostfixParseError(ParseError.SMTPD_UNKNOWN_CLIENT_SUFFIX, preamble.raw)
