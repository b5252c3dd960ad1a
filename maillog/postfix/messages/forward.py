"""
Parser for postfix delivery agent messages

Delivery agents (smtp, lmtp, local, pipe, virtual) log either a delivery
attempt:

    0345620AE4: to=<x@y>, orig_to=<z@y>, relay=1.2.3.4[1.2.3.4]:10024,
        conn_use=2, delay=0.57, delays=0.4/0/0.04/0.13, dsn=2.0.0,
        status=sent (250 2.0.0 Ok: queued as 60F6120AF9)

or an error returned by the remote host:

    C217620B0B: host mx.example.com[1.2.3.4] said: 421 4.7.0 Try later
"""

from maillog.postfix.errors import ParseError, PostfixParseError
from maillog.postfix.messages.base import Message
from maillog.postfix.scanner import ABSENT, expect, find, is_queue_id, parse_uint, starts

QUEUED_AS = 'sent (250 2.0.0 Ok: queued as '


class ForwardError(Message):
    """
    Error reported by the remote host during delivery
    """
    __slots__ = ('host_s', 'host_e', 'message_s', 'message_e')
    kind = 'forward_error'
    fields = ('remote_host', 'message')

    def __init__(self, preamble, host_s, host_e, message_s, message_e):
        super(ForwardError, self).__init__(preamble, host_s=host_s, host_e=host_e, message_s=message_s, message_e=message_e)

    @property
    def remote_host(self):
        return self.span(self.host_s, self.host_e)

    @property
    def message(self):
        return self.span(self.message_s, self.message_e)


class Forward(Message):
    """Delivery attempt

    relay is the bracketed IP address when the relay field contains one,
    otherwise the whole relay field (like 'local' or 'none').

    child_queue_id is the queue id of the message in the next hop, when
    the next hop reported it in status.
    """
    __slots__ = (
        'to_s', 'to_e', 'orig_to_s', 'orig_to_e', 'relay_s', 'relay_e', 'conn_use',
        'delay_s', 'delay_e', 'delays_s', 'delays_e', 'dsn', 'status_s', 'status_e',
        'child_queue_id_s', 'child_queue_id_e',
    )
    kind = 'forward'
    fields = (
        'recipient', 'orig_recipient', 'relay', 'conn_use', 'delay', 'delays',
        'dsn', 'status', 'child_queue_id',
    )

    def __init__(self, preamble, to, orig_to, relay, conn_use, delay, delays, dsn, status, child_queue_id):
        super(Forward, self).__init__(
            preamble,
            to_s=to[0],
            to_e=to[1],
            orig_to_s=orig_to[0],
            orig_to_e=orig_to[1],
            relay_s=relay[0],
            relay_e=relay[1],
            conn_use=conn_use,
            delay_s=delay[0],
            delay_e=delay[1],
            delays_s=delays[0],
            delays_e=delays[1],
            dsn=dsn,
            status_s=status[0],
            status_e=status[1],
            child_queue_id_s=child_queue_id[0],
            child_queue_id_e=child_queue_id[1],
        )

    @property
    def recipient(self):
        return self.span(self.to_s, self.to_e)

    @property
    def orig_recipient(self):
        return self.span(self.orig_to_s, self.orig_to_e)

    @property
    def relay(self):
        return self.span(self.relay_s, self.relay_e)

    @property
    def delay(self):
        return self.span(self.delay_s, self.delay_e)

    @property
    def delays(self):
        return self.span(self.delays_s, self.delays_e)

    @property
    def status(self):
        return self.span(self.status_s, self.status_e)

    @property
    def status_code(self):
        """
        First word of status, like 'sent', 'deferred' or 'bounced'
        """
        return self.status.split(' ', 1)[0]

    @property
    def child_queue_id(self):
        return self.span(self.child_queue_id_s, self.child_queue_id_e)


def parse_error(preamble, pos):
    host_s = pos + len(' host ')
    host_e = find(preamble, host_s, ' ', ParseError.FORWARD_BAD_HOST)
    message_s = expect(preamble, host_e, ' said: ', ParseError.FORWARD_NO_MESSAGE)
    return ForwardError(preamble, host_s, host_e, message_s, preamble.end)


def parse_relay(preamble, pos):
    """
    Return relay range and position of the comma terminating it
    """
    relay_e = find(preamble, pos, ',', ParseError.FORWARD_BAD_RELAY)
    ip_s = preamble.raw.find('[', pos, relay_e)
    if ip_s > pos:
        ip_e = preamble.raw.find(']', ip_s, relay_e)
        if ip_e != -1:
            return (ip_s + 1, ip_e), relay_e
    return (pos, relay_e), relay_e


def parse_dsn(preamble, pos):
    dsn_e = find(preamble, pos, ',', ParseError.FORWARD_BAD_DSN)
    parts = preamble.raw[pos:dsn_e].split('.')
    if len(parts) != 3:
        raise PostfixParseError(ParseError.FORWARD_DSN_BAD_LEN, preamble.raw)
    dsn = tuple(parse_uint(x, ParseError.FORWARD_DSN_NOT_INT, preamble.raw, bits=8) for x in parts)
    return dsn, dsn_e


def parse_child_queue_id(preamble, status_s, status_e):
    """
    Return queue id from 'queued as' status text, or ABSENT
    """
    if not starts(preamble, status_s, QUEUED_AS) or preamble.raw[status_e - 1] != ')':
        return ABSENT
    child = (status_s + len(QUEUED_AS), status_e - 1)
    if not is_queue_id(preamble.raw[child[0]:child[1]]):
        return ABSENT
    return child


def parse(preamble, pos):
    # Connection level messages without queue id
    if not preamble.has_queue_id:
        return None

    if starts(preamble, pos, ' host '):
        return parse_error(preamble, pos)

    pos = expect(preamble, pos, ' to=<', ParseError.FORWARD_NO_TO)
    to_e = find(preamble, pos, '>', ParseError.FORWARD_BAD_TO)
    to = (pos, to_e)
    pos = to_e + 1

    orig_to = ABSENT
    if starts(preamble, pos, ', orig_to=<'):
        orig_to_s = pos + len(', orig_to=<')
        orig_to_e = find(preamble, orig_to_s, '>', ParseError.FORWARD_BAD_ORIG_TO)
        orig_to = (orig_to_s, orig_to_e)
        pos = orig_to_e + 1

    pos = expect(preamble, pos, ', relay=', ParseError.FORWARD_NO_RELAY)
    relay, pos = parse_relay(preamble, pos)

    conn_use = None
    if starts(preamble, pos, ', conn_use='):
        conn_use_s = pos + len(', conn_use=')
        pos = find(preamble, conn_use_s, ',', ParseError.FORWARD_BAD_CONN_USE)
        conn_use = parse_uint(preamble.raw[conn_use_s:pos], ParseError.FORWARD_CONN_USE_NOT_INT, preamble.raw)

    delay_s = expect(preamble, pos, ', delay=', ParseError.FORWARD_NO_DELAY)
    pos = find(preamble, delay_s, ',', ParseError.FORWARD_BAD_DELAY)
    delay = (delay_s, pos)

    delays_s = expect(preamble, pos, ', delays=', ParseError.FORWARD_NO_DELAYS)
    pos = find(preamble, delays_s, ',', ParseError.FORWARD_BAD_DELAYS)
    delays = (delays_s, pos)

    pos = expect(preamble, pos, ', dsn=', ParseError.FORWARD_NO_DSN)
    dsn, pos = parse_dsn(preamble, pos)

    status_s = expect(preamble, pos, ', status=', ParseError.FORWARD_NO_STATUS)
    status = (status_s, preamble.end)
    child_queue_id = parse_child_queue_id(preamble, status_s, preamble.end)

    return Forward(preamble, to, orig_to, relay, conn_use, delay, delays, dsn, status, child_queue_id)
