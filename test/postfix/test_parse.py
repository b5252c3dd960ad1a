"""
Test postfix log line dispatch to message parsers
"""

import pytest

from maillog.postfix import MESSAGE_TYPES, ParseError, ParserConfig, PostfixParseError, Process, parse_line
from maillog.postfix.messages import Forward, Qmgr, QmgrRemoved
from maillog.postfix.parse import PARSERS, ignore


def test_parsers_cover_processes():
    """Dispatch table

    Every known process has a parser
    """
    assert set(PARSERS.keys()) == set(Process)
    for process in (Process.ANVIL, Process.SCACHE, Process.TLSMGR):
        assert PARSERS[process] is ignore


def test_message_kinds_unique():
    kinds = [message_type.kind for message_type in MESSAGE_TYPES]
    assert None not in kinds
    assert len(set(kinds)) == len(kinds)


def test_parse_qmgr_removed(postfix_config):
    message = parse_line('Jul 25 00:00:01 host postfix/qmgr[32099]: 77A8F1409B022: removed', postfix_config)
    assert isinstance(message, QmgrRemoved)
    assert message.host == 'host'
    assert message.queue_id == '77A8F1409B022'
    assert message.process == Process.QMGR
    assert message.pid == 32099


def test_parse_qmgr(postfix_config):
    line = 'Jul 25 00:00:01 host postfix/qmgr[32099]: 77A8F1409B022: from=<a@b.c>, size=665, nrcpt=1 (queue active)\n'
    message = parse_line(line, postfix_config)
    assert isinstance(message, Qmgr)
    assert message.sender == 'a@b.c'
    assert message.size == 665
    assert message.nrcpt == 1
    assert message.raw == line


def test_parse_forward(postfix_config):
    line = 'Jul 25 00:00:01 host postfix/smtp[3703]: 0345620AE4: to=<x@y>, relay=1.2.3.4[1.2.3.4]:10024, conn_use=2, ' \
        'delay=0.57, delays=0.4/0/0.04/0.13, dsn=2.0.0, status=sent (250 2.0.0 Ok: queued as 60F6120AF9)'
    message = parse_line(line, postfix_config)
    assert isinstance(message, Forward)
    assert message.relay == '1.2.3.4'
    assert message.dsn == (2, 0, 0)
    assert message.child_queue_id == '60F6120AF9'


def test_parse_forward_bad_dsn(postfix_config):
    line = 'Jul 25 00:00:01 host postfix/smtp[3703]: 0345620AE4: to=<x@y>, relay=local, ' \
        'delay=0.57, delays=0.4/0/0.04/0.13, dsn=1.2.3.4, status=sent'
    with pytest.raises(PostfixParseError) as e:
        parse_line(line, postfix_config)
    assert e.value.kind == ParseError.FORWARD_DSN_BAD_LEN
    assert e.value.line == line


@pytest.mark.parametrize('process', ['smtp', 'lmtp', 'local', 'pipe', 'virtual'])
def test_parse_delivery_agents(postfix_config, process):
    line = 'Sep  3 00:00:05 yuuai postfix/{0}[555]: 12C172090B: to=<root@yuuai>, relay=local, ' \
        'delay=0.1, delays=0.05/0/0/0.05, dsn=2.0.0, status=sent (delivered to mailbox)'.format(process)
    message = parse_line(line, postfix_config)
    assert isinstance(message, Forward)
    assert message.process.value == process
    assert message.status_code == 'sent'


def test_parse_ignored(postfix_config):
    """Ignored lines

    Noise, housekeeping processes and diagnostics without queue id
    """
    for line in (
            'Sep  3 00:00:03 yuuai clamsmtpd:',
            'Sep  3 00:00:03 yuuai clamsmtpd[1234]: 127.0.0.1:10025: from=a@b.c, status=CLEAN',
            'Sep  3 00:00:04 yuuai postfix/anvil[4321]: statistics: max connection rate 1/60s for (smtp:192.0.2.1)',
            'Sep  3 00:00:04 yuuai postfix/scache[4322]: statistics: start interval Sep  3 00:00:01',
            'Sep  3 00:00:04 yuuai postfix/tlsmgr[4323]: 0123ABCD: anything goes here',
            'Sep  3 00:00:04 yuuai postfix-in/cleanup[24617]: warning: milter unix:/run/x: can\'t read SMFIC_OPTNEG reply',
            'Aug  4 00:00:09 yuuai postfix/smtpd[20518]: disconnect from mx1[129.104.30.34]'):
        assert parse_line(line, postfix_config) is None


def test_parse_noise_before_preamble_checks():
    config = ParserConfig(['postlicyd'])
    assert parse_line('Sep  3 00:00:03 yuuai postlicyd', config) is None

    with pytest.raises(PostfixParseError) as e:
        parse_line('Sep  3 00:00:03 yuuai clamsmtpd', config)
    assert e.value.kind == ParseError.MISSING_PROCESS


def test_parse_is_pure(postfix_config):
    """Repeatable parsing

    Parsing same line twice gives same result
    """
    line = 'Sep  3 00:00:03 yuuai postfix/pickup[12797]: 12C172090B: uid=106 from=<root@example.com>'
    first = parse_line(line, postfix_config)
    second = parse_line(line, postfix_config)
    assert first is not second
    assert repr(first) == repr(second)
    assert str(first) == line


def test_message_repr(postfix_config):
    message = parse_line('Aug  4 00:03:15 yuuai postfix/bounce[24350]: 7C091208A3: sender non-delivery notification: A270E20915', postfix_config)
    assert repr(message) == (
        "Bounce(Preamble(raw='Aug  4 00:03:15 yuuai postfix/bounce[24350]: 7C091208A3: sender non-delivery notification: A270E20915', "
        "host_e=21, service_s=22, service_e=29, process=bounce, pid=24350, queue_id_s=45, queue_id_e=55), "
        "child_queue_id='A270E20915')"
    )


def test_message_read_only(postfix_config):
    """Read-only messages

    Decoded message fields can't be modified or removed
    """
    line = 'Jul 25 00:00:01 host postfix/qmgr[32099]: 77A8F1409B022: from=<a@b.c>, size=665, nrcpt=1 (queue active)'
    message = parse_line(line, postfix_config)
    with pytest.raises(AttributeError):
        message.from_s = 500
    with pytest.raises(AttributeError):
        message.preamble = None
    with pytest.raises(AttributeError):
        message.other = True
    with pytest.raises(AttributeError):
        del message.size
    assert message.sender == 'a@b.c'
    assert message.size == 665
