"""
Test parsing of postfix queue manager messages
"""

import pytest

from maillog.postfix import ParseError, PostfixParseError
from maillog.postfix.messages import qmgr
from maillog.postfix.messages.qmgr import Qmgr, QmgrExpired, QmgrRemoved

PREFIX = 'Jul 25 00:00:06 svoboda postfix/qmgr[32099]: DF83C1409B04F:'


@pytest.mark.parametrize('suffix,kind', [
    (' from=', ParseError.QMGR_NO_FROM),
    (' from=<', ParseError.QMGR_BAD_FROM),
    (' from=<>, size', ParseError.QMGR_NO_SIZE),
    (' from=<>, size=)', ParseError.QMGR_BAD_SIZE),
    (' from=<>, size=Xyz,', ParseError.QMGR_SIZE_NOT_INT),
    (' from=<>, size={0}, nrcpt=1 (queue active)'.format('1' * 5000), ParseError.QMGR_SIZE_NOT_INT),
    (' from=<>, size=18446744073709551616, nrcpt=1 (queue active)', ParseError.QMGR_SIZE_NOT_INT),
    (' from=<>, size=0, nrcpt', ParseError.QMGR_NO_NRCPT),
    (' from=<>, size=0, nrcpt=', ParseError.QMGR_BAD_NRCPT),
    (' from=<>, size=0, nrcpt= ', ParseError.QMGR_NOT_ACTIVE),
    (' from=<>, size=0, nrcpt=1 (queue inactive)', ParseError.QMGR_NOT_ACTIVE),
    (' from=<>, size=0, nrcpt=Xyz (queue active)', ParseError.QMGR_NRCPT_NOT_INT),
    (' from=<>, status=expired', ParseError.QMGR_NO_SIZE),
])
def test_qmgr_errors(parse_with, suffix, kind):
    with pytest.raises(PostfixParseError) as e:
        parse_with(qmgr.parse, PREFIX + suffix)
    assert e.value.kind == kind


def test_qmgr_active(parse_with):
    """Queue active

    Message added to active queue with sender, size and recipient count
    """
    line = 'Jul 25 00:00:01 svoboda postfix/qmgr[32099]: 77A8F1409B022: from=<validation@polytechnique.org>, size=665, nrcpt=1 (queue active)'
    message = parse_with(qmgr.parse, line)
    assert isinstance(message, Qmgr)
    assert message.kind == 'qmgr'
    assert message.queue_id == '77A8F1409B022'
    assert message.sender == 'validation@polytechnique.org'
    assert (message.from_s, message.from_e) == (66, 94)
    assert message.size == 665
    assert message.nrcpt == 1


def test_qmgr_large_size(parse_with):
    message = parse_with(qmgr.parse, PREFIX + ' from=<>, size=8589934592, nrcpt=12 (queue active)')
    assert message.sender == ''
    assert message.size == 8589934592
    assert message.nrcpt == 12


def test_qmgr_removed(parse_with):
    message = parse_with(qmgr.parse, 'Jul 25 00:00:03 svoboda postfix/qmgr[32099]: 77A8F1409B022: removed')
    assert isinstance(message, QmgrRemoved)
    assert message.kind == 'qmgr_removed'
    assert message.queue_id == '77A8F1409B022'


def test_qmgr_expired(parse_with):
    line = 'Jul 25 00:08:51 yuuai postfix/qmgr[4146]: BB3B220B19: from=<>, status=expired, returned to sender'
    message = parse_with(qmgr.parse, line)
    assert isinstance(message, QmgrExpired)
    assert message.kind == 'qmgr_expired'
    assert message.sender == ''
    assert (message.from_s, message.from_e) == (60, 60)

    message = parse_with(qmgr.parse, line.replace('from=<>', 'from=<a@b.c>'))
    assert message.sender == 'a@b.c'


def test_qmgr_no_queue_id(parse_with):
    line = 'Jul 25 00:08:51 yuuai postfix/qmgr[4146]: warning: connect to transport private/smtp: Connection refused'
    assert parse_with(qmgr.parse, line) is None

    with pytest.raises(PostfixParseError) as e:
        parse_with(qmgr.parse, 'Jul 25 00:08:51 yuuai postfix/qmgr[4146]: removed')
    assert e.value.kind == ParseError.QMGR_NO_QUEUE_ID
