"""
Test parsing of postfix pickup messages
"""

import pytest

from maillog.postfix import ParseError, PostfixParseError
from maillog.postfix.messages import pickup

PREFIX = 'Sep  3 00:00:03 yuuai postfix/pickup[12797]: 12C172090B:'


@pytest.mark.parametrize('suffix,kind', [
    (' uid', ParseError.PICKUP_NO_UID),
    (' uid=', ParseError.PICKUP_BAD_UID),
    (' uid= ', ParseError.PICKUP_UID_NOT_INT),
    (' uid=xxx ', ParseError.PICKUP_UID_NOT_INT),
    (' uid=-1 ', ParseError.PICKUP_UID_NOT_INT),
    (' uid=4294967296 ', ParseError.PICKUP_UID_NOT_INT),
    (' uid=106 from', ParseError.PICKUP_NO_FROM),
])
def test_pickup_errors(parse_with, suffix, kind):
    """Broken pickup lines

    Each broken field is reported with its own error
    """
    with pytest.raises(PostfixParseError) as e:
        parse_with(pickup.parse, PREFIX + suffix)
    assert e.value.kind == kind
    assert e.value.line == PREFIX + suffix


def test_pickup_bracketed_sender(parse_with):
    message = parse_with(pickup.parse, PREFIX + ' uid=106 from=<root@example.com>')
    assert message.kind == 'pickup'
    assert message.uid == 106
    assert message.sender == 'root@example.com'
    assert message.queue_id == '12C172090B'


def test_pickup_plain_sender(parse_with):
    line = PREFIX + ' uid=1024 from=root@example.com'
    message = parse_with(pickup.parse, line)
    assert message.uid == 1024
    assert message.sender == 'root@example.com'
    assert (message.from_s, message.from_e) == (71, 87)
    assert str(message) == line


def test_pickup_empty_sender(parse_with):
    message = parse_with(pickup.parse, PREFIX + ' uid=0 from=<>')
    assert message.uid == 0
    assert message.sender == ''


def test_pickup_no_queue_id(parse_with):
    """Pickup without queue id

    Diagnostics are ignored, anything else is an error
    """
    line = 'Sep  3 00:00:03 yuuai postfix/pickup[12797]: warning: maildrop/1234: Error writing message file'
    assert parse_with(pickup.parse, line) is None

    with pytest.raises(PostfixParseError) as e:
        parse_with(pickup.parse, 'Sep  3 00:00:03 yuuai postfix/pickup[12797]: uid=106 from=<root>')
    assert e.value.kind == ParseError.PICKUP_NO_QUEUE_ID
