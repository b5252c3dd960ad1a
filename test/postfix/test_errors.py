"""
Test parse error kinds
"""

from maillog.postfix import ParseError, PostfixParseError


def test_parse_error_labels():
    """Error labels

    Every error kind has its own human readable label
    """
    labels = [kind.value for kind in ParseError.__members__.values()]
    assert len(labels) == len(set(labels))
    for kind in ParseError:
        assert str(kind) == kind.value
        assert kind.value != ''


def test_postfix_parse_error():
    line = 'Sep  3 00:00:03 yuuai'
    error = PostfixParseError(ParseError.NON_ENDING_HOST, line)
    assert error.kind == ParseError.NON_ENDING_HOST
    assert error.line == line
    assert str(error) == 'host has no terminator'
    assert isinstance(error, Exception)
