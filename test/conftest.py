"""
Parser fixtures
"""

import pytest


@pytest.fixture
def postfix_config():
    """Parser configuration

    Configuration used by all postfix parser tests: clamsmtpd is noise
    """
    from maillog.postfix import ParserConfig
    return ParserConfig(['clamsmtpd'])


@pytest.fixture
def parse_preamble(postfix_config):
    """Preamble parser

    Returns function parsing the preamble of a line, failing the test if
    the line is ignored.
    """
    from maillog.postfix import Preamble

    def parse(line):
        parsed = Preamble.parse(postfix_config, line)
        assert parsed is not None, 'Line was ignored: {0}'.format(line)
        return parsed
    return parse


@pytest.fixture
def parse_with(parse_preamble):
    """Message parser

    Returns function parsing a line with given message grammar, skipping
    process dispatch.
    """
    def parse(grammar, line, *args):
        preamble, pos = parse_preamble(line)
        return grammar(preamble, pos, *args)
    return parse
