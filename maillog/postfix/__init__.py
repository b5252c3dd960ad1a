"""
Parser for postfix syslog lines
"""

from maillog.postfix.config import ConfigError, ParserConfig
from maillog.postfix.errors import ParseError, PostfixParseError
from maillog.postfix.messages import MESSAGE_TYPES, Message
from maillog.postfix.parse import parse_line
from maillog.postfix.preamble import Preamble, Process

__all__ = [
    'ConfigError',
    'MESSAGE_TYPES',
    'Message',
    'ParseError',
    'ParserConfig',
    'PostfixParseError',
    'Preamble',
    'Process',
    'parse_line',
]
