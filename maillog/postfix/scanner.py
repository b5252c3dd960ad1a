"""
Cursor primitives shared by the postfix line grammars

Grammars thread an integer cursor through these helpers: each call checks
the text at the cursor against the line's logical end and returns the
advanced cursor, or raises PostfixParseError with the checkpoint's error.
"""

from maillog.postfix.errors import PostfixParseError

# Absent optional field
ABSENT = (0, 0)

QUEUE_ID_CHARACTERS = frozenset('0123456789ABCDEF')
DECIMAL_CHARACTERS = frozenset('0123456789')

# Prefixes of operational diagnostics postfix logs without a queue id
DIAGNOSTIC_PREFIXES = (
    ' warning: ',
    ' error: ',
    ' fatal: ',
    ' panic: ',
)


def is_queue_id(text):
    """
    Returns True for non-empty strings of uppercase hexadecimal characters
    """
    return text != '' and QUEUE_ID_CHARACTERS.issuperset(text)


def parse_uint(text, error, line=None, bits=32):
    """Parse unsigned integer

    Only plain base-10 digits are accepted: no sign, whitespace or
    underscores. Values not fitting in given number of bits are errors.
    """
    if text == '' or not DECIMAL_CHARACTERS.issuperset(text):
        raise PostfixParseError(error, line)
    # Too many digits to fit, checked before conversion
    if len(text) > len(str(2 ** bits - 1)):
        raise PostfixParseError(error, line)
    value = int(text)
    if value >= 2 ** bits:
        raise PostfixParseError(error, line)
    return value


def starts(preamble, pos, literal):
    """
    Check if literal is found at pos within the line
    """
    return preamble.raw.startswith(literal, pos, preamble.end)


def expect(preamble, pos, literal, error):
    """
    Consume required literal at pos, returning position after it
    """
    if not preamble.raw.startswith(literal, pos, preamble.end):
        raise PostfixParseError(error, preamble.raw)
    return pos + len(literal)


def find(preamble, pos, delimiter, error):
    """
    Return index of next delimiter at or after pos
    """
    index = preamble.raw.find(delimiter, pos, preamble.end)
    if index == -1:
        raise PostfixParseError(error, preamble.raw)
    return index


def strip_brackets(raw, start, end):
    """
    Strip a leading '<' and a trailing '>' from range, each if present
    """
    if end > start and raw[end - 1] == '>':
        end -= 1
    if end > start and raw[start] == '<':
        start += 1
    return start, end


def is_diagnostic(preamble, pos):
    """
    Check if text at pos is an operational warning or error message
    """
    return preamble.raw.startswith(DIAGNOSTIC_PREFIXES, pos, preamble.end)
