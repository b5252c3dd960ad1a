"""
Postfix log line parser

Parse one syslog line from postfix to a message:

    from maillog.postfix import ParserConfig, parse_line
    message = parse_line(line, ParserConfig())

parse_line returns a Message, None for lines that are skipped on purpose
or raises PostfixParseError naming the failed checkpoint.
"""

from maillog.postfix.messages import bounce, cleanup, forward, pickup, qmgr, smtpd
from maillog.postfix.preamble import Preamble, Process


def ignore(preamble, pos):
    return None


# Parser for messages of each process
PARSERS = {
    Process.ANVIL: ignore,
    Process.BOUNCE: bounce.parse,
    Process.CLEANUP: cleanup.parse,
    Process.LMTP: forward.parse,
    Process.LOCAL: forward.parse,
    Process.PICKUP: pickup.parse,
    Process.PIPE: forward.parse,
    Process.QMGR: qmgr.parse,
    Process.SCACHE: ignore,
    Process.SMTP: forward.parse,
    Process.SMTPD: smtpd.parse,
    Process.TLSMGR: ignore,
    Process.VIRTUAL: forward.parse,
}


def parse_line(line, config):
    """Parse postfix log line

    Returns decoded Message or None for ignored lines.

    Raises PostfixParseError if line does not match the grammar of the
    process that logged it.
    """
    parsed = Preamble.parse(config, line)
    if parsed is None:
        return None
    preamble, pos = parsed
    return PARSERS[preamble.process](preamble, pos)
