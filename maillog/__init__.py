"""
Parsers for mail server syslog files
"""

__version__ = '0.3.0'

__all__ = [
    'log', 'logfile', 'postfix', 'script',
]
