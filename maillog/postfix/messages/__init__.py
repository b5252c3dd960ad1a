"""
Decoded postfix log messages
"""

from maillog.postfix.messages.base import Message
from maillog.postfix.messages.bounce import Bounce
from maillog.postfix.messages.cleanup import Cleanup
from maillog.postfix.messages.forward import Forward, ForwardError
from maillog.postfix.messages.pickup import Pickup
from maillog.postfix.messages.qmgr import Qmgr, QmgrExpired, QmgrRemoved
from maillog.postfix.messages.reject import Reject, RejectProto, RejectReason
from maillog.postfix.messages.smtpd import SaslMethod, Smtpd, SmtpdForward, SmtpdLogin

# All message variants, in reporting order
MESSAGE_TYPES = (
    Bounce,
    Pickup,
    Forward,
    ForwardError,
    Smtpd,
    SmtpdForward,
    SmtpdLogin,
    Cleanup,
    Qmgr,
    QmgrRemoved,
    QmgrExpired,
    Reject,
)

__all__ = [
    'MESSAGE_TYPES',
    'Message',
    'Bounce',
    'Cleanup',
    'Forward',
    'ForwardError',
    'Pickup',
    'Qmgr',
    'QmgrExpired',
    'QmgrRemoved',
    'Reject',
    'RejectProto',
    'RejectReason',
    'SaslMethod',
    'Smtpd',
    'SmtpdForward',
    'SmtpdLogin',
]
