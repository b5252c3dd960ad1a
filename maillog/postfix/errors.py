"""
Postfix log line decoding errors

Every grammar checkpoint has its own ParseError member, so a failure always
names the exact token that was missing or malformed. Member values are the
human readable labels.
"""

from enum import Enum


class ParseError(Enum):
    # Preamble
    DATE_TOO_SHORT = 'date too short'
    NON_ENDING_HOST = 'host has no terminator'
    MISSING_PROCESS = 'missing process'
    NON_ENDING_SERVICE = 'service tag has no terminator'
    NON_ENDING_PROCESS = 'process keyword has no terminator'
    UNKNOWN_PROCESS = 'unknown process kind'
    BAD_PROCESS_ID = 'bad process id'

    # Bounce
    BOUNCE_NO_QUEUE_ID = 'bounce line has no queue id'
    BOUNCE_NO_NOTIFICATION = 'bounce has no non-delivery notification'
    BOUNCE_BAD_QUEUE_ID = 'bounce child queue id is not hexadecimal'

    # Cleanup
    CLEANUP_NO_QUEUE_ID = 'cleanup line has no queue id'
    CLEANUP_NO_MESSAGE_ID = 'cleanup has no message-id'

    # Delivery agents
    FORWARD_BAD_HOST = 'forward error host has no terminator'
    FORWARD_NO_MESSAGE = 'forward error has no message'
    FORWARD_NO_TO = 'forward has no to field'
    FORWARD_BAD_TO = 'forward to field has no terminator'
    FORWARD_BAD_ORIG_TO = 'forward orig_to field has no terminator'
    FORWARD_NO_RELAY = 'forward has no relay field'
    FORWARD_BAD_RELAY = 'forward relay field has no terminating comma'
    FORWARD_BAD_CONN_USE = 'forward conn_use field has no terminating comma'
    FORWARD_CONN_USE_NOT_INT = 'forward conn_use field is not a base-10 integer'
    FORWARD_NO_DELAY = 'forward has no delay field'
    FORWARD_BAD_DELAY = 'forward delay field has no terminating comma'
    FORWARD_NO_DELAYS = 'forward has no delays field'
    FORWARD_BAD_DELAYS = 'forward delays field has no terminating comma'
    FORWARD_NO_DSN = 'forward has no dsn field'
    FORWARD_BAD_DSN = 'forward dsn field has no terminating comma'
    FORWARD_DSN_BAD_LEN = 'forward dsn does not have three components'
    FORWARD_DSN_NOT_INT = 'forward dsn component is not an 8-bit integer'
    FORWARD_NO_STATUS = 'forward has no status field'

    # Pickup
    PICKUP_NO_QUEUE_ID = 'pickup line has no queue id'
    PICKUP_NO_UID = 'pickup has no uid field'
    PICKUP_BAD_UID = 'pickup uid field has no terminator'
    PICKUP_UID_NOT_INT = 'pickup uid field is not a base-10 integer'
    PICKUP_NO_FROM = 'pickup has no from field'

    # Queue manager
    QMGR_NO_QUEUE_ID = 'qmgr line has no queue id'
    QMGR_NO_FROM = 'qmgr has no from field'
    QMGR_BAD_FROM = 'qmgr from field has no terminator'
    QMGR_NO_SIZE = 'qmgr has no size field'
    QMGR_BAD_SIZE = 'qmgr size field has no terminating comma'
    QMGR_SIZE_NOT_INT = 'qmgr size field is not a base-10 integer'
    QMGR_NO_NRCPT = 'qmgr has no nrcpt field'
    QMGR_BAD_NRCPT = 'qmgr nrcpt field has no terminator'
    QMGR_NOT_ACTIVE = 'qmgr queue is not active'
    QMGR_NRCPT_NOT_INT = 'qmgr nrcpt field is not a base-10 integer'

    # Reject, discard and warn records
    REJECT_BAD_MESSAGE = 'reject message has no terminating semicolon'
    REJECT_NO_FROM = 'reject has no from field'
    REJECT_BAD_FROM = 'reject from field has no terminator'
    REJECT_BAD_TO = 'reject to field has no terminator'
    REJECT_NO_PROTO = 'reject has no proto field'
    REJECT_BAD_PROTO = 'reject proto field has no terminator'
    REJECT_UNKNOWN_PROTO = 'reject proto field is an unknown protocol'
    REJECT_NO_HELO = 'reject has no helo field'
    REJECT_BAD_HELO = 'reject helo field has no terminator'

    # Inbound SMTP daemon
    SMTPD_NO_CLIENT = 'smtpd has no client field'
    SMTPD_UNKNOWN_CLIENT_SUFFIX = 'smtpd client field is followed by unknown fields'
    SMTPD_BAD_ORIG_QUEUE_ID = 'smtpd orig_queue_id field has no terminating comma'
    SMTPD_ORIG_QUEUE_ID_NOT_HEX = 'smtpd orig_queue_id field is not hexadecimal'
    SMTPD_NO_ORIG_CLIENT = 'smtpd has no orig_client field'
    SMTPD_BAD_SASL_METHOD = 'smtpd sasl_method field has no terminating comma'
    SMTPD_UNKNOWN_SASL_METHOD = 'smtpd sasl_method field is an unknown method'
    SMTPD_NO_SASL_USERNAME = 'smtpd has no sasl_username field'

    def __str__(self):
        return self.value


class PostfixParseError(Exception):
    """
    Exception raised when a log line violates the grammar of its process
    """
    def __init__(self, kind, line=None):
        super(PostfixParseError, self).__init__(kind, line)
        self.kind = kind
        self.line = line

    def __str__(self):
        return self.kind.value
