"""
Common base for decoded postfix messages
"""

from maillog.postfix.scanner import ABSENT


class Message(object):
    """Decoded postfix log message

    Messages contain the line preamble and offsets of their own fields in
    the same raw line. Preamble fields are available as read-only
    attributes of the message. Messages can't be modified once created:
    subclasses pass their field values to Message.__init__.

    Subclasses set kind to a unique name and list their offset fields in
    fields for __repr__.
    """
    __slots__ = ('preamble',)
    kind = None
    fields = ()

    def __init__(self, preamble, **values):
        object.__setattr__(self, 'preamble', preamble)
        for attr, value in values.items():
            object.__setattr__(self, attr, value)

    def __setattr__(self, attr, value):
        raise AttributeError('{0} is read-only'.format(self.__class__.__name__))

    def __delattr__(self, attr):
        raise AttributeError('{0} is read-only'.format(self.__class__.__name__))

    def __repr__(self):
        return '{0}({1!r}{2})'.format(
            self.__class__.__name__,
            self.preamble,
            ''.join(', {0}={1!r}'.format(k, getattr(self, k)) for k in self.fields),
        )

    def __str__(self):
        return self.raw

    def span(self, start, end):
        """
        Return text in raw line for range, None for absent ranges
        """
        if (start, end) == ABSENT:
            return None
        return self.preamble.raw[start:end]

    @property
    def raw(self):
        return self.preamble.raw

    @property
    def date(self):
        return self.preamble.date

    @property
    def host(self):
        return self.preamble.host

    @property
    def service(self):
        return self.preamble.service

    @property
    def process(self):
        return self.preamble.process

    @property
    def pid(self):
        return self.preamble.pid

    @property
    def queue_id(self):
        return self.preamble.queue_id
