"""
Postfix parser configuration

Configuration files are simple ConfigObj files:

    process_noise = clamsmtpd, postlicyd

"""

import os

import configobj

DEFAULT_PROCESS_NOISE = (
    'clamsmtpd',
    'postlicyd',
)


class ConfigError(Exception):
    pass


class ParserConfig(object):
    """Parser configuration

    process_noise lists service or process names whose lines are skipped
    before any other decoding. The configuration is read-only once created
    and may be shared between parsers.
    """
    __slots__ = ('process_noise',)

    def __init__(self, process_noise=DEFAULT_PROCESS_NOISE):
        if isinstance(process_noise, str):
            process_noise = (process_noise,)
        object.__setattr__(self, 'process_noise', tuple(x for x in process_noise if x))

    def __setattr__(self, attr, value):
        raise AttributeError('ParserConfig is read-only')

    def __repr__(self):
        return 'ParserConfig(process_noise={0!r})'.format(self.process_noise)

    def __eq__(self, other):
        return isinstance(other, ParserConfig) and self.process_noise == other.process_noise

    def __hash__(self):
        return hash(self.process_noise)

    def is_noise(self, text):
        """
        Returns True if text starts with one of the noise names
        """
        return text.startswith(self.process_noise)

    @classmethod
    def load(cls, path):
        """Load configuration file

        Raises ConfigError if the file can't be read or parsed. Missing
        process_noise setting means the default noise names.
        """
        path = os.path.expanduser(os.path.expandvars(path))
        if not os.path.isfile(path):
            raise ConfigError('No such file: {0}'.format(path))

        try:
            config = configobj.ConfigObj(path, file_error=True, interpolation=False)
        except (configobj.ConfigObjError, IOError) as e:
            raise ConfigError('Error parsing {0}: {1}'.format(path, e))

        if 'process_noise' not in config:
            return cls()

        value = config['process_noise']
        if not isinstance(value, (str, list)):
            raise ConfigError('Invalid process_noise value in {0}'.format(path))
        return cls(value)
