#
#
#

from collections import namedtuple
from logging import getLogger

from .exception import ConfigError, ValidatorException
from .options import IpOptions
from .span import IPV4, IPV6, Span

MALFORMED_ADDRESS = 'MalformedAddress'
MALFORMED_WITHIN = 'MalformedWithin'
FAMILY_MISMATCH = 'FamilyMismatch'
SHAPE_MISMATCH = 'ShapeMismatch'
OUT_OF_RANGE = 'OutOfRange'


class Outcome(namedtuple('Outcome', 'kind message')):
    '''
    Result of checking a single value, `kind` is None when it passed,
    otherwise one of the failure kinds along with the message to report.
    '''

    def __bool__(self):
        return self.kind is None


VALID = Outcome(None, None)


class BaseValidator(object):
    log = getLogger('Validator')

    _CLASSES = {}

    @classmethod
    def register_type(cls, _class, name=None):
        if name is None:
            name = _class.name
        existing = cls._CLASSES.get(name)
        if existing:
            module = existing.__module__
            klass = existing.__name__
            msg = f'Validator "{name}" already registered by {module}.{klass}'
            raise ValidatorException(msg)
        cls._CLASSES[name] = _class

    @classmethod
    def registered_types(cls):
        return cls._CLASSES

    @classmethod
    def get(cls, name):
        try:
            return cls._CLASSES[name]
        except KeyError:
            raise ConfigError([f'unknown validator "{name}"'])

    @classmethod
    def new(cls, options):
        return cls(options)

    def __init__(self, options=None):
        self.options = options

    def check(self, value):
        raise NotImplementedError('check method not implemented')

    def validate_each(self, record, attribute, value):
        '''
        Host entry point, records a single error message for `attribute` on
        `record` when `value` fails and does nothing otherwise.
        '''
        outcome = self.check(value)
        self.log.debug(
            'validate_each: attribute=%s, kind=%s', attribute, outcome.kind
        )
        if not outcome:
            record.errors.setdefault(attribute, []).append(outcome.message)


class IpValidator(BaseValidator):
    '''
    Checks that a value is an IP address or CIDR range, see IpOptions for the
    supported constraints.

    Every failure, from garbage input to a malformed `within`, is reported the
    same way with a single message. Nothing here raises.
    '''

    log = getLogger('IpValidator')

    name = 'ip'

    @classmethod
    def new(cls, options):
        return cls(IpOptions.new(options))

    def __init__(self, options=None):
        if not isinstance(options, IpOptions):
            options = IpOptions.new(options)
        super().__init__(options)

    @property
    def error_message(self):
        options = self.options
        if options.message is not None:
            return options.message
        if options.ip6_only:
            family = 'IPv6 '
        elif options.ip4_only:
            family = 'IPv4 '
        else:
            family = 'IPv4 or IPv6 '
        # the wording has never tracked ranges_only/addresses_only
        return f'is not a valid {family}address or address range'

    def _kind(self, span):
        options = self.options
        if options.ip4_only and span.family != IPV4:
            return FAMILY_MISMATCH
        if options.ip6_only and span.family != IPV6:
            return FAMILY_MISMATCH
        if options.ranges_only and not span.is_range:
            return SHAPE_MISMATCH
        if options.addresses_only and not span.is_address:
            return SHAPE_MISMATCH
        if options.within is not None:
            within = Span.parse(options.within)
            if within is None:
                return MALFORMED_WITHIN
            if not within.contains(span):
                return OUT_OF_RANGE
        return None

    def check(self, value):
        span = Span.parse(value)
        kind = MALFORMED_ADDRESS if span is None else self._kind(span)
        self.log.debug('check: value=%s, span=%s, kind=%s', value, span, kind)
        if kind is None:
            return VALID
        return Outcome(kind, self.error_message)

    def __repr__(self):
        return f'IpValidator<{self.options}>'


BaseValidator.register_type(IpValidator)
