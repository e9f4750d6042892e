#
#
#

from collections import namedtuple
from logging import getLogger

from jsonschema import Draft202012Validator

from .exception import ConfigError


def _flag(name):
    return {
        'type': 'boolean',
        '$error_message': f'invalid {name}, {{instance!r}} is not true or false',
    }


def _text(name):
    return {
        'type': 'string',
        '$error_message': f'invalid {name}, {{instance!r}} is not a string',
    }


class IpOptions(
    namedtuple(
        'IpOptions',
        'ip4_only ip6_only ranges_only addresses_only within message',
        defaults=(False, False, False, False, None, None),
    )
):
    '''
    Configuration for an `ip` validation rule.

    ip4_only: require an IPv4 value
    ip6_only: require an IPv6 value
    ranges_only: require a range covering more than one address
    addresses_only: require a single address, `/32` and `/128` count
    within: CIDR range the whole value must fall inside of
    message: replaces the generated failure message

    Flags are independent, enabling both halves of a pair simply means
    nothing will validate. `within` is only parsed when a value is checked.

    Example usage:

    Host.validates(
        'address', ip={'addresses_only': True, 'within': '10.0.0.0/8'}
    )
    '''

    log = getLogger('IpOptions')

    SCHEMA = {
        'type': 'object',
        '$error_message': 'invalid options, {instance!r} is not a mapping',
        'propertyNames': {
            'enum': [
                'addresses_only',
                'ip4_only',
                'ip6_only',
                'message',
                'ranges_only',
                'within',
            ],
            '$error_message': 'unknown option "{instance}"',
        },
        'properties': {
            'addresses_only': _flag('addresses_only'),
            'ip4_only': _flag('ip4_only'),
            'ip6_only': _flag('ip6_only'),
            'message': _text('message'),
            'ranges_only': _flag('ranges_only'),
            'within': _text('within'),
        },
    }

    _validator = Draft202012Validator(schema=SCHEMA)

    @classmethod
    def validate(cls, data):
        # `ip: true` in a declaration means all of the defaults
        if data is True or data is None:
            return []
        reasons = []
        for error in cls._validator.iter_errors(data):
            try:
                message = error.schema['$error_message']
            except (KeyError, TypeError):
                message = error.message
            else:
                message = message.format(instance=error.instance)
            cls.log.debug('validate: message=`%s`', message)
            reasons.append(message)
        return sorted(reasons)

    @classmethod
    def new(cls, data):
        reasons = cls.validate(data)
        if reasons:
            raise ConfigError(reasons)
        if data is True or data is None:
            return cls()
        return cls(**data)
