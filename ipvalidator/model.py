#
#
#

from logging import getLogger

from .exception import ConfigError, ValidationError, ValidatorException
from .validator import BaseValidator


class Errors(dict):
    '''
    Failure messages keyed by attribute. Looking up an attribute without any
    errors returns an empty list without adding it, validators record
    messages with `setdefault`.
    '''

    def __missing__(self, attribute):
        return []

    def full_messages(self):
        return [
            f'{attribute} {message}'
            for attribute, messages in self.items()
            for message in messages
        ]


class Model(object):
    '''
    A plain object with declared attribute validations, e.g.

    class Host(Model):
        pass

    Host.validates('address', ip={'ip4_only': True})
    Host(address='1.2.3.4').valid  # True

    Each keyword names a registered validator, its value is that validator's
    options or True to use its defaults. Names Model itself uses, `errors`,
    `valid` and the like, can't be attributes.
    '''

    log = getLogger('Model')

    _validations = ()

    @classmethod
    def reserved(cls, attribute):
        return attribute == 'errors' or hasattr(Model, attribute)

    @classmethod
    def validates(cls, attribute, **validators):
        if cls.reserved(attribute):
            raise ConfigError([f'reserved attribute "{attribute}"'])
        declared = []
        for name, options in validators.items():
            _class = BaseValidator.get(name)
            declared.append((attribute, _class.new(options)))
        # copy so that subclasses don't add to their parent's declarations
        cls._validations = cls._validations + tuple(declared)

    @classmethod
    def new(cls, lenient=False, **attributes):
        model = cls(**attributes)
        if not model.validate():
            name = cls.__name__
            reasons = model.errors.full_messages()
            if lenient:
                cls.log.warning(ValidationError.build_message(name, reasons))
            else:
                raise ValidationError(name, reasons)
        return model

    def __init__(self, **attributes):
        for name, value in attributes.items():
            if self.reserved(name):
                raise ValidatorException(f'Reserved attribute "{name}"')
            setattr(self, name, value)
        self.errors = Errors()

    def validate(self):
        self.errors.clear()
        for attribute, validator in self._validations:
            value = getattr(self, attribute, None)
            validator.validate_each(self, attribute, value)
        self.log.debug('validate: model=%s, errors=%s', self, self.errors)
        return not self.errors

    @property
    def valid(self):
        return self.validate()

    def __repr__(self):
        return f'{self.__class__.__name__}<{self.__dict__}>'
