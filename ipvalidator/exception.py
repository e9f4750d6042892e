#
#
#


class ValidatorException(Exception):
    pass


def _bulleted(header, reasons):
    reasons = '\n  - '.join(reasons)
    return f'{header}\n  - {reasons}'


class ConfigError(ValidatorException):
    def __init__(self, reasons):
        super().__init__(
            _bulleted('Invalid validator configuration', reasons)
        )
        self.reasons = reasons


class ValidationError(ValidatorException):
    @classmethod
    def build_message(cls, name, reasons):
        return _bulleted(f'Invalid {name}', reasons)

    def __init__(self, name, reasons):
        super().__init__(self.build_message(name, reasons))
        self.name = name
        self.reasons = reasons
