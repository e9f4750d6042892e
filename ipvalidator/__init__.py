'ipvalidator: IP address and CIDR range validation rules for object models'

__version__ = __VERSION__ = '0.1.0'
