class RegulaError(Exception):
    """ Base class for all Regula errors"""
    pass

class RegulaIllegalValue(RegulaError):
    """ Raised when a value of an unrecognized kind reaches the comparators"""
    pass

class RegulaIllegalNumber(RegulaIllegalValue):
    """ Raised when a number literal is not well-formed"""

class RegulaTypeError(RegulaError):
    """ Raised when native data cannot be converted into a value"""

class RegulaConfigError(RegulaError):
    """ Raised when an environment setting cannot be interpreted"""
