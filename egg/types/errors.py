class EggError(Exception):
    """ Base class for all Egg errors"""
    pass

class EggSyntaxError(EggError):
    """ Raised for malformed source text or a malformed special form"""

class EggReferenceError(EggError):
    """ Raised when a word is not bound in any enclosing scope"""

class EggTypeError(EggError):
    """ Raised when a value of the wrong kind is applied or passed to a primitive"""

class EggIndexError(EggError):
    """ Raised when an array index is out of range"""

class EggArithmeticError(EggError):
    """ Raised when a numeric primitive cannot produce a result (division by zero)"""
