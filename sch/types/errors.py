class SchError(Exception):
    """ Base class for all sch errors"""
    pass

class SchSyntaxError(SchError):
    """ Raised when source text cannot be lexed or parsed"""

class SchUnboundVariable(SchError):
    """ Raised when a symbol is not bound anywhere in the environment chain"""

class SchDuplicateBinding(SchError):
    """ Raised when define targets a name already bound in the same environment"""

class SchApplicationError(SchError):
    """ Raised when the head of an application does not evaluate to a procedure"""

class SchMalformedForm(SchError):
    """ Raised when a special form is given arguments of the wrong shape"""

class SchTypeError(SchError):
    """ Raised when a native procedure receives an operand of the wrong type"""

class SchArityMismatch(SchError):
    """ Raised when a closure is applied to the wrong number of arguments"""

class SchRecursionError(SchError):
    """ Raised when evaluation nests deeper than the interpreter allows"""
