"""
stepgen/utils/exceptions.py

Custom exceptions for the project.

None of these subclass ValueError, so raising them from inside a pydantic
validator propagates them as-is instead of wrapping them in a ValidationError.
"""


class StepGenError(Exception):
    """
    Base class for all stepgen errors.
    """
    pass


class NameLegalityError(StepGenError):
    """
    Exception raised when a parameter type name contains an illegal character.
    """
    pass


class FlagError(StepGenError):
    """
    Exception raised when a compiled regexp given to a parameter type carries flags.
    """
    pass


class InvalidPatternError(StepGenError):
    """
    Exception raised when a parameter type pattern fails to compile.
    """
    pass


class NameCollisionError(StepGenError):
    """
    Exception raised when registering a parameter type whose name is already taken.
    """
    pass


class ParameterTypeNotFoundError(StepGenError):
    """
    Exception raised when a strict registry lookup finds no parameter type.
    """
    pass


class AmbiguousParameterTypeError(StepGenError):
    """
    Exception raised when a regexp maps to several parameter types and none is preferential.
    """
    pass
