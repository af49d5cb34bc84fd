"""
This module contains the exceptions raised while parsing the command line.
"""


class ParameterError(RuntimeError):
    """
    Base class for unrecoverable parameter errors.

    The *name* attribute is the name of the offending parameter.
    """

    def __init__(self, name: str, message: str) -> None:
        self.name = name
        super().__init__(message)


class MissingValueError(ParameterError):
    """
    A value-bearing parameter was the last token of the command line.
    """

    def __init__(self, name: str) -> None:
        super().__init__(name, 'No value passed for parameter {}'.format(name))


class InvalidValueError(ParameterError):
    """
    The token following a parameter could not be converted to its type.

    The *value* attribute is the offending token and *reason* the underlying
    conversion failure.
    """

    def __init__(self, name: str, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(name, 'Unable to convert parameter {} to unsigned integer: {}'
                         .format(name, reason))
