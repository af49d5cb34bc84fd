"""
This module defines the parameter types that can be processed and the values
they resolve to.
"""

import abc
import enum
import os
import pathlib
import re
import typing


UINTEGER_MAX = 2 ** 32 - 1
""" The largest value an unsigned integer parameter can hold. """

_DIGITS = re.compile(r'\+?[0-9]+', re.ASCII)


class ParameterType(enum.Enum):
    """
    List of parameter types that can be processed.
    """

    FLAG = 'flag'
    """ Flag parameter, consumes no value. """

    UINTEGER = 'uinteger'
    """ Unsigned 32-bit integer value. """

    PATH = 'path'
    """ File path value. """

    @property
    def takes_value(self) -> bool:
        """
        Whether the parameter consumes the token following its alias.
        """
        return self is not ParameterType.FLAG


class ParameterValue(metaclass=abc.ABCMeta):
    """
    Base class for the value a parameter resolves to. Only its subclasses are
    instantiated.

    Values are immutable and compare by type and payload. The `kind` attribute
    is the `ParameterType` the value belongs to.
    """

    __slots__ = ()

    kind = None  # type: typing.Optional[ParameterType]

    @abc.abstractmethod
    def _key(self) -> tuple:
        """
        Return the payload the value compares and hashes by.
        """

    def __eq__(self, other):
        if type(other) is not type(self):  # pylint: disable=unidiomatic-typecheck
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash((type(self), self._key()))

    def __bool__(self):
        return True

    def __repr__(self):
        return '{}({})'.format(type(self).__name__, ', '.join(repr(x) for x in self._key()))


class Unset(ParameterValue):
    """
    No value: the parameter was never matched, or does not exist.
    """

    __slots__ = ()

    def _key(self):
        return ()

    def __bool__(self):
        return False


class FlagSet(ParameterValue):
    """
    The flag parameter has been set.
    """

    __slots__ = ()
    kind = ParameterType.FLAG

    def _key(self):
        return ()


class UIntegerValue(ParameterValue):
    """
    Unsigned integer value.
    """

    __slots__ = ('value',)
    kind = ParameterType.UINTEGER

    def __init__(self, value: int) -> None:
        if not 0 <= value <= UINTEGER_MAX:
            raise ValueError('value out of range: {}'.format(value))
        object.__setattr__(self, 'value', value)

    def __setattr__(self, key, value):
        raise AttributeError('{} is immutable'.format(type(self).__name__))

    def _key(self):
        return (self.value,)

    def __int__(self):
        return self.value


class PathValue(ParameterValue):
    """
    File path value. The token is kept verbatim in *text*, without any check;
    *path* is the same value as a `pathlib.Path`.
    """

    __slots__ = ('text',)
    kind = ParameterType.PATH

    def __init__(self, path: typing.Union[str, os.PathLike]) -> None:
        object.__setattr__(self, 'text', os.fspath(path))

    @property
    def path(self) -> pathlib.Path:
        return pathlib.Path(self.text)

    def __setattr__(self, key, value):
        raise AttributeError('{} is immutable'.format(type(self).__name__))

    def _key(self):
        return (self.text,)

    def __fspath__(self):
        return self.text

    def __str__(self):
        return self.text


UNSET = Unset()
FLAG_SET = FlagSet()


def parse_uinteger(text: str) -> int:
    """
    Parse *text* as an unsigned 32-bit integer.

    Only ASCII digits are accepted, with an optional leading `+`. A `ValueError`
    describing the failure is raised otherwise.

    >>> parse_uinteger('42')
    42
    >>> parse_uinteger('-1')
    Traceback (most recent call last):
    ...
    ValueError: invalid digit found in string
    """
    if not text:
        raise ValueError('cannot parse integer from empty string')
    if not _DIGITS.fullmatch(text):
        raise ValueError('invalid digit found in string')

    # int() rejects strings over 4300 digits
    digits = text.lstrip('+').lstrip('0') or '0'
    if len(digits) > len(str(UINTEGER_MAX)):
        raise ValueError('number too large to fit in target type')

    value = int(digits)
    if value > UINTEGER_MAX:
        raise ValueError('number too large to fit in target type')
    return value


def coerce(parameter_type: ParameterType, text: str) -> ParameterValue:
    """
    Convert the token *text* into the value for a value-bearing *parameter_type*.
    """
    if parameter_type is ParameterType.UINTEGER:
        return UIntegerValue(parse_uinteger(text))
    if parameter_type is ParameterType.PATH:
        return PathValue(text)
    raise ValueError('{} parameters take no value'.format(parameter_type.value))
