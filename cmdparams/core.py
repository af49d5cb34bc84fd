"""
This module provides the command line processor, which holds the parameter
declarations, parses the command line tokens and exposes the resolved values,
along with the middleware interfaces that can hook into it.
"""

import abc
import logging
import os
import sys
import typing

from .errors import MissingValueError
from .errors import InvalidValueError
from .errors import ParameterError
from .values import ParameterType
from .values import ParameterValue
from .values import FLAG_SET
from .values import UNSET
from .values import coerce


logger = logging.getLogger(__name__)

HELP_ALIASES = ('--help', '--h')
VERSION_ALIASES = ('--version', '--v')

DEFAULT_HELP_TEXT = 'No help text has been set.'
DEFAULT_VERSION_TEXT = 'No version text has been set.'


def middleware(func: typing.Callable):
    """
    This method is an alias for `WrapperMiddleware` to be used
    as a decorator.
    """
    return WrapperMiddleware(func)


class IMiddleware(metaclass=abc.ABCMeta):
    """
    This class is the base interface for all middleware.
    """

    def configure(self, processor: 'CommandLineProcessor') -> None:
        """
        This method is invoked before the command line is parsed and is passed the
        processor instance.

        It's in this method that a subclass can register its own parameters.
        """

    def run(self, processor: 'CommandLineProcessor') -> None:
        """
        This method is invoked when the processor's `run` method is invoked, after
        all the middlewares have been configured and the command line has been parsed.
        The parameter values can be queried from the processor.
        """


class WrapperMiddleware(IMiddleware):
    """
    Wrapper middleware, typically used by decorators.
    """

    def __init__(self, func: typing.Callable, conf: typing.Callable = None) -> None:
        """
        The *func* argument is a callable that will be executed after parsing, with
        the processor as the first parameter.

        The *conf* argument is a callable that will be executed before parsing, usually
        to register parameters. Alternatively, the `configure` method also acts as a
        decorator that can be used for this same purpose.
        """
        self.func = func
        self.conf = conf or (lambda processor: None)

    def configure(self, arg: typing.Union[typing.Callable, 'CommandLineProcessor']) \
            -> typing.Union['WrapperMiddleware', None]:  # pylint: disable=arguments-differ
        """
        Configure the middleware.
        """
        if isinstance(arg, CommandLineProcessor):
            self.conf(arg)
            return None

        self.conf = arg
        return self

    def run(self, processor):
        self.func(processor)


class Parameter():
    """
    A registered parameter declaration.
    """

    def __init__(self, name: str, parameter_type: ParameterType,
                 aliases: typing.Iterable[str], *, help: str = None) -> None:  # pylint:disable=redefined-builtin
        self.name = name
        self.parameter_type = parameter_type
        self.aliases = tuple(aliases)
        self.help = help
        self.value = UNSET  # type: ParameterValue

    def matches(self, token: str) -> bool:
        """
        Whether *token* is one of the parameter aliases.
        """
        return token in self.aliases

    def __repr__(self):
        return 'Parameter({!r}, {}, {!r}, value={!r})'.format(
            self.name, self.parameter_type, self.aliases, self.value)


class CommandLineProcessor():
    """
    Command line processor.
    """

    def __init__(self, prog: str = None, *, file: typing.TextIO = None) -> None:
        """
        The *prog* argument is the program name used in error messages. By default,
        it is taken from `sys.argv[0]`.

        The *file* argument is the stream help, version and unknown parameter
        messages are written to. If omitted, `sys.stdout` is used.
        """
        self.prog = prog if prog is not None else os.path.basename(sys.argv[0])
        self.file = file
        self.parameters = {}  # type: typing.Dict[str, Parameter]
        self.middlewares = []  # type: typing.List[IMiddleware]
        self.help_text = None  # type: typing.Optional[str]
        self.version_text = None  # type: typing.Optional[str]
        self._abort_flag = False

    def add_parameter(self, name: str, parameter_type: ParameterType,
                      aliases: typing.Iterable[str], *, help: str = None) -> Parameter:  # pylint:disable=redefined-builtin
        """
        Add a parameter to be parsed.

        The *name* is the key used to query the value. Registering a name twice
        replaces the previous declaration. The *aliases* are the tokens that identify
        the parameter on the command line. The optional *help* is a short description
        used by `format_parameters`.

        Aliases are expected to be unique. When two parameters share an alias, the one
        registered first is the one that receives the value.
        """
        if not isinstance(parameter_type, ParameterType):
            raise TypeError('parameter_type must be a ParameterType, not {!r}'
                            .format(parameter_type))
        if isinstance(aliases, str):
            raise TypeError('aliases must be a sequence of strings, not a string')

        parameter = Parameter(name, parameter_type, aliases, help=help)
        for alias in parameter.aliases:
            if not isinstance(alias, str):
                raise TypeError('alias must be a string, not {!r}'.format(alias))

        if not parameter.aliases:
            logger.debug('parameter %s has no aliases and cannot be set', name)

        for other in self.parameters.values():
            if other.name == name:
                continue
            for alias in parameter.aliases:
                if other.matches(alias):
                    logger.warning('alias %s of parameter %s is already used by parameter %s',
                                   alias, name, other.name)

        self.parameters[name] = parameter
        logger.debug('registered %s parameter %s: %s',
                     parameter_type.value, name, ', '.join(parameter.aliases))
        return parameter

    def add_middleware(self, item: IMiddleware) -> None:
        """
        Add a middleware to the processor.

        Middleware objects are first configured prior to parsing, then run when the
        processor's `run` method is invoked.

        It is possible to add middleware within another middleware `configure`
        or `run` implementations using this method.
        """
        self.middlewares.append(item)

    def middleware(self, func: typing.Callable) -> WrapperMiddleware:
        """
        This method allows to easily add a custom middleware function to a
        processor.
        """
        item = WrapperMiddleware(func)
        self.add_middleware(item)
        return item

    def set_help_text(self, help_text: str) -> None:
        """
        Set the text to print when the `--help` parameter is used.
        """
        self.help_text = help_text

    def set_version_text(self, version_text: str) -> None:
        """
        Set the text to print when the `--version` parameter is used.
        """
        self.version_text = version_text

    def print_help_text(self) -> None:
        """
        Print the help text, or a default message if it is not set.
        """
        self._print(self.help_text if self.help_text is not None else DEFAULT_HELP_TEXT)

    def print_version_text(self) -> None:
        """
        Print the version text, or a default message if it is not set.
        """
        self._print(self.version_text if self.version_text is not None else DEFAULT_VERSION_TEXT)

    def _print(self, message: str) -> None:
        print(message, file=self.file or sys.stdout)

    def find_parameter(self, token: str) -> typing.Optional[Parameter]:
        """
        Return the first parameter, in registration order, that has *token* as an
        alias, or `None` if no parameter matches.
        """
        for parameter in self.parameters.values():
            if parameter.matches(token):
                return parameter
        return None

    def parse(self, tokens: typing.Sequence[str] = None) -> 'CommandLineProcessor':
        """
        Parse the command line.

        The *tokens* argument is the list of arguments, excluding the program name.
        If omitted, `sys.argv[1:]` is used.

        The help and version parameters, as well as unknown parameters, print a
        message and set the abort flag without stopping the scan. A value-bearing
        parameter with a missing or invalid value raises a `ParameterError`.
        """
        if tokens is None:
            tokens = sys.argv[1:]

        self._abort_flag = False
        for parameter in self.parameters.values():
            parameter.value = UNSET

        iterator = iter(tokens)
        for token in iterator:
            if token in HELP_ALIASES:
                self.print_help_text()
                self._abort_flag = True
                continue

            if token in VERSION_ALIASES:
                self.print_version_text()
                self._abort_flag = True
                continue

            parameter = self.find_parameter(token)
            if parameter is None:
                logger.debug('unknown parameter %s', token)
                self._print('Unknown parameter: {}'.format(token))
                self._abort_flag = True
                continue

            if not parameter.parameter_type.takes_value:
                parameter.value = FLAG_SET
            else:
                value = next(iterator, None)
                if value is None:
                    raise MissingValueError(parameter.name)
                try:
                    parameter.value = coerce(parameter.parameter_type, value)
                except ValueError as err:
                    raise InvalidValueError(parameter.name, value, str(err)) from err

            logger.debug('parameter %s set to %r by %s', parameter.name, parameter.value, token)

        return self

    def run(self, tokens: typing.Sequence[str] = None) -> 'CommandLineProcessor':
        """
        Run the command line processor.

        Every registered middleware is configured, then the command line is parsed
        the same way as `parse`, then each middleware has its `run` method invoked.

        Unlike `parse`, a missing or invalid parameter value terminates the program
        with an error message and an exit status of 2.
        """
        # NOTE: the reason we're not using a for-loop here is to allow middleware to
        # add other middleware within their configure method.
        index = 0
        while True:
            try:
                item = self.middlewares[index]
                index += 1
            except IndexError:
                break
            item.configure(self)

        try:
            self.parse(tokens)
        except ParameterError as err:
            logger.debug('aborting on parameter %s', err.name)
            self.exit(2, '{}: error: {}\n'.format(self.prog, err))

        index = 0
        while True:
            try:
                item = self.middlewares[index]
                index += 1
            except IndexError:
                break
            item.run(self)

        return self

    def exit(self, status: int = 0, message: str = None) -> None:
        """
        Exit the program with *status*, writing *message* to stderr first.
        """
        if message:
            sys.stderr.write(message)
        sys.exit(status)

    @property
    def abort_flag(self) -> bool:
        """
        Whether the help or version parameters, or an unknown parameter, were read
        during the last parse.
        """
        return self._abort_flag

    def get_parameter_value(self, name: str) -> ParameterValue:
        """
        Return the value of the parameter *name*. Returns `UNSET` if the parameter
        doesn't exist.
        """
        parameter = self.parameters.get(name)
        if parameter is None:
            return UNSET
        return parameter.value

    def format_parameters(self) -> str:
        """
        Return a listing of the registered parameters, one per line, suitable to
        build a help text.
        """
        lines = []
        for parameter in self.parameters.values():
            names = ', '.join(parameter.aliases)
            if parameter.parameter_type is ParameterType.UINTEGER:
                names += ' N'
            elif parameter.parameter_type is ParameterType.PATH:
                names += ' PATH'
            if parameter.help:
                lines.append('  {:<24} {}'.format(names, parameter.help))
            else:
                lines.append('  {}'.format(names))
        return '\n'.join(lines)

    def __contains__(self, name):
        return name in self.parameters

    def __getitem__(self, name: str) -> Parameter:
        return self.parameters[name]

    def __iter__(self):
        return iter(self.parameters.values())

    def __len__(self):
        return len(self.parameters)
