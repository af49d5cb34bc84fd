"""
Command line parameter processing.

cmdparams is a small library to declare typed command line parameters, parse
the program arguments against their aliases and query the resulting values.
The `--help` and `--version` parameters are built in and only set an abort
flag, leaving it to the program to decide whether to stop.
"""

from .core import middleware
from .core import IMiddleware
from .core import WrapperMiddleware
from .core import Parameter
from .core import CommandLineProcessor
from .errors import ParameterError
from .errors import MissingValueError
from .errors import InvalidValueError
from .values import ParameterType
from .values import ParameterValue
from .values import Unset
from .values import FlagSet
from .values import UIntegerValue
from .values import PathValue
from .values import UNSET
from .values import FLAG_SET
