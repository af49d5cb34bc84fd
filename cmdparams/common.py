"""
This module contains common middleware definitions for things such as logging.
"""

import sys
import logging

from .core import IMiddleware
from .core import CommandLineProcessor
from .values import ParameterType


class LoggingMiddleware(IMiddleware):
    """
    Logging middleware.
    """

    def __init__(self, name: str = None, *, formatter: logging.Formatter = None,
                 handler: logging.Handler = None) -> None:
        """
        This middleware registers a few parameters that allow to automatically configure
        and control the logging output.

        The *name* argument is the name of the logger to configure. By default, the
        root logger is used.

        The *formatter* argument is an instance of `Formatter` that will be used.
        If omitted, it is automatically configured.

        The *handler* argument is an instance of a `Handler` that will be used for
        output. If omitted, it will log messages to stderr.
        """
        self.name = name
        self.formatter = formatter
        self.handler = handler
        self.level = None

    def configure(self, processor: CommandLineProcessor) -> None:
        """
        Register the middleware parameters.
        """
        processor.add_parameter('log_std', ParameterType.FLAG, ['--log-std'],
                                help='enable standard logging when logging to files')
        processor.add_parameter('log_file', ParameterType.PATH, ['--log-file'],
                                help='the log file to use')
        processor.add_parameter('quiet', ParameterType.FLAG, ['-q', '--quiet'],
                                help='suppress the output except warnings and errors')
        processor.add_parameter('verbose', ParameterType.FLAG, ['-v', '--verbose'],
                                help='enable additional debug output')

    def run(self, processor: CommandLineProcessor) -> None:
        """
        Run the middleware.
        """
        # verbose has precedence when both are given
        if processor.get_parameter_value('verbose'):
            level = logging.DEBUG
        elif processor.get_parameter_value('quiet'):
            level = logging.WARNING
        else:
            level = logging.INFO

        formatter = self.formatter or \
                logging.Formatter('%(asctime)-25s %(levelname)-10s %(name)-20s: %(message)s')
        log_file = processor.get_parameter_value('log_file')

        logger = logging.getLogger(self.name)

        if not log_file or processor.get_parameter_value('log_std'):
            handler = self.handler or logging.StreamHandler(sys.stderr)
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        if log_file:
            handler = logging.FileHandler(log_file.path)
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        logger.setLevel(level)
        self.level = level
