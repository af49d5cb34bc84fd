"""Pytest configuration and shared fixtures."""

import pytest

from cmdparams import CommandLineProcessor
from cmdparams import ParameterType


@pytest.fixture
def processor():
    """Processor with one parameter of each type."""
    processor = CommandLineProcessor('prog')
    processor.add_parameter('force', ParameterType.FLAG, ['-f', '--force'])
    processor.add_parameter('count', ParameterType.UINTEGER, ['-n', '--count'])
    processor.add_parameter('out', ParameterType.PATH, ['-o', '--out'])
    return processor
