import io

import pytest

from optscan import OptionParser, ParserConfig


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def parser(output):
    return OptionParser(ParserConfig(output=output))
