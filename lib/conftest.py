import os.path
from typing import IO, Iterator, Text

import pytest


def find_test_file(filename):
    # type: (str) -> str
    """ find a test file that is located within the test suite """
    return os.path.join(os.path.dirname(__file__), 'dpkgstatus', 'tests', filename)


@pytest.fixture()
def status_file():
    # type: () -> Iterator[IO[Text]]
    # The parser never closes its input, so the fixture owns the file
    with open(find_test_file('test_status'), encoding='UTF-8') as fd:
        yield fd
