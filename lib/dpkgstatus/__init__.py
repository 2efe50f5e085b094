""" Parse the dpkg status database into typed package records

    >>> from dpkgstatus import parse_status_file
    >>> with open('/var/lib/dpkg/status') as fd:    # doctest: +SKIP
    ...     packages = parse_status_file(fd)
"""

from dpkgstatus.package import PackageRecord
from dpkgstatus.parsing import Parser, iter_paragraphs, parse_status_file
from dpkgstatus.tokens import split_line
from dpkgstatus.types import ParseError

__all__ = [
    'PackageRecord',
    'ParseError',
    'Parser',
    'iter_paragraphs',
    'parse_status_file',
    'split_line',
]
