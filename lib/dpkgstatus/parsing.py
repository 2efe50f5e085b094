# -*- coding: utf-8 -*- vim: fileencoding=utf-8 :

""" Parser for the dpkg status database

The status database (usually ``/var/lib/dpkg/status``) is a deb822 file
with one paragraph per known package.  The :class:`Parser` reads such a
file and turns every paragraph into a :class:`PackageRecord`::

    >>> import io
    >>> status = io.StringIO('''\\
    ... Package: netbase
    ... Installed-Size: 44
    ... Description: Basic TCP/IP networking system
    ...  This package provides the necessary infrastructure.
    ...
    ... Package: libedit2
    ... Installed-Size: 277
    ... ''')
    >>> [(p.package, p.installed_size) for p in Parser(status).parse()]
    [('netbase', 44), ('libedit2', 277)]

The parser never closes the stream it was given and reads it exactly once.

Continuation lines are appended to the value of the field they follow,
separated by a newline and with their leading whitespace intact.  This
mirrors how the value is written in the file (minus the field name)::

    >>> status.seek(0)
    0
    >>> next(iter_paragraphs(status))['Description']
    'Basic TCP/IP networking system\\n This package provides the necessary infrastructure.'

Error handling
--------------

The only conversion that can fail is that of the Installed-Size field.  By
default (``strict=True``) a malformed value aborts the parse with a
:class:`ParseError`.  With ``strict=False`` the offending paragraph is
skipped and a warning is logged instead.

Lines that are neither field lines nor continuation lines are never
rejected; they are treated as continuation lines.
"""

# Copyright (C) 2026 The dpkgstatus developers
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA 02110-1301 USA

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from dpkgstatus.package import PackageRecord
from dpkgstatus.tokens import as_text_lines, split_line
from dpkgstatus.types import ParseError


logger = logging.getLogger(__name__)


def _iter_numbered_paragraphs(sequence):
    # type: (Iterable[Union[str, bytes]]) -> Iterator[Tuple[int, Dict[str, str]]]
    fields = {}  # type: Dict[str, str]
    last_key = None  # type: Optional[str]
    start_no = 0

    for no, line in enumerate(as_text_lines(sequence), start=1):
        key, value = split_line(line)

        if key:
            if not fields:
                start_no = no
            # Whitespace around the value on the field line is insignificant
            fields[key] = value.strip()
            last_key = key
            continue

        if not value:
            # Blank lines terminate paragraphs; runs of them collapse
            if fields:
                yield start_no, fields
                fields = {}
                last_key = None
            continue

        if not value[0].isspace():
            logger.warning('Line %d is neither a field nor a continuation line: %s',
                           no, value)

        if last_key is None:
            logger.debug('Discarding continuation line %d without a preceding field', no)
            continue

        fields[last_key] += '\n' + value

    if fields:
        yield start_no, fields


def iter_paragraphs(sequence):
    # type: (Iterable[Union[str, bytes]]) -> Iterator[Dict[str, str]]
    """Iterate over the paragraphs of a deb822 stream as field -> value dicts

    :param sequence: An iterable over lines of str or bytes (an open file for
      reading will do).  Trailing newlines are optional.

    Field names keep the case used in the input.  If a field appears more
    than once in a paragraph, the last value wins.  Paragraphs without any
    fields are never emitted.
    """
    for _, fields in _iter_numbered_paragraphs(sequence):
        yield fields


class Parser:
    """Parses a dpkg status stream into PackageRecords

    The stream is only consumed when parse() or iter_packages() is called.
    The caller remains responsible for closing it.
    """

    def __init__(self,
                 sequence,  # type: Iterable[Union[str, bytes]]
                 *,
                 strict=True,  # type: bool
                 ):
        # type: (...) -> None
        """Initializer.

        Args:
          sequence: An iterable over the lines of the status file (str or
              bytes, with or without trailing newlines).
          strict: Whether a field that cannot be converted aborts the whole
              parse (the default) or only causes the paragraph to be skipped
              with a warning.
        """
        self._sequence = sequence
        self.strict = strict

    def _parse_error(self, error):
        # type: (ParseError) -> None
        if self.strict:
            raise error
        logger.warning('Skipping paragraph: %s', error)

    def iter_packages(self):
        # type: () -> Iterator[PackageRecord]
        """Lazily yield a PackageRecord for each paragraph in input order"""
        for start_no, fields in _iter_numbered_paragraphs(self._sequence):
            try:
                record = PackageRecord.from_fields(fields)
            except ParseError as e:
                self._parse_error(e.with_line_number(start_no))
                continue
            yield record

    def __iter__(self):
        # type: () -> Iterator[PackageRecord]
        return self.iter_packages()

    def parse(self):
        # type: () -> List[PackageRecord]
        """Read the entire stream and return all records"""
        return list(self.iter_packages())


def parse_status_file(sequence,  # type: Iterable[Union[str, bytes]]
                      *,
                      strict=True,  # type: bool
                      ):
    # type: (...) -> List[PackageRecord]
    """Parse a dpkg status file into a list of PackageRecords

    :param sequence: An iterable over lines of str or bytes (an open file for
      reading will do).
    :param strict: If True (the default), a ParseError is raised when a field
      cannot be converted (e.g. a non-numeric Installed-Size).  If False, the
      paragraph is skipped and a warning is logged.
    """
    return Parser(sequence, strict=strict).parse()
