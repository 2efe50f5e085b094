""" Line splitting for dpkg status files

Every line of a dpkg status file is one of three shapes:

 * a field line (``Key: value``), which starts a new field,
 * a continuation line, which starts with whitespace and extends the
   value of the previous field,
 * a blank line, which separates paragraphs.

:func:`split_line` reduces a line to a ``(key, value)`` pair that tells
these apart:

    >>> split_line("Package: netbase\\n")
    ('Package', ' netbase')
    >>> split_line(" /etc/rpc f0b6f6352bf886623adc04183120f83b\\n")
    ('', ' /etc/rpc f0b6f6352bf886623adc04183120f83b')
    >>> split_line("\\n")
    ('', '')
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

from typing import Iterable, Iterator, Tuple, Union


def _strip_line_terminator(line):
    # type: (str) -> str
    if line.endswith('\r\n'):
        return line[:-2]
    if line.endswith('\n'):
        return line[:-1]
    return line


def split_line(line):
    # type: (str) -> Tuple[str, str]
    """Split a single line into a (key, value) pair

    Blank lines give ``('', '')``.  Continuation lines give an empty key and
    the line itself (leading whitespace kept) as value.  Field lines give the
    text before the first colon as key and everything after the colon as
    value.  In all cases one trailing line terminator is dropped.

    Lines that are neither (no leading whitespace and no colon) are returned
    as if they were continuation lines; it is up to the caller to decide what
    to do with them.
    """
    line = _strip_line_terminator(line)
    if line == '':
        return '', ''
    if line[0].isspace():
        return '', line
    key, sep, value = line.partition(':')
    if not sep:
        return '', line
    return key, value


def as_text_lines(sequence):
    # type: (Iterable[Union[str, bytes]]) -> Iterator[str]
    """Iterate over lines as str, decoding bytes lines as UTF-8"""
    for line in sequence:
        if isinstance(line, bytes):
            line = line.decode('utf-8')
        yield line
