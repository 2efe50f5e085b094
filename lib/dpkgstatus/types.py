""" Exceptions raised while parsing the dpkg status database """

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

from typing import Optional


class ParseError(Exception):
    """Indicates that a field of a dpkg status paragraph could not be converted"""

    is_user_error = True

    def __init__(self, field, value, line_number=None):
        # type: (str, str, Optional[int]) -> None
        self.field = field
        self.value = value
        self.line_number = line_number
        super().__init__(field, value, line_number)

    def __str__(self):
        # type: () -> str
        msg = 'Invalid value for field "{field}": "{value}"'.format(
            field=self.field,
            value=self.value.replace('\n', '\\n'),
        )
        if self.line_number is not None:
            msg += ' (in paragraph starting on line {no})'.format(no=self.line_number)
        return msg

    def with_line_number(self, line_number):
        # type: (int) -> ParseError
        return ParseError(self.field, self.value, line_number=line_number)
