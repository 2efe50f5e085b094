""" Typed records for packages listed in the dpkg status database

A :class:`PackageRecord` is built from the raw fields of one paragraph:

    >>> record = PackageRecord.from_fields({
    ...     'Package': 'netbase',
    ...     'Installed-Size': '44',
    ...     'Conffiles': '',
    ... })
    >>> record.package, record.installed_size, record.version
    ('netbase', 44, '')
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

import collections
import re
from typing import Any, Callable, Dict, Mapping, Tuple

from dpkgstatus.types import ParseError


_RE_UNSIGNED_INTEGER = re.compile(r'[0-9]+')


def _as_str(field, value):
    # type: (str, str) -> str
    return value


def _as_installed_size(field, value):
    # type: (str, str) -> int
    # int() alone would also accept "+5", " 5" and "1_000"
    if not _RE_UNSIGNED_INTEGER.fullmatch(value):
        raise ParseError(field, value)
    try:
        return int(value)
    except ValueError:
        # Digit strings beyond the interpreter's int conversion limit
        raise ParseError(field, value) from None


# Field name (exact case) -> (record attribute, converter)
_FIELD_TABLE = {
    'Package': ('package', _as_str),
    'Version': ('version', _as_str),
    'Section': ('section', _as_str),
    'Installed-Size': ('installed_size', _as_installed_size),
    'Maintainer': ('maintainer', _as_str),
    'Status': ('status', _as_str),
    'Source': ('source', _as_str),
    'Architecture': ('architecture', _as_str),
    'Multi-Arch': ('multi_arch', _as_str),
    'Depends': ('depends', _as_str),
    'Pre-Depends': ('pre_depends', _as_str),
    'Description': ('description', _as_str),
    'Homepage': ('homepage', _as_str),
    'Priority': ('priority', _as_str),
}  # type: Dict[str, Tuple[str, Callable[[str, str], Any]]]

_RECORD_ATTRIBUTES = [attr for attr, _ in _FIELD_TABLE.values()]


class PackageRecord(collections.namedtuple('PackageRecord',
                                           _RECORD_ATTRIBUTES,
                                           defaults=tuple(0 if a == 'installed_size' else ''
                                                          for a in _RECORD_ATTRIBUTES)
                                           )):
    """One package entry from the dpkg status database

    Fields missing from the paragraph are "" (or 0 for ``installed_size``).
    Records are immutable; use ``_replace`` to derive a modified copy.
    """

    __slots__ = ()

    @classmethod
    def from_fields(cls, fields):
        # type: (Mapping[str, str]) -> PackageRecord
        """Build a record from the raw fields of a single paragraph

        Unknown fields are ignored.  Raises :class:`ParseError` when
        Installed-Size is present but not a non-negative base-10 integer.
        """
        kwargs = {}
        for field, value in fields.items():
            try:
                attr, converter = _FIELD_TABLE[field]
            except KeyError:
                continue
            kwargs[attr] = converter(field, value)
        return cls(**kwargs)

    @staticmethod
    def known_fields():
        # type: () -> Tuple[str, ...]
        """The field names that are mapped onto record attributes"""
        return tuple(_FIELD_TABLE)
