#!/usr/bin/python3

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

"""Tests for mapping paragraph fields onto PackageRecords"""

import pytest

from dpkgstatus.package import PackageRecord
from dpkgstatus.types import ParseError


ALL_FIELDS = {
    'Package': 'package',
    'Version': 'version',
    'Section': 'section',
    'Installed-Size': '123',
    'Maintainer': 'tadas',
    'Status': 'status',
    'Source': 'source',
    'Architecture': 'amd64',
    'Multi-Arch': 'same',
    'Depends': 'depends',
    'Pre-Depends': 'predepends',
    'Description': 'desc',
    'Homepage': 'home',
    'Priority': 'priority',
}


class TestPackageRecord:

    def test_from_fields(self):
        # type: () -> None
        pkg = PackageRecord.from_fields(ALL_FIELDS)

        assert pkg.package == 'package'
        assert pkg.version == 'version'
        assert pkg.section == 'section'
        assert pkg.maintainer == 'tadas'
        assert pkg.status == 'status'
        assert pkg.source == 'source'
        assert pkg.architecture == 'amd64'
        assert pkg.multi_arch == 'same'
        assert pkg.depends == 'depends'
        assert pkg.pre_depends == 'predepends'
        assert pkg.description == 'desc'
        assert pkg.homepage == 'home'
        assert pkg.priority == 'priority'
        assert pkg.installed_size == 123

    def test_known_fields(self):
        # type: () -> None
        assert set(PackageRecord.known_fields()) == set(ALL_FIELDS)

    def test_missing_fields_get_zero_values(self):
        # type: () -> None
        pkg = PackageRecord.from_fields({'Package': 'netbase'})
        assert pkg.package == 'netbase'
        assert pkg.version == ''
        assert pkg.description == ''
        assert pkg.installed_size == 0
        assert PackageRecord.from_fields({}) == PackageRecord()

    def test_unknown_fields_are_ignored(self):
        # type: () -> None
        pkg = PackageRecord.from_fields({
            'Package': 'netbase',
            'Conffiles': '\n /etc/rpc f0b6f6352bf886623adc04183120f83b',
            'Original-Maintainer': "Marco d'Itri <md@linux.it>",
        })
        assert pkg == PackageRecord(package='netbase')

    def test_field_names_are_case_sensitive(self):
        # type: () -> None
        pkg = PackageRecord.from_fields({'package': 'netbase', 'installed-size': 'x'})
        assert pkg == PackageRecord()

    def test_values_are_copied_verbatim(self):
        # type: () -> None
        desc = 'BSD editline and history libraries\n .\n It slightly resembles GNU readline.'
        pkg = PackageRecord.from_fields({'Description': desc})
        assert pkg.description == desc

    def test_record_is_immutable(self):
        # type: () -> None
        pkg = PackageRecord.from_fields(ALL_FIELDS)
        with pytest.raises(AttributeError):
            pkg.package = 'other'  # type: ignore
        assert pkg._replace(package='other').package == 'other'
        assert pkg.package == 'package'

    # '9' * 5000 is beyond the int() digit limit of current interpreters
    @pytest.mark.parametrize('value', [
        'notanumber', '', '-1', '+5', '1_000', '12.5', ' 12', '12\n', '9' * 5000,
    ])
    def test_invalid_installed_size(self, value):
        # type: (str) -> None
        with pytest.raises(ParseError) as cm:
            PackageRecord.from_fields({'Package': 'foo', 'Installed-Size': value})
        assert cm.value.field == 'Installed-Size'
        assert cm.value.value == value
        assert cm.value.line_number is None
        assert cm.value.is_user_error

    def test_installed_size_leading_zeros(self):
        # type: () -> None
        assert PackageRecord.from_fields({'Installed-Size': '0044'}).installed_size == 44


class TestParseError:

    def test_str(self):
        # type: () -> None
        err = ParseError('Installed-Size', 'notanumber')
        assert str(err) == 'Invalid value for field "Installed-Size": "notanumber"'

    def test_str_with_line_number(self):
        # type: () -> None
        err = ParseError('Installed-Size', 'a\nb').with_line_number(7)
        assert err.line_number == 7
        assert str(err) == ('Invalid value for field "Installed-Size": "a\\nb"'
                            ' (in paragraph starting on line 7)')
