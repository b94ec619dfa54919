#
# wsdlkit - Copyright (C) Wsdlkit contributors.
#
# This library is free software; you can redistribute it and/or
# modify it under the terms of the GNU Lesser General Public
# License as published by the Free Software Foundation; either
# version 2.1 of the License, or (at your option) any later version.
#
# This library is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this library; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301
#

"""The ``wsdlkit.util`` package contains helpers that are not specific to a
single part of the Wsdl document."""

import logging
logger = logging.getLogger(__name__)


def to_attr_value(value):
    """Converts a python scalar to the string form used in xml attributes."""

    if isinstance(value, bool):
        return 'true' if value else 'false'

    if isinstance(value, bytes):
        return value.decode('utf8')

    return str(value)


def normalize_newlines(s):
    return s.replace("\r\n", "\n").replace("\r", "\n")
