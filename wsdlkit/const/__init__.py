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

"""The ``wsdlkit.const`` package contains default values used while building
Wsdl documents."""

from wsdlkit.const.xml import NS_SOAP_HTTP


DEFAULT_BINDING_STYLE = 'document'
"""Default ``style`` of the ``soap:binding`` element."""

DEFAULT_SOAP_TRANSPORT = NS_SOAP_HTTP
"""Default ``transport`` of the ``soap:binding`` element."""

ARRAY_PREFIX = 'ArrayOf'
"""The prefix for array wrapper types generated by the array strategies."""

ARRAY_ITEM_NAME = 'item'
"""The element name of array items in ``ArrayOf*`` sequence types."""

ARRAY_MARKER = '[]'
"""Suffix that marks a type name as an array of the preceding type."""

NS_SEPARATOR = '\\'
"""Namespace separator in source type names."""

COMPOSITOR_TAGS = ('sequence', 'all', 'choice')
"""Element descriptor keys that open a nested ``xsd:complexType``."""
