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

"""The ``wsdlkit.wsdl.types`` module maps source type names to Xml Schema
QNames."""

import logging
logger = logging.getLogger(__name__)

from wsdlkit.const import NS_SEPARATOR


XSD_TYPES = {
    'string': 'xsd:string',
    'str': 'xsd:string',
    'long': 'xsd:long',
    'int': 'xsd:int',
    'integer': 'xsd:int',
    'float': 'xsd:float',
    'double': 'xsd:double',
    'boolean': 'xsd:boolean',
    'bool': 'xsd:boolean',
    'array': 'soap-enc:Array',
    'object': 'xsd:struct',
    'mixed': 'xsd:anyType',
    'void': '',
}
"""Primitive type names and their Xml Schema QNames. An empty QName means that
no type attribute should be emitted."""


def get_primitive_type(type_name):
    """Returns the QName of the given primitive type name, or None when the
    name does not denote a primitive. The lookup is case insensitive."""

    return XSD_TYPES.get(type_name.lower(), None)


def is_primitive(type_name):
    return type_name.lower() in XSD_TYPES


def translate_type(type_name, class_map=None):
    """Translates a source type name to the local part of a Wsdl QName.

    >>> translate_type('Foo\\\\Bar')
    'Foo.Bar'
    >>> translate_type('\\\\Foo')
    'Foo'
    >>> translate_type('Foo\\\\Bar', {'Foo\\\\Bar': 'Baz'})
    'Baz'
    """

    if class_map and type_name in class_map:
        return class_map[type_name]

    if type_name.startswith(NS_SEPARATOR):
        type_name = type_name[len(NS_SEPARATOR):]

    return type_name.replace(NS_SEPARATOR, '.')
