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

"""Strategies that handle array type names like ``int[]`` or ``Foo[][]``."""

import logging
logger = logging.getLogger(__name__)

from lxml import etree

from wsdlkit.const import ARRAY_PREFIX, ARRAY_ITEM_NAME, ARRAY_MARKER
from wsdlkit.const.xml import XSD, WSDL11, PREF_TNS
from wsdlkit.error import InvalidArgumentError
from wsdlkit.wsdl.strategy.default import DefaultComplexType


def get_nested_count(type_name):
    return type_name.count(ARRAY_MARKER)


def get_singular_type(type_name):
    return type_name.replace(ARRAY_MARKER, '')


def _ucfirst(s):
    return s[:1].upper() + s[1:]


class ArrayOfTypeSequence(DefaultComplexType):
    """Turns ``T[]``, ``T[][]``, ... into ``ArrayOfT``, ``ArrayOfArrayOfT``,
    ... complex types, each holding a sequence of ``item`` elements of the
    next lower nesting level. Other types are handled like in
    :class:`DefaultComplexType`.
    """

    def add_complex_type(self, type_name):
        nested_count = get_nested_count(type_name)

        if nested_count > 0:
            singular_type = get_singular_type(type_name)

            for i in range(1, nested_count + 1):
                complex_type = self._get_type_by_level(singular_type, i)
                child_type = self._get_type_by_level(singular_type, i - 1)
                source_type = singular_type + ARRAY_MARKER * i

                self._add_sequence_type(complex_type, child_type, source_type)

            return complex_type

        soap_type = self.scan_registered_types(type_name)
        if soap_type is not None:
            return soap_type

        return super(ArrayOfTypeSequence, self).add_complex_type(type_name)

    def _get_type_by_level(self, singular_type, level):
        context = self.get_context()

        if level == 0:
            # not an array anymore
            return context.get_type(singular_type)

        return '%s:%s%s' % (PREF_TNS, ARRAY_PREFIX * level,
                                  _ucfirst(context.translate_type(singular_type)))

    def _add_sequence_type(self, array_type, child_type, source_type):
        context = self.get_context()

        if self.scan_registered_types(source_type) is not None:
            return

        # register the type here to avoid infinite recursion
        context.add_type(source_type, array_type)

        complex_type = etree.Element(XSD('complexType'))
        complex_type.set('name', array_type.split(':', 1)[-1])

        sequence = etree.SubElement(complex_type, XSD('sequence'))

        element = etree.SubElement(sequence, XSD('element'))
        element.set('name', ARRAY_ITEM_NAME)
        element.set('type', child_type)
        element.set('minOccurs', '0')
        element.set('maxOccurs', 'unbounded')

        context.get_schema().append(complex_type)

        logger.debug("Added sequence array type %r as %r", source_type,
                                                                    array_type)


class ArrayOfTypeComplex(DefaultComplexType):
    """Turns ``T[]`` into a Soap-encoded ``ArrayOfT`` type that restricts
    ``soap-enc:Array``. ``T`` itself is emitted like in
    :class:`DefaultComplexType`. Deeper nesting is not supported.
    """

    def add_complex_type(self, type_name):
        soap_type = self.scan_registered_types(type_name)
        if soap_type is not None:
            return soap_type

        singular_type = get_singular_type(type_name)
        nesting_level = get_nested_count(type_name)

        if nesting_level == 0:
            return super(ArrayOfTypeComplex, self) \
                                               .add_complex_type(singular_type)

        if nesting_level == 1:
            return self._add_array_of_complex_type(singular_type, type_name)

        raise InvalidArgumentError("ArrayOfTypeComplex cannot return nested "
                    "ArrayOfObject deeper than one level. Use array object "
                    "properties to return deep nested data.")

    def _add_array_of_complex_type(self, singular_type, type_name):
        context = self.get_context()

        xsd_type_name = ARRAY_PREFIX + context.translate_type(singular_type)
        xsd_type = '%s:%s' % (PREF_TNS, xsd_type_name)

        # the item type is processed first so that an unknown item type leaves
        # nothing behind.
        item_type = context.get_type(singular_type)

        context.add_type(type_name, xsd_type)

        complex_type = etree.Element(XSD('complexType'))
        complex_type.set('name', xsd_type_name)

        complex_content = etree.SubElement(complex_type, XSD('complexContent'))

        restriction = etree.SubElement(complex_content, XSD('restriction'))
        restriction.set('base', 'soap-enc:Array')

        attribute = etree.SubElement(restriction, XSD('attribute'))
        attribute.set('ref', 'soap-enc:arrayType')
        attribute.set(WSDL11('arrayType'), item_type + ARRAY_MARKER)

        context.get_schema().append(complex_type)

        logger.debug("Added soap-encoded array type %r as %r", type_name,
                                                                      xsd_type)

        return xsd_type
