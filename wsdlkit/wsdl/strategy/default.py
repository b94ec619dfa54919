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

import logging
logger = logging.getLogger(__name__)

from lxml import etree

from wsdlkit.const.xml import XSD, PREF_TNS
from wsdlkit.introspect import ClassIntrospector, iter_fields
from wsdlkit.wsdl.strategy._base import ComplexTypeStrategyBase


class DefaultComplexType(ComplexTypeStrategyBase):
    """Emits an ``xsd:complexType`` with an ``xsd:all`` compositor that holds
    one ``xsd:element`` per field of the given type.

    :param introspector: A callable that returns the fields of a type name.
        See :mod:`wsdlkit.introspect`. Defaults to a fresh
        :class:`wsdlkit.introspect.ClassIntrospector`.
    """

    def __init__(self, introspector=None):
        super(DefaultComplexType, self).__init__()

        if introspector is None:
            introspector = ClassIntrospector()

        self.introspector = introspector

    def get_fields(self, type_name):
        return iter_fields(self.introspector(type_name))

    def add_complex_type(self, type_name):
        context = self.get_context()

        # the introspector raises for unknown types before anything is emitted
        fields = self.get_fields(type_name)

        soap_type_name = context.translate_type(type_name)
        soap_type = '%s:%s' % (PREF_TNS, soap_type_name)

        # register the type here to avoid infinite recursion
        context.add_type(type_name, soap_type)

        try:
            complex_type = etree.Element(XSD('complexType'))
            complex_type.set('name', soap_type_name)

            all_ = etree.SubElement(complex_type, XSD('all'))
            for field in fields:
                element = etree.SubElement(all_, XSD('element'))
                element.set('name', field.name)

                xsd_type = context.get_type(field.type_name)
                if xsd_type:
                    element.set('type', xsd_type)

                if field.nillable:
                    element.set('nillable', 'true')

        except Exception:
            # the type never made it to the schema
            context.remove_type(type_name)
            raise

        context.get_schema().append(complex_type)

        logger.debug("Added complex type %r as %r with %d field(s)",
                                          type_name, soap_type, len(fields))

        return soap_type
