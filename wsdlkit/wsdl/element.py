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

"""The ``wsdlkit.wsdl.element`` module converts ``xsd:element`` definitions
given as (possibly nested) dicts to lxml elements.

Keys of the dict are attribute names, values their respective values. The
'sequence', 'all' and 'choice' keys must have a list of element dicts as their
value, which are added to a nested ``xsd:complexType``. Example: ::

    {'name': 'MyElement',
     'sequence': [
        {'name': 'myString', 'type': 'xsd:string'},
        {'name': 'myInteger', 'type': 'xsd:int'},
     ]}

becomes: ::

    <xsd:element name="MyElement">
      <xsd:complexType>
        <xsd:sequence>
          <xsd:element name="myString" type="xsd:string"/>
          <xsd:element name="myInteger" type="xsd:int"/>
        </xsd:sequence>
      </xsd:complexType>
    </xsd:element>
"""

import logging
logger = logging.getLogger(__name__)

from collections.abc import Mapping

from lxml import etree

from wsdlkit.const import COMPOSITOR_TAGS
from wsdlkit.const.xml import XSD, NSMAP
from wsdlkit.error import ValidationError
from wsdlkit.util import to_attr_value


def _is_sequence(value):
    return isinstance(value, (list, tuple))


def get_attr_name(key, nsmap=None):
    """Returns the lxml attribute name for the given key. Prefixed keys like
    'wsdl:arrayType' are converted to Clark notation using ``nsmap``."""

    if not isinstance(key, str):
        raise ValidationError(key, "Attribute names must be strings, not %r.")

    if not (':' in key) or key.startswith('{'):
        return key

    if nsmap is None:
        nsmap = NSMAP

    pref, local = key.split(':', 1)
    ns = nsmap.get(pref, None)
    if ns is None:
        raise ValidationError(key, "Unknown namespace prefix in attribute %r.")

    return "{%s}%s" % (ns, local)


def build_element(element, nsmap=None):
    """Parses an xsd:element represented as a dict into an lxml element.

    :param element: An xsd:element represented as a dict.
    :param nsmap: Prefix to namespace mapping used for prefixed attribute
        names. Defaults to the prefixes of a Wsdl document.
    :return: The ``xsd:element`` node, not attached to any tree.
    """

    if not isinstance(element, Mapping):
        raise ValidationError(element,
                  "The element definition needs to be a dict, not %r.")

    retval = etree.Element(XSD('element'))
    for key, value in element.items():
        if key in COMPOSITOR_TAGS:
            if not _is_sequence(value):
                logger.warning("Ignoring %r: the value of the %r key must be "
                               "a list of element definitions.", value, key)
                continue

            complex_type = etree.SubElement(retval, XSD('complexType'))
            if len(value) > 0:
                container = etree.SubElement(complex_type, XSD(key))
                for subelement in value:
                    container.append(build_element(subelement, nsmap))

        else:
            retval.set(get_attr_name(key, nsmap), to_attr_value(value))

    return retval
