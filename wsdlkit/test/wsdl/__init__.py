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

from lxml import etree

from wsdlkit.const import xml as ns
from wsdlkit.wsdl import Wsdl

NS = {
    'wsdl': ns.NS_WSDL11,
    'soap': ns.NS_WSDL11_SOAP,
    'xsd': ns.NS_XSD,
}


def parse(wsdl):
    """Serializes the given Wsdl and parses it again."""

    return etree.fromstring(wsdl.to_xml().encode('utf8'))


def xpath(node, path):
    return node.xpath(path, namespaces=NS)


def build_calc_wsdl():
    wsdl = Wsdl('Calc', 'urn:calc')

    wsdl.add_message('addRequest', {'x': 'int', 'y': 'int'})
    port_type = wsdl.add_port_type('CalcPort')
    wsdl.add_port_operation(port_type, 'add', 'addRequest', 'addResponse')
    binding = wsdl.add_binding('CalcBinding', 'CalcPort')
    wsdl.add_soap_binding(binding)
    wsdl.add_service('CalcService', 'CalcPort', 'CalcBinding',
                                                             'http://host/calc')

    return wsdl
