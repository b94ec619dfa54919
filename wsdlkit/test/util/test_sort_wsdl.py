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


import io
import logging
logging.basicConfig(level=logging.DEBUG)

import unittest

from lxml import etree

from wsdlkit.const.xml import WSDL11, WSDL11_SOAP, XSD
from wsdlkit.util.sort_wsdl import main
from wsdlkit.util.sort_wsdl import sort_wsdl
from wsdlkit.wsdl import Wsdl


def _build_unsorted_wsdl():
    wsdl = Wsdl('MyService', 'urn:my')

    binding = wsdl.add_binding('B', 'tns:P')
    wsdl.add_binding_operation(binding, 'zeta', {'use': 'literal'})
    wsdl.add_binding_operation(binding, 'alpha', {'use': 'literal'})
    wsdl.add_soap_binding(binding)

    wsdl.add_service('S', 'P', 'tns:B', 'http://localhost/')
    wsdl.add_message('zMessage', {'p': 'xsd:int'})
    wsdl.add_message('aMessage', {'p': 'xsd:int'})

    port_type = wsdl.add_port_type('P')
    wsdl.add_port_operation(port_type, 'zeta', 'tns:zMessage')
    wsdl.add_port_operation(port_type, 'alpha', 'tns:aMessage')

    wsdl.add_element({'name': 'Zed'})
    wsdl.get_schema().insert(0, etree.Element(XSD('complexType'), name='Aye'))

    return wsdl


class TestSortWsdl(unittest.TestCase):
    def test_sort(self):
        wsdl = _build_unsorted_wsdl()
        tree = sort_wsdl(etree.ElementTree(etree.fromstring(
                                                wsdl.to_xml().encode('utf8'))))
        root = tree.getroot()

        self.assertEqual([(e.tag, e.get('name')) for e in root], [
            (WSDL11('types'), None),
            (WSDL11('message'), 'aMessage'),
            (WSDL11('message'), 'zMessage'),
            (WSDL11('service'), 'S'),
            (WSDL11('portType'), 'P'),
            (WSDL11('binding'), 'B'),
        ])

        binding = root[-1]
        self.assertEqual(binding[0].tag, WSDL11_SOAP('binding'))
        self.assertEqual([e.get('name') for e in binding[1:]],
                                                             ['alpha', 'zeta'])

        schema = root[0][0]
        self.assertEqual([e.tag for e in schema],
                                        [XSD('element'), XSD('complexType')])

    def test_main(self):
        wsdl = _build_unsorted_wsdl()

        stdin = io.BytesIO(wsdl.to_xml().encode('utf8'))
        stdout = io.BytesIO()

        self.assertEqual(main(stdin=stdin, stdout=stdout), 0)

        root = etree.fromstring(stdout.getvalue())
        self.assertEqual(root[0].tag, WSDL11('types'))

    def test_main_invalid_input(self):
        stdout = io.BytesIO()
        self.assertEqual(main(stdin=io.BytesIO(b'<not xml'), stdout=stdout), 1)
        self.assertEqual(stdout.getvalue(), b'')


if __name__ == '__main__':
    unittest.main()
