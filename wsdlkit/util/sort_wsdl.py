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

"""Quick hack to sort the wsdl. It's helpful when comparing the wsdl output
of two wsdlkit versions, or of two runs of the same generator.

Usage::

    sort_wsdl < service.wsdl > service.sorted.wsdl
"""

import sys
import logging
logger = logging.getLogger(__name__)

from lxml import etree

from wsdlkit.const.xml import NS_WSDL11, NS_XSD


def cache_order(l, ns):
    return dict([("{%s}%s" % (ns, a), l.index(a)) for a in l])

wsdl_order = ('documentation', 'types', 'message', 'service', 'portType',
                                                                      'binding')
wsdl_order = cache_order(wsdl_order, NS_WSDL11)

schema_order = ('import', 'element', 'simpleType', 'complexType')
schema_order = cache_order(schema_order, NS_XSD)

_sorted_parents = ("{%s}portType" % NS_WSDL11, "{%s}binding" % NS_WSDL11,
                                                   "{%s}operation" % NS_WSDL11)


def _wsdl_key(e):
    return wsdl_order.get(e.tag, len(wsdl_order)), e.attrib.get('name', '')


def _schema_key(e):
    return schema_order.get(e.tag, len(schema_order)), \
                                                   e.attrib.get('name', '\0')


def sort_wsdl(tree):
    """Sorts the given wsdl ``ElementTree`` in place and returns it."""

    root = tree.getroot()

    l0 = [e for e in root if isinstance(e.tag, str)]
    for e in l0:
        root.remove(e)

    l0.sort(key=_wsdl_key)
    for e in l0:
        root.append(e)

    for e in list(root.iter(*_sorted_parents)):
        # documentation and soap:* children keep their leading position.
        head = [p for p in e if not ('name' in p.attrib)]
        nodes = [p for p in e if 'name' in p.attrib]
        nodes.sort(key=lambda p: p.attrib['name'])

        for p in head + nodes:
            e.append(p)

    for type_node in root.iterfind("{%s}types" % NS_WSDL11):
        schemas = list(type_node)
        for s in schemas:
            type_node.remove(s)

        schemas.sort(key=lambda s: s.attrib.get("targetNamespace", ''))

        for s in schemas:
            type_node.append(s)

            nodes = [e for e in s if isinstance(e.tag, str)]
            for e in nodes:
                s.remove(e)

            nodes.sort(key=_schema_key)

            for e in nodes:
                s.append(e)

    return tree


def main(stdin=None, stdout=None):
    if stdin is None:
        stdin = sys.stdin.buffer
    if stdout is None:
        stdout = sys.stdout.buffer

    parser = etree.XMLParser(remove_blank_text=True)
    try:
        tree = etree.parse(stdin, parser=parser)
    except etree.XMLSyntaxError as e:
        logger.error("Could not parse input: %s", e)
        return 1

    sort_wsdl(tree)
    tree.write(stdout, encoding="UTF-8", xml_declaration=True)

    return 0


if __name__ == '__main__':
    sys.exit(main())
