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

"""The ``wsdlkit.wsdl.wsdl11`` module contains :class:`Wsdl`, a builder for
Wsdl 1.1 documents. The standard is available here: http://www.w3.org/TR/wsdl
"""

import re
import sys
import logging
logger = logging.getLogger(__name__)

from copy import deepcopy
from collections.abc import Mapping

from xml.sax.saxutils import escape

from lxml import etree

from wsdlkit.const import DEFAULT_BINDING_STYLE, DEFAULT_SOAP_TRANSPORT
from wsdlkit.const.xml import XSD, WSDL11, WSDL11_SOAP, PREF_TNS
from wsdlkit.const.xml import get_nsmap
from wsdlkit.error import ConstructionError, InvalidArgumentError, \
    StrategyError, ValidationError
from wsdlkit.evmgr import EventManager
from wsdlkit.util import to_attr_value, normalize_newlines
from wsdlkit.wsdl.element import build_element
from wsdlkit.wsdl.element import get_attr_name
from wsdlkit.wsdl.types import get_primitive_type
from wsdlkit.wsdl.types import is_primitive
from wsdlkit.wsdl.types import translate_type
from wsdlkit.wsdl.strategy import DefaultComplexType


def _is_nonempty_string(s):
    return isinstance(s, str) and len(s.strip()) > 0


def _escape_text(s):
    return escape(s).encode('utf8')


def _escape_attr(s):
    return escape(s, {'"': '&quot;'}).encode('utf8')


def _set_attrs(element, attrs):
    for k, v in attrs.items():
        element.set(get_attr_name(k, element.nsmap), to_attr_value(v))


class Wsdl(object):
    """Builds a Wsdl 1.1 document in memory.

    The builder methods append nodes to the document in call order and return
    the new node so that children or documentation can be attached to it
    later. A Wsdl instance must not be mutated from more than one thread
    without external locking.

    :param name: Name of the web service being described.
    :param uri: Target namespace of the document, usually the uri where the
        wsdl will be available.
    :param strategy: The complex type strategy. Defaults to a new
        :class:`wsdlkit.wsdl.strategy.DefaultComplexType` instance.
    :param class_map: A dict of source type name to QName pairs that override
        :func:`translate_type`.

    Supported events are documented in :class:`wsdlkit.evmgr.EventManager`.
    """

    def __init__(self, name, uri, strategy=None, class_map=None):
        self.name = name
        self._uri = uri
        self._class_map = dict(class_map or {})
        self._included_types = {}

        self._root = None
        self._schema = None
        self._strategy = None

        self.event_manager = EventManager(self)

        try:
            self._root = etree.Element(WSDL11('definitions'),
                                                          nsmap=get_nsmap(uri))
            self._root.set('name', name)
            self._root.set('targetNamespace', uri)

        except (TypeError, ValueError) as e:
            raise ConstructionError("Unable to create the Wsdl document for "
                                "name=%r, uri=%r: %s" % (name, uri, e))

        self._dom = self._root.getroottree()

        if strategy is None:
            strategy = DefaultComplexType()

        self.set_complex_type_strategy(strategy)

    @property
    def uri(self):
        return self._uri

    def get_class_map(self):
        """Returns the map of source type names to wsdl QNames."""

        return self._class_map

    def set_class_map(self, class_map):
        self._class_map = dict(class_map or {})
        return self

    def set_uri(self, uri):
        """Sets a new target namespace for this Wsdl.

        The document is serialized, every occurrence of the old uri is
        replaced with the new one and the result is parsed again. This also
        rewrites the old uri where it appears in documentation texts or in
        custom attribute values. Nodes returned by earlier builder calls
        belong to the old tree afterwards.
        """

        old_uri = self._uri
        if uri == old_uri:
            return self

        schema_path = None
        if self._schema is not None:
            schema_path = self._dom.getelementpath(self._schema)

        # attribute values and text nodes are escaped differently
        replacements = {
            _escape_attr(old_uri): _escape_attr(uri),
            _escape_text(old_uri): _escape_text(uri),
        }
        pattern = b'|'.join(re.escape(k) for k in
                                  sorted(replacements, key=len, reverse=True))

        xml = etree.tostring(self._dom, xml_declaration=True, encoding='UTF-8')
        xml = re.sub(pattern, lambda m: replacements[m.group(0)], xml)

        try:
            root = etree.fromstring(xml)

        except etree.XMLSyntaxError as e:
            raise ConstructionError("Unable to reparse the Wsdl document "
                                    "after changing uri to %r: %s" % (uri, e))

        if root.get('targetNamespace') != uri:
            raise ConstructionError("Unable to change the target namespace "
                           "of the Wsdl document from %r to %r: got %r" %
                                   (old_uri, uri, root.get('targetNamespace')))

        self._root = root
        self._dom = self._root.getroottree()
        self._uri = uri

        if schema_path is not None:
            self._schema = self._dom.find(schema_path)

        logger.debug("Changed target namespace from %r to %r", old_uri, uri)

        self.event_manager.fire_event('uri_changed', self, old_uri, uri)

        return self

    def set_complex_type_strategy(self, strategy):
        """Sets a strategy for complex type detection and handling."""

        if not (callable(getattr(strategy, 'set_context', None)) and
                        callable(getattr(strategy, 'add_complex_type', None))):
            raise InvalidArgumentError("%r is not a complex type strategy."
                                                                   % strategy)

        self._strategy = strategy
        return self

    def get_complex_type_strategy(self):
        return self._strategy

    def add_message(self, name, parts):
        """Adds a ``message`` element to the Wsdl.

        :param name: Name of the message.
        :param parts: A dict of part name to either the part's xml schema type
            (e.g. ``{'x': 'xsd:int'}``) or a dict of attributes of the part
            (e.g. ``{'x': {'element': 'tns:X'}}``).
        :return: The new ``message`` node.
        """

        message = etree.SubElement(self._root, WSDL11('message'))
        message.set('name', name)

        for part_name, part_type in parts.items():
            part = etree.SubElement(message, WSDL11('part'))
            part.set('name', part_name)

            if isinstance(part_type, Mapping):
                _set_attrs(part, part_type)
            else:
                part.set('type', to_attr_value(part_type))

        return message

    def add_port_type(self, name):
        """Adds a ``portType`` element to the Wsdl and returns it."""

        port_type = etree.SubElement(self._root, WSDL11('portType'))
        port_type.set('name', name)

        return port_type

    def add_port_operation(self, port_type, name, input=False, output=False,
                                                                   fault=False):
        """Adds an ``operation`` element to a ``portType`` element.

        :param port_type: A node returned by :func:`add_port_type`.
        :param name: The operation name.
        :param input: Name of the input message, skipped when empty.
        :param output: Name of the output message, skipped when empty.
        :param fault: Name of the fault message, skipped when empty.
        :return: The new ``operation`` node.
        """

        operation = etree.SubElement(port_type, WSDL11('operation'))
        operation.set('name', name)

        for tag, message in (('input', input), ('output', output),
                                                             ('fault', fault)):
            if _is_nonempty_string(message):
                node = etree.SubElement(operation, WSDL11(tag))
                node.set('message', message)

        return operation

    def add_binding(self, name, port_type):
        """Adds a ``binding`` element to the Wsdl.

        :param name: Name of the binding.
        :param port_type: Name of the portType to bind.
        :return: The new ``binding`` node.
        """

        binding = etree.SubElement(self._root, WSDL11('binding'))
        binding.set('name', name)
        binding.set('type', port_type)

        return binding

    def add_binding_operation(self, binding, name, input=False, output=False,
                                                                   fault=False):
        """Adds an ``operation`` element to a ``binding`` element.

        :param binding: A node returned by :func:`add_binding`.
        :param name: The operation name.
        :param input: Attributes of the input's ``soap:body`` element, e.g.
            'use', 'namespace' and 'encodingStyle'. Skipped unless a dict.
        :param output: Attributes of the output's ``soap:body`` element.
        :param fault: Attributes of the ``soap:fault`` element. Its 'name'
            is also set on the enclosing ``fault`` element.
        :return: The new ``operation`` node.
        """

        operation = etree.SubElement(binding, WSDL11('operation'))
        operation.set('name', name)

        for tag, attrs in (('input', input), ('output', output)):
            if isinstance(attrs, Mapping):
                node = etree.SubElement(operation, WSDL11(tag))
                soap_body = etree.SubElement(node, WSDL11_SOAP('body'))
                _set_attrs(soap_body, attrs)

        if isinstance(fault, Mapping):
            node = etree.SubElement(operation, WSDL11('fault'))
            if fault.get('name', None) is not None:
                node.set('name', to_attr_value(fault['name']))

            soap_fault = etree.SubElement(node, WSDL11_SOAP('fault'))
            _set_attrs(soap_fault, fault)

        return operation

    def add_soap_binding(self, binding, style=DEFAULT_BINDING_STYLE,
                                             transport=DEFAULT_SOAP_TRANSPORT):
        """Adds a ``soap:binding`` element as the first child of a ``binding``
        element.

        :param binding: A node returned by :func:`add_binding`.
        :param style: Binding style, either "document" (the default) or "rpc".
        :param transport: Transport uri, defaults to http.
        :return: The new ``soap:binding`` node.
        """

        soap_binding = etree.Element(WSDL11_SOAP('binding'))
        soap_binding.set('style', style)
        soap_binding.set('transport', transport)

        binding.insert(0, soap_binding)

        return soap_binding

    def add_soap_operation(self, operation, soap_action):
        """Adds a ``soap:operation`` element as the first child of an
        operation node returned by :func:`add_binding_operation`."""

        soap_operation = etree.Element(WSDL11_SOAP('operation'))
        soap_operation.set('soapAction', soap_action)

        operation.insert(0, soap_operation)

        return soap_operation

    def add_service(self, name, port_name, binding, location):
        """Adds a ``service`` element with a single ``port`` to the Wsdl.

        :param name: Service name.
        :param port_name: Name of the port of the service.
        :param binding: Binding of the port.
        :param location: Soap address of the service.
        :return: The new ``service`` node.
        """

        service = etree.SubElement(self._root, WSDL11('service'))
        service.set('name', name)

        port = etree.SubElement(service, WSDL11('port'))
        port.set('name', port_name)
        port.set('binding', binding)

        soap_address = etree.SubElement(port, WSDL11_SOAP('address'))
        soap_address.set('location', location)

        return service

    def add_documentation(self, node, documentation):
        """Adds a ``documentation`` element as the first child of the given
        node, or of the root element when ``node`` is this Wsdl instance.

        :return: The new ``documentation`` node.
        """

        if node is self:
            node = self._root

        doc = etree.Element(WSDL11('documentation'))
        doc.text = normalize_newlines(documentation)

        node.insert(0, doc)

        return doc

    def add_types(self, types):
        """Imports xml schema types to the root of the Wsdl.

        :param types: An lxml ``ElementTree``, an element, a list of elements
            or an xml string. Nodes are copied, the argument is left intact.
        """

        if isinstance(types, (str, bytes)):
            types = etree.fromstring(types)

        if isinstance(types, etree._ElementTree):
            nodes = [types.getroot()]

        elif isinstance(types, etree._Element):
            nodes = [types]

        else:
            nodes = list(types)

        for node in nodes:
            logger.debug("Importing %r", node.tag)
            self._root.append(deepcopy(node))

    def add_type(self, type_name, wsdl_type):
        """Registers a complex type that is part of this Wsdl. Registering an
        already known type name is a no-op."""

        if not (type_name in self._included_types):
            self._included_types[type_name] = wsdl_type
            logger.debug("Registered type %r as %r", type_name, wsdl_type)

        return self

    def remove_type(self, type_name):
        """Forgets a registered complex type. Unknown type names are ignored.
        The schema definition of the type, if any, is not touched."""

        if self._included_types.pop(type_name, None) is not None:
            logger.debug("Unregistered type %r", type_name)

        return self

    def get_types(self):
        """Returns a dict of all currently registered complex types."""

        return self._included_types

    def get_schema(self):
        """Returns the ``xsd:schema`` node, creating it if needed."""

        if self._schema is None:
            self.add_schema_type_section()

        return self._schema

    def add_schema_type_section(self):
        """Makes sure that the ``types`` section and its schema exist."""

        if self._schema is None:
            types = etree.SubElement(self._root, WSDL11('types'))
            self._schema = etree.SubElement(types, XSD('schema'))
            self._schema.set('targetNamespace', self._uri)

        return self

    def to_xml(self, pretty_print=False):
        """Returns the Wsdl as an xml string."""

        return etree.tostring(self._dom, xml_declaration=True,
                        encoding='UTF-8', pretty_print=pretty_print) \
                                                                .decode('utf8')

    def to_document(self):
        """Returns the lxml ``ElementTree`` of the Wsdl."""

        return self._dom

    def dump(self, filename=None):
        """Writes the Wsdl to the given file, or to stdout when no file name
        is given.

        :return: True when writing to stdout, otherwise the number of bytes
            written.
        """

        xml = self.to_xml()
        if not filename:
            sys.stdout.write(xml)
            return True

        data = xml.encode('utf8')
        with open(filename, 'wb') as f:
            f.write(data)

        return len(data)

    def get_type(self, type_name):
        """Returns the xsd type for the given source type name. Non-primitive
        types are delegated to the current complex type strategy."""

        if is_primitive(type_name):
            return get_primitive_type(type_name)

        return self.add_complex_type(type_name)

    def translate_type(self, type_name):
        """Translates a source type name into the local part of a QName."""

        return translate_type(type_name, self._class_map)

    def add_complex_type(self, type_name):
        """Adds the schema definition of a complex type and returns its
        QName."""

        if type_name in self._included_types:
            return self._included_types[type_name]

        self.add_schema_type_section()

        strategy = self.get_complex_type_strategy()
        strategy.set_context(self)

        # delegates the detection of a complex type to the current strategy
        retval = strategy.add_complex_type(type_name)
        if not _is_nonempty_string(retval):
            raise StrategyError(strategy, type_name, retval)

        self.add_type(type_name, retval)

        self.event_manager.fire_event('complex_type_added', self, type_name,
                                                                       retval)

        return retval

    def add_element(self, element):
        """Adds an ``xsd:element`` represented as a dict to the schema. See
        :mod:`wsdlkit.wsdl.element` for the format.

        :return: The QName of the element, e.g. ``'tns:MyElement'``.
        """

        if not isinstance(element, Mapping):
            raise ValidationError(element,
                      "The element definition needs to be a dict, not %r.")

        name = element.get('name', None)
        if not _is_nonempty_string(name):
            raise ValidationError(element,
                      "The element definition %r needs a 'name' key.")

        element_xml = build_element(element, self._root.nsmap)
        self.get_schema().append(element_xml)

        return '%s:%s' % (PREF_TNS, name)
