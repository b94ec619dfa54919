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


class ComplexTypeStrategyBase(object):
    """Base class for the strategies that turn a complex type name into
    schema markup.

    The :class:`wsdlkit.wsdl.Wsdl` instance calls :func:`set_context` right
    before every :func:`add_complex_type` call, so a strategy instance can be
    shared between documents as long as it doesn't keep any other per-document
    state. Strategies are not thread-safe.
    """

    def __init__(self):
        self.context = None

    def set_context(self, context):
        """Binds the strategy to a :class:`wsdlkit.wsdl.Wsdl` instance."""

        self.context = context

    def get_context(self):
        return self.context

    def scan_registered_types(self, type_name):
        """Returns the QName of an already registered type, or None."""

        context = self.get_context()
        if context is None:
            return None

        return context.get_types().get(type_name, None)

    def add_complex_type(self, type_name):
        """Emits the schema for the given type into the context's schema node
        and returns the QName to reference it with."""

        raise NotImplementedError()

    def __repr__(self):
        return "%s()" % self.__class__.__name__
