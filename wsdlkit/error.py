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


"""The ``wsdlkit.error`` module contains the exceptions raised while building
Wsdl documents.

The ``CODE`` attributes follow the Soap faultcode convention: codes starting
with 'Server' indicate a bug in wsdlkit or in a complex type strategy, codes
starting with 'Client' indicate bad input from the caller.
"""


class WsdlError(RuntimeError):
    """Base class for all wsdlkit errors."""

    CODE = 'Server'

    def __init__(self, faultstring="", detail=None):
        super(WsdlError, self).__init__(faultstring)

        self.faultcode = self.CODE
        self.faultstring = faultstring
        self.detail = detail

    def __repr__(self):
        return "%s(%r, %r)" % (self.__class__.__name__, self.faultcode,
                                                               self.faultstring)


class ConstructionError(WsdlError):
    """Raised when the initial document skeleton can not be created."""

    CODE = 'Server.ConstructionError'

    def __init__(self, faultstring="Unable to create the Wsdl document.",
                                                                   detail=None):
        super(ConstructionError, self).__init__(faultstring, detail)


class ValidationError(WsdlError, ValueError):
    """Raised when an element descriptor is malformed."""

    CODE = 'Client.ValidationError'

    def __init__(self, obj, custom_msg='The value %r could not be validated.'):
        try:
            msg = custom_msg % (obj,)
        except TypeError:
            msg = custom_msg

        super(ValidationError, self).__init__(msg, detail=obj)


class InvalidArgumentError(WsdlError, ValueError):
    """Raised when a complex type strategy can not handle the given type."""

    CODE = 'Client.InvalidArgument'


class StrategyError(WsdlError):
    """Raised when a complex type strategy does not honor its contract."""

    CODE = 'Server.StrategyError'

    def __init__(self, strategy, type_name, retval):
        super(StrategyError, self).__init__(
            "Complex type strategy %r returned %r instead of a QName for "
            "type %r." % (strategy, retval, type_name), detail=type_name)

        self.strategy = strategy
        self.retval = retval
