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

"""The ``wsdlkit.const.xml`` module contains the namespace uris and prefixes
used in generated Wsdl documents."""

NS_XSD = 'http://www.w3.org/2001/XMLSchema'
NS_SOAP11_ENC = 'http://schemas.xmlsoap.org/soap/encoding/'
NS_WSDL11 = 'http://schemas.xmlsoap.org/wsdl/'
NS_WSDL11_SOAP = 'http://schemas.xmlsoap.org/wsdl/soap/'
NS_SOAP_HTTP = 'http://schemas.xmlsoap.org/soap/http'

PREF_TNS = 'tns'

# The target namespace is not known in advance, see ``get_nsmap``.
NSMAP = {
    None: NS_WSDL11,
    'soap': NS_WSDL11_SOAP,
    'xsd': NS_XSD,
    'soap-enc': NS_SOAP11_ENC,
    'wsdl': NS_WSDL11,
}


def get_nsmap(tns):
    """Returns the namespace map for the root ``definitions`` element of a
    Wsdl document whose target namespace is ``tns``."""

    retval = dict(NSMAP)
    retval[PREF_TNS] = tns
    return retval


def Tnswrap(ns):
    return lambda s: "{%s}%s" % (ns, s)

XSD = Tnswrap(NS_XSD)
SOAP11_ENC = Tnswrap(NS_SOAP11_ENC)
WSDL11 = Tnswrap(NS_WSDL11)
WSDL11_SOAP = Tnswrap(NS_WSDL11_SOAP)
