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

__version__ = '0.9.0'

from wsdlkit.wsdl import Wsdl

from wsdlkit.wsdl.strategy import ComplexTypeStrategyBase
from wsdlkit.wsdl.strategy import AnyType
from wsdlkit.wsdl.strategy import DefaultComplexType
from wsdlkit.wsdl.strategy import ArrayOfTypeSequence
from wsdlkit.wsdl.strategy import ArrayOfTypeComplex
from wsdlkit.wsdl.strategy import Composite

from wsdlkit.introspect import ClassIntrospector
from wsdlkit.introspect import FieldInfo

from wsdlkit.error import WsdlError
from wsdlkit.error import ConstructionError
from wsdlkit.error import ValidationError
from wsdlkit.error import InvalidArgumentError
from wsdlkit.error import StrategyError
