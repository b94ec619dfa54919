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

"""The ``wsdlkit.wsdl.strategy`` package contains the strategies that decide
how non-primitive types are emitted into the schema of a Wsdl document.

Custom strategies subclass :class:`ComplexTypeStrategyBase` and implement
``add_complex_type``.
"""

from wsdlkit.wsdl.strategy._base import ComplexTypeStrategyBase
from wsdlkit.wsdl.strategy.any_type import AnyType
from wsdlkit.wsdl.strategy.default import DefaultComplexType
from wsdlkit.wsdl.strategy.array import ArrayOfTypeSequence
from wsdlkit.wsdl.strategy.array import ArrayOfTypeComplex
from wsdlkit.wsdl.strategy.composite import Composite
