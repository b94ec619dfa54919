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

from wsdlkit.error import InvalidArgumentError
from wsdlkit.wsdl.strategy._base import ComplexTypeStrategyBase
from wsdlkit.wsdl.strategy.default import DefaultComplexType


def _get_strategy_instance(strategy):
    if isinstance(strategy, type):
        if not issubclass(strategy, ComplexTypeStrategyBase):
            raise InvalidArgumentError("%r is not a complex type strategy."
                                                                   % strategy)
        strategy = strategy()

    elif not isinstance(strategy, ComplexTypeStrategyBase):
        raise InvalidArgumentError("%r is not a complex type strategy."
                                                                   % strategy)

    return strategy


class Composite(ComplexTypeStrategyBase):
    """Routes complex types to different strategies by type name.

    :param type_map: A dict of type name to strategy pairs. Strategies can be
        given as instances or as classes.
    :param default_strategy: The strategy used for types not in ``type_map``.
    """

    def __init__(self, type_map=None, default_strategy=DefaultComplexType):
        super(Composite, self).__init__()

        self.type_map = {}
        if type_map is not None:
            for type_name, strategy in type_map.items():
                self.connect_type_to_strategy(type_name, strategy)

        self.default_strategy = default_strategy

    def connect_type_to_strategy(self, type_name, strategy):
        if not isinstance(type_name, str):
            raise InvalidArgumentError("Invalid type name %r given to the "
                                             "Composite strategy." % type_name)

        self.type_map[type_name] = strategy
        return self

    def get_default_strategy(self):
        self.default_strategy = _get_strategy_instance(self.default_strategy)
        return self.default_strategy

    def get_strategy_of_type(self, type_name):
        if type_name in self.type_map:
            strategy = _get_strategy_instance(self.type_map[type_name])
            self.type_map[type_name] = strategy

        else:
            strategy = self.get_default_strategy()

        return strategy

    def add_complex_type(self, type_name):
        context = self.get_context()
        if context is None:
            raise InvalidArgumentError("Cannot add complex type %r, no context "
                           "is set for this composite strategy." % type_name)

        strategy = self.get_strategy_of_type(type_name)
        logger.debug("Composite delegates %r to %r", type_name, strategy)

        strategy.set_context(context)
        return strategy.add_complex_type(type_name)
