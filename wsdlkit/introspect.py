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

"""The ``wsdlkit.introspect`` module contains the structural introspection
facility used by :class:`wsdlkit.wsdl.strategy.DefaultComplexType` to discover
the fields of a named type.

Any callable that takes a type name and returns either a dict of field name to
type name pairs or an iterable of :class:`FieldInfo` instances can be used in
place of :class:`ClassIntrospector`.
"""

import types
import typing
import inspect
import logging
logger = logging.getLogger(__name__)

from collections import namedtuple
from collections import abc
from decimal import Decimal
from importlib import import_module

from wsdlkit.const import ARRAY_MARKER, NS_SEPARATOR
from wsdlkit.error import InvalidArgumentError
from wsdlkit.util.cdict import cdict


FieldInfo = namedtuple('FieldInfo', 'name type_name nillable', defaults=(False,))

_builtin_type_names = cdict({
    object: None,
    type(None): 'void',
    str: 'string',
    bytes: 'string',
    bool: 'boolean',
    int: 'int',
    float: 'float',
    Decimal: 'double',
    dict: 'object',
    list: 'array',
    tuple: 'array',
    set: 'array',
    frozenset: 'array',
})

_sequence_origins = (list, tuple, set, frozenset, abc.Sequence,
              abc.MutableSequence, abc.Set, abc.MutableSet, abc.Iterable,
              abc.Collection)

_mapping_origins = (dict, abc.Mapping, abc.MutableMapping)

_union_origins = tuple(t for t in (typing.Union,
                                   getattr(types, 'UnionType', None)) if t)

_missing = object()


def iter_fields(fields):
    """Normalizes what an introspector returns to a list of FieldInfo."""

    if isinstance(fields, abc.Mapping):
        return [FieldInfo(k, v) for k, v in fields.items()]

    retval = []
    for f in fields:
        if isinstance(f, FieldInfo):
            retval.append(f)
        else:
            retval.append(FieldInfo(*f))

    return retval


class ClassIntrospector(object):
    """Looks up python classes by type name and derives their fields from
    their annotations.

    >>> introspector = ClassIntrospector()
    >>> @introspector.register
    ... class Point(object):
    ...     x: int
    ...     y: int
    ...
    >>> introspector.get_fields('Point')
    [FieldInfo(name='x', type_name='int', nillable=False), FieldInfo(name='y', type_name='int', nillable=False)]

    Names that are not registered are imported as dotted paths, e.g.
    ``'myapp.models.Point'`` or ``'myapp.models:Point'``.
    """

    def __init__(self, classes=()):
        self.registry = {}
        self.names = {}

        for cls in classes:
            self.register(cls)

    def register(self, cls, name=None):
        """Registers a class under the given name, or under its ``__name__``.
        Returns the class so that it can be used as a class decorator."""

        if name is None:
            name = cls.__name__

        self.registry[name] = cls
        self.names.setdefault(cls, name)

        logger.debug("Registered %r as %r", cls, name)

        return cls

    def get_name(self, cls):
        """Returns the type name of the given class, registering it if it's
        not known yet."""

        name = self.names.get(cls, None)
        if name is not None:
            return name

        name = cls.__name__
        if name in self.registry:
            name = "%s.%s" % (cls.__module__, cls.__qualname__)

        self.register(cls, name)
        return name

    def resolve(self, type_name):
        """Returns the class for the given type name."""

        cls = self.registry.get(type_name, None)
        if cls is not None:
            return cls

        path = type_name.lstrip(NS_SEPARATOR).replace(NS_SEPARATOR, '.')
        if ':' in path:
            module_name, attr = path.split(':', 1)
        elif '.' in path:
            module_name, attr = path.rsplit('.', 1)
        else:
            raise InvalidArgumentError("Cannot find a class for type %r."
                                                                  % type_name)

        try:
            retval = import_module(module_name)
            for part in attr.split('.'):
                retval = getattr(retval, part)

        except (ImportError, AttributeError) as e:
            raise InvalidArgumentError("Cannot find a class for type %r: %s"
                                                             % (type_name, e))

        if not isinstance(retval, type):
            raise InvalidArgumentError("%r does not name a class, it's %r."
                                                         % (type_name, retval))

        self.register(retval, type_name)

        return retval

    def get_type_name(self, hint):
        """Returns a (type_name, nillable) tuple for the given annotation."""

        if hint is typing.Any:
            return 'mixed', False

        if isinstance(hint, str):
            return hint, False

        if isinstance(hint, typing.ForwardRef):
            return hint.__forward_arg__, False

        origin = typing.get_origin(hint)
        args = typing.get_args(hint)

        if origin is not None and origin in _union_origins:
            members = [a for a in args if a is not type(None)]
            nillable = len(members) < len(args)
            if len(members) == 1:
                type_name, _ = self.get_type_name(members[0])
                return type_name, nillable

            return 'mixed', nillable

        if origin is not None and origin in _sequence_origins:
            if len(args) == 0 or args[0] is Ellipsis:
                return 'array', False

            type_name, _ = self.get_type_name(args[0])
            return type_name + ARRAY_MARKER, False

        if origin is not None and origin in _mapping_origins:
            return 'object', False

        if origin is not None:
            hint = origin

        if not isinstance(hint, type):
            return 'mixed', False

        type_name = _builtin_type_names[hint]
        if type_name is not None:
            return type_name, False

        return self.get_name(hint), False

    def _get_hints(self, cls):
        try:
            return typing.get_type_hints(cls)

        except (NameError, TypeError) as e:
            logger.debug("Falling back to raw annotations of %r: %r", cls, e)

            retval = {}
            for c in reversed(cls.__mro__):
                retval.update(inspect.get_annotations(c))
            return retval

    def get_fields(self, type_name):
        """Returns the list of :class:`FieldInfo` for the given type name."""

        cls = self.resolve(type_name)

        retval = []
        for k, hint in self._get_hints(cls).items():
            if k.startswith('_'):
                continue

            if hint is typing.ClassVar or \
                                      typing.get_origin(hint) is typing.ClassVar:
                continue

            field_type, nillable = self.get_type_name(hint)
            if getattr(cls, k, _missing) is None:
                nillable = True

            retval.append(FieldInfo(k, field_type, nillable))

        return retval

    __call__ = get_fields
