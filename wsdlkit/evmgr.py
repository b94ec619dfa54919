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


class EventManager(object):
    """A minimal event system that lets callers hook into the document
    building process.

    Handlers are kept in insertion order, and adding the same handler twice
    does not cause it to run twice.

    Events fired by :class:`wsdlkit.wsdl.Wsdl`:
        * complex_type_added: ``handler(wsdl, type_name, qname)``, called right
          after a complex type strategy returned a new QName.
        * uri_changed: ``handler(wsdl, old_uri, new_uri)``, called after
          :func:`wsdlkit.wsdl.Wsdl.set_uri` reparsed the document.
    """

    def __init__(self, parent, handlers={}):
        """Initializer for the ``EventManager`` instance.

        :param parent: The owner of this event manager.

        :param handlers: A dict of event name (string)/iterable of callables
        pairs. The dict is shallow-copied to the ``EventManager`` instance.
        """

        self.parent = parent
        self.handlers = {}
        for k, v in handlers.items():
            self.handlers[k] = dict.fromkeys(v)

    def add_listener(self, event_name, handler):
        """Register a handler for the given event name.

        :param event_name: The event identifier, indicated by the documentation.
        :param handler: A callable that receives the event arguments.
        """

        handlers = self.handlers.get(event_name, {})
        handlers[handler] = None
        self.handlers[event_name] = handlers

    def del_listener(self, event_name, handler=None):
        if handler is None:
            del self.handlers[event_name]
        else:
            del self.handlers[event_name][handler]

    def fire_event(self, event_name, ctx, *args, **kwargs):
        """Run all the handlers for a given event name.

        :param event_name: The event identifier, indicated by the documentation.
        :param ctx: The object the event is about, usually the Wsdl instance.
        """

        handlers = self.handlers.get(event_name, {})
        for handler in list(handlers):
            handler(ctx, *args, **kwargs)
