"""Route Groups - Declarative builder for nested HTTP route groups.

Describe a tree of groups (path prefix, before/after middleware, error
catchers) and handler registrations, then flatten it into a list of fully
resolved routes for an HTTP dispatcher to bind.

Public exports:
    - ``Group``: route group builder
    - ``Route``: flattened output route
    - ``Handler`` / ``RespondsTo`` / ``Around``: handler contract
    - the exception taxonomy from ``route_groups.exceptions``

Example::

    from route_groups import Group

    root = Group()
    root.before(load_session)
    root.group("/admin", lambda g: g.before(require_admin).get("/stats", stats))
    root.get("/", home).catch(render_error)

    for route in root.collect_routes():
        dispatcher.bind(route.methods, route.path, route.handlers)
"""

__version__ = "0.1.0"

from .core import Around, Group, GroupItem, Handler, HandlerItem, RespondsTo, Route
from .exceptions import (
    CompositionError,
    HandlerCannotBeGroup,
    InvalidCatch,
    InvalidHandlers,
    InvalidHandlerSpecification,
    InvalidMethod,
    InvalidMethods,
    InvalidPath,
    RouteGroupError,
)

__all__ = [
    "Around",
    "Group",
    "GroupItem",
    "Handler",
    "HandlerItem",
    "RespondsTo",
    "Route",
    "RouteGroupError",
    "InvalidPath",
    "InvalidMethods",
    "InvalidMethod",
    "InvalidHandlers",
    "InvalidHandlerSpecification",
    "HandlerCannotBeGroup",
    "InvalidCatch",
    "CompositionError",
]
