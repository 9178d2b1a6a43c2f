"""Core runtime aggregator for Route Groups.

Exposes the tree model and the route collector from a single module.

Public API:
    - ``Group``: route group builder
    - ``collect_routes``: flatten a group tree into routes
    - ``Handler`` / ``RespondsTo`` / ``Around``: handler contract
    - ``GroupItem`` / ``HandlerItem`` / ``Route``: tree items and output

Importing this module performs only imports.
"""

from .collector import CATCHER_NAME, collect_routes
from .group import Group
from .handler import Around, Handler, RespondsTo, normalize_handler
from .items import GroupItem, HandlerItem, Route

__all__ = [
    "CATCHER_NAME",
    "Around",
    "Group",
    "GroupItem",
    "Handler",
    "HandlerItem",
    "RespondsTo",
    "Route",
    "collect_routes",
    "normalize_handler",
]
