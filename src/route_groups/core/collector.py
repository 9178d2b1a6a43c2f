# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Route collection: flatten a group tree into a list of routes.

Composition
-----------
For a group ``G`` every route it yields is wrapped as::

    G.before  ++  route.handlers  ++  G.after  ++  G's catchers

``before`` is already stored most-recent-first and ``after`` in call order.
Catchers become ``Handler(name="GroupCatcher_<i>", responds_to=CATCH)`` in
registration order.

Traversal is depth-first, pre-order over ``G.items``. A subgroup is
collected first (so its own wrapping is applied), its paths are prefixed
with the item's path, and the result is wrapped again by ``G``. Each
ancestor therefore wraps the chain its descendant already closed with its
own catchers; catchers are never hoisted to the end of the chain.

Paths are concatenated verbatim; duplicate slashes are not collapsed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import replace
from typing import TYPE_CHECKING

from route_groups.exceptions import CompositionError

from .handler import Handler, RespondsTo
from .items import GroupItem, HandlerItem, Route

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from .group import Group

__all__ = ["CATCHER_NAME", "collect_routes"]

CATCHER_NAME = "GroupCatcher_{index}"

logger = logging.getLogger("route_groups")


def collect_routes(group: Group) -> list[Route]:
    """Return the flattened routes of ``group`` and all its subgroups.

    The tree is only read; calling this twice on an unchanged tree returns
    equal lists.

    Raises:
        CompositionError: an item is neither a GroupItem nor a HandlerItem.
    """
    routes = list(_iter_routes(group))
    logger.debug("collected %d route(s) from group %r", len(routes), group.name)
    return routes


def _iter_routes(group: Group) -> Iterator[Route]:
    catchers = _catcher_handlers(group)
    for item in group.items:
        if isinstance(item, GroupItem):
            prefix = item.path or ""
            for subroute in _iter_routes(item.group):
                yield _wrap(group, replace(subroute, path=f"{prefix}{subroute.path}"), catchers)
        elif isinstance(item, HandlerItem):
            route = Route(methods=item.methods, path=item.path, handlers=item.handlers)
            yield _wrap(group, route, catchers)
        else:
            raise CompositionError(item)


def _wrap(group: Group, route: Route, catchers: tuple[Handler, ...]) -> Route:
    return replace(
        route,
        handlers=(*group.before_handlers, *route.handlers, *group.after_handlers, *catchers),
    )


def _catcher_handlers(group: Group) -> tuple[Handler, ...]:
    return tuple(
        Handler(
            name=CATCHER_NAME.format(index=index),
            responds_to=RespondsTo.CATCH,
            callback=catcher,
        )
        for index, catcher in enumerate(group.catchers)
    )
