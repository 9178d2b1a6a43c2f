# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Tree items and flattened routes.

A group's ``items`` list holds two kinds of entries:

``GroupItem``
    A nested subgroup plus the optional path prefix applied to every route
    it produces.

``HandlerItem``
    A handler registration: methods, path and the normalized handler chain.

``Route`` is the output of collection. It has the same shape as a
``HandlerItem`` but its path is fully qualified and its handler chain already
carries every enclosing group's middleware and catchers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from .group import Group
    from .handler import Handler

__all__ = ["GroupItem", "HandlerItem", "Route"]


@dataclass(frozen=True)
class GroupItem:
    """A subgroup attached to a parent group.

    Attributes:
        path: Prefix prepended to every subgroup route, or None.
        group: The attached Group.
    """

    path: str | None
    group: Group


@dataclass(frozen=True)
class HandlerItem:
    """A handler chain registered for a set of methods on a path.

    Attributes:
        methods: Method names, order preserved, no duplicates.
        path: Path relative to the owning group, starts with ``/``.
        handlers: Normalized handler chain.
    """

    methods: tuple[str, ...]
    path: str
    handlers: tuple[Handler, ...]


@dataclass(frozen=True)
class Route:
    """A fully resolved route ready to be bound by a dispatcher.

    Attributes:
        methods: Method names as supplied at registration.
        path: Concatenation of every ancestor prefix plus the leaf path.
        handlers: Final ordered handler chain.
    """

    methods: tuple[str, ...]
    path: str
    handlers: tuple[Handler, ...]
