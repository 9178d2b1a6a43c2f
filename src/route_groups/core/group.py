# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Route group builder for Route Groups.

This module exposes :class:`Group`, a node of the route tree. A group owns
an ordered list of items (subgroups and handler registrations), its before
and after middleware, and its error catchers. Nothing is shared between
groups: a group is only changed through its own builder methods.

Constructor
-----------
Constructor signature::

    Group(builder=None, *, name=None, description=None)

- ``builder``: optional callable invoked with the new group to populate it.
- ``name`` / ``description``: labels shown by ``describe()`` only.

Registration
------------
- ``add_handlers(methods, path, *handlers)`` validates eagerly and appends a
  ``HandlerItem``. ``get/post/put/patch/delete`` are shortcuts for it.
- ``add_group(path, group)`` / ``group(path, builder)`` attach subgroups.
- ``before(mw)`` prepends (last added runs first); ``after(mw)`` appends
  (runs in call order); ``around(mw)`` does both with ``mw.before`` and
  ``mw.after``, keeping each half's own ordering rule.
- ``catch(callback)`` appends an error catcher.

Every builder method returns the group, so calls chain.

Collection
----------
``collect_routes()`` flattens the tree (see ``route_groups.core.collector``).

Example::

    from route_groups import Group

    def api(g):
        g.before(authenticate)
        g.get("/users", list_users)
        g.post("/users", create_user)

    root = Group().group("/api", api).catch(render_error)
    routes = root.collect_routes()
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from route_groups.exceptions import (
    InvalidCatch,
    InvalidHandlers,
    InvalidHandlerSpecification,
    InvalidMethod,
    InvalidMethods,
    InvalidPath,
)

from .collector import collect_routes
from .handler import Handler, callable_name, display_name, normalize_handler, split_around
from .items import GroupItem, HandlerItem, Route

__all__ = ["Group"]

logger = logging.getLogger("route_groups")


class Group:
    """A node of the route tree.

    Responsibilities:
        - Hold child items in insertion order
        - Hold before/after middleware and catchers in their stored order
        - Validate every registration at the point it is made
        - Flatten itself into routes on demand
    """

    __slots__ = (
        "name",
        "description",
        "_items",
        "_before",
        "_after",
        "_catchers",
    )

    def __init__(
        self,
        builder: Callable[[Group], Any] | None = None,
        *,
        name: str | None = None,
        description: str | None = None,
    ) -> None:
        self.name = name
        self.description = description
        self._items: list[GroupItem | HandlerItem] = []
        self._before: list[Handler] = []
        self._after: list[Handler] = []
        self._catchers: list[Callable] = []
        if builder is not None:
            if not callable(builder):
                raise InvalidHandlerSpecification(
                    f"Group builder must be callable, got {type(builder).__name__}", builder
                )
            builder(self)

    def __repr__(self) -> str:
        return f"Group(name={self.name!r}, items={len(self._items)})"

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    @property
    def items(self) -> tuple[GroupItem | HandlerItem, ...]:
        return tuple(self._items)

    @property
    def before_handlers(self) -> tuple[Handler, ...]:
        """Before middleware, most recently added first."""
        return tuple(self._before)

    @property
    def after_handlers(self) -> tuple[Handler, ...]:
        """After middleware in the order they were added."""
        return tuple(self._after)

    @property
    def catchers(self) -> tuple[Callable, ...]:
        return tuple(self._catchers)

    # ------------------------------------------------------------------
    # Subgroups
    # ------------------------------------------------------------------
    def add_group(self, path: str | Group | None = None, group: Group | None = None) -> Group:
        """Attach ``group`` under the optional ``path`` prefix.

        ``add_group(subgroup)`` is accepted as a shortcut for
        ``add_group(None, subgroup)``.

        Raises:
            InvalidHandlerSpecification: ``path`` is given and does not start
                with ``/``, ``group`` is not a Group, or ``group`` already
                contains this group.
        """
        if isinstance(path, Group) and group is None:
            return self.add_group(None, path)
        if path is not None and (not isinstance(path, str) or not path.startswith("/")):
            raise InvalidHandlerSpecification("path must either be None or start with /", path)
        if not isinstance(group, Group):
            raise InvalidHandlerSpecification(
                f"Expected a Group to attach, got {type(group).__name__}", group
            )
        if group._reaches(self):
            raise InvalidHandlerSpecification("Cannot attach a group inside its own subtree", group)
        self._items.append(GroupItem(path=path, group=group))
        logger.debug("group %r: attached subgroup %r at %r", self.name, group.name, path)
        return self

    def group(
        self,
        path: str | Callable[[Group], Any] | None = None,
        builder: Callable[[Group], Any] | None = None,
    ) -> Group:
        """Create a child group, populate it with ``builder`` and attach it.

        ``group(builder)`` is accepted as a shortcut for ``group(None, builder)``.

        Returns:
            self (the parent), for chaining.
        """
        if callable(path) and builder is None:
            return self.group(None, path)
        return self.add_group(path, Group(builder))

    def _reaches(self, target: Group) -> bool:
        """True if ``target`` is this group or sits anywhere below it."""
        pending = [self]
        seen: set[int] = set()
        while pending:
            current = pending.pop()
            if current is target:
                return True
            if id(current) in seen:
                continue
            seen.add(id(current))
            pending.extend(item.group for item in current._items if isinstance(item, GroupItem))
        return False

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------
    def add_handlers(self, methods: Any, path: Any, *handlers: Any) -> Group:
        """Register ``handlers`` for ``methods`` on ``path``.

        Args:
            methods: A method name, None, or an iterable of method names.
            path: Path relative to this group; must start with ``/``.
            *handlers: Callables, ``Handler`` objects or handler mappings.

        Returns:
            self (to allow chaining).

        Raises:
            InvalidPath: ``path`` is not a string starting with ``/``.
            InvalidMethods: no method was given.
            InvalidMethod: a method is not a non-blank string.
            InvalidHandlers: no handler was given.
            HandlerCannotBeGroup: a handler is a Group.
            InvalidHandlerSpecification: a handler is malformed.
        """
        if methods is None:
            method_list: list[Any] = []
        elif isinstance(methods, str) or not isinstance(methods, Iterable):
            method_list = [methods]
        else:
            method_list = list(methods)

        if not isinstance(path, str) or not path.startswith("/"):
            raise InvalidPath(path)
        if not method_list:
            raise InvalidMethods(methods)
        for method in method_list:
            if not isinstance(method, str) or not method.strip():
                raise InvalidMethod(method)
        if not handlers:
            raise InvalidHandlers(handlers)
        normalized = tuple(normalize_handler(handler) for handler in handlers)

        item = HandlerItem(
            methods=tuple(dict.fromkeys(method_list)),
            path=path,
            handlers=normalized,
        )
        self._items.append(item)
        logger.debug(
            "group %r: registered %s %s (%d handler(s))",
            self.name,
            ",".join(item.methods),
            path,
            len(normalized),
        )
        return self

    def add_handler(self, methods: Any, path: Any, handler: Any) -> Group:
        """Register a single handler; see :meth:`add_handlers`."""
        return self.add_handlers(methods, path, handler)

    def get(self, path: Any, *handlers: Any) -> Group:
        return self.add_handlers("get", path, *handlers)

    def post(self, path: Any, *handlers: Any) -> Group:
        return self.add_handlers("post", path, *handlers)

    def put(self, path: Any, *handlers: Any) -> Group:
        return self.add_handlers("put", path, *handlers)

    def patch(self, path: Any, *handlers: Any) -> Group:
        return self.add_handlers("patch", path, *handlers)

    def delete(self, path: Any, *handlers: Any) -> Group:
        return self.add_handlers("delete", path, *handlers)

    # ------------------------------------------------------------------
    # Middleware and catchers
    # ------------------------------------------------------------------
    def before(self, middleware: Any) -> Group:
        """Add middleware run before every handler chain of this group.

        The last one added runs first.
        """
        self._before.insert(0, normalize_handler(middleware))
        return self

    def after(self, middleware: Any) -> Group:
        """Add middleware run after every handler chain of this group.

        Runs in the order added.
        """
        self._after.append(normalize_handler(middleware))
        return self

    def around(self, middleware: Any) -> Group:
        """Add a ``before``/``after`` pair.

        Each half follows its own ordering rule, so two around middleware
        nest as ``b2, b1, ..., a1, a2``.
        """
        before, after = split_around(middleware)
        before_handler = normalize_handler(before)
        after_handler = normalize_handler(after)
        self._before.insert(0, before_handler)
        self._after.append(after_handler)
        return self

    def catch(self, callback: Any) -> Group:
        """Append an error catcher for every route of this group.

        Raises:
            InvalidCatch: ``callback`` is not callable.
        """
        if not callable(callback):
            raise InvalidCatch(callback)
        self._catchers.append(callback)
        return self

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    def collect_routes(self) -> list[Route]:
        """Flatten this group and its subgroups into fully resolved routes."""
        return collect_routes(self)

    def describe(self) -> dict[str, Any]:
        """Return a nested dict describing this group tree.

        Keys with empty values are omitted.
        """
        items: list[dict[str, Any]] = []
        for item in self._items:
            if isinstance(item, GroupItem):
                items.append({"type": "group", "path": item.path, "group": item.group.describe()})
            else:
                items.append(
                    {
                        "type": "handler",
                        "methods": list(item.methods),
                        "path": item.path,
                        "handlers": [display_name(h) for h in item.handlers],
                    }
                )
        result: dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "before": [display_name(h) for h in self._before],
            "after": [display_name(h) for h in self._after],
            "catchers": [callable_name(c) for c in self._catchers],
            "items": items,
        }
        return {key: value for key, value in result.items() if value}
