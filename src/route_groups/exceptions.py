# Copyright 2025 Softwell S.r.l. - All Rights Reserved
# SPDX-License-Identifier: Apache-2.0
"""Exceptions for Route Groups.

Every builder failure has its own class so callers can tell them apart.
All of them derive from :class:`RouteGroupError` and carry the offending
value as an attribute.

Registration errors (raised eagerly by ``Group`` builder operations):
    - ``InvalidPath``
    - ``InvalidMethods``
    - ``InvalidMethod``
    - ``InvalidHandlers``
    - ``InvalidHandlerSpecification``
    - ``HandlerCannotBeGroup``
    - ``InvalidCatch``

Collection errors:
    - ``CompositionError``: internal defect found while flattening a tree.
"""

from __future__ import annotations

from typing import Any

__all__ = [
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


class RouteGroupError(Exception):
    """Base class for every error raised by Route Groups."""


class InvalidPath(RouteGroupError):
    """Raised when a handler path is not a string starting with ``/``.

    Attributes:
        path: The rejected path value.
    """

    def __init__(self, path: Any) -> None:
        self.path = path
        super().__init__(f"Path must be a string starting with '/', got {path!r}")


class InvalidMethods(RouteGroupError):
    """Raised when a handler registration resolves to no methods at all.

    Attributes:
        methods: The rejected method collection.
    """

    def __init__(self, methods: Any) -> None:
        self.methods = methods
        super().__init__(f"Handler needs at least one method, got {methods!r}")


class InvalidMethod(RouteGroupError):
    """Raised when a single method is not a non-blank string.

    Attributes:
        method: The rejected method value.
    """

    def __init__(self, method: Any) -> None:
        self.method = method
        super().__init__(f"Method must be a non-empty string, got {method!r}")


class InvalidHandlers(RouteGroupError):
    """Raised when a registration supplies no handler callbacks.

    Attributes:
        handlers: The rejected handler collection.
    """

    def __init__(self, handlers: Any) -> None:
        self.handlers = handlers
        super().__init__("Handler requires at least one callback or middleware object")


class InvalidHandlerSpecification(RouteGroupError):
    """Raised when a handler, middleware or group path is malformed.

    Attributes:
        value: The offending value (may be None when only a reason applies).
    """

    def __init__(self, reason: str, value: Any = None) -> None:
        self.reason = reason
        self.value = value
        super().__init__(reason)


class HandlerCannotBeGroup(RouteGroupError):
    """Raised when a Group is passed where a handler callback is expected.

    Attributes:
        handler: The Group instance that was supplied.
    """

    def __init__(self, handler: Any) -> None:
        self.handler = handler
        super().__init__("Cannot use a group as a handler; attach it with add_group()")


class InvalidCatch(RouteGroupError):
    """Raised when ``catch()`` receives something that is not callable.

    Attributes:
        callback: The rejected value.
    """

    def __init__(self, callback: Any) -> None:
        self.callback = callback
        super().__init__(f"Catcher must be callable, got {type(callback).__name__}")


class CompositionError(RouteGroupError):
    """Raised by route collection on an item of unknown kind.

    Builder validation makes this unreachable; seeing it means the tree was
    modified behind the builder's back.

    Attributes:
        item: The unrecognized item.
    """

    def __init__(self, item: Any) -> None:
        self.item = item
        super().__init__(f"Bad item type: {type(item).__name__!r}")
