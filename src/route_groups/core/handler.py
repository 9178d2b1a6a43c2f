# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Handler contract definitions for Route Groups.

Objects
-------
``RespondsTo``
    Which outcome of the previous step a handler reacts to: ``THEN`` for the
    success path, ``CATCH`` for the error path.

``Handler``
    Immutable pydantic model holding ``name``, ``responds_to`` and
    ``callback``. Every callback stored in a group is a ``Handler``; the
    rest of the package never sees bare callables.

``Around``
    Transient ``before``/``after`` pair accepted by ``Group.around()``.
    It is split immediately and never stored.

Normalization
-------------
``normalize_handler(value)`` accepts:
    - a ``Handler`` (returned unchanged)
    - a mapping with ``name``/``responds_to``/``callback`` keys (validated)
    - a bare callable (wrapped as ``Handler(name=None, responds_to=THEN)``)

and raises ``HandlerCannotBeGroup`` for a ``Group`` instance or
``InvalidHandlerSpecification`` for anything else.

Example::

    from route_groups import Handler, RespondsTo

    def on_error(exc):
        ...

    Handler(name="on_error", responds_to=RespondsTo.CATCH, callback=on_error)
    normalize_handler({"responds_to": "catch", "callback": on_error})
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from genro_toolbox.typeutils import safe_is_instance
from pydantic import BaseModel, ConfigDict, ValidationError

from route_groups.exceptions import HandlerCannotBeGroup, InvalidHandlerSpecification

__all__ = [
    "Around",
    "Handler",
    "RespondsTo",
    "callable_name",
    "display_name",
    "normalize_handler",
    "split_around",
]

_GROUP_CLASS = "route_groups.core.group.Group"


class RespondsTo(str, Enum):
    """Outcome a handler is attached to."""

    THEN = "then"
    CATCH = "catch"


class Handler(BaseModel):
    """A normalized callback in a route's handler chain.

    Attributes:
        name: Optional label (catchers get ``GroupCatcher_<i>``).
        responds_to: ``RespondsTo.THEN`` or ``RespondsTo.CATCH``.
        callback: The callable itself.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str | None = None
    responds_to: RespondsTo = RespondsTo.THEN
    callback: Callable[..., Any]


@dataclass(frozen=True)
class Around:
    """Pair of middleware registered together via ``Group.around()``."""

    before: Any
    after: Any


def normalize_handler(value: Any) -> Handler:
    """Return ``value`` in canonical ``Handler`` form.

    Raises:
        HandlerCannotBeGroup: ``value`` is a Group.
        InvalidHandlerSpecification: ``value`` is neither a Handler, a valid
            handler mapping nor a callable.
    """
    if safe_is_instance(value, _GROUP_CLASS):
        raise HandlerCannotBeGroup(value)
    if isinstance(value, Handler):
        return value
    if isinstance(value, Mapping):
        try:
            return Handler.model_validate(dict(value))
        except ValidationError as err:
            raise InvalidHandlerSpecification(_validation_reason(err), value) from err
    if callable(value):
        return Handler(callback=value)
    raise InvalidHandlerSpecification(
        f"Handler must be a callable or a handler mapping, got {type(value).__name__}",
        value,
    )


def split_around(middleware: Any) -> tuple[Any, Any]:
    """Return the ``(before, after)`` halves of an around middleware."""
    if safe_is_instance(middleware, _GROUP_CLASS):
        raise HandlerCannotBeGroup(middleware)
    if isinstance(middleware, Mapping):
        missing = [key for key in ("before", "after") if key not in middleware]
        if missing:
            raise InvalidHandlerSpecification(
                f"Around middleware is missing {', '.join(missing)}", middleware
            )
        return middleware["before"], middleware["after"]
    if not hasattr(middleware, "before") or not hasattr(middleware, "after"):
        raise InvalidHandlerSpecification(
            "Around middleware must provide both 'before' and 'after'", middleware
        )
    return middleware.before, middleware.after


def display_name(handler: Handler) -> str:
    """Human-readable label for introspection output."""
    if handler.name:
        return handler.name
    return callable_name(handler.callback)


def callable_name(callback: Any) -> str:
    """Qualified name of ``callback``, or its repr when it has none."""
    return getattr(callback, "__qualname__", None) or repr(callback)


def _validation_reason(err: ValidationError) -> str:
    first = err.errors()[0]
    field = ".".join(str(part) for part in first["loc"]) or "handler"
    if field == "responds_to":
        return f"Invalid handler responds_to: {first.get('input')!r}"
    return f"Invalid handler {field}: {first['msg']}"
