from __future__ import annotations

import json

from route_groups import Around, Group, Handler, RespondsTo


def load_session(request):
    return request


def require_admin(request):
    return request


def open_transaction(request):
    return request


def commit_transaction(response):
    return response


def render_error(exc):
    return {"error": str(exc)}


def billing(group: Group):
    """Billing module: every handler runs inside a transaction."""
    group.around(Around(before=open_transaction, after=commit_transaction))
    group.get("/invoices", lambda request: ["Inv-001", "Inv-002"])
    group.post("/invoices", lambda request: {"status": "created"})


def inventory(group: Group):
    group.get("/stock", lambda request: {"qty": 42})
    group.catch(render_error)


def admin(group: Group):
    group.before(require_admin)
    group.delete(
        "/cache",
        lambda request: None,
        Handler(name="cache_failed", responds_to=RespondsTo.CATCH, callback=render_error),
    )


if __name__ == "__main__":
    app = Group(name="app", description="Enterprise API")
    app.before(load_session)
    app.group("/billing", billing)
    app.group("/inventory", inventory)
    app.group("/admin", admin)
    app.catch(render_error)

    print("--- Route Group Composition Demo ---")
    for route in app.collect_routes():
        chain = " -> ".join(h.name or getattr(h.callback, "__name__", "?") for h in route.handlers)
        print(f"{','.join(route.methods).upper():<8} {route.path:<20} {chain}")

    # Introspection shows the nested structure
    print("\nTree:")
    print(json.dumps(app.describe(), indent=2))
