"""Client-side route table."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional
from urllib.parse import urlencode

from use_cases.session_models import Session

ROUTE_PARAM = "route"


class Route(str, Enum):
    LANDING = "/"
    AUTH = "/auth"
    AUTH_CALLBACK = "/auth/callback"
    DASHBOARD = "/dashboard"


GUARDED_ROUTES = frozenset({Route.DASHBOARD})


@dataclass(frozen=True)
class RouteResolution:
    route: Route
    redirected: bool = False


def normalize_path(path: Optional[str]) -> str:
    if not path:
        return "/"
    path = path.strip().split("?", 1)[0]
    if not path.startswith("/"):
        path = "/" + path
    if len(path) > 1:
        path = path.rstrip("/") or "/"
    return path


def resolve_route(path: Optional[str]) -> RouteResolution:
    """Map a path to a screen. Unknown paths redirect to the landing page."""
    normalized = normalize_path(path)
    for route in Route:
        if route.value == normalized:
            return RouteResolution(route=route)
    return RouteResolution(route=Route.LANDING, redirected=True)


def is_guarded(route: Route) -> bool:
    return route in GUARDED_ROUTES


def callback_destination(session: Optional[Session]) -> Route:
    return Route.DASHBOARD if session is not None else Route.AUTH


def build_url(base_url: str, route: Route, **params: str) -> str:
    query = {ROUTE_PARAM: route.value}
    query.update(params)
    return f"{base_url.rstrip('/')}/?{urlencode(query)}"
