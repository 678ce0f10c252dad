import logging

import streamlit as st

import auth
from infrastructure.identity.supabase_identity import SupabaseIdentityProvider
from infrastructure.repositories.supabase_waitlist_repository import SupabaseWaitlistRepository
from use_cases.errors import IdentityProviderError
from use_cases.route_guard import RouteGuard
from use_cases.routing import ROUTE_PARAM, Route
from use_cases.session_resolver import SessionResolver

log = logging.getLogger(__name__)

"""
SESSION STATE CONTRACT

This module owns the Streamlit session state of one browser tab.

st.session_state keys:

settings: AppSettings | None
    configuration loaded at startup
    default: None
    owner: bootstrap

supabase_client: Client | None
    supabase client of this browser session (holds the auth session)
    default: None
    owner: session_manager

identity_provider / session_resolver / waitlist_repo
    handles built over supabase_client, rebuilt whenever the client changes
    default: None
    owner: session_manager

guards: dict[str, RouteGuard]
    mounted route guards by route path
    default: {}
    owner: session_manager

active_route: str | None
    route rendered by the previous script run
    default: None
    owner: router

screen_state: dict[str, object]
    per-screen form state, dropped when the active route changes
    default: {}
    owner: views
"""


def init_session_state():
    if 'settings' not in st.session_state:
        st.session_state.settings = None
    if 'supabase_client' not in st.session_state:
        st.session_state.supabase_client = None
    if 'identity_provider' not in st.session_state:
        st.session_state.identity_provider = None
    if 'session_resolver' not in st.session_state:
        st.session_state.session_resolver = None
    if 'waitlist_repo' not in st.session_state:
        st.session_state.waitlist_repo = None
    if 'guards' not in st.session_state:
        st.session_state.guards = {}
    if 'active_route' not in st.session_state:
        st.session_state.active_route = None
    if 'screen_state' not in st.session_state:
        st.session_state.screen_state = {}


def _wire_client(client, settings):
    st.session_state.supabase_client = client
    st.session_state.identity_provider = SupabaseIdentityProvider(client)
    st.session_state.session_resolver = SessionResolver(
        st.session_state.identity_provider, settings.verification_policy
    )
    st.session_state.waitlist_repo = SupabaseWaitlistRepository(client)


def ensure_identity(settings) -> bool:
    """Create this session's client on first use. Returns True if one was created."""
    st.session_state.settings = settings
    if st.session_state.supabase_client is not None:
        return False
    _wire_client(auth.create_supabase_client(settings), settings)
    return True


def adopt_client(client):
    """Switch this session to a client handed over by a completed OAuth flow."""
    release_guards()
    _wire_client(client, st.session_state.settings)


def get_client():
    return st.session_state.supabase_client


def get_identity_provider() -> SupabaseIdentityProvider:
    return st.session_state.identity_provider


def get_resolver() -> SessionResolver:
    return st.session_state.session_resolver


def get_waitlist_repo() -> SupabaseWaitlistRepository:
    return st.session_state.waitlist_repo


def get_guard(route: Route) -> RouteGuard:
    guards = st.session_state.guards
    guard = guards.get(route.value)
    if guard is None:
        guard = RouteGuard(get_resolver(), name=route.value)
        guards[route.value] = guard
    return guard


def release_guards(keep=None):
    guards = st.session_state.get("guards") or {}
    for path in list(guards):
        if keep is not None and path == keep.value:
            continue
        guards.pop(path).unmount()


def get_screen_state(route: Route, factory):
    screens = st.session_state.screen_state
    if route.value not in screens:
        screens[route.value] = factory()
    return screens[route.value]


def enter_route(route: Route):
    """Unmount guards and drop form state of the screen being left."""
    previous = st.session_state.active_route
    if previous == route.value:
        return
    if previous is not None:
        log.debug(f"Route change {previous} -> {route.value}")
        st.session_state.screen_state.pop(previous, None)
    release_guards(keep=route)
    st.session_state.active_route = route.value


def current_path() -> str:
    return st.query_params.get(ROUTE_PARAM, Route.LANDING.value)


def navigate(route: Route):
    # Drops every param of the route being left. The browser may keep a back entry
    # for it; going back reruns the router and the guard decides again.
    st.query_params.clear()
    if route != Route.LANDING:
        st.query_params[ROUTE_PARAM] = route.value
    st.rerun()


def logout():
    provider = get_identity_provider()
    if provider is not None:
        try:
            provider.sign_out()
        except IdentityProviderError as e:
            log.warning(f"Sign-out request failed, leaving the dashboard anyway: {e}")
    navigate(Route.AUTH)
