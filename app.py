import streamlit as st
from datetime import datetime, timezone

from infrastructure.observability import setup_observability
setup_observability()

import ui
from use_cases import auth_flow, bootstrap
from use_cases.routing import Route, is_guarded, resolve_route
from utils import session_manager
from views import auth_view, callback_view, dashboard_view, landing_view

# --- PAGE SETUP ---
st.set_page_config(page_title="UNIFACE", page_icon="🎓", layout="wide", initial_sidebar_state="collapsed")

# Health Check (Basic load-balancer heartbeat)
if st.query_params.get("health") == "1":
    st.write({"status": "ok", "version": "1.0", "time": datetime.now(timezone.utc).isoformat()})
    st.stop()

ui.setup_style()

# --- STARTUP ORCHESTRATION ---
startup_result = bootstrap.run_startup()
if startup_result.status == "STOP":
    st.error(f"🚨 The app is not configured: {startup_result.error}")
    st.stop()

settings = startup_result.settings

# --- VIEW ROUTER ---
resolution = resolve_route(session_manager.current_path())
if resolution.redirected:
    session_manager.navigate(resolution.route)

route = resolution.route
session_manager.enter_route(route)

if is_guarded(route):
    auth_result = auth_flow.ensure_authenticated_session(session_manager.get_guard(route))
    if auth_result.reason == "resolving":
        ui.show_loading_placeholder()
        st.stop()
    if auth_result.status == "STOP":
        session_manager.navigate(Route.AUTH)
    dashboard_view.render_dashboard()
elif route == Route.AUTH:
    auth_view.render_auth_screen(settings)
elif route == Route.AUTH_CALLBACK:
    callback_view.render_callback()
else:
    landing_view.render_landing(settings)
