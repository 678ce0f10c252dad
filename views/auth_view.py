import streamlit as st

import auth
import ui
from use_cases import auth_flow
from use_cases.form_models import AuthFormState
from use_cases.routing import Route, build_url
from utils import session_manager


def render_auth_screen(settings):
    state = session_manager.get_screen_state(Route.AUTH, AuthFormState)

    ui.render_brand()

    if state.phase == "EXTERNAL_REDIRECT":
        st.info(f"Redirecting to {settings.oauth_provider.title()}...")
        st.link_button("Continue", state.redirect_url)
        ui.redirect_browser(state.redirect_url)
        st.stop()

    _, col, _ = st.columns([1, 2, 1])
    with col:
        provider_label = settings.oauth_provider.title()
        if st.button(
            "Please wait..." if state.loading else f"Continue with {provider_label}",
            key="oauth_btn",
            disabled=state.loading,
            use_container_width=True,
        ):
            _start_oauth(state, settings)

        st.markdown("<div style='text-align:center;opacity:0.7'>— or —</div>", unsafe_allow_html=True)

        with st.form("credentials_form", clear_on_submit=False):
            email = st.text_input("Email", value=state.email, autocomplete="email")
            password = st.text_input(
                "Password (min 8 chars)",
                type="password",
                autocomplete="new-password" if state.mode == "signup" else "current-password",
            )
            submit_label = "Create account" if state.mode == "signup" else "Login"
            submitted = st.form_submit_button(
                "Please wait..." if state.loading else submit_label,
                disabled=state.loading,
                use_container_width=True,
            )

        if submitted:
            state.email, state.password = email, password
            with st.spinner("Please wait..."):
                auth_flow.submit_credentials(
                    state,
                    session_manager.get_identity_provider(),
                    callback_url=build_url(settings.app_base_url, Route.AUTH_CALLBACK),
                )
            state.password = ""

        switch_to = "Login" if state.mode == "signup" else "Sign up"
        if st.button(f"Switch to {switch_to}", key="mode_toggle_btn", disabled=state.loading, use_container_width=True):
            state.toggle_mode()
            st.rerun()

        ui.render_flash(state.message)

        if state.signed_in:
            if st.button("Go to dashboard", key="to_dashboard_btn", type="primary", use_container_width=True):
                session_manager.navigate(Route.DASHBOARD)


def _start_oauth(state, settings):
    flow_id = auth.register_oauth_flow(session_manager.get_client())
    callback_url = build_url(
        settings.app_base_url, Route.AUTH_CALLBACK, **{auth.OAUTH_FLOW_PARAM: flow_id}
    )
    started = auth_flow.start_oauth(
        state,
        session_manager.get_identity_provider(),
        oauth_provider=settings.oauth_provider,
        callback_url=callback_url,
    )
    if not started:
        auth.discard_oauth_flow(flow_id)
    st.rerun()
