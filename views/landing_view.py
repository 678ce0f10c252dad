import streamlit as st

import ui
from use_cases.domain_models import FEATURED_DISCUSSIONS
from use_cases.form_models import WaitlistFormState
from use_cases.routing import Route
from use_cases.waitlist_flow import submit_waitlist
from utils import session_manager


def render_landing(settings):
    state = session_manager.get_screen_state(Route.LANDING, WaitlistFormState)

    ui.render_flash(state.message)

    head_left, head_right = st.columns([4, 1])
    with head_left:
        ui.render_brand()
    with head_right:
        if st.button("Log in / Sign up", key="landing_auth_btn", use_container_width=True):
            session_manager.navigate(Route.AUTH)

    content, sidebar = st.columns([3, 2], gap="large")

    with content:
        st.markdown("## Join the community and help people achieve their academic goals.")
        st.write(
            "UNIFACE is a global academic discussion space where students and researchers "
            "ask questions, share resources, and build projects together."
        )
        st.markdown("### Latest academic discussions")
        for post in FEATURED_DISCUSSIONS:
            ui.render_post_card(post)

    with sidebar:
        _render_waitlist_form(state, settings)


def _render_waitlist_form(state, settings):
    policy = settings.waitlist_policy

    st.markdown("### Get early access")
    st.caption("Join UNIFACE to ask questions, follow fields, and collaborate on research and projects.")

    email_hint = f"name{policy.allowed_domains[0]}" if policy.restricted else "name@university.edu"
    # Widget keys carry the form revision so a successful submit renders empty inputs.
    rev = state.revision
    with st.form(f"waitlist_form_{rev}", clear_on_submit=False):
        full_name = st.text_input("Full name", value=state.full_name, key=f"waitlist_name_{rev}")
        email = st.text_input("University email", value=state.email, placeholder=email_hint, key=f"waitlist_email_{rev}")
        field = st.text_input(
            "Field of interest",
            value=state.field,
            placeholder="Finance, AI, Environmental science…",
            key=f"waitlist_field_{rev}",
        )
        submitted = st.form_submit_button(
            "Submitting..." if state.loading else "Join the waitlist",
            disabled=state.loading,
            use_container_width=True,
        )

    if submitted:
        state.full_name, state.email, state.field = full_name, email, field
        with st.spinner("Saving your request..."):
            submit_waitlist(state, session_manager.get_waitlist_repo(), policy)
        st.rerun()
