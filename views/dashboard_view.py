import logging

import streamlit as st

from use_cases.errors import IdentityProviderError
from utils import session_manager

log = logging.getLogger(__name__)


def load_signed_in_email():
    try:
        return session_manager.get_identity_provider().get_user_email()
    except IdentityProviderError as e:
        log.info(f"Could not load the signed-in user: {e}")
        return None


def render_dashboard():
    st.title("Dashboard")
    st.write("Authenticated ✅")

    email = load_signed_in_email()
    if email:
        st.write(f"Signed in as: {email}")

    if st.button("Logout", key="logout_btn", type="secondary"):
        session_manager.logout()
