import logging

import streamlit as st

import auth
import ui
from use_cases.errors import IdentityProviderError
from use_cases.routing import callback_destination
from utils import session_manager

log = logging.getLogger(__name__)


def complete_sign_in():
    """Finish an OAuth or email-confirmation redirect and pick the next route."""
    params = st.query_params
    handed_over = auth.claim_oauth_flow(params.get(auth.OAUTH_FLOW_PARAM))
    if handed_over is not None:
        session_manager.adopt_client(handed_over)

    code = params.get("code")
    if code:
        try:
            session_manager.get_identity_provider().exchange_code_for_session(code)
        except IdentityProviderError as e:
            log.warning(f"Code exchange on callback failed: {e}")

    session = session_manager.get_resolver().get_current_session()
    return callback_destination(session)


def render_callback():
    ui.show_loading_placeholder("Completing sign-in…")
    session_manager.navigate(complete_sign_in())
