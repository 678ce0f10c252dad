"""Authentication flow orchestration (application layer)."""

import logging
from dataclasses import dataclass
from typing import Literal, Optional

from use_cases.errors import IdentityProviderError
from use_cases.form_models import AuthFormState, FormMessage
from use_cases.route_guard import GuardState, RouteGuard

log = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8

MSG_INVALID_EMAIL = "Enter a valid email address."
MSG_SHORT_PASSWORD = f"Password must be at least {MIN_PASSWORD_LENGTH} characters."
MSG_SIGNED_UP = "Account created. Check your email and verify, then log in."
MSG_SIGNED_IN = "Signed in. Your dashboard is ready."
MSG_AUTH_FAILED = "Authentication failed."
MSG_OAUTH_FAILED = "{provider} sign-in failed."

AuthFlowStatus = Literal["CONTINUE", "STOP"]


@dataclass(frozen=True)
class AuthFlowResult:
    """Result contract for the guarded-screen gate."""

    status: AuthFlowStatus
    reason: str
    user_id: Optional[str] = None


def ensure_authenticated_session(guard: RouteGuard) -> AuthFlowResult:
    """Mount the guard if needed and return a control-flow status."""
    guard.mount()
    if guard.state == GuardState.RESOLVING:
        return AuthFlowResult(status="STOP", reason="resolving")
    if guard.state == GuardState.DENIED:
        return AuthFlowResult(status="STOP", reason="auth_required")
    return AuthFlowResult(status="CONTINUE", reason="authenticated", user_id=guard.session.user_id)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def validate_credentials(email: str, password: str) -> Optional[str]:
    email = normalize_email(email)
    if not email or "@" not in email:
        return MSG_INVALID_EMAIL
    if len(password) < MIN_PASSWORD_LENGTH:
        return MSG_SHORT_PASSWORD
    return None


def submit_credentials(state: AuthFormState, provider, callback_url: str) -> bool:
    """Run sign-up or login for the current mode. Returns True on success.

    Neither mode navigates: after sign-up the user has to confirm the email,
    after login guarded screens pick the session up through their
    subscription.
    """
    if state.phase != "EDITING":
        return False
    state.message = None

    error = validate_credentials(state.email, state.password)
    if error:
        state.message = FormMessage.error(error)
        return False

    email = normalize_email(state.email)
    state.loading = True
    try:
        if state.mode == "signup":
            provider.sign_up(email, state.password, email_redirect_to=callback_url)
            state.message = FormMessage.success(MSG_SIGNED_UP)
        else:
            provider.sign_in_with_password(email, state.password)
            state.signed_in = True
            state.message = FormMessage.success(MSG_SIGNED_IN)
        log.info(f"Auth {state.mode} succeeded")
        return True
    except IdentityProviderError as e:
        state.message = FormMessage.error(str(e) or MSG_AUTH_FAILED)
        return False
    except Exception as e:
        log.error(f"Unexpected auth {state.mode} failure: {e}", exc_info=True)
        state.message = FormMessage.error(MSG_AUTH_FAILED)
        return False
    finally:
        state.loading = False


def start_oauth(state: AuthFormState, provider, oauth_provider: str, callback_url: str) -> bool:
    """Request a redirect-based sign-in.

    On success the form enters EXTERNAL_REDIRECT: the browser is about to
    leave the app, so the loading flag stays set and nothing else may
    happen on this screen.
    """
    if state.phase != "EDITING":
        return False
    state.message = None
    state.loading = True
    fallback = MSG_OAUTH_FAILED.format(provider=oauth_provider.title())
    try:
        url = provider.sign_in_with_oauth(oauth_provider, redirect_to=callback_url)
    except IdentityProviderError as e:
        state.message = FormMessage.error(str(e) or fallback)
        state.loading = False
        return False
    except Exception as e:
        log.error(f"Unexpected OAuth failure: {e}", exc_info=True)
        state.message = FormMessage.error(fallback)
        state.loading = False
        return False

    state.phase = "EXTERNAL_REDIRECT"
    state.redirect_url = url
    log.info(f"OAuth sign-in started with {oauth_provider}")
    return True
