import logging
from typing import Any, Callable, Optional

from use_cases.errors import IdentityProviderError
from use_cases.session_models import PASSWORD_PROVIDER, Session

log = logging.getLogger(__name__)


def _error_text(exc: Exception) -> str:
    return getattr(exc, "message", None) or str(exc)


def to_session(raw: Any) -> Optional[Session]:
    """Convert a supabase auth session into the application DTO."""
    if raw is None or getattr(raw, "user", None) is None:
        return None
    user = raw.user
    app_metadata = getattr(user, "app_metadata", None) or {}
    return Session(
        user_id=str(user.id),
        email=user.email,
        email_confirmed_at=getattr(user, "email_confirmed_at", None),
        auth_provider=app_metadata.get("provider") or PASSWORD_PROVIDER,
        access_token=getattr(raw, "access_token", "") or "",
        expires_at=getattr(raw, "expires_at", None),
    )


class SupabaseIdentityProvider:
    """Thin adapter over ``client.auth`` of a supabase client.

    Every failure surfaces as IdentityProviderError; results are returned as
    ``Session`` DTOs so callers never see supabase types.
    """

    def __init__(self, client):
        self.client = client

    def _call(self, what: str, fn: Callable[[], Any]) -> Any:
        try:
            return fn()
        except Exception as e:
            log.warning(f"Identity request '{what}' failed: {_error_text(e)}")
            raise IdentityProviderError(_error_text(e)) from e

    def get_session(self) -> Optional[Session]:
        return to_session(self._call("get_session", self.client.auth.get_session))

    def on_auth_state_change(self, callback: Callable[[str, Optional[Session]], None]):
        def _relay(event, raw_session):
            callback(str(event), to_session(raw_session))

        return self.client.auth.on_auth_state_change(_relay)

    def sign_up(self, email: str, password: str, email_redirect_to: str) -> Optional[Session]:
        response = self._call(
            "sign_up",
            lambda: self.client.auth.sign_up(
                {
                    "email": email,
                    "password": password,
                    "options": {"email_redirect_to": email_redirect_to},
                }
            ),
        )
        return to_session(getattr(response, "session", None))

    def sign_in_with_password(self, email: str, password: str) -> Optional[Session]:
        response = self._call(
            "sign_in_with_password",
            lambda: self.client.auth.sign_in_with_password({"email": email, "password": password}),
        )
        return to_session(getattr(response, "session", None))

    def sign_in_with_oauth(self, provider: str, redirect_to: str) -> str:
        """Start a redirect-based sign-in and return the URL to send the browser to."""
        response = self._call(
            "sign_in_with_oauth",
            lambda: self.client.auth.sign_in_with_oauth(
                {"provider": provider, "options": {"redirect_to": redirect_to}}
            ),
        )
        url = getattr(response, "url", None)
        if not url:
            raise IdentityProviderError(f"{provider} sign-in did not return a redirect URL.")
        return url

    def exchange_code_for_session(self, code: str) -> Optional[Session]:
        response = self._call(
            "exchange_code_for_session",
            lambda: self.client.auth.exchange_code_for_session({"auth_code": code}),
        )
        return to_session(getattr(response, "session", None))

    def get_user_email(self) -> Optional[str]:
        response = self._call("get_user", self.client.auth.get_user)
        user = getattr(response, "user", None)
        return user.email if user is not None else None

    def sign_out(self) -> None:
        self._call("sign_out", self.client.auth.sign_out)
