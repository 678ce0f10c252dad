import pytest

from use_cases import auth_flow
from use_cases.form_models import AuthFormState
from use_cases.route_guard import RouteGuard
from use_cases.session_resolver import SessionResolver

CALLBACK = "http://localhost:8501/?route=%2Fauth%2Fcallback"


@pytest.mark.parametrize("email", ["", "  ", "ada.ada.edu.az"])
@pytest.mark.parametrize("mode", ["signup", "login"])
def test_invalid_email_makes_no_request(fake_provider, email, mode):
    state = AuthFormState(mode=mode, email=email, password="longenough")
    assert auth_flow.submit_credentials(state, fake_provider, CALLBACK) is False
    assert state.message.text == auth_flow.MSG_INVALID_EMAIL
    assert fake_provider.network_calls() == []


@pytest.mark.parametrize("password", ["", "short", "1234567"])
@pytest.mark.parametrize("mode", ["signup", "login"])
def test_short_password_makes_no_request(fake_provider, password, mode):
    state = AuthFormState(mode=mode, email="ada@ada.edu.az", password=password)
    assert auth_flow.submit_credentials(state, fake_provider, CALLBACK) is False
    assert state.message.text == auth_flow.MSG_SHORT_PASSWORD
    assert fake_provider.network_calls() == []


def test_signup_sends_callback_and_asks_for_verification(fake_provider):
    state = AuthFormState(mode="signup", email="  Ada@ADA.edu.az ", password="correct horse")
    assert auth_flow.submit_credentials(state, fake_provider, CALLBACK) is True
    assert fake_provider.calls == [("sign_up", "ada@ada.edu.az", "correct horse", CALLBACK)]
    assert state.message.text == auth_flow.MSG_SIGNED_UP
    assert state.message.kind == "success"
    assert state.loading is False
    assert state.signed_in is False


def test_login_success_does_not_navigate_but_guard_observes(fake_provider, verified_session):
    guard = RouteGuard(SessionResolver(fake_provider))
    guard.mount()
    assert guard.state == "DENIED"

    def sign_in(email, password):
        fake_provider.calls.append(("sign_in_with_password", email, password))
        fake_provider.emit("SIGNED_IN", verified_session)
        return verified_session

    fake_provider.sign_in_with_password = sign_in
    state = AuthFormState(mode="login", email="ada@ada.edu.az", password="correct horse")

    assert auth_flow.submit_credentials(state, fake_provider, CALLBACK) is True
    assert state.signed_in is True
    assert state.phase == "EDITING"
    assert guard.state == "GRANTED"


def test_provider_error_is_shown_verbatim(fake_provider, provider_error):
    fake_provider.error = provider_error
    state = AuthFormState(mode="login", email="ada@ada.edu.az", password="wrong password")
    assert auth_flow.submit_credentials(state, fake_provider, CALLBACK) is False
    assert state.message.text == "Invalid login credentials"
    assert state.message.kind == "error"
    assert state.loading is False


def test_unexpected_error_uses_generic_message(fake_provider):
    fake_provider.error = ValueError("bad json")
    state = AuthFormState(mode="signup", email="ada@ada.edu.az", password="correct horse")
    assert auth_flow.submit_credentials(state, fake_provider, CALLBACK) is False
    assert state.message.text == auth_flow.MSG_AUTH_FAILED
    assert state.loading is False


def test_oauth_success_is_terminal(fake_provider):
    state = AuthFormState()
    assert auth_flow.start_oauth(state, fake_provider, "google", CALLBACK) is True
    assert state.phase == "EXTERNAL_REDIRECT"
    assert state.redirect_url == fake_provider.oauth_url
    assert fake_provider.calls == [("sign_in_with_oauth", "google", CALLBACK)]

    # Nothing else can happen on this screen once the browser is leaving.
    state.email, state.password = "ada@ada.edu.az", "correct horse"
    assert auth_flow.submit_credentials(state, fake_provider, CALLBACK) is False
    assert auth_flow.start_oauth(state, fake_provider, "google", CALLBACK) is False
    state.toggle_mode()
    assert state.mode == "signup"
    assert len(fake_provider.calls) == 1


def test_oauth_failure_resets_loading(fake_provider, provider_error):
    fake_provider.error = provider_error
    state = AuthFormState()
    assert auth_flow.start_oauth(state, fake_provider, "google", CALLBACK) is False
    assert state.phase == "EDITING"
    assert state.loading is False
    assert state.message.text == "Invalid login credentials"


def test_oauth_unexpected_failure_names_provider(fake_provider):
    fake_provider.error = RuntimeError("boom")
    state = AuthFormState()
    auth_flow.start_oauth(state, fake_provider, "google", CALLBACK)
    assert state.message.text == "Google sign-in failed."


def test_toggle_mode_clears_message(fake_provider):
    state = AuthFormState(email="bad")
    auth_flow.submit_credentials(state, fake_provider, CALLBACK)
    state.toggle_mode()
    assert state.mode == "login"
    assert state.message is None


def test_ensure_authenticated_session(fake_provider, verified_session):
    denied = auth_flow.ensure_authenticated_session(RouteGuard(SessionResolver(fake_provider)))
    assert denied.status == "STOP"
    assert denied.reason == "auth_required"

    fake_provider.session = verified_session
    granted = auth_flow.ensure_authenticated_session(RouteGuard(SessionResolver(fake_provider)))
    assert granted.status == "CONTINUE"
    assert granted.reason == "authenticated"
    assert granted.user_id == "u-1"
