from datetime import datetime, timezone

import pytest

from use_cases.errors import IdentityProviderError, WaitlistWriteError
from use_cases.session_models import Session


class FakeHandle:
    def __init__(self, provider, callback):
        self.provider = provider
        self.callback = callback
        self.unsubscribed = 0

    def unsubscribe(self):
        self.unsubscribed += 1
        if not self.provider.leaky and self.callback in self.provider.listeners:
            self.provider.listeners.remove(self.callback)


class FakeIdentityProvider:
    """In-memory stand-in for SupabaseIdentityProvider.

    leaky=True keeps callbacks registered after unsubscribe, like a provider
    that is slow to drop listeners.
    """

    def __init__(self, session=None, leaky=False):
        self.session = session
        self.leaky = leaky
        self.listeners = []
        self.handles = []
        self.calls = []
        self.error = None
        self.on_get_session = None
        self.oauth_url = "https://accounts.example.com/o/oauth2/consent"

    def get_session(self):
        self.calls.append(("get_session",))
        if self.on_get_session is not None:
            self.on_get_session()
        if self.error is not None:
            raise self.error
        return self.session

    def on_auth_state_change(self, callback):
        self.listeners.append(callback)
        handle = FakeHandle(self, callback)
        self.handles.append(handle)
        return handle

    def emit(self, event, session):
        self.session = session
        for callback in list(self.listeners):
            callback(event, session)

    def sign_up(self, email, password, email_redirect_to):
        self.calls.append(("sign_up", email, password, email_redirect_to))
        if self.error is not None:
            raise self.error
        return None

    def sign_in_with_password(self, email, password):
        self.calls.append(("sign_in_with_password", email, password))
        if self.error is not None:
            raise self.error
        return self.session

    def sign_in_with_oauth(self, provider, redirect_to):
        self.calls.append(("sign_in_with_oauth", provider, redirect_to))
        if self.error is not None:
            raise self.error
        return self.oauth_url

    def network_calls(self):
        return [c for c in self.calls if c[0] != "get_session"]


class FakeWaitlistStore:
    def __init__(self):
        self.rows = []
        self.error = None

    def insert_entry(self, full_name, email, field):
        if self.error is not None:
            raise self.error
        self.rows.append({"full_name": full_name, "email": email, "field": field})


@pytest.fixture
def fake_provider():
    return FakeIdentityProvider()


@pytest.fixture
def waitlist_store():
    return FakeWaitlistStore()


@pytest.fixture
def verified_session():
    return Session(
        user_id="u-1",
        email="ada@ada.edu.az",
        email_confirmed_at=datetime(2025, 1, 10, tzinfo=timezone.utc),
    )


@pytest.fixture
def unverified_session():
    return Session(user_id="u-2", email="new@ada.edu.az", email_confirmed_at=None)


@pytest.fixture
def provider_error():
    return IdentityProviderError("Invalid login credentials")


@pytest.fixture
def store_error():
    return WaitlistWriteError("duplicate key value violates unique constraint")


@pytest.fixture
def leaky_provider():
    return FakeIdentityProvider(leaky=True)
