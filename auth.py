import logging
import os
import secrets
import threading
import time
from dataclasses import dataclass, field
from typing import Optional

import streamlit as st
from streamlit.errors import StreamlitAPIException
from supabase import create_client

from use_cases.session_models import VerificationPolicy
from use_cases.waitlist_flow import WaitlistPolicy

log = logging.getLogger(__name__)


class ConfigurationError(Exception):
    pass


DEFAULT_APP_BASE_URL = "http://localhost:8501"
DEFAULT_OAUTH_PROVIDER = "google"
OAUTH_FLOW_TTL_SECONDS = 600
OAUTH_FLOW_PARAM = "flow"

TRUE_VALUES = {"1", "true", "yes", "on"}


def get_secret(key):
    try:
        return st.secrets.get(key)
    except (FileNotFoundError, StreamlitAPIException):
        return None


def _setting(key, default=None):
    value = get_secret(key)
    if value is None or value == "":
        value = os.getenv(key)
    if value is None or value == "":
        return default
    return value


def _flag(key, default):
    value = _setting(key)
    if value is None:
        return default
    return str(value).strip().lower() in TRUE_VALUES


@dataclass(frozen=True)
class AppSettings:
    supabase_url: str
    supabase_key: str
    app_base_url: str = DEFAULT_APP_BASE_URL
    oauth_provider: str = DEFAULT_OAUTH_PROVIDER
    waitlist_policy: WaitlistPolicy = field(default_factory=WaitlistPolicy)
    verification_policy: VerificationPolicy = field(default_factory=VerificationPolicy)


def load_settings() -> AppSettings:
    """Read settings from st.secrets, falling back to the environment.

    Raises ConfigurationError when the Supabase URL or public key is absent.
    """
    supabase_url = _setting("SUPABASE_URL")
    supabase_key = _setting("SUPABASE_ANON_KEY") or _setting("SUPABASE_KEY")

    missing = []
    if not supabase_url:
        missing.append("SUPABASE_URL")
    if not supabase_key:
        missing.append("SUPABASE_ANON_KEY")
    if missing:
        raise ConfigurationError(f"Missing configuration: {', '.join(missing)}")

    return AppSettings(
        supabase_url=str(supabase_url).strip(),
        supabase_key=str(supabase_key).strip(),
        app_base_url=str(_setting("APP_BASE_URL", DEFAULT_APP_BASE_URL)).strip().rstrip("/"),
        oauth_provider=str(_setting("OAUTH_PROVIDER", DEFAULT_OAUTH_PROVIDER)).strip(),
        waitlist_policy=WaitlistPolicy.from_setting(_setting("WAITLIST_ALLOWED_DOMAINS")),
        verification_policy=VerificationPolicy(
            trust_oauth_sessions=_flag("TRUST_OAUTH_SESSIONS", True),
        ),
    )


def create_supabase_client(settings: AppSettings):
    log.info(f"Creating Supabase client for {settings.supabase_url}")
    return create_client(settings.supabase_url, settings.supabase_key)


class PendingOAuthFlows:
    """Clients parked between an OAuth start and its callback.

    One instance is shared by every browser session, and each session runs
    its script on its own thread, so all access goes through the lock.
    """

    def __init__(self, ttl_seconds: float = OAUTH_FLOW_TTL_SECONDS):
        self.ttl_seconds = ttl_seconds
        self._entries = {}
        self._lock = threading.Lock()

    def __contains__(self, flow_id) -> bool:
        with self._lock:
            return flow_id in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _prune(self, now: float) -> None:
        # caller holds the lock
        expired = [k for k, v in self._entries.items() if now - v["created_at"] > self.ttl_seconds]
        for key in expired:
            del self._entries[key]

    def add(self, client, now: float) -> str:
        flow_id = secrets.token_urlsafe(16)
        with self._lock:
            self._prune(now)
            self._entries[flow_id] = {"client": client, "created_at": now}
        return flow_id

    def pop(self, flow_id: str):
        with self._lock:
            return self._entries.pop(flow_id, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


@st.cache_resource
def get_pending_oauth_flows() -> PendingOAuthFlows:
    # in-memory, resets on server reboot
    return PendingOAuthFlows()


def register_oauth_flow(client) -> str:
    """Park the client that starts an OAuth sign-in until its callback arrives.

    The browser comes back in a fresh script session, and the PKCE code
    verifier lives in this client's storage.
    """
    return get_pending_oauth_flows().add(client, time.time())


def claim_oauth_flow(flow_id: Optional[str]):
    if not flow_id:
        return None
    flows = get_pending_oauth_flows()
    entry = flows.pop(flow_id)
    if entry is None:
        log.warning("OAuth callback referenced an unknown or already claimed flow")
        return None
    if time.time() - entry["created_at"] > flows.ttl_seconds:
        log.warning("OAuth callback arrived after the flow expired")
        return None
    return entry["client"]


def discard_oauth_flow(flow_id: str) -> None:
    get_pending_oauth_flows().pop(flow_id)
