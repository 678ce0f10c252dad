"""Startup orchestration: configuration check and per-session client wiring."""

import logging
from dataclasses import dataclass
from typing import Literal, Optional, Tuple

import auth
from utils import session_manager

log = logging.getLogger(__name__)

StartupStatus = Literal["CONTINUE", "STOP"]


@dataclass(frozen=True)
class StartupResult:
    """Result contract for startup/bootstrap orchestration."""

    status: StartupStatus
    planned_steps: Tuple[str, ...]
    settings: Optional[auth.AppSettings] = None
    error: Optional[str] = None


def run_startup() -> StartupResult:
    """Load configuration and make sure this browser session has a client."""
    executed_steps = []

    try:
        settings = auth.load_settings()
    except auth.ConfigurationError as e:
        log.error(f"Startup aborted: {e}")
        return StartupResult(status="STOP", planned_steps=tuple(executed_steps), error=str(e))
    executed_steps.append("load_settings")

    session_manager.init_session_state()
    executed_steps.append("init_session_state")

    if session_manager.ensure_identity(settings):
        executed_steps.append("create_identity_client")

    return StartupResult(status="CONTINUE", planned_steps=tuple(executed_steps), settings=settings)
