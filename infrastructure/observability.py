"""
Centralized Observability Infrastructure.
Sets up logging and, when SENTRY_DSN is present, the Sentry SDK.
Everything is driven by environment variables.
"""

import os
import logging
import re
from typing import Any, Dict

log = logging.getLogger(__name__)

SENSITIVE_KEYS = {"password", "access_token", "refresh_token", "supabase_key", "apikey", "authorization"}

# Patterns to scrub in Sentry events
SENSITIVE_PATTERNS = [
    re.compile(r"eyJ[A-Za-z0-9_\-]+\.[A-Za-z0-9_\-]+\.[A-Za-z0-9_\-]+"),  # JWTs (session and anon keys)
    re.compile(r"([a-zA-Z0-9_\-]{40,})"),  # long opaque tokens
]


def _mask_string(val: str) -> str:
    for pattern in SENSITIVE_PATTERNS:
        val = pattern.sub("[REDACTED]", val)
    return val


def _recursive_scrub(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {
            k: "[REDACTED]" if str(k).lower() in SENSITIVE_KEYS else _recursive_scrub(v)
            for k, v in obj.items()
        }
    elif isinstance(obj, list):
        return [_recursive_scrub(i) for i in obj]
    elif isinstance(obj, str):
        return _mask_string(obj)
    return obj


def _scrub_sensitive_data(event: Dict[str, Any], hint: Dict[str, Any]) -> Dict[str, Any]:
    """
    Sentry before_send hook. Masks passwords, session tokens and API keys
    in stack frame locals, request data and breadcrumbs.
    """
    if "exception" in event and "values" in event["exception"]:
        for exc in event["exception"]["values"]:
            if "value" in exc and isinstance(exc["value"], str):
                exc["value"] = _mask_string(exc["value"])
            frames = (exc.get("stacktrace") or {}).get("frames") or []
            for frame in frames:
                if "vars" in frame:
                    frame["vars"] = _recursive_scrub(frame["vars"])
    if "request" in event:
        event["request"] = _recursive_scrub(event["request"])
    if "breadcrumbs" in event:
        event["breadcrumbs"] = _recursive_scrub(event["breadcrumbs"])
    return event


def setup_observability() -> None:
    """
    Initializes global system logging and Sentry (if DSN is present).
    Should be called once at application startup.
    """
    log_level_str = os.getenv("LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    sentry_dsn = os.getenv("SENTRY_DSN")
    if sentry_dsn:
        import sentry_sdk
        sentry_env = os.getenv("SENTRY_ENV", "development")

        sentry_sdk.init(
            dsn=sentry_dsn,
            environment=sentry_env,
            traces_sample_rate=float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.0")),
            send_default_pii=False,
            before_send=_scrub_sensitive_data
        )
        log.info(f"Sentry SDK initialized (env: {sentry_env})")
    else:
        log.info("SENTRY_DSN not provided. Running without Sentry.")

    # The supabase client talks HTTP through httpx
    for noisy in ("httpx", "httpcore", "hpack"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
