"""Session DTOs shared across application layers."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

PASSWORD_PROVIDER = "email"


@dataclass(frozen=True)
class Session:
    user_id: str
    email: Optional[str]
    email_confirmed_at: Optional[datetime] = None
    auth_provider: str = PASSWORD_PROVIDER
    access_token: str = ""
    expires_at: Optional[int] = None


@dataclass(frozen=True)
class VerificationPolicy:
    """Decides whether a session counts as verified.

    trust_oauth_sessions: sessions created through an OAuth provider are
    accepted without a confirmation timestamp.
    """

    trust_oauth_sessions: bool = True


def is_oauth(session: Session) -> bool:
    return session.auth_provider != PASSWORD_PROVIDER


def is_verified(session: Optional[Session], policy: VerificationPolicy = VerificationPolicy()) -> bool:
    if session is None:
        return False
    if session.email_confirmed_at is not None:
        return True
    return policy.trust_oauth_sessions and is_oauth(session)
