"""Application layer contracts for orchestrating high-level flows."""

from .errors import IdentityProviderError, WaitlistWriteError
from .auth_flow import AuthFlowResult, AuthFlowStatus, ensure_authenticated_session, start_oauth, submit_credentials
from .form_models import AuthFormState, FormMessage, WaitlistFormState
from .route_guard import GuardDecision, GuardState, RouteGuard
from .routing import Route, RouteResolution, callback_destination, resolve_route
from .session_models import Session, VerificationPolicy, is_verified
from .session_resolver import SessionResolver, Subscription
from .waitlist_flow import WaitlistPolicy, submit_waitlist

__all__ = [
    "AuthFlowResult",
    "AuthFlowStatus",
    "AuthFormState",
    "FormMessage",
    "GuardDecision",
    "GuardState",
    "IdentityProviderError",
    "Route",
    "RouteGuard",
    "RouteResolution",
    "Session",
    "SessionResolver",
    "Subscription",
    "VerificationPolicy",
    "WaitlistFormState",
    "WaitlistPolicy",
    "WaitlistWriteError",
    "callback_destination",
    "ensure_authenticated_session",
    "is_verified",
    "resolve_route",
    "start_oauth",
    "submit_credentials",
    "submit_waitlist",
]
