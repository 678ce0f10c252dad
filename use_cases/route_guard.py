"""Route guard state machine for protected screens."""

import logging
from enum import Enum
from typing import Optional

from use_cases.session_models import Session
from use_cases.session_resolver import SessionResolver, Subscription

log = logging.getLogger(__name__)


class GuardState(str, Enum):
    RESOLVING = "RESOLVING"
    DENIED = "DENIED"
    GRANTED = "GRANTED"


class GuardDecision(str, Enum):
    PLACEHOLDER = "PLACEHOLDER"
    REDIRECT = "REDIRECT"
    RENDER = "RENDER"


_DECISIONS = {
    GuardState.RESOLVING: GuardDecision.PLACEHOLDER,
    GuardState.DENIED: GuardDecision.REDIRECT,
    GuardState.GRANTED: GuardDecision.RENDER,
}


class RouteGuard:
    """Tracks whether the wrapped screen may render.

    RESOLVING is only ever the initial state. After the first session read
    (or the first pushed event, whichever lands first) the guard moves
    between DENIED and GRANTED on every push until it is unmounted.
    """

    def __init__(self, resolver: SessionResolver, name: str = "dashboard"):
        self._resolver = resolver
        self.name = name
        self.state = GuardState.RESOLVING
        self.session: Optional[Session] = None
        self.mounted = False
        self._subscription: Optional[Subscription] = None
        self._pushed = False

    def mount(self) -> GuardState:
        if self.mounted:
            return self.state
        self.mounted = True
        self._subscription = self._resolver.subscribe(self._on_session_change)
        session = self._resolver.get_current_session()
        # An event pushed during the initial read is newer than its result.
        if self.mounted and not self._pushed:
            self._apply(session)
        return self.state

    def unmount(self) -> None:
        if not self.mounted:
            return
        self.mounted = False
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    def decision(self) -> GuardDecision:
        return _DECISIONS[self.state]

    def _on_session_change(self, session: Optional[Session]) -> None:
        if not self.mounted:
            return
        self._pushed = True
        self._apply(session)

    def _apply(self, session: Optional[Session]) -> None:
        new_state = GuardState.GRANTED if self._resolver.is_verified(session) else GuardState.DENIED
        if new_state != self.state:
            log.info(f"Guard '{self.name}': {self.state.value} -> {new_state.value}")
        self.session = session
        self.state = new_state
