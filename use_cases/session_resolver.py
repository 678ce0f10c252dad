"""Session resolution over an injected identity provider.

The provider is any object exposing ``get_session()`` and
``on_auth_state_change(callback)``, where the callback receives
``(event, session)`` and the returned handle has ``unsubscribe()``.
"""

import logging
from typing import Any, Callable, Optional, Protocol

from use_cases.session_models import Session, VerificationPolicy, is_verified

log = logging.getLogger(__name__)

SessionListener = Callable[[Optional[Session]], None]


class SessionProvider(Protocol):
    def get_session(self) -> Optional[Session]: ...

    def on_auth_state_change(self, callback: Callable[[str, Optional[Session]], None]) -> Any: ...


class Subscription:
    """Handle returned by ``SessionResolver.subscribe``.

    Once ``unsubscribe()`` has been called the listener is never invoked
    again, even if the provider keeps emitting.
    """

    def __init__(self, listener: SessionListener):
        self._listener = listener
        self._provider_handle = None
        self.active = True

    def _deliver(self, event: str, session: Optional[Session]) -> None:
        if not self.active:
            log.debug(f"Dropped auth event {event} for a closed subscription")
            return
        self._listener(session)

    def unsubscribe(self) -> None:
        if not self.active:
            return
        self.active = False
        handle, self._provider_handle = self._provider_handle, None
        if handle is None:
            return
        try:
            handle.unsubscribe()
        except Exception as e:
            log.warning(f"Provider unsubscribe failed: {e}")


class SessionResolver:
    def __init__(self, provider: SessionProvider, policy: VerificationPolicy = VerificationPolicy()):
        self._provider = provider
        self.policy = policy

    def get_current_session(self) -> Optional[Session]:
        """Current session or None. Provider failures are logged, never raised."""
        try:
            return self._provider.get_session()
        except Exception as e:
            log.error(f"Session lookup failed: {e}", exc_info=True)
            return None

    def subscribe(self, on_change: SessionListener) -> Subscription:
        subscription = Subscription(on_change)
        subscription._provider_handle = self._provider.on_auth_state_change(subscription._deliver)
        return subscription

    def is_verified(self, session: Optional[Session]) -> bool:
        return is_verified(session, self.policy)
