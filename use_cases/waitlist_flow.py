"""Waitlist form validation and submission."""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from use_cases.errors import WaitlistWriteError
from use_cases.form_models import FormMessage, WaitlistFormState

log = logging.getLogger(__name__)

MSG_NAME_REQUIRED = "Please enter your name."
MSG_INVALID_EMAIL = "Please enter a valid email address."
MSG_SAVED = "Saved. Now create your account to continue."
MSG_SAVE_FAILED = "Could not save your request. Please try again."
MSG_UNEXPECTED = "Unexpected error. Try again later."


@dataclass(frozen=True)
class WaitlistPolicy:
    """Optional email-domain gate for the beta waitlist.

    An empty ``allowed_domains`` accepts any address.
    """

    allowed_domains: Tuple[str, ...] = ()

    @classmethod
    def from_setting(cls, raw: Optional[str]) -> "WaitlistPolicy":
        domains = []
        for part in (raw or "").split(","):
            part = part.strip().lower()
            if not part:
                continue
            domains.append(part if part.startswith("@") else "@" + part)
        return cls(allowed_domains=tuple(domains))

    @property
    def restricted(self) -> bool:
        return bool(self.allowed_domains)

    def permits(self, email: str) -> bool:
        if not self.restricted:
            return True
        email = email.strip().lower()
        return any(email.endswith(domain) for domain in self.allowed_domains)

    def rejection_message(self) -> str:
        return f"For the beta, please use your university email ({', '.join(self.allowed_domains)})."


def validate_entry(state: WaitlistFormState, policy: WaitlistPolicy) -> Optional[str]:
    """Return an error message, or None when the form may be submitted."""
    if not state.full_name.strip():
        return MSG_NAME_REQUIRED
    email = state.email.strip().lower()
    if not email or "@" not in email:
        return MSG_INVALID_EMAIL
    if not policy.permits(email):
        return policy.rejection_message()
    return None


def submit_waitlist(state: WaitlistFormState, repo, policy: WaitlistPolicy = WaitlistPolicy()) -> bool:
    """Validate and store one waitlist entry, updating ``state`` in place.

    Fields are cleared only after a successful write. Returns True on success.
    """
    state.message = None

    error = validate_entry(state, policy)
    if error:
        state.message = FormMessage.error(error)
        return False

    state.loading = True
    try:
        repo.insert_entry(
            full_name=state.full_name.strip(),
            email=state.email.strip().lower(),
            field=state.field.strip(),
        )
    except WaitlistWriteError as e:
        log.warning(f"Waitlist submission rejected by store: {e}")
        state.message = FormMessage.error(MSG_SAVE_FAILED)
        return False
    except Exception as e:
        log.error(f"Unexpected waitlist failure: {e}", exc_info=True)
        state.message = FormMessage.error(MSG_UNEXPECTED)
        return False
    finally:
        state.loading = False

    state.message = FormMessage.success(MSG_SAVED)
    state.clear_fields()
    return True
