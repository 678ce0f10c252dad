"""Per-screen form state DTOs."""

from dataclasses import dataclass
from typing import Literal, Optional

MessageKind = Literal["success", "error"]


@dataclass(frozen=True)
class FormMessage:
    text: str
    kind: MessageKind

    @classmethod
    def error(cls, text: str) -> "FormMessage":
        return cls(text=text, kind="error")

    @classmethod
    def success(cls, text: str) -> "FormMessage":
        return cls(text=text, kind="success")


@dataclass
class WaitlistFormState:
    full_name: str = ""
    email: str = ""
    field: str = ""
    loading: bool = False
    message: Optional[FormMessage] = None
    revision: int = 0

    def clear_fields(self) -> None:
        self.full_name = ""
        self.email = ""
        self.field = ""
        self.revision += 1


AuthMode = Literal["signup", "login"]
AuthPhase = Literal["EDITING", "EXTERNAL_REDIRECT"]


@dataclass
class AuthFormState:
    mode: AuthMode = "signup"
    email: str = ""
    password: str = ""
    loading: bool = False
    message: Optional[FormMessage] = None
    phase: AuthPhase = "EDITING"
    redirect_url: Optional[str] = None
    signed_in: bool = False

    def toggle_mode(self) -> None:
        if self.phase != "EDITING":
            return
        self.mode = "login" if self.mode == "signup" else "signup"
        self.message = None
