"""Port for resolving the signed-in user."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity resolved from the external provider."""

    id: str
    email: str | None = None
    name: str | None = None


class IdentityPort(Protocol):
    """Port exposing the current user and the sign-in entry point."""

    def current_user(self) -> AuthenticatedUser | None:
        """Return the signed-in user or None."""

    def login(self) -> None:
        """Send the visitor to the provider's sign-in flow."""

    def logout(self) -> None:
        """End the current session."""


__all__ = ["AuthenticatedUser", "IdentityPort"]
