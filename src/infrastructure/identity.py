"""Identity adapter for single-user deployments."""

from src.application.ports.identity import AuthenticatedUser, IdentityPort


class LocalIdentityProvider(IdentityPort):
    """Resolve every visitor to one configured user.

    Used when ``NETWORTH_AUTH_MODE=local``; there is no sign-in flow, so
    ``login`` and ``logout`` do nothing.
    """

    def __init__(self, user_id: str, name: str | None = "Local user") -> None:
        self._user = AuthenticatedUser(id=user_id, name=name)

    def current_user(self) -> AuthenticatedUser | None:
        return self._user

    def login(self) -> None:
        return None

    def logout(self) -> None:
        return None


__all__ = ["LocalIdentityProvider"]
