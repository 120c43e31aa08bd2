"""Identity adapter backed by Streamlit's built-in OIDC sign-in."""

import streamlit as st

from src.application.ports.identity import AuthenticatedUser, IdentityPort


class StreamlitIdentityProvider(IdentityPort):
    """Resolve the signed-in user from ``st.user``.

    The provider itself is configured in ``.streamlit/secrets.toml`` under
    ``[auth]``; this adapter only reads the resulting claims.
    """

    def __init__(self, provider: str | None = None, streamlit_module=None) -> None:
        """Initialize the adapter.

        Args:
            provider: Optional named provider from the ``[auth]`` secrets.
            streamlit_module: Streamlit module override for tests.
        """
        self._provider = provider
        self._st = streamlit_module or st

    def current_user(self) -> AuthenticatedUser | None:
        user_info = self._st.user
        if not user_info.get("is_logged_in", False):
            return None
        subject = user_info.get("sub") or user_info.get("email")
        if not subject:
            return None
        return AuthenticatedUser(
            id=str(subject),
            email=user_info.get("email"),
            name=user_info.get("name"),
        )

    def login(self) -> None:
        if self._provider:
            self._st.login(self._provider)
        else:
            self._st.login()

    def logout(self) -> None:
        self._st.logout()


__all__ = ["StreamlitIdentityProvider"]
