"""Admin credential checks."""

import secrets

import logfire

from folio.config import AuthSettings

from .base import Service


class AuthService(Service):
    """Checks a username/password pair against the configured admin credential.

    Stateless: every request is checked again, there are no sessions or
    tokens.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize auth service.

        Args:
            auth_settings: Configured admin credential
        """
        self.auth_settings = auth_settings

    @property
    def realm(self) -> str:
        """Realm advertised in Basic auth challenges."""
        return self.auth_settings.realm

    def verify(self, username: str | None, password: str | None) -> bool:
        """Check credentials in constant time.

        Args:
            username: Supplied username
            password: Supplied password

        Returns:
            True if both match the configured values
        """
        if username is None or password is None:
            return False

        username_ok = secrets.compare_digest(
            username.encode("utf-8"), self.auth_settings.admin_username.encode("utf-8")
        )
        password_ok = secrets.compare_digest(
            password.encode("utf-8"), self.auth_settings.admin_password.encode("utf-8")
        )
        if not (username_ok and password_ok):
            logfire.info("Admin credential rejected", username=username)
            return False
        return True
