"""
Session Gate

Holds the login form state and decides whether a login attempt succeeds.

DESIGN DECISION: Credentials are fixed values from configuration and
are compared for exact, case-sensitive equality. There is no lockout,
no rate limiting and no attempt counting.

The error message is sticky: editing either field after a failed attempt
leaves it visible. Only the next submit clears or replaces it.
"""

from typing import Optional

from finpulse import FinPulseError
from finpulse.config import AuthSettings, get_settings
from finpulse.models.expense import LoginOutcome, Screen


class AuthenticationFailure(FinPulseError):
    """Raised when submitted credentials do not match."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class SessionGate:
    """
    Login gate state.

    States: awaiting input (error is empty) or error shown.
    """

    def __init__(self, settings: Optional[AuthSettings] = None):
        self._settings = settings or get_settings().auth
        self.identifier = ""
        self.secret = ""
        self.error = ""

    @property
    def has_error(self) -> bool:
        return bool(self.error)

    def set_identifier(self, text: str) -> None:
        self.identifier = text

    def set_secret(self, text: str) -> None:
        self.secret = text

    def verify(self, identifier: str, secret: str) -> None:
        """
        Check a credential pair.

        Raises:
            AuthenticationFailure: If either value differs from the configured one
        """
        if identifier == self._settings.username and secret == self._settings.password:
            return
        raise AuthenticationFailure(self._settings.error_message)

    def attempt_login(
        self,
        identifier: Optional[str] = None,
        secret: Optional[str] = None,
    ) -> LoginOutcome:
        """
        Submit the login form.

        Args:
            identifier: Replaces the username field first, if given
            secret: Replaces the password field first, if given

        Returns:
            LoginOutcome pointing at the dashboard on success, or back at
            the login screen. The message to show is kept in `error`.
        """
        if identifier is not None:
            self.set_identifier(identifier)
        if secret is not None:
            self.set_secret(secret)

        try:
            self.verify(self.identifier, self.secret)
        except AuthenticationFailure as e:
            self.error = e.message
            return LoginOutcome(success=False, screen=Screen.LOGIN)

        self.error = ""
        return LoginOutcome(success=True, screen=Screen.DASHBOARD)
