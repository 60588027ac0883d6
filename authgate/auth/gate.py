"""
The authentication gate.

Decides per request whether to let it through or send the user to login,
remembers where the user was going, and hands that destination back once
after a successful provider callback.

Per session:

    Anonymous --evaluate (denied)--> PendingLogin(captured)
    PendingLogin --strategy succeeds--> Authenticated   (capture consumed)
    PendingLogin --strategy fails-->    Anonymous       (capture kept)

The gate itself holds only Settings, so one instance can serve any number
of concurrent requests. All mutable state lives in the client's session.
"""
import logging

from authgate.auth.actions import PASS_THROUGH, MissingUserError, RedirectTo, RedirectToLogin
from authgate.auth.session import GateSession
from authgate.config.resolver import Settings

logger = logging.getLogger(__name__)


class AuthGate:
    """
    Authentication gate state machine.

    Args:
        settings: Resolved gate settings
    """

    def __init__(self, settings: Settings):
        self.settings = settings

    def evaluate(self, path: str, session: GateSession):
        """
        Classify a request for a protected resource.

        Args:
            path: Original path (with query string) of the request
            session: The client's session

        Returns:
            PassThrough if the session is authenticated, otherwise
            RedirectToLogin after recording path as the capture
        """
        if session.is_authenticated:
            return PASS_THROUGH

        # Last denied request wins
        session.captured_return_url = path
        logger.debug(f"Denied {path}, redirecting to {self.settings.login_path}")
        return RedirectToLogin(self.settings.login_path)

    def complete_login(self, session: GateSession) -> RedirectTo:
        """
        Finish a successful login by consuming the captured destination.

        Must only run after the strategy has stored a user in the session.

        Args:
            session: The client's session

        Returns:
            RedirectTo the captured path, or default_return_path if none

        Raises:
            MissingUserError: If the session holds no user
        """
        if not session.is_authenticated:
            raise MissingUserError('Login completed without an authenticated user in the session')

        captured = session.pop_captured_return_url()
        target = captured or self.settings.default_return_path
        logger.debug(f"Login complete, redirecting to {target}")
        return RedirectTo(target)

    def fail_login(self, session: GateSession) -> RedirectTo:
        """Failed credential exchange. The capture is left for a retry."""
        return RedirectTo(self.settings.failure_path)
