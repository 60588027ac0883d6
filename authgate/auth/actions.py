"""
Outcomes returned by the gate.

Redirecting a user is an ordinary outcome, so it is modelled as a value.
Only a broken integration (completion without a user) is raised.
"""
from dataclasses import dataclass


class MissingUserError(RuntimeError):
    """Login completion ran without an authenticated user in the session."""


@dataclass(frozen=True)
class PassThrough:
    """Let the request through to the protected handler."""


@dataclass(frozen=True)
class RedirectToLogin:
    """Send the user to the login entry point."""

    path: str


@dataclass(frozen=True)
class RedirectTo:
    """Send the user to an arbitrary path after a login attempt."""

    path: str


PASS_THROUGH = PassThrough()
