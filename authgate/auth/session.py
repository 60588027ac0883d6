"""
Session fields used by the gate.

Wraps any mutable mapping (normally flask.session) and exposes the two
logical fields the gate works with plus the stored user profile.
"""
from collections.abc import MutableMapping
from typing import Any, Optional

USER_KEY = 'user'
NEXT_URL_KEY = 'next_url'


class GateSession:
    """
    Per-client view over a session store.

    Attributes:
        store: The underlying mapping (flask.session, or a dict in tests)
    """

    def __init__(self, store: MutableMapping):
        self.store = store

    @property
    def user(self) -> Optional[Any]:
        """Serialized profile stored by the login callback, or None"""
        return self.store.get(USER_KEY)

    @user.setter
    def user(self, value):
        self.store[USER_KEY] = value

    @property
    def is_authenticated(self) -> bool:
        return self.store.get(USER_KEY) is not None

    @property
    def captured_return_url(self) -> Optional[str]:
        return self.store.get(NEXT_URL_KEY)

    @captured_return_url.setter
    def captured_return_url(self, value: str):
        self.store[NEXT_URL_KEY] = value

    def pop_captured_return_url(self) -> Optional[str]:
        """Read the capture and remove it, whether or not it was set."""
        return self.store.pop(NEXT_URL_KEY, None)
