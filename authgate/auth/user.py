"""
User class for Flask-Login.
"""
from flask_login import UserMixin


class User(UserMixin):
    """
    Flask-Login user wrapping the provider profile.

    The profile is kept as an opaque bag; nothing in it is required.

    Attributes:
        profile: Profile as returned by the deserialize hook
    """

    def __init__(self, profile):
        self.profile = profile

    def get_id(self):
        """
        Identifier for Flask-Login.

        Returns:
            The profile's user_id or sub claim, falling back to 'anonymous-profile'
        """
        if isinstance(self.profile, dict):
            return str(self.profile.get('user_id') or self.profile.get('sub') or 'anonymous-profile')
        return str(getattr(self.profile, 'id', None) or 'anonymous-profile')

    @staticmethod
    def from_session(stored, deserialize) -> 'User':
        """
        Create a User from the value stored in the session.

        Args:
            stored: Serialized profile from the session
            deserialize: The deserialize_user hook

        Returns:
            User instance
        """
        return User(deserialize(stored))

    def __repr__(self):
        return f"<User {self.get_id()}>"
