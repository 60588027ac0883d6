"""
Authentication gate for Flask apps using Auth0.

This module provides:
- AuthGate, the per-request gate and redirect-capture logic
- Auth0Gate, the Flask extension wiring login/callback routes
- Auth0Strategy, the authlib-backed credential exchange
- GateSession and User for session and Flask-Login integration
- Gate actions and MissingUserError
"""

from authgate.auth.actions import (
    PASS_THROUGH,
    MissingUserError,
    PassThrough,
    RedirectTo,
    RedirectToLogin,
)
from authgate.auth.gate import AuthGate
from authgate.auth.session import GateSession
from authgate.auth.strategy import Auth0Strategy
from authgate.auth.user import User
from authgate.auth.flask_gate import Auth0Gate

__all__ = [
    # Actions
    'PASS_THROUGH',
    'PassThrough',
    'RedirectTo',
    'RedirectToLogin',
    'MissingUserError',
    # Gate
    'AuthGate',
    'GateSession',
    # Flask integration
    'Auth0Gate',
    'Auth0Strategy',
    'User',
]
