"""
flask-auth0-gate: gate Flask routes behind an Auth0 login.

Usage:
    from authgate import Auth0Gate
    gate = Auth0Gate(app)
"""

from authgate.auth import (
    Auth0Gate,
    AuthGate,
    GateSession,
    MissingUserError,
    PassThrough,
    RedirectTo,
    RedirectToLogin,
)
from authgate.config import Settings, load_options_yaml, resolve, resolve_settings
from authgate.error_handlers import register_error_handlers

__all__ = [
    'Auth0Gate',
    'AuthGate',
    'GateSession',
    'MissingUserError',
    'PassThrough',
    'RedirectTo',
    'RedirectToLogin',
    'Settings',
    'load_options_yaml',
    'register_error_handlers',
    'resolve',
    'resolve_settings',
]
