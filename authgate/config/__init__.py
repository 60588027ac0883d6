"""
Configuration for the Auth0 gate.

- resolve / resolve_settings build the immutable Settings
- environment_defaults reads AUTH0_* and FLASK_SECRET_KEY
- load_options_yaml reads an override bag from YAML
"""
from authgate.config.env_loader import environment_defaults
from authgate.config.loader import load_options_yaml
from authgate.config.resolver import BUILTIN_DEFAULTS, Settings, identity, resolve, resolve_settings

__all__ = [
    'BUILTIN_DEFAULTS',
    'Settings',
    'environment_defaults',
    'identity',
    'load_options_yaml',
    'resolve',
    'resolve_settings',
]
