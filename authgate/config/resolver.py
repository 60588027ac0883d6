"""
Settings resolution for the Auth0 gate.

Merges caller overrides over environment-derived and built-in defaults and
produces an immutable Settings value. Nothing passed in is ever mutated, so
the same defaults can be resolved again with different overrides.

Usage:
    from authgate.config import resolve_settings

    settings = resolve_settings({'auth0': {'client_id': 'abc'}, 'login_path': '/login'})
"""
import copy
import logging
import uuid
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Optional

from authgate.config.env_loader import environment_defaults

logger = logging.getLogger(__name__)


def identity(value):
    """Default serialize/deserialize/verify hook: hand the value back unchanged."""
    return value


BUILTIN_DEFAULTS = MappingProxyType({
    'auth0': MappingProxyType({
        'domain': None,
        'client_id': None,
        'client_secret': None,
        'callback_path': '/auth/callback',
        'scope': 'openid email profile',
    }),
    'login_path': '/auth/login',
    # None means "same as login_path"
    'failure_path': None,
    'default_return_path': '/',
    'secret_key': None,
    'use_default_failure_route': False,
    'serialize_user': identity,
    'deserialize_user': identity,
    'verify': identity,
})


@dataclass(frozen=True)
class Settings:
    """Resolved gate configuration. Built once, never changed."""

    provider_config: Mapping
    login_path: str
    failure_path: str
    default_return_path: str
    secret_key: str
    use_default_failure_route: bool = False
    serialize_user: Callable[[Any], Any] = identity
    deserialize_user: Callable[[Any], Any] = identity
    verify: Callable[[Any], Any] = identity

    @property
    def callback_path(self) -> str:
        return self.provider_config.get('callback_path')


def _merge(base: Mapping, overrides: Optional[Mapping], skip_none: bool = False) -> dict:
    """
    Two-level merge of overrides onto base, returning a new dict.

    A top-level key in overrides replaces the base value; when the base value
    is itself a mapping only the sub-keys present in the override are replaced.

    Args:
        base: Defaults to merge onto (not modified)
        overrides: Values to apply (not modified)
        skip_none: Ignore override values that are None

    Returns:
        New dict holding the merged values

    Raises:
        ValueError: If a mapping-valued option is overridden with a non-mapping
    """
    merged = {
        key: dict(value) if isinstance(value, Mapping) else value
        for key, value in base.items()
    }
    if not overrides:
        return merged

    for key, value in overrides.items():
        if key not in merged:
            logger.warning(f"Ignoring unknown gate option '{key}'")
            continue
        if isinstance(merged[key], dict):
            # An empty YAML section ("auth0:") loads as None
            if value is None:
                continue
            if not isinstance(value, Mapping):
                raise ValueError(f"Gate option '{key}' must be a mapping, got {type(value).__name__}")
            for sub_key, sub_value in value.items():
                if skip_none and sub_value is None:
                    continue
                merged[key][sub_key] = copy.deepcopy(sub_value)
        elif not (skip_none and value is None):
            merged[key] = value
    return merged


def resolve(builtin_defaults: Mapping, env_defaults: Optional[Mapping],
            user_overrides: Optional[Mapping]) -> Settings:
    """
    Build Settings from built-in defaults, environment defaults and overrides.

    Environment values are applied first (absent ones keep the built-in
    default), then user overrides, so explicit provider fields always win.
    Missing provider fields are passed through as None.

    Args:
        builtin_defaults: Built-in option bag (see BUILTIN_DEFAULTS)
        env_defaults: Option bag derived from the environment
        user_overrides: Options supplied by the caller

    Returns:
        Settings instance

    Raises:
        ValueError: If a mapping-valued option (auth0) is given a non-mapping
    """
    merged = _merge(builtin_defaults, env_defaults, skip_none=True)
    merged = _merge(merged, user_overrides)

    login_path = merged['login_path']
    failure_path = merged['failure_path'] or login_path
    secret_key = merged['secret_key'] or uuid.uuid4().hex

    return Settings(
        provider_config=MappingProxyType(merged['auth0']),
        login_path=login_path,
        failure_path=failure_path,
        default_return_path=merged['default_return_path'],
        secret_key=secret_key,
        use_default_failure_route=bool(merged['use_default_failure_route']),
        serialize_user=merged['serialize_user'] or identity,
        deserialize_user=merged['deserialize_user'] or identity,
        verify=merged['verify'] or identity,
    )


def resolve_settings(overrides: Optional[Mapping] = None, environ: Optional[Mapping] = None) -> Settings:
    """Resolve Settings against BUILTIN_DEFAULTS and the process environment."""
    return resolve(BUILTIN_DEFAULTS, environment_defaults(environ), overrides)
