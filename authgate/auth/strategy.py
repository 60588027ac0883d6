"""
Auth0 credential exchange using authlib's Flask OAuth client.
"""
import logging
from typing import Any, Callable, Mapping, Optional

from authlib.integrations.base_client import OAuthError
from authlib.integrations.flask_client import OAuth
from flask import request

logger = logging.getLogger(__name__)

CLIENT_NAME = 'auth0'


class Auth0Strategy:
    """
    Auth0 OpenID Connect strategy.

    Talks to the provider through authlib; produces either a verified
    profile or a failure (None). Validating domain and client credentials
    is left to authlib and the provider.
    """

    def __init__(self, provider_config: Mapping, verify: Callable[[Any], Any]):
        """
        Initialize the strategy

        Args:
            provider_config: domain, client_id, client_secret, scope
            verify: Called with the profile; returning None rejects it
        """
        self.provider_config = provider_config
        self.verify = verify
        self.oauth = OAuth()
        self.client = None

    def init_app(self, app):
        """
        Register the Auth0 client on app

        Args:
            app: Flask app instance
        """
        # authlib needs the app before a client can be registered
        self.oauth.init_app(app)

        domain = self.provider_config.get('domain')
        metadata_url = f"https://{domain}/.well-known/openid-configuration" if domain else None

        self.client = self.oauth.register(
            name=CLIENT_NAME,
            client_id=self.provider_config.get('client_id'),
            client_secret=self.provider_config.get('client_secret'),
            server_metadata_url=metadata_url,
            client_kwargs={'scope': self.provider_config.get('scope') or 'openid email profile'},
        )

    @staticmethod
    def is_callback(args: Mapping) -> bool:
        """True when the request is the provider coming back (code or error present)."""
        return 'code' in args or 'error' in args

    def authorize_redirect(self, redirect_uri: str):
        """Start the login by redirecting to the provider."""
        return self.client.authorize_redirect(redirect_uri)

    def exchange(self) -> Optional[Any]:
        """
        Exchange the callback's authorization code for a profile.

        Returns:
            The verified profile, or None if the exchange failed
        """
        error = request.args.get('error')
        if error:
            logger.warning(f"Auth0 returned error: {error} ({request.args.get('error_description', '')})")
            return None

        try:
            token = self.client.authorize_access_token()
        except OAuthError as e:
            logger.warning(f"Auth0 token exchange failed: {e}")
            return None

        profile = token.get('userinfo') if token else None
        if not profile:
            logger.warning("Auth0 token response carried no userinfo")
            return None

        profile = self.verify(profile)
        if profile is None:
            logger.warning("Auth0 profile rejected by verify callback")
        return profile
