"""
Flask integration for the Auth0 gate.

Usage:
    from authgate import Auth0Gate

    gate = Auth0Gate(app, {'client_id': '...'}, login_path='/login')

    @app.route('/secret')
    @gate.login_required
    def secret():
        user = gate.get_current_user()
        ...

    # Or gate a whole blueprint:
    gate.protect(admin_bp)

Options (keyword arguments, or a YAML file via load_options_yaml):
    auth0:                      # provider config; AUTH0_DOMAIN, AUTH0_CLIENT_ID
      domain: tenant.auth0.com  # and AUTH0_CLIENT_SECRET fill in what is unset
      client_id: ...
      client_secret: ...
      callback_path: /auth/callback
    login_path: /auth/login
    failure_path: /auth/login   # defaults to login_path
    default_return_path: /
    use_default_failure_route: false   # answer 403 at failure_path
    serialize_user / deserialize_user / verify: callables, identity by default
"""
import logging
from functools import wraps

from flask import Blueprint, abort, redirect, request, session, url_for
from flask_login import LoginManager, current_user, login_user

from authgate.auth.actions import RedirectToLogin
from authgate.auth.gate import AuthGate
from authgate.auth.session import GateSession
from authgate.auth.strategy import Auth0Strategy
from authgate.auth.user import User
from authgate.config.resolver import resolve_settings

logger = logging.getLogger(__name__)

BLUEPRINT_NAME = 'auth0_gate'


def _requested_path() -> str:
    """App-relative path and query string of the current request."""
    # A leading // would make the later redirect protocol-relative
    path = '/' + request.path.lstrip('/')
    if request.query_string:
        path = f"{path}?{request.query_string.decode('utf-8', 'replace')}"
    return path


def _app_redirect(path: str):
    """Redirect to an app-relative path, honouring the mount point (SCRIPT_NAME)."""
    if path.startswith('/') and not path.startswith('//'):
        path = request.script_root + path
    return redirect(path)


class Auth0Gate:
    """
    Flask extension wiring Auth0 login into an app.

    Settings are resolved once when the extension is created; the views it
    registers are closures over this instance.
    """

    def __init__(self, app=None, auth0_options=None, **options):
        """
        Initialize the gate

        Args:
            app: Optional Flask app instance (or call init_app later)
            auth0_options: Provider overrides (domain, client_id, client_secret, callback_path, scope)
            **options: Gate overrides (login_path, failure_path, ...)
        """
        overrides = dict(options)
        if auth0_options:
            overrides['auth0'] = {**(overrides.get('auth0') or {}), **auth0_options}

        self.settings = resolve_settings(overrides)
        self.gate = AuthGate(self.settings)
        self.strategy = Auth0Strategy(self.settings.provider_config, self.settings.verify)
        self.login_manager = LoginManager()
        self.app = None

        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        """
        Register the session secret, Flask-Login and the auth routes on app

        Args:
            app: Flask app instance
        """
        self.app = app

        if not app.config.get('SECRET_KEY'):
            app.config['SECRET_KEY'] = self.settings.secret_key

        self.strategy.init_app(app)
        self.login_manager.init_app(app)

        deserialize = self.settings.deserialize_user

        @self.login_manager.user_loader
        def load_user(user_id):
            """Load user from session"""
            stored = GateSession(session).user
            if stored is None:
                return None
            return User.from_session(stored, deserialize)

        self._register_routes(app)

    def _register_routes(self, app):
        """Register login, callback and (optionally) failure routes"""
        settings = self.settings
        auth_bp = Blueprint(BLUEPRINT_NAME, __name__)
        shared_path = settings.login_path == settings.callback_path
        callback_endpoint = f"{BLUEPRINT_NAME}.{'login' if shared_path else 'callback'}"

        def callback():
            """Handle the provider redirecting back with a code or an error"""
            gate_session = GateSession(session)
            profile = self.strategy.exchange()

            if profile is None:
                return _app_redirect(self.gate.fail_login(gate_session).path)

            gate_session.user = settings.serialize_user(profile)
            login_user(User(profile))
            return _app_redirect(self.gate.complete_login(gate_session).path)

        def login():
            """Send the user to Auth0"""
            if shared_path and self.strategy.is_callback(request.args):
                return callback()
            redirect_uri = url_for(callback_endpoint, _external=True)
            logger.debug(f"Starting Auth0 login, callback {redirect_uri}")
            return self.strategy.authorize_redirect(redirect_uri)

        auth_bp.add_url_rule(settings.login_path, 'login', login)
        if not shared_path:
            auth_bp.add_url_rule(settings.callback_path, 'callback', callback)

        if settings.use_default_failure_route and settings.failure_path not in (
                settings.login_path, settings.callback_path):
            def failure():
                """Failed logins end here"""
                abort(403)

            auth_bp.add_url_rule(settings.failure_path, 'failure', failure)

        app.register_blueprint(auth_bp)

    def _gate_request(self):
        """Run the gate for the current request; a redirect response if denied, else None"""
        action = self.gate.evaluate(_requested_path(), GateSession(session))
        if isinstance(action, RedirectToLogin):
            return _app_redirect(action.path)
        return None

    def login_required(self, f):
        """
        Decorator to require login for a route.

        Redirects to the login path if not authenticated and remembers the
        requested URL for after login.
        """
        @wraps(f)
        def decorated_function(*args, **kwargs):
            response = self._gate_request()
            if response is not None:
                return response
            return f(*args, **kwargs)
        return decorated_function

    def protect(self, target):
        """
        Gate every request handled by a blueprint or app.

        The gate's own routes and static files are never gated.

        Args:
            target: Flask app or Blueprint

        Returns:
            target, so it can be used inline
        """
        def gate_hook():
            if request.blueprint == BLUEPRINT_NAME or request.endpoint == 'static':
                return None
            return self._gate_request()

        target.before_request(gate_hook)
        return target

    def get_current_user(self):
        """Get the logged in user's profile, or None"""
        return current_user.profile if current_user.is_authenticated else None

    def is_authenticated(self) -> bool:
        """Check if there's a logged in user"""
        return GateSession(session).is_authenticated
