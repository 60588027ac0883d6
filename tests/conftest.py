"""
Shared pytest fixtures for authgate tests.

This module provides common fixtures used across all test modules including
environment setup, Flask app instances with the gate installed, and HTTP
mocking for the provider's discovery document.
"""
import sys
import pytest
from pathlib import Path
from flask import Flask, jsonify

# Add project root to Python path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


TEST_DOMAIN = 'tenant.example.auth0.com'


# ==============================================================================
# Environment Setup Fixtures
# ==============================================================================

@pytest.fixture
def test_env(monkeypatch):
    """Set up Auth0 environment variables."""
    monkeypatch.setenv('TESTING', '1')
    monkeypatch.setenv('FLASK_SECRET_KEY', 'test-secret-key-for-testing-only')
    monkeypatch.setenv('AUTH0_DOMAIN', TEST_DOMAIN)
    monkeypatch.setenv('AUTH0_CLIENT_ID', 'env-client-id')
    monkeypatch.setenv('AUTH0_CLIENT_SECRET', 'env-client-secret')
    yield


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every Auth0 variable from the environment."""
    for name in ('AUTH0_DOMAIN', 'AUTH0_CLIENT_ID', 'AUTH0_CLIENT_SECRET', 'FLASK_SECRET_KEY'):
        monkeypatch.delenv(name, raising=False)
    yield


# ==============================================================================
# Flask Fixtures
# ==============================================================================

@pytest.fixture
def flask_app(test_env):
    """Create a bare Flask app for testing."""
    app = Flask(__name__)
    app.config['TESTING'] = True

    @app.route('/')
    def index():
        return 'Index'

    return app


@pytest.fixture
def gate(flask_app):
    """Install the gate on flask_app with a protected route."""
    from authgate import Auth0Gate

    auth = Auth0Gate(flask_app)

    @flask_app.route('/secret')
    @auth.login_required
    def secret():
        return 'Secret'

    @flask_app.route('/me')
    @auth.login_required
    def me():
        return jsonify(auth.get_current_user())

    return auth


@pytest.fixture
def client(flask_app, gate):
    """Test client for the gated app."""
    return flask_app.test_client()


@pytest.fixture
def sample_profile():
    """Profile as returned in Auth0's userinfo."""
    return {
        'sub': 'auth0|12345',
        'email': 'testuser@example.com',
        'name': 'Test User',
        'picture': 'https://example.com/photo.jpg',
    }


# ==============================================================================
# HTTP Mock Fixtures
# ==============================================================================

@pytest.fixture
def mock_responses():
    """Fixture to mock HTTP responses using responses library."""
    import responses as responses_lib
    with responses_lib.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def discovery_document():
    """Minimal OpenID discovery document for TEST_DOMAIN."""
    base = f"https://{TEST_DOMAIN}"
    return {
        'issuer': f"{base}/",
        'authorization_endpoint': f"{base}/authorize",
        'token_endpoint': f"{base}/oauth/token",
        'userinfo_endpoint': f"{base}/userinfo",
        'jwks_uri': f"{base}/.well-known/jwks.json",
    }
