"""
Error handlers for apps using the Auth0 gate.

Usage:
    from authgate.error_handlers import register_error_handlers
    register_error_handlers(app, logger)

For API requests (Accept: application/json) returns JSON. For browser
requests, returns simple HTML.
"""

import logging
from flask import jsonify, request, render_template_string

from authgate.auth.actions import MissingUserError


# Simple HTML error template (no JS popups, just a div)
ERROR_TEMPLATE = '''
<!DOCTYPE html>
<html>
<head>
    <title>{{ title }}</title>
    <style>
        body { font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", sans-serif;
               max-width: 600px; margin: 80px auto; padding: 20px; text-align: center; }
        .error-box { background: #fef2f2; border: 1px solid #fecaca; border-radius: 8px;
                     padding: 30px; margin: 20px 0; }
        h1 { color: #991b1b; margin: 0 0 10px 0; }
        p { color: #7f1d1d; margin: 0; }
    </style>
</head>
<body>
    <div class="error-box">
        <h1>{{ code }} - {{ title }}</h1>
        <p>{{ message }}</p>
    </div>
</body>
</html>
'''


def _wants_json():
    """Check if the request expects a JSON response."""
    best = request.accept_mimetypes.best_match(['application/json', 'text/html'])
    return best == 'application/json'


def _error_response(code, title, message):
    """Return appropriate error response based on request type."""
    if _wants_json():
        return jsonify({'error': message}), code
    return render_template_string(
        ERROR_TEMPLATE,
        code=code,
        title=title,
        message=message
    ), code


def register_error_handlers(app, logger=None):
    """
    Register error handlers for the gate's responses on a Flask app.

    Args:
        app: Flask application instance
        logger: Optional logger instance. If not provided, uses module-level logger.
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    @app.errorhandler(403)
    def forbidden(error):
        """Handle 403 Forbidden (default failed-login route)"""
        return _error_response(403, 'Forbidden', 'Login failed or you do not have permission to access this resource.')

    @app.errorhandler(MissingUserError)
    def missing_user(error):
        """Login callback finished without a user: the integration is broken"""
        logger.error(f"Login callback misconfigured: {error}", exc_info=error)
        return _error_response(500, 'Internal Server Error', 'Login could not be completed.')

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 Internal Server Error"""
        logger.error(f"Internal server error: {error}", exc_info=True)
        return _error_response(500, 'Internal Server Error', 'An unexpected error occurred. Please try again later.')
