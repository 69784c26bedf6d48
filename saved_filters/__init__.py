"""
Flask application factory.

Creates and configures the Flask app, registers all blueprints and the
error handlers that turn service errors into JSON responses.
"""
import logging

from flask import Flask, request, redirect, jsonify, render_template_string

logger = logging.getLogger('saved_filters')


LOGIN_PAGE = '''
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Login | Saved Filters</title>
    <style>body { font-family: sans-serif; }</style>
</head>
<body style="min-height:100vh;display:flex;align-items:center;justify-content:center;background:#eeece1;">
    <div style="background:white;border-radius:12px;box-shadow:0 2px 8px rgba(0,0,0,0.06);padding:2.5rem;width:100%;max-width:360px;">
        <h1 style="font-size:1.1rem;color:#005c69;">Saved Filters</h1>
        {% if error %}
        <p style="font-size:0.8rem;color:#f65c4e;">Wrong username or password</p>
        {% endif %}
        <form method="POST" action="/login">
            <input type="text" name="username" autofocus placeholder="Username"
                   style="width:100%;padding:0.6rem;margin-bottom:0.75rem;">
            <input type="password" name="password" placeholder="Password"
                   style="width:100%;padding:0.6rem;margin-bottom:1rem;">
            <button type="submit" style="width:100%;padding:0.6rem;background:#005c69;color:white;">
                Log in
            </button>
        </form>
    </div>
</body>
</html>
'''


def _register_error_handlers(app):
    from saved_filters.config import SUPPORTED_LOCALES
    from saved_filters.errors import AuthenticationError, AuthorizationError
    from saved_filters.i18n import translate

    def _locale():
        return request.accept_languages.best_match(SUPPORTED_LOCALES)

    @app.errorhandler(AuthenticationError)
    def handle_authentication_error(e):
        return jsonify({'error': translate(e.message, _locale())}), 401

    @app.errorhandler(AuthorizationError)
    def handle_authorization_error(e):
        # Message is already localized by the service
        return jsonify({'error': e.message}), 403


def create_app():
    """Create and configure the Flask application."""
    from saved_filters.config import SECRET_KEY, DASHBOARD_PASSWORD
    from saved_filters.logging_config import configure_logging

    app = Flask(__name__)

    configure_logging(app)

    # Secret key for sessions
    app.secret_key = SECRET_KEY

    # ── Login: any username, shared password when DASHBOARD_PASSWORD is set ──
    @app.route('/login', methods=['GET', 'POST'])
    def login():
        from saved_filters.auth import get_or_create_user, login_user
        from saved_filters.database import get_session

        if request.method == 'GET':
            return render_template_string(LOGIN_PAGE, error=False)

        data = request.get_json(silent=True) if request.is_json else request.form
        data = data or {}
        username = (data.get('username') or '').strip()
        password = data.get('password') or ''

        if not username or (DASHBOARD_PASSWORD and password != DASHBOARD_PASSWORD):
            logger.info("Rejected login for %r", username)
            if request.is_json:
                return jsonify({'error': 'Invalid credentials'}), 401
            return render_template_string(LOGIN_PAGE, error=True), 401

        session = get_session()
        try:
            user = get_or_create_user(session, username)
            login_user(user)
            code = user.code
        finally:
            session.close()

        if request.is_json:
            return jsonify({'ok': True, 'user': code})
        return redirect('/health')

    @app.route('/logout')
    def logout():
        from saved_filters.auth import logout_user
        logout_user()
        return redirect('/login')

    # Register blueprints
    from saved_filters.routes.health import bp as health_bp
    from saved_filters.routes.filters import bp as filters_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(filters_bp)

    _register_error_handlers(app)

    # Import models so Base.metadata knows about them (required for SQLAlchemy).
    # Schema is managed by Alembic, no create_all() call.
    import importlib
    importlib.import_module('saved_filters.models.user')
    importlib.import_module('saved_filters.models.saved_filter')

    return app
