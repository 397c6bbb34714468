"""
Flask application factory.

Creates and configures the Flask app, registers all blueprints.
"""
from flask import Flask, request, session, redirect, render_template_string, jsonify


LOGIN_PAGE = '''
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Login — Venture Desk</title>
    <style>
        body { font-family: sans-serif; background:#f1f5f9; min-height:100vh;
               display:flex; align-items:center; justify-content:center; margin:0; }
        .card { background:white; border-radius:12px; box-shadow:0 2px 8px rgba(0,0,0,0.06);
                padding:2.5rem; width:100%; max-width:360px; }
        input, button { width:100%; box-sizing:border-box; border-radius:8px; padding:.6rem .75rem;
                        font-size:.875rem; margin-bottom:1rem; }
        input { border:1px solid rgba(15,23,42,0.15); }
        button { border:0; background:#0f172a; color:white; cursor:pointer; }
    </style>
</head>
<body>
    <div class="card">
        <h1 style="font-size:1.1rem;margin:0 0 .25rem;color:#0f172a;">Venture Desk</h1>
        <p style="font-size:.875rem;margin:0 0 1.5rem;color:#475569;">Sign in to continue</p>
        {% if error %}
        <p style="font-size:.75rem;color:#dc2626;">Wrong password</p>
        {% endif %}
        <form method="POST" action="/login">
            <input type="email" name="email" placeholder="Email (optional)">
            <input type="password" name="password" autofocus placeholder="Password">
            <button type="submit">Log in</button>
        </form>
    </div>
</body>
</html>
'''

OPEN_PATHS = {'/health', '/login'}


def create_app():
    """Create and configure the Flask application."""
    from app.logging_config import configure_logging
    from app.config import SECRET_KEY, DASHBOARD_PASSWORD, DEFAULT_USER_ID

    app = Flask(__name__)

    configure_logging(app)

    app.secret_key = SECRET_KEY

    # ── Simple password auth ────────────────────────────────────────────
    @app.before_request
    def require_login():
        if not DASHBOARD_PASSWORD:
            return  # No password set — open access (local dev)
        if request.path in OPEN_PATHS:
            return
        if session.get('authenticated'):
            return
        if request.path.startswith('/api/'):
            return jsonify({'error': 'Authentication required'}), 401
        return redirect('/login')

    @app.route('/login', methods=['GET', 'POST'])
    def login():
        """
        Check the shared dashboard password and start a session.

        The optional email only picks which records the session sees; it is not
        verified. Anyone holding the password can sign in as any email, so
        per-user scoping keeps data apart but does not protect it. Treat a
        deployment as single-tenant.
        """
        if request.method == 'POST':
            if request.form.get('password') == DASHBOARD_PASSWORD:
                session['authenticated'] = True
                session['user_id'] = (request.form.get('email') or '').strip().lower() or DEFAULT_USER_ID
                return redirect('/')
            return render_template_string(LOGIN_PAGE, error=True)
        return render_template_string(LOGIN_PAGE, error=False)

    @app.route('/logout')
    def logout():
        session.clear()
        return redirect('/login')

    # Register blueprints
    from app.routes.dashboard import bp as dashboard_bp
    from app.routes.projects import bp as projects_bp
    from app.routes.validations import bp as validations_bp
    from app.routes.leads import bp as leads_bp

    app.register_blueprint(dashboard_bp)
    app.register_blueprint(projects_bp)
    app.register_blueprint(validations_bp)
    app.register_blueprint(leads_bp)

    # Import models so Base.metadata knows about them (required for SQLAlchemy).
    # Schema is managed by Alembic — no init_db() call.
    import importlib
    importlib.import_module('app.models.project')
    importlib.import_module('app.models.idea_validation')
    importlib.import_module('app.models.lead')

    return app
