# File: backoffice/routes/pages.py
"""
Page routes.

Provides:
- GET /        : render the index view
- GET /<path>  : render the view named by the path, or the 404 page

Registered after every other blueprint; Werkzeug still matches static
rules such as /health ahead of the catch-all converter rule.
"""

from flask import Blueprint, current_app

from ..extensions import get_views

bp = Blueprint('pages', __name__)


@bp.get('/')
def root():
    """Render the index view. Resolver errors are left to Flask."""
    return get_views().render(current_app.config['ROOT_VIEW'])


@bp.get('/<path:path>')
def index(path: str):
    """Render the view matching the request path, falling back to the 404 page."""
    views = get_views()
    key = path.strip('/')

    if views.exists(key):
        return views.render(key)

    fallback = current_app.config['NOT_FOUND_VIEW']
    current_app.logger.debug("No view for %r, rendering %s", key, fallback)
    return views.render(fallback)
