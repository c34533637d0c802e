# File: backoffice/routes/core.py
"""
Core routes.

Provides the health check endpoint polled by the deployment platform.
"""

from flask import Blueprint, current_app, jsonify

from ..extensions import get_clock
from ..utils.clock import isoformat

bp = Blueprint('core', __name__)


@bp.get('/health/')
@bp.get('/health')
def health():
    """Return the service health payload, timestamped at request time."""
    return jsonify(
        status='OK',
        timestamp=isoformat(get_clock().now()),
        service=current_app.config['SERVICE_NAME'],
    ), 200
