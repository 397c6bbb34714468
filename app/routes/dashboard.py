"""
Dashboard routes — Home, health check, overview stats.
"""
import logging
from flask import Blueprint, jsonify, session

from app.services import records
from app.services.context import context_from_session
from app.services.db import StoreError

logger = logging.getLogger('routes.dashboard')

bp = Blueprint('dashboard', __name__)


@bp.route('/')
def index():
    """Home hub — lists the API entry points."""
    return jsonify({
        'service': 'Venture Desk',
        'endpoints': {
            'projects': '/api/projects',
            'validations': '/api/validations',
            'leads': '/api/leads',
            'stats': '/api/stats',
        },
    })


@bp.route('/health')
def health_check():
    """Health check endpoint."""
    return jsonify({"status": "healthy"}), 200


@bp.route('/api/stats')
def get_stats():
    """Overview stats for the signed-in user."""
    ctx = context_from_session(session)
    try:
        return jsonify(records.overview_stats(ctx))
    except StoreError as e:
        logger.error("Error generating stats: %s", e)
        return jsonify({'error': str(e)}), 500
