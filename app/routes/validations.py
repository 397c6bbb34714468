"""
SWOT validation routes — list, create, delete.

Validations are immutable; there is no update endpoint.
"""
import logging
from flask import Blueprint, request, jsonify, session

from app.services import records
from app.services.context import context_from_session
from app.services.db import StoreError
from app.services.forms import FormValidationError

logger = logging.getLogger('routes.validations')

bp = Blueprint('validations', __name__)


@bp.route('/api/validations')
def list_validations():
    ctx = context_from_session(session)
    project_id = request.args.get('project_id', type=int)
    try:
        return jsonify(records.list_validations(ctx, project_id=project_id))
    except StoreError as e:
        return jsonify({'error': str(e)}), 500


@bp.route('/api/validations', methods=['POST'])
def create_validation():
    """Score and store a SWOT analysis. Any success_score in the body is ignored."""
    ctx = context_from_session(session)
    try:
        validation = records.create_validation(ctx, request.get_json(silent=True))
    except FormValidationError as e:
        return jsonify({'error': e.message, 'field': e.field}), 400
    except StoreError as e:
        return jsonify({'error': str(e)}), 500
    if validation is None:
        return jsonify({'error': 'Project not found'}), 404
    return jsonify(validation), 201


@bp.route('/api/validations/<int:validation_id>', methods=['DELETE'])
def delete_validation(validation_id):
    ctx = context_from_session(session)
    try:
        deleted = records.delete_validation(ctx, validation_id)
    except StoreError as e:
        return jsonify({'error': str(e)}), 500
    if not deleted:
        return jsonify({'error': 'Validation not found'}), 404
    return jsonify({'ok': True})
