"""
Project routes — list, create, fetch, delete.
"""
import logging
from flask import Blueprint, request, jsonify, session

from app.services import records
from app.services.context import context_from_session
from app.services.db import StoreError
from app.services.forms import FormValidationError

logger = logging.getLogger('routes.projects')

bp = Blueprint('projects', __name__)


@bp.route('/api/projects')
def list_projects():
    ctx = context_from_session(session)
    try:
        return jsonify(records.list_projects(ctx))
    except StoreError as e:
        return jsonify({'error': str(e)}), 500


@bp.route('/api/projects', methods=['POST'])
def create_project():
    ctx = context_from_session(session)
    try:
        project = records.create_project(ctx, request.get_json(silent=True))
        return jsonify(project), 201
    except FormValidationError as e:
        return jsonify({'error': e.message, 'field': e.field}), 400
    except StoreError as e:
        return jsonify({'error': str(e)}), 500


@bp.route('/api/projects/<int:project_id>')
def get_project(project_id):
    ctx = context_from_session(session)
    try:
        project = records.get_project(ctx, project_id)
    except StoreError as e:
        return jsonify({'error': str(e)}), 500
    if project is None:
        return jsonify({'error': 'Project not found'}), 404
    return jsonify(project)


@bp.route('/api/projects/<int:project_id>', methods=['DELETE'])
def delete_project(project_id):
    """Delete a project and everything attached to it."""
    ctx = context_from_session(session)
    try:
        deleted = records.delete_project(ctx, project_id)
    except StoreError as e:
        return jsonify({'error': str(e)}), 500
    if not deleted:
        return jsonify({'error': 'Project not found'}), 404
    return jsonify({'ok': True})
