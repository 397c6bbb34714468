"""
Lead routes — list/filter, create, status changes, counts, CSV export.
"""
import logging
from flask import Blueprint, request, jsonify, session, Response

from app.services import records
from app.services.context import context_from_session
from app.services.db import StoreError
from app.services.export import export_leads_csv, export_filename
from app.services.forms import FormValidationError, status_from_payload

logger = logging.getLogger('routes.leads')

bp = Blueprint('leads', __name__)


@bp.route('/api/leads')
def list_leads():
    """Leads ordered by score. ?status=<status|all>&project_id=<id>"""
    ctx = context_from_session(session)
    try:
        leads = records.list_leads(
            ctx,
            status=request.args.get('status'),
            project_id=request.args.get('project_id', type=int),
        )
        return jsonify(leads)
    except FormValidationError as e:
        return jsonify({'error': e.message, 'field': e.field}), 400
    except StoreError as e:
        return jsonify({'error': str(e)}), 500


@bp.route('/api/leads', methods=['POST'])
def create_lead():
    """Score and store a lead. Any lead_score or status in the body is ignored."""
    ctx = context_from_session(session)
    try:
        lead = records.create_lead(ctx, request.get_json(silent=True))
    except FormValidationError as e:
        return jsonify({'error': e.message, 'field': e.field}), 400
    except StoreError as e:
        return jsonify({'error': str(e)}), 500
    if lead is None:
        return jsonify({'error': 'Project not found'}), 404
    return jsonify(lead), 201


@bp.route('/api/leads/counts')
def lead_counts():
    ctx = context_from_session(session)
    try:
        return jsonify(records.lead_status_counts(ctx))
    except StoreError as e:
        return jsonify({'error': str(e)}), 500


@bp.route('/api/leads/<int:lead_id>/status', methods=['PATCH', 'POST'])
def update_lead_status(lead_id):
    ctx = context_from_session(session)
    try:
        status = status_from_payload(request.get_json(silent=True))
        lead = records.update_lead_status(ctx, lead_id, status)
    except FormValidationError as e:
        return jsonify({'error': e.message, 'field': e.field}), 400
    except StoreError as e:
        return jsonify({'error': str(e)}), 500
    if lead is None:
        return jsonify({'error': 'Lead not found'}), 404
    return jsonify(lead)


@bp.route('/api/leads/export')
def export_leads():
    """CSV download of the (optionally status-filtered) lead list."""
    ctx = context_from_session(session)
    try:
        leads = records.list_leads(ctx, status=request.args.get('status'))
    except FormValidationError as e:
        return jsonify({'error': e.message, 'field': e.field}), 400
    except StoreError as e:
        return jsonify({'error': str(e)}), 500

    logger.info("Exporting %d leads", len(leads))
    return Response(
        export_leads_csv(leads),
        mimetype='text/csv',
        headers={'Content-Disposition': f'attachment; filename={export_filename()}'},
    )
