"""
Record workflows — projects, SWOT validations, leads.

Every function takes an explicit RequestContext and only touches records owned
by ctx.user_id. Scores are computed here, before the record is built, so a
stored record never has a missing score. Lookups that miss (or hit another
user's record) return None; bad input raises FormValidationError; store
failures propagate as StoreError.
"""
import logging
from typing import Any, Dict, List, Optional

from app.config import LEAD_STATUSES
from app.scoring.lead import lead_score_for
from app.scoring.swot import swot_score
from app.scoring.weights import score_band
from app.services import db
from app.services.forms import (
    ProjectForm, ValidationForm, LeadForm, validate_status,
)

logger = logging.getLogger('services.records')

PROJECTS = 'business_projects'
VALIDATIONS = 'idea_validations'
LEADS = 'leads'


# ── Projects ─────────────────────────────────────────────────────────────────

def create_project(ctx, payload) -> Dict[str, Any]:
    form = ProjectForm.from_payload(payload)
    project = db.create(PROJECTS, {'user_id': ctx.user_id, **vars(form)})
    logger.info("Project %s created (stage=%s)", project['id'], project['stage'])
    return project


def list_projects(ctx) -> List[Dict[str, Any]]:
    """Newest first."""
    return db.query(PROJECTS, order_by='created_at', descending=True, user_id=ctx.user_id)


def get_project(ctx, project_id) -> Optional[Dict[str, Any]]:
    return db.get(PROJECTS, project_id, user_id=ctx.user_id)


def delete_project(ctx, project_id) -> bool:
    """Delete a project together with its validations and leads, all or nothing."""
    if get_project(ctx, project_id) is None:
        return False
    owned = {'project_id': project_id, 'user_id': ctx.user_id}
    validations, leads, _ = db.delete_many([
        (VALIDATIONS, owned),
        (LEADS, owned),
        (PROJECTS, {'id': project_id, 'user_id': ctx.user_id}),
    ])
    logger.info("Project %s deleted (%d validations, %d leads)", project_id, validations, leads)
    return True


# ── SWOT validations ─────────────────────────────────────────────────────────

def create_validation(ctx, payload) -> Optional[Dict[str, Any]]:
    """
    Validate, score and persist a SWOT analysis.

    Returns None when the project does not exist for this user.
    """
    form = ValidationForm.from_payload(payload)
    project = get_project(ctx, form.project_id)
    if project is None:
        return None

    score = swot_score(form.strengths, form.weaknesses, form.opportunities, form.threats)
    validation = db.create(VALIDATIONS, {
        'user_id': ctx.user_id,
        **vars(form),
        'success_score': score,
    })
    logger.info("Validation %s created for project %s (success_score=%d)",
                validation['id'], project['id'], score)
    return serialize_validation(validation, project_name=project['name'])


def list_validations(ctx, project_id=None) -> List[Dict[str, Any]]:
    """Newest first, each enriched with its project's name."""
    filters = {'user_id': ctx.user_id}
    if project_id is not None:
        filters['project_id'] = project_id
    validations = db.query(VALIDATIONS, order_by='created_at', descending=True, **filters)
    if not validations:
        return []

    project_ids = sorted({v['project_id'] for v in validations})
    names = {p['id']: p['name'] for p in db.query(PROJECTS, id=project_ids)}
    return [serialize_validation(v, project_name=names.get(v['project_id'])) for v in validations]


def delete_validation(ctx, validation_id) -> bool:
    deleted = db.delete(VALIDATIONS, id=validation_id, user_id=ctx.user_id)
    if deleted:
        logger.info("Validation %s deleted", validation_id)
    return bool(deleted)


def serialize_validation(validation, project_name=None) -> Dict[str, Any]:
    out = dict(validation)
    out['project_name'] = project_name
    out['score_band'] = score_band(validation['success_score'])
    return out


# ── Leads ────────────────────────────────────────────────────────────────────

def create_lead(ctx, payload) -> Optional[Dict[str, Any]]:
    """
    Validate, score and persist a lead with status 'new'.

    Returns None when the project does not exist for this user.
    """
    form = LeadForm.from_payload(payload)
    if get_project(ctx, form.project_id) is None:
        return None

    fields = vars(form)
    score = lead_score_for(fields)
    lead = db.create(LEADS, {
        'user_id': ctx.user_id,
        **fields,
        'lead_score': score,
        'status': 'new',
    })
    logger.info("Lead %s created for project %s (lead_score=%d)", lead['id'], form.project_id, score)
    return serialize_lead(lead)


def list_leads(ctx, status=None, project_id=None) -> List[Dict[str, Any]]:
    """Highest score first. status=None or 'all' means no status filter."""
    filters = {'user_id': ctx.user_id}
    if status and status != 'all':
        filters['status'] = validate_status(status)
    if project_id is not None:
        filters['project_id'] = project_id
    leads = db.query(LEADS, order_by='lead_score', descending=True, **filters)
    return [serialize_lead(lead) for lead in leads]


def update_lead_status(ctx, lead_id, status) -> Optional[Dict[str, Any]]:
    """Move a lead to any valid status. Returns None if the lead is not found."""
    status = validate_status(status)
    lead = db.update(LEADS, lead_id, {'status': status}, user_id=ctx.user_id)
    if lead is None:
        return None
    logger.info("Lead %s status -> %s", lead_id, status)
    return serialize_lead(lead)


def lead_status_counts(ctx) -> Dict[str, int]:
    """Count of leads per status, plus 'all'."""
    leads = db.query(LEADS, user_id=ctx.user_id)
    counts = _status_counts(leads)
    counts['all'] = len(leads)
    return counts


def serialize_lead(lead) -> Dict[str, Any]:
    out = dict(lead)
    out['tags'] = out.get('tags') or []
    out['score_band'] = score_band(lead['lead_score'])
    return out


# ── Overview ─────────────────────────────────────────────────────────────────

def overview_stats(ctx) -> Dict[str, Any]:
    """Counts, average scores and band distribution across the user's records."""
    projects = db.query(PROJECTS, user_id=ctx.user_id)
    validations = db.query(VALIDATIONS, user_id=ctx.user_id)
    leads = db.query(LEADS, user_id=ctx.user_id)

    return {
        'projects': len(projects),
        'validations': {
            'total': len(validations),
            'avg_success_score': _average([v['success_score'] for v in validations]),
            'bands': _band_counts([v['success_score'] for v in validations]),
        },
        'leads': {
            'total': len(leads),
            'avg_lead_score': _average([lead['lead_score'] for lead in leads]),
            'bands': _band_counts([lead['lead_score'] for lead in leads]),
            'status': _status_counts(leads),
        },
    }


def _status_counts(leads):
    counts = {status: 0 for status in LEAD_STATUSES}
    for lead in leads:
        if lead['status'] in counts:
            counts[lead['status']] += 1
    return counts


def _average(scores):
    if not scores:
        return 0
    return round(sum(scores) / len(scores), 1)


def _band_counts(scores):
    counts = {'high': 0, 'medium': 0, 'low': 0}
    for score in scores:
        counts[score_band(score)] += 1
    return counts
