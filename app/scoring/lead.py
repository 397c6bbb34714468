"""
Lead quality scorer — contact completeness.

Base 50, plus points per present contact field (email 15, phone 10,
LinkedIn 10, company 10, role 5). All five present gives exactly 100.
"""
from typing import Any, Mapping

from app.scoring.weights import LEAD_BASELINE, LEAD_FIELD_POINTS, to_score


def is_present(value: Any) -> bool:
    """A field is present when it is a string that is non-empty after trimming."""
    return isinstance(value, str) and bool(value.strip())


def lead_score(has_email: bool, has_phone: bool, has_linkedin: bool,
               has_company: bool, has_role: bool) -> int:
    """Compute the 0-100 quality score from which contact fields are present."""
    flags = {
        'email': has_email,
        'phone': has_phone,
        'linkedin_url': has_linkedin,
        'company': has_company,
        'role': has_role,
    }
    raw = LEAD_BASELINE + sum(LEAD_FIELD_POINTS[k] for k, present in flags.items() if present)
    return to_score(raw)


def lead_score_for(fields: Mapping[str, Any]) -> int:
    """Score a lead from a mapping of its raw contact fields."""
    return lead_score(
        has_email=is_present(fields.get('email')),
        has_phone=is_present(fields.get('phone')),
        has_linkedin=is_present(fields.get('linkedin_url')),
        has_company=is_present(fields.get('company')),
        has_role=is_present(fields.get('role')),
    )
