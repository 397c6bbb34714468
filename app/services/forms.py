"""
Typed form records — validate raw JSON/form payloads before anything is scored.

Each form has a from_payload() constructor that trims strings, turns blanks
into None, filters blank list entries, and raises FormValidationError on bad
input. Client-supplied scores are never read.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from app.config import PROJECT_STAGES, LEAD_STATUSES

# Largest id a signed 64-bit INTEGER column holds
MAX_ID = 2 ** 63 - 1


class FormValidationError(ValueError):
    """Raised when a payload cannot be turned into a valid form record."""

    def __init__(self, field_name: str, message: str):
        super().__init__(message)
        self.field = field_name
        self.message = message


# ── Field helpers ────────────────────────────────────────────────────────────

def clean_text(value: Any) -> Optional[str]:
    """Trim a string; blanks and non-strings become None."""
    if value is None:
        return None
    if not isinstance(value, str):
        value = str(value)
    value = value.strip()
    return value or None


def clean_list(value: Any, field_name: str) -> List[str]:
    """Trim every entry of a string list and drop blank ones."""
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        raise FormValidationError(field_name, f"{field_name} must be a list of strings")
    cleaned = []
    for entry in value:
        if entry is None:
            continue
        if not isinstance(entry, str):
            raise FormValidationError(field_name, f"{field_name} must be a list of strings")
        entry = entry.strip()
        if entry:
            cleaned.append(entry)
    return cleaned


def parse_tags(value: Any) -> List[str]:
    """Accept tags as 'a, b, c' or ['a', 'b', 'c']."""
    if isinstance(value, str):
        value = value.split(',')
    return clean_list(value, 'tags')


def parse_id(value: Any, field_name: str) -> int:
    """Parse a required integer id."""
    if value is None or value == '' or isinstance(value, bool):
        raise FormValidationError(field_name, f"{field_name} is required")
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise FormValidationError(field_name, f"{field_name} must be an integer id")
    if parsed <= 0:
        raise FormValidationError(field_name, f"{field_name} must be a positive integer id")
    if parsed > MAX_ID:
        raise FormValidationError(field_name, f"{field_name} is out of range")
    return parsed


def require_text(payload: Dict[str, Any], field_name: str) -> str:
    value = clean_text(payload.get(field_name))
    if value is None:
        raise FormValidationError(field_name, f"{field_name} is required")
    return value


def validate_status(value: Any) -> str:
    """Return a valid lead status or raise."""
    status = clean_text(value)
    if status not in LEAD_STATUSES:
        raise FormValidationError('status', f"status must be one of: {', '.join(LEAD_STATUSES)}")
    return status


def status_from_payload(payload) -> str:
    """Pull a valid lead status out of a {"status": ...} body."""
    return validate_status(_require_mapping(payload).get('status'))


def _require_mapping(payload):
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise FormValidationError('body', 'Request body must be a JSON object')
    return payload


# ── Forms ────────────────────────────────────────────────────────────────────

@dataclass
class ProjectForm:
    name: str
    description: Optional[str] = None
    industry: Optional[str] = None
    stage: str = 'idea'
    target_market: Optional[str] = None

    @classmethod
    def from_payload(cls, payload) -> 'ProjectForm':
        payload = _require_mapping(payload)
        stage = clean_text(payload.get('stage')) or 'idea'
        if stage not in PROJECT_STAGES:
            raise FormValidationError('stage', f"stage must be one of: {', '.join(PROJECT_STAGES)}")
        return cls(
            name=require_text(payload, 'name'),
            description=clean_text(payload.get('description')),
            industry=clean_text(payload.get('industry')),
            stage=stage,
            target_market=clean_text(payload.get('target_market')),
        )


@dataclass
class ValidationForm:
    """SWOT analysis input. List fields are already trimmed and blank-free."""
    project_id: int
    strengths: List[str] = field(default_factory=list)
    weaknesses: List[str] = field(default_factory=list)
    opportunities: List[str] = field(default_factory=list)
    threats: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)

    @classmethod
    def from_payload(cls, payload) -> 'ValidationForm':
        payload = _require_mapping(payload)
        return cls(
            project_id=parse_id(payload.get('project_id'), 'project_id'),
            strengths=clean_list(payload.get('strengths'), 'strengths'),
            weaknesses=clean_list(payload.get('weaknesses'), 'weaknesses'),
            opportunities=clean_list(payload.get('opportunities'), 'opportunities'),
            threats=clean_list(payload.get('threats'), 'threats'),
            recommendations=clean_list(payload.get('recommendations'), 'recommendations'),
        )


@dataclass
class LeadForm:
    project_id: int
    name: str
    company: Optional[str] = None
    role: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    linkedin_url: Optional[str] = None
    industry: Optional[str] = None
    location: Optional[str] = None
    source: Optional[str] = None
    notes: Optional[str] = None
    tags: List[str] = field(default_factory=list)

    @classmethod
    def from_payload(cls, payload) -> 'LeadForm':
        payload = _require_mapping(payload)
        return cls(
            project_id=parse_id(payload.get('project_id'), 'project_id'),
            name=require_text(payload, 'name'),
            company=clean_text(payload.get('company')),
            role=clean_text(payload.get('role')),
            email=clean_text(payload.get('email')),
            phone=clean_text(payload.get('phone')),
            linkedin_url=clean_text(payload.get('linkedin_url')),
            industry=clean_text(payload.get('industry')),
            location=clean_text(payload.get('location')),
            source=clean_text(payload.get('source')),
            notes=clean_text(payload.get('notes')),
            tags=parse_tags(payload.get('tags')),
        )
