"""
Centralized configuration — all env vars and domain constants.
"""
import os


# ── Logging ──────────────────────────────────────────────────────────────────
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
LOG_FORMAT = os.getenv('LOG_FORMAT', 'text')

# ── PostgreSQL ────────────────────────────────────────────────────────────────
DATABASE_URL = os.getenv('DATABASE_URL', 'sqlite:///local.db')

# ── Auth ─────────────────────────────────────────────────────────────────────
SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-change-me')
DASHBOARD_PASSWORD = os.getenv('DASHBOARD_PASSWORD')

# Owner of every record when no user signs in (local dev / open access)
DEFAULT_USER_ID = os.getenv('DEFAULT_USER_ID', 'local')

# ── Project stages ───────────────────────────────────────────────────────────
PROJECT_STAGES = [
    'idea',
    'startup',
    'growth',
    'mature',
]

# ── Lead status values ───────────────────────────────────────────────────────
# Any status may move to any other; no ordering is enforced.
LEAD_STATUSES = [
    'new',
    'contacted',
    'qualified',
    'converted',
    'lost',
]

# ── Score bands — lower bound (inclusive) → band name ────────────────────────
SCORE_BANDS = [
    (75, 'high'),
    (50, 'medium'),
    (0, 'low'),
]

# ── Lead CSV export — header → record field ──────────────────────────────────
LEAD_EXPORT_COLUMNS = [
    ('Name', 'name'),
    ('Company', 'company'),
    ('Role', 'role'),
    ('Email', 'email'),
    ('Phone', 'phone'),
    ('LinkedIn', 'linkedin_url'),
    ('Industry', 'industry'),
    ('Location', 'location'),
    ('Lead Score', 'lead_score'),
    ('Status', 'status'),
    ('Source', 'source'),
]
