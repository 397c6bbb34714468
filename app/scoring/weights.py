"""
Shared scoring utilities — weighting tables, clamping, score bands.

The weights are fixed business heuristics. They are not read from config.
"""
import math
from typing import Dict

from app.config import SCORE_BANDS


SCORE_MIN = 0
SCORE_MAX = 100

# ── SWOT success score ───────────────────────────────────────────────────────
SWOT_BASELINE = 50
SWOT_WEIGHTS: Dict[str, int] = {
    'strengths': 10,
    'opportunities': 8,
    'weaknesses': -5,
    'threats': -7,
}

# ── Lead quality score ───────────────────────────────────────────────────────
LEAD_BASELINE = 50
LEAD_FIELD_POINTS: Dict[str, int] = {
    'email': 15,
    'phone': 10,
    'linkedin_url': 10,
    'company': 10,
    'role': 5,
}


def clamp(value: float, low: float = SCORE_MIN, high: float = SCORE_MAX) -> float:
    """Constrain value to [low, high], saturating at the bounds."""
    return max(low, min(high, value))


def to_score(raw: float) -> int:
    """Clamp a raw total to [0, 100] and round half-up to an int."""
    return int(math.floor(clamp(raw) + 0.5))


def score_band(score: int) -> str:
    """Map a 0-100 score to 'high', 'medium' or 'low'."""
    for lower, band in SCORE_BANDS:
        if score >= lower:
            return band
    return SCORE_BANDS[-1][1]
