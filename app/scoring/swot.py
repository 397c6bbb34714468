"""
SWOT success scorer.

    raw   = strengths*10 + opportunities*8 - weaknesses*5 - threats*7 + 50
    score = clamp(raw, 0, 100)

Only entries that are non-blank after trimming are counted.
"""
from typing import Iterable, Optional

from app.scoring.weights import SWOT_BASELINE, SWOT_WEIGHTS, to_score


def count_entries(entries: Optional[Iterable[Optional[str]]]) -> int:
    """Count entries that are non-empty after trimming. None counts as empty."""
    if not entries:
        return 0
    return sum(1 for e in entries if isinstance(e, str) and e.strip())


def swot_score(strengths, weaknesses, opportunities, threats) -> int:
    """Compute the 0-100 success score for a SWOT analysis."""
    counts = {
        'strengths': count_entries(strengths),
        'weaknesses': count_entries(weaknesses),
        'opportunities': count_entries(opportunities),
        'threats': count_entries(threats),
    }
    raw = SWOT_BASELINE + sum(SWOT_WEIGHTS[k] * n for k, n in counts.items())
    return to_score(raw)
