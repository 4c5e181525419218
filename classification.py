"""
classification.py

Turn a 0–100 score into something the map can colour.

Thresholds are checked top to bottom and the first match wins:

    == 0   Unsuitable   red
    < 30   Poor         orange
    < 60   Fair         yellow
    < 80   Good         light green
    else   Excellent    dark green
"""

from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class Category:
    tier: str
    color: str
    score_range: str

    @property
    def label(self) -> str:
        return f"{self.tier} ({self.score_range})"


UNSUITABLE = Category("Unsuitable", "#e74c3c", "0")
POOR = Category("Poor", "#f39c12", "1-29")
FAIR = Category("Fair", "#f1c40f", "30-59")
GOOD = Category("Good", "#2ecc71", "60-79")
EXCELLENT = Category("Excellent", "#27ae60", "80-100")

# Worst to best.
CATEGORIES = (UNSUITABLE, POOR, FAIR, GOOD, EXCELLENT)


def classify(score: int) -> Category:
    """Map a score to its category."""
    if score == 0:
        return UNSUITABLE
    if score < 30:
        return POOR
    if score < 60:
        return FAIR
    if score < 80:
        return GOOD
    return EXCELLENT


def legend() -> List[Dict[str, str]]:
    """Legend entries, best first (how the sidebar lists them)."""
    return [
        {"tier": c.tier, "color": c.color, "range": c.score_range, "label": c.label}
        for c in reversed(CATEGORIES)
    ]


# ---------------------------------------------------------------------------
# Popup verdict
# ---------------------------------------------------------------------------
#
# The popup banner uses its own, coarser split (strictly greater-than).
# Kept separate from classify() so the two can't drift into each other.

_VERDICTS = {
    "excellent": {"message": "Excellent golf weather!", "background": "#d5f4e6"},
    "fair": {"message": "Fair golf conditions", "background": "#fff3cd"},
    "poor": {"message": "Poor golf conditions", "background": "#f8d7da"},
}


def popup_verdict(score: int) -> Dict[str, str]:
    """
    Returns {"verdict": "excellent" | "fair" | "poor", "message": ..., "background": ...}
    """
    if score > 60:
        verdict = "excellent"
    elif score > 30:
        verdict = "fair"
    else:
        verdict = "poor"

    return {"verdict": verdict, **_VERDICTS[verdict]}
