"""
Text helpers for region summaries.

We take the summary dicts from DashboardController and turn them into
short plain-text blurbs, e.g.

Texas – Excellent (96/100)
High 72°F / Low 48°F, humidity 40%.
Excellent golf weather!

Plain text only. Any markup is the page's job.
"""

from __future__ import annotations
from typing import Dict, Any, List


def _weather_line(summary: Dict[str, Any]) -> str:
    if not summary.get("has_data"):
        return "No forecast data."
    return (
        f"High {summary['highTemperature']}°F / Low {summary['lowTemperature']}°F, "
        f"humidity {summary['humidity']}%."
    )


def summarise_region(summary: Dict[str, Any]) -> str:
    """
    Turn one region summary dict into three short lines.
    """
    name: str = summary["name"]
    score: int = summary["score"]
    tier: str = summary["tier"]

    lines: List[str] = [
        f"{name} – {tier} ({score}/100)",
        _weather_line(summary),
    ]
    if summary.get("has_data"):
        lines.append(summary["verdict_message"])

    return "\n".join(lines)


def summarise_best(summaries: List[Dict[str, Any]]) -> str:
    """
    Blurbs for a ranked list of regions, separated by a rule line.
    """
    if not summaries:
        return "No regions suit this preference on the selected day."

    return "\n----------------------------------------\n".join(
        summarise_region(s) for s in summaries
    )
