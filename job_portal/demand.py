"""Skill demand analysis: which skills do employers ask for that the seeker lacks?"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from .models import DemandLevel, SkillProfile, SkillSuggestion, SkillSuggestionsResponse
from .normalize import split_requirements

MAX_SUGGESTIONS = 15

HIGH_DEMAND_ABOVE = 5
MEDIUM_DEMAND_ABOVE = 2


def demand_level(frequency: int) -> DemandLevel:
    if frequency > HIGH_DEMAND_ABOVE:
        return "High"
    if frequency > MEDIUM_DEMAND_ABOVE:
        return "Medium"
    return "Low"


def count_skills(requirements: Iterable[Optional[str]]) -> Dict[str, int]:
    """Count skill tokens case-insensitively, keyed by their first-seen spelling.

    The returned dict is in first-seen order.
    """
    display: Dict[str, str] = {}
    counts: Dict[str, int] = {}
    for req in requirements:
        for token in split_requirements(req):
            key = token.lower()
            if key not in display:
                display[key] = token
                counts[key] = 0
            counts[key] += 1
    return {display[key]: n for key, n in counts.items()}


def suggest_skills(profile: SkillProfile, requirements: Iterable[Optional[str]]) -> SkillSuggestionsResponse:
    """Top in-demand skills across all postings that are missing from the profile."""
    frequency = count_skills(requirements)
    missing = [(skill, n) for skill, n in frequency.items() if skill not in profile]
    # Stable sort: equal frequencies keep first-seen order.
    missing.sort(key=lambda item: item[1], reverse=True)

    suggestions: List[SkillSuggestion] = [
        SkillSuggestion(skill=skill, demand=n, demand_level=demand_level(n))
        for skill, n in missing[:MAX_SUGGESTIONS]
    ]
    return SkillSuggestionsResponse(user_skills=list(profile.skills), suggestions=suggestions)
