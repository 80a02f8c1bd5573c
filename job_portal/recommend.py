"""Skill-based recommendations over the portal's own job postings.

A posting's match score is the number of the seeker's distinct skills that
appear as substrings of its title, description or requirements (lower-cased).
"sql" therefore matches "MySQL".
"""

from __future__ import annotations

from typing import List, Sequence

from .logger import get_logger
from .models import LocalJobPosting, RecommendationsResponse, ScoredJob, SkillProfile
from .normalize import matched_skills

logger = get_logger(__name__)

MAX_RECOMMENDATIONS = 20
FALLBACK_COUNT = 10

NO_SKILLS_MESSAGE = "Add skills to get personalized recommendations"
NO_MATCHES_MESSAGE = "No exact matches found. Showing latest jobs."


def score_posting(profile: SkillProfile, posting: LocalJobPosting) -> ScoredJob:
    matched = matched_skills(profile.skills, posting.requirements, posting.title, posting.description)
    return ScoredJob(
        **posting.model_dump(),
        match_score=len(matched),
        matched_skills=matched,
    )


def latest_jobs(postings: Sequence[LocalJobPosting], count: int = FALLBACK_COUNT) -> List[ScoredJob]:
    """The newest `count` postings, unscored."""
    newest = sorted(postings, key=lambda p: p.posted_at, reverse=True)[:count]
    return [ScoredJob(**p.model_dump()) for p in newest]


def recommend_jobs(profile: SkillProfile, postings: Sequence[LocalJobPosting]) -> RecommendationsResponse:
    """Rank postings by match score, falling back to the latest postings.

    Postings without any matching skill are dropped; the rest are ordered by
    score, then newest first, and truncated. When the seeker has no skills, or
    nothing matches, the latest postings are returned with a score of 0.
    """
    if not profile.has_skills:
        return RecommendationsResponse(
            message=NO_SKILLS_MESSAGE,
            has_skills=False,
            user_skills=[],
            recommendations=latest_jobs(postings),
        )

    scored = [score_posting(profile, p) for p in postings]
    matches = [s for s in scored if s.match_score > 0]
    matches.sort(key=lambda s: (s.match_score, s.posted_at), reverse=True)
    matches = matches[:MAX_RECOMMENDATIONS]

    user_skills = list(profile.skills)
    if not matches:
        logger.debug("No postings matched skills %s", user_skills)
        return RecommendationsResponse(
            message=NO_MATCHES_MESSAGE,
            has_skills=True,
            user_skills=user_skills,
            recommendations=latest_jobs(postings),
        )

    return RecommendationsResponse(
        message=f"Found {len(matches)} jobs matching your skills",
        has_skills=True,
        user_skills=user_skills,
        recommendations=matches,
    )
