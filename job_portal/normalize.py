"""Normalization & heuristics.

This module contains the deterministic text logic shared by the connectors and
the scorers:
- client-side keyword/location filtering for providers without server search
- splitting free-text requirement strings into skill tokens
- substring skill matching against posting text

These are plain substring/frequency heuristics, not semantic matching. Keeping
them centralized makes the system predictable and testable.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

from .models import ExternalJob
from .utils import contains_ci


# Requirement strings are written by employers as "React, Node.js; SQL | AWS".
REQUIREMENT_DELIMITERS_RE = re.compile(r"[,;/|]")

MIN_SKILL_TOKEN_LEN = 2
MAX_SKILL_TOKEN_LEN = 29


def matches_keyword(job: ExternalJob, keyword: Optional[str]) -> bool:
    """True when keyword is a case-insensitive substring of title, company, description or a tag."""
    kw = (keyword or "").strip()
    if not kw:
        return True
    return (
        contains_ci(job.title, kw)
        or contains_ci(job.company, kw)
        or contains_ci(job.description, kw)
        or any(contains_ci(tag, kw) for tag in job.tags)
    )


def matches_location(job: ExternalJob, location: Optional[str]) -> bool:
    loc = (location or "").strip()
    if not loc:
        return True
    return contains_ci(job.location, loc)


def split_requirements(requirements: Optional[str]) -> List[str]:
    """Split a requirements string into trimmed skill tokens, dropping noise.

    Tokens shorter than two or longer than 29 characters are discarded; those
    are almost always sentence fragments rather than skills.
    """
    if not requirements:
        return []
    tokens = (tok.strip() for tok in REQUIREMENT_DELIMITERS_RE.split(requirements))
    return [tok for tok in tokens if MIN_SKILL_TOKEN_LEN <= len(tok) <= MAX_SKILL_TOKEN_LEN]


def matched_skills(skills: Iterable[str], *fields: Optional[str]) -> List[str]:
    """Return the skills that occur as substrings of any field, in the order given.

    Skills are expected to be normalized (lower-cased) already.
    """
    blobs = [(f or "").lower() for f in fields]
    return [skill for skill in skills if any(skill in blob for blob in blobs)]
