"""Data models for the job portal core.

The key idea: the product owns a *stable* normalized schema regardless of the
upstream job provider(s). Every connector maps its native payload into
`ExternalJob`; the orchestrator only ever reorders those records.

Models serialize with camelCase keys (``applyUrl``, ``postedAt`` ...) because
that is the wire shape the UI consumes; Python code uses snake_case names.

This file uses Pydantic v2.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


DemandLevel = Literal["High", "Medium", "Low"]

DEFAULT_LOCATION = "Remote"


class CamelModel(BaseModel):
    """Base model that accepts snake_case or camelCase input and emits camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ExternalJob(CamelModel):
    """A canonical job record produced by a provider connector.

    Records are frozen: once a connector has built one, nothing downstream may
    change it. Missing provider data stays ``None`` rather than being invented.
    """

    model_config = ConfigDict(frozen=True)

    source: str = Field(..., description="Provider or publisher name, e.g. 'Remotive' or 'LinkedIn'.")
    source_logo: Optional[str] = None

    title: Optional[str] = None
    company: Optional[str] = None
    company_logo: Optional[str] = None

    location: str = DEFAULT_LOCATION
    description: Optional[str] = Field(default=None, description="Raw provider text; may contain markup.")

    job_type: Optional[str] = None
    salary_range: Optional[str] = Field(default=None, description="Display string, not structured currency data.")
    category: Optional[str] = None
    tags: Tuple[str, ...] = ()

    posted_at: Optional[datetime] = None
    apply_url: Optional[str] = None

    @field_validator("location", mode="before")
    @classmethod
    def _default_location(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_LOCATION
        return value


class LocalJobPosting(CamelModel):
    """A job posted on the portal itself. Owned by the job-posting subsystem; read-only here."""

    id: int
    title: str
    description: Optional[str] = None
    requirements: Optional[str] = Field(
        default=None,
        description="Free-text skills, delimited by commas, semicolons, slashes or pipes.",
    )
    work_location: Optional[str] = None
    salary_range: Optional[str] = None
    posted_at: datetime
    employer_id: Optional[int] = None

    @field_validator("posted_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # Stores may export naive timestamps; treat them as UTC so sorting never mixes kinds.
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class ScoredJob(LocalJobPosting):
    """A local posting annotated with how well it matches a seeker's skills."""

    match_score: int = 0
    matched_skills: List[str] = Field(default_factory=list)


class SkillProfile(BaseModel):
    """A seeker's skills, normalized once when read from the profile store.

    Tokens are trimmed, lower-cased, de-duplicated and kept in the order the
    seeker wrote them.
    """

    model_config = ConfigDict(frozen=True)

    skills: Tuple[str, ...] = ()

    @classmethod
    def from_raw(cls, raw: Optional[str]) -> "SkillProfile":
        """Build a profile from the stored comma-separated skills string."""
        if not raw:
            return cls()
        tokens = [tok.strip().lower() for tok in raw.split(",")]
        seen = set()
        skills: List[str] = []
        for tok in tokens:
            if tok and tok not in seen:
                seen.add(tok)
                skills.append(tok)
        return cls(skills=tuple(skills))

    @property
    def has_skills(self) -> bool:
        return bool(self.skills)

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and token.strip().lower() in self.skills


class SearchResponse(CamelModel):
    total_count: int
    sources: List[str] = Field(default_factory=list)
    jobs: List[ExternalJob] = Field(default_factory=list)


class SourceDescriptor(CamelModel):
    name: str
    description: str
    logo: Optional[str] = None
    is_default: bool = True


class RecommendationsResponse(CamelModel):
    message: str
    has_skills: bool
    user_skills: List[str] = Field(default_factory=list)
    recommendations: List[ScoredJob] = Field(default_factory=list)


class SkillSuggestion(CamelModel):
    skill: str
    demand: int
    demand_level: DemandLevel


class SkillSuggestionsResponse(CamelModel):
    user_skills: List[str] = Field(default_factory=list)
    suggestions: List[SkillSuggestion] = Field(default_factory=list)
