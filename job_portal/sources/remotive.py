"""Remotive jobs source connector.

Remotive provides a public JSON endpoint with server-side search, no key needed.
It has no location parameter, so the location hint is matched locally.
We fetch the data and map fields to the canonical schema.

Docs: https://remotive.com/api/remote-jobs

Note: Free APIs can change; treat this as a pluggable connector.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..models import ExternalJob
from ..normalize import matches_location
from ..utils import get_str, get_str_list, parse_timestamp, uniq_preserve_order
from .base import JobSource

SOURCE_NAME = "Remotive"
SOURCE_LOGO = "https://remotive.com/favicon.ico"


def parse_job(j: Dict[str, Any]) -> ExternalJob:
    """Map one Remotive record to an ExternalJob."""
    return ExternalJob(
        source=SOURCE_NAME,
        source_logo=SOURCE_LOGO,
        title=get_str(j, "title"),
        company=get_str(j, "company_name"),
        company_logo=get_str(j, "company_logo"),
        location=get_str(j, "candidate_required_location"),
        description=get_str(j, "description"),
        job_type=get_str(j, "job_type"),
        salary_range=get_str(j, "salary"),
        category=get_str(j, "category"),
        tags=tuple(uniq_preserve_order(get_str_list(j, "tags"))),
        # Remotive has "publication_date" like "2024-01-01T12:34:56" (UTC, no zone)
        posted_at=parse_timestamp(j.get("publication_date")),
        apply_url=get_str(j, "url"),
    )


class RemotiveSource(JobSource):
    """Fetch remote jobs from Remotive and normalize them."""

    name = "remotive"
    description = "Remotive (Remote Jobs)"
    logo = SOURCE_LOGO
    base_url = "https://remotive.com/api/remote-jobs"

    def __init__(self, limit: int = 50, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._limit = limit

    async def _fetch(self, keyword: Optional[str], location: Optional[str]) -> List[ExternalJob]:
        """Fetch Remotive jobs.

        Args:
            keyword: Optional free-text query passed to Remotive (search).
            location: Optional location hint. Remotive has no location
                parameter, so it is matched locally against the normalized
                location (the candidate eligibility region).

        Returns:
            At most `limit` ExternalJob records.
        """
        params: Dict[str, Any] = {}
        if keyword and keyword.strip():
            params["search"] = keyword.strip()

        async with self._client() as client:
            resp = await client.get(self.base_url, params=params)
            resp.raise_for_status()
            payload = resp.json()

        jobs = self._parse_records(payload.get("jobs") if isinstance(payload, dict) else None, parse_job)
        jobs = [j for j in jobs if matches_location(j, location)]
        return jobs[: max(self._limit, 0)]
