"""Arbeitnow jobs source connector.

Docs: https://www.arbeitnow.com/api/job-board-api

The public job board API (mostly European listings, no key) has no search
parameters, so keyword and location filters are applied locally after the
records are normalized.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..models import ExternalJob
from ..normalize import matches_keyword, matches_location
from ..utils import get_str, get_str_list, parse_timestamp, uniq_preserve_order
from .base import JobSource

SOURCE_NAME = "Arbeitnow"
SOURCE_LOGO = "https://www.arbeitnow.com/favicon.ico"


def _job_type(j: Dict[str, Any]) -> str:
    return "Remote" if j.get("remote") is True else "On-site"


def parse_job(j: Dict[str, Any]) -> ExternalJob:
    """Map one Arbeitnow record to an ExternalJob."""
    return ExternalJob(
        source=SOURCE_NAME,
        source_logo=SOURCE_LOGO,
        title=get_str(j, "title"),
        company=get_str(j, "company_name"),
        company_logo=get_str(j, "company_logo"),
        location=get_str(j, "location"),
        description=get_str(j, "description"),
        job_type=_job_type(j),
        tags=tuple(uniq_preserve_order(get_str_list(j, "tags"))),
        # created_at is epoch seconds
        posted_at=parse_timestamp(j.get("created_at")),
        apply_url=get_str(j, "url"),
    )


class ArbeitnowSource(JobSource):
    """Fetch jobs from Arbeitnow and normalize them."""

    name = "arbeitnow"
    description = "Arbeitnow (European Jobs)"
    logo = SOURCE_LOGO
    base_url = "https://www.arbeitnow.com/api/job-board-api"

    def __init__(self, limit: int = 30, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._limit = limit

    async def _fetch(self, keyword: Optional[str], location: Optional[str]) -> List[ExternalJob]:
        """Fetch the first Arbeitnow page and filter it locally."""
        async with self._client() as client:
            resp = await client.get(self.base_url)
            resp.raise_for_status()
            payload = resp.json()

        jobs = self._parse_records(payload.get("data") if isinstance(payload, dict) else None, parse_job)
        jobs = [j for j in jobs if matches_keyword(j, keyword) and matches_location(j, location)]
        return jobs[: max(self._limit, 0)]
