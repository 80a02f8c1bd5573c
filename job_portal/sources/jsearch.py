"""JSearch jobs source connector.

JSearch (via RapidAPI) is a metasearch API over LinkedIn, Indeed, Glassdoor,
ZipRecruiter and others, so each record carries its own publisher name.
It needs an API key sent as RapidAPI headers; without one the connector is
skipped rather than attempting an unauthenticated request.

Docs: https://rapidapi.com/letscrape-6bRBa3QguO5/api/jsearch
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from ..errors import SourceNotConfiguredError
from ..models import ExternalJob
from ..utils import get_number, get_str, get_str_list, parse_timestamp, uniq_preserve_order
from .base import JobSource

SOURCE_NAME = "JSearch"
SOURCE_LOGO = "https://rapidapi.com/favicon.ico"

DEFAULT_KEYWORD = "software developer"
DEFAULT_LOCATION = "India"
DEFAULT_CURRENCY = "INR"

MAX_TAGS = 6
MAX_QUALIFICATION_TAGS = 3
MAX_QUALIFICATION_LEN = 50
MAX_SKILL_TAGS = 5

PUBLISHER_LOGOS = {
    "linkedin": "https://cdn-icons-png.flaticon.com/512/174/174857.png",
    "indeed": "https://cdn-icons-png.flaticon.com/512/5968/5968858.png",
    "glassdoor": "https://www.glassdoor.com/favicon.ico",
    "naukri": "https://static.naukimg.com/s/4/100/i/naukri_Logo.png",
}

SALARY_PERIODS = {"YEAR": "/year", "MONTH": "/month", "HOUR": "/hour"}


def _source_logo(j: Dict[str, Any]) -> Optional[str]:
    """Employer logo, else a known publisher logo."""
    logo = get_str(j, "employer_logo")
    if logo:
        return logo
    publisher = (get_str(j, "job_publisher") or "").lower()
    return PUBLISHER_LOGOS.get(publisher)


def _location(j: Dict[str, Any]) -> str:
    parts = [p for p in (get_str(j, "job_city"), get_str(j, "job_state"), get_str(j, "job_country")) if p]
    location = ", ".join(parts)
    if j.get("job_is_remote") is True:
        location = f"{location} (Remote)" if location else "Remote"
    return location or "Not specified"


def _salary_range(j: Dict[str, Any]) -> Optional[str]:
    """Format min/max salary as a display string, e.g. 'USD 90,000 - 120,000/year'."""
    low = get_number(j, "job_min_salary")
    high = get_number(j, "job_max_salary")
    if low is None and high is None:
        return None

    currency = get_str(j, "job_salary_currency") or DEFAULT_CURRENCY
    period = SALARY_PERIODS.get((get_str(j, "job_salary_period") or "YEAR").upper(), "")

    if low is not None and high is not None:
        return f"{currency} {low:,.0f} - {high:,.0f}{period}"
    if low is not None:
        return f"{currency} {low:,.0f}+{period}"
    return f"Up to {currency} {high:,.0f}{period}"


def _tags(j: Dict[str, Any]) -> Tuple[str, ...]:
    tags: List[str] = []

    employment_type = get_str(j, "job_employment_type")
    if employment_type:
        tags.append(employment_type.replace("_", " "))

    if j.get("job_is_remote") is True:
        tags.append("Remote")

    highlights = j.get("job_highlights")
    if isinstance(highlights, dict):
        quals = get_str_list(highlights, "Qualifications")[:MAX_QUALIFICATION_TAGS]
        tags.extend(q for q in quals if len(q) < MAX_QUALIFICATION_LEN)

    tags.extend(get_str_list(j, "job_required_skills")[:MAX_SKILL_TAGS])

    return tuple(uniq_preserve_order(tags)[:MAX_TAGS])


def _apply_url(j: Dict[str, Any]) -> Optional[str]:
    """Direct apply link, else the first apply option, else the Google Jobs link."""
    link = get_str(j, "job_apply_link")
    if link:
        return link

    options = j.get("apply_options")
    if isinstance(options, list):
        for option in options:
            if isinstance(option, dict):
                link = get_str(option, "apply_link")
                if link:
                    return link

    return get_str(j, "job_google_link")


def parse_job(j: Dict[str, Any]) -> ExternalJob:
    """Map one JSearch record to an ExternalJob."""
    return ExternalJob(
        source=get_str(j, "job_publisher") or SOURCE_NAME,
        source_logo=_source_logo(j),
        title=get_str(j, "job_title"),
        company=get_str(j, "employer_name"),
        company_logo=get_str(j, "employer_logo"),
        location=_location(j),
        description=get_str(j, "job_description"),
        job_type=get_str(j, "job_employment_type"),
        salary_range=_salary_range(j),
        category=get_str(j, "job_job_title"),
        tags=_tags(j),
        posted_at=parse_timestamp(j.get("job_posted_at_datetime_utc")),
        apply_url=_apply_url(j),
    )


class JSearchSource(JobSource):
    """Fetch jobs from the JSearch metasearch API and normalize them."""

    name = "jsearch"
    description = "LinkedIn, Indeed, Glassdoor"
    logo = SOURCE_LOGO

    def __init__(
        self,
        api_key: Optional[str],
        host: str = "jsearch.p.rapidapi.com",
        limit: int = 30,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self._api_key = api_key
        self._host = host
        self._limit = limit

    @property
    def base_url(self) -> str:
        return f"https://{self._host}/search"

    def check_configured(self) -> None:
        if not self._api_key:
            raise SourceNotConfiguredError(self.name, "JSEARCH_API_KEY")

    def _headers(self) -> Dict[str, str]:
        return {
            "X-RapidAPI-Key": self._api_key or "",
            "X-RapidAPI-Host": self._host,
        }

    async def _fetch(self, keyword: Optional[str], location: Optional[str]) -> List[ExternalJob]:
        """Search JSearch server-side for "<keyword> in <location>"."""
        query = f"{(keyword or '').strip() or DEFAULT_KEYWORD} in {(location or '').strip() or DEFAULT_LOCATION}"
        params = {"query": query, "page": "1", "num_pages": "1"}

        async with self._client(headers=self._headers()) as client:
            resp = await client.get(self.base_url, params=params)
            resp.raise_for_status()
            payload = resp.json()

        jobs = payload.get("data") if isinstance(payload, dict) else None
        if isinstance(jobs, list):
            jobs = jobs[: max(self._limit, 0)]
        return self._parse_records(jobs, parse_job)
