"""
Shared pytest fixtures.

Provider payloads below are trimmed copies of real API responses, keeping the
fields the connectors read plus a few they ignore.
"""

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict, List

import httpx
import pytest

# Allow "import job_portal" without installing the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from job_portal.models import LocalJobPosting  # noqa: E402


def json_transport(payload: Any, status_code: int = 200, seen: List[httpx.Request] = None) -> httpx.MockTransport:
    """MockTransport answering every request with `payload` as JSON."""

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, json=payload)

    return httpx.MockTransport(handler)


@pytest.fixture
def make_transport() -> Callable[..., httpx.MockTransport]:
    return json_transport


@pytest.fixture
def remotive_payload() -> Dict[str, Any]:
    return {
        "job-count": 3,
        "jobs": [
            {
                "id": 1,
                "url": "https://remotive.com/remote-jobs/software-dev/senior-python-engineer-1",
                "title": "Senior Python Engineer",
                "company_name": "Acme",
                "company_logo": "https://remotive.com/job/1/logo",
                "category": "Software Development",
                "tags": ["python", "django", "Python"],
                "job_type": "full_time",
                "publication_date": "2024-03-05T10:00:00",
                "candidate_required_location": "Europe",
                "salary": "$100k - $130k",
                "description": "<p>Build APIs with Django.</p>",
            },
            {
                "id": 2,
                "url": "https://remotive.com/remote-jobs/design/product-designer-2",
                "title": "Product Designer",
                "company_name": "Globex",
                "company_logo": None,
                "category": "Design",
                "tags": [],
                "job_type": "contract",
                "publication_date": "2024-03-01T08:30:00",
                "candidate_required_location": None,
                "salary": "",
                "description": "Design things.",
            },
            "not-a-job",
        ],
    }


@pytest.fixture
def arbeitnow_payload() -> Dict[str, Any]:
    return {
        "data": [
            {
                "slug": "backend-developer-berlin",
                "company_name": "Initech",
                "title": "Backend Developer",
                "description": "Go and Kubernetes in production.",
                "remote": False,
                "url": "https://www.arbeitnow.com/jobs/initech/backend-developer-berlin",
                "tags": ["Go", "Kubernetes"],
                "job_types": ["full time"],
                "location": "Berlin",
                "created_at": 1709805600,
            },
            {
                "slug": "data-engineer-remote",
                "company_name": "Umbrella",
                "title": "Data Engineer",
                "description": "Pipelines in Python.",
                "remote": True,
                "url": "https://www.arbeitnow.com/jobs/umbrella/data-engineer-remote",
                "tags": ["Python", "SQL"],
                "job_types": [],
                "location": "Munich",
                "created_at": 1709200800,
            },
            {
                "slug": "no-date",
                "company_name": "Hooli",
                "title": "Frontend Developer",
                "description": "React.",
                "remote": True,
                "url": "https://www.arbeitnow.com/jobs/hooli/no-date",
                "tags": None,
                "location": None,
                "created_at": None,
            },
        ],
        "links": {"next": "https://www.arbeitnow.com/api/job-board-api?page=2"},
    }


@pytest.fixture
def jsearch_record() -> Dict[str, Any]:
    return {
        "job_id": "abc123",
        "employer_name": "Wayne Enterprises",
        "employer_logo": None,
        "job_publisher": "LinkedIn",
        "job_employment_type": "FULLTIME",
        "job_title": "Full Stack Developer",
        "job_apply_link": None,
        "apply_options": [
            {"publisher": "LinkedIn", "apply_link": None},
            {"publisher": "Indeed", "apply_link": "https://indeed.com/apply/abc123"},
        ],
        "job_google_link": "https://www.google.com/search?q=jobs&abc123",
        "job_description": "React and Node.js across the stack.",
        "job_is_remote": True,
        "job_posted_at_datetime_utc": "2024-03-06T00:00:00.000Z",
        "job_city": "Bengaluru",
        "job_state": "Karnataka",
        "job_country": "IN",
        "job_min_salary": 1200000,
        "job_max_salary": 1800000,
        "job_salary_currency": None,
        "job_salary_period": "YEAR",
        "job_highlights": {
            "Qualifications": [
                "3+ years with React",
                "A long qualification sentence that is certainly more than fifty characters",
                "Node.js",
                "Ignored: only the first three qualifications are read",
            ],
        },
        "job_required_skills": ["React", "TypeScript", "AWS", "Docker", "GraphQL", "Redis"],
        "job_job_title": "Full stack developer",
    }


@pytest.fixture
def postings() -> List[LocalJobPosting]:
    def at(day: int) -> datetime:
        return datetime(2024, 3, day, 9, 0, tzinfo=timezone.utc)

    return [
        LocalJobPosting(
            id=1,
            title="Frontend Engineer",
            description="Build the web app.",
            requirements="React, Node.js, MySQL",
            work_location="Pune",
            salary_range="8-12 LPA",
            posted_at=at(1),
            employer_id=10,
        ),
        LocalJobPosting(
            id=2,
            title="Data Analyst",
            description="Dashboards and reporting.",
            requirements="SQL; Excel | Power BI",
            work_location="Remote",
            salary_range=None,
            posted_at=at(5),
            employer_id=11,
        ),
        LocalJobPosting(
            id=3,
            title="Backend Developer",
            description="Python services with PostgreSQL and React admin.",
            requirements="Python/Django/SQL",
            work_location="Hyderabad",
            salary_range="15 LPA",
            posted_at=at(3),
            employer_id=10,
        ),
        LocalJobPosting(
            id=4,
            title="Office Manager",
            description="Run the office.",
            requirements="Communication, Scheduling",
            work_location="Delhi",
            posted_at=at(7),
            employer_id=12,
        ),
    ]
