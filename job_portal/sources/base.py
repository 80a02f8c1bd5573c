"""Base classes for source connectors."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

import httpx

from ..errors import SourceNotConfiguredError
from ..logger import get_logger
from ..models import ExternalJob

logger = get_logger(__name__)

RecordParser = Callable[[Dict[str, Any]], ExternalJob]


class JobSource(ABC):
    """Abstract base class for a job provider connector.

    Subclasses implement `_fetch`, which may raise freely. Callers use
    `fetch_jobs`, which never raises: a misconfigured, failing or slow provider
    yields an empty list so it cannot take the aggregate response down with it.
    """

    name: str
    description: str = ""
    logo: Optional[str] = None

    def __init__(
        self,
        timeout_s: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._timeout = timeout_s
        self._transport = transport

    def _client(self, **kwargs: Any) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self._timeout,
            follow_redirects=True,
            transport=self._transport,
            **kwargs,
        )

    def check_configured(self) -> None:
        """Raise SourceNotConfiguredError when a required credential is missing."""

    @abstractmethod
    async def _fetch(self, keyword: Optional[str], location: Optional[str]) -> List[ExternalJob]:
        """Issue the provider request and return normalized jobs."""
        raise NotImplementedError

    async def fetch_jobs(self, keyword: Optional[str] = None, location: Optional[str] = None) -> List[ExternalJob]:
        """Fetch jobs from the provider, isolating every failure into an empty list."""
        try:
            self.check_configured()
        except SourceNotConfiguredError as exc:
            logger.warning("Skipping %s: %s", self.name, exc)
            return []

        try:
            jobs = await asyncio.wait_for(self._fetch(keyword, location), timeout=self._timeout)
        except asyncio.TimeoutError:
            logger.error("%s did not respond within %.1fs", self.name, self._timeout)
            return []
        except httpx.HTTPStatusError as exc:
            logger.error("%s API error: HTTP %s", self.name, exc.response.status_code)
            return []
        except Exception as exc:
            logger.exception("Error fetching %s jobs: %s", self.name, exc)
            return []

        logger.info("%s returned %s jobs (keyword=%r, location=%r)", self.name, len(jobs), keyword, location)
        return jobs

    def _parse_records(self, records: Any, parse_job: RecordParser) -> List[ExternalJob]:
        """Map raw provider records, skipping any that are malformed."""
        if not isinstance(records, list):
            logger.warning("%s payload has no job list; got %s", self.name, type(records).__name__)
            return []

        out: List[ExternalJob] = []
        for raw in records:
            if not isinstance(raw, dict):
                logger.debug("%s: skipping non-object record %r", self.name, raw)
                continue
            try:
                out.append(parse_job(raw))
            except (ValueError, TypeError, AttributeError, KeyError) as exc:
                logger.debug("%s: skipping malformed record: %s", self.name, exc)
        return out
