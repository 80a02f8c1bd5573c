"""Aggregate external job searches across provider connectors.

A search fans out to every selected connector at once and joins on all of
them before touching any result. Connectors isolate their own failures and
deadlines, so the join always completes within roughly one provider timeout.
After the join everything is synchronous: concatenate, sort newest first,
and report which sources actually contributed.
"""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Sequence

from .logger import get_logger
from .models import ExternalJob, SearchResponse, SourceDescriptor
from .sources import JobSource, describe_sources

logger = get_logger(__name__)

ALL_SOURCES = "all"

# Records without a date rank as the oldest possible value.
OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def _posted_key(job: ExternalJob) -> datetime:
    return job.posted_at or OLDEST


def merge_jobs(batches: Iterable[Sequence[ExternalJob]]) -> List[ExternalJob]:
    """Concatenate per-source results and sort newest first.

    The sort is stable, so records with equal (or missing) dates keep their
    source order.
    """
    merged: List[ExternalJob] = [job for batch in batches for job in batch]
    merged.sort(key=_posted_key, reverse=True)
    return merged


def distinct_sources(jobs: Iterable[ExternalJob]) -> List[str]:
    """Source names present in `jobs`, in order of first appearance."""
    seen = set()
    out: List[str] = []
    for job in jobs:
        if job.source not in seen:
            seen.add(job.source)
            out.append(job.source)
    return out


class JobAggregator:
    """Fan a search out to the registered connectors and merge the results."""

    def __init__(self, sources: Sequence[JobSource]) -> None:
        self._sources = list(sources)

    @property
    def sources(self) -> List[JobSource]:
        return list(self._sources)

    def describe_sources(self) -> List[SourceDescriptor]:
        return describe_sources(self._sources)

    def select_sources(self, source_filter: Optional[str] = None) -> List[JobSource]:
        """Resolve a source filter to connectors.

        `None`, blank and "all" select every connector. Otherwise the filter is
        a comma-separated list of connector names, matched case-insensitively;
        unknown names are ignored.
        """
        requested = [s.strip().lower() for s in (source_filter or "").split(",") if s.strip()]
        if not requested or ALL_SOURCES in requested:
            return list(self._sources)

        known = {s.name for s in self._sources}
        unknown = [name for name in requested if name not in known]
        if unknown:
            logger.warning("Ignoring unknown job sources: %s", ", ".join(unknown))

        return [s for s in self._sources if s.name in requested]

    async def search(
        self,
        keyword: Optional[str] = None,
        location: Optional[str] = None,
        source_filter: Optional[str] = None,
    ) -> SearchResponse:
        """Run one aggregated search. Never raises because of a provider."""
        selected = self.select_sources(source_filter)
        if not selected:
            return SearchResponse(total_count=0, sources=[], jobs=[])

        results = await asyncio.gather(
            *(source.fetch_jobs(keyword, location) for source in selected),
            return_exceptions=True,
        )

        batches: List[List[ExternalJob]] = []
        for source, result in zip(selected, results):
            # Connectors already swallow their own errors; this only guards
            # against a connector that breaks that contract.
            if isinstance(result, BaseException):
                logger.error("%s raised out of fetch_jobs: %r", source.name, result)
                continue
            batches.append(result)

        jobs = merge_jobs(batches)
        sources = distinct_sources(jobs)
        logger.info(
            "Aggregated %s jobs from %s (requested: %s)",
            len(jobs),
            ", ".join(sources) or "no sources",
            ", ".join(s.name for s in selected),
        )
        return SearchResponse(total_count=len(jobs), sources=sources, jobs=jobs)
