"""HTTP surface for external job search and skill-based advice.

Authentication lives outside this core: the auth layer in front of it
forwards the caller's id in the ``X-User-Id`` header.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, FastAPI, Header, HTTPException, Query, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from . import __version__
from .aggregator import JobAggregator
from .config import Settings, settings as default_settings
from .demand import suggest_skills
from .errors import StoreError
from .logger import configure_logging, get_logger
from .models import (
    RecommendationsResponse,
    SearchResponse,
    SkillSuggestionsResponse,
    SourceDescriptor,
)
from .recommend import recommend_jobs
from .sources import build_sources
from .stores import (
    InMemoryJobStore,
    InMemoryProfileStore,
    JobStore,
    JsonFileJobStore,
    JsonFileProfileStore,
    ProfileStore,
    load_profile,
)

logger = get_logger(__name__)


def _router_prefix(prefix: Optional[str]) -> str:
    """Normalize API_PREFIX: "" stays at the root, "api/" becomes "/api"."""
    prefix = (prefix or "").strip().strip("/")
    return f"/{prefix}" if prefix else ""


def _current_user(
x_user_id: Optional[str]) -> str:
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Missing caller identity")
    return x_user_id.strip()


def _default_job_store(config: Settings) -> JobStore:
    return JsonFileJobStore(config.jobs_file) if config.jobs_file else InMemoryJobStore()


def _default_profile_store(config: Settings) -> ProfileStore:
    return JsonFileProfileStore(config.profiles_file) if config.profiles_file else InMemoryProfileStore()


def create_app(
    config: Optional[Settings] = None,
    aggregator: Optional[JobAggregator] = None,
    job_store: Optional[JobStore] = None,
    profile_store: Optional[ProfileStore] = None,
) -> FastAPI:
    """Build the API. Anything not passed in is built from settings."""
    config = config or default_settings
    configure_logging(config.log_level)

    app = FastAPI(title="Job Portal", version=__version__)
    app.state.aggregator = aggregator or JobAggregator(build_sources(config))
    app.state.job_store = job_store if job_store is not None else _default_job_store(config)
    app.state.profile_store = profile_store if profile_store is not None else _default_profile_store(config)

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
        logger.error("Store unavailable for %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=503, content={"detail": "Job data is temporarily unavailable"})

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok", "service": "job-portal"}

    router = APIRouter(prefix=_router_prefix(config.api_prefix))

    @router.get("/external-jobs/search", response_model=SearchResponse)
    async def search_external_jobs(
        request: Request,
        keyword: Optional[str] = Query(default=None),
        location: Optional[str] = Query(default=None),
        source: Optional[str] = Query(default=None),
    ) -> SearchResponse:
        return await request.app.state.aggregator.search(keyword, location, source)

    @router.get("/external-jobs/sources", response_model=List[SourceDescriptor])
    async def list_external_sources(request: Request) -> List[SourceDescriptor]:
        return request.app.state.aggregator.describe_sources()

    @router.get("/profile/recommendations", response_model=RecommendationsResponse)
    async def get_recommendations(
        request: Request,
        x_user_id: Optional[str] = Header(default=None),
    ) -> RecommendationsResponse:
        user_id = _current_user(x_user_id)
        profile = await run_in_threadpool(load_profile, request.app.state.profile_store, user_id)
        postings = await run_in_threadpool(request.app.state.job_store.list_jobs)
        return recommend_jobs(profile, postings)

    @router.get("/profile/skill-suggestions", response_model=SkillSuggestionsResponse)
    async def get_skill_suggestions(
        request: Request,
        x_user_id: Optional[str] = Header(default=None),
    ) -> SkillSuggestionsResponse:
        user_id = _current_user(x_user_id)
        profile = await run_in_threadpool(load_profile, request.app.state.profile_store, user_id)
        postings = await run_in_threadpool(request.app.state.job_store.list_jobs)
        return suggest_skills(profile, (p.requirements for p in postings))

    app.include_router(router)
    return app
