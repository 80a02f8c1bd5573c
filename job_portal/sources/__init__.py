"""Provider connectors and the registry the aggregator draws from."""

from __future__ import annotations

from typing import Any, List, Optional

from ..config import Settings, settings as default_settings
from ..models import SourceDescriptor
from .arbeitnow import ArbeitnowSource
from .base import JobSource
from .jsearch import JSearchSource
from .remotive import RemotiveSource

__all__ = [
    "ArbeitnowSource",
    "JSearchSource",
    "JobSource",
    "RemotiveSource",
    "build_sources",
    "describe_sources",
]


def build_sources(config: Optional[Settings] = None, **client_kwargs: Any) -> List[JobSource]:
    """Instantiate every known connector from settings.

    `client_kwargs` is forwarded to each connector (e.g. a test `transport`).
    """
    config = config or default_settings
    client_kwargs.setdefault("timeout_s", config.provider_timeout)
    return [
        JSearchSource(api_key=config.jsearch_api_key, host=config.jsearch_host, **client_kwargs),
        RemotiveSource(**client_kwargs),
        ArbeitnowSource(**client_kwargs),
    ]


def describe_sources(sources: List[JobSource]) -> List[SourceDescriptor]:
    """Static catalogue of the registered connectors; every one is searched by default."""
    return [
        SourceDescriptor(name=s.name, description=s.description, logo=s.logo, is_default=True)
        for s in sources
    ]
