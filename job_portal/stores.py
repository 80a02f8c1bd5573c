"""Read-only access to the portal's own job postings and seeker profiles.

Posting CRUD and profile editing belong to other subsystems. This core only
needs two reads, expressed as small protocols so any backing store can be
plugged in. In-memory stores back the tests; JSON-file stores let the API run
against an exported snapshot.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Protocol, Union

from pydantic import TypeAdapter, ValidationError

from .errors import StoreError
from .logger import get_logger
from .models import LocalJobPosting, SkillProfile

logger = get_logger(__name__)

_postings_adapter = TypeAdapter(List[LocalJobPosting])


class JobStore(Protocol):
    def list_jobs(self) -> List[LocalJobPosting]:
        """All postings, newest `posted_at` first. Raises StoreError if unreadable."""
        ...


class ProfileStore(Protocol):
    def get_skills(self, user_id: str) -> Optional[str]:
        """Raw comma-separated skills for a user, or None without a profile."""
        ...


def load_profile(store: ProfileStore, user_id: str) -> SkillProfile:
    """Read a user's skills and normalize them into a SkillProfile."""
    return SkillProfile.from_raw(store.get_skills(user_id))


def _newest_first(postings: Iterable[LocalJobPosting]) -> List[LocalJobPosting]:
    return sorted(postings, key=lambda p: p.posted_at, reverse=True)


class InMemoryJobStore:
    def __init__(self, postings: Iterable[LocalJobPosting] = ()) -> None:
        self._postings = list(postings)

    def list_jobs(self) -> List[LocalJobPosting]:
        return _newest_first(self._postings)


class InMemoryProfileStore:
    def __init__(self, skills_by_user: Optional[Mapping[str, Optional[str]]] = None) -> None:
        self._skills = dict(skills_by_user or {})

    def get_skills(self, user_id: str) -> Optional[str]:
        return self._skills.get(str(user_id))


def _read_json(path: Path) -> Any:
    try:
        with path.open(encoding="utf-8") as fh:
            return json.load(fh)
    except (OSError, json.JSONDecodeError) as exc:
        raise StoreError(f"cannot read {path}: {exc}") from exc


class JsonFileJobStore:
    """Postings from a JSON array of posting objects (snake_case or camelCase keys).

    The file is re-read on every call so edits show up without a restart.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path).expanduser()

    def list_jobs(self) -> List[LocalJobPosting]:
        data = _read_json(self.path)
        try:
            postings = _postings_adapter.validate_python(data)
        except ValidationError as exc:
            raise StoreError(f"invalid job postings in {self.path}: {exc.error_count()} errors") from exc
        logger.debug("Loaded %s postings from %s", len(postings), self.path)
        return _newest_first(postings)


class JsonFileProfileStore:
    """Profiles from a JSON object mapping user id to a skills string."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path).expanduser()

    def get_skills(self, user_id: str) -> Optional[str]:
        data = _read_json(self.path)
        if not isinstance(data, dict):
            raise StoreError(f"{self.path} must hold an object of user id -> skills")
        profiles: Dict[str, Any] = data
        skills = profiles.get(str(user_id))
        if skills is not None and not isinstance(skills, str):
            raise StoreError(f"skills for user {user_id} in {self.path} must be a string")
        return skills
