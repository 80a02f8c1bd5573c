"""Tests for the read-only job and profile stores."""

import json

import pytest

from job_portal.errors import StoreError
from job_portal.stores import (
    InMemoryJobStore,
    InMemoryProfileStore,
    JsonFileJobStore,
    JsonFileProfileStore,
    load_profile,
)


@pytest.fixture
def jobs_file(tmp_path):
    path = tmp_path / "jobs.json"
    path.write_text(
        json.dumps(
            [
                {
                    "id": 1,
                    "title": "Older",
                    "requirements": "Python",
                    "workLocation": "Pune",
                    "postedAt": "2024-01-01T00:00:00Z",
                    "employerId": 3,
                },
                {
                    "id": 2,
                    "title": "Newer",
                    "description": None,
                    "requirements": None,
                    "work_location": "Remote",
                    "posted_at": "2024-02-01T00:00:00Z",
                },
            ]
        ),
        encoding="utf-8",
    )
    return path


class TestJsonFileJobStore:
    def test_reads_newest_first_with_either_key_style(self, jobs_file):
        jobs = JsonFileJobStore(jobs_file).list_jobs()

        assert [j.id for j in jobs] == [2, 1]
        assert jobs[1].work_location == "Pune"
        assert jobs[1].employer_id == 3
        assert jobs[0].work_location == "Remote"

    def test_naive_and_aware_timestamps_sort_together(self, tmp_path):
        path = tmp_path / "jobs.json"
        path.write_text(
            json.dumps(
                [
                    {"id": 1, "title": "Naive", "postedAt": "2024-03-02T00:00:00"},
                    {"id": 2, "title": "Aware", "postedAt": "2024-03-01T00:00:00+00:00"},
                ]
            ),
            encoding="utf-8",
        )

        jobs = JsonFileJobStore(path).list_jobs()

        assert [j.id for j in jobs] == [1, 2]
        assert jobs[0].posted_at.tzinfo is not None

    def test_missing_file_raises_store_error(self, tmp_path):
        with pytest.raises(StoreError, match="cannot read"):
            JsonFileJobStore(tmp_path / "nope.json").list_jobs()

    def test_invalid_json_raises_store_error(self, tmp_path):
        path = tmp_path / "jobs.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(StoreError):
            JsonFileJobStore(path).list_jobs()

    def test_invalid_posting_raises_store_error(self, tmp_path):
        path = tmp_path / "jobs.json"
        path.write_text(json.dumps([{"id": "x"}]), encoding="utf-8")
        with pytest.raises(StoreError, match="invalid job postings"):
            JsonFileJobStore(path).list_jobs()


class TestJsonFileProfileStore:
    def test_reads_skills(self, tmp_path):
        path = tmp_path / "profiles.json"
        path.write_text(json.dumps({"7": "React, SQL"}), encoding="utf-8")
        store = JsonFileProfileStore(path)

        assert store.get_skills("7") == "React, SQL"
        assert store.get_skills("8") is None

    def test_wrong_shape_raises_store_error(self, tmp_path):
        path = tmp_path / "profiles.json"
        path.write_text(json.dumps(["React"]), encoding="utf-8")
        with pytest.raises(StoreError):
            JsonFileProfileStore(path).get_skills("7")

    def test_non_string_skills_raise_store_error(self, tmp_path):
        path = tmp_path / "profiles.json"
        path.write_text(json.dumps({"7": ["React"]}), encoding="utf-8")
        with pytest.raises(StoreError):
            JsonFileProfileStore(path).get_skills("7")


class TestInMemoryStores:
    def test_job_store_orders_newest_first(self, postings):
        assert [j.id for j in InMemoryJobStore(postings).list_jobs()] == [4, 2, 3, 1]

    def test_load_profile_normalizes_once(self):
        store = InMemoryProfileStore({"7": " Python , python ,Go"})
        assert load_profile(store, "7").skills == ("python", "go")

    def test_load_profile_without_profile(self):
        assert load_profile(InMemoryProfileStore(), "7").has_skills is False
