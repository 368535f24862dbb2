"""Tests for resume snapshot endpoints."""

from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from resume_builder.api.main import app
from resume_builder.data.db import get_session
from resume_builder.data.models import ResumeSnapshot
from resume_builder.services.resume_data import PersonalInfo, ResumeData
from resume_builder.services.resume_snapshots import _next_key, list_snapshots, save_snapshot


@pytest.fixture
def client() -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


def test_list_is_empty_initially(client: TestClient) -> None:
    response = client.get("/api/resumes")
    assert response.status_code == 200
    assert response.json() == []


def test_save_and_list(client: TestClient) -> None:
    resume = {"personalInfo": {"firstName": "Jane", "lastName": "Doe"}, "summary": "Hi"}

    response = client.post("/api/resumes", json=resume)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Resume saved successfully"
    assert body["id"].isdigit()

    listed = client.get("/api/resumes").json()
    assert len(listed) == 1
    assert listed[0]["personalInfo"]["firstName"] == "Jane"
    assert listed[0]["summary"] == "Hi"


def test_rapid_saves_get_distinct_keys(client: TestClient) -> None:
    keys = {client.post("/api/resumes", json={}).json()["id"] for _ in range(5)}
    assert len(keys) == 5
    assert len(client.get("/api/resumes").json()) == 5


def test_delete(client: TestClient) -> None:
    key = client.post("/api/resumes", json={"summary": "temp"}).json()["id"]

    assert client.delete(f"/api/resumes/{key}").status_code == 204
    assert client.get("/api/resumes").json() == []
    assert client.delete(f"/api/resumes/{key}").status_code == 404


def test_snapshots_end_with_the_process() -> None:
    with TestClient(app) as first:
        first.post("/api/resumes", json={"summary": "kept in memory"})
        assert len(first.get("/api/resumes").json()) == 1

    with TestClient(app) as second:
        assert second.get("/api/resumes").json() == []


def test_invalid_body(client: TestClient) -> None:
    assert client.post("/api/resumes", json={"projects": 3}).status_code == 422


def test_service_round_trip() -> None:
    data = ResumeData(personal_info=PersonalInfo(first_name="Ada"))
    first = save_snapshot(data)
    second = save_snapshot(data)
    assert int(second) > int(first)
    assert list_snapshots() == [data, data]


def test_next_key_skips_taken_millisecond() -> None:
    with patch("resume_builder.services.resume_snapshots.time.time_ns", return_value=5_000_000):
        with get_session() as session:
            assert _next_key(session) == "5"
            session.add(ResumeSnapshot(key="5", payload="{}"))
            session.add(ResumeSnapshot(key="6", payload="{}"))
            session.flush()
            assert _next_key(session) == "7"
