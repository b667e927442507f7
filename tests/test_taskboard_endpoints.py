"""HTTP-level tests for the taskboard routes.

Repositories are swapped for in-memory fakes through
``app.dependency_overrides`` so no database is needed.
"""

from uuid import uuid4

import pytest

from app.core.config import settings
from app.dependencies import (
    get_clock,
    get_directory_repo,
    get_enquiry_repo,
    get_follow_up_repo,
)
from app.main import app
from factories import (
    ORG_ID,
    FakeDirectoryRepository,
    FakeEnquiryRepository,
    FakeFollowUpRepository,
    fixed_clock,
    make_enquiry,
    make_follow_up,
    make_member,
    utc,
)

NOW = utc(2024, 3, 10, 12)
HEADERS = {"X-Organization-Id": str(ORG_ID)}


def _install(follow_ups=(), enquiries=(), members=()) -> FakeFollowUpRepository:
    follow_up_repo = FakeFollowUpRepository(follow_ups)
    enquiry_repo = FakeEnquiryRepository(enquiries)
    directory_repo = FakeDirectoryRepository(members=members)
    app.dependency_overrides[get_follow_up_repo] = lambda: follow_up_repo
    app.dependency_overrides[get_enquiry_repo] = lambda: enquiry_repo
    app.dependency_overrides[get_directory_repo] = lambda: directory_repo
    app.dependency_overrides[get_clock] = lambda: fixed_clock(NOW)
    return follow_up_repo


class TestHealth:
    @pytest.mark.asyncio
    async def test_health(self, async_client):
        response = await async_client.get("/api/v1/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestListEndpoint:
    @pytest.mark.asyncio
    async def test_camel_case_rows(self, async_client):
        member = make_member()
        follow_up = make_follow_up(
            scheduled_time=utc(2024, 3, 10, 9), related_entity_id=member.member_id
        )
        _install([follow_up], [make_enquiry(follow_up_date=utc(2024, 3, 10, 10))], [member])

        response = await async_client.get("/api/v1/followups/taskboard", headers=HEADERS)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["total"] == 2
        first, second = body["followUps"]
        assert first["id"] == {"source": "follow-up", "nativeId": str(follow_up.follow_up_id)}
        assert first["memberName"] == "Priya Sharma"
        assert first["callStatus"] == "scheduled"
        assert first["sNo"] == 1
        assert first["timeLabel"] == "09:00 AM"
        assert second["isEnquiry"] is True
        assert second["callType"] == "enquiry-call"
        assert second["sNo"] == 2

    @pytest.mark.asyncio
    async def test_query_filters_are_applied(self, async_client):
        _install(
            [make_follow_up(scheduled_time=None, due_date=utc(2024, 3, 10))],
            [make_enquiry(last_call_status="busy")],
        )
        response = await async_client.get(
            "/api/v1/followups/taskboard",
            params={"fromDate": "2024-03-10", "toDate": "2024-03-10", "tab": "attempted"},
            headers=HEADERS,
        )
        rows = response.json()["followUps"]
        assert [r["callStatus"] for r in rows] == ["attempted"]

    @pytest.mark.asyncio
    async def test_bad_filters_fall_back_to_defaults(self, async_client):
        _install([make_follow_up()])
        response = await async_client.get(
            "/api/v1/followups/taskboard",
            params={"staffId": "nobody", "callType": "walk-in", "dateFilter": "soon"},
            headers=HEADERS,
        )
        assert response.status_code == 200
        assert response.json()["total"] == 1

    @pytest.mark.asyncio
    async def test_pagination(self, async_client):
        _install([make_follow_up(scheduled_time=utc(2024, 3, 10, h)) for h in range(8, 12)])
        response = await async_client.get(
            "/api/v1/followups/taskboard",
            params={"skip": 1, "limit": 2},
            headers=HEADERS,
        )
        body = response.json()
        assert body["total"] == 4
        assert [r["sNo"] for r in body["followUps"]] == [2, 3]

    @pytest.mark.asyncio
    async def test_limit_above_maximum_is_rejected(self, async_client):
        _install()
        response = await async_client.get(
            "/api/v1/followups/taskboard",
            params={"limit": settings.TASKBOARD_MAX_LIMIT + 1},
            headers=HEADERS,
        )
        assert response.status_code == 422
        assert response.json()["type"] == "validation_error"

    @pytest.mark.asyncio
    async def test_missing_organization_header(self, async_client):
        _install()
        response = await async_client.get("/api/v1/followups/taskboard")
        assert response.status_code == 422


class TestStatsEndpoint:
    @pytest.mark.asyncio
    async def test_stats_payload(self, async_client):
        _install(
            [make_follow_up(), make_follow_up(call_status="missed")],
            [make_enquiry(last_call_status="not-called")],
        )
        response = await async_client.get(
            "/api/v1/followups/taskboard/stats", headers=HEADERS
        )
        assert response.status_code == 200
        stats = response.json()["stats"]
        assert stats["total"] == 3
        assert stats["scheduled"] == {"count": 2, "percent": 67}
        assert stats["missed"] == {"count": 1, "percent": 33}
        assert stats["notContacted"] == {"count": 0, "percent": 0}


class TestExportEndpoint:
    @pytest.mark.asyncio
    async def test_csv_download(self, async_client):
        _install([make_follow_up()])
        response = await async_client.get(
            "/api/v1/followups/taskboard/export", headers=HEADERS
        )
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert (
            response.headers["content-disposition"]
            == 'attachment; filename="taskboard-20240310120000.csv"'
        )
        lines = response.text.splitlines()
        assert lines[0].startswith('"S.No","Date","Time"')
        assert len(lines) == 2

    @pytest.mark.asyncio
    async def test_export_is_rate_limited(self, async_client):
        _install()
        allowed = int(settings.EXPORT_RATE_LIMIT.split("/")[0])
        for _ in range(allowed):
            response = await async_client.get(
                "/api/v1/followups/taskboard/export", headers=HEADERS
            )
            assert response.status_code == 200
        response = await async_client.get(
            "/api/v1/followups/taskboard/export", headers=HEADERS
        )
        assert response.status_code == 429


class TestStatusEndpoint:
    @pytest.mark.asyncio
    async def test_update_status(self, async_client):
        follow_up = make_follow_up()
        repo = _install([follow_up])

        response = await async_client.put(
            f"/api/v1/followups/taskboard/{follow_up.follow_up_id}/status",
            json={"callStatus": "attempted"},
            headers=HEADERS,
        )

        assert response.status_code == 200
        body = response.json()["followUp"]
        assert body["followUpId"] == str(follow_up.follow_up_id)
        assert body["callStatus"] == "attempted"
        assert body["attemptedAt"].startswith("2024-03-10T12:00:00")
        assert repo.commits == 1

    @pytest.mark.asyncio
    async def test_contacted_completes_follow_up(self, async_client):
        follow_up = make_follow_up(call_status="attempted")
        _install([follow_up])

        response = await async_client.put(
            f"/api/v1/followups/taskboard/{follow_up.follow_up_id}/status",
            json={"callStatus": "contacted"},
            headers=HEADERS,
        )

        body = response.json()["followUp"]
        assert body["status"] == "completed"
        assert body["contactedAt"].startswith("2024-03-10T12:00:00")
        assert body["completedAt"] == body["contactedAt"]

    @pytest.mark.asyncio
    async def test_unknown_follow_up(self, async_client):
        _install()
        response = await async_client.put(
            f"/api/v1/followups/taskboard/{uuid4()}/status",
            json={"callStatus": "attempted"},
            headers=HEADERS,
        )
        assert response.status_code == 404
        assert response.json()["type"] == "follow_up_not_found"

    @pytest.mark.asyncio
    async def test_invalid_status_value(self, async_client):
        follow_up = make_follow_up()
        _install([follow_up])
        response = await async_client.put(
            f"/api/v1/followups/taskboard/{follow_up.follow_up_id}/status",
            json={"callStatus": "dialled"},
            headers=HEADERS,
        )
        assert response.status_code == 422
        assert follow_up.call_status == "scheduled"

    @pytest.mark.asyncio
    async def test_enquiry_ids_are_not_updatable(self, async_client):
        enquiry = make_enquiry()
        _install(enquiries=[enquiry])
        response = await async_client.put(
            f"/api/v1/followups/taskboard/{enquiry.enquiry_id}/status",
            json={"callStatus": "contacted"},
            headers=HEADERS,
        )
        assert response.status_code == 404
