"""
API tests for interview endpoints.
"""

import pytest

from fastapi import status


def interview_payload(application_id, when="2099-05-01T10:00:00", status_value="SCHEDULED", **extra):
    payload = {
        "applicationId": application_id,
        "round": "Technical",
        "scheduledDate": when,
        "status": status_value,
    }
    payload.update(extra)
    return payload


async def create_interview(client, headers, payload):
    response = await client.post("/api/interviews", json=payload, headers=headers)
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()


class TestInterviewCrud:
    @pytest.mark.asyncio
    async def test_create(self, test_client, alice_headers, alice_application):
        data = await create_interview(
            test_client,
            alice_headers,
            interview_payload(
                alice_application.id,
                interviewerName="Grace Hopper",
                interviewRole="Engineering Manager",
                format="VIDEO_CALL",
                rating=4,
            ),
        )

        assert data["applicationId"] == alice_application.id
        assert data["applicationCompany"] == "Acme Corp"
        assert data["applicationPosition"] == "Backend Engineer"
        assert data["scheduledDate"] == "2099-05-01T10:00:00"
        assert data["format"] == "VIDEO_CALL"
        assert data["interviewRole"] == "Engineering Manager"
        assert data["rating"] == 4

    @pytest.mark.asyncio
    async def test_create_rating_out_of_range(self, test_client, alice_headers, alice_application):
        response = await test_client.post(
            "/api/interviews",
            json=interview_payload(alice_application.id, rating=6),
            headers=alice_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "rating" in response.json()["errors"]

    @pytest.mark.asyncio
    async def test_create_on_missing_application(self, test_client, alice_headers):
        response = await test_client.post(
            "/api/interviews", json=interview_payload(9999), headers=alice_headers
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio
    async def test_create_on_foreign_application(self, test_client, bob_headers, alice_application):
        response = await test_client.post(
            "/api/interviews", json=interview_payload(alice_application.id), headers=bob_headers
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN

    @pytest.mark.asyncio
    async def test_get_update_delete(self, test_client, alice_headers, alice_application):
        created = await create_interview(test_client, alice_headers, interview_payload(alice_application.id))
        url = f"/api/interviews/{created['id']}"

        response = await test_client.get(url, headers=alice_headers)
        assert response.status_code == status.HTTP_200_OK

        response = await test_client.put(
            url,
            json=interview_payload(alice_application.id, status_value="COMPLETED", feedback="Went well"),
            headers=alice_headers,
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "COMPLETED"
        assert response.json()["feedback"] == "Went well"

        response = await test_client.delete(url, headers=alice_headers)
        assert response.status_code == status.HTTP_204_NO_CONTENT

        response = await test_client.get(url, headers=alice_headers)
        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio
    async def test_foreign_interview(self, test_client, alice_headers, bob_headers, alice_application):
        created = await create_interview(test_client, alice_headers, interview_payload(alice_application.id))
        url = f"/api/interviews/{created['id']}"

        assert (await test_client.get(url, headers=bob_headers)).status_code == status.HTTP_403_FORBIDDEN
        assert (await test_client.delete(url, headers=bob_headers)).status_code == status.HTTP_403_FORBIDDEN


class TestInterviewListings:
    @pytest.mark.asyncio
    async def test_list_for_application(self, test_client, alice_headers, bob_headers, alice_application):
        await create_interview(test_client, alice_headers, interview_payload(alice_application.id, "2099-06-01T09:00:00"))
        await create_interview(test_client, alice_headers, interview_payload(alice_application.id, "2099-05-01T09:00:00"))

        url = f"/api/interviews/application/{alice_application.id}"
        response = await test_client.get(url, headers=alice_headers)

        assert response.status_code == status.HTTP_200_OK
        assert [i["scheduledDate"] for i in response.json()] == [
            "2099-05-01T09:00:00",
            "2099-06-01T09:00:00",
        ]
        assert (await test_client.get(url, headers=bob_headers)).status_code == status.HTTP_403_FORBIDDEN

    @pytest.mark.asyncio
    async def test_upcoming_past_summary(self, test_client, alice_headers, alice_application):
        await create_interview(test_client, alice_headers, interview_payload(alice_application.id, "2099-01-01T10:00:00"))
        await create_interview(
            test_client,
            alice_headers,
            interview_payload(alice_application.id, "2020-01-01T10:00:00", "COMPLETED"),
        )

        upcoming = await test_client.get("/api/interviews/upcoming", headers=alice_headers)
        past = await test_client.get("/api/interviews/past", headers=alice_headers)
        summary = await test_client.get("/api/interviews/summary", headers=alice_headers)

        assert [i["scheduledDate"] for i in upcoming.json()] == ["2099-01-01T10:00:00"]
        assert [i["scheduledDate"] for i in past.json()] == ["2020-01-01T10:00:00"]

        data = summary.json()
        assert data["totalInterviews"] == 2
        assert data["scheduled"] == 1
        assert data["completed"] == 1
        assert data["cancelled"] == 0
        assert len(data["upcomingInterviews"]) == 1
        assert len(data["recentInterviews"]) == 1

    @pytest.mark.asyncio
    async def test_listings_are_per_user(self, test_client, alice_headers, bob_headers, alice_application):
        await create_interview(test_client, alice_headers, interview_payload(alice_application.id))

        response = await test_client.get("/api/interviews/upcoming", headers=bob_headers)

        assert response.json() == []
