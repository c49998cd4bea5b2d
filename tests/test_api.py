"""
Tests for the v1 HTTP endpoints.

Each test runs against a freshly seeded store, so record counts and
identifiers never leak between tests.
"""

import pytest
from fastapi.testclient import TestClient

from civic_pulse_api.app.core.security import verify_password
from civic_pulse_api.app.main import create_app
from civic_pulse_api.app.services.storage import MemStorage

API = "/api/v1"


class TestGovernmentActivities:

    def test_list_and_get(self, client):
        activities = client.get(f"{API}/government-activities/").json()
        assert len(activities) == 5

        first = activities[0]
        response = client.get(f"{API}/government-activities/{first['id']}")
        assert response.status_code == 200
        assert response.json() == first
        assert first["voteResult"] == "pending"
        assert first["agendaItems"] is None

    def test_get_unknown_returns_404(self, client):
        response = client.get(f"{API}/government-activities/missing")
        assert response.status_code == 404
        assert response.json() == {"detail": "Activity not found"}

    def test_create(self, client):
        response = client.post(f"{API}/government-activities/", json={
            "type": "meeting",
            "title": "Transit board meeting",
            "description": "Quarterly review",
            "category": "infrastructure",
            "date": "2025-12-10T18:00:00Z",
            "status": "upcoming",
            "location": "Transit HQ",
            "agendaItems": ["Fares", "Routes"],
        })
        assert response.status_code == 201
        body = response.json()
        assert body["agendaItems"] == ["Fares", "Routes"]
        assert client.get(f"{API}/government-activities/{body['id']}").status_code == 200

    def test_create_rejects_unknown_type(self, client):
        response = client.post(f"{API}/government-activities/", json={
            "type": "party",
            "title": "x",
            "description": "x",
            "category": "x",
            "date": "2025-12-10T18:00:00Z",
            "status": "upcoming",
            "location": "x",
        })
        assert response.status_code == 422


class TestCitizenIssues:

    def test_create_sets_server_fields(self, client):
        response = client.post(f"{API}/citizen-issues/", json={
            "title": "Pothole",
            "category": "infrastructure",
            "location": "X",
            "zipcode": "00000",
        })
        assert response.status_code == 201
        body = response.json()
        assert body["votes"] == 0
        assert body["status"] == "pending"
        assert body["matchedActivityId"] is None
        assert body["createdAt"]
        assert len(client.get(f"{API}/citizen-issues/").json()) == 6

    def test_client_cannot_set_server_fields(self, client):
        body = client.post(f"{API}/citizen-issues/", json={
            "title": "Pothole",
            "category": "infrastructure",
            "location": "X",
            "zipcode": "00000",
            "votes": 500,
            "status": "matched",
        }).json()
        assert body["votes"] == 0
        assert body["status"] == "pending"

    def test_patch_matches_issue(self, client):
        issue = client.get(f"{API}/citizen-issues/").json()[2]
        activity = client.get(f"{API}/government-activities/").json()[2]

        response = client.patch(f"{API}/citizen-issues/{issue['id']}", json={
            "status": "matched",
            "matchedActivityId": activity["id"],
        })

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "matched"
        assert body["matchedActivityId"] == activity["id"]
        assert body["votes"] == issue["votes"]
        assert body["createdAt"] == issue["createdAt"]
        assert client.get(f"{API}/citizen-issues/{issue['id']}").json() == body

    def test_patch_unknown_returns_404(self, client):
        response = client.patch(f"{API}/citizen-issues/missing", json={"votes": 1})
        assert response.status_code == 404
        assert response.json() == {"detail": "Issue not found"}
        assert len(client.get(f"{API}/citizen-issues/").json()) == 5

    def test_patch_rejects_negative_votes(self, client):
        issue = client.get(f"{API}/citizen-issues/").json()[0]
        response = client.patch(f"{API}/citizen-issues/{issue['id']}", json={"votes": -1})
        assert response.status_code == 422

    def test_patch_rejects_null_for_required_fields(self, client, storage):
        issue = client.get(f"{API}/citizen-issues/").json()[0]

        response = client.patch(f"{API}/citizen-issues/{issue['id']}", json={"status": None, "votes": None})

        assert response.status_code == 422
        stored = storage.get_citizen_issue(issue["id"])
        assert stored.votes == 127
        assert stored.status == "matched"
        assert client.get(f"{API}/citizen-issues/").json()[0] == issue

    def test_patch_null_match_clears_link(self, client):
        issue = client.get(f"{API}/citizen-issues/").json()[0]

        body = client.patch(f"{API}/citizen-issues/{issue['id']}", json={"matchedActivityId": None}).json()

        assert body["matchedActivityId"] is None
        assert body["votes"] == issue["votes"]
        assert body["title"] == issue["title"]


class TestOfficialsAndVotes:

    def test_vote_records_by_official(self, client):
        johnson = client.get(f"{API}/officials/").json()[0]
        assert johnson["name"] == "Sarah Johnson"
        assert johnson["committees"] == ["Transportation Committee", "Public Safety Committee"]

        records = client.get(f"{API}/vote-records/official/{johnson['id']}").json()

        assert len(records) == 1
        assert records[0]["officialId"] == johnson["id"]
        assert records[0]["vote"] == "yes"

    def test_vote_records_for_unknown_official_is_empty(self, client):
        response = client.get(f"{API}/vote-records/official/nobody")
        assert response.status_code == 200
        assert response.json() == []

    def test_create_official_and_vote(self, client):
        official = client.post(f"{API}/officials/", json={
            "name": "Dana Park",
            "role": "Supervisor",
            "photoUrl": "https://example.org/dana.png",
        }).json()
        assert official["photoUrl"] == "https://example.org/dana.png"
        assert official["committees"] == []

        response = client.post(f"{API}/vote-records/", json={
            "officialId": official["id"],
            "activityId": "unknown-activity",
            "vote": "no",
            "issue": "Zoning variance",
            "date": "2025-10-01T00:00:00Z",
        })

        assert response.status_code == 201
        assert len(client.get(f"{API}/vote-records/").json()) == 3
        assert client.get(f"{API}/officials/{official['id']}").json() == official

    def test_unknown_official_returns_404(self, client):
        assert client.get(f"{API}/officials/missing").status_code == 404


class TestStatistics:

    def test_get_by_area(self, client):
        response = client.get(f"{API}/statistics/94102")
        assert response.status_code == 200
        body = response.json()
        assert body["areaType"] == "zipcode"
        assert body["population"] == 28500

    def test_unknown_area_returns_404(self, client):
        response = client.get(f"{API}/statistics/atlantis")
        assert response.status_code == 404
        assert response.json() == {"detail": "Statistics not found for this area"}

    def test_create(self, client):
        response = client.post(f"{API}/statistics/", json={
            "area": "texas",
            "areaType": "state",
            "crimeRate": 41,
            "medianIncome": 67000,
            "educationScore": 71,
            "housingCost": 300000,
            "population": 30000000,
            "year": 2024,
        })
        assert response.status_code == 201
        assert client.get(f"{API}/statistics/texas").json()["population"] == 30000000


class TestActionPlans:

    def test_list_and_get(self, client):
        plans = client.get(f"{API}/action-plans/").json()
        assert [p["actionType"] for p in plans] == ["call", "attend", "email"]
        assert plans[2]["activityId"] is None

        assert client.get(f"{API}/action-plans/{plans[0]['id']}").json() == plans[0]
        assert client.get(f"{API}/action-plans/missing").status_code == 404

    def test_create(self, client):
        issue = client.get(f"{API}/citizen-issues/").json()[3]
        response = client.post(f"{API}/action-plans/", json={
            "issueId": issue["id"],
            "actionType": "attend",
            "title": "Attend the school board meeting",
            "dueDate": "2025-12-01T00:00:00Z",
            "priority": "low",
        })
        assert response.status_code == 201
        body = response.json()
        assert body["officialId"] is None
        assert body["priority"] == "low"


class TestUsers:

    def test_register_and_lookup(self, client, storage):
        response = client.post(f"{API}/users/", json={"username": "ann", "password": "s3cret"})
        assert response.status_code == 201
        user = response.json()
        assert "password" not in user

        assert client.get(f"{API}/users/{user['id']}").json() == user
        assert client.get(f"{API}/users/by-username/ann").json() == user
        assert verify_password("s3cret", storage.get_user(user["id"]).password)

    def test_duplicate_username_conflicts(self, client):
        client.post(f"{API}/users/", json={"username": "ann", "password": "one"})
        response = client.post(f"{API}/users/", json={"username": "ann", "password": "two"})
        assert response.status_code == 409

    def test_unknown_user_returns_404(self, client):
        assert client.get(f"{API}/users/missing").status_code == 404
        assert client.get(f"{API}/users/by-username/nobody").status_code == 404


class TestApplication:

    def test_health_reports_counts(self, client):
        body = client.get(f"{API}/health/").json()
        assert body["status"] == "ok"
        assert body["records"]["citizen_issues"] == 5
        assert body["records"]["statistics"] == 6

    def test_apps_do_not_share_state(self, client):
        other = create_app(storage=MemStorage())
        with TestClient(other) as other_client:
            assert other_client.get(f"{API}/citizen-issues/").json() == []
        assert len(client.get(f"{API}/citizen-issues/").json()) == 5

    @pytest.mark.parametrize("path", [
        "/government-activities/",
        "/citizen-issues/",
        "/officials/",
        "/vote-records/",
        "/statistics/",
        "/action-plans/",
    ])
    def test_list_endpoints_are_idempotent(self, client, path):
        assert client.get(f"{API}{path}").json() == client.get(f"{API}{path}").json()
