"""Integration tests for the webinar HTTP routes.

Run with: pytest tests/test_webinar_api.py -v
"""

from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from webinars import models


def create_webinar_row(organizer_id: str = "test-user", seats: int = 10) -> models.Webinar:
    now = timezone.now()
    return models.Webinar.objects.create(
        id="test-webinar",
        title="Webinar Test",
        seats=seats,
        start_date=now,
        end_date=now,
        organizer_id=organizer_id,
    )


def organize_payload(days_ahead: int = 4, seats: str = "100", title: str = "New Webinar") -> dict:
    start_date = timezone.now() + timedelta(days=days_ahead)
    end_date = start_date + timedelta(hours=1)
    return {
        "title": title,
        "seats": seats,
        "startDate": start_date.isoformat(),
        "endDate": end_date.isoformat(),
    }


@pytest.mark.django_db
class TestChangeSeats:
    """Tests for POST /webinars/{id}/seats"""

    def test_happy_path_updates_seats(self, api_client: APIClient):
        webinar = create_webinar_row()

        response = api_client.post(f"/webinars/{webinar.id}/seats", {"seats": "30"}, format="json")

        assert response.status_code == 200
        assert response.json() == {"message": "Seats updated"}
        assert models.Webinar.objects.get(pk=webinar.id).seats == 30

    def test_webinar_not_found_returns_404(self, api_client: APIClient):
        response = api_client.post("/webinars/non-existent/seats", {"seats": "30"}, format="json")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "WEBINAR_NOT_FOUND"

    def test_not_organizer_returns_401(self, api_client: APIClient):
        webinar = create_webinar_row(organizer_id="other-user")

        response = api_client.post(f"/webinars/{webinar.id}/seats", {"seats": "30"}, format="json")

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "WEBINAR_NOT_ORGANIZER"
        assert models.Webinar.objects.get(pk=webinar.id).seats == 10

    def test_user_header_identifies_organizer(self, api_client: APIClient):
        webinar = create_webinar_row(organizer_id="other-user")

        response = api_client.post(
            f"/webinars/{webinar.id}/seats",
            {"seats": 30},
            format="json",
            HTTP_X_USER_ID="other-user",
        )

        assert response.status_code == 200
        assert models.Webinar.objects.get(pk=webinar.id).seats == 30

    def test_reducing_seats_returns_400(self, api_client: APIClient):
        webinar = create_webinar_row(seats=100)

        response = api_client.post(f"/webinars/{webinar.id}/seats", {"seats": "50"}, format="json")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "WEBINAR_REDUCE_SEATS"
        assert models.Webinar.objects.get(pk=webinar.id).seats == 100

    def test_too_many_seats_returns_400(self, api_client: APIClient):
        webinar = create_webinar_row()

        response = api_client.post(f"/webinars/{webinar.id}/seats", {"seats": "1500"}, format="json")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "WEBINAR_TOO_MANY_SEATS"

    def test_malformed_seats_returns_400(self, api_client: APIClient):
        webinar = create_webinar_row()

        response = api_client.post(f"/webinars/{webinar.id}/seats", {"seats": "lots"}, format="json")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_SEATS"

    def test_oversized_seats_returns_400(self, api_client: APIClient):
        webinar = create_webinar_row()

        response = api_client.post(
            f"/webinars/{webinar.id}/seats", {"seats": "9" * 5000}, format="json"
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_SEATS"
        assert models.Webinar.objects.get(pk=webinar.id).seats == 10

    def test_malformed_seats_wins_over_missing_webinar(self, api_client: APIClient):
        response = api_client.post("/webinars/non-existent/seats", {"seats": "lots"}, format="json")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_SEATS"

    def test_missing_seats_returns_400(self, api_client: APIClient):
        webinar = create_webinar_row()

        response = api_client.post(f"/webinars/{webinar.id}/seats", {}, format="json")

        assert response.status_code == 400
        body = response.json()["error"]
        assert body["code"] == "INVALID_REQUEST"
        assert "seats" in body["details"]


@pytest.mark.django_db
class TestOrganizeWebinar:
    """Tests for POST /webinars"""

    def test_happy_path_creates_webinar(self, api_client: APIClient):
        response = api_client.post("/webinars", organize_payload(), format="json")

        assert response.status_code == 201
        webinar_id = response.json()["id"]
        created = models.Webinar.objects.get(pk=webinar_id)
        assert created.title == "New Webinar"
        assert created.seats == 100
        assert created.organizer_id == "test-user"

    def test_too_soon_returns_400(self, api_client: APIClient):
        response = api_client.post("/webinars", organize_payload(days_ahead=1), format="json")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "WEBINAR_TOO_SOON"
        assert not models.Webinar.objects.exists()

    def test_too_many_seats_returns_400(self, api_client: APIClient):
        response = api_client.post("/webinars", organize_payload(seats="1500"), format="json")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "WEBINAR_TOO_MANY_SEATS"
        assert not models.Webinar.objects.exists()

    def test_invalid_date_returns_400(self, api_client: APIClient):
        payload = organize_payload()
        payload["startDate"] = "next tuesday"

        response = api_client.post("/webinars", payload, format="json")

        assert response.status_code == 400
        body = response.json()["error"]
        assert body["code"] == "INVALID_REQUEST"
        assert "startDate" in body["details"]

    def test_blank_title_returns_400(self, api_client: APIClient):
        response = api_client.post("/webinars", organize_payload(title=""), format="json")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_REQUEST"
