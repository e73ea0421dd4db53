import pytest
from portfolio_site.core.config import settings
from portfolio_site.services.contact_service import contact_service
from portfolio_site.services.supabase_service import SupabaseException
from portfolio_site.tests.constants.contact import (
    ContactTestConstants,
    MOCK_CONTACT_FORM_DATA,
    MOCK_CONTACT_RECORD,
    MOCK_LONG_MESSAGE,
)
from portfolio_site.utils.constants import ContactMessages


@pytest.mark.asyncio
class TestContactEndpoint:
    async def test_submit_contact_success(self, ready_client, mock_database):
        """Integration test for a stored contact message."""

        response = ready_client.post(
            f"{settings.API_V1_STR}/contact/submit", json=MOCK_CONTACT_FORM_DATA
        )

        assert response.status_code == 201
        assert response.json() == {
            "success": True,
            "status": "success",
            "message": ContactMessages.SENT.value,
        }
        mock_database.insert_data.assert_called_once_with(
            contact_service.table_name, MOCK_CONTACT_RECORD
        )

    @pytest.mark.parametrize("empty_field", ["name", "email", "message"])
    async def test_submit_contact_missing_field(self, ready_client, mock_database, empty_field):
        data = {**MOCK_CONTACT_FORM_DATA, empty_field: ""}

        response = ready_client.post(f"{settings.API_V1_STR}/contact/submit", json=data)

        assert response.status_code == 422
        assert response.json() == {"detail": ContactMessages.MISSING_FIELDS.value}
        mock_database.insert_data.assert_not_called()

    async def test_submit_contact_without_fields(self, ready_client, mock_database):
        response = ready_client.post(f"{settings.API_V1_STR}/contact/submit", json={})

        assert response.status_code == 422
        assert response.json() == {"detail": ContactMessages.MISSING_FIELDS.value}
        mock_database.insert_data.assert_not_called()

    async def test_submit_contact_backend_not_ready(self, unconfigured_client):
        response = unconfigured_client.post(
            f"{settings.API_V1_STR}/contact/submit", json=MOCK_CONTACT_FORM_DATA
        )

        assert response.status_code == 503
        assert response.json() == {"detail": ContactMessages.BACKEND_NOT_READY.value}

    async def test_submit_contact_write_failure(self, ready_client, mock_database):
        mock_database.insert_data.side_effect = SupabaseException(
            "An error occured while inserting into table: contact_messages"
        )

        response = ready_client.post(
            f"{settings.API_V1_STR}/contact/submit", json=MOCK_CONTACT_FORM_DATA
        )

        assert response.status_code == 502
        assert response.json() == {"detail": ContactMessages.SEND_FAILED.value}
        mock_database.insert_data.assert_called_once()

    async def test_submit_contact_long_message(self, ready_client, mock_database):
        data = {**MOCK_CONTACT_FORM_DATA, "message": MOCK_LONG_MESSAGE}

        response = ready_client.post(f"{settings.API_V1_STR}/contact/submit", json=data)

        assert response.status_code == 201
        assert response.json()["success"] is True
        mock_database.insert_data.assert_called_once()
        assert mock_database.insert_data.call_args.args[1]["message"] == MOCK_LONG_MESSAGE

    async def test_submit_contact_unicode_and_unchecked_email(self, ready_client, mock_database):
        data = {
            "name": "Señor Arham",
            "email": ContactTestConstants.MOCK_INVALID_EMAIL.value,
            "message": ContactTestConstants.MOCK_MULTILINE_MESSAGE.value,
        }

        response = ready_client.post(f"{settings.API_V1_STR}/contact/submit", json=data)

        assert response.status_code == 201
        payload = mock_database.insert_data.call_args.args[1]
        assert {key: payload[key] for key in data} == data

    async def test_long_message_without_backend_is_not_ready(self, unconfigured_client):
        data = {**MOCK_CONTACT_FORM_DATA, "message": MOCK_LONG_MESSAGE}

        response = unconfigured_client.post(f"{settings.API_V1_STR}/contact/submit", json=data)

        assert response.status_code == 503
        assert response.json() == {"detail": ContactMessages.BACKEND_NOT_READY.value}

    async def test_get_status_ready(self, ready_client):
        response = ready_client.get(f"{settings.API_V1_STR}/contact/status")

        assert response.status_code == 200
        assert response.json() == {
            "state": "ready_with_session",
            "ready": True,
            "connected": True,
            "collection": f"artifacts/{ContactTestConstants.MOCK_APP_ID.value}/public/data/contact_messages",
        }

    async def test_get_status_unconfigured(self, unconfigured_client):
        response = unconfigured_client.get(f"{settings.API_V1_STR}/contact/status")

        assert response.status_code == 200
        assert response.json()["state"] == "ready_without_session"
        assert response.json()["ready"] is True
        assert response.json()["connected"] is False


class TestLifespanBootstrap:
    def test_lifespan_creates_backend_context(self, lifespan_client):
        response = lifespan_client.get(f"{settings.API_V1_STR}/contact/status")

        assert response.status_code == 200
        assert response.json()["connected"] is False
        assert response.json()["collection"] == (
            f"artifacts/{settings.APP_ID}/public/data/contact_messages"
        )

    def test_health(self, lifespan_client):
        response = lifespan_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "online", "service": settings.PROJECT_NAME}


class TestUnhandledErrors:
    def test_unhandled_error_returns_json_500(self, failing_client):
        response = failing_client.get(f"{settings.API_V1_STR}/contact/status")

        assert response.status_code == 500
        assert response.json()["detail"] == "Internal server error"
        assert response.json()["path"].endswith("/contact/status")
