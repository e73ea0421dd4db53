import pytest
from types import SimpleNamespace
from unittest.mock import MagicMock

from portfolio_site.services.supabase_service import SupabaseException, SupabaseService
from portfolio_site.tests.constants.contact import (
    ContactTestConstants,
    MOCK_BACKEND_CONFIG,
    MOCK_CONTACT_RECORD,
)


def _auth_response(user_id):
    user = SimpleNamespace(id=user_id) if user_id else None
    return SimpleNamespace(user=user, session=None)


@pytest.fixture(scope="function")
def mock_create_client(mocker):
    """Fixture to patch and provide a mock for supabase.create_client."""
    mock = mocker.patch("portfolio_site.services.supabase_service.create_client")
    return mock


@pytest.fixture(scope="function")
def supabase_service(mock_create_client):
    return SupabaseService(MOCK_BACKEND_CONFIG["url"], MOCK_BACKEND_CONFIG["key"])


class TestSupabaseService:
    def test_client_created_from_config(self, mock_create_client, supabase_service):
        mock_create_client.assert_called_once_with(
            MOCK_BACKEND_CONFIG["url"], MOCK_BACKEND_CONFIG["key"]
        )
        assert supabase_service.supabase_client is mock_create_client.return_value

    def test_client_creation_error(self, mock_create_client):
        mock_create_client.side_effect = Exception("Invalid API key")

        with pytest.raises(SupabaseException):
            SupabaseService(MOCK_BACKEND_CONFIG["url"], "not-a-key")

    def test_insert_data(self, mock_create_client, supabase_service):
        client = mock_create_client.return_value
        client.table.return_value.insert.return_value.execute.return_value.model_dump.return_value = {
            "data": [],
            "count": None,
        }

        response = supabase_service.insert_data("contact_messages", MOCK_CONTACT_RECORD)

        client.table.assert_called_once_with("contact_messages")
        client.table.return_value.insert.assert_called_once_with(MOCK_CONTACT_RECORD)
        assert response == {"data": [], "count": None}

    def test_insert_data_error(self, mock_create_client, supabase_service):
        client = mock_create_client.return_value
        client.table.return_value.insert.return_value.execute.side_effect = Exception(
            "new row violates row-level security policy"
        )

        with pytest.raises(SupabaseException):
            supabase_service.insert_data("contact_messages", MOCK_CONTACT_RECORD)

    def test_get_session_user_id(self, mock_create_client, supabase_service):
        auth = mock_create_client.return_value.auth
        auth.get_session.return_value = _auth_response(
            ContactTestConstants.MOCK_EXISTING_SESSION_ID.value
        )

        assert (
            supabase_service.get_session_user_id()
            == ContactTestConstants.MOCK_EXISTING_SESSION_ID.value
        )

    def test_get_session_user_id_without_session(self, mock_create_client, supabase_service):
        mock_create_client.return_value.auth.get_session.return_value = None

        assert supabase_service.get_session_user_id() is None

    def test_exchange_token(self, mock_create_client, supabase_service):
        auth = mock_create_client.return_value.auth
        auth.refresh_session.return_value = _auth_response(
            ContactTestConstants.MOCK_TOKEN_SESSION_ID.value
        )

        user_id = supabase_service.exchange_token(ContactTestConstants.MOCK_INITIAL_TOKEN.value)

        assert user_id == ContactTestConstants.MOCK_TOKEN_SESSION_ID.value
        auth.refresh_session.assert_called_once_with(
            ContactTestConstants.MOCK_INITIAL_TOKEN.value
        )

    def test_exchange_token_error(self, mock_create_client, supabase_service):
        mock_create_client.return_value.auth.refresh_session.side_effect = Exception(
            "Invalid Refresh Token: Refresh Token Not Found"
        )

        with pytest.raises(SupabaseException):
            supabase_service.exchange_token(ContactTestConstants.MOCK_INITIAL_TOKEN.value)

    def test_sign_in_anonymously(self, mock_create_client, supabase_service):
        auth = mock_create_client.return_value.auth
        auth.sign_in_anonymously.return_value = _auth_response(
            ContactTestConstants.MOCK_SESSION_ID.value
        )

        assert supabase_service.sign_in_anonymously() == ContactTestConstants.MOCK_SESSION_ID.value

    def test_sign_in_anonymously_without_user(self, mock_create_client, supabase_service):
        mock_create_client.return_value.auth.sign_in_anonymously.return_value = _auth_response(None)

        with pytest.raises(SupabaseException):
            supabase_service.sign_in_anonymously()

    def test_subscribe_auth_changes(self, mock_create_client, supabase_service):
        auth = mock_create_client.return_value.auth
        subscription = MagicMock()
        auth.on_auth_state_change.return_value = subscription
        callback = MagicMock()

        unsubscribe = supabase_service.subscribe_auth_changes(callback)
        listener = auth.on_auth_state_change.call_args.args[0]
        listener(
            "SIGNED_IN",
            SimpleNamespace(user=SimpleNamespace(id=ContactTestConstants.MOCK_SESSION_ID.value)),
        )
        listener("SIGNED_OUT", None)

        callback.assert_any_call("SIGNED_IN", ContactTestConstants.MOCK_SESSION_ID.value)
        callback.assert_any_call("SIGNED_OUT", None)
        assert unsubscribe is subscription.unsubscribe
