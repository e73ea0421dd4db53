"""
This file defines the SupabaseService class, which is a concrete implementation
of the BaseDatabaseService interface backed by a Supabase project.

It appends records through PostgREST and resolves the visitor's auth session
through Supabase Auth, using the official Supabase Python client library.
The connection config (project URL and public API key) is supplied by the
hosting environment.
"""

from portfolio_site.services.base_database_service import BaseDatabaseService
from supabase import create_client
from typing import Any, Callable, Dict, Optional
import logging

logger = logging.getLogger(__name__)


class SupabaseException(Exception):
    pass


class SupabaseService(BaseDatabaseService):
    """
    An implementation of BaseDatabaseService for a Supabase project.

    One instance holds the single client connection for the process lifetime.
    Inserts are sent with the session's access token once a session is
    established, so row level security can restrict writes to signed-in
    (including anonymous) visitors.
    """

    def __init__(self, url: str, key: str):
        """
        Creates a Supabase client for the given project URL and API key.

        Raises:
            SupabaseException: If the client cannot be created.
        """
        self.base_url = url
        try:
            self.supabase_client = create_client(url, key)
        except Exception as e:
            logger.error(f"Failed to create Supabase client for {url}: {str(e)}")
            raise SupabaseException(f"Could not connect to Supabase at {url}")

    def insert_data(self, table_name: str, data: Dict, **kwargs) -> Dict[str, Any]:
        """
        Inserts a new record into the specified Supabase table.

        Args:
            table_name (str): The name of the Supabase table to insert into.
            data (Dict): A dictionary containing the column names and their values for the new record.
            **kwargs: Additional keyword arguments (currently not used in this implementation).

        Returns:
            Dict[str, Any]: The response from the Supabase insert operation.

        Raises:
            SupabaseException: If an error occurs during the Supabase insert operation.
        """
        try:
            logger.info(f"Inserting into table {table_name}")
            response = (
                self.supabase_client.table(table_name)
                .insert(data)
                .execute()
                .model_dump()
            )
            return response
        except Exception as e:
            logger.error(
                f"Failed to insert data into table {table_name} with error: {str(e)}"
            )
            raise SupabaseException(
                f"An error occured while inserting into table: {table_name}"
            )

    def get_session_user_id(self) -> Optional[str]:
        """
        Returns the user id of the session the client already holds, if any.

        Raises:
            SupabaseException: If the session lookup fails.
        """
        try:
            session = self.supabase_client.auth.get_session()
        except Exception as e:
            logger.error(f"Failed to read current auth session: {str(e)}")
            raise SupabaseException("An error occured while reading the auth session")
        if session and session.user:
            return session.user.id
        return None

    def exchange_token(self, token: str) -> str:
        """
        Exchanges a refresh token for a new session.

        Args:
            token (str): Refresh token supplied by the hosting environment.

        Returns:
            str: The user id of the new session.

        Raises:
            SupabaseException: If the exchange fails or returns no user.
        """
        try:
            response = self.supabase_client.auth.refresh_session(token)
        except Exception as e:
            logger.error(f"Failed to exchange initial auth token: {str(e)}")
            raise SupabaseException("An error occured while exchanging the auth token")
        if not response.user:
            raise SupabaseException("Token exchange returned no user")
        return response.user.id

    def sign_in_anonymously(self) -> str:
        """
        Creates an anonymous Supabase user and returns its id.

        Raises:
            SupabaseException: If anonymous sign-in fails or returns no user.
        """
        try:
            response = self.supabase_client.auth.sign_in_anonymously()
        except Exception as e:
            logger.error(f"Failed to sign in anonymously: {str(e)}")
            raise SupabaseException("An error occured while signing in anonymously")
        if not response.user:
            raise SupabaseException("Anonymous sign-in returned no user")
        return response.user.id

    def subscribe_auth_changes(
        self, callback: Callable[[str, Optional[str]], None]
    ) -> Callable[[], None]:
        """
        Forwards Supabase auth state events to callback as (event, user_id).

        Returns:
            The subscription's unsubscribe function.
        """

        def _listener(event, session) -> None:
            user_id = session.user.id if session and session.user else None
            callback(str(getattr(event, "value", event)), user_id)

        subscription = self.supabase_client.auth.on_auth_state_change(_listener)
        return subscription.unsubscribe
