from typing import Any, Callable, Optional


class BaseDatabaseService:
    """
    Base class for backend service implementations.

    This class defines the interface the portfolio relies on: appending a
    record to a table and resolving the visitor's auth session. Concrete
    backend implementations should inherit from this class and override
    these methods to provide the specific interactions.
    """

    def insert_data(self, table_name: str, data: Any, **kwargs) -> Any:
        """
        Inserts a new record into the specified table.

        This is a default stub method that must be overridden by concrete
        subclasses to provide the actual database insertion logic.

        Args:
            table_name (str): The name of the table to insert into.
            data (Any): The data for the new record.
            **kwargs: Additional keyword arguments that might be specific
                      to the underlying database implementation.

        Raises:
            NotImplementedError: If this method is called directly from the
                                 BaseDatabaseService class.
        """
        cls_name = type(self).__name__
        raise NotImplementedError(f"{cls_name}.insert_data not implemented")

    def get_session_user_id(self) -> Optional[str]:
        """
        Returns the user id of an already authenticated session, if any.

        Raises:
            NotImplementedError: If this method is called directly from the
                                 BaseDatabaseService class.
        """
        cls_name = type(self).__name__
        raise NotImplementedError(f"{cls_name}.get_session_user_id not implemented")

    def exchange_token(self, token: str) -> str:
        """
        Exchanges an externally supplied token for a session.

        Args:
            token (str): The token handed over by the hosting environment.

        Returns:
            str: The user id of the new session.

        Raises:
            NotImplementedError: If this method is called directly from the
                                 BaseDatabaseService class.
        """
        cls_name = type(self).__name__
        raise NotImplementedError(f"{cls_name}.exchange_token not implemented")

    def sign_in_anonymously(self) -> str:
        """
        Creates a fresh anonymous session and returns its user id.

        Raises:
            NotImplementedError: If this method is called directly from the
                                 BaseDatabaseService class.
        """
        cls_name = type(self).__name__
        raise NotImplementedError(f"{cls_name}.sign_in_anonymously not implemented")

    def subscribe_auth_changes(
        self, callback: Callable[[str, Optional[str]], None]
    ) -> Callable[[], None]:
        """
        Subscribes to auth state changes.

        Args:
            callback: Called with the event name and the session user id
                      (None when signed out).

        Returns:
            A callable that removes the subscription.

        Raises:
            NotImplementedError: If this method is called directly from the
                                 BaseDatabaseService class.
        """
        cls_name = type(self).__name__
        raise NotImplementedError(f"{cls_name}.subscribe_auth_changes not implemented")
