"""Session identity bootstrap.

BackendContext owns the single backend connection and the visitor session
resolved at startup. It is created by the application lifespan, started once
as an asyncio task, and closed on shutdown, which removes the auth state
subscription.
"""

import asyncio
import logging
from typing import Any, Callable, Dict, Optional

from portfolio_site.core.exceptions import AuthFailure, ConfigMissing
from portfolio_site.models.session import BootstrapState, Session
from portfolio_site.services.base_database_service import BaseDatabaseService
from portfolio_site.services.supabase_service import SupabaseException, SupabaseService

logger = logging.getLogger(__name__)

BackendFactory = Callable[[str, str], BaseDatabaseService]


class BackendContext:
    """Backend connection and session holder passed to the submission flow.

    Args:
        app_id: Tenant identifier used to partition stored messages
        initial_token: Optional token exchanged for a session during bootstrap
        backend_factory: Builds the backend from (url, key)
    """

    def __init__(
        self,
        app_id: str,
        initial_token: Optional[str] = None,
        backend_factory: BackendFactory = SupabaseService,
    ):
        self.app_id = app_id
        self.initial_token = initial_token
        self.backend_factory = backend_factory
        self.database: Optional[BaseDatabaseService] = None
        self.session_id: Optional[str] = None
        self.ready = False
        self.state = BootstrapState.UNINITIALIZED
        self._unsubscribe: Optional[Callable[[], None]] = None
        self._task: Optional[asyncio.Task] = None

    @property
    def session(self) -> Session:
        return Session(session_id=self.session_id, ready=self.ready)

    @property
    def connected(self) -> bool:
        return self.database is not None and self.session_id is not None

    async def initialize(self, config: Dict[str, Any]) -> bool:
        """Create the backend connection from config.

        An empty or malformed config, or a connection error, leaves the context
        ready without a backend or session.

        Returns:
            True if a backend connection was established
        """
        if self.state != BootstrapState.UNINITIALIZED:
            logger.warning(f"Bootstrap already ran, current state: {self.state.value}")
            return self.database is not None

        self.state = BootstrapState.RESOLVING
        try:
            url, key = self._read_config(config)
            self.database = await asyncio.to_thread(self.backend_factory, url, key)
            logger.info("Backend connection established")
            return True
        except ConfigMissing as e:
            logger.error(f"Backend config is missing or empty: {e.detail}")
        except SupabaseException as e:
            logger.error(f"Backend initialization failed: {str(e)}")
        self._finish()
        return False

    async def resolve_session(self) -> Optional[str]:
        """Resolve the visitor session once.

        Reuses an existing session, else exchanges the initial token, else
        signs in anonymously. Failures are logged; the context becomes ready
        whatever the outcome.

        Returns:
            The resolved session id, or None
        """
        if self.ready or self.database is None:
            return self.session_id

        try:
            self._unsubscribe = self.database.subscribe_auth_changes(
                self._on_auth_state_change
            )
        except Exception as e:
            logger.error(f"Could not subscribe to auth state changes: {str(e)}")

        try:
            existing = await asyncio.to_thread(self.database.get_session_user_id)
        except SupabaseException:
            existing = None

        if existing:
            logger.info(f"Reusing existing session {existing}")
            self.session_id = existing
        elif self.initial_token:
            try:
                self.session_id = await self._exchange_initial_token()
            except AuthFailure as e:
                logger.error(f"Initial token sign-in failed, falling back to anonymous: {e.detail}")
                self.session_id = await self._anonymous_or_none()
        else:
            self.session_id = await self._anonymous_or_none()

        self._finish()
        return self.session_id

    async def start(self, config: Dict[str, Any]) -> Session:
        """Run the whole bootstrap: initialize, then resolve the session."""
        if await self.initialize(config):
            await self.resolve_session()
        return self.session

    def start_in_background(self, config: Dict[str, Any]) -> asyncio.Task:
        """Schedule start() on the running loop and keep the task for shutdown."""
        self._task = asyncio.create_task(self.start(config))
        return self._task

    async def close(self) -> None:
        """Cancel a pending bootstrap and remove the auth subscription."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                logger.info("Pending bootstrap cancelled at shutdown")
        if self._unsubscribe is not None:
            try:
                self._unsubscribe()
            except Exception as e:
                logger.warning(f"Failed to unsubscribe from auth state changes: {str(e)}")
            self._unsubscribe = None

    def _read_config(self, config: Dict[str, Any]):
        if not isinstance(config, dict) or not config:
            raise ConfigMissing("Backend config is empty")
        url = config.get("url")
        key = config.get("key")
        if not isinstance(url, str) or not url or not isinstance(key, str) or not key:
            raise ConfigMissing("Backend config requires non-empty 'url' and 'key'")
        return url, key

    async def _exchange_initial_token(self) -> str:
        try:
            return await asyncio.to_thread(self.database.exchange_token, self.initial_token)
        except SupabaseException as e:
            raise AuthFailure(str(e))

    async def _anonymous_or_none(self) -> Optional[str]:
        try:
            user_id = await asyncio.to_thread(self.database.sign_in_anonymously)
            logger.info(f"Signed in anonymously as {user_id}")
            return user_id
        except SupabaseException as e:
            logger.error(f"Anonymous sign-in failed: {str(e)}")
            return None

    def _on_auth_state_change(self, event: str, user_id: Optional[str]) -> None:
        if user_id:
            if user_id != self.session_id:
                logger.info(f"Auth state {event}: session is now {user_id}")
            self.session_id = user_id
        elif self.ready and self.session_id is not None:
            logger.warning(f"Auth state {event}: session ended")
            self.session_id = None
        if self.ready:
            self._refresh_state()

    def _finish(self) -> None:
        self.ready = True
        self._refresh_state()
        logger.info(f"Session bootstrap finished: {self.state.value}")

    def _refresh_state(self) -> None:
        self.state = (
            BootstrapState.READY_WITH_SESSION
            if self.session_id
            else BootstrapState.READY_WITHOUT_SESSION
        )
