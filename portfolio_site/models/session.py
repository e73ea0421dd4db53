"""Session models for the identity bootstrap.

This module contains the Pydantic models describing the visitor session
resolved at startup and the bootstrap state exposed to the contact form.
"""

from enum import Enum
from typing import Optional
from typing_extensions import Annotated
from pydantic import BaseModel, Field


class BootstrapState(str, Enum):
    UNINITIALIZED = "uninitialized"
    RESOLVING = "resolving"
    READY_WITH_SESSION = "ready_with_session"
    READY_WITHOUT_SESSION = "ready_without_session"


class Session(BaseModel):
    """Snapshot of the resolved visitor session.

    Attributes:
        session_id: Backend user id of the current session, anonymous or token-derived
        ready: Whether the bootstrap sequence has completed
    """
    session_id: Annotated[Optional[str], Field(None, description="Backend user id of the current session")]
    ready: Annotated[bool, Field(False, description="Whether the bootstrap sequence has completed")]


class SessionStatusResponse(BaseModel):
    """Response model for the bootstrap status endpoint.

    Attributes:
        state: Current bootstrap state
        ready: Whether the bootstrap sequence has completed
        connected: Whether a backend connection and session are both available
        collection: Logical path of the collection messages are appended to
    """
    state: BootstrapState = Field(..., description="Current bootstrap state")
    ready: bool = Field(..., description="Whether the bootstrap sequence has completed")
    connected: bool = Field(..., description="Whether submissions can currently be accepted")
    collection: str = Field(..., description="Logical path of the message collection")
