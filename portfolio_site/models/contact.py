"""Contact form models for the portfolio site.

This module contains the Pydantic models for contact form functionality.
"""

from enum import Enum
from typing import Optional
from typing_extensions import Annotated
from pydantic import BaseModel, Field, ConfigDict


class SubmissionStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class ContactFormRequest(BaseModel):
    """Request model for contact form submissions.

    Values are stored as submitted. Empty or whitespace-only values are
    accepted here and rejected by the submission flow, which checks backend
    readiness before field presence.

    Attributes:
        name: Name of the sender
        email: Email address of the sender, format unchecked
        message: The message body
    """
    name: Annotated[str, Field("", description="Name of the sender")]
    email: Annotated[str, Field("", description="Email address of the sender")]
    message: Annotated[str, Field("", description="The message body")]

    model_config = ConfigDict(populate_by_name=True)

    def is_complete(self) -> bool:
        return all(value.strip() for value in (self.name, self.email, self.message))


class ContactMessage(BaseModel):
    """Record appended to the remote contact message collection.

    created_at is not part of the payload; the database assigns it on insert.

    Attributes:
        name: Name of the sender
        email: Email address of the sender
        message: The message body
        session_id: Session identifier of the submitting visitor
        app_id: Tenant identifier partitioning the collection
    """
    name: str
    email: str
    message: str
    session_id: str
    app_id: str

    model_config = ConfigDict(frozen=True)


class ContactFormResponse(BaseModel):
    """Response model for contact form submissions.

    Attributes:
        success: Whether the message was stored
        status: Resulting submission status
        message: Message for the user
    """
    success: bool = Field(..., description="Whether the message was stored")
    status: SubmissionStatus = Field(..., description="Resulting submission status")
    message: Optional[str] = Field(None, description="Message for the user")
