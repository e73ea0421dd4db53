"""Contact message submission.

ContactService validates a submission against the backend context and appends
it to the tenant's message collection. ContactForm wraps it with the status
shown next to the form: idle, loading, success or error.
"""

import asyncio
import logging
from typing import Optional

from portfolio_site.core.config import settings
from portfolio_site.core.exceptions import (
    BackendNotReady,
    PortfolioError,
    RemoteWriteFailure,
    ValidationError,
)
from portfolio_site.models.contact import (
    ContactFormRequest,
    ContactFormResponse,
    ContactMessage,
    SubmissionStatus,
)
from portfolio_site.services.session_service import BackendContext
from portfolio_site.services.supabase_service import SupabaseException
from portfolio_site.utils.constants import (
    ButtonLabels,
    ContactMessages,
    contact_collection_path,
)

logger = logging.getLogger(__name__)


class ContactService:
    """Service appending contact messages to the remote collection."""

    def __init__(self, table_name: Optional[str] = None):
        self.table_name = table_name or settings.CONTACT_MESSAGES_TABLE

    def validate(self, fields: ContactFormRequest, context: BackendContext) -> ContactMessage:
        """Check the submission preconditions in order and build the record.

        Args:
            fields: Submitted name, email and message
            context: Backend connection and session

        Returns:
            The record to append

        Raises:
            BackendNotReady: If the backend connection or session id is missing
            ValidationError: If any of the three fields is empty
        """
        if context.database is None or not context.session_id:
            raise BackendNotReady()
        if not fields.is_complete():
            raise ValidationError()
        return ContactMessage(
            name=fields.name,
            email=fields.email,
            message=fields.message,
            session_id=context.session_id,
            app_id=context.app_id,
        )

    async def append(self, record: ContactMessage, context: BackendContext) -> None:
        """Append one record; the database assigns created_at.

        Raises:
            RemoteWriteFailure: If the insert fails
        """
        logger.info(
            f"Appending contact message from session {record.session_id} "
            f"to {contact_collection_path(record.app_id)}"
        )
        try:
            await asyncio.to_thread(
                context.database.insert_data, self.table_name, record.model_dump()
            )
        except SupabaseException as e:
            logger.error(f"Failed to store contact message: {str(e)}")
            raise RemoteWriteFailure(str(e))
        logger.info(f"Contact message stored for session {record.session_id}")

    async def submit(self, fields: ContactFormRequest, context: BackendContext) -> ContactMessage:
        """Validate and append a submission.

        Returns:
            The appended record

        Raises:
            BackendNotReady, ValidationError: Before any remote call
            RemoteWriteFailure: If the append fails
        """
        record = self.validate(fields, context)
        await self.append(record, context)
        return record


class ContactForm:
    """Contact form values plus their submission status.

    A form lives for one request. Returning to idle once the visitor edits a
    sent form happens in the page script.
    """

    def __init__(self, name: str = "", email: str = "", message: str = ""):
        self.fields = ContactFormRequest(name=name, email=email, message=message)
        self.status = SubmissionStatus.IDLE
        self.error_message = ""

    def can_submit(self, context: BackendContext) -> bool:
        return (
            context.ready
            and self.status != SubmissionStatus.LOADING
            and self.fields.is_complete()
        )

    def button_label(self, context: BackendContext) -> str:
        if self.status == SubmissionStatus.LOADING:
            return ButtonLabels.SENDING.value
        if self.status == SubmissionStatus.SUCCESS:
            return ButtonLabels.SENT.value
        if not context.ready:
            return ButtonLabels.CONNECTING.value
        return ButtonLabels.SEND.value

    async def submit(
        self, context: BackendContext, service: Optional[ContactService] = None
    ) -> ContactFormResponse:
        """Submit the current values and record the outcome on the form.

        Errors are absorbed into status/error_message. Fields are cleared on
        success and kept on failure.
        """
        service = service or contact_service
        if self.status == SubmissionStatus.LOADING:
            logger.warning("Submission already in flight, ignoring submit")
            return self.to_response()

        try:
            record = service.validate(self.fields, context)
        except PortfolioError as e:
            return self._fail(e)

        self.status = SubmissionStatus.LOADING
        self.error_message = ""
        try:
            await service.append(record, context)
        except RemoteWriteFailure as e:
            return self._fail(e)

        self.status = SubmissionStatus.SUCCESS
        self.fields = ContactFormRequest()
        return self.to_response()

    def to_response(self) -> ContactFormResponse:
        if self.status == SubmissionStatus.SUCCESS:
            message = ContactMessages.SENT.value
        else:
            message = self.error_message or None
        return ContactFormResponse(
            success=self.status == SubmissionStatus.SUCCESS,
            status=self.status,
            message=message,
        )

    def _fail(self, error: PortfolioError) -> ContactFormResponse:
        logger.warning(f"Contact submission rejected: {type(error).__name__}")
        self.status = SubmissionStatus.ERROR
        self.error_message = error.user_message
        return self.to_response()


contact_service = ContactService()
