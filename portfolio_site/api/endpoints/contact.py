"""Contact form endpoints for the portfolio site.

This module contains FastAPI routes for submitting contact messages and
reporting whether the backend session is ready to accept them.
"""

import logging
from fastapi import APIRouter, Depends, HTTPException, status

from portfolio_site.api.dependencies import get_backend_context
from portfolio_site.core.exceptions import BackendNotReady, RemoteWriteFailure, ValidationError
from portfolio_site.models.contact import ContactFormRequest, ContactFormResponse, SubmissionStatus
from portfolio_site.models.session import SessionStatusResponse
from portfolio_site.services.contact_service import contact_service
from portfolio_site.services.session_service import BackendContext
from portfolio_site.utils.constants import ContactMessages, contact_collection_path

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/status",
    response_model=SessionStatusResponse,
    status_code=status.HTTP_200_OK,
    summary="Get contact backend status",
    description="Report the session bootstrap state and whether submissions can be accepted.",
)
async def get_contact_status(
    context: BackendContext = Depends(get_backend_context),
) -> SessionStatusResponse:
    return SessionStatusResponse(
        state=context.state,
        ready=context.ready,
        connected=context.connected,
        collection=contact_collection_path(context.app_id),
    )


@router.post(
    "/submit",
    response_model=ContactFormResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit contact form",
    description="Store a contact message for the site owner. No authentication required.",
)
async def submit_contact_form(
    request: ContactFormRequest,
    context: BackendContext = Depends(get_backend_context),
) -> ContactFormResponse:
    """
    Submit a contact message.

    Preconditions are checked in order: the backend must hold a connection
    and session, then name, email and message must all be non-empty. Each
    accepted call appends exactly one new record.

    Args:
        request: Contact form data including name, email and message
        context: Backend connection and session (injected)

    Returns:
        Confirmation response with the resulting status

    Raises:
        HTTPException: 503 if the backend is not ready, 422 if a field is
            empty, 502 if the message could not be stored
    """
    try:
        await contact_service.submit(request, context)
    except BackendNotReady as e:
        logger.warning("Contact submission rejected: backend not ready")
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=e.user_message)
    except ValidationError as e:
        logger.warning("Contact submission rejected: missing fields")
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.user_message)
    except RemoteWriteFailure as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.user_message)

    return ContactFormResponse(
        success=True,
        status=SubmissionStatus.SUCCESS,
        message=ContactMessages.SENT.value,
    )
