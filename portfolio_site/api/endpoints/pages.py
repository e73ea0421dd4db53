"""Server-rendered portfolio page.

The page is rendered with Jinja2. The contact form posts back to /contact,
which renders the same page with the submission status.
"""

import os
import logging
from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from portfolio_site.api.dependencies import get_backend_context
from portfolio_site.core.content import portfolio_content
from portfolio_site.services.contact_service import ContactForm
from portfolio_site.services.session_service import BackendContext
from portfolio_site.utils.constants import ButtonLabels

logger = logging.getLogger(__name__)

router = APIRouter()
templates = Jinja2Templates(
    directory=os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "templates")
)


def render_page(
    request: Request,
    context: BackendContext,
    form: ContactForm,
) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "content": portfolio_content,
            "form": form,
            "can_submit": form.can_submit(context),
            "button_label": form.button_label(context),
            "connected": context.connected,
            "ready": context.ready,
            "button_labels": ButtonLabels,
        },
    )


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index(
    request: Request,
    context: BackendContext = Depends(get_backend_context),
) -> HTMLResponse:
    return render_page(request, context, ContactForm())


@router.post("/contact", response_class=HTMLResponse, include_in_schema=False)
async def submit_contact_page(
    request: Request,
    name: str = Form(""),
    email: str = Form(""),
    message: str = Form(""),
    context: BackendContext = Depends(get_backend_context),
) -> HTMLResponse:
    """Handle the HTML contact form.

    Never raises for a rejected submission; the page is re-rendered with
    the error message and the submitted values kept.
    """
    form = ContactForm(name=name, email=email, message=message)
    result = await form.submit(context)
    logger.info(f"Contact page submission finished with status {result.status.value}")
    return render_page(request, context, form)
