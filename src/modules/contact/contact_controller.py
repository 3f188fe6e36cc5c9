# src/modules/contact/contact_controller.py

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.common.config import Settings
from src.common.dependencies import get_app_settings, get_dispatcher
from src.common.schemas import SubmissionResponse
from src.common.utils.email_service import EmailDispatcher
from src.modules.contact import contact_service, schemas

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/contact", tags=["contact"])

@router.post("", response_model=SubmissionResponse)
async def submit_contact_form(
    form: schemas.ContactFormRequest,
    dispatcher: EmailDispatcher = Depends(get_dispatcher),
    settings: Settings = Depends(get_app_settings),
):
    """
    Process a contact form submission by emailing the administrator and
    sending the customer an acknowledgement.
    """
    try:
        await contact_service.process_contact_form(form.model_dump(), dispatcher, settings.ADMIN_EMAIL)
    except Exception:
        logger.exception("Failed to process contact form")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False},
        )
    return SubmissionResponse(success=True)
