# src/modules/bookings/booking_controller.py

import logging
from typing import List

from fastapi import APIRouter, Depends, Form, status
from fastapi.responses import JSONResponse

from src.common.config import Settings
from src.common.dependencies import get_app_settings, get_attachments, get_dispatcher
from src.common.schemas import SubmissionResponse
from src.common.utils.email_service import EmailAttachment, EmailDispatcher
from src.modules.bookings import booking_service
from src.modules.bookings.booking_service import BookingKind

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["bookings"])

async def _handle_booking(
    kind: BookingKind,
    user_details: str,
    booking_details: str,
    description: str,
    attachments: List[EmailAttachment],
    dispatcher: EmailDispatcher,
    settings: Settings,
):
    try:
        await booking_service.process_booking(
            kind,
            user_details,
            booking_details,
            description,
            attachments,
            dispatcher,
            settings.ADMIN_EMAIL,
        )
    except Exception:
        logger.exception("Failed to process %s booking", kind.service_name.lower())
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False},
        )
    return SubmissionResponse(success=True)

@router.post("/book-cleaning", response_model=SubmissionResponse)
async def book_cleaning(
    user_details: str = Form(..., alias="userDetails"),
    booking_details: str = Form(..., alias="bookingDetails"),
    description: str = Form(""),
    attachments: List[EmailAttachment] = Depends(get_attachments),
    dispatcher: EmailDispatcher = Depends(get_dispatcher),
    settings: Settings = Depends(get_app_settings),
):
    """
    Accept a cleaning booking (multipart form with optional `files`) and
    notify both the administrator and the customer.
    """
    return await _handle_booking(
        booking_service.CLEANING, user_details, booking_details, description,
        attachments, dispatcher, settings,
    )

@router.post("/book-gardening", response_model=SubmissionResponse)
async def book_gardening(
    user_details: str = Form(..., alias="userDetails"),
    booking_details: str = Form(..., alias="bookingDetails"),
    description: str = Form(""),
    attachments: List[EmailAttachment] = Depends(get_attachments),
    dispatcher: EmailDispatcher = Depends(get_dispatcher),
    settings: Settings = Depends(get_app_settings),
):
    """Accept a gardening booking; same shape as the cleaning endpoint."""
    return await _handle_booking(
        booking_service.GARDENING, user_details, booking_details, description,
        attachments, dispatcher, settings,
    )
