# src/common/dependencies.py

from typing import List, Optional

from fastapi import Depends, File, HTTPException, Request, UploadFile, status

from src.common.config import Settings
from src.common.utils.email_service import EmailAttachment, EmailDispatcher


def get_app_settings(request: Request) -> Settings:
    """Settings built once in create_app and stored on the application."""
    return request.app.state.settings


def get_dispatcher(request: Request) -> EmailDispatcher:
    return request.app.state.dispatcher


async def get_attachments(
    files: Optional[List[UploadFile]] = File(None),
    settings: Settings = Depends(get_app_settings),
) -> List[EmailAttachment]:
    """
    Buffer uploaded files in memory as email attachments.

    Runs before the submission handler, so an oversized file is rejected
    with 413 instead of reaching the handler's error boundary.
    """
    attachments = []
    for upload in files or []:
        content = await upload.read(settings.MAX_UPLOAD_SIZE + 1)
        if len(content) > settings.MAX_UPLOAD_SIZE:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"File '{upload.filename}' exceeds the {settings.MAX_UPLOAD_SIZE // (1024 * 1024)} MB limit."
            )
        attachments.append(
            EmailAttachment(
                filename=upload.filename or "attachment",
                content=content,
                content_type=upload.content_type,
            )
        )
    return attachments
