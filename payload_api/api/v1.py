"""
Payload API - Version 1 Handler

Original contract, kept for backward compatibility. Served at
/api/v1/payload and at the unversioned /api/payload.
"""

import structlog
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import (
    Payload,
    PayloadFailureResponse,
    PayloadRequest,
    PayloadSavedResponse,
)
from ..models.schemas import EMPTY_CONTENT_MESSAGE, SAVE_FAILED_MESSAGE, utc_now
from ..services import get_session


PREVIEW_LENGTH = 50

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post(
    "/payload",
    response_model=PayloadSavedResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": PayloadFailureResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": PayloadFailureResponse},
    },
    tags=["Payload v1"],
)
async def receive_payload(
    request: PayloadRequest,
    session: AsyncSession = Depends(get_session),
) -> JSONResponse:
    """
    Receive and store a payload.
    
    Returns the generated id on success.
    """
    log = logger.bind(api_version="1")
    content = request.content
    log.info("payload_received", content_length=len(content or ""))
    
    if not content or not content.strip():
        log.warning("payload_content_empty")
        body = PayloadFailureResponse(message=EMPTY_CONTENT_MESSAGE)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.to_json())
    
    try:
        payload = Payload(content=content, received_at=utc_now())
        
        log.debug(
            "payload_entity_created",
            content_preview=content[:PREVIEW_LENGTH],
            received_at=payload.received_at.isoformat(),
        )
        
        session.add(payload)
        await session.commit()
    except Exception as e:
        log.error(
            "payload_save_failed",
            error=str(e),
            error_type=type(e).__name__,
            exc_info=True,
        )
        body = PayloadFailureResponse(message=SAVE_FAILED_MESSAGE, error=str(e))
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=body.to_json(),
        )
    
    log.info("payload_saved", payload_id=payload.id, content_length=len(content))
    
    body = PayloadSavedResponse(id=payload.id)
    return JSONResponse(status_code=status.HTTP_200_OK, content=body.to_json())
