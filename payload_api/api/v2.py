"""
Payload API - Version 2 Handler

Adds source and priority metadata to the request and returns structured
data, meta and error objects. Served at /api/v2/payload.
"""

import structlog
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import (
    ErrorCode,
    ErrorDetail,
    Payload,
    PayloadData,
    PayloadErrorResponse,
    PayloadRequestV2,
    PayloadSuccessResponse,
)
from ..models.schemas import (
    EMPTY_CONTENT_MESSAGE,
    SAVE_FAILED_MESSAGE,
    content_length,
    utc_now,
)
from ..services import get_session
from .v1 import PREVIEW_LENGTH


UNKNOWN_SOURCE = "unknown"

logger = structlog.get_logger(__name__)
router = APIRouter()


def _error_response(status_code: int, error: ErrorDetail) -> JSONResponse:
    body = PayloadErrorResponse(error=error)
    return JSONResponse(status_code=status_code, content=body.to_json())


@router.post(
    "/payload",
    response_model=PayloadSuccessResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": PayloadErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": PayloadErrorResponse},
    },
    tags=["Payload v2"],
)
async def receive_payload(
    request: PayloadRequestV2,
    session: AsyncSession = Depends(get_session),
) -> JSONResponse:
    """
    Receive and store a payload with metadata.
    
    The response echoes source and priority alongside the stored row;
    neither is persisted.
    """
    log = logger.bind(api_version="2")
    content = request.content
    source = request.source or UNKNOWN_SOURCE
    
    log.info(
        "payload_received",
        content_length=content_length(content or ""),
        source=source,
        priority=request.priority,
    )
    
    if not content or not content.strip():
        log.warning("payload_content_empty", source=source)
        return _error_response(
            status.HTTP_400_BAD_REQUEST,
            ErrorDetail(
                code=ErrorCode.EMPTY_CONTENT,
                message=EMPTY_CONTENT_MESSAGE,
                field="content",
            ),
        )
    
    try:
        payload = Payload(content=content, received_at=utc_now())
        
        log.debug(
            "payload_entity_created",
            content_preview=content[:PREVIEW_LENGTH],
            received_at=payload.received_at.isoformat(),
            source=request.source,
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
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorDetail(
                code=ErrorCode.SAVE_FAILED,
                message=SAVE_FAILED_MESSAGE,
                details=str(e),
            ),
        )
    
    log.info(
        "payload_saved",
        payload_id=payload.id,
        content_length=content_length(content),
        priority=request.priority,
    )
    
    body = PayloadSuccessResponse(
        data=PayloadData(
            id=payload.id,
            content_length=content_length(content),
            received_at=payload.received_at,
            source=source,
            priority=request.priority,
        ),
    )
    return JSONResponse(status_code=status.HTTP_200_OK, content=body.to_json())
