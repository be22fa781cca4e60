# =============================================================================
# Payload API - Models Package
# =============================================================================
"""ORM rows and Pydantic request/response models."""

from .payload import Base, Payload
from .schemas import (
    ErrorCode,
    ErrorDetail,
    HealthResponse,
    PayloadData,
    PayloadErrorResponse,
    PayloadFailureResponse,
    PayloadRequest,
    PayloadRequestV2,
    PayloadSavedResponse,
    PayloadSuccessResponse,
    ResponseMeta,
)

__all__ = [
    "Base",
    "Payload",
    "ErrorCode",
    "ErrorDetail",
    "HealthResponse",
    "PayloadData",
    "PayloadErrorResponse",
    "PayloadFailureResponse",
    "PayloadRequest",
    "PayloadRequestV2",
    "PayloadSavedResponse",
    "PayloadSuccessResponse",
    "ResponseMeta",
]
