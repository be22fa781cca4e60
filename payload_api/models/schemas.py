# =============================================================================
# Payload API - Pydantic Schemas
# =============================================================================
"""
Request and response models for the Payload API.

Version 1 keeps a flat ``{success, message, id}`` contract. Version 2 wraps
results in ``data``/``meta`` blocks and reports failures as structured
error objects. Response field names are serialized in camelCase.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


EMPTY_CONTENT_MESSAGE = "Content cannot be empty"
SAVE_FAILED_MESSAGE = "Failed to save payload"
SAVED_MESSAGE = "Payload saved successfully"


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def content_length(content: str) -> int:
    """Length in UTF-16 code units; characters outside the BMP count twice."""
    return len(content.encode("utf-16-le")) // 2


class ErrorCode(str, Enum):
    """Machine-readable error codes returned by version 2."""
    EMPTY_CONTENT = "EMPTY_CONTENT"
    SAVE_FAILED = "SAVE_FAILED"


class ResponseModel(BaseModel):
    """Base for response bodies: camelCase on the wire, snake_case in code."""
    
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
    
    def to_json(self) -> dict:
        """Serialize for a JSONResponse, dropping unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# =============================================================================
# Version 1
# =============================================================================

class PayloadRequest(BaseModel):
    """
    Version 1 request body.
    
    Example:
        {"content": "hello"}
    """
    
    content: Optional[str] = Field(
        default=None,
        description="Text to store; blank values are rejected",
        examples=["hello"],
    )


class PayloadSavedResponse(ResponseModel):
    """Version 1 success body."""
    
    success: bool = True
    message: str = SAVED_MESSAGE
    id: int = Field(..., description="Identifier assigned by the store")


class PayloadFailureResponse(ResponseModel):
    """Version 1 error body; ``error`` is set only for save failures."""
    
    success: bool = False
    message: str
    error: Optional[str] = None


# =============================================================================
# Version 2
# =============================================================================

class PayloadRequestV2(BaseModel):
    """
    Version 2 request body.
    
    ``content`` must be present; ``source`` identifies the sending system
    and ``priority`` is one of low, normal or high (not enforced).
    
    Example:
        {"content": "hi", "source": "mobile-app", "priority": "high"}
    """
    
    content: Optional[str] = Field(
        ...,
        description="Text to store; blank values are rejected",
        examples=["hi"],
    )
    source: Optional[str] = Field(
        default=None,
        description="Source system or application sending the payload",
        examples=["mobile-app"],
    )
    priority: str = Field(
        default="normal",
        description="Priority level: low, normal, high",
        examples=["normal"],
    )


class PayloadData(ResponseModel):
    id: int
    content_length: int
    received_at: datetime
    source: str
    priority: str


class ResponseMeta(ResponseModel):
    version: str = "2.0"
    processed_at: datetime = Field(default_factory=utc_now)


class PayloadSuccessResponse(ResponseModel):
    """Version 2 success body."""
    
    success: bool = True
    data: PayloadData
    meta: ResponseMeta = Field(default_factory=ResponseMeta)


class ErrorDetail(ResponseModel):
    """
    Structured error description.
    
    Attributes:
        code: Machine-readable error code
        message: Human-readable summary
        field: Offending request field, for validation errors
        details: Underlying failure description, for save errors
    """
    
    code: ErrorCode
    message: str
    field: Optional[str] = None
    details: Optional[str] = None


class PayloadErrorResponse(ResponseModel):
    """Version 2 error body."""
    
    success: bool = False
    error: ErrorDetail


# =============================================================================
# Health
# =============================================================================

class HealthResponse(BaseModel):
    """
    Response model for health check endpoint.
    
    Attributes:
        status: Service health status
        service: Service name
        version: Service version
        timestamp: Current server time
    """
    
    status: str = Field(default="healthy", description="Health status")
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
    timestamp: datetime = Field(
        default_factory=utc_now,
        description="Current timestamp",
    )
