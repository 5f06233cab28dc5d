# dependencies.py
from fastapi import HTTPException, status
from leadboard.config import settings
from leadboard.services.errors import ConflictError, NotFoundError, ValidationError
from leadboard.services.opportunity_extractor import (
    ConfigurationError,
    ExtractionError,
    ExtractorConfig,
    InvalidInput,
    OpportunityExtractor,
)


def get_extractor() -> OpportunityExtractor:
    return OpportunityExtractor(ExtractorConfig.from_settings(settings))


def store_error_to_http(exc: Exception) -> HTTPException:
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, ConflictError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    if isinstance(exc, ValidationError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))


def extraction_error_to_http(exc: ExtractionError) -> HTTPException:
    if isinstance(exc, InvalidInput):
        code = status.HTTP_400_BAD_REQUEST
    elif isinstance(exc, ConfigurationError):
        code = status.HTTP_500_INTERNAL_SERVER_ERROR
    else:
        code = status.HTTP_502_BAD_GATEWAY
    return HTTPException(
        status_code=code,
        detail={"kind": exc.kind, "message": str(exc), "retryable": exc.retryable},
    )
