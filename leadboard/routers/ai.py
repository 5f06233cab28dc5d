# ai.py
import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from leadboard.database import get_db
from leadboard.routers.dependencies import extraction_error_to_http, get_extractor
from leadboard.schemas.ai import ProcessEmailRequest
from leadboard.services.opportunity_extractor import ExtractionError, ExtractionResult, OpportunityExtractor
from leadboard.services.skills_service import load_known_skill_names


router = APIRouter(prefix="/ai", tags=["ai"])

logger = logging.getLogger(__name__)


# Sync def: runs in the threadpool.
@router.post("/process-email", response_model=ExtractionResult)
def process_email(
    payload: ProcessEmailRequest,
    db: Session = Depends(get_db),
    extractor: OpportunityExtractor = Depends(get_extractor),
) -> ExtractionResult:
    known_skills = load_known_skill_names(db) if payload.email_content.strip() else []
    try:
        result = extractor.extract(payload.email_content, known_skills)
    except ExtractionError as exc:
        logger.warning("ai.process_email failed kind=%s error=%s", exc.kind, exc)
        raise extraction_error_to_http(exc) from exc
    logger.info(
        "ai.process_email priority=%s skills=%d known=%d",
        result.priority,
        len(result.required_skills),
        len(known_skills),
    )
    return result
