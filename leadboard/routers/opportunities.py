from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from leadboard.database import get_db
from leadboard.routers.dependencies import store_error_to_http
from leadboard.schemas.opportunities import (
    OpportunityAssignmentUpdate,
    OpportunityCreate,
    OpportunityDetailsUpdate,
    OpportunityRead,
    OpportunityStatusUpdate,
)
from leadboard.services.errors import NotFoundError, ValidationError
from leadboard.services import opportunities_service


router = APIRouter(prefix="/opportunities", tags=["opportunities"])


@router.get("", response_model=list[OpportunityRead])
def read_opportunities(
    status_filter: str | None = Query(default=None, alias="status"),
    db: Session = Depends(get_db),
) -> list[OpportunityRead]:
    try:
        return opportunities_service.list_opportunities(db, status=status_filter)
    except ValidationError as exc:
        raise store_error_to_http(exc) from exc


@router.post("", response_model=OpportunityRead, status_code=status.HTTP_201_CREATED)
def add_opportunity(payload: OpportunityCreate, db: Session = Depends(get_db)) -> OpportunityRead:
    try:
        return opportunities_service.create_opportunity(
            db,
            client_name=payload.client_name,
            company=payload.company,
            original_message=payload.original_message,
            ai_summary=payload.ai_summary,
            urgency=payload.urgency,
            skill_ids=payload.skill_ids,
            assigned_member_id=payload.assigned_member_id,
        )
    except ValidationError as exc:
        db.rollback()
        raise store_error_to_http(exc) from exc


@router.patch("/{opportunity_id}/status", response_model=OpportunityRead)
def change_status(
    opportunity_id: int,
    payload: OpportunityStatusUpdate,
    db: Session = Depends(get_db),
) -> OpportunityRead:
    try:
        return opportunities_service.update_status(db, opportunity_id, payload.status)
    except (NotFoundError, ValidationError) as exc:
        raise store_error_to_http(exc) from exc


@router.patch("/{opportunity_id}/assignment", response_model=OpportunityRead)
def change_assignment(
    opportunity_id: int,
    payload: OpportunityAssignmentUpdate,
    db: Session = Depends(get_db),
) -> OpportunityRead:
    try:
        return opportunities_service.assign_member(db, opportunity_id, payload.member_id)
    except (NotFoundError, ValidationError) as exc:
        raise store_error_to_http(exc) from exc


@router.patch("/{opportunity_id}", response_model=OpportunityRead)
def change_details(
    opportunity_id: int,
    payload: OpportunityDetailsUpdate,
    db: Session = Depends(get_db),
) -> OpportunityRead:
    try:
        return opportunities_service.update_details(db, opportunity_id, payload.model_dump(exclude_unset=True))
    except (NotFoundError, ValidationError) as exc:
        db.rollback()
        raise store_error_to_http(exc) from exc
