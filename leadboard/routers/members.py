# members.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from leadboard.database import get_db
from leadboard.routers.dependencies import store_error_to_http
from leadboard.schemas.members import (
    MemberCreate,
    MemberRead,
    MemberRecommendationRequest,
    MemberRecommendationResponse,
)
from leadboard.services.errors import ConflictError, ValidationError
from leadboard.services.members_service import create_member, list_members, recommend_members


router = APIRouter(prefix="/members", tags=["members"])


@router.get("", response_model=list[MemberRead])
def read_members(db: Session = Depends(get_db)) -> list[MemberRead]:
    return list_members(db)


@router.post("", response_model=MemberRead, status_code=status.HTTP_201_CREATED)
def add_member(payload: MemberCreate, db: Session = Depends(get_db)) -> MemberRead:
    try:
        return create_member(db, payload.name, payload.email, payload.role, payload.skill_ids)
    except (ConflictError, ValidationError) as exc:
        db.rollback()
        raise store_error_to_http(exc) from exc


@router.post("/recommendations", response_model=MemberRecommendationResponse)
def recommend_team(payload: MemberRecommendationRequest, db: Session = Depends(get_db)) -> MemberRecommendationResponse:
    return recommend_members(db, payload.required_skills)
