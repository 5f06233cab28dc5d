# dashboard.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from leadboard.database import get_db
from leadboard.schemas.dashboard import DashboardStats
from leadboard.services.dashboard_service import dashboard_stats


router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats)
def read_dashboard_stats(db: Session = Depends(get_db)) -> DashboardStats:
    return dashboard_stats(db)
