from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.repositories import LeadRepository, OpportunityRepository
from app.schemas import DashboardStats
from app.services import get_dashboard_stats

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardStats)
async def dashboard_stats(db: Session = Depends(get_db)):
    """Summary counts and revenue trends for the dashboard."""
    return get_dashboard_stats(LeadRepository(db), OpportunityRepository(db))
