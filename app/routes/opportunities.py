from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.auth import ActingUser, get_current_user
from app.database import get_db
from app.schemas import OpportunityCreate, OpportunityUpdate, OpportunityRead
from app.services import build_opportunity_service

router = APIRouter(prefix="/api/opportunities", tags=["opportunities"])


@router.post("", response_model=OpportunityRead, status_code=201)
async def create_opportunity(
    data: OpportunityCreate,
    db: Session = Depends(get_db),
    user: ActingUser = Depends(get_current_user),
):
    return build_opportunity_service(db).create_opportunity(data, user)


@router.get("", response_model=List[OpportunityRead])
async def list_opportunities(db: Session = Depends(get_db)):
    """Deals moved over from leads. Directly created deals are not listed."""
    return build_opportunity_service(db).get_opportunities()


@router.get("/{opp_id}", response_model=OpportunityRead)
async def get_opportunity(opp_id: int, db: Session = Depends(get_db)):
    opportunity = build_opportunity_service(db).get_opportunity(opp_id)
    if not opportunity:
        raise HTTPException(status_code=404, detail="Opportunity not found")
    return opportunity


@router.patch("/{opp_id}", response_model=OpportunityRead)
async def update_opportunity(
    opp_id: int,
    data: OpportunityUpdate,
    db: Session = Depends(get_db),
):
    """Save opportunity details; shared fields flow back to the originating lead."""
    return build_opportunity_service(db).update_opportunity_details(opp_id, data)
