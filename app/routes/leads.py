from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.auth import ActingUser, get_current_user
from app.database import get_db
from app.schemas import (
    LeadCreate,
    LeadUpdate,
    LeadStatusUpdate,
    LeadRead,
    LeadCreatedResponse,
    LeadConversionResponse,
)
from app.services import build_lead_service

router = APIRouter(prefix="/api/leads", tags=["leads"])


@router.post("", response_model=LeadCreatedResponse, status_code=201)
async def create_lead(
    data: LeadCreate,
    db: Session = Depends(get_db),
    user: ActingUser = Depends(get_current_user),
):
    """Create a lead, reusing or creating its account and creating its contact."""
    result = build_lead_service(db).create_lead(data, user)
    return LeadCreatedResponse.model_validate(result)


@router.get("", response_model=List[LeadRead])
async def list_leads(db: Session = Depends(get_db)):
    return build_lead_service(db).get_all_leads()


@router.get("/{lead_id}", response_model=LeadRead)
async def get_lead(lead_id: int, db: Session = Depends(get_db)):
    lead = build_lead_service(db).get_lead_by_id(lead_id)
    if not lead:
        raise HTTPException(status_code=404, detail="Lead not found")
    return lead


@router.patch("/{lead_id}/status", response_model=LeadRead)
async def update_lead_status(
    lead_id: int,
    data: LeadStatusUpdate,
    db: Session = Depends(get_db),
):
    return build_lead_service(db).update_lead_status(lead_id, data.status)


@router.patch("/{lead_id}", response_model=LeadRead)
async def update_lead(
    lead_id: int,
    data: LeadUpdate,
    db: Session = Depends(get_db),
    user: ActingUser = Depends(get_current_user),
):
    """Partial update; shared fields are pushed to the linked records."""
    return build_lead_service(db).update_lead(lead_id, data, user)


@router.post("/{lead_id}/convert", response_model=LeadConversionResponse)
async def convert_lead(
    lead_id: int,
    db: Session = Depends(get_db),
    user: ActingUser = Depends(get_current_user),
):
    """Move a lead to an opportunity."""
    result = build_lead_service(db).convert_lead(lead_id, user)
    return LeadConversionResponse.model_validate(result)
