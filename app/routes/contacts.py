from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.auth import ActingUser, get_current_user
from app.database import get_db
from app.schemas import ContactCreate, ContactUpdate, ContactRead
from app.services import build_contact_service

router = APIRouter(prefix="/api/contacts", tags=["contacts"])


@router.post("", response_model=ContactRead, status_code=201)
async def create_contact(
    data: ContactCreate,
    db: Session = Depends(get_db),
    user: ActingUser = Depends(get_current_user),
):
    return build_contact_service(db).create_contact(data, user)


@router.get("", response_model=List[ContactRead])
async def list_contacts(db: Session = Depends(get_db)):
    return build_contact_service(db).get_contacts()


@router.get("/{contact_id}", response_model=ContactRead)
async def get_contact(contact_id: int, db: Session = Depends(get_db)):
    contact = build_contact_service(db).get_contact(contact_id)
    if not contact:
        raise HTTPException(status_code=404, detail="Contact not found")
    return contact


@router.put("/{contact_id}", response_model=ContactRead)
async def update_contact(
    contact_id: int,
    data: ContactUpdate,
    db: Session = Depends(get_db),
):
    """Update a contact. Closing revenue settles the linked deal and lead."""
    return build_contact_service(db).update_contact(contact_id, data)
