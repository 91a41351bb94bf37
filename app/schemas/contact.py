from datetime import datetime
from typing import Optional

from app.schemas.base import Amount, PatchModel, RecordModel


class ContactUpdate(PatchModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    title: Optional[str] = None
    revenue: Amount = None
    closed_won_revenue: Amount = None
    closed_lost_revenue: Amount = None


class ContactCreate(ContactUpdate):
    account_id: int


class ContactRead(RecordModel):
    id: int
    account_id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    title: Optional[str] = None
    owner_id: Optional[str] = None
    revenue: Optional[float] = None
    closed_won_revenue: Optional[float] = None
    closed_lost_revenue: Optional[float] = None
    created_at: datetime
    updated_at: datetime
