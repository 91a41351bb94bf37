from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, Field

from app.schemas.account import AccountRead
from app.schemas.base import Amount, PatchModel, RecordModel
from app.schemas.contact import ContactRead
from app.schemas.opportunity import OpportunityRead


class LeadFields(PatchModel):
    contact_name: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("contactName", "customerName", "contact_name"),
    )
    email: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("email", "customerEmail"),
    )
    phone: Optional[str] = None
    # Stored on the contact only
    title: Optional[str] = None
    department: Optional[str] = None
    lead_type: Optional[str] = None
    sales_manager: Optional[str] = None
    delivery_manager: Optional[str] = None
    fte_count: Amount = None
    non_fte: Amount = None
    expected_hours: Amount = None
    contract_type: Optional[str] = None
    comments: Optional[str] = None
    proposal_link: Optional[str] = None
    estimates_link: Optional[str] = None
    description: Optional[str] = None
    lost_reason: Optional[str] = None
    last_conversation: Optional[str] = None


class LeadCreate(LeadFields):
    # Checked by the service so a missing name surfaces as a ValidationError
    company_name: Optional[str] = None


class LeadUpdate(LeadFields):
    company_name: Optional[str] = None
    status: Optional[str] = None


class LeadStatusUpdate(PatchModel):
    status: str


class LeadRead(RecordModel):
    id: int
    company_name: str
    contact_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    status: str
    owner_id: Optional[str] = None
    account_id: int
    contact_id: int
    opportunity_id: Optional[int] = None
    department: Optional[str] = None
    lead_type: Optional[str] = None
    sales_manager: Optional[str] = None
    delivery_manager: Optional[str] = None
    fte_count: Optional[float] = None
    non_fte: Optional[float] = None
    expected_hours: Optional[float] = None
    contract_type: Optional[str] = None
    comments: Optional[str] = None
    proposal_link: Optional[str] = None
    estimates_link: Optional[str] = None
    description: Optional[str] = None
    lost_reason: Optional[str] = None
    last_conversation: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class LeadCreatedResponse(RecordModel):
    lead: LeadRead
    account: AccountRead
    contact: ContactRead


class LeadConversionResponse(RecordModel):
    lead: LeadRead
    opportunity: OpportunityRead
