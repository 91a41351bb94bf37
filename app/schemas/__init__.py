from app.schemas.account import AccountRead
from app.schemas.contact import ContactCreate, ContactUpdate, ContactRead
from app.schemas.opportunity import OpportunityCreate, OpportunityUpdate, OpportunityRead
from app.schemas.lead import (
    LeadCreate,
    LeadUpdate,
    LeadStatusUpdate,
    LeadRead,
    LeadCreatedResponse,
    LeadConversionResponse,
)
from app.schemas.dashboard import DashboardStats, RevenueTrends, TrendPoint

__all__ = [
    "AccountRead",
    "ContactCreate",
    "ContactUpdate",
    "ContactRead",
    "OpportunityCreate",
    "OpportunityUpdate",
    "OpportunityRead",
    "LeadCreate",
    "LeadUpdate",
    "LeadStatusUpdate",
    "LeadRead",
    "LeadCreatedResponse",
    "LeadConversionResponse",
    "DashboardStats",
    "RevenueTrends",
    "TrendPoint",
]
