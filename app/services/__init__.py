from app.services.errors import (
    CRMError,
    ValidationError,
    NotFoundError,
    ConversionError,
    PropagationError,
)
from app.services.lead_service import LeadService, build_lead_service
from app.services.opportunity_service import OpportunityService, build_opportunity_service
from app.services.contact_service import ContactService, build_contact_service
from app.services.account_service import AccountService, build_account_service
from app.services.dashboard_service import get_dashboard_stats

__all__ = [
    'CRMError',
    'ValidationError',
    'NotFoundError',
    'ConversionError',
    'PropagationError',
    'LeadService',
    'build_lead_service',
    'OpportunityService',
    'build_opportunity_service',
    'ContactService',
    'build_contact_service',
    'AccountService',
    'build_account_service',
    'get_dashboard_stats',
]
