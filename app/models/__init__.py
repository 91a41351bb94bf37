from app.models.account import Account
from app.models.contact import Contact
from app.models.lead import Lead
from app.models.opportunity import Opportunity

__all__ = [
    "Account",
    "Contact",
    "Lead",
    "Opportunity",
]
