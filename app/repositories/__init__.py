from app.repositories.base import BaseRepository
from app.repositories.account import AccountRepository
from app.repositories.contact import ContactRepository
from app.repositories.lead import LeadRepository
from app.repositories.opportunity import OpportunityRepository

__all__ = [
    "BaseRepository",
    "AccountRepository",
    "ContactRepository",
    "LeadRepository",
    "OpportunityRepository",
]
