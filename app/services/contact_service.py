"""
Contact synchronization.

Closing revenue entered on a contact settles the deal: the opportunity of
the lead that owns the contact is marked Closed Won/Lost and the lead's
status follows.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from sqlalchemy.orm import Session

from app.auth import ActingUser, owner_id_for
from app.models import Contact
from app.repositories import ContactRepository, LeadRepository, OpportunityRepository
from app.schemas import ContactCreate, ContactUpdate
from app.services.errors import NotFoundError
from app.services.propagation import push
from app.services.validators import validate_contact_update
from app.utils.dates import iso_now

logger = logging.getLogger(__name__)

CLOSED_WON = "Closed Won"
CLOSED_LOST = "Closed Lost"


class ContactService:
    def __init__(
        self,
        contacts: ContactRepository,
        leads: LeadRepository,
        opportunities: OpportunityRepository,
    ):
        self.contacts = contacts
        self.leads = leads
        self.opportunities = opportunities

    def create_contact(
        self, data: Union[ContactCreate, Dict[str, Any]], user: Optional[ActingUser] = None
    ) -> Contact:
        payload = ContactCreate.model_validate(data) if isinstance(data, dict) else data
        fields = {k: v for k, v in payload.changes().items() if v is not None}
        fields["owner_id"] = owner_id_for(user)
        return self.contacts.create(fields)

    def get_contacts(self) -> List[Contact]:
        return self.contacts.get_all()

    def get_contact(self, contact_id: int) -> Optional[Contact]:
        return self.contacts.get_by_id(contact_id)

    def update_contact(
        self, contact_id: int, data: Union[ContactUpdate, Dict[str, Any]]
    ) -> Contact:
        payload = ContactUpdate.model_validate(data) if isinstance(data, dict) else data
        changes = payload.changes()
        validate_contact_update(changes).raise_if_invalid()

        contact = self.contacts.update(contact_id, changes)
        if contact is None:
            raise NotFoundError("Contact not found")

        won = changes.get("closed_won_revenue")
        lost = changes.get("closed_lost_revenue")
        if not (won or lost):
            return contact

        lead = self.leads.find_by_contact_id(contact_id)
        if lead is None:
            logger.info(f"Contact {contact_id} has no lead; revenue not propagated")
            return contact

        outcome = CLOSED_WON if won else CLOSED_LOST
        try:
            if lead.opportunity_id:
                push(
                    self.opportunities, "Opportunity", lead.opportunity_id,
                    {
                        "value": float(won or 0),
                        "stage": outcome,
                        "close_date": iso_now(),
                    },
                    source=f"contact {contact_id}",
                )
            push(self.leads, "Lead", lead.id, {"status": outcome}, source=f"contact {contact_id}")
        except Exception:
            logger.exception(f"Revenue propagation from contact {contact_id} failed")
            raise

        logger.info(f"Contact {contact_id} closed lead {lead.id} as {outcome}")
        return contact


def build_contact_service(db: Session) -> ContactService:
    return ContactService(
        contacts=ContactRepository(db),
        leads=LeadRepository(db),
        opportunities=OpportunityRepository(db),
    )
