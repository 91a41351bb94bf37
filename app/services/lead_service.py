"""
Lead synchronization.

Lead intake resolves (or creates) the Account by exact company name and
always creates a Contact. Conversion creates the Opportunity and links it
back to the Lead. Lead edits fan out one hop to the linked Opportunity,
Contact and Account.

None of these multi-record operations is atomic: each repository write
commits on its own, so a failure part-way through leaves the earlier writes
in place. Callers see the original exception.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from sqlalchemy.orm import Session

from app.auth import ActingUser, owner_id_for
from app.models import Account, Contact, Lead, Opportunity
from app.repositories import (
    AccountRepository,
    ContactRepository,
    LeadRepository,
    OpportunityRepository,
)
from app.schemas import LeadCreate, LeadUpdate
from app.services.errors import ConversionError, NotFoundError
from app.services.propagation import lead_to_opportunity_fields, push
from app.services.validators import (
    validate_lead_create,
    validate_lead_status,
    validate_lead_update,
)
from app.utils.dates import iso_now

logger = logging.getLogger(__name__)

CONVERTED = "Converted"

# Fields a lead edit pushes to the linked contact
CONTACT_FIELDS = ("contact_name", "email", "phone", "title")

# Lead detail fields copied through on intake, with their empty defaults
LEAD_DETAIL_DEFAULTS = {
    "department": "",
    "lead_type": "",
    "sales_manager": "",
    "delivery_manager": "",
    "fte_count": 0,
    "non_fte": 0,
    "expected_hours": 0,
    "contract_type": "",
    "comments": "",
    "proposal_link": "",
    "estimates_link": "",
    "description": "",
    "lost_reason": "",
    "last_conversation": "",
}


@dataclass
class LeadCreated:
    lead: Lead
    account: Account
    contact: Contact


@dataclass
class LeadConversion:
    lead: Lead
    opportunity: Opportunity


class LeadService:
    def __init__(
        self,
        leads: LeadRepository,
        accounts: AccountRepository,
        contacts: ContactRepository,
        opportunities: OpportunityRepository,
    ):
        self.leads = leads
        self.accounts = accounts
        self.contacts = contacts
        self.opportunities = opportunities

    # ------------------------------------------------------------------
    # Intake
    # ------------------------------------------------------------------

    def create_lead(
        self, data: Union[LeadCreate, Dict[str, Any]], user: Optional[ActingUser] = None
    ) -> LeadCreated:
        payload = LeadCreate.model_validate(data) if isinstance(data, dict) else data
        fields = payload.model_dump()
        validate_lead_create(fields).raise_if_invalid()

        company_name = fields["company_name"]
        owner_id = owner_id_for(user)

        try:
            # 1. Reuse the account on an exact name match, otherwise create it
            account = self.accounts.find_by_name(company_name)
            if account is None:
                account = self.accounts.create({
                    "name": company_name,
                    "owner_id": owner_id,
                    "status": "New",
                })
                logger.info(f"Created account {account.id} for company '{company_name}'")
            else:
                logger.info(f"Reusing account {account.id} for company '{company_name}'")

            # 2. Every lead gets its own contact
            contact = self.contacts.create({
                "account_id": account.id,
                "name": fields["contact_name"] or "N/A",
                "email": fields["email"] or "",
                "phone": fields["phone"] or "",
                "title": fields["title"] or "",
                "owner_id": owner_id,
            })

            # 3. The lead itself; no opportunity until conversion
            lead_fields = {
                "company_name": company_name,
                "contact_name": fields["contact_name"] or "N/A",
                "email": fields["email"] or "",
                "phone": fields["phone"] or "",
                "status": "New",
                "owner_id": owner_id,
                "account_id": account.id,
                "contact_id": contact.id,
                "opportunity_id": None,
            }
            for name, default in LEAD_DETAIL_DEFAULTS.items():
                value = fields.get(name)
                lead_fields[name] = default if value is None else value

            lead = self.leads.create(lead_fields)
        except Exception:
            logger.exception(f"Lead intake failed for company '{company_name}'")
            raise

        logger.info(f"Created lead {lead.id} (account {account.id}, contact {contact.id})")
        return LeadCreated(lead=lead, account=account, contact=contact)

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def convert_lead(self, lead_id: int, user: Optional[ActingUser] = None) -> LeadConversion:
        """Create the opportunity for a lead. A lead converts at most once."""
        lead = self.leads.get_by_id(lead_id)
        if lead is None:
            raise NotFoundError("Lead not found")
        if lead.status == CONVERTED or lead.opportunity_id is not None:
            raise ConversionError("Lead already converted")

        try:
            opportunity = self.opportunities.create({
                "account_id": lead.account_id,
                "contact_id": lead.contact_id,
                "original_lead_id": lead.id,
                "owner_id": lead.owner_id,
                "opp_name": f"Deal - {lead.company_name}",
                "description": lead.description or lead.comments or "",
                "service": "",
                "primary_team": lead.department or "",
                "delivery_owner": lead.delivery_manager or "",
                "fte_count": lead.fte_count or 0,
                "non_fte_hours": lead.expected_hours or 0,
                "non_fte": lead.non_fte or 0,
                "pm_am": lead.sales_manager or "",
                "stage": "New",
                "skill_tech": "",
                "comments": lead.comments or "",
                "notes": "",
                "products": "",
                "last_modified_by": (user.name if user else None) or "system",
                "last_modified_date": iso_now(),
            })

            lead = self.leads.update(lead.id, {
                "status": CONVERTED,
                "opportunity_id": opportunity.id,
            })
        except Exception:
            logger.exception(f"Conversion of lead {lead_id} failed")
            raise

        logger.info(f"Converted lead {lead.id} into opportunity {opportunity.id}")
        return LeadConversion(lead=lead, opportunity=opportunity)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_all_leads(self) -> List[Lead]:
        return self.leads.get_all()

    def get_lead_by_id(self, lead_id: int) -> Optional[Lead]:
        return self.leads.get_by_id(lead_id)

    # ------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------

    def update_lead(
        self,
        lead_id: int,
        data: Union[LeadUpdate, Dict[str, Any]],
        user: Optional[ActingUser] = None,
    ) -> Lead:
        """
        Apply a partial update, then propagate one hop:

        1. mirror fields to the linked opportunity (converted leads only)
        2. contact fields to the linked contact, when any were sent
        3. company name to the linked account, when sent

        A dangling link raises PropagationError; the lead update and any
        earlier hop stay committed.
        """
        payload = LeadUpdate.model_validate(data) if isinstance(data, dict) else data
        changes = payload.changes()
        result = validate_lead_update(changes)
        result.raise_if_invalid()
        for warning in result.warnings:
            logger.warning(f"Lead {lead_id}: {warning}")

        lead = self.leads.get_by_id(lead_id)
        if lead is None:
            raise NotFoundError("Lead not found")

        # title lives on the contact only
        lead_changes = {k: v for k, v in changes.items() if k != "title"}

        try:
            updated = self.leads.update(lead_id, lead_changes)

            if updated.opportunity_id:
                push(
                    self.opportunities, "Opportunity", updated.opportunity_id,
                    lead_to_opportunity_fields(updated), source=f"lead {lead_id}",
                )

            if updated.contact_id and any(changes.get(name) for name in CONTACT_FIELDS):
                contact_fields = {
                    "name": changes.get("contact_name") or updated.contact_name,
                    "email": changes.get("email") or updated.email,
                    "phone": changes.get("phone") or updated.phone,
                }
                if changes.get("title"):
                    contact_fields["title"] = changes["title"]
                push(
                    self.contacts, "Contact", updated.contact_id,
                    contact_fields, source=f"lead {lead_id}",
                )

            if updated.account_id and changes.get("company_name"):
                push(
                    self.accounts, "Account", updated.account_id,
                    {"name": changes["company_name"]}, source=f"lead {lead_id}",
                )
        except Exception:
            logger.exception(f"Lead update error for lead {lead_id}")
            raise

        return updated

    def update_lead_status(self, lead_id: int, status: str) -> Lead:
        """Set the status as given; no transition rules apply."""
        result = validate_lead_status(status)
        result.raise_if_invalid()
        for warning in result.warnings:
            logger.warning(f"Lead {lead_id}: {warning}")
        lead = self.leads.update(lead_id, {"status": status})
        if lead is None:
            raise NotFoundError("Lead not found")
        return lead


def build_lead_service(db: Session) -> LeadService:
    return LeadService(
        leads=LeadRepository(db),
        accounts=AccountRepository(db),
        contacts=ContactRepository(db),
        opportunities=OpportunityRepository(db),
    )
