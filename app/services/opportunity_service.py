"""
Opportunity synchronization.

Only opportunities created by lead conversion are listed. Detail edits on
such a deal are mirrored back onto the originating lead, one hop.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from sqlalchemy.orm import Session

from app.auth import ActingUser, owner_id_for
from app.models import Opportunity
from app.repositories import LeadRepository, OpportunityRepository
from app.schemas import OpportunityCreate, OpportunityUpdate
from app.services.errors import NotFoundError
from app.services.propagation import opportunity_to_lead_fields, push
from app.utils.dates import utcnow_naive

logger = logging.getLogger(__name__)


class OpportunityService:
    def __init__(self, opportunities: OpportunityRepository, leads: LeadRepository):
        self.opportunities = opportunities
        self.leads = leads

    def create_opportunity(
        self, data: Union[OpportunityCreate, Dict[str, Any]], user: Optional[ActingUser] = None
    ) -> Opportunity:
        """Direct create. The deal is stored but never listed."""
        payload = OpportunityCreate.model_validate(data) if isinstance(data, dict) else data
        fields = payload.changes()
        if fields.get("stage") is None:
            fields.pop("stage", None)
        fields["owner_id"] = owner_id_for(user)
        opportunity = self.opportunities.create(fields)
        logger.info(f"Created opportunity {opportunity.id} directly (not listed)")
        return opportunity

    def get_opportunities(self) -> List[Opportunity]:
        return [o for o in self.opportunities.get_all() if o.original_lead_id is not None]

    def get_opportunity(self, opportunity_id: int) -> Optional[Opportunity]:
        return self.opportunities.get_by_id(opportunity_id)

    def update_opportunity_details(
        self, opportunity_id: int, data: Union[OpportunityUpdate, Dict[str, Any]]
    ) -> Opportunity:
        payload = OpportunityUpdate.model_validate(data) if isinstance(data, dict) else data
        changes = payload.changes()
        if "stage" in changes and changes["stage"] is None:
            del changes["stage"]

        updated = self.opportunities.update(
            opportunity_id, {**changes, "updated_at": utcnow_naive()}
        )
        if updated is None:
            raise NotFoundError("Opportunity not found")

        try:
            if updated.original_lead_id:
                push(
                    self.leads, "Lead", updated.original_lead_id,
                    opportunity_to_lead_fields(updated),
                    source=f"opportunity {opportunity_id}",
                )
        except Exception:
            logger.exception(f"Opportunity update error for opportunity {opportunity_id}")
            raise

        return updated


def build_opportunity_service(db: Session) -> OpportunityService:
    return OpportunityService(
        opportunities=OpportunityRepository(db),
        leads=LeadRepository(db),
    )
