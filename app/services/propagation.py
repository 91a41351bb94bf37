"""
One-hop field propagation between linked records.

Lead and Opportunity share a set of mirrored fields under different names.
Each direction is applied once per edit; a propagated write never triggers
another propagation.
"""

import logging
from typing import Any, Dict

from app.models import Lead, Opportunity
from app.services.errors import PropagationError
from app.utils.dates import utcnow_naive

logger = logging.getLogger(__name__)


def lead_to_opportunity_fields(lead: Lead) -> Dict[str, Any]:
    """Mirror set as written from a lead onto its opportunity."""
    fields = {
        "fte_count": lead.fte_count,
        "non_fte_hours": lead.expected_hours,
        "pm_am": lead.sales_manager,
        "delivery_owner": lead.delivery_manager,
        "primary_team": lead.department,
        "description": lead.description or lead.comments or "",
        "comments": lead.comments,
    }
    if lead.non_fte is not None:
        fields["non_fte"] = lead.non_fte
    return fields


def opportunity_to_lead_fields(opportunity: Opportunity) -> Dict[str, Any]:
    """Mirror set as written from an opportunity back onto its lead."""
    return {
        "fte_count": opportunity.fte_count,
        "expected_hours": opportunity.non_fte_hours,
        "non_fte": opportunity.non_fte,
        "sales_manager": opportunity.pm_am,
        "delivery_manager": opportunity.delivery_owner,
        "department": opportunity.primary_team,
        "comments": opportunity.comments or opportunity.notes,
        "description": opportunity.description,
    }


def push(repository, entity: str, record_id: int, fields: Dict[str, Any], source: str):
    """Write fields onto a linked record, stamping updated_at.

    Raises PropagationError when the link points at nothing. Whatever the
    caller committed before this call is not undone.
    """
    target = repository.update(record_id, {**fields, "updated_at": utcnow_naive()})
    if target is None:
        raise PropagationError(entity, record_id, source)
    logger.debug(f"Propagated {sorted(fields)} from {source} to {entity.lower()} {record_id}")
    return target
