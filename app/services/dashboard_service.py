"""
Dashboard aggregation.

Read-only and recomputed on every call: summary counts over leads and
opportunities plus two Closed Won revenue series (last 7 days, last 4 weeks).
"""

import math
from datetime import datetime, timedelta
from typing import Iterable, List, Optional

from app.models import Opportunity
from app.repositories import LeadRepository, OpportunityRepository
from app.utils.dates import parse_iso, utcnow_naive

CLOSED_WON = "Closed Won"
CLOSED_LOST = "Closed Lost"

WEEKDAY_LABELS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def _amount(value) -> float:
    """Deal value as a float; anything unparseable counts as 0."""
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return 0.0
    return 0.0 if math.isnan(amount) else amount


def _deal_date(opp: Opportunity) -> str:
    """close_date, falling back to created_at, as an ISO string."""
    resolved = opp.close_date or opp.created_at
    if isinstance(resolved, datetime):
        return resolved.isoformat()
    return str(resolved or "")


def _won(opportunities: Iterable[Opportunity]) -> List[Opportunity]:
    return [o for o in opportunities if o.stage == CLOSED_WON]


def weekly_trend(opportunities: Iterable[Opportunity], now: datetime) -> List[dict]:
    """Closed Won revenue for each of the last 7 calendar days, oldest first.

    A deal lands in a day when its ISO date string starts with that day's
    YYYY-MM-DD.
    """
    won = _won(opportunities)
    week_data = []
    for i in range(6, -1, -1):
        day = (now - timedelta(days=i)).date()
        prefix = day.isoformat()
        day_revenue = sum(_amount(o.value) for o in won if _deal_date(o).startswith(prefix))
        week_data.append({"label": WEEKDAY_LABELS[day.weekday()], "value": day_revenue})
    return week_data


def monthly_trend(opportunities: Iterable[Opportunity], now: datetime) -> List[dict]:
    """Closed Won revenue for the last 4 seven-day windows, W1 oldest.

    Window i covers [now - (i+1)*7 days, now - i*7 days).
    """
    won = _won(opportunities)
    month_data = []
    for i in range(3, -1, -1):
        start = now - timedelta(days=(i + 1) * 7)
        end = now - timedelta(days=i * 7)
        week_revenue = 0.0
        for o in won:
            when = parse_iso(_deal_date(o))
            if when is not None and start <= when < end:
                week_revenue += _amount(o.value)
        month_data.append({"label": f"W{4 - i}", "value": week_revenue})
    return month_data


def get_dashboard_stats(
    leads: LeadRepository,
    opportunities: OpportunityRepository,
    now: Optional[datetime] = None,
) -> dict:
    all_leads = leads.get_all()
    all_opps = opportunities.get_all()
    now = parse_iso(now) if now is not None else utcnow_naive()

    won = _won(all_opps)

    return {
        "totalLeads": len(all_leads),
        "convertedLeads": len([l for l in all_leads if l.status == "Converted"]),
        "activeDeals": len([o for o in all_opps if o.stage not in (CLOSED_WON, CLOSED_LOST)]),
        "closedDeals": len(won),
        "revenue": sum(_amount(o.value) for o in won),
        "revenueTrends": {
            "weekData": weekly_trend(all_opps, now),
            "monthData": monthly_trend(all_opps, now),
        },
    }
