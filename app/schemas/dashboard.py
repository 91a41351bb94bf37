from typing import List

from app.schemas.base import CamelModel


class TrendPoint(CamelModel):
    label: str  # "Mon" or "W1"
    value: float


class RevenueTrends(CamelModel):
    week_data: List[TrendPoint]
    month_data: List[TrendPoint]


class DashboardStats(CamelModel):
    total_leads: int
    converted_leads: int
    active_deals: int
    closed_deals: int
    revenue: float
    revenue_trends: RevenueTrends
