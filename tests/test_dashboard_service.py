"""
Unit tests for dashboard aggregation.

Rules:
1. Counts: all leads, leads with status Converted, open deals, Closed Won deals.
2. Revenue sums Closed Won values; unparseable values count as 0.
3. weekData buckets by calendar day over the last 7 days, oldest first.
4. monthData buckets into four seven-day windows ending at "now", W1 oldest.
"""

from datetime import datetime

from app.services.dashboard_service import _amount, get_dashboard_stats

# A Monday
NOW = datetime(2026, 10, 19, 15, 0, 0)


def _opp(opportunities, stage, value, close_date=None, **extra):
    return opportunities.create({"stage": stage, "value": value, "close_date": close_date, **extra})


class TestCounts:
    """Tests for the headline numbers."""

    def test_empty_store(self, leads, opportunities):
        stats = get_dashboard_stats(leads, opportunities, now=NOW)

        assert stats["totalLeads"] == 0
        assert stats["convertedLeads"] == 0
        assert stats["activeDeals"] == 0
        assert stats["closedDeals"] == 0
        assert stats["revenue"] == 0
        assert [p["value"] for p in stats["revenueTrends"]["weekData"]] == [0] * 7
        assert [p["value"] for p in stats["revenueTrends"]["monthData"]] == [0] * 4

    def test_counts_and_revenue(self, leads, opportunities, lead_service, converted):
        lead_service.create_lead({"company_name": "Globex"})
        _opp(opportunities, "Closed Won", 100, "2026-10-19T09:30:00.000Z")
        _opp(opportunities, "Closed Won", 50, "2026-10-09T09:30:00.000Z")
        _opp(opportunities, "Closed Lost", 999, "2026-10-18T09:30:00.000Z")
        _opp(opportunities, "Proposal", 10)

        stats = get_dashboard_stats(leads, opportunities, now=NOW)

        assert stats["totalLeads"] == 2
        assert stats["convertedLeads"] == 1
        # The converted deal (New) and the Proposal deal
        assert stats["activeDeals"] == 2
        assert stats["closedDeals"] == 2
        assert stats["revenue"] == 150

    def test_converted_count_follows_status(self, leads, opportunities, contact_service, converted):
        """A converted lead that later closes no longer counts as Converted."""
        contact_service.update_contact(converted.lead.contact_id, {"closed_won_revenue": 10})

        stats = get_dashboard_stats(leads, opportunities, now=NOW)
        assert stats["convertedLeads"] == 0
        assert stats["closedDeals"] == 1


class TestWeekData:
    """Tests for the daily series."""

    def test_labels_oldest_first(self, leads, opportunities):
        stats = get_dashboard_stats(leads, opportunities, now=NOW)

        labels = [p["label"] for p in stats["revenueTrends"]["weekData"]]
        assert labels == ["Tue", "Wed", "Thu", "Fri", "Sat", "Sun", "Mon"]

    def test_today_bucket(self, leads, opportunities):
        _opp(opportunities, "Closed Won", 100, "2026-10-19T09:30:00.000Z")
        _opp(opportunities, "Closed Won", 50, "2026-10-09T09:30:00.000Z")

        week = get_dashboard_stats(leads, opportunities, now=NOW)["revenueTrends"]["weekData"]

        assert week[-1] == {"label": "Mon", "value": 100}
        # Ten days ago is outside the week
        assert sum(p["value"] for p in week) == 100

    def test_created_at_used_without_close_date(self, leads, opportunities):
        _opp(opportunities, "Closed Won", 75, None, created_at=datetime(2026, 10, 17, 8, 0))

        week = get_dashboard_stats(leads, opportunities, now=NOW)["revenueTrends"]["weekData"]

        assert week[4] == {"label": "Sat", "value": 75}

    def test_lost_deals_ignored(self, leads, opportunities):
        _opp(opportunities, "Closed Lost", 500, "2026-10-19T09:30:00.000Z")

        week = get_dashboard_stats(leads, opportunities, now=NOW)["revenueTrends"]["weekData"]

        assert week[-1]["value"] == 0


class TestMonthData:
    """Tests for the weekly series."""

    def test_windows(self, leads, opportunities):
        _opp(opportunities, "Closed Won", 100, "2026-10-19T09:30:00.000Z")
        _opp(opportunities, "Closed Won", 50, "2026-10-09T09:30:00.000Z")
        _opp(opportunities, "Closed Won", 20, "2026-09-25T09:30:00.000Z")
        # Older than four weeks
        _opp(opportunities, "Closed Won", 7, "2026-09-01T09:30:00.000Z")

        month = get_dashboard_stats(leads, opportunities, now=NOW)["revenueTrends"]["monthData"]

        assert month == [
            {"label": "W1", "value": 20},
            {"label": "W2", "value": 0},
            {"label": "W3", "value": 50},
            {"label": "W4", "value": 100},
        ]

    def test_window_end_is_exclusive(self, leads, opportunities):
        _opp(opportunities, "Closed Won", 30, "2026-10-19T15:00:00.000Z")

        month = get_dashboard_stats(leads, opportunities, now=NOW)["revenueTrends"]["monthData"]

        assert sum(p["value"] for p in month) == 0

    def test_unparseable_close_date_skipped(self, leads, opportunities):
        _opp(opportunities, "Closed Won", 30, "next tuesday")

        stats = get_dashboard_stats(leads, opportunities, now=NOW)

        assert sum(p["value"] for p in stats["revenueTrends"]["monthData"]) == 0
        assert stats["revenue"] == 30


class TestAmount:
    def test_values(self):
        assert _amount(12.5) == 12.5
        assert _amount("40") == 40
        assert _amount(None) == 0
        assert _amount("n/a") == 0
        assert _amount(float("nan")) == 0
