"""
Unit tests for lead synchronization.

Rules:
1. Intake reuses an account on an exact company-name match, otherwise creates one,
   and always creates a new contact.
2. A lead converts at most once; conversion links lead and opportunity both ways.
3. Lead edits push mirror fields to the opportunity, contact fields to the contact
   and the company name to the account, one hop each.
4. A dangling link fails the edit after the lead itself has been saved.
"""

import pytest
from pydantic import ValidationError as SchemaValidationError

from app.services.errors import (
    ConversionError,
    NotFoundError,
    PropagationError,
    ValidationError,
)


class TestCreateLead:
    """Tests for lead intake."""

    def test_new_company_creates_account_and_contact(self, lead_service, accounts, user):
        """No account named Acme yet: one is created and linked."""
        result = lead_service.create_lead(
            {"company_name": "Acme", "contact_name": "John Doe", "email": "john@acme.com"},
            user,
        )

        account = accounts.find_by_name("Acme")
        assert account is not None
        assert result.account.id == account.id
        assert result.lead.account_id == account.id
        assert result.lead.contact_id == result.contact.id
        assert result.contact.account_id == account.id
        assert result.contact.name == "John Doe"
        assert account.owner_id == "user-1"
        assert account.status == "New"

    def test_same_company_reuses_account(self, lead_service, accounts, contacts, leads, user):
        """Second lead for Acme shares the account but gets its own contact."""
        first = lead_service.create_lead({"company_name": "Acme", "contact_name": "John"}, user)
        second = lead_service.create_lead({"company_name": "Acme", "contact_name": "Jane"}, user)

        assert first.lead.account_id == second.lead.account_id
        assert len([a for a in accounts.get_all() if a.name == "Acme"]) == 1
        assert len(contacts.get_all()) == 2
        assert len(leads.get_all()) == 2
        assert first.contact.id != second.contact.id

    def test_account_match_is_case_sensitive(self, lead_service, accounts, user):
        """"Acme" and "ACME" are different accounts."""
        first = lead_service.create_lead({"company_name": "Acme"}, user)
        second = lead_service.create_lead({"company_name": "ACME"}, user)

        assert first.lead.account_id != second.lead.account_id
        assert len(accounts.get_all()) == 2

    def test_missing_company_name_rejected(self, lead_service, accounts, contacts):
        with pytest.raises(ValidationError, match="Company Name is required"):
            lead_service.create_lead({"contact_name": "John"})
        assert accounts.get_all() == []
        assert contacts.get_all() == []

    def test_blank_company_name_rejected(self, lead_service):
        with pytest.raises(ValidationError):
            lead_service.create_lead({"company_name": "   "})

    def test_defaults(self, lead_service):
        """Optional fields fall back to N/A, empty strings and zeros."""
        result = lead_service.create_lead({"company_name": "Acme"})

        lead = result.lead
        assert lead.status == "New"
        assert lead.opportunity_id is None
        assert lead.contact_name == "N/A"
        assert lead.email == ""
        assert lead.phone == ""
        assert lead.fte_count == 0
        assert lead.expected_hours == 0
        assert lead.department == ""
        assert lead.owner_id == "system"
        assert result.contact.name == "N/A"
        assert result.contact.title == ""
        assert result.contact.owner_id == "system"

    def test_detail_fields_copied_verbatim(self, lead_service, user):
        result = lead_service.create_lead(
            {
                "company_name": "Acme",
                "department": "Support",
                "lead_type": "new",
                "sales_manager": "Sam",
                "delivery_manager": "Dana",
                "fte_count": 1.5,
                "non_fte": 0.5,
                "expected_hours": 120,
                "contract_type": "Retainer",
                "proposal_link": "https://docs.example.com/p",
                "estimates_link": "https://docs.example.com/e",
                "description": "Platform migration",
            },
            user,
        )

        lead = result.lead
        assert lead.department == "Support"
        assert lead.lead_type == "new"
        assert lead.sales_manager == "Sam"
        assert lead.delivery_manager == "Dana"
        assert lead.fte_count == 1.5
        assert lead.non_fte == 0.5
        assert lead.expected_hours == 120
        assert lead.contract_type == "Retainer"
        assert lead.proposal_link == "https://docs.example.com/p"
        assert lead.description == "Platform migration"

    def test_form_aliases_accepted(self, lead_service):
        """The lead form posts customerName / customerEmail."""
        result = lead_service.create_lead(
            {"companyName": "Acme", "customerName": "John", "customerEmail": "j@acme.com"}
        )
        assert result.lead.contact_name == "John"
        assert result.contact.email == "j@acme.com"

    def test_unknown_field_rejected(self, lead_service, leads):
        with pytest.raises(SchemaValidationError):
            lead_service.create_lead({"company_name": "Acme", "favourite_colour": "red"})
        assert leads.get_all() == []


class TestConvertLead:
    """Tests for lead to opportunity conversion."""

    def test_conversion_links_both_ways(self, lead_service, converted):
        lead, opportunity = converted.lead, converted.opportunity

        stored = lead_service.get_lead_by_id(lead.id)
        assert opportunity.original_lead_id == lead.id
        assert stored.opportunity_id == opportunity.id
        assert stored.status == "Converted"

    def test_opportunity_fields_mapped_from_lead(self, converted):
        opportunity = converted.opportunity

        assert opportunity.opp_name == "Deal - Acme"
        assert opportunity.stage == "New"
        assert opportunity.primary_team == "Growth"
        assert opportunity.delivery_owner == "Dana"
        assert opportunity.pm_am == "Sam"
        assert opportunity.fte_count == 2
        assert opportunity.non_fte_hours == 40
        assert opportunity.comments == "Warm intro"
        # No description on the lead, so comments stand in
        assert opportunity.description == "Warm intro"
        assert opportunity.account_id == converted.lead.account_id
        assert opportunity.contact_id == converted.lead.contact_id
        assert opportunity.last_modified_by == "Test User"
        assert opportunity.last_modified_date

    def test_second_conversion_rejected(self, lead_service, opportunities, converted, user):
        """Re-conversion fails and changes nothing."""
        lead_id = converted.lead.id
        opportunity_id = converted.opportunity.id

        with pytest.raises(ConversionError, match="Lead already converted"):
            lead_service.convert_lead(lead_id, user)

        stored = lead_service.get_lead_by_id(lead_id)
        assert stored.status == "Converted"
        assert stored.opportunity_id == opportunity_id
        assert len(opportunities.get_all()) == 1

    def test_conversion_rejected_after_status_moves_on(self, lead_service, leads, converted, user):
        """A converted lead later marked Closed Won still cannot convert again."""
        leads.update(converted.lead.id, {"status": "Closed Won"})

        with pytest.raises(ConversionError):
            lead_service.convert_lead(converted.lead.id, user)

    def test_unknown_lead(self, lead_service, user):
        with pytest.raises(NotFoundError):
            lead_service.convert_lead(999, user)

    def test_system_user_when_none(self, lead_service):
        created = lead_service.create_lead({"company_name": "Acme"})
        result = lead_service.convert_lead(created.lead.id)
        assert result.opportunity.last_modified_by == "system"


class TestUpdateLead:
    """Tests for lead edits and their propagation."""

    def test_fte_count_mirrored_to_opportunity(self, lead_service, opportunity_service, converted):
        lead_service.update_lead(converted.lead.id, {"fte_count": 7})

        opportunity = opportunity_service.get_opportunity(converted.opportunity.id)
        assert opportunity.fte_count == 7

    def test_renamed_mirror_fields(self, lead_service, opportunity_service, converted):
        lead_service.update_lead(
            converted.lead.id,
            {
                "expected_hours": 80,
                "sales_manager": "Jane",
                "delivery_manager": "Lee",
                "department": "Enterprise",
                "non_fte": 3,
                "comments": "Budget approved",
                "description": "Phase two",
            },
        )

        opportunity = opportunity_service.get_opportunity(converted.opportunity.id)
        assert opportunity.non_fte_hours == 80
        assert opportunity.pm_am == "Jane"
        assert opportunity.delivery_owner == "Lee"
        assert opportunity.primary_team == "Enterprise"
        assert opportunity.non_fte == 3
        assert opportunity.comments == "Budget approved"
        assert opportunity.description == "Phase two"

    def test_unconverted_lead_touches_no_opportunity(self, lead_service, opportunities):
        created = lead_service.create_lead({"company_name": "Acme"})
        lead_service.update_lead(created.lead.id, {"fte_count": 4})

        assert opportunities.get_all() == []
        assert lead_service.get_lead_by_id(created.lead.id).fte_count == 4

    def test_partial_update_keeps_other_fields(self, lead_service, converted):
        lead_service.update_lead(converted.lead.id, {"fte_count": 9})

        lead = lead_service.get_lead_by_id(converted.lead.id)
        assert lead.sales_manager == "Sam"
        assert lead.department == "Growth"
        assert lead.status == "Converted"

    def test_contact_fields_propagate_with_fallback(self, lead_service, contacts, user):
        created = lead_service.create_lead(
            {"company_name": "Acme", "contact_name": "John", "email": "john@acme.com", "phone": "555"},
            user,
        )
        lead_service.update_lead(created.lead.id, {"email": "jd@acme.com", "title": "CTO"})

        contact = contacts.get_by_id(created.contact.id)
        assert contact.email == "jd@acme.com"
        assert contact.name == "John"
        assert contact.phone == "555"
        assert contact.title == "CTO"

    def test_non_contact_edit_leaves_contact_alone(self, lead_service, contacts):
        created = lead_service.create_lead({"company_name": "Acme", "contact_name": "John"})
        contacts.update(created.contact.id, {"name": "Johnny"})

        lead_service.update_lead(created.lead.id, {"department": "Ops"})

        assert contacts.get_by_id(created.contact.id).name == "Johnny"

    def test_company_name_renames_account(self, lead_service, accounts):
        created = lead_service.create_lead({"company_name": "Acme"})
        lead_service.update_lead(created.lead.id, {"company_name": "Acme Corp"})

        assert accounts.get_by_id(created.account.id).name == "Acme Corp"
        assert lead_service.get_lead_by_id(created.lead.id).company_name == "Acme Corp"

    def test_blank_company_name_rejected(self, lead_service):
        created = lead_service.create_lead({"company_name": "Acme"})
        with pytest.raises(ValidationError):
            lead_service.update_lead(created.lead.id, {"company_name": ""})

    def test_unknown_lead(self, lead_service):
        with pytest.raises(NotFoundError):
            lead_service.update_lead(999, {"fte_count": 1})

    def test_null_status_rejected(self, lead_service, converted):
        """Status is stored NOT NULL; an explicit null is refused before any write."""
        with pytest.raises(ValidationError, match="Status cannot be null"):
            lead_service.update_lead(converted.lead.id, {"status": None})

        assert lead_service.get_lead_by_id(converted.lead.id).status == "Converted"

    def test_null_contact_name_rejected(self, lead_service, converted):
        with pytest.raises(ValidationError, match="Contact Name cannot be null"):
            lead_service.update_lead(converted.lead.id, {"contact_name": None})

        assert lead_service.get_lead_by_id(converted.lead.id).contact_name == "John Doe"

    def test_null_optional_field_allowed(self, lead_service, converted):
        lead = lead_service.update_lead(converted.lead.id, {"phone": None})
        assert lead.phone is None

    def test_link_fields_not_writable(self, lead_service, converted):
        with pytest.raises(SchemaValidationError):
            lead_service.update_lead(converted.lead.id, {"opportunity_id": None})

    def test_dangling_opportunity_keeps_lead_update(self, lead_service, leads, converted):
        """Propagation failure surfaces, but the lead write is already committed."""
        leads.update(converted.lead.id, {"opportunity_id": 9999})

        with pytest.raises(PropagationError):
            lead_service.update_lead(
                converted.lead.id, {"fte_count": 3, "email": "new@acme.com"}
            )

        lead = lead_service.get_lead_by_id(converted.lead.id)
        assert lead.fte_count == 3
        assert lead.email == "new@acme.com"

    def test_dangling_opportunity_skips_later_hops(self, lead_service, leads, contacts, converted):
        """The contact hop never runs once the opportunity hop has failed."""
        leads.update(converted.lead.id, {"opportunity_id": 9999})

        with pytest.raises(PropagationError):
            lead_service.update_lead(converted.lead.id, {"email": "new@acme.com"})

        assert contacts.get_by_id(converted.lead.contact_id).email == "john@acme.com"


class TestUpdateLeadStatus:
    """Tests for the unconditional status setter."""

    def test_any_status_accepted(self, lead_service):
        created = lead_service.create_lead({"company_name": "Acme"})

        lead = lead_service.update_lead_status(created.lead.id, "Qualified")
        assert lead.status == "Qualified"

        lead = lead_service.update_lead_status(created.lead.id, "Parked")
        assert lead.status == "Parked"

    def test_null_status_rejected(self, lead_service):
        created = lead_service.create_lead({"company_name": "Acme"})

        with pytest.raises(ValidationError):
            lead_service.update_lead_status(created.lead.id, None)

        assert lead_service.get_lead_by_id(created.lead.id).status == "New"

    def test_unknown_lead(self, lead_service):
        with pytest.raises(NotFoundError):
            lead_service.update_lead_status(999, "Contacted")


class TestReads:
    def test_get_all_and_by_id(self, lead_service):
        first = lead_service.create_lead({"company_name": "Acme"})
        second = lead_service.create_lead({"company_name": "Globex"})

        assert [l.id for l in lead_service.get_all_leads()] == [first.lead.id, second.lead.id]
        assert lead_service.get_lead_by_id(second.lead.id).company_name == "Globex"
        assert lead_service.get_lead_by_id(999) is None
