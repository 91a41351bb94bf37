"""
Data Quality Validators

Centralized validation for Leads and Contacts.
Blocking problems are collected as errors and raised as ValidationError;
warnings are returned for the caller to log.
"""

from typing import Any, Dict, List

from app.models import Lead
from app.services.errors import ValidationError


class ValidationResult:
    """Container for validation results including warnings."""
    def __init__(self):
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def add_error(self, msg: str):
        self.errors.append(msg)

    def add_warning(self, msg: str):
        self.warnings.append(msg)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def raise_if_invalid(self):
        """Raise ValidationError if there are blocking errors."""
        if self.errors:
            raise ValidationError("; ".join(self.errors))


def _is_empty(value: Any) -> bool:
    """Check if value is None or empty string."""
    if value is None:
        return True
    if isinstance(value, str) and value.strip() == "":
        return True
    return False


# ============================================================
# LEAD VALIDATION
# ============================================================

def validate_lead_create(data: Dict[str, Any]) -> ValidationResult:
    """
    Validate lead intake data.

    Required: company_name. Everything else is optional and copied through
    unchanged.
    """
    result = ValidationResult()

    if _is_empty(data.get("company_name")):
        result.add_error("Company Name is required")

    return result


def validate_lead_update(data: Dict[str, Any]) -> ValidationResult:
    """
    Validate a partial lead update.

    company_name may be omitted, but when present it cannot be blank because
    it is also pushed to the linked account's name.
    """
    result = ValidationResult()

    if "company_name" in data and _is_empty(data.get("company_name")):
        result.add_error("Company Name is required")

    # Stored NOT NULL; an explicit null is rejected rather than written
    if "contact_name" in data and data["contact_name"] is None:
        result.add_error("Contact Name cannot be null")
    if "status" in data and data["status"] is None:
        result.add_error("Status cannot be null")

    status = data.get("status")
    if status and status not in Lead.STATUSES:
        result.add_warning(f"Unknown lead status '{status}'")

    return result


def validate_lead_status(status: Any) -> ValidationResult:
    """Any string is accepted; unknown values only warn. None is rejected."""
    result = ValidationResult()
    if status is None:
        result.add_error("Status cannot be null")
    elif _is_empty(status):
        result.add_warning("Lead status set to an empty value")
    elif status not in Lead.STATUSES:
        result.add_warning(f"Unknown lead status '{status}'")
    return result


# ============================================================
# CONTACT VALIDATION
# ============================================================

def validate_contact_update(data: Dict[str, Any]) -> ValidationResult:
    """Validate a partial contact update. name may be omitted but not nulled."""
    result = ValidationResult()

    if "name" in data and data["name"] is None:
        result.add_error("Contact Name cannot be null")

    return result
