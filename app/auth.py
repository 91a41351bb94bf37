"""
Acting-user resolution.

Authentication happens in front of this service; requests arrive with the
caller's identity in headers. Without them the request acts as "system".
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Request

SYSTEM_USER_ID = "system"


@dataclass(frozen=True)
class ActingUser:
    id: str = SYSTEM_USER_ID
    name: Optional[str] = None


def get_current_user(request: Request) -> ActingUser:
    """Return the acting user from X-User-Id / X-User-Name, or the system user."""
    user_id = (request.headers.get("x-user-id") or "").strip()
    name = (request.headers.get("x-user-name") or "").strip()
    return ActingUser(id=user_id or SYSTEM_USER_ID, name=name or None)


def owner_id_for(user: Optional[ActingUser]) -> str:
    """owner_id stamped on new records; "system" when nobody is acting."""
    return (user.id if user else None) or SYSTEM_USER_ID
