from typing import Optional

from app.models import Lead
from app.repositories.base import BaseRepository


class LeadRepository(BaseRepository[Lead]):
    model = Lead

    def find_by_contact_id(self, contact_id: int) -> Optional[Lead]:
        """First lead (by id) that points at the contact."""
        return (
            self.db.query(Lead)
            .filter(Lead.contact_id == contact_id)
            .order_by(Lead.id)
            .first()
        )
