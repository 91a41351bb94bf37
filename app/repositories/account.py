from typing import Optional

from app.models import Account
from app.repositories.base import BaseRepository


class AccountRepository(BaseRepository[Account]):
    model = Account

    def find_by_name(self, name: str) -> Optional[Account]:
        """Exact, case-sensitive name match; the oldest account wins."""
        return (
            self.db.query(Account)
            .filter(Account.name == name)
            .order_by(Account.id)
            .first()
        )
