from typing import List, Optional

from sqlalchemy.orm import Session

from app.models import Account
from app.repositories import AccountRepository


class AccountService:
    """Read access to accounts. Accounts are written only by lead sync."""

    def __init__(self, accounts: AccountRepository):
        self.accounts = accounts

    def get_accounts(self) -> List[Account]:
        return self.accounts.get_all()

    def get_account(self, account_id: int) -> Optional[Account]:
        return self.accounts.get_by_id(account_id)


def build_account_service(db: Session) -> AccountService:
    return AccountService(AccountRepository(db))
