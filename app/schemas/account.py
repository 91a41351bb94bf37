from datetime import datetime
from typing import Optional

from app.schemas.base import RecordModel


class AccountRead(RecordModel):
    id: int
    name: str
    owner_id: Optional[str] = None
    status: Optional[str] = None
    created_at: datetime
    updated_at: datetime
