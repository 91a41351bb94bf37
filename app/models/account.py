from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from app.database import Base
from app.utils.dates import utcnow_naive


class Account(Base):
    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True)
    # Lookup key for lead intake; matched exactly, case-sensitive
    name = Column(String(255), nullable=False, index=True)
    owner_id = Column(String(100), nullable=False, default="system")
    status = Column(String(50), nullable=False, default="New")
    created_at = Column(DateTime, nullable=False, default=utcnow_naive)
    updated_at = Column(
        DateTime, nullable=False, default=utcnow_naive, onupdate=utcnow_naive
    )

    # Relationships
    contacts = relationship("Contact", back_populates="account")
    leads = relationship("Lead", back_populates="account")
    opportunities = relationship("Opportunity", back_populates="account")

    STATUSES = ["New", "Active", "Inactive"]

    @property
    def open_opportunities_count(self):
        """Count opportunities on this account that are not closed."""
        return len(
            [o for o in self.opportunities if o.stage not in ["Closed Won", "Closed Lost"]]
        )

    def __repr__(self):
        return f"<Account {self.name}>"
