from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Float,
    ForeignKey,
)
from sqlalchemy.orm import relationship
from app.database import Base
from app.utils.dates import utcnow_naive


class Contact(Base):
    __tablename__ = "contacts"

    id = Column(Integer, primary_key=True)
    account_id = Column(
        Integer,
        ForeignKey("accounts.id"),
        nullable=False,
        index=True,
    )
    name = Column(String(255), nullable=False, default="N/A")
    email = Column(String(255), nullable=True, default="", index=True)
    phone = Column(String(50), nullable=True, default="")
    title = Column(String(100), nullable=True, default="")
    owner_id = Column(String(100), nullable=False, default="system")
    # Financial roll-up entered on the contacts screen
    revenue = Column(Float, nullable=True, default=0)
    closed_won_revenue = Column(Float, nullable=True, default=0)
    closed_lost_revenue = Column(Float, nullable=True, default=0)
    created_at = Column(DateTime, nullable=False, default=utcnow_naive)
    updated_at = Column(
        DateTime, nullable=False, default=utcnow_naive, onupdate=utcnow_naive
    )

    # Relationships
    account = relationship("Account", back_populates="contacts")

    @property
    def display_name(self):
        """Name with title if available."""
        if self.title:
            return f"{self.name} ({self.title})"
        return self.name

    def __repr__(self):
        return f"<Contact {self.name}>"
