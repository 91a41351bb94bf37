from sqlalchemy import Column, Integer, String, Text, DateTime, Float, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base
from app.utils.dates import utcnow_naive


class Lead(Base):
    __tablename__ = "leads"

    id = Column(Integer, primary_key=True)
    company_name = Column(String(255), nullable=False)
    contact_name = Column(String(255), nullable=False, default="N/A")
    email = Column(String(255), nullable=True, default="")
    phone = Column(String(50), nullable=True, default="")
    status = Column(String(50), nullable=False, default="New", index=True)
    owner_id = Column(String(100), nullable=False, default="system")
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False, index=True)
    contact_id = Column(Integer, ForeignKey("contacts.id"), nullable=False, index=True)
    # Set once by conversion, never cleared
    opportunity_id = Column(Integer, nullable=True, index=True)
    # Lead detail fields
    department = Column(String(255), nullable=True, default="")
    lead_type = Column(String(50), nullable=True, default="")
    sales_manager = Column(String(255), nullable=True, default="")
    delivery_manager = Column(String(255), nullable=True, default="")
    fte_count = Column(Float, nullable=True, default=0)
    non_fte = Column(Float, nullable=True, default=0)
    expected_hours = Column(Float, nullable=True, default=0)
    contract_type = Column(String(50), nullable=True, default="")
    comments = Column(Text, nullable=True, default="")
    proposal_link = Column(String(500), nullable=True, default="")
    estimates_link = Column(String(500), nullable=True, default="")
    description = Column(Text, nullable=True, default="")
    lost_reason = Column(Text, nullable=True, default="")
    last_conversation = Column(Text, nullable=True, default="")
    created_at = Column(DateTime, nullable=False, default=utcnow_naive)
    updated_at = Column(
        DateTime, nullable=False, default=utcnow_naive, onupdate=utcnow_naive
    )

    # Relationships
    account = relationship("Account", back_populates="leads")
    contact = relationship("Contact")

    STATUSES = [
        "New",
        "Contacted",
        "Qualified",
        "Converted",
        "Closed Won",
        "Closed Lost",
    ]

    LEAD_TYPES = ["new", "existing", "upsell"]

    CONTRACT_TYPES = ["Fixed Price", "Time & Material", "Retainer"]

    @property
    def is_converted(self):
        return self.opportunity_id is not None or self.status == "Converted"

    def __repr__(self):
        return f"<Lead {self.company_name} ({self.status})>"
