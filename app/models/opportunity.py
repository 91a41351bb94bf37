from sqlalchemy import Column, Integer, String, Text, DateTime, Float, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base
from app.utils.dates import utcnow_naive


class Opportunity(Base):
    __tablename__ = 'opportunities'

    id = Column(Integer, primary_key=True)
    account_id = Column(Integer, ForeignKey('accounts.id'), nullable=True, index=True)
    contact_id = Column(Integer, ForeignKey('contacts.id'), nullable=True)
    # Only set for deals created by lead conversion ("transferred" deals)
    original_lead_id = Column(Integer, ForeignKey('leads.id'), nullable=True, index=True)
    owner_id = Column(String(100), nullable=True)
    opp_name = Column(String(255), nullable=True, default='')
    description = Column(Text, nullable=True, default='')
    service = Column(String(255), nullable=True, default='')
    primary_team = Column(String(255), nullable=True, default='')
    delivery_owner = Column(String(255), nullable=True, default='')
    fte_count = Column(Float, nullable=True, default=0)
    non_fte_hours = Column(Float, nullable=True, default=0)
    non_fte = Column(Float, nullable=True, default=0)
    pm_am = Column(String(255), nullable=True, default='')
    stage = Column(String(50), nullable=False, default='New', index=True)
    skill_tech = Column(String(255), nullable=True, default='')
    value = Column(Float, nullable=True, default=0)
    # ISO-8601 strings; the dashboard buckets on their date prefix
    close_date = Column(String(40), nullable=True)
    comments = Column(Text, nullable=True, default='')
    notes = Column(Text, nullable=True, default='')
    products = Column(Text, nullable=True, default='')
    git_link = Column(String(500), nullable=True, default='')
    project_plan_link = Column(String(500), nullable=True, default='')
    pm_tool_link = Column(String(500), nullable=True, default='')
    project_folder_link = Column(String(500), nullable=True, default='')
    downtrend_reason = Column(Text, nullable=True, default='')
    code_review_date = Column(String(40), nullable=True)
    code_review_owner = Column(String(255), nullable=True, default='')
    last_modified_by = Column(String(255), nullable=True)
    last_modified_date = Column(String(40), nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow_naive)
    updated_at = Column(DateTime, nullable=False, default=utcnow_naive, onupdate=utcnow_naive)

    # Relationships
    account = relationship("Account", back_populates="opportunities")
    contact = relationship("Contact")
    original_lead = relationship("Lead", foreign_keys=[original_lead_id])

    STAGES = [
        'New',
        'Prospect',
        'Proposal',
        'Negotiation',
        'Closed Won',
        'Closed Lost',
    ]

    CLOSED_STAGES = ['Closed Won', 'Closed Lost']

    @property
    def is_closed(self):
        return self.stage in self.CLOSED_STAGES

    @property
    def is_transferred(self):
        """True for deals that came from a lead conversion."""
        return self.original_lead_id is not None

    def __repr__(self):
        return f"<Opportunity {self.opp_name}>"
