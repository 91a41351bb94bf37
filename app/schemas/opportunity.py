from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, Field

from app.schemas.base import Amount, PatchModel, RecordModel


class OpportunityUpdate(PatchModel):
    opp_name: Optional[str] = None
    description: Optional[str] = None
    service: Optional[str] = None
    primary_team: Optional[str] = None
    delivery_owner: Optional[str] = None
    fte_count: Amount = None
    non_fte_hours: Amount = None
    non_fte: Amount = None
    pm_am: Optional[str] = None
    stage: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("stage", "status")
    )
    skill_tech: Optional[str] = None
    value: Amount = None
    close_date: Optional[str] = None
    comments: Optional[str] = None
    notes: Optional[str] = None
    products: Optional[str] = None
    git_link: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("gitLink", "git", "git_link")
    )
    project_plan_link: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("projectPlanLink", "pmChecklist", "project_plan_link"),
    )
    pm_tool_link: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("pmToolLink", "qbrNotes", "pm_tool_link"),
    )
    project_folder_link: Optional[str] = None
    downtrend_reason: Optional[str] = None
    code_review_date: Optional[str] = None
    code_review_owner: Optional[str] = None
    last_modified_by: Optional[str] = None
    last_modified_date: Optional[str] = None


class OpportunityCreate(OpportunityUpdate):
    # No original_lead_id: only conversion links a deal to a lead
    account_id: Optional[int] = None
    contact_id: Optional[int] = None


class OpportunityRead(RecordModel):
    id: int
    account_id: Optional[int] = None
    contact_id: Optional[int] = None
    original_lead_id: Optional[int] = None
    owner_id: Optional[str] = None
    opp_name: Optional[str] = None
    description: Optional[str] = None
    service: Optional[str] = None
    primary_team: Optional[str] = None
    delivery_owner: Optional[str] = None
    fte_count: Optional[float] = None
    non_fte_hours: Optional[float] = None
    non_fte: Optional[float] = None
    pm_am: Optional[str] = None
    stage: str
    skill_tech: Optional[str] = None
    value: Optional[float] = None
    close_date: Optional[str] = None
    comments: Optional[str] = None
    notes: Optional[str] = None
    products: Optional[str] = None
    git_link: Optional[str] = None
    project_plan_link: Optional[str] = None
    pm_tool_link: Optional[str] = None
    project_folder_link: Optional[str] = None
    downtrend_reason: Optional[str] = None
    code_review_date: Optional[str] = None
    code_review_owner: Optional[str] = None
    last_modified_by: Optional[str] = None
    last_modified_date: Optional[str] = None
    created_at: datetime
    updated_at: datetime
