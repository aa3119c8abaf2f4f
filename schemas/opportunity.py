from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_serializer
from pydantic.alias_generators import to_camel

from utils.time import isoformat_utc


class OpportunityOut(BaseModel):
    """Unified public shape for admin and SME opportunities."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    sector: str
    sub_industry: str = ""
    country: str
    stage: str
    investment_range: str = ""
    requirements: str
    contact: str = ""
    image_key: Optional[str] = None
    # Only present on single-opportunity reads of admin opportunities
    is_active: Optional[bool] = None
    source: Literal["admin", "sme"]
    created_at: Optional[datetime] = Field(None, alias="created_at")

    @field_serializer("created_at")
    def serialize_created_at(self, value: Optional[datetime]) -> Optional[str]:
        return isoformat_utc(value)

    def to_response(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class AdminOpportunityCreate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    sector: Optional[str] = None
    sub_industry: Optional[str] = Field(None, alias="subIndustry")
    country: Optional[str] = None
    stage: Optional[str] = None
    investment_range: Optional[str] = Field(None, alias="investmentRange")
    requirements: Optional[str] = None
    contact: Optional[str] = None
    image_key: Optional[str] = Field(None, alias="imageKey")
    is_active: Optional[StrictBool] = Field(None, alias="isActive")

    model_config = {"populate_by_name": True}


class AdminOpportunityUpdate(BaseModel):
    """Partial update; keys are checked against ADMIN_OPPORTUNITY_FIELDS before this model is built."""

    title: Optional[str] = None
    description: Optional[str] = None
    sector: Optional[str] = None
    sub_industry: Optional[str] = None
    country: Optional[str] = None
    stage: Optional[str] = None
    investment_range: Optional[str] = None
    requirements: Optional[str] = None
    contact: Optional[str] = None
    image_key: Optional[str] = None
    is_active: Optional[StrictBool] = None

    model_config = {"extra": "forbid"}


ADMIN_OPPORTUNITY_FIELDS = frozenset(AdminOpportunityUpdate.model_fields)


class SmeOpportunityCreate(BaseModel):
    sme_id: Optional[int] = Field(None, alias="smeId")
    title: Optional[str] = None
    description: Optional[str] = None
    funding_required: Optional[Decimal] = Field(None, alias="fundingRequired")
    equity_offered: Optional[Decimal] = Field(None, alias="equityOffered")
    use_of_funds: Optional[str] = Field(None, alias="useOfFunds")
    expected_roi: Optional[Decimal] = Field(None, alias="expectedRoi")
    investment_timeline: Optional[str] = Field(None, alias="investmentTimeline")

    model_config = {"populate_by_name": True}
