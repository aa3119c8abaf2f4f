from typing import Optional

from pydantic import BaseModel, StrictBool


class IndustrySectorIn(BaseModel):
    """Create/update body; on update every field is optional and missing means unchanged."""

    name: Optional[str] = None
    description: Optional[str] = None
    chart_color: Optional[str] = None
    is_active: Optional[StrictBool] = None


class RegionIn(BaseModel):
    name: Optional[str] = None
    code: Optional[str] = None
    capital: Optional[str] = None
    is_active: Optional[StrictBool] = None


class BusinessTypeIn(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    is_active: Optional[StrictBool] = None


class ConfigUpsert(BaseModel):
    key: Optional[str] = None
    value: Optional[str] = None
