from schemas.interest import InterestCreate
from schemas.opportunity import (
    ADMIN_OPPORTUNITY_FIELDS,
    AdminOpportunityCreate,
    AdminOpportunityUpdate,
    OpportunityOut,
    SmeOpportunityCreate,
)
from schemas.reference_data import BusinessTypeIn, ConfigUpsert, IndustrySectorIn, RegionIn

__all__ = [
    "ADMIN_OPPORTUNITY_FIELDS",
    "AdminOpportunityCreate",
    "AdminOpportunityUpdate",
    "BusinessTypeIn",
    "ConfigUpsert",
    "IndustrySectorIn",
    "InterestCreate",
    "OpportunityOut",
    "RegionIn",
    "SmeOpportunityCreate",
]
