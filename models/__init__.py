from models.interest import InvestmentInterest
from models.opportunity import AdminOpportunity, SmeOpportunity
from models.reference_data import BusinessType, IndustrySector, Region, SystemConfig
from models.sme import Sme

__all__ = [
    "AdminOpportunity",
    "BusinessType",
    "IndustrySector",
    "InvestmentInterest",
    "Region",
    "Sme",
    "SmeOpportunity",
    "SystemConfig",
]
