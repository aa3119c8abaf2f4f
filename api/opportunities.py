from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db
from schemas.interest import InterestCreate
from schemas.opportunity import SmeOpportunityCreate
from services.interests import submit_interest
from services.opportunities import create_sme_opportunity, list_opportunities, resolve_opportunity
from services.opportunity_ref import decode
from services.schema_probe import SchemaCapabilities, get_schema
from utils.time import isoformat_utc

router = APIRouter(prefix="/api/investment-opportunities", tags=["investment-opportunities"])


@router.get("", response_model=list[dict])
async def get_opportunities(
    include_sme: bool = Query(False, alias="includeSme"),
    db: AsyncSession = Depends(get_db),
    schema: SchemaCapabilities = Depends(get_schema),
):
    items = await list_opportunities(db, schema, include_sme=include_sme)
    return [o.to_response() for o in items]


@router.post("", response_model=dict, status_code=201)
async def create_opportunity(
    body: SmeOpportunityCreate,
    db: AsyncSession = Depends(get_db),
    schema: SchemaCapabilities = Depends(get_schema),
):
    """Legacy path: an SME publishes a fundraising opportunity."""
    opportunity = await create_sme_opportunity(db, schema, body)
    return {"message": "Investment opportunity created successfully", "opportunity": opportunity}


@router.get("/{opportunity_id}", response_model=dict)
async def get_opportunity(
    opportunity_id: str,
    db: AsyncSession = Depends(get_db),
    schema: SchemaCapabilities = Depends(get_schema),
):
    ref = decode(opportunity_id)
    opportunity = await resolve_opportunity(db, schema, ref)
    return opportunity.to_response()


@router.post("/{opportunity_id}/interest", response_model=dict, status_code=201)
async def express_interest(
    opportunity_id: str,
    body: Optional[InterestCreate] = None,
    db: AsyncSession = Depends(get_db),
):
    # a missing body behaves like an empty one
    interest = await submit_interest(db, opportunity_id, body or InterestCreate())
    return {
        "success": True,
        "interest": {
            "id": interest.id,
            "created_at": isoformat_utc(interest.created_at),
        },
    }
