from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db
from schemas.opportunity import AdminOpportunityCreate
from services.admin_opportunities import (
    admin_opportunity_to_response,
    create_admin_opportunity,
    list_admin_opportunities,
    parse_admin_update,
    update_admin_opportunity,
)
from services.interests import DEFAULT_PAGE_SIZE, delete_interest, list_interests
from services.schema_probe import SchemaCapabilities, get_schema

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.get("/investment-opportunities", response_model=dict)
async def get_admin_opportunities(
    include_inactive: bool = Query(False, alias="includeInactive"),
    db: AsyncSession = Depends(get_db),
):
    items = await list_admin_opportunities(db, include_inactive=include_inactive)
    return {"items": [admin_opportunity_to_response(o) for o in items]}


@router.post("/investment-opportunities", response_model=dict, status_code=201)
async def post_admin_opportunity(body: AdminOpportunityCreate, db: AsyncSession = Depends(get_db)):
    opp = await create_admin_opportunity(db, body)
    return {"item": admin_opportunity_to_response(opp)}


@router.put("/investment-opportunities/{opportunity_id}", response_model=dict)
async def put_admin_opportunity(
    opportunity_id: int,
    payload: Any = Body(None),
    db: AsyncSession = Depends(get_db),
):
    # Raw body: unknown keys must be rejected, not dropped by model parsing
    update = parse_admin_update(payload)
    opp = await update_admin_opportunity(db, opportunity_id, update)
    return {"item": admin_opportunity_to_response(opp)}


@router.get("/investment-interests", response_model=dict)
async def get_investment_interests(
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=0),
    offset: int = Query(0, ge=0),
    status: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
    schema: SchemaCapabilities = Depends(get_schema),
):
    items = await list_interests(db, schema, limit=limit, offset=offset, status=status)
    return {"items": items}


@router.delete("/investment-interests/{interest_id}", response_model=dict)
async def remove_investment_interest(interest_id: int, db: AsyncSession = Depends(get_db)):
    await delete_interest(db, interest_id)
    return {"success": True}
