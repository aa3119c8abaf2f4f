from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db
from schemas.reference_data import BusinessTypeIn, ConfigUpsert, IndustrySectorIn, RegionIn
from services.reference_data import (
    business_types,
    config_to_response,
    industry_sectors,
    list_config,
    regions,
    upsert_config,
)

router = APIRouter(prefix="/api/admin", tags=["reference-data"])


# Industry sectors

@router.get("/industry-sectors", response_model=dict)
async def list_industry_sectors(
    include_inactive: bool = Query(False, alias="includeInactive"),
    db: AsyncSession = Depends(get_db),
):
    items = await industry_sectors.list_items(db, include_inactive=include_inactive)
    return {"sectors": [industry_sectors.to_response(s) for s in items]}


@router.post("/industry-sectors", response_model=dict, status_code=201)
async def create_industry_sector(body: IndustrySectorIn, db: AsyncSession = Depends(get_db)):
    sector = await industry_sectors.create(db, body)
    return {"sector": industry_sectors.to_response(sector)}


@router.put("/industry-sectors/{sector_id}", response_model=dict)
async def update_industry_sector(sector_id: int, body: IndustrySectorIn, db: AsyncSession = Depends(get_db)):
    sector = await industry_sectors.update(db, sector_id, body)
    return {"sector": industry_sectors.to_response(sector)}


# Regions

@router.get("/regions", response_model=dict)
async def list_regions(
    include_inactive: bool = Query(False, alias="includeInactive"),
    db: AsyncSession = Depends(get_db),
):
    items = await regions.list_items(db, include_inactive=include_inactive)
    return {"regions": [regions.to_response(r) for r in items]}


@router.post("/regions", response_model=dict, status_code=201)
async def create_region(body: RegionIn, db: AsyncSession = Depends(get_db)):
    region = await regions.create(db, body)
    return {"region": regions.to_response(region)}


@router.put("/regions/{region_id}", response_model=dict)
async def update_region(region_id: int, body: RegionIn, db: AsyncSession = Depends(get_db)):
    region = await regions.update(db, region_id, body)
    return {"region": regions.to_response(region)}


# Business types

@router.get("/business-types", response_model=dict)
async def list_business_types(
    include_inactive: bool = Query(False, alias="includeInactive"),
    db: AsyncSession = Depends(get_db),
):
    items = await business_types.list_items(db, include_inactive=include_inactive)
    return {"businessTypes": [business_types.to_response(t) for t in items]}


@router.post("/business-types", response_model=dict, status_code=201)
async def create_business_type(body: BusinessTypeIn, db: AsyncSession = Depends(get_db)):
    business_type = await business_types.create(db, body)
    return {"businessType": business_types.to_response(business_type)}


@router.put("/business-types/{type_id}", response_model=dict)
async def update_business_type(type_id: int, body: BusinessTypeIn, db: AsyncSession = Depends(get_db)):
    business_type = await business_types.update(db, type_id, body)
    return {"businessType": business_types.to_response(business_type)}


# System config (upsert only, no delete)

@router.get("/system-config", response_model=dict)
async def get_system_config(db: AsyncSession = Depends(get_db)):
    items = await list_config(db)
    return {"config": [config_to_response(c) for c in items]}


@router.put("/system-config", response_model=dict)
async def put_system_config(body: ConfigUpsert, db: AsyncSession = Depends(get_db)):
    item = await upsert_config(db, body.key, body.value)
    return {"item": config_to_response(item)}
