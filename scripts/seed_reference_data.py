"""
Seed the admin lookup tables and one sample admin opportunity.
Run: python -m scripts.seed_reference_data (from the project root, with DB running).
"""
import asyncio
import os
import sys

# Add parent so we can import from the project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import select

from database import AsyncSessionLocal, init_db
from errors import ConflictError
from models import AdminOpportunity
from schemas.opportunity import AdminOpportunityCreate
from schemas.reference_data import BusinessTypeIn, IndustrySectorIn, RegionIn
from services.admin_opportunities import create_admin_opportunity
from services.reference_data import business_types, industry_sectors, regions


SECTORS = [
    {"name": "Agriculture", "chart_color": "#4caf50"},
    {"name": "Fintech", "chart_color": "#3f51b5"},
    {"name": "Manufacturing", "chart_color": "#9e9e9e"},
    {"name": "Mining", "chart_color": "#795548"},
    {"name": "Renewable Energy", "chart_color": "#ffc107"},
    {"name": "Retail", "chart_color": "#e91e63"},
    {"name": "Tourism", "chart_color": "#00bcd4"},
]

REGIONS = [
    {"name": "Erongo", "code": "ER", "capital": "Swakopmund"},
    {"name": "Hardap", "code": "HA", "capital": "Mariental"},
    {"name": "Karas", "code": "KA", "capital": "Keetmanshoop"},
    {"name": "Kavango East", "code": "KE", "capital": "Rundu"},
    {"name": "Khomas", "code": "KH", "capital": "Windhoek"},
    {"name": "Oshana", "code": "ON", "capital": "Oshakati"},
    {"name": "Otjozondjupa", "code": "OD", "capital": "Otjiwarongo"},
    {"name": "Zambezi", "code": "CA", "capital": "Katima Mulilo"},
]

BUSINESS_TYPES = [
    {"name": "Sole Proprietorship"},
    {"name": "Close Corporation"},
    {"name": "Private Company", "description": "(Pty) Ltd"},
    {"name": "Cooperative"},
]

SAMPLE_OPPORTUNITY = {
    "title": "Solar Co-op Expansion",
    "description": "Community solar cooperative raising capital for two new mini-grids.",
    "sector": "Renewable Energy",
    "country": "Namibia",
    "stage": "Growth",
    "investment_range": "NAD 1M - 3M",
    "requirements": "Minimum ticket NAD 250k",
}


async def _seed_registry(session, registry, schema, rows):
    for row in rows:
        try:
            await registry.create(session, schema(**row))
            print(f"Seeded {registry.label.lower()}: {row['name']}")
        except ConflictError:
            print(f"{registry.label} {row['name']} already exists, skipping")


async def seed():
    await init_db()
    async with AsyncSessionLocal() as session:
        await _seed_registry(session, industry_sectors, IndustrySectorIn, SECTORS)
        await _seed_registry(session, regions, RegionIn, REGIONS)
        await _seed_registry(session, business_types, BusinessTypeIn, BUSINESS_TYPES)

        existing = await session.execute(
            select(AdminOpportunity.id).where(AdminOpportunity.title == SAMPLE_OPPORTUNITY["title"])
        )
        if existing.first():
            print("Sample opportunity already exists, skipping")
        else:
            opp = await create_admin_opportunity(session, AdminOpportunityCreate(**SAMPLE_OPPORTUNITY))
            print(f"Seeded opportunity: admin-{opp.id}")
        await session.commit()
    print("Seed complete.")


if __name__ == "__main__":
    asyncio.run(seed())
