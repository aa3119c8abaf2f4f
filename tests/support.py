"""Shared fixtures: a throwaway in-memory database per test."""
import unittest
from datetime import datetime, timedelta, timezone

from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from database import Base
from models import AdminOpportunity, Sme, SmeOpportunity
from services.schema_probe import resolve_capabilities

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def memory_engine():
    return create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )


class DatabaseTestCase(unittest.IsolatedAsyncioTestCase):
    """Creates the full schema; subclasses use self.db and self.schema."""

    create_schema = True

    async def asyncSetUp(self):
        self.engine = memory_engine()
        async with self.engine.begin() as conn:
            if self.create_schema:
                await conn.run_sync(Base.metadata.create_all)
            await self.prepare(conn)
            self.schema = await resolve_capabilities(conn)
        self.db = async_sessionmaker(self.engine, expire_on_commit=False)()

    async def prepare(self, conn):
        """Hook for extra DDL before capabilities are resolved."""

    async def asyncTearDown(self):
        await self.db.close()
        await self.engine.dispose()

    async def add_admin(self, title="Solar Co-op", days=0, **fields):
        opp = AdminOpportunity(
            title=title,
            description=fields.pop("description", f"{title} description"),
            created_at=BASE_TIME + timedelta(days=days),
            updated_at=BASE_TIME + timedelta(days=days),
            **fields,
        )
        self.db.add(opp)
        await self.db.flush()
        return opp

    async def add_sme(self, email="owner@example.com", **fields):
        sme = Sme(business_name=fields.pop("business_name", "Kalahari Foods"), email=email, **fields)
        self.db.add(sme)
        await self.db.flush()
        return sme

    async def add_sme_opportunity(self, sme, title="Cold storage", days=0, **fields):
        opp = SmeOpportunity(
            sme_id=sme.id,
            title=title,
            description=fields.pop("description", f"{title} description"),
            funding_required=fields.pop("funding_required", 2_500_000),
            status=fields.pop("status", "open"),
            created_at=BASE_TIME + timedelta(days=days),
            updated_at=BASE_TIME + timedelta(days=days),
            **fields,
        )
        self.db.add(opp)
        await self.db.flush()
        return opp
