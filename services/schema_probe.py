"""
Runtime schema probing.

Deployments of the platform database drifted apart over time: the SME key on
investment tables is `sme_id` in some and `business_id` in others, and the
legacy opportunities table may key rows on `opportunity_id`. The physical
names are resolved once at startup into SchemaCapabilities; callers treat a
None column as "feature unavailable" and degrade instead of failing.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from fastapi import Request
from sqlalchemy import Column, Index, MetaData, Table, inspect
from sqlalchemy.ext.asyncio import AsyncConnection

logger = logging.getLogger(__name__)

SME_OPPORTUNITIES_TABLE = "investment_opportunities"
INVESTMENT_DEALS_TABLE = "investment_deals"

OPPORTUNITY_ID_CANDIDATES = ("id", "opportunity_id")
SME_KEY_CANDIDATES = ("sme_id", "business_id")


async def pick_existing_column(
    conn: AsyncConnection, table_name: str, candidates: Iterable[str]
) -> Optional[str]:
    """Return the first candidate column present on table_name, or None (also when the table is missing)."""

    def _column_names(sync_conn) -> set[str]:
        insp = inspect(sync_conn)
        if not insp.has_table(table_name):
            return set()
        return {c["name"] for c in insp.get_columns(table_name)}

    present = await conn.run_sync(_column_names)
    for name in candidates:
        if name in present:
            return name
    return None


@dataclass(frozen=True)
class SchemaCapabilities:
    sme_opportunity_id: Optional[str] = None
    sme_opportunity_owner: Optional[str] = None
    deal_owner: Optional[str] = None

    @property
    def supports_sme_opportunities(self) -> bool:
        return self.sme_opportunity_id is not None and self.sme_opportunity_owner is not None


async def resolve_capabilities(conn: AsyncConnection) -> SchemaCapabilities:
    caps = SchemaCapabilities(
        sme_opportunity_id=await pick_existing_column(conn, SME_OPPORTUNITIES_TABLE, OPPORTUNITY_ID_CANDIDATES),
        sme_opportunity_owner=await pick_existing_column(conn, SME_OPPORTUNITIES_TABLE, SME_KEY_CANDIDATES),
        deal_owner=await pick_existing_column(conn, INVESTMENT_DEALS_TABLE, SME_KEY_CANDIDATES),
    )
    logger.info(
        "Schema capabilities: %s.id=%s %s.owner=%s %s.owner=%s",
        SME_OPPORTUNITIES_TABLE,
        caps.sme_opportunity_id,
        SME_OPPORTUNITIES_TABLE,
        caps.sme_opportunity_owner,
        INVESTMENT_DEALS_TABLE,
        caps.deal_owner,
    )
    return caps


async def ensure_indexes(conn: AsyncConnection, caps: SchemaCapabilities) -> None:
    """Index the SME key of investment_deals under whichever name this deployment uses."""
    if caps.deal_owner is None:
        logger.info("No SME key column on %s; skipping index", INVESTMENT_DEALS_TABLE)
        return
    deals = Table(INVESTMENT_DEALS_TABLE, MetaData(), Column(caps.deal_owner))
    index = Index("idx_investment_deals_business_fk", deals.c[caps.deal_owner])
    await conn.run_sync(lambda sync_conn: index.create(sync_conn, checkfirst=True))


def get_schema(request: Request) -> SchemaCapabilities:
    """FastAPI dependency: capabilities resolved by the application lifespan."""
    return request.app.state.schema
