"""
Expressions of interest in an opportunity.

(opportunity_source, opportunity_id) is a soft reference: nothing checks that
the opportunity exists when the interest is recorded, and readers must cope
with rows whose opportunity has since gone away.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy import String, and_, cast, func, literal, select
from sqlalchemy.ext.asyncio import AsyncSession

from errors import NotFound, ValidationError
from models import AdminOpportunity, InvestmentInterest
from schemas.interest import InterestCreate
from services.opportunity_ref import SOURCE_ADMIN, SOURCE_SME, decode
from services.opportunities import sme_opportunities_table
from services.schema_probe import SchemaCapabilities
from utils.text import clean_text
from utils.time import isoformat_utc

logger = logging.getLogger(__name__)

DEFAULT_INTEREST_STATUS = "new"
DEFAULT_PAGE_SIZE = 50


async def submit_interest(db: AsyncSession, raw_ref: str, body: InterestCreate) -> InvestmentInterest:
    """Record interest in the opportunity named by raw_ref ("admin-3", "sme-9" or legacy "9")."""
    ref = decode(raw_ref)
    name = clean_text(body.name)
    email = clean_text(body.email)
    if not name and not email:
        raise ValidationError("Please provide at least your name or email")

    interest = InvestmentInterest(
        opportunity_source=ref.source,
        opportunity_id=ref.id,
        name=name,
        email=email,
        phone=clean_text(body.phone),
        message=clean_text(body.message),
        status=DEFAULT_INTEREST_STATUS,
        created_at=datetime.now(timezone.utc),
    )
    db.add(interest)
    await db.flush()
    logger.info("Recorded interest %s for %s", interest.id, ref)
    return interest


async def list_interests(
    db: AsyncSession,
    schema: SchemaCapabilities,
    limit: int = DEFAULT_PAGE_SIZE,
    offset: int = 0,
    status: Optional[str] = None,
) -> list[dict[str, Any]]:
    """
    Newest interests first, each with the title of the opportunity it points at.
    Dangling references fall back to the "<source>-<id>" reference string.
    """
    ii = InvestmentInterest
    title_sources = [AdminOpportunity.title]
    stmt = select(ii).outerjoin(
        AdminOpportunity,
        and_(ii.opportunity_source == SOURCE_ADMIN, ii.opportunity_id == AdminOpportunity.id),
    )
    if schema.sme_opportunity_id is not None:
        io = sme_opportunities_table(schema).alias("io")
        stmt = stmt.outerjoin(
            io,
            and_(ii.opportunity_source == SOURCE_SME, ii.opportunity_id == io.c[schema.sme_opportunity_id]),
        )
        title_sources.append(io.c.title)
    fallback_title = ii.opportunity_source + literal("-") + cast(ii.opportunity_id, String)
    title = func.coalesce(*title_sources, fallback_title).label("opportunity_title")
    stmt = stmt.add_columns(title)

    if status:
        stmt = stmt.where(ii.status == status)
    stmt = stmt.order_by(ii.created_at.desc(), ii.id.desc()).limit(limit).offset(offset)
    result = await db.execute(stmt)
    return [interest_to_response(interest, opportunity_title) for interest, opportunity_title in result.all()]


def interest_to_response(i: InvestmentInterest, opportunity_title: Optional[str] = None) -> dict[str, Any]:
    out = {
        "id": i.id,
        "opportunity_source": i.opportunity_source,
        "opportunity_id": i.opportunity_id,
        "name": i.name,
        "email": i.email,
        "phone": i.phone,
        "message": i.message,
        "status": i.status,
        "created_at": isoformat_utc(i.created_at),
    }
    if opportunity_title is not None:
        out["opportunity_title"] = opportunity_title
    return out


async def delete_interest(db: AsyncSession, interest_id: int) -> None:
    interest = await db.get(InvestmentInterest, interest_id)
    if interest is None:
        raise NotFound("Interest not found")
    await db.delete(interest)
    await db.flush()
    logger.info("Deleted interest %s", interest_id)
