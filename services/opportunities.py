"""
Public view of investment opportunities.

Admin-curated rows and legacy SME rows are normalized into one OpportunityOut
shape. SME rows take sector/country/contact from their owning SME and are
read through the column names probed at startup.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Mapping

from sqlalchemy import DateTime, Integer, Numeric, String, Text, column, insert, select, table
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.expression import TableClause

from errors import DependencyError, NotFound, ValidationError
from models import AdminOpportunity, Sme
from schemas.opportunity import OpportunityOut, SmeOpportunityCreate
from services.opportunity_ref import SOURCE_ADMIN, SOURCE_SME, OpportunityRef, encode
from services.schema_probe import SME_OPPORTUNITIES_TABLE, SchemaCapabilities
from utils.text import clean_text
from utils.time import isoformat_utc

logger = logging.getLogger(__name__)

DEFAULT_SECTOR = "Other"
DEFAULT_COUNTRY = "Namibia"
DEFAULT_STAGE = "Growth"
DEFAULT_REQUIREMENTS = "Contact for details"
SME_OPEN_STATUS = "open"

MSG_OPPORTUNITY_NOT_FOUND = "Opportunity not found"


def format_investment_range(amount: Any) -> str:
    """2500000 -> 'NAD 2.5M'. Non-numeric amounts render as an empty string."""
    if amount is None or isinstance(amount, bool):
        return ""
    try:
        millions = Decimal(str(amount)) / Decimal(1_000_000)
        # halves round away from zero: 2250000 -> 2.3
        millions = millions.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return ""
    if not millions.is_finite():
        return ""
    return f"NAD {millions}M"


def sme_stage(status: str | None) -> str:
    # Display-only mapping; SME rows carry a lifecycle status, not a stage
    return DEFAULT_STAGE if status == SME_OPEN_STATUS else "Mature"


def normalize_admin(opp: AdminOpportunity, include_status: bool = False) -> OpportunityOut:
    fields: dict[str, Any] = {
        "id": encode(SOURCE_ADMIN, opp.id),
        "title": opp.title,
        "description": opp.description,
        "sector": opp.sector or DEFAULT_SECTOR,
        "sub_industry": opp.sub_industry or "",
        "country": opp.country or DEFAULT_COUNTRY,
        "stage": opp.stage or DEFAULT_STAGE,
        "investment_range": opp.investment_range or "",
        "requirements": opp.requirements or DEFAULT_REQUIREMENTS,
        "contact": opp.contact or "",
        "image_key": opp.image_key or None,
        "source": SOURCE_ADMIN,
        "created_at": opp.created_at,
    }
    if include_status:
        fields["is_active"] = bool(opp.is_active)
    return OpportunityOut(**fields)


def normalize_sme(row: Mapping[str, Any]) -> OpportunityOut:
    return OpportunityOut(
        id=encode(SOURCE_SME, row["id"]),
        title=row["title"],
        description=row["description"],
        sector=row["sector"] or DEFAULT_SECTOR,
        sub_industry="",
        country=row["country"] or DEFAULT_COUNTRY,
        stage=sme_stage(row["status"]),
        investment_range=format_investment_range(row["funding_required"]),
        requirements=row["requirements"] or DEFAULT_REQUIREMENTS,
        contact=row["contact"] or "",
        image_key=None,
        source=SOURCE_SME,
        created_at=row["created_at"],
    )


def sme_opportunities_table(schema: SchemaCapabilities) -> TableClause:
    """Lightweight table for investment_opportunities using this deployment's column names."""
    keys = [
        column(name, Integer())
        for name in (schema.sme_opportunity_id, schema.sme_opportunity_owner)
        if name is not None
    ]
    return table(
        SME_OPPORTUNITIES_TABLE,
        *keys,
        column("title", String()),
        column("description", Text()),
        column("funding_required", Numeric(15, 2)),
        column("equity_offered", Numeric(5, 2)),
        column("use_of_funds", Text()),
        column("expected_roi", Numeric(5, 2)),
        column("investment_timeline", String()),
        column("status", String()),
        column("created_at", DateTime(timezone=True)),
        column("updated_at", DateTime(timezone=True)),
    )


def _sme_select(schema: SchemaCapabilities):
    io = sme_opportunities_table(schema)
    smes = Sme.__table__
    stmt = select(
        io.c[schema.sme_opportunity_id].label("id"),
        io.c.title,
        io.c.description,
        io.c.funding_required,
        io.c.status,
        io.c.use_of_funds.label("requirements"),
        io.c.created_at,
        smes.c.industry_sector.label("sector"),
        smes.c.region.label("country"),
        smes.c.email.label("contact"),
    ).select_from(io.join(smes, smes.c.id == io.c[schema.sme_opportunity_owner]))
    return io, stmt


async def list_opportunities(
    db: AsyncSession, schema: SchemaCapabilities, include_sme: bool = False
) -> list[OpportunityOut]:
    """Active admin opportunities newest first, then (optionally) open SME opportunities newest first."""
    result = await db.execute(
        select(AdminOpportunity)
        .where(AdminOpportunity.is_active.is_(True))
        .order_by(AdminOpportunity.created_at.desc())
    )
    items = [normalize_admin(o) for o in result.scalars().all()]
    if not include_sme:
        return items
    if not schema.supports_sme_opportunities:
        logger.debug("SME opportunities requested but not available on this schema")
        return items

    io, stmt = _sme_select(schema)
    rows = await db.execute(
        stmt.where(io.c.status == SME_OPEN_STATUS).order_by(io.c.created_at.desc())
    )
    items.extend(normalize_sme(r) for r in rows.mappings().all())
    return items


async def resolve_opportunity(
    db: AsyncSession, schema: SchemaCapabilities, ref: OpportunityRef
) -> OpportunityOut:
    if ref.source == SOURCE_ADMIN:
        opp = await db.get(AdminOpportunity, ref.id)
        if opp is None:
            raise NotFound(MSG_OPPORTUNITY_NOT_FOUND)
        return normalize_admin(opp, include_status=True)

    if not schema.supports_sme_opportunities:
        raise NotFound(MSG_OPPORTUNITY_NOT_FOUND)
    io, stmt = _sme_select(schema)
    result = await db.execute(stmt.where(io.c[schema.sme_opportunity_id] == ref.id))
    row = result.mappings().first()
    if row is None:
        raise NotFound(MSG_OPPORTUNITY_NOT_FOUND)
    return normalize_sme(row)


async def create_sme_opportunity(
    db: AsyncSession, schema: SchemaCapabilities, body: SmeOpportunityCreate
) -> dict[str, Any]:
    """Insert a legacy SME opportunity with status 'open'."""
    title = clean_text(body.title)
    description = clean_text(body.description)
    missing = [
        name
        for name, value in (
            ("sme_id", body.sme_id),
            ("title", title),
            ("description", description),
            ("funding_required", body.funding_required),
        )
        if value is None
    ]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")
    if not schema.supports_sme_opportunities:
        raise DependencyError("SME opportunities are not available on this database")

    io = sme_opportunities_table(schema)
    now = datetime.now(timezone.utc)
    stmt = (
        insert(io)
        .values({
            schema.sme_opportunity_owner: body.sme_id,
            "title": title,
            "description": description,
            "funding_required": body.funding_required,
            "equity_offered": body.equity_offered,
            "use_of_funds": clean_text(body.use_of_funds),
            "expected_roi": body.expected_roi,
            "investment_timeline": clean_text(body.investment_timeline),
            "status": SME_OPEN_STATUS,
            "created_at": now,
            "updated_at": now,
        })
        .returning(*io.c)
    )
    row = (await db.execute(stmt)).mappings().one()
    logger.info("SME %s created opportunity %s", body.sme_id, row[schema.sme_opportunity_id])
    return _sme_row_to_response(row, schema)


def _sme_row_to_response(row: Mapping[str, Any], schema: SchemaCapabilities) -> dict[str, Any]:
    return {
        "id": row[schema.sme_opportunity_id],
        "reference": encode(SOURCE_SME, row[schema.sme_opportunity_id]),
        "sme_id": row[schema.sme_opportunity_owner],
        "title": row["title"],
        "description": row["description"],
        "funding_required": row["funding_required"],
        "equity_offered": row["equity_offered"],
        "use_of_funds": row["use_of_funds"],
        "expected_roi": row["expected_roi"],
        "investment_timeline": row["investment_timeline"],
        "status": row["status"],
        "created_at": isoformat_utc(row["created_at"]),
        "updated_at": isoformat_utc(row["updated_at"]),
    }
