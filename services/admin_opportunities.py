"""Admin-side management of curated investment opportunities."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from errors import NotFound, ValidationError
from models import AdminOpportunity
from schemas.opportunity import ADMIN_OPPORTUNITY_FIELDS, AdminOpportunityCreate, AdminOpportunityUpdate
from services.opportunities import MSG_OPPORTUNITY_NOT_FOUND
from utils.case import field_aliases
from utils.text import clean_text
from utils.time import isoformat_utc

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("title", "description")
_KEY_ALIASES = field_aliases(ADMIN_OPPORTUNITY_FIELDS)


def admin_opportunity_to_response(o: AdminOpportunity) -> dict[str, Any]:
    return {
        "id": o.id,
        "title": o.title,
        "description": o.description,
        "sector": o.sector,
        "sub_industry": o.sub_industry,
        "country": o.country,
        "stage": o.stage,
        "investment_range": o.investment_range,
        "requirements": o.requirements,
        "contact": o.contact,
        "image_key": o.image_key,
        "is_active": bool(o.is_active),
        "created_at": isoformat_utc(o.created_at),
        "updated_at": isoformat_utc(o.updated_at),
    }


async def list_admin_opportunities(db: AsyncSession, include_inactive: bool = False) -> list[AdminOpportunity]:
    stmt = select(AdminOpportunity).order_by(AdminOpportunity.created_at.desc())
    if not include_inactive:
        stmt = stmt.where(AdminOpportunity.is_active.is_(True))
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def create_admin_opportunity(db: AsyncSession, body: AdminOpportunityCreate) -> AdminOpportunity:
    title = clean_text(body.title)
    description = clean_text(body.description)
    if not title or not description:
        raise ValidationError("title and description are required")
    now = datetime.now(timezone.utc)
    opp = AdminOpportunity(
        title=title,
        description=description,
        sector=clean_text(body.sector),
        sub_industry=clean_text(body.sub_industry),
        country=clean_text(body.country),
        stage=clean_text(body.stage),
        investment_range=clean_text(body.investment_range),
        requirements=clean_text(body.requirements),
        contact=clean_text(body.contact),
        image_key=clean_text(body.image_key),
        is_active=True if body.is_active is None else body.is_active,
        created_at=now,
        updated_at=now,
    )
    db.add(opp)
    await db.flush()
    logger.info("Created admin opportunity %s (%s)", opp.id, title)
    return opp


def parse_admin_update(payload: Any) -> AdminOpportunityUpdate:
    """
    Validate a raw partial-update body against the allow-list of mutable columns.
    Keys must be a column name or its exact camelCase form; anything else is
    rejected before touching the database.
    """
    if not isinstance(payload, dict) or not payload:
        raise ValidationError("No fields provided")
    data: dict[str, Any] = {}
    for key, value in payload.items():
        field = _KEY_ALIASES.get(key)
        if field is None:
            raise ValidationError(f"Field not allowed: {key}")
        data[field] = value
    try:
        update = AdminOpportunityUpdate(**data)
    except PydanticValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(p) for p in err["loc"])
        raise ValidationError(f"{field}: {err['msg']}") from e
    for field in _REQUIRED_FIELDS:
        if field in update.model_fields_set and not clean_text(getattr(update, field)):
            raise ValidationError(f"{field} cannot be empty")
    return update


async def update_admin_opportunity(db: AsyncSession, opportunity_id: int, update: AdminOpportunityUpdate) -> AdminOpportunity:
    opp = await db.get(AdminOpportunity, opportunity_id)
    if opp is None:
        raise NotFound(MSG_OPPORTUNITY_NOT_FOUND)
    for field in update.model_fields_set:
        value = getattr(update, field)
        if field == "is_active":
            # explicit null leaves the flag alone
            if value is not None:
                opp.is_active = value
        else:
            setattr(opp, field, clean_text(value))
    opp.updated_at = datetime.now(timezone.utc)
    await db.flush()
    logger.info("Updated admin opportunity %s: %s", opp.id, ", ".join(sorted(update.model_fields_set)))
    return opp
