"""
Admin-managed lookup tables (industry sectors, regions, business types) and
the flat system_config map.

Lookup rows are never deleted. SME records store sector/region/type as free
text, so switching is_active off only stops the value being offered for new
registrations.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional, Type

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from database import Base
from errors import ConflictError, NotFound, ValidationError
from models import BusinessType, IndustrySector, Region, SystemConfig
from utils.text import clean_text
from utils.time import isoformat_utc

logger = logging.getLogger(__name__)


class ReferenceDataRegistry:
    """list / create / update over one lookup table with a unique `name` and an `is_active` flag."""

    def __init__(self, model: Type[Base], label: str, fields: tuple[str, ...]):
        self.model = model
        self.label = label
        # Optional descriptive columns besides name/is_active
        self.fields = fields

    def to_response(self, obj: Any) -> dict[str, Any]:
        out: dict[str, Any] = {"id": obj.id, "name": obj.name}
        for field in self.fields:
            out[field] = getattr(obj, field)
        out["is_active"] = bool(obj.is_active)
        out["created_at"] = isoformat_utc(obj.created_at)
        out["updated_at"] = isoformat_utc(obj.updated_at)
        return out

    async def list_items(self, db: AsyncSession, include_inactive: bool = False) -> list[Any]:
        stmt = select(self.model).order_by(self.model.name.asc())
        if not include_inactive:
            stmt = stmt.where(self.model.is_active.is_(True))
        result = await db.execute(stmt)
        return list(result.scalars().all())

    async def create(self, db: AsyncSession, body: BaseModel) -> Any:
        name = clean_text(body.name)
        if not name:
            raise ValidationError("name is required")
        await self._ensure_name_free(db, name)
        now = datetime.now(timezone.utc)
        obj = self.model(
            name=name,
            is_active=True if body.is_active is None else body.is_active,
            created_at=now,
            updated_at=now,
            **{field: clean_text(getattr(body, field)) for field in self.fields},
        )
        db.add(obj)
        await self._flush(db, name)
        logger.info("Created %s %s (%s)", self.label, obj.id, name)
        return obj

    async def update(self, db: AsyncSession, item_id: int, body: BaseModel) -> Any:
        obj = await db.get(self.model, item_id)
        if obj is None:
            raise NotFound(f"{self.label} not found")
        if body.name is not None:
            name = clean_text(body.name)
            if not name:
                raise ValidationError("name cannot be empty")
            if name != obj.name:
                await self._ensure_name_free(db, name)
            obj.name = name
        for field in self.fields:
            value = getattr(body, field)
            if value is not None:
                setattr(obj, field, clean_text(value))
        if body.is_active is not None:
            obj.is_active = body.is_active
        obj.updated_at = datetime.now(timezone.utc)
        await self._flush(db, obj.name)
        logger.info("Updated %s %s", self.label, obj.id)
        return obj

    async def _ensure_name_free(self, db: AsyncSession, name: str) -> None:
        existing = await db.execute(select(self.model.id).where(self.model.name == name))
        if existing.first() is not None:
            raise ConflictError(f"{self.label} '{name}' already exists")

    async def _flush(self, db: AsyncSession, name: str) -> None:
        try:
            await db.flush()
        except IntegrityError as e:
            raise ConflictError(f"{self.label} '{name}' already exists") from e


industry_sectors = ReferenceDataRegistry(IndustrySector, "Industry sector", ("description", "chart_color"))
regions = ReferenceDataRegistry(Region, "Region", ("code", "capital"))
business_types = ReferenceDataRegistry(BusinessType, "Business type", ("description",))


def config_to_response(c: SystemConfig) -> dict[str, Any]:
    return {
        "key": c.key,
        "value": c.value,
        "updated_at": isoformat_utc(c.updated_at),
    }


async def list_config(db: AsyncSession) -> list[SystemConfig]:
    result = await db.execute(select(SystemConfig).order_by(SystemConfig.key.asc()))
    return list(result.scalars().all())


async def upsert_config(db: AsyncSession, key: Optional[str], value: Optional[str]) -> SystemConfig:
    key = clean_text(key)
    if not key:
        raise ValidationError("key is required")
    dialect = db.bind.dialect.name
    insert = postgresql.insert if dialect == "postgresql" else sqlite.insert
    now = datetime.now(timezone.utc)
    stmt = insert(SystemConfig).values(key=key, value=value, updated_at=now)
    stmt = stmt.on_conflict_do_update(
        index_elements=["key"],
        set_={"value": stmt.excluded.value, "updated_at": stmt.excluded.updated_at},
    )
    await db.execute(stmt)
    result = await db.execute(
        select(SystemConfig).where(SystemConfig.key == key).execution_options(populate_existing=True)
    )
    logger.info("Upserted system config %s", key)
    return result.scalar_one()
