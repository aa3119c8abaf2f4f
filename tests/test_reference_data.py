"""Lookup-table registry (sectors, regions, business types) and system config upserts."""
import unittest

from errors import ConflictError, NotFound, ValidationError
from schemas.reference_data import BusinessTypeIn, IndustrySectorIn, RegionIn
from services.reference_data import business_types, industry_sectors, list_config, regions, upsert_config
from tests.support import DatabaseTestCase


class TestRegistryCreate(DatabaseTestCase):
    async def test_blank_name_rejected(self):
        for name in (None, "", "  "):
            with self.subTest(name=name):
                with self.assertRaises(ValidationError):
                    await industry_sectors.create(self.db, IndustrySectorIn(name=name))
        self.assertEqual(await industry_sectors.list_items(self.db, include_inactive=True), [])

    async def test_name_trimmed_and_active_by_default(self):
        sector = await industry_sectors.create(self.db, IndustrySectorIn(name="  Fintech ", chart_color="#3f51b5"))
        body = industry_sectors.to_response(sector)
        self.assertEqual(body["name"], "Fintech")
        self.assertTrue(body["is_active"])
        self.assertEqual(body["chart_color"], "#3f51b5")
        self.assertIsNone(body["description"])
        self.assertIsInstance(body["id"], int)

    async def test_duplicate_name_conflicts(self):
        await regions.create(self.db, RegionIn(name="Khomas", code="KH"))
        with self.assertRaises(ConflictError):
            await regions.create(self.db, RegionIn(name=" Khomas "))

    async def test_explicitly_inactive(self):
        bt = await business_types.create(self.db, BusinessTypeIn(name="Cooperative", is_active=False))
        self.assertFalse(bt.is_active)


class TestRegistryList(DatabaseTestCase):
    async def test_ordered_by_name_and_filtered(self):
        await regions.create(self.db, RegionIn(name="Zambezi"))
        await regions.create(self.db, RegionIn(name="Erongo"))
        await regions.create(self.db, RegionIn(name="Karas", is_active=False))

        active = await regions.list_items(self.db)
        self.assertEqual([r.name for r in active], ["Erongo", "Zambezi"])
        everything = await regions.list_items(self.db, include_inactive=True)
        self.assertEqual([r.name for r in everything], ["Erongo", "Karas", "Zambezi"])


class TestRegistryUpdate(DatabaseTestCase):
    async def test_unknown_id(self):
        with self.assertRaises(NotFound):
            await industry_sectors.update(self.db, 999, IndustrySectorIn(name="Mining"))

    async def test_partial_update_leaves_other_fields(self):
        sector = await industry_sectors.create(
            self.db, IndustrySectorIn(name="Mining", description="Extractives", chart_color="#795548")
        )
        updated = await industry_sectors.update(self.db, sector.id, IndustrySectorIn(is_active=False))
        self.assertFalse(updated.is_active)
        self.assertEqual(updated.name, "Mining")
        self.assertEqual(updated.description, "Extractives")
        self.assertEqual(updated.chart_color, "#795548")

        renamed = await industry_sectors.update(self.db, sector.id, IndustrySectorIn(name=" Mining & Quarrying "))
        self.assertEqual(renamed.name, "Mining & Quarrying")
        self.assertFalse(renamed.is_active)

    async def test_rename_to_existing_conflicts(self):
        await business_types.create(self.db, BusinessTypeIn(name="Close Corporation"))
        other = await business_types.create(self.db, BusinessTypeIn(name="Trust"))
        with self.assertRaises(ConflictError):
            await business_types.update(self.db, other.id, BusinessTypeIn(name="Close Corporation"))

    async def test_blank_rename_rejected(self):
        region = await regions.create(self.db, RegionIn(name="Oshana"))
        with self.assertRaises(ValidationError):
            await regions.update(self.db, region.id, RegionIn(name="   "))


class TestSystemConfig(DatabaseTestCase):
    async def test_upsert_inserts_then_overwrites(self):
        await upsert_config(self.db, "site_name", "SME Platform")
        await upsert_config(self.db, "contact_email", "info@example.com")
        item = await upsert_config(self.db, " site_name ", "SME Hub")
        self.assertEqual((item.key, item.value), ("site_name", "SME Hub"))

        config = await list_config(self.db)
        self.assertEqual([(c.key, c.value) for c in config], [("contact_email", "info@example.com"), ("site_name", "SME Hub")])

    async def test_key_required(self):
        with self.assertRaises(ValidationError):
            await upsert_config(self.db, "  ", "x")


if __name__ == "__main__":
    unittest.main()
