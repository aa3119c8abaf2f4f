"""Admin opportunity create/update, including the update allow-list."""
import unittest

from errors import NotFound, ValidationError
from schemas.opportunity import AdminOpportunityCreate
from services.admin_opportunities import (
    admin_opportunity_to_response,
    create_admin_opportunity,
    list_admin_opportunities,
    parse_admin_update,
    update_admin_opportunity,
)
from tests.support import DatabaseTestCase


class TestParseAdminUpdate(unittest.TestCase):
    def test_unknown_field_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            parse_admin_update({"title": "ok", "owner_id": 3})
        self.assertEqual(ctx.exception.message, "Field not allowed: owner_id")

    def test_sql_looking_key_rejected(self):
        with self.assertRaises(ValidationError):
            parse_admin_update({"title = 'x'; --": "boom"})

    def test_empty_body_rejected(self):
        for payload in ({}, None, [], "title"):
            with self.subTest(payload=payload):
                with self.assertRaises(ValidationError):
                    parse_admin_update(payload)

    def test_camel_case_keys_accepted(self):
        update = parse_admin_update({"subIndustry": "Solar", "isActive": False})
        self.assertEqual(update.model_fields_set, {"sub_industry", "is_active"})
        self.assertFalse(update.is_active)

    def test_other_key_spellings_rejected(self):
        for key in ("Title", "SubIndustry", "IS_ACTIVE", "sub-industry"):
            with self.subTest(key=key):
                with self.assertRaises(ValidationError) as ctx:
                    parse_admin_update({key: "x"})
                self.assertEqual(ctx.exception.message, f"Field not allowed: {key}")

    def test_is_active_must_be_boolean(self):
        with self.assertRaises(ValidationError):
            parse_admin_update({"is_active": "nope"})

    def test_required_fields_cannot_be_blanked(self):
        with self.assertRaises(ValidationError):
            parse_admin_update({"title": "  "})


class TestAdminOpportunityWrites(DatabaseTestCase):
    async def test_create_requires_title_and_description(self):
        with self.assertRaises(ValidationError):
            await create_admin_opportunity(self.db, AdminOpportunityCreate(title="Solar Co-op", description=" "))

    async def test_create_defaults_active_and_trims(self):
        opp = await create_admin_opportunity(
            self.db, AdminOpportunityCreate(title=" Solar Co-op ", description="Mini-grids", sector="  ")
        )
        body = admin_opportunity_to_response(opp)
        self.assertEqual(body["title"], "Solar Co-op")
        self.assertTrue(body["is_active"])
        self.assertIsNone(body["sector"])

    async def test_update_and_deactivate(self):
        opp = await create_admin_opportunity(self.db, AdminOpportunityCreate(title="Solar Co-op", description="d"))
        updated = await update_admin_opportunity(
            self.db, opp.id, parse_admin_update({"stage": " Seed ", "is_active": False})
        )
        self.assertEqual(updated.stage, "Seed")
        self.assertFalse(updated.is_active)
        self.assertEqual(updated.title, "Solar Co-op")
        self.assertEqual(await list_admin_opportunities(self.db), [])
        self.assertEqual(len(await list_admin_opportunities(self.db, include_inactive=True)), 1)

    async def test_update_unknown_id(self):
        with self.assertRaises(NotFound):
            await update_admin_opportunity(self.db, 404, parse_admin_update({"stage": "Seed"}))


if __name__ == "__main__":
    unittest.main()
