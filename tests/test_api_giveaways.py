"""
Giveaway admin CRUD, winner selection, and the public listing/entry routes.
"""
import unittest
from datetime import datetime, timedelta

from sqlalchemy import select

from models import GiveawayEntry, GiveawayWinner, PrizeClaim
from tests.helpers import ApiTestCase
from utils.dates import utc_now


def _window(days_before=1, days_after=7):
    now = utc_now()
    return {
        "startDate": (now - timedelta(days=days_before)).isoformat(),
        "endDate": (now + timedelta(days=days_after)).isoformat(),
    }


class TestGiveawayAdminApi(ApiTestCase):
    def _create(self, **extra):
        body = {"title": "Summer Grill Giveaway", "prizeTitle": "Weber Grill", **_window(), **extra}
        r = self.admin("POST", "/api/giveaways", json=body)
        self.assertEqual(r.status_code, 201, r.text)
        return r.json()["data"]

    def test_requires_admin(self):
        self.assertEqual(self.client.get("/api/giveaways").status_code, 401)

    def test_create_defaults(self):
        g = self._create(restrictedStates=["ny", "FL"])
        self.assertEqual(g["slug"], "summer-grill-giveaway")
        self.assertEqual(g["status"], "draft")
        self.assertEqual(g["numWinners"], 1)
        self.assertEqual(g["alternateWinners"], 3)
        self.assertEqual(g["w9Threshold"], 600)
        self.assertEqual(g["restrictedStates"], ["FL", "NY"])
        self.assertFalse(g["winnerSelected"])

    def test_create_conflicting_slug_gets_suffix(self):
        first = self._create()
        second = self._create()
        self.assertNotEqual(first["slug"], second["slug"])
        self.assertTrue(second["slug"].startswith("summer-grill-giveaway-"))

    def test_create_validation(self):
        r = self.admin("POST", "/api/giveaways", json={"title": "No prize", **_window()})
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json()["error"], "Title, prize title, start date, and end date are required")

        r = self.admin(
            "POST", "/api/giveaways", json={"title": "T", "prizeTitle": "P", "entryType": "fax", **_window()}
        )
        self.assertEqual(r.status_code, 400)
        self.assertIn("entry type", r.json()["error"])

        r = self.admin(
            "POST", "/api/giveaways", json={"title": "T", "prizeTitle": "P", "prizeValue": -5, **_window()}
        )
        self.assertEqual(r.status_code, 400)

    def test_update_title_rederives_slug(self):
        g = self._create()
        r = self.admin("PUT", f"/api/giveaways/{g['id']}", json={"title": "Fall Cooler Giveaway"})
        self.assertEqual(r.status_code, 200, r.text)
        self.assertEqual(r.json()["data"]["slug"], "fall-cooler-giveaway")

    def test_update_explicit_conflicting_slug(self):
        a = self._create()
        b = self._create(title="Other")
        r = self.admin("PUT", f"/api/giveaways/{b['id']}", json={"slug": a["slug"]})
        self.assertEqual(r.status_code, 400)

    def test_update_invalid_status(self):
        g = self._create()
        r = self.admin("PUT", f"/api/giveaways/{g['id']}", json={"status": "paused"})
        self.assertEqual(r.status_code, 400)

    def test_soft_delete(self):
        g = self._create()
        r = self.admin("DELETE", f"/api/giveaways/{g['id']}")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(self.admin("GET", "/api/giveaways").json()["data"], [])
        archived = self.admin("GET", "/api/giveaways", params={"archived": "true"}).json()["data"]
        self.assertEqual(len(archived), 1)
        self.assertEqual(archived[0]["status"], "cancelled")
        self.assertIsNotNone(archived[0]["deletedAt"])
        self.assertEqual(self.admin("GET", f"/api/giveaways/{g['id']}").status_code, 404)

    def test_reorder(self):
        ids = [self._create(title=t)["id"] for t in ("A", "B", "C")]
        r = self.admin("PUT", "/api/giveaways/reorder", json={"order": [ids[1], ids[2], ids[0]]})
        self.assertEqual(r.status_code, 200, r.text)
        listed = self.admin("GET", "/api/giveaways").json()["data"]
        self.assertEqual([g["id"] for g in listed], [ids[1], ids[2], ids[0]])
        self.assertEqual([g["position"] for g in listed], [0, 1, 2])

    def test_list_with_stats(self):
        g = self._create()
        self.make_entry(g["id"], n=1, entry_count=2)
        self.make_entry(g["id"], n=2)
        listed = self.admin("GET", "/api/giveaways", params={"includeStats": "true"}).json()["data"]
        self.assertEqual(listed[0]["stats"], {"entries": 2, "totalEntries": 3, "winners": 0})


class TestWinnerSelectionApi(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.giveaway_id = self.make_giveaway(num_winners=1, alternate_winners=2)

    def test_no_entries(self):
        r = self.admin("POST", f"/api/giveaways/{self.giveaway_id}/winners")
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json()["error"], "No valid entries to select from")

    def test_not_enough_entries(self):
        giveaway_id = self.make_giveaway(slug="two-winners", num_winners=2)
        self.make_entry(giveaway_id, n=1)
        r = self.admin("POST", f"/api/giveaways/{giveaway_id}/winners")
        self.assertEqual(r.status_code, 400)
        self.assertIn("Not enough entries", r.json()["error"])

    def test_select_primary_and_alternates(self):
        for n in range(5):
            self.make_entry(self.giveaway_id, n=n)
        r = self.admin("POST", f"/api/giveaways/{self.giveaway_id}/winners")
        self.assertEqual(r.status_code, 200, r.text)
        winners = r.json()["data"]
        self.assertEqual([w["winnerType"] for w in winners], ["primary", "alternate", "alternate"])
        self.assertEqual(len({w["entryId"] for w in winners}), 3)
        for w in winners:
            self.assertRegex(w["claimToken"], r"^[0-9a-f]{64}$")
            self.assertIsNotNone(w["claimDeadline"])

        g = self.admin("GET", f"/api/giveaways/{self.giveaway_id}").json()["data"]
        self.assertTrue(g["winnerSelected"])
        self.assertEqual(g["status"], "ended")

        again = self.admin("POST", f"/api/giveaways/{self.giveaway_id}/winners")
        self.assertEqual(again.status_code, 400)

    def _draw(self, giveaway_id, entries=3):
        for n in range(entries):
            self.make_entry(giveaway_id, n=n)
        r = self.admin("POST", f"/api/giveaways/{giveaway_id}/winners")
        self.assertEqual(r.status_code, 200, r.text)
        return r.json()["data"]

    def test_winner_actions(self):
        giveaway_id = self.make_giveaway(
            slug="manual-draw", num_winners=1, alternate_winners=2, alternate_selection="manual"
        )
        winners = self._draw(giveaway_id)
        primary, alternate = winners[0], winners[1]
        url = f"/api/giveaways/{giveaway_id}/winners"

        r = self.admin("PUT", url, json={"winnerId": primary["id"], "action": "forfeit"})
        self.assertEqual(r.json()["data"]["status"], "forfeited")
        listed = self.admin("GET", url).json()["data"]
        self.assertEqual(
            sorted(w["winnerType"] for w in listed if w["status"] == "pending"), ["alternate", "alternate"]
        )

        r = self.admin("PUT", url, json={"winnerId": primary["id"], "action": "promote"})
        self.assertEqual(r.status_code, 400)

        r = self.admin("PUT", url, json={"winnerId": alternate["id"], "action": "promote"})
        self.assertEqual(r.status_code, 200, r.text)
        self.assertEqual(r.json()["data"]["winnerType"], "primary")
        self.assertIsNone(r.json()["data"]["alternateOrder"])

        r = self.admin("PUT", url, json={"winnerId": alternate["id"], "action": "explode"})
        self.assertEqual(r.status_code, 400)
        r = self.admin("PUT", url, json={"action": "forfeit"})
        self.assertEqual(r.status_code, 400)
        r = self.admin("PUT", url, json={"winnerId": 9999, "action": "forfeit"})
        self.assertEqual(r.status_code, 404)

    def test_forfeit_promotes_first_alternate_when_auto(self):
        winners = self._draw(self.giveaway_id)
        primary, first_alt, second_alt = winners
        self.assertEqual((first_alt["alternateOrder"], second_alt["alternateOrder"]), (1, 2))
        url = f"/api/giveaways/{self.giveaway_id}/winners"

        async def _expire(session):
            w = await session.get(GiveawayWinner, first_alt["id"])
            w.claim_deadline = utc_now() - timedelta(days=1)

        self.run_db(_expire)
        r = self.admin("PUT", url, json={"winnerId": primary["id"], "action": "disqualify"})
        self.assertEqual(r.status_code, 200, r.text)

        by_id = {w["id"]: w for w in self.admin("GET", url).json()["data"]}
        self.assertEqual(by_id[primary["id"]]["status"], "disqualified")
        promoted = by_id[first_alt["id"]]
        self.assertEqual((promoted["winnerType"], promoted["status"]), ("primary", "pending"))
        self.assertIsNone(promoted["alternateOrder"])
        self.assertGreater(datetime.fromisoformat(promoted["claimDeadline"]), utc_now() + timedelta(days=6))
        self.assertEqual(by_id[second_alt["id"]]["winnerType"], "alternate")

        self.admin("PUT", url, json={"winnerId": primary["id"], "action": "forfeit"})
        by_id = {w["id"]: w for w in self.admin("GET", url).json()["data"]}
        self.assertEqual(by_id[second_alt["id"]]["winnerType"], "alternate")

    def test_forfeiting_an_alternate_promotes_nobody(self):
        _, first_alt, second_alt = self._draw(self.giveaway_id)
        url = f"/api/giveaways/{self.giveaway_id}/winners"
        self.admin("PUT", url, json={"winnerId": first_alt["id"], "action": "forfeit"})
        by_id = {w["id"]: w for w in self.admin("GET", url).json()["data"]}
        self.assertEqual(by_id[second_alt["id"]]["winnerType"], "alternate")

    def test_invalidated_entry_is_left_out_of_draw(self):
        keep = self.make_entry(self.giveaway_id, n=1)
        drop = self.make_entry(self.giveaway_id, n=2)
        url = f"/api/giveaways/{self.giveaway_id}/entries"
        r = self.admin("PUT", url, json={"entryId": drop, "isValid": False, "invalidationReason": "Duplicate household"})
        self.assertEqual(r.status_code, 200, r.text)
        self.assertEqual(r.json()["data"], {"id": drop, "isValid": False, "invalidationReason": "Duplicate household"})

        winners = self.admin("POST", f"/api/giveaways/{self.giveaway_id}/winners").json()["data"]
        self.assertEqual([w["entryId"] for w in winners], [keep])
        stats = self.admin("GET", f"/api/giveaways/{self.giveaway_id}").json()["data"]["stats"]
        self.assertEqual(stats["entries"], 1)

    def test_update_prize_claim(self):
        winner_id, _ = self.make_winner(self.giveaway_id)
        url = f"/api/giveaways/{self.giveaway_id}/winners/{winner_id}/claim"
        self.assertEqual(self.admin("PATCH", url, json={"verified": True}).status_code, 404)

        async def _claim(session):
            session.add(
                PrizeClaim(
                    winner_id=winner_id,
                    legal_name="Jordan Winner",
                    address_line1="1 Main St",
                    city="Jonesboro",
                    state="AR",
                    zip_code="72401",
                )
            )

        self.run_db(_claim)
        r = self.admin("PATCH", url, json={"verified": True, "fulfillmentStatus": "fulfilled"})
        self.assertEqual(r.status_code, 200, r.text)
        self.assertTrue(r.json()["data"]["verified"])
        self.assertEqual(r.json()["data"]["fulfillmentStatus"], "fulfilled")
        self.assertEqual(self.admin("PATCH", url, json={"fulfillmentStatus": "shipped"}).status_code, 400)


class TestGiveawayEntriesApi(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.giveaway_id = self.make_giveaway()
        self.url = f"/api/giveaways/{self.giveaway_id}/entries"

    def test_list_paginates_and_searches(self):
        for n in range(3):
            self.make_entry(self.giveaway_id, n=n)
        self.make_entry(self.giveaway_id, n=7, first_name="Casey", last_name="Smith", email="casey@example.com")

        r = self.admin("GET", self.url, params={"limit": 2})
        self.assertEqual(r.status_code, 200, r.text)
        data = r.json()["data"]
        self.assertEqual(len(data["items"]), 2)
        self.assertEqual(data["pagination"], {"page": 1, "limit": 2, "total": 4, "totalPages": 2})

        for term in ("CASEY", "smith", "8705550007"):
            items = self.admin("GET", self.url, params={"search": term}).json()["data"]["items"]
            self.assertEqual([e["email"] for e in items], ["casey@example.com"], term)
        self.assertFalse(items[0]["isWinner"])
        self.assertIsNone(items[0]["winnerInfo"])

    def test_valid_only_and_restore(self):
        entry_id = self.make_entry(self.giveaway_id, n=1)
        self.make_entry(self.giveaway_id, n=2)
        self.admin("PUT", self.url, json={"entryId": entry_id, "isValid": False, "invalidationReason": "Bot"})

        items = self.admin("GET", self.url, params={"validOnly": "true"}).json()["data"]["items"]
        self.assertNotIn(entry_id, [e["id"] for e in items])
        everything = self.admin("GET", self.url).json()["data"]["items"]
        invalid = next(e for e in everything if e["id"] == entry_id)
        self.assertEqual((invalid["isValid"], invalid["invalidationReason"]), (False, "Bot"))

        r = self.admin("PUT", self.url, json={"entryId": entry_id, "isValid": True})
        self.assertEqual(r.json()["data"], {"id": entry_id, "isValid": True, "invalidationReason": None})

    def test_winner_flag(self):
        winner_id, _ = self.make_winner(self.giveaway_id)
        items = self.admin("GET", self.url).json()["data"]["items"]
        self.assertTrue(items[0]["isWinner"])
        self.assertEqual(items[0]["winnerInfo"], {"id": winner_id, "winnerType": "primary", "status": "pending"})

    def test_update_errors(self):
        self.assertEqual(self.admin("PUT", self.url, json={"isValid": False}).json()["error"], "Entry ID is required")
        other = self.make_giveaway(slug="other")
        foreign = self.make_entry(other, n=3)
        r = self.admin("PUT", self.url, json={"entryId": foreign, "isValid": False})
        self.assertEqual(r.status_code, 404)
        self.assertEqual(self.client.get(self.url).status_code, 401)


class TestPublicGiveawayApi(ApiTestCase):
    def test_public_list_only_open_giveaways(self):
        self.make_giveaway(slug="open-now", title="Open")
        self.make_giveaway(slug="draft", title="Draft", status="draft")
        self.make_giveaway(
            slug="future", title="Future", start_date=utc_now() + timedelta(days=2), end_date=utc_now() + timedelta(days=9)
        )
        self.make_giveaway(slug="drawn", title="Drawn", winner_selected=True)
        titles = [g["title"] for g in self.client.get("/api/giveaways/public").json()["data"]]
        self.assertEqual(titles, ["Open"])

    def test_public_by_slug(self):
        self.make_giveaway(slug="open-now")
        data = self.client.get("/api/giveaways/public", params={"slug": "open-now"}).json()["data"]
        self.assertTrue(data["isAcceptingEntries"])
        self.assertNotIn("requireW9", data)

        self.make_giveaway(slug="draft", status="draft")
        self.assertEqual(self.client.get("/api/giveaways/public", params={"slug": "draft"}).status_code, 404)

    def _enter(self, **overrides):
        body = {
            "giveawaySlug": "summer-grill",
            "firstName": "Pat",
            "lastName": "Smith",
            "email": "Pat@Example.com",
            "phone": "(870) 555-0100",
            "state": "ar",
            "agreedToRules": True,
            **overrides,
        }
        return self.client.post("/api/giveaways/enter", json=body)

    def test_enter_success_normalizes_contact(self):
        giveaway_id = self.make_giveaway()
        r = self._enter()
        self.assertEqual(r.status_code, 201, r.text)
        self.assertEqual(r.json()["data"]["entryCount"], 1)

        async def _load(session):
            return (await session.execute(select(GiveawayEntry).where(GiveawayEntry.giveaway_id == giveaway_id))).scalar_one()

        entry = self.run_db(_load)
        self.assertEqual(entry.email, "pat@example.com")
        self.assertEqual(entry.phone, "8705550100")
        self.assertEqual(entry.state, "AR")

    def test_duplicate_entry(self):
        self.make_giveaway()
        self.assertEqual(self._enter().status_code, 201)
        r = self._enter(email="other@example.com")
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json()["error"], "You have already entered this giveaway!")

    def test_validation_order(self):
        self.make_giveaway(restricted_states=["NY"])
        cases = [
            ({"firstName": ""}, "First name, last name, and state are required"),
            ({"phone": ""}, "Phone number is required"),
            ({"email": ""}, "Email is required"),
            ({"phone": "555"}, "Invalid phone number. Please enter a 10-digit US phone number"),
            ({"email": "not-an-email"}, "Invalid email format"),
            ({"state": "ZZ"}, "Invalid state. Please select a valid US state"),
            ({"agreedToRules": False}, "You must agree to the official rules to enter"),
            ({"state": "NY"}, "Sorry, this giveaway is not available in your state"),
        ]
        for overrides, message in cases:
            r = self._enter(**overrides)
            self.assertEqual(r.status_code, 400, overrides)
            self.assertEqual(r.json()["error"], message)

    def test_closed_giveaway(self):
        self.make_giveaway(end_date=utc_now() - timedelta(hours=1), start_date=utc_now() - timedelta(days=3))
        r = self._enter()
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json()["error"], "This giveaway has ended")

    def test_bonus_entries(self):
        self.make_giveaway(entry_type="email", bonus_entries_enabled=True, bonus_entry_count=2)
        r = self._enter(phone=None, secondaryContact="870-555-0199")
        self.assertEqual(r.status_code, 201, r.text)
        self.assertEqual(r.json()["data"]["entryCount"], 3)

    def test_unknown_giveaway(self):
        self.assertEqual(self._enter(giveawaySlug="nope").status_code, 404)
        r = self.client.post("/api/giveaways/enter", json={"firstName": "Pat"})
        self.assertEqual(r.status_code, 400)


if __name__ == "__main__":
    unittest.main()
