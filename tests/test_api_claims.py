"""
Prize claim endpoints: claim page view model, status check and submission.
"""
import os
import unittest
from datetime import timedelta

from sqlalchemy import func, select

from config import settings
from models import GiveawayWinner, PrizeClaim
from tests.helpers import ApiTestCase
from utils.dates import utc_now

FORM = {
    "legalName": "Jordan Winner",
    "addressLine1": "122 CR 7185",
    "city": "Jonesboro",
    "state": "AR",
    "zipCode": "72405",
    "agreeTerms": "true",
    "confirmIdentity": "true",
}


class TestClaimApi(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.giveaway_id = self.make_giveaway(prize_value=1000.0, require_w9=True, w9_threshold=600.0)
        self.winner_id, self.token = self.make_winner(self.giveaway_id)

    def _post(self, data=None, files=None, token=None, winner_id=None):
        payload = {
            "token": token or self.token,
            "winnerId": str(winner_id or self.winner_id),
            **FORM,
            **(data or {}),
        }
        return self.client.post("/api/giveaways/claim", data=payload, files=files)

    def _w9(self, content=b"%PDF-1.4 w9", name="w9.pdf", content_type="application/pdf"):
        return {"w9Document": (name, content, content_type)}

    def _claim_count(self):
        async def _count(session):
            return (await session.execute(select(func.count(PrizeClaim.id)))).scalar()

        return self.run_db(_count)

    def test_claim_page_open(self):
        r = self.client.get(f"/claim/{self.token}")
        self.assertEqual(r.status_code, 200)
        data = r.json()["data"]
        self.assertEqual(data["state"], "open")
        self.assertTrue(data["canSubmit"])
        self.assertTrue(data["requiresW9"])
        self.assertEqual(data["giveaway"]["prizeTitle"], "Weber Grill")
        self.assertIsNone(data["prizeClaim"])

    def test_claim_page_unknown_token(self):
        r = self.client.get("/claim/not-a-token")
        self.assertEqual(r.status_code, 404)
        self.assertEqual(r.json(), {"success": False, "error": "Claim not found"})

    def test_claim_page_expired(self):
        _, token = self.make_winner(self.giveaway_id, claim_deadline=utc_now() - timedelta(hours=1))
        data = self.client.get(f"/claim/{token}").json()["data"]
        self.assertEqual(data["state"], "expired")
        self.assertFalse(data["canSubmit"])

    def test_status_requires_token(self):
        r = self.client.get("/api/giveaways/claim")
        self.assertEqual(r.status_code, 400)

    def test_status_unknown_token(self):
        r = self.client.get("/api/giveaways/claim", params={"token": "nope"})
        self.assertEqual(r.status_code, 404)

    def test_submit_success(self):
        r = self._post(files=self._w9())
        self.assertEqual(r.status_code, 200, r.text)
        body = r.json()
        self.assertTrue(body["success"])
        self.assertIsInstance(body["claimId"], int)

        async def _load(session):
            claim = (await session.execute(select(PrizeClaim))).scalar_one()
            winner = await session.get(GiveawayWinner, self.winner_id)
            return claim.w9_document, claim.fulfillment_status, winner.status, winner.claimed_at

        w9_path, fulfillment, status, claimed_at = self.run_db(_load)
        self.assertEqual(fulfillment, "pending")
        self.assertEqual(status, "claimed")
        self.assertIsNotNone(claimed_at)
        self.assertTrue(w9_path.startswith(f"{self.winner_id}/w9-"))
        self.assertTrue(w9_path.endswith(".pdf"))
        self.assertTrue(os.path.exists(os.path.join(settings.claims_upload_dir, w9_path)))

        status = self.client.get("/api/giveaways/claim", params={"token": self.token}).json()["data"]
        self.assertTrue(status["claimed"])
        self.assertEqual(status["fulfillmentStatus"], "pending")
        page = self.client.get(f"/claim/{self.token}").json()["data"]
        self.assertEqual(page["state"], "claimed")

    def test_resubmission_rejected(self):
        self.assertEqual(self._post(files=self._w9()).status_code, 200)
        r = self._post(files=self._w9())
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json()["error"], "Prize has already been claimed")
        self.assertEqual(self._claim_count(), 1)

    def test_missing_token(self):
        r = self.client.post("/api/giveaways/claim", data=FORM)
        self.assertEqual(r.status_code, 400)

    def test_unknown_token(self):
        r = self._post(token="f" * 64, files=self._w9())
        self.assertEqual(r.status_code, 404)
        self.assertEqual(r.json()["error"], "Invalid claim token")

    def test_incomplete_form_rejected_before_token_lookup(self):
        r = self._post(token="f" * 64, data={"city": "", "zipCode": ""})
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json()["error"], "Please fill in all required fields.")

    def test_status_dates_carry_utc_offset(self):
        data = self.client.get("/api/giveaways/claim", params={"token": self.token}).json()["data"]
        self.assertTrue(data["claimDeadline"].endswith("+00:00"), data["claimDeadline"])
        page = self.client.get(f"/claim/{self.token}").json()["data"]
        self.assertEqual(page["winner"]["claimDeadline"], data["claimDeadline"])

    def test_oversized_document_rejected(self):
        original = settings.max_claim_file_mb
        settings.max_claim_file_mb = 1
        self.addCleanup(setattr, settings, "max_claim_file_mb", original)
        r = self._post(files=self._w9(content=b"%PDF" + b"\x00" * (1024 * 1024)))
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json()["error"], "W-9 file must be less than 1MB")
        self.assertEqual(self._claim_count(), 0)

    def test_token_winner_mismatch(self):
        other_id, _ = self.make_winner(self.giveaway_id)
        r = self._post(winner_id=other_id, files=self._w9())
        self.assertEqual(r.status_code, 403)
        self.assertEqual(self._claim_count(), 0)

    def test_deadline_passed(self):
        winner_id, token = self.make_winner(self.giveaway_id, claim_deadline=utc_now() - timedelta(minutes=5))
        r = self._post(token=token, winner_id=winner_id, files=self._w9())
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json()["error"], "Claim deadline has passed")

    def test_w9_required(self):
        r = self._post()
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json()["error"], "W-9 form is required for this prize.")

    def test_w9_not_required_below_threshold(self):
        giveaway_id = self.make_giveaway(slug="small-prize", prize_value=50.0, require_w9=True)
        winner_id, token = self.make_winner(giveaway_id)
        r = self._post(token=token, winner_id=winner_id)
        self.assertEqual(r.status_code, 200, r.text)

    def test_bad_document_type(self):
        r = self._post(files=self._w9(name="w9.docx", content_type="application/msword"))
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json()["error"], "W-9 must be a PDF, JPG, or PNG file")
        self.assertEqual(self._claim_count(), 0)

    def test_agreements_required(self):
        r = self._post(data={"confirmIdentity": "false"}, files=self._w9())
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json()["error"], "You must agree to the terms and confirm your identity.")

    def test_required_fields(self):
        r = self._post(data={"legalName": ""}, files=self._w9())
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json()["error"], "Please fill in all required fields.")


if __name__ == "__main__":
    unittest.main()
