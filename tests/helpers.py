"""Shared fixtures for API tests."""
import unittest
from datetime import timedelta

from fastapi.testclient import TestClient

from database import engine, session_scope
from main import app
from models import Giveaway, GiveawayEntry, GiveawayWinner
from services.winners import generate_claim_token
from utils.dates import utc_now

ADMIN_HEADERS = {"Authorization": "Bearer test-admin-key"}


class ApiTestCase(unittest.TestCase):
    """Fresh in-memory database per test; DB helpers run on the client's event loop."""

    def setUp(self):
        self.client = TestClient(app)
        self.client.__enter__()

    def tearDown(self):
        # Dropping the only pooled connection discards the in-memory database
        self.client.portal.call(engine.dispose)
        self.client.__exit__(None, None, None)

    def run_db(self, fn):
        async def _go():
            async with session_scope() as session:
                return await fn(session)

        return self.client.portal.call(_go)

    def admin(self, method, url, **kwargs):
        headers = {**ADMIN_HEADERS, **kwargs.pop("headers", {})}
        return self.client.request(method, url, headers=headers, **kwargs)

    def make_giveaway(self, **overrides) -> int:
        now = utc_now()
        fields = {
            "title": "Summer Grill Giveaway",
            "slug": "summer-grill",
            "prize_title": "Weber Grill",
            "prize_value": 450.0,
            "start_date": now - timedelta(days=1),
            "end_date": now + timedelta(days=7),
            "status": "active",
            "entry_type": "both",
        }
        fields.update(overrides)

        async def _create(session):
            g = Giveaway(**fields)
            session.add(g)
            await session.flush()
            return g.id

        return self.run_db(_create)

    def make_entry(self, giveaway_id: int, n: int = 0, **overrides) -> int:
        fields = {
            "giveaway_id": giveaway_id,
            "first_name": "Pat",
            "last_name": f"Entrant{n}",
            "email": f"pat{n}@example.com",
            "phone": f"870555{n:04d}",
            "state": "AR",
            "agreed_to_rules": True,
        }
        fields.update(overrides)

        async def _create(session):
            e = GiveawayEntry(**fields)
            session.add(e)
            await session.flush()
            return e.id

        return self.run_db(_create)

    def make_winner(self, giveaway_id: int, **overrides) -> tuple[int, str]:
        """Create an entry plus a primary winner for it. Returns (winner_id, claim_token)."""
        entry_id = self.make_entry(giveaway_id, n=9000)
        token = generate_claim_token()
        fields = {
            "giveaway_id": giveaway_id,
            "entry_id": entry_id,
            "winner_type": "primary",
            "status": "pending",
            "claim_token": token,
            "claim_deadline": utc_now() + timedelta(days=7),
        }
        fields.update(overrides)

        async def _create(session):
            w = GiveawayWinner(**fields)
            session.add(w)
            await session.flush()
            return w.id

        return self.run_db(_create), token
