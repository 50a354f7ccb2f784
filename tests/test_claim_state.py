"""
Claim page state resolution and the W-9 requirement rule.
Run: python -m unittest tests.test_claim_state -v
"""
import unittest
from datetime import datetime, timedelta, timezone

from services.claim_state import ClaimState, requires_w9, resolve_claim_state

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


class TestResolveClaimState(unittest.TestCase):
    def test_open_before_deadline(self):
        status = resolve_claim_state(None, NOW + timedelta(days=3), now=NOW)
        self.assertEqual(status.state, ClaimState.OPEN)
        self.assertFalse(status.is_already_claimed)
        self.assertFalse(status.is_expired)
        self.assertTrue(status.can_submit)

    def test_expired_after_deadline(self):
        status = resolve_claim_state(None, NOW - timedelta(seconds=1), now=NOW)
        self.assertEqual(status.state, ClaimState.EXPIRED)
        self.assertTrue(status.is_expired)
        self.assertFalse(status.can_submit)

    def test_deadline_equal_to_now_is_still_open(self):
        status = resolve_claim_state(None, NOW, now=NOW)
        self.assertEqual(status.state, ClaimState.OPEN)

    def test_claimed_wins_over_expired(self):
        """Claimed before the deadline, viewed after it: still CLAIMED."""
        status = resolve_claim_state(NOW - timedelta(days=5), NOW - timedelta(days=1), now=NOW)
        self.assertEqual(status.state, ClaimState.CLAIMED)
        self.assertTrue(status.is_already_claimed)
        self.assertTrue(status.is_expired)
        self.assertFalse(status.can_submit)

    def test_no_deadline_never_expires(self):
        status = resolve_claim_state(None, None, now=NOW)
        self.assertEqual(status.state, ClaimState.OPEN)
        self.assertFalse(status.is_expired)

    def test_naive_datetimes_are_utc(self):
        naive_deadline = datetime(2026, 3, 1, 11, 0)
        status = resolve_claim_state(None, naive_deadline, now=NOW)
        self.assertEqual(status.state, ClaimState.EXPIRED)


class TestRequiresW9(unittest.TestCase):
    def test_all_conditions_met(self):
        self.assertTrue(requires_w9(True, 600, 600))
        self.assertTrue(requires_w9(True, 1200.50, 600))

    def test_disabled(self):
        self.assertFalse(requires_w9(False, 5000, 600))
        self.assertFalse(requires_w9(None, 5000, 600))

    def test_no_prize_value(self):
        self.assertFalse(requires_w9(True, None, 600))

    def test_below_threshold(self):
        self.assertFalse(requires_w9(True, 599.99, 600))

    def test_zero_value_prize_with_zero_threshold(self):
        self.assertTrue(requires_w9(True, 0, 0))


if __name__ == "__main__":
    unittest.main()
