"""
Derives what a prize winner's claim page should show.

A winner is in exactly one of three states: OPEN (can submit the claim form),
EXPIRED (deadline passed without a claim) or CLAIMED (claim on file). A claim
submitted before the deadline stays CLAIMED after the deadline passes.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum

from utils.dates import as_utc


class ClaimState(str, Enum):
    OPEN = "open"
    EXPIRED = "expired"
    CLAIMED = "claimed"


@dataclass(frozen=True)
class ClaimStatus:
    state: ClaimState
    is_already_claimed: bool
    is_expired: bool

    @property
    def can_submit(self) -> bool:
        return self.state is ClaimState.OPEN


def resolve_claim_state(
    claimed_at: datetime | None,
    claim_deadline: datetime | None,
    now: datetime | None = None,
) -> ClaimStatus:
    now = as_utc(now or datetime.now(timezone.utc))
    is_already_claimed = claimed_at is not None
    is_expired = claim_deadline is not None and now > as_utc(claim_deadline)

    if is_already_claimed:
        state = ClaimState.CLAIMED
    elif is_expired:
        state = ClaimState.EXPIRED
    else:
        state = ClaimState.OPEN
    return ClaimStatus(state=state, is_already_claimed=is_already_claimed, is_expired=is_expired)


def requires_w9(require_w9: bool | None, prize_value: float | None, w9_threshold: float | None) -> bool:
    """W-9 is needed only when enabled AND the prize has a value at or above the threshold."""
    if not require_w9 or prize_value is None:
        return False
    return float(prize_value) >= float(w9_threshold or 0)
