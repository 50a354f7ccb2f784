from __future__ import annotations

import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Sequence, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from config import settings
from models import Giveaway, GiveawayEntry, GiveawayWinner

logger = logging.getLogger(__name__)

T = TypeVar("T")

WINNER_ACTIONS = ("forfeit", "disqualify", "promote")


class WinnerSelectionError(ValueError):
    pass


def generate_claim_token() -> str:
    """64 hex chars; the only key to the public claim page."""
    return secrets.token_hex(32)


def secure_random_select(items: Sequence[T], count: int) -> list[T]:
    if count >= len(items):
        return list(items)
    remaining = list(items)
    return [remaining.pop(secrets.randbelow(len(remaining))) for _ in range(count)]


def claim_deadline_from(now: datetime) -> datetime:
    return now + timedelta(days=settings.claim_window_days)


async def select_winners(
    session: AsyncSession, giveaway: Giveaway, now: datetime | None = None
) -> list[GiveawayWinner]:
    """
    Draw num_winners primaries plus up to alternate_winners alternates from the
    giveaway's valid entries, then close the giveaway.
    """
    now = now or datetime.now(timezone.utc)
    if giveaway.winner_selected:
        raise WinnerSelectionError("Winners have already been selected for this giveaway")

    result = await session.execute(
        select(GiveawayEntry).where(
            GiveawayEntry.giveaway_id == giveaway.id, GiveawayEntry.is_valid.is_(True)
        )
    )
    entries = result.scalars().all()
    if not entries:
        raise WinnerSelectionError("No valid entries to select from")

    num_winners = giveaway.num_winners or 1
    alternates = giveaway.alternate_winners or 0
    if len(entries) < num_winners:
        raise WinnerSelectionError(
            f"Not enough entries. Need at least {num_winners} entries, but only have {len(entries)}"
        )

    selected = secure_random_select(entries, min(num_winners + alternates, len(entries)))
    deadline = claim_deadline_from(now)
    winners: list[GiveawayWinner] = []
    for i, entry in enumerate(selected):
        is_primary = i < num_winners
        winner = GiveawayWinner(
            giveaway_id=giveaway.id,
            entry_id=entry.id,
            winner_type="primary" if is_primary else "alternate",
            alternate_order=None if is_primary else i - num_winners + 1,
            status="pending",
            claim_token=generate_claim_token(),
            claim_deadline=deadline,
        )
        session.add(winner)
        winners.append(winner)

    giveaway.winner_selected = True
    giveaway.status = "ended"
    await session.flush()
    logger.info(
        "Selected %d primary and %d alternate winner(s) for giveaway %s",
        min(num_winners, len(winners)),
        max(len(winners) - num_winners, 0),
        giveaway.id,
    )
    return winners


def apply_winner_action(winner: GiveawayWinner, action: str, now: datetime | None = None) -> GiveawayWinner:
    now = now or datetime.now(timezone.utc)
    if action not in WINNER_ACTIONS:
        raise WinnerSelectionError(f"Invalid action. Must be one of: {', '.join(WINNER_ACTIONS)}")
    if action == "forfeit":
        winner.status = "forfeited"
    elif action == "disqualify":
        winner.status = "disqualified"
    else:
        if winner.winner_type != "alternate":
            raise WinnerSelectionError("Only alternate winners can be promoted")
        _make_primary(winner, now)
    return winner


def _make_primary(winner: GiveawayWinner, now: datetime) -> None:
    winner.winner_type = "primary"
    winner.alternate_order = None
    winner.status = "pending"
    winner.claim_deadline = claim_deadline_from(now)


async def promote_next_alternate(
    session: AsyncSession, giveaway: Giveaway, now: datetime | None = None
) -> GiveawayWinner | None:
    """
    Move the lowest-ordered pending alternate into a primary slot with a fresh
    claim window. Only giveaways with alternate_selection="auto" promote; for
    "manual" the admin picks with the promote action instead.
    """
    if giveaway.alternate_selection != "auto":
        return None
    result = await session.execute(
        select(GiveawayWinner)
        .where(
            GiveawayWinner.giveaway_id == giveaway.id,
            GiveawayWinner.winner_type == "alternate",
            GiveawayWinner.status == "pending",
        )
        .order_by(GiveawayWinner.alternate_order, GiveawayWinner.id)
        .limit(1)
    )
    alternate = result.scalar_one_or_none()
    if alternate is None:
        return None
    _make_primary(alternate, now or datetime.now(timezone.utc))
    await session.flush()
    logger.info("Promoted alternate winner %s of giveaway %s", alternate.id, giveaway.id)
    return alternate
