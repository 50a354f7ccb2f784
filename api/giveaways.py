import logging
import math
import time
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from database import get_db
from dependencies import require_admin
from models import Giveaway, GiveawayEntry, GiveawayWinner
from models.giveaway import (
    ALTERNATE_SELECTIONS,
    DELIVERY_METHODS,
    ENTRY_TYPES,
    FULFILLMENT_STATUSES,
    GIVEAWAY_STATUSES,
)
from schemas.common import GiveawayOrder
from schemas.giveaway import (
    EntryValidityUpdate,
    GiveawayCreate,
    GiveawayUpdate,
    PrizeClaimUpdate,
    WinnerAction,
)
from services.winners import (
    WinnerSelectionError,
    apply_winner_action,
    promote_next_alternate,
    select_winners,
)
from utils.case import iso, row_to_camel
from utils.dates import as_utc, utc_now
from utils.responses import success
from utils.slug import slugify

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/giveaways", tags=["giveaways"], dependencies=[Depends(require_admin)])

MSG_GIVEAWAY_NOT_FOUND = "Giveaway not found"
MSG_WINNER_NOT_FOUND = "Winner not found"

_GIVEAWAY_FIELDS = (
    "id",
    "title",
    "slug",
    "description",
    "rules",
    "prize_title",
    "prize_value",
    "prize_description",
    "prize_image",
    "detail_image",
    "start_date",
    "end_date",
    "drawing_date",
    "num_winners",
    "alternate_winners",
    "alternate_selection",
    "require_w9",
    "w9_threshold",
    "entry_type",
    "bonus_entries_enabled",
    "bonus_entry_count",
    "require_id",
    "delivery_method",
    "button_text",
    "button_color",
    "button_icon",
    "status",
    "winner_selected",
    "archived",
    "deleted_at",
    "position",
    "created_at",
    "updated_at",
)

_CHOICES = {
    "status": GIVEAWAY_STATUSES,
    "alternate_selection": ALTERNATE_SELECTIONS,
    "entry_type": ENTRY_TYPES,
    "delivery_method": DELIVERY_METHODS,
}

_DATE_FIELDS = ("start_date", "end_date", "drawing_date")

# Fields a PUT may clear with an explicit null
_NULLABLE_FIELDS = frozenset(
    ("description", "rules", "prize_value", "prize_description", "prize_image", "detail_image", "drawing_date")
)


def _giveaway_to_response(g: Giveaway, stats: Optional[dict[str, int]] = None) -> dict[str, Any]:
    out = row_to_camel(g, _GIVEAWAY_FIELDS)
    out["restrictedStates"] = list(g.restricted_states or [])
    if stats is not None:
        out["stats"] = stats
    return out


def _winner_to_response(w: GiveawayWinner) -> dict[str, Any]:
    entry = w.entry
    claim = w.prize_claim
    return {
        "id": w.id,
        "giveawayId": w.giveaway_id,
        "entryId": w.entry_id,
        "winnerType": w.winner_type,
        "alternateOrder": w.alternate_order,
        "status": w.status,
        "claimToken": w.claim_token,
        "claimDeadline": iso(w.claim_deadline),
        "claimedAt": iso(w.claimed_at),
        "notifiedAt": iso(w.notified_at),
        "entry": {
            "firstName": entry.first_name,
            "lastName": entry.last_name,
            "email": entry.email,
            "phone": entry.phone,
            "state": entry.state,
        }
        if entry
        else None,
        "prizeClaim": _claim_to_response(claim) if claim else None,
    }


def _claim_to_response(c) -> dict[str, Any]:
    return row_to_camel(
        c,
        (
            "id",
            "legal_name",
            "address_line1",
            "address_line2",
            "city",
            "state",
            "zip_code",
            "w9_document",
            "id_document",
            "verified",
            "fulfillment_status",
            "created_at",
        ),
    )


def _validate_fields(data: dict[str, Any]) -> None:
    for field, allowed in _CHOICES.items():
        value = data.get(field)
        if value is not None and value not in allowed:
            raise HTTPException(
                status_code=400,
                detail=f"Invalid {field.replace('_', ' ')}. Must be one of: {', '.join(allowed)}",
            )
    start, end = data.get("start_date"), data.get("end_date")
    if start is not None and end is not None and as_utc(end) <= as_utc(start):
        raise HTTPException(status_code=400, detail="End date must be after start date")


def _normalize(data: dict[str, Any]) -> dict[str, Any]:
    # SQLite drops offsets, so everything is stored as UTC
    for key in _DATE_FIELDS:
        if data.get(key) is not None:
            data[key] = as_utc(data[key])
    if data.get("restricted_states") is not None:
        data["restricted_states"] = sorted({s.strip().upper() for s in data["restricted_states"] if s.strip()})
    return data


async def _slug_taken(db: AsyncSession, slug: str, exclude_id: Optional[int] = None) -> bool:
    q = select(Giveaway.id).where(Giveaway.slug == slug)
    if exclude_id is not None:
        q = q.where(Giveaway.id != exclude_id)
    return (await db.execute(q)).scalar_one_or_none() is not None


async def _get_giveaway(db: AsyncSession, giveaway_id: int) -> Giveaway:
    giveaway = await db.get(Giveaway, giveaway_id)
    if not giveaway or giveaway.deleted_at is not None:
        raise HTTPException(status_code=404, detail=MSG_GIVEAWAY_NOT_FOUND)
    return giveaway


async def _entry_stats(db: AsyncSession, giveaway_ids: list[int]) -> dict[int, dict[str, int]]:
    stats = {gid: {"entries": 0, "totalEntries": 0, "winners": 0} for gid in giveaway_ids}
    if not giveaway_ids:
        return stats
    rows = await db.execute(
        select(GiveawayEntry.giveaway_id, func.count(GiveawayEntry.id), func.sum(GiveawayEntry.entry_count))
        .where(GiveawayEntry.giveaway_id.in_(giveaway_ids), GiveawayEntry.is_valid.is_(True))
        .group_by(GiveawayEntry.giveaway_id)
    )
    for gid, count, total in rows:
        stats[gid]["entries"] = count
        stats[gid]["totalEntries"] = int(total or 0)
    rows = await db.execute(
        select(GiveawayWinner.giveaway_id, func.count(GiveawayWinner.id))
        .where(GiveawayWinner.giveaway_id.in_(giveaway_ids))
        .group_by(GiveawayWinner.giveaway_id)
    )
    for gid, count in rows:
        stats[gid]["winners"] = count
    return stats


@router.get("")
async def list_giveaways(
    status: Optional[str] = Query(None),
    archived: bool = Query(False),
    include_stats: bool = Query(False, alias="includeStats"),
    db: AsyncSession = Depends(get_db),
):
    q = select(Giveaway).where(Giveaway.archived.is_(archived))
    if status:
        q = q.where(Giveaway.status == status)
    q = q.order_by(Giveaway.position, Giveaway.created_at.desc(), Giveaway.id.desc())
    giveaways = (await db.execute(q)).scalars().all()
    stats = await _entry_stats(db, [g.id for g in giveaways]) if include_stats else {}
    return success([_giveaway_to_response(g, stats.get(g.id)) for g in giveaways])


@router.post("", status_code=201)
async def create_giveaway(body: GiveawayCreate, db: AsyncSession = Depends(get_db)):
    data = body.changes()
    if not all(data.get(k) for k in ("title", "prize_title", "start_date", "end_date")):
        raise HTTPException(status_code=400, detail="Title, prize title, start date, and end date are required")
    _validate_fields(data)
    data = _normalize({k: v for k, v in data.items() if v is not None})

    slug = slugify(data.get("slug") or data["title"]) or "giveaway"
    if await _slug_taken(db, slug):
        slug = f"{slug}-{int(time.time() * 1000)}"
    data["slug"] = slug
    min_position = (await db.execute(select(func.min(Giveaway.position)))).scalar()
    # New giveaways go to the top of the admin list
    data["position"] = (min_position or 0) - 1 if min_position is not None else 0

    giveaway = Giveaway(**data)
    db.add(giveaway)
    await db.flush()
    await db.refresh(giveaway)
    logger.info("Created giveaway %s (%s)", giveaway.id, giveaway.slug)
    return success(_giveaway_to_response(giveaway))


@router.put("/reorder")
async def reorder_giveaways(body: GiveawayOrder, db: AsyncSession = Depends(get_db)):
    rows = (await db.execute(select(Giveaway).where(Giveaway.id.in_(body.order)))).scalars().all()
    by_id = {g.id: g for g in rows}
    for index, giveaway_id in enumerate(body.order):
        giveaway = by_id.get(giveaway_id)
        if giveaway is not None:
            giveaway.position = index
    await db.flush()
    return success()


@router.get("/{giveaway_id:int}")
async def get_giveaway(giveaway_id: int, db: AsyncSession = Depends(get_db)):
    giveaway = await _get_giveaway(db, giveaway_id)
    stats = await _entry_stats(db, [giveaway.id])
    return success(_giveaway_to_response(giveaway, stats[giveaway.id]))


@router.put("/{giveaway_id:int}")
async def update_giveaway(giveaway_id: int, body: GiveawayUpdate, db: AsyncSession = Depends(get_db)):
    giveaway = await _get_giveaway(db, giveaway_id)
    changes = body.changes()
    for key in ("title", "prize_title", "start_date", "end_date"):
        if key in changes and not changes[key]:
            raise HTTPException(status_code=400, detail=f"{key.replace('_', ' ').capitalize()} cannot be empty")
    _validate_fields(
        {
            **changes,
            "start_date": changes.get("start_date", giveaway.start_date),
            "end_date": changes.get("end_date", giveaway.end_date),
        }
    )
    changes = _normalize(changes)

    if changes.get("slug"):
        slug = slugify(changes["slug"])
        if await _slug_taken(db, slug, exclude_id=giveaway.id):
            raise HTTPException(status_code=400, detail="A giveaway with this slug already exists")
        changes["slug"] = slug
    elif changes.get("title") and changes["title"] != giveaway.title:
        slug = slugify(changes["title"]) or "giveaway"
        if await _slug_taken(db, slug, exclude_id=giveaway.id):
            slug = f"{slug}-{int(time.time() * 1000)}"
        changes["slug"] = slug
    else:
        changes.pop("slug", None)

    for key, value in changes.items():
        if value is None and key == "restricted_states":
            value = []
        elif value is None and key not in _NULLABLE_FIELDS:
            continue
        setattr(giveaway, key, value)
    await db.flush()
    await db.refresh(giveaway)
    return success(_giveaway_to_response(giveaway))


@router.delete("/{giveaway_id:int}")
async def delete_giveaway(giveaway_id: int, db: AsyncSession = Depends(get_db)):
    giveaway = await _get_giveaway(db, giveaway_id)
    giveaway.archived = True
    giveaway.deleted_at = utc_now()
    giveaway.status = "cancelled"
    await db.flush()
    logger.info("Archived giveaway %s", giveaway.id)
    return success()


_ENTRY_FIELDS = (
    "id",
    "giveaway_id",
    "first_name",
    "last_name",
    "email",
    "phone",
    "state",
    "zip_code",
    "sms_opt_in",
    "agreed_to_rules",
    "entry_count",
    "bonus_claimed",
    "is_valid",
    "invalidation_reason",
    "ip_address",
    "entry_source",
    "created_at",
)


def _entry_to_response(e: GiveawayEntry, winner: Optional[GiveawayWinner] = None) -> dict[str, Any]:
    out = row_to_camel(e, _ENTRY_FIELDS)
    out["isWinner"] = winner is not None
    out["winnerInfo"] = (
        {"id": winner.id, "winnerType": winner.winner_type, "status": winner.status} if winner else None
    )
    return out


@router.get("/{giveaway_id:int}/entries")
async def list_entries(
    giveaway_id: int,
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1, le=500),
    valid_only: bool = Query(False, alias="validOnly"),
    search: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
):
    await _get_giveaway(db, giveaway_id)
    conds = [GiveawayEntry.giveaway_id == giveaway_id]
    if valid_only:
        conds.append(GiveawayEntry.is_valid.is_(True))
    if search and search.strip():
        pattern = f"%{search.strip().lower()}%"
        conds.append(
            or_(
                func.lower(GiveawayEntry.email).like(pattern),
                GiveawayEntry.phone.like(f"%{search.strip()}%"),
                func.lower(GiveawayEntry.first_name).like(pattern),
                func.lower(GiveawayEntry.last_name).like(pattern),
            )
        )
    total = (await db.execute(select(func.count(GiveawayEntry.id)).where(*conds))).scalar() or 0
    rows = await db.execute(
        select(GiveawayEntry)
        .where(*conds)
        .order_by(GiveawayEntry.created_at.desc(), GiveawayEntry.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
    )
    entries = rows.scalars().all()
    winners = await db.execute(
        select(GiveawayWinner).where(GiveawayWinner.entry_id.in_([e.id for e in entries]))
    )
    by_entry = {w.entry_id: w for w in winners.scalars().all()}
    return success(
        {
            "items": [_entry_to_response(e, by_entry.get(e.id)) for e in entries],
            "pagination": {
                "page": page,
                "limit": limit,
                "total": total,
                "totalPages": math.ceil(total / limit),
            },
        }
    )


@router.put("/{giveaway_id:int}/entries")
async def update_entry(giveaway_id: int, body: EntryValidityUpdate, db: AsyncSession = Depends(get_db)):
    """Invalidate or restore an entry; invalid entries are left out of the draw and the stats."""
    if body.entry_id is None:
        raise HTTPException(status_code=400, detail="Entry ID is required")
    result = await db.execute(
        select(GiveawayEntry).where(GiveawayEntry.id == body.entry_id, GiveawayEntry.giveaway_id == giveaway_id)
    )
    entry = result.scalar_one_or_none()
    if not entry:
        raise HTTPException(status_code=404, detail="Entry not found")
    if body.is_valid is not None:
        entry.is_valid = body.is_valid
    entry.invalidation_reason = body.invalidation_reason if body.is_valid is False else None
    await db.flush()
    logger.info("Entry %s of giveaway %s marked %s", entry.id, giveaway_id, "valid" if entry.is_valid else "invalid")
    return success({"id": entry.id, "isValid": entry.is_valid, "invalidationReason": entry.invalidation_reason})


async def _load_winners(db: AsyncSession, giveaway_id: int) -> list[GiveawayWinner]:
    result = await db.execute(
        select(GiveawayWinner)
        .options(selectinload(GiveawayWinner.entry), selectinload(GiveawayWinner.prize_claim))
        .where(GiveawayWinner.giveaway_id == giveaway_id)
        .order_by(GiveawayWinner.winner_type.desc(), GiveawayWinner.alternate_order, GiveawayWinner.id)
    )
    return list(result.scalars().all())


@router.get("/{giveaway_id:int}/winners")
async def list_winners(giveaway_id: int, db: AsyncSession = Depends(get_db)):
    await _get_giveaway(db, giveaway_id)
    winners = await _load_winners(db, giveaway_id)
    return success([_winner_to_response(w) for w in winners])


@router.post("/{giveaway_id:int}/winners")
async def draw_winners(giveaway_id: int, db: AsyncSession = Depends(get_db)):
    giveaway = await _get_giveaway(db, giveaway_id)
    try:
        await select_winners(db, giveaway)
    except WinnerSelectionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    winners = await _load_winners(db, giveaway_id)
    return success([_winner_to_response(w) for w in winners])


@router.put("/{giveaway_id:int}/winners")
async def update_winner(giveaway_id: int, body: WinnerAction, db: AsyncSession = Depends(get_db)):
    if body.winner_id is None or not body.action:
        raise HTTPException(status_code=400, detail="Winner ID and action are required")
    giveaway = await _get_giveaway(db, giveaway_id)
    winner = await _get_winner(db, giveaway_id, body.winner_id)
    # A primary that was already out does not free a second slot
    frees_slot = winner.winner_type == "primary" and winner.status not in ("forfeited", "disqualified")
    try:
        apply_winner_action(winner, body.action)
    except WinnerSelectionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    await db.flush()
    if frees_slot and body.action in ("forfeit", "disqualify"):
        await promote_next_alternate(db, giveaway)
    logger.info("Winner %s of giveaway %s: %s", winner.id, giveaway_id, body.action)
    return success(_winner_to_response(winner))


async def _get_winner(db: AsyncSession, giveaway_id: int, winner_id: int) -> GiveawayWinner:
    result = await db.execute(
        select(GiveawayWinner)
        .options(selectinload(GiveawayWinner.entry), selectinload(GiveawayWinner.prize_claim))
        .where(GiveawayWinner.id == winner_id, GiveawayWinner.giveaway_id == giveaway_id)
    )
    winner = result.scalar_one_or_none()
    if not winner:
        raise HTTPException(status_code=404, detail=MSG_WINNER_NOT_FOUND)
    return winner


@router.patch("/{giveaway_id:int}/winners/{winner_id:int}/claim")
async def update_prize_claim(
    giveaway_id: int, winner_id: int, body: PrizeClaimUpdate, db: AsyncSession = Depends(get_db)
):
    winner = await _get_winner(db, giveaway_id, winner_id)
    claim = winner.prize_claim
    if not claim:
        raise HTTPException(status_code=404, detail="Prize claim not found")
    if body.fulfillment_status is not None and body.fulfillment_status not in FULFILLMENT_STATUSES:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid fulfillment status. Must be one of: {', '.join(FULFILLMENT_STATUSES)}",
        )
    if body.verified is not None:
        claim.verified = body.verified
    if body.fulfillment_status is not None:
        claim.fulfillment_status = body.fulfillment_status
    await db.flush()
    return success(_claim_to_response(claim))
