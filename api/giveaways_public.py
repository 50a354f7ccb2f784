"""
Unauthenticated giveaway routes: active giveaway listing, entry form, and the
winner's prize claim (status check, submission, claim page view model).
"""
import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, Request, UploadFile
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from config import settings
from database import get_db
from models import Giveaway
from schemas.giveaway import EntryCreate
from services.claim_state import resolve_claim_state
from services.claims import (
    ClaimClosedError,
    ClaimDocument,
    ClaimForm,
    ClaimNotFoundError,
    ClaimTokenMismatchError,
    ClaimValidationError,
    get_winner_by_token,
    submit_claim,
    winner_requires_w9,
)
from services.entries import EntryValidationError, create_entry, is_accepting_entries
from utils.case import iso, row_to_camel
from utils.dates import utc_now
from utils.responses import success
from utils.uploads import read_limited

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/giveaways", tags=["giveaways-public"])
claim_page_router = APIRouter(tags=["giveaways-public"])

MSG_GIVEAWAY_NOT_FOUND = "Giveaway not found"

_PUBLIC_FIELDS = (
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
    "entry_type",
    "bonus_entries_enabled",
    "bonus_entry_count",
    "button_text",
    "button_color",
    "button_icon",
    "status",
)

_TRUTHY = ("true", "1", "on", "yes")


def _public_giveaway(g: Giveaway) -> dict[str, Any]:
    out = row_to_camel(g, _PUBLIC_FIELDS)
    out["restrictedStates"] = list(g.restricted_states or [])
    return out


def _as_bool(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in _TRUTHY


async def _as_document(upload: Optional[UploadFile]) -> Optional[ClaimDocument]:
    # Browsers send an empty part when no file was chosen
    if upload is None or not upload.filename:
        return None
    # Oversized files keep one byte past the limit so the size check still fails
    content = await read_limited(upload, settings.max_claim_file_bytes)
    if not content:
        return None
    return ClaimDocument(
        filename=upload.filename,
        content_type=upload.content_type or "application/octet-stream",
        content=content,
    )


@router.get("/public")
async def list_public_giveaways(slug: Optional[str] = Query(None), db: AsyncSession = Depends(get_db)):
    now = utc_now()
    if slug:
        result = await db.execute(select(Giveaway).where(Giveaway.slug == slug, Giveaway.archived.is_(False)))
        giveaway = result.scalar_one_or_none()
        if not giveaway or giveaway.status in ("draft", "cancelled"):
            raise HTTPException(status_code=404, detail=MSG_GIVEAWAY_NOT_FOUND)
        out = _public_giveaway(giveaway)
        out["winnerSelected"] = giveaway.winner_selected
        out["isAcceptingEntries"] = is_accepting_entries(giveaway, now) and not giveaway.winner_selected
        return success(out)

    result = await db.execute(
        select(Giveaway)
        .where(
            Giveaway.status == "active",
            Giveaway.archived.is_(False),
            Giveaway.winner_selected.is_(False),
        )
        .order_by(Giveaway.end_date)
    )
    giveaways = [g for g in result.scalars().all() if is_accepting_entries(g, now)]
    return success([_public_giveaway(g) for g in giveaways])


@router.post("/enter", status_code=201)
async def enter_giveaway(body: EntryCreate, request: Request, db: AsyncSession = Depends(get_db)):
    if body.giveaway_id is None and not body.giveaway_slug:
        raise HTTPException(status_code=400, detail="Giveaway ID or slug is required")
    q = select(Giveaway).where(Giveaway.archived.is_(False))
    if body.giveaway_id is not None:
        q = q.where(Giveaway.id == body.giveaway_id)
    else:
        q = q.where(Giveaway.slug == body.giveaway_slug)
    giveaway = (await db.execute(q)).scalar_one_or_none()
    if not giveaway:
        raise HTTPException(status_code=404, detail=MSG_GIVEAWAY_NOT_FOUND)
    ip_address = request.headers.get("x-forwarded-for", "").split(",")[0].strip() or (
        request.client.host if request.client else None
    )
    try:
        entry = await create_entry(db, giveaway, body.model_dump(), ip_address=ip_address)
    except EntryValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    logger.info("Entry %s recorded for giveaway %s", entry.id, giveaway.id)
    return success(
        {"entryId": entry.id, "entryCount": entry.entry_count},
        message="You're entered! Good luck!",
    )


@router.get("/claim")
async def get_claim_status(token: Optional[str] = Query(None), db: AsyncSession = Depends(get_db)):
    if not token:
        raise HTTPException(status_code=400, detail="Token is required")
    winner = await get_winner_by_token(db, token)
    if not winner:
        raise HTTPException(status_code=404, detail="Invalid claim token")
    g = winner.giveaway
    claim = winner.prize_claim
    return success(
        {
            "claimed": winner.claimed_at is not None,
            "claimedAt": iso(winner.claimed_at),
            "claimDeadline": iso(winner.claim_deadline),
            "giveaway": {"id": g.id, "title": g.title, "slug": g.slug},
            "prize": {"title": g.prize_title, "value": g.prize_value},
            "verified": claim.verified if claim else False,
            "fulfillmentStatus": claim.fulfillment_status if claim else None,
        }
    )


@router.post("/claim")
async def post_claim(
    token: Optional[str] = Form(None),
    winner_id: Optional[str] = Form(None, alias="winnerId"),
    legal_name: Optional[str] = Form(None, alias="legalName"),
    address_line1: Optional[str] = Form(None, alias="addressLine1"),
    address_line2: Optional[str] = Form(None, alias="addressLine2"),
    city: Optional[str] = Form(None),
    state: Optional[str] = Form(None),
    zip_code: Optional[str] = Form(None, alias="zipCode"),
    agree_terms: Optional[str] = Form(None, alias="agreeTerms"),
    confirm_identity: Optional[str] = Form(None, alias="confirmIdentity"),
    w9_document: Optional[UploadFile] = File(None, alias="w9Document"),
    id_document: Optional[UploadFile] = File(None, alias="idDocument"),
    db: AsyncSession = Depends(get_db),
):
    if not token or not winner_id:
        raise HTTPException(status_code=400, detail="Token and winner ID are required")
    try:
        winner_pk = int(winner_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid winner ID")

    form = ClaimForm(
        legal_name=legal_name or "",
        address_line1=address_line1 or "",
        address_line2=address_line2,
        city=city or "",
        state=state or "",
        zip_code=zip_code or "",
        agree_terms=_as_bool(agree_terms),
        confirm_identity=_as_bool(confirm_identity),
        w9_document=await _as_document(w9_document),
        id_document=await _as_document(id_document),
    )
    try:
        claim = await submit_claim(db, token, winner_pk, form)
    except ClaimNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ClaimTokenMismatchError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except (ClaimClosedError, ClaimValidationError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"success": True, "message": "Prize claim submitted successfully", "claimId": claim.id}


@claim_page_router.get("/claim/{token}")
async def claim_page(token: str, db: AsyncSession = Depends(get_db)):
    """Everything the public claim page needs to decide between form, expired and claimed views."""
    winner = await get_winner_by_token(db, token)
    if not winner:
        raise HTTPException(status_code=404, detail="Claim not found")
    g = winner.giveaway
    status = resolve_claim_state(winner.claimed_at, winner.claim_deadline)
    claim = winner.prize_claim
    entry = winner.entry
    return success(
        {
            "state": status.state.value,
            "isAlreadyClaimed": status.is_already_claimed,
            "isExpired": status.is_expired,
            "canSubmit": status.can_submit,
            "requiresW9": winner_requires_w9(winner),
            "requireId": bool(g.require_id),
            "winner": {
                "id": winner.id,
                "winnerType": winner.winner_type,
                "status": winner.status,
                "firstName": entry.first_name if entry else None,
                "claimDeadline": iso(winner.claim_deadline),
                "claimedAt": iso(winner.claimed_at),
            },
            "giveaway": {
                "title": g.title,
                "slug": g.slug,
                "prizeTitle": g.prize_title,
                "prizeValue": g.prize_value,
                "prizeDescription": g.prize_description,
                "prizeImage": g.prize_image,
                "deliveryMethod": g.delivery_method,
            },
            "prizeClaim": {"verified": claim.verified, "fulfillmentStatus": claim.fulfillment_status}
            if claim
            else None,
        }
    )
