"""
Prize claim validation and persistence.

validate_claim_form() is shared by the API and the claim client so both reject
the same submissions with the same messages.
"""
from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from config import settings
from models import GiveawayWinner, PrizeClaim
from services.claim_state import ClaimState, requires_w9, resolve_claim_state

logger = logging.getLogger(__name__)

ALLOWED_DOCUMENT_TYPES = ("application/pdf", "image/jpeg", "image/png")

MSG_REQUIRED_FIELDS = "Please fill in all required fields."
MSG_AGREEMENTS = "You must agree to the terms and confirm your identity."
MSG_W9_REQUIRED = "W-9 form is required for this prize."


class ClaimValidationError(ValueError):
    """Form problem the claimant can fix. `field` names the offending input, if any."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class ClaimNotFoundError(LookupError):
    pass


class ClaimTokenMismatchError(PermissionError):
    pass


class ClaimClosedError(ValueError):
    """Winner already claimed or the claim window has closed."""


@dataclass
class ClaimDocument:
    filename: str
    content_type: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass
class ClaimForm:
    legal_name: str = ""
    address_line1: str = ""
    address_line2: str | None = None
    city: str = ""
    state: str = ""
    zip_code: str = ""
    agree_terms: bool = False
    confirm_identity: bool = False
    w9_document: ClaimDocument | None = None
    id_document: ClaimDocument | None = None


# field name -> label used in messages
_DOCUMENT_LABELS = {"w9_document": "W-9", "id_document": "ID"}


def check_document(doc: ClaimDocument, field: str, max_bytes: int | None = None) -> None:
    """Reject anything that is not a PDF/JPEG/PNG or is over the size limit."""
    max_bytes = max_bytes if max_bytes is not None else settings.max_claim_file_bytes
    label = _DOCUMENT_LABELS[field]
    if doc.content_type not in ALLOWED_DOCUMENT_TYPES:
        raise ClaimValidationError(f"{label} must be a PDF, JPG, or PNG file", field=field)
    if doc.size > max_bytes:
        raise ClaimValidationError(
            f"{label} file must be less than {max_bytes // (1024 * 1024)}MB", field=field
        )


def _check_required(form: ClaimForm) -> None:
    required = (form.legal_name, form.address_line1, form.city, form.state, form.zip_code)
    if not all(v and v.strip() for v in required):
        raise ClaimValidationError(MSG_REQUIRED_FIELDS)


def validate_claim_form(form: ClaimForm, w9_required: bool, max_bytes: int | None = None) -> None:
    _check_required(form)
    if not (form.agree_terms and form.confirm_identity):
        raise ClaimValidationError(MSG_AGREEMENTS)
    for field in ("w9_document", "id_document"):
        doc = getattr(form, field)
        if doc is not None:
            check_document(doc, field, max_bytes)
    if w9_required and form.w9_document is None:
        raise ClaimValidationError(MSG_W9_REQUIRED, field="w9_document")


async def get_winner_by_token(session: AsyncSession, token: str) -> GiveawayWinner | None:
    result = await session.execute(
        select(GiveawayWinner)
        .options(
            selectinload(GiveawayWinner.giveaway),
            selectinload(GiveawayWinner.entry),
            selectinload(GiveawayWinner.prize_claim),
        )
        .where(GiveawayWinner.claim_token == token)
    )
    return result.scalar_one_or_none()


def winner_requires_w9(winner: GiveawayWinner) -> bool:
    g = winner.giveaway
    return requires_w9(g.require_w9, g.prize_value, g.w9_threshold)


def _save_document(winner_id: int, doc: ClaimDocument, prefix: str) -> str:
    """Write to the private claims dir; return the path relative to it."""
    ext = Path(doc.filename or "").suffix.lower() or ".pdf"
    name = f"{prefix}-{secrets.token_hex(8)}{ext}"
    target_dir = Path(settings.claims_upload_dir) / str(winner_id)
    target_dir.mkdir(parents=True, exist_ok=True)
    (target_dir / name).write_bytes(doc.content)
    return f"{winner_id}/{name}"


async def submit_claim(
    session: AsyncSession,
    token: str,
    winner_id: int,
    form: ClaimForm,
    now: datetime | None = None,
) -> PrizeClaim:
    """
    Validate and record a prize claim. Exactly one claim per winner: once
    claimed_at is set every later submission fails with ClaimClosedError.
    """
    now = now or datetime.now(timezone.utc)
    # Incomplete forms are rejected before the token is looked up
    _check_required(form)
    winner = await get_winner_by_token(session, token)
    if winner is None:
        raise ClaimNotFoundError("Invalid claim token")
    if winner.id != winner_id:
        raise ClaimTokenMismatchError("Token does not match winner")

    status = resolve_claim_state(winner.claimed_at, winner.claim_deadline, now)
    if status.state is ClaimState.CLAIMED:
        raise ClaimClosedError("Prize has already been claimed")
    if status.state is ClaimState.EXPIRED:
        raise ClaimClosedError("Claim deadline has passed")

    validate_claim_form(form, winner_requires_w9(winner))

    w9_path = _save_document(winner.id, form.w9_document, "w9") if form.w9_document else None
    id_path = _save_document(winner.id, form.id_document, "id") if form.id_document else None

    claim = PrizeClaim(
        winner_id=winner.id,
        legal_name=form.legal_name.strip(),
        address_line1=form.address_line1.strip(),
        address_line2=(form.address_line2 or "").strip() or None,
        city=form.city.strip(),
        state=form.state.strip(),
        zip_code=form.zip_code.strip(),
        w9_document=w9_path,
        id_document=id_path,
        fulfillment_status="pending",
    )
    session.add(claim)
    winner.claimed_at = now
    winner.status = "claimed"
    await session.flush()
    logger.info("Prize claim %s recorded for winner %s (giveaway %s)", claim.id, winner.id, winner.giveaway_id)
    return claim
