"""
Public giveaway entry: validates an entrant against the giveaway's entry policy
and records one entry (plus bonus entries) per email/phone.
"""
from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from models import Giveaway, GiveawayEntry
from utils.dates import as_utc

US_STATES = frozenset(
    """AL AK AZ AR CA CO CT DE FL GA HI ID IL IN IA KS KY LA ME MD MA MI MN MS MO MT NE NV NH NJ
    NM NY NC ND OH OK OR PA RI SC SD TN TX UT VT VA WA WV WI WY DC""".split()
)

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MSG_ALREADY_ENTERED = "You have already entered this giveaway!"


class EntryValidationError(ValueError):
    pass


def normalize_phone(phone: str) -> str:
    """Keep the last 10 digits."""
    return re.sub(r"\D", "", phone or "")[-10:]


def is_valid_email(email: str) -> bool:
    return bool(_EMAIL_RE.match(email or ""))


def is_accepting_entries(giveaway: Giveaway, now: datetime | None = None) -> bool:
    now = as_utc(now or datetime.now(timezone.utc))
    return (
        giveaway.status == "active"
        and as_utc(giveaway.start_date) <= now <= as_utc(giveaway.end_date)
    )


def _bonus_entries(giveaway: Giveaway, entry_type: str, secondary: str | None) -> int:
    """Extra entries for supplying the contact method the giveaway doesn't require."""
    if not secondary or not giveaway.bonus_entries_enabled:
        return 0
    if entry_type == "phone" and is_valid_email(secondary.lower()):
        return giveaway.bonus_entry_count or 1
    if entry_type == "email" and len(normalize_phone(secondary)) == 10:
        return giveaway.bonus_entry_count or 1
    return 0


async def create_entry(
    session: AsyncSession,
    giveaway: Giveaway,
    data: dict[str, Any],
    ip_address: str | None = None,
    now: datetime | None = None,
) -> GiveawayEntry:
    entry_type = giveaway.entry_type or "both"
    first_name = (data.get("first_name") or "").strip()
    last_name = (data.get("last_name") or "").strip()
    state = (data.get("state") or "").strip().upper()
    phone = data.get("phone") or ""
    email = data.get("email") or ""

    if not first_name or not last_name or not state:
        raise EntryValidationError("First name, last name, and state are required")
    if entry_type in ("phone", "both") and not phone:
        raise EntryValidationError("Phone number is required")
    if entry_type in ("email", "both") and not email:
        raise EntryValidationError("Email is required")

    normalized_phone = ""
    if phone:
        normalized_phone = normalize_phone(phone)
        if len(normalized_phone) != 10:
            raise EntryValidationError("Invalid phone number. Please enter a 10-digit US phone number")
    normalized_email = ""
    if email:
        normalized_email = email.strip().lower()
        if not is_valid_email(normalized_email):
            raise EntryValidationError("Invalid email format")

    if state not in US_STATES:
        raise EntryValidationError("Invalid state. Please select a valid US state")
    if not data.get("agreed_to_rules"):
        raise EntryValidationError("You must agree to the official rules to enter")

    now = as_utc(now or datetime.now(timezone.utc))
    if giveaway.status != "active":
        raise EntryValidationError("This giveaway is not currently accepting entries")
    if now < as_utc(giveaway.start_date):
        raise EntryValidationError("This giveaway has not started yet")
    if now > as_utc(giveaway.end_date):
        raise EntryValidationError("This giveaway has ended")
    if state in (giveaway.restricted_states or []):
        raise EntryValidationError("Sorry, this giveaway is not available in your state")

    dupes = []
    if normalized_email:
        dupes.append(GiveawayEntry.email == normalized_email)
    if normalized_phone:
        dupes.append(GiveawayEntry.phone == normalized_phone)
    existing = await session.execute(
        select(GiveawayEntry.id).where(GiveawayEntry.giveaway_id == giveaway.id, or_(*dupes)).limit(1)
    )
    if existing.scalar_one_or_none() is not None:
        raise EntryValidationError(MSG_ALREADY_ENTERED)

    bonus = _bonus_entries(giveaway, entry_type, data.get("secondary_contact"))
    entry = GiveawayEntry(
        giveaway_id=giveaway.id,
        first_name=first_name,
        last_name=last_name,
        email=normalized_email or None,
        phone=normalized_phone or None,
        state=state,
        zip_code=data.get("zip_code") or None,
        sms_opt_in=bool(data.get("sms_opt_in")),
        agreed_to_rules=True,
        entry_count=1 + bonus,
        bonus_claimed=bonus > 0,
        ip_address=ip_address,
        entry_source=data.get("entry_source") or "website",
    )
    session.add(entry)
    await session.flush()
    return entry
