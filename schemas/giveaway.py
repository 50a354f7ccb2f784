from datetime import datetime
from typing import Optional

from pydantic import Field

from schemas.common import CamelModel


class GiveawayFields(CamelModel):
    title: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    rules: Optional[str] = None
    prize_title: Optional[str] = None
    prize_value: Optional[float] = Field(None, ge=0, description="USD; null means no stated value")
    prize_description: Optional[str] = None
    prize_image: Optional[str] = None
    detail_image: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    drawing_date: Optional[datetime] = None
    num_winners: Optional[int] = Field(None, ge=1)
    alternate_winners: Optional[int] = Field(None, ge=0)
    alternate_selection: Optional[str] = None
    require_w9: Optional[bool] = None
    w9_threshold: Optional[float] = Field(None, ge=0)
    restricted_states: Optional[list[str]] = None
    entry_type: Optional[str] = None
    bonus_entries_enabled: Optional[bool] = None
    bonus_entry_count: Optional[int] = Field(None, ge=0)
    require_id: Optional[bool] = None
    delivery_method: Optional[str] = None
    button_text: Optional[str] = None
    button_color: Optional[str] = None
    button_icon: Optional[str] = None
    status: Optional[str] = None


class GiveawayCreate(GiveawayFields):
    pass


class GiveawayUpdate(GiveawayFields):
    pass


class WinnerAction(CamelModel):
    winner_id: Optional[int] = None
    action: Optional[str] = None


class PrizeClaimUpdate(CamelModel):
    verified: Optional[bool] = None
    fulfillment_status: Optional[str] = None


class EntryCreate(CamelModel):
    giveaway_id: Optional[int] = None
    giveaway_slug: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    sms_opt_in: bool = False
    agreed_to_rules: bool = False
    entry_source: Optional[str] = None
    secondary_contact: Optional[str] = None


class EntryValidityUpdate(CamelModel):
    entry_id: Optional[int] = None
    is_valid: Optional[bool] = None
    invalidation_reason: Optional[str] = None
