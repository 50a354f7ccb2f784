from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    JSON,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import relationship

from database import Base

GIVEAWAY_STATUSES = ("draft", "active", "ended", "cancelled")
ALTERNATE_SELECTIONS = ("auto", "manual")
ENTRY_TYPES = ("phone", "email", "both")
DELIVERY_METHODS = ("email", "physical")
WINNER_STATUSES = ("pending", "notified", "claimed", "forfeited", "disqualified")
FULFILLMENT_STATUSES = ("pending", "fulfilled")


class Giveaway(Base):
    __tablename__ = "giveaways"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(256), nullable=False)
    slug = Column(String(256), unique=True, nullable=False, index=True)
    description = Column(Text, nullable=True)
    rules = Column(Text, nullable=True)

    prize_title = Column(String(256), nullable=False)
    prize_value = Column(Numeric(12, 2, asdecimal=False), nullable=True)
    prize_description = Column(Text, nullable=True)
    prize_image = Column(String(512), nullable=True)
    detail_image = Column(String(512), nullable=True)

    start_date = Column(DateTime(timezone=True), nullable=False)
    end_date = Column(DateTime(timezone=True), nullable=False)
    drawing_date = Column(DateTime(timezone=True), nullable=True)

    num_winners = Column(Integer, nullable=False, default=1)
    alternate_winners = Column(Integer, nullable=False, default=3)
    alternate_selection = Column(String(16), nullable=False, default="auto")

    require_w9 = Column(Boolean, nullable=False, default=False)
    w9_threshold = Column(Numeric(12, 2, asdecimal=False), nullable=False, default=600)
    # Two-letter state codes where entry is not allowed
    restricted_states = Column(JSON, nullable=False, default=list)

    entry_type = Column(String(16), nullable=False, default="both")
    bonus_entries_enabled = Column(Boolean, nullable=False, default=False)
    bonus_entry_count = Column(Integer, nullable=False, default=1)
    require_id = Column(Boolean, nullable=False, default=False)
    delivery_method = Column(String(16), nullable=False, default="email")

    button_text = Column(String(128), nullable=False, default="Enter Now")
    button_color = Column(String(32), nullable=False, default="#2563eb")
    button_icon = Column(String(64), nullable=False, default="ticket")

    status = Column(String(16), nullable=False, default="draft", index=True)
    winner_selected = Column(Boolean, nullable=False, default=False)
    archived = Column(Boolean, nullable=False, default=False)
    deleted_at = Column(DateTime(timezone=True), nullable=True)
    position = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    entries = relationship("GiveawayEntry", back_populates="giveaway", cascade="all, delete-orphan")
    winners = relationship("GiveawayWinner", back_populates="giveaway", cascade="all, delete-orphan")


class GiveawayEntry(Base):
    __tablename__ = "giveaway_entries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    giveaway_id = Column(Integer, ForeignKey("giveaways.id", ondelete="CASCADE"), nullable=False, index=True)
    first_name = Column(String(128), nullable=False)
    last_name = Column(String(128), nullable=False)
    email = Column(String(256), nullable=True, index=True)
    phone = Column(String(16), nullable=True, index=True)
    state = Column(String(2), nullable=False)
    zip_code = Column(String(10), nullable=True)
    sms_opt_in = Column(Boolean, nullable=False, default=False)
    agreed_to_rules = Column(Boolean, nullable=False, default=False)
    entry_count = Column(Integer, nullable=False, default=1)
    bonus_claimed = Column(Boolean, nullable=False, default=False)
    is_valid = Column(Boolean, nullable=False, default=True)
    invalidation_reason = Column(Text, nullable=True)
    ip_address = Column(String(64), nullable=True)
    entry_source = Column(String(64), nullable=False, default="website")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    giveaway = relationship("Giveaway", back_populates="entries")


class GiveawayWinner(Base):
    __tablename__ = "giveaway_winners"

    id = Column(Integer, primary_key=True, autoincrement=True)
    giveaway_id = Column(Integer, ForeignKey("giveaways.id", ondelete="CASCADE"), nullable=False, index=True)
    entry_id = Column(Integer, ForeignKey("giveaway_entries.id", ondelete="CASCADE"), nullable=False)
    winner_type = Column(String(16), nullable=False, default="primary")
    alternate_order = Column(Integer, nullable=True)
    status = Column(String(16), nullable=False, default="pending")
    claim_token = Column(String(64), unique=True, nullable=False, index=True)
    claim_deadline = Column(DateTime(timezone=True), nullable=True)
    claimed_at = Column(DateTime(timezone=True), nullable=True)
    notified_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    giveaway = relationship("Giveaway", back_populates="winners")
    entry = relationship("GiveawayEntry")
    prize_claim = relationship("PrizeClaim", back_populates="winner", uselist=False, cascade="all, delete-orphan")


class PrizeClaim(Base):
    __tablename__ = "prize_claims"
    __table_args__ = (UniqueConstraint("winner_id", name="uq_prize_claims_winner_id"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    winner_id = Column(Integer, ForeignKey("giveaway_winners.id", ondelete="CASCADE"), nullable=False, index=True)
    legal_name = Column(String(256), nullable=False)
    address_line1 = Column(String(256), nullable=False)
    address_line2 = Column(String(256), nullable=True)
    city = Column(String(128), nullable=False)
    state = Column(String(64), nullable=False)
    zip_code = Column(String(10), nullable=False)
    # Paths relative to the private claims directory, never served publicly
    w9_document = Column(String(512), nullable=True)
    id_document = Column(String(512), nullable=True)
    verified = Column(Boolean, nullable=False, default=False)
    fulfillment_status = Column(String(16), nullable=False, default="pending")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    winner = relationship("GiveawayWinner", back_populates="prize_claim")
