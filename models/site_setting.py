from sqlalchemy import Column, DateTime, JSON, String, func

from database import Base


class SiteSetting(Base):
    """Singleton settings document (about page, header, site, meta landing) keyed by name."""

    __tablename__ = "site_settings"

    key = Column(String(64), primary_key=True)
    # camelCase document, returned to the admin UI as-is
    value = Column(JSON, nullable=False, default=dict)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
