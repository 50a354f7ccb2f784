from sqlalchemy import Boolean, Column, DateTime, Integer, JSON, String, func

from database import Base


class MenuItem(Base):
    """Top-level site navigation entry. Stored order is the admin's array order."""

    __tablename__ = "menu_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    label = Column(String(128), nullable=False)
    url = Column(String(512), nullable=False)
    open_in_new_tab = Column(Boolean, nullable=False, default=False)
    enabled = Column(Boolean, nullable=False, default=True)
    show_on_desktop = Column(Boolean, nullable=False, default=True)
    show_on_mobile_bar = Column(Boolean, nullable=False, default=False)
    show_in_hamburger = Column(Boolean, nullable=False, default=True)
    # Ordered dropdown entries: [{label, url, open_in_new_tab, enabled}]
    children = Column(JSON, nullable=False, default=list)
    position = Column(Integer, nullable=False, default=0, index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)


class MobileMenuButton(Base):
    __tablename__ = "mobile_menu_buttons"

    id = Column(Integer, primary_key=True, autoincrement=True)
    label = Column(String(128), nullable=False)
    url = Column(String(512), nullable=False)
    icon = Column(String(64), nullable=True)
    button_type = Column(String(32), nullable=False, default="outline")
    background_color = Column(String(32), nullable=False, default="#ffffff")
    text_color = Column(String(32), nullable=False, default="#0f2e71")
    border_color = Column(String(32), nullable=False, default="#0f2e71")
    position = Column(Integer, nullable=False, default=0, index=True)
    is_active = Column(Boolean, nullable=False, default=True)
