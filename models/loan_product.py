from sqlalchemy import Boolean, Column, DateTime, Integer, JSON, String, Text, func

from database import Base


class LoanProduct(Base):
    __tablename__ = "loan_products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(256), nullable=False)
    slug = Column(String(256), unique=True, nullable=False, index=True)
    tagline = Column(String(512), nullable=True)
    description = Column(Text, nullable=True)
    icon_name = Column(String(64), nullable=False, default="home")
    # Ordered list of short bullet strings
    highlights = Column(JSON, nullable=False, default=list)
    best_for = Column(String(512), nullable=True)
    down_payment = Column(String(128), nullable=True)
    credit_score = Column(String(128), nullable=True)
    display_order = Column(Integer, nullable=False, default=0, index=True)
    is_active = Column(Boolean, nullable=False, default=True)

    primary_button_text = Column(String(128), nullable=False, default="Apply Now")
    primary_button_link = Column(String(512), nullable=False, default="/apply")
    primary_button_style = Column(String(32), nullable=False, default="filled")
    secondary_button_text = Column(String(128), nullable=False, default="Call to Learn More")
    secondary_button_link = Column(String(512), nullable=False, default="tel:870-926-4052")
    secondary_button_style = Column(String(32), nullable=False, default="outline")
    show_secondary_button = Column(Boolean, nullable=False, default=True)

    # Long-form article (loan detail page)
    hero_image = Column(String(512), nullable=True)
    article_intro = Column(Text, nullable=True)
    article_sections = Column(JSON, nullable=False, default=list)
    article_requirements = Column(JSON, nullable=False, default=list)
    article_faqs = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)


class LoanPageWidget(Base):
    __tablename__ = "loan_page_widgets"

    id = Column(Integer, primary_key=True, autoincrement=True)
    widget_type = Column(String(64), nullable=False)
    title = Column(String(256), nullable=True)
    description = Column(Text, nullable=True)
    button_text = Column(String(128), nullable=True)
    button_link = Column(String(512), nullable=True)
    icon_name = Column(String(64), nullable=True)
    icon_color = Column(String(32), nullable=True)
    partner_name = Column(String(256), nullable=True)
    partner_company = Column(String(256), nullable=True)
    partner_email = Column(String(256), nullable=True)
    partner_phone = Column(String(64), nullable=True)
    display_order = Column(Integer, nullable=False, default=0, index=True)
    show_on_mobile = Column(Boolean, nullable=False, default=True)
    show_on_desktop = Column(Boolean, nullable=False, default=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)


class LoanPageSettings(Base):
    """Singleton row (id=1) holding the loans index page copy."""

    __tablename__ = "loan_page_settings"

    id = Column(Integer, primary_key=True)
    hero_title = Column(String(256), nullable=False, default="Loan Programs")
    hero_description = Column(
        Text,
        nullable=False,
        default="Explore mortgage options for every stage of homeownership.",
    )
    show_jump_pills = Column(Boolean, nullable=False, default=True)
    bottom_cta_title = Column(String(256), nullable=False, default="Not sure which loan is right for you?")
    bottom_cta_description = Column(
        Text,
        nullable=False,
        default="Talk to a loan officer and we'll walk you through your options.",
    )
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
