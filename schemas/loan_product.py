from typing import Optional

from pydantic import Field

from schemas.common import CamelModel, DisplayOrderItem


class ArticleSection(CamelModel):
    heading: str
    content: str


class ArticleFaq(CamelModel):
    question: str
    answer: str


class LoanProductFields(CamelModel):
    name: Optional[str] = None
    slug: Optional[str] = None
    tagline: Optional[str] = None
    description: Optional[str] = None
    icon_name: Optional[str] = None
    highlights: Optional[list[str]] = None
    best_for: Optional[str] = None
    down_payment: Optional[str] = None
    credit_score: Optional[str] = None
    is_active: Optional[bool] = None
    primary_button_text: Optional[str] = None
    primary_button_link: Optional[str] = None
    primary_button_style: Optional[str] = None
    secondary_button_text: Optional[str] = None
    secondary_button_link: Optional[str] = None
    secondary_button_style: Optional[str] = None
    show_secondary_button: Optional[bool] = None
    hero_image: Optional[str] = None
    article_intro: Optional[str] = None
    article_sections: Optional[list[ArticleSection]] = None
    article_requirements: Optional[list[str]] = None
    article_faqs: Optional[list[ArticleFaq]] = None


class LoanProductCreate(LoanProductFields):
    name: str


class LoanProductPut(LoanProductFields):
    """Either a single-product update (id + fields) or a reorder (reorder=true + items)."""

    id: Optional[int] = None
    reorder: bool = False
    items: Optional[list[DisplayOrderItem]] = None


class WidgetFields(CamelModel):
    widget_type: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    button_text: Optional[str] = None
    button_link: Optional[str] = None
    icon_name: Optional[str] = None
    icon_color: Optional[str] = None
    partner_name: Optional[str] = None
    partner_company: Optional[str] = None
    partner_email: Optional[str] = None
    partner_phone: Optional[str] = None
    show_on_mobile: Optional[bool] = None
    show_on_desktop: Optional[bool] = None
    is_active: Optional[bool] = None


class WidgetCreate(WidgetFields):
    widget_type: str = Field(..., description="e.g. 'cta', 'partner', 'calculator'")


class WidgetPut(WidgetFields):
    id: Optional[int] = None
    reorder: bool = False
    items: Optional[list[DisplayOrderItem]] = None


class LoanPageSettingsUpdate(CamelModel):
    hero_title: Optional[str] = None
    hero_description: Optional[str] = None
    show_jump_pills: Optional[bool] = None
    bottom_cta_title: Optional[str] = None
    bottom_cta_description: Optional[str] = None
