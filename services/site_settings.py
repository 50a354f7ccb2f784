"""
Singleton settings documents (about page, header, site, meta landing page).

Documents are stored camelCase as the admin UI sends them. A key with no row
yet reads as its default (None for header/site, which have no stock content).
"""
from __future__ import annotations

import copy
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from models import SiteSetting

ABOUT_DEFAULTS: dict[str, Any] = {
    "heroTitle": "About American Mortgage",
    "heroSubtitle": "Your trusted Arkansas mortgage broker, dedicated to making homeownership accessible for everyone.",
    "missionTitle": "Our Mission",
    "missionContent": (
        "American Mortgage was founded with a clear purpose: to simplify the home buying process and make it "
        "accessible to everyone. We combine industry expertise with personalized service to guide you toward "
        "the right loan for your situation."
    ),
    "whatWeDoTitle": "What We Do",
    "whatWeDoContent": (
        "We offer a full range of mortgage products including FHA, VA, USDA, and Conventional loans. Our team "
        "specializes in helping first-time homebuyers, veterans, and families across Arkansas find financing "
        "solutions that fit their needs."
    ),
    "whatWeDoItems": [
        "Purchase and refinance loans",
        "Down payment assistance programs",
        "Fast pre-approvals",
        "Competitive rates and terms",
    ],
    "approachTitle": "Our Approach",
    "approachItems": [
        {"title": "Transparent", "description": "Clear communication and no hidden fees. We explain every step of the process.", "icon": "eye"},
        {"title": "Responsive", "description": "We return calls and emails promptly. Your questions deserve quick answers.", "icon": "lightning"},
        {"title": "Efficient", "description": "Streamlined processes to get you from application to closing without delays.", "icon": "clock"},
    ],
    "contactTitle": "Contact Us",
    "contactName": "American Mortgage",
    "contactNmls": "#2676687",
    "contactPhone": "(870) 926-4052",
    "contactEmail": "hello@americanmtg.com",
    "contactAddress": "122 CR 7185, Jonesboro, AR 72405",
    "contactImage": "/images/am-logo-white.png",
    "ctaText": "Start Your Application",
    "ctaUrl": "/apply",
}

META_LANDING_DEFAULTS: dict[str, Any] = {
    "noticeEnabled": True,
    "headerDesktopEnabled": True,
    "headerMobileEnabled": True,
    "headerLogoCenteredMobile": False,
    "menuEnabled": True,
    "menuItems": [],
    "applyButton": {
        "desktopEnabled": True,
        "mobileEnabled": True,
        "iconEnabled": True,
        "text": "Apply Now",
        "url": "/apply",
        "color": "#d93c37",
        "textColor": "#ffffff",
    },
    "heading": {"line1": "Find Out", "line2": "Your Homebuying", "line3": "Budget Today"},
    "description": (
        "Complete this quick pre-application to get a clear picture of your budget and start shopping "
        "for homes with confidence."
    ),
    "ctaButton": {
        "enabled": True,
        "iconEnabled": True,
        "text": "Check My Budget",
        "url": "/apply",
        "color": "#d93c37",
        "textColor": "#ffffff",
    },
}

SETTING_DEFAULTS: dict[str, dict[str, Any] | None] = {
    "about": ABOUT_DEFAULTS,
    "header": None,
    "site": None,
    "meta-landing": META_LANDING_DEFAULTS,
}

# Keys readable without the admin key
PUBLIC_SETTING_KEYS = ("about", "meta-landing", "site")


def is_known_key(key: str) -> bool:
    return key in SETTING_DEFAULTS


async def get_setting(session: AsyncSession, key: str) -> dict[str, Any] | None:
    row = await session.get(SiteSetting, key)
    if row is not None:
        return row.value
    default = SETTING_DEFAULTS[key]
    return copy.deepcopy(default) if default is not None else None


async def update_setting(session: AsyncSession, key: str, patch: dict[str, Any]) -> dict[str, Any]:
    """Shallow-merge `patch` over the current document (or defaults) and store it."""
    result = await session.execute(select(SiteSetting).where(SiteSetting.key == key))
    row = result.scalar_one_or_none()
    base = row.value if row is not None else (copy.deepcopy(SETTING_DEFAULTS[key]) or {})
    merged = {**base, **patch}
    if row is None:
        row = SiteSetting(key=key, value=merged)
        session.add(row)
    else:
        # new dict so the JSON column registers the change
        row.value = merged
    await session.flush()
    return merged
