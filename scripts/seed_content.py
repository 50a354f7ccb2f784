"""
Seed default loan programs, loans page copy and mobile menu buttons.
Safe to run repeatedly: existing rows are left alone.
Run: python -m scripts.seed_content [--reset] (from the project root).
"""
import asyncio
import logging
import os
import sys

# Add parent so we can import from the project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import func, select

from database import init_db, reset_db, session_scope
from models import LoanPageSettings, LoanProduct, MobileMenuButton

logger = logging.getLogger("scripts.seed_content")

LOAN_PRODUCTS_DATA = [
    {
        "name": "Conventional Loan",
        "slug": "conventional",
        "tagline": "Flexible financing for buyers with solid credit",
        "description": "Not backed by a government agency, with competitive rates and terms from 10 to 30 years.",
        "icon_name": "home",
        "highlights": ["As little as 3% down", "No upfront mortgage insurance", "PMI removable at 20% equity"],
        "best_for": "Borrowers with good credit and stable income",
        "down_payment": "3% - 20%",
        "credit_score": "620+",
    },
    {
        "name": "FHA Loan",
        "slug": "fha",
        "tagline": "Low down payment, flexible credit",
        "description": "Insured by the Federal Housing Administration and popular with first-time homebuyers.",
        "icon_name": "key",
        "highlights": ["3.5% down payment", "Gift funds allowed", "Flexible debt-to-income limits"],
        "best_for": "First-time buyers and borrowers rebuilding credit",
        "down_payment": "3.5%",
        "credit_score": "580+",
    },
    {
        "name": "VA Loan",
        "slug": "va",
        "tagline": "Zero down for those who served",
        "description": "Guaranteed by the Department of Veterans Affairs for eligible veterans and service members.",
        "icon_name": "shield",
        "highlights": ["No down payment", "No monthly mortgage insurance", "Limited closing costs"],
        "best_for": "Veterans, active duty and eligible surviving spouses",
        "down_payment": "0%",
        "credit_score": "580+",
    },
    {
        "name": "USDA Loan",
        "slug": "usda",
        "tagline": "Rural homeownership with no money down",
        "description": "Backed by the U.S. Department of Agriculture for homes in eligible rural and suburban areas.",
        "icon_name": "tree",
        "highlights": ["No down payment", "Low mortgage insurance", "Most of Arkansas qualifies"],
        "best_for": "Moderate-income buyers outside major metro areas",
        "down_payment": "0%",
        "credit_score": "620+",
    },
]

MOBILE_BUTTONS_DATA = [
    {"label": "Call Us", "url": "tel:870-926-4052", "icon": "phone", "button_type": "outline"},
    {
        "label": "Apply Now",
        "url": "/apply",
        "icon": "document",
        "button_type": "filled",
        "background_color": "#d93c37",
        "text_color": "#ffffff",
        "border_color": "#d93c37",
    },
]


async def seed(reset: bool = False):
    if reset:
        await reset_db()
    else:
        await init_db()
    async with session_scope() as session:
        max_order = (await session.execute(select(func.max(LoanProduct.display_order)))).scalar() or 0
        for data in LOAN_PRODUCTS_DATA:
            existing = await session.execute(select(LoanProduct).where(LoanProduct.slug == data["slug"]))
            if existing.scalar_one_or_none():
                logger.info("Loan product %s already exists, skipping", data["slug"])
                continue
            max_order += 1
            session.add(LoanProduct(**data, display_order=max_order))
            logger.info("Seeded loan product: %s", data["name"])

        if await session.get(LoanPageSettings, 1) is None:
            session.add(LoanPageSettings(id=1))
            logger.info("Seeded loans page settings")

        button_count = (await session.execute(select(func.count(MobileMenuButton.id)))).scalar()
        if not button_count:
            for position, data in enumerate(MOBILE_BUTTONS_DATA):
                session.add(MobileMenuButton(**data, position=position))
            logger.info("Seeded %d mobile menu buttons", len(MOBILE_BUTTONS_DATA))
    logger.info("Seed complete.")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    asyncio.run(seed(reset="--reset" in sys.argv[1:]))
