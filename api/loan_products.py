from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db
from dependencies import require_admin
from models import LoanProduct
from schemas.loan_product import LoanProductCreate, LoanProductPut
from services.reorder import apply_display_order
from utils.case import dict_keys_to_camel, row_to_camel
from utils.responses import success
from utils.slug import slugify

router = APIRouter(prefix="/api/loan-products", tags=["loan-products"])

MSG_PRODUCT_NOT_FOUND = "Loan product not found"

# Fields a PUT may clear with an explicit null; list fields reset to []
_NULLABLE_FIELDS = frozenset(
    ("tagline", "description", "best_for", "down_payment", "credit_score", "hero_image", "article_intro")
)
_LIST_FIELDS = ("highlights", "article_sections", "article_requirements", "article_faqs")

_FIELDS = (
    "id",
    "name",
    "slug",
    "tagline",
    "description",
    "icon_name",
    "highlights",
    "best_for",
    "down_payment",
    "credit_score",
    "display_order",
    "is_active",
    "primary_button_text",
    "primary_button_link",
    "primary_button_style",
    "secondary_button_text",
    "secondary_button_link",
    "secondary_button_style",
    "show_secondary_button",
    "hero_image",
    "article_intro",
    "article_requirements",
    "created_at",
    "updated_at",
)


def _product_to_response(p: LoanProduct) -> dict[str, Any]:
    out = row_to_camel(p, _FIELDS)
    out["highlights"] = list(p.highlights or [])
    out["articleSections"] = dict_keys_to_camel(p.article_sections or [])
    out["articleFaqs"] = dict_keys_to_camel(p.article_faqs or [])
    return out


async def _unique_slug(db: AsyncSession, base: str, exclude_id: Optional[int] = None) -> str:
    slug = base or "loan"
    n = 2
    while True:
        q = select(LoanProduct.id).where(LoanProduct.slug == slug)
        if exclude_id is not None:
            q = q.where(LoanProduct.id != exclude_id)
        if (await db.execute(q)).scalar_one_or_none() is None:
            return slug
        slug = f"{base}-{n}"
        n += 1


@router.get("")
async def list_loan_products(active: Optional[bool] = Query(None), db: AsyncSession = Depends(get_db)):
    q = select(LoanProduct).order_by(LoanProduct.display_order, LoanProduct.id)
    if active is not None:
        q = q.where(LoanProduct.is_active.is_(active))
    products = (await db.execute(q)).scalars().all()
    return success([_product_to_response(p) for p in products])


@router.get("/{slug}")
async def get_loan_product(slug: str, db: AsyncSession = Depends(get_db)):
    result = await db.execute(select(LoanProduct).where(LoanProduct.slug == slug))
    product = result.scalar_one_or_none()
    if not product:
        raise HTTPException(status_code=404, detail=MSG_PRODUCT_NOT_FOUND)
    return success(_product_to_response(product))


@router.post("", status_code=201, dependencies=[Depends(require_admin)])
async def create_loan_product(body: LoanProductCreate, db: AsyncSession = Depends(get_db)):
    data = body.changes()
    max_order = (await db.execute(select(func.max(LoanProduct.display_order)))).scalar()
    data["slug"] = await _unique_slug(db, slugify(data.get("slug") or body.name))
    data["display_order"] = (max_order or 0) + 1
    # Explicit None from the client falls back to column defaults
    product = LoanProduct(**{k: v for k, v in data.items() if v is not None})
    db.add(product)
    await db.flush()
    await db.refresh(product)
    return success(_product_to_response(product))


@router.put("", dependencies=[Depends(require_admin)])
async def update_loan_products(body: LoanProductPut, db: AsyncSession = Depends(get_db)):
    if body.reorder:
        if body.items is None:
            raise HTTPException(status_code=400, detail="items array is required")
        ids = [item.id for item in body.items]
        rows = (await db.execute(select(LoanProduct).where(LoanProduct.id.in_(ids)))).scalars().all()
        apply_display_order(rows, [item.model_dump() for item in body.items])
        await db.flush()
        return success()

    if body.id is None:
        raise HTTPException(status_code=400, detail="ID is required")
    product = await db.get(LoanProduct, body.id)
    if not product:
        raise HTTPException(status_code=404, detail=MSG_PRODUCT_NOT_FOUND)

    changes = body.changes()
    for key in ("id", "reorder", "items"):
        changes.pop(key, None)
    if "slug" in changes:
        changes["slug"] = await _unique_slug(db, slugify(changes["slug"] or product.name), exclude_id=product.id)
    for key, value in changes.items():
        if value is None and key in _LIST_FIELDS:
            value = []
        elif value is None and key not in _NULLABLE_FIELDS:
            continue
        setattr(product, key, value)
    await db.flush()
    await db.refresh(product)
    return success(_product_to_response(product))


@router.delete("", dependencies=[Depends(require_admin)])
async def delete_loan_product(id: Optional[int] = Query(None), db: AsyncSession = Depends(get_db)):
    if id is None:
        raise HTTPException(status_code=400, detail="ID is required")
    product = await db.get(LoanProduct, id)
    if not product:
        raise HTTPException(status_code=404, detail=MSG_PRODUCT_NOT_FOUND)
    await db.delete(product)
    await db.flush()
    return success()
