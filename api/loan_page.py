from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db
from dependencies import require_admin
from models import LoanPageSettings, LoanPageWidget
from schemas.loan_product import LoanPageSettingsUpdate, WidgetCreate, WidgetPut
from services.reorder import apply_display_order
from utils.case import row_to_camel
from utils.responses import success

widgets_router = APIRouter(prefix="/api/loan-page-widgets", tags=["loan-page"])
settings_router = APIRouter(prefix="/api/loan-page-settings", tags=["loan-page"])

MSG_WIDGET_NOT_FOUND = "Widget not found"

# widget_type and the visibility flags cannot be cleared
_REQUIRED_WIDGET_FIELDS = frozenset(("widget_type", "show_on_mobile", "show_on_desktop", "is_active"))

_WIDGET_FIELDS = (
    "id",
    "widget_type",
    "title",
    "description",
    "button_text",
    "button_link",
    "icon_name",
    "icon_color",
    "partner_name",
    "partner_company",
    "partner_email",
    "partner_phone",
    "display_order",
    "show_on_mobile",
    "show_on_desktop",
    "is_active",
    "created_at",
    "updated_at",
)

_SETTINGS_FIELDS = (
    "hero_title",
    "hero_description",
    "show_jump_pills",
    "bottom_cta_title",
    "bottom_cta_description",
    "updated_at",
)


def _widget_to_response(w: LoanPageWidget) -> dict[str, Any]:
    return row_to_camel(w, _WIDGET_FIELDS)


async def _get_or_create_settings(db: AsyncSession) -> LoanPageSettings:
    row = await db.get(LoanPageSettings, 1)
    if row is None:
        row = LoanPageSettings(id=1)
        db.add(row)
        await db.flush()
        await db.refresh(row)
    return row


@widgets_router.get("")
async def list_widgets(active: Optional[bool] = Query(None), db: AsyncSession = Depends(get_db)):
    q = select(LoanPageWidget).order_by(LoanPageWidget.display_order, LoanPageWidget.id)
    if active is not None:
        q = q.where(LoanPageWidget.is_active.is_(active))
    widgets = (await db.execute(q)).scalars().all()
    return success([_widget_to_response(w) for w in widgets])


@widgets_router.post("", status_code=201, dependencies=[Depends(require_admin)])
async def create_widget(body: WidgetCreate, db: AsyncSession = Depends(get_db)):
    data = {k: v for k, v in body.changes().items() if v is not None}
    max_order = (await db.execute(select(func.max(LoanPageWidget.display_order)))).scalar()
    widget = LoanPageWidget(**data, display_order=(max_order or 0) + 1)
    db.add(widget)
    await db.flush()
    await db.refresh(widget)
    return success(_widget_to_response(widget))


@widgets_router.put("", dependencies=[Depends(require_admin)])
async def update_widgets(body: WidgetPut, db: AsyncSession = Depends(get_db)):
    if body.reorder:
        if body.items is None:
            raise HTTPException(status_code=400, detail="items array is required")
        ids = [item.id for item in body.items]
        rows = (await db.execute(select(LoanPageWidget).where(LoanPageWidget.id.in_(ids)))).scalars().all()
        apply_display_order(rows, [item.model_dump() for item in body.items])
        await db.flush()
        return success()

    if body.id is None:
        raise HTTPException(status_code=400, detail="ID is required")
    widget = await db.get(LoanPageWidget, body.id)
    if not widget:
        raise HTTPException(status_code=404, detail=MSG_WIDGET_NOT_FOUND)
    changes = body.changes()
    for key in ("id", "reorder", "items"):
        changes.pop(key, None)
    for key, value in changes.items():
        if value is None and key in _REQUIRED_WIDGET_FIELDS:
            continue
        setattr(widget, key, value)
    await db.flush()
    await db.refresh(widget)
    return success(_widget_to_response(widget))


@widgets_router.delete("", dependencies=[Depends(require_admin)])
async def delete_widget(id: Optional[int] = Query(None), db: AsyncSession = Depends(get_db)):
    if id is None:
        raise HTTPException(status_code=400, detail="ID is required")
    widget = await db.get(LoanPageWidget, id)
    if not widget:
        raise HTTPException(status_code=404, detail=MSG_WIDGET_NOT_FOUND)
    await db.delete(widget)
    await db.flush()
    return success()


@settings_router.get("")
async def get_loan_page_settings(db: AsyncSession = Depends(get_db)):
    row = await _get_or_create_settings(db)
    return success(row_to_camel(row, _SETTINGS_FIELDS))


@settings_router.put("", dependencies=[Depends(require_admin)])
async def update_loan_page_settings(body: LoanPageSettingsUpdate, db: AsyncSession = Depends(get_db)):
    row = await _get_or_create_settings(db)
    for key, value in body.changes().items():
        if value is not None:
            setattr(row, key, value)
    await db.flush()
    await db.refresh(row)
    return success(row_to_camel(row, _SETTINGS_FIELDS))
