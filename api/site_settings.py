from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import ValidationError
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db
from dependencies import require_admin, security
from models import MenuItem, MobileMenuButton
from schemas.navigation import MobileButtonsPut, NavigationPut
from services.site_settings import PUBLIC_SETTING_KEYS, get_setting, is_known_key, update_setting
from utils.case import dict_keys_to_camel, row_to_camel
from utils.responses import success

router = APIRouter(prefix="/api/settings", tags=["settings"])

_MENU_FIELDS = (
    "id",
    "label",
    "url",
    "open_in_new_tab",
    "enabled",
    "show_on_desktop",
    "show_on_mobile_bar",
    "show_in_hamburger",
    "position",
)

_BUTTON_FIELDS = (
    "id",
    "label",
    "url",
    "icon",
    "button_type",
    "background_color",
    "text_color",
    "border_color",
    "position",
    "is_active",
)


def _menu_item_to_response(item: MenuItem) -> dict[str, Any]:
    out = row_to_camel(item, _MENU_FIELDS)
    out["children"] = dict_keys_to_camel(item.children or [])
    return out


def _button_to_response(b: MobileMenuButton) -> dict[str, Any]:
    return row_to_camel(b, _BUTTON_FIELDS)


def _first_error(e: ValidationError) -> str:
    err = e.errors()[0]
    loc = ".".join(str(p) for p in err.get("loc", ()))
    return f"{loc}: {err.get('msg')}" if loc else str(err.get("msg"))


async def _menu(db: AsyncSession) -> list[dict[str, Any]]:
    rows = await db.execute(select(MenuItem).order_by(MenuItem.position, MenuItem.id))
    return [_menu_item_to_response(m) for m in rows.scalars().all()]


@router.get("/navigation")
async def get_navigation(db: AsyncSession = Depends(get_db)):
    return success({"mainMenu": await _menu(db)})


@router.put("/navigation", dependencies=[Depends(require_admin)])
async def put_navigation(body: Any = Body(None), db: AsyncSession = Depends(get_db)):
    if not isinstance(body, dict) or not isinstance(body.get("mainMenu", body.get("main_menu")), list):
        raise HTTPException(status_code=400, detail="mainMenu array is required")
    try:
        nav = NavigationPut.model_validate(body)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=_first_error(e))

    await db.execute(delete(MenuItem))
    for position, item in enumerate(nav.main_menu):
        data = item.model_dump()
        db.add(MenuItem(**data, position=position))
    await db.flush()
    return success({"mainMenu": await _menu(db)})


@router.get("/mobile-menu-buttons")
async def get_mobile_menu_buttons(
    include_inactive: bool = Query(False, alias="includeInactive"),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db),
):
    q = select(MobileMenuButton).order_by(MobileMenuButton.position, MobileMenuButton.id)
    if include_inactive:
        require_admin(credentials)
    else:
        q = q.where(MobileMenuButton.is_active.is_(True))
    rows = await db.execute(q)
    return success({"buttons": [_button_to_response(b) for b in rows.scalars().all()]})


@router.put("/mobile-menu-buttons", dependencies=[Depends(require_admin)])
async def put_mobile_menu_buttons(body: Any = Body(None), db: AsyncSession = Depends(get_db)):
    if not isinstance(body, dict) or not isinstance(body.get("buttons"), list):
        raise HTTPException(status_code=400, detail="buttons array is required")
    try:
        payload = MobileButtonsPut.model_validate(body)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=_first_error(e))

    await db.execute(delete(MobileMenuButton))
    for position, button in enumerate(payload.buttons):
        data = {k: v for k, v in button.model_dump().items() if v is not None}
        db.add(MobileMenuButton(**data, position=position))
    await db.flush()
    rows = await db.execute(select(MobileMenuButton).order_by(MobileMenuButton.position))
    return success({"buttons": [_button_to_response(b) for b in rows.scalars().all()]})


@router.get("/{key}")
async def get_site_setting(
    key: str,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db),
):
    if not is_known_key(key):
        raise HTTPException(status_code=404, detail="Setting not found")
    if key not in PUBLIC_SETTING_KEYS:
        require_admin(credentials)
    # header and site have no stock document, so data may be null
    return {"success": True, "data": await get_setting(db, key)}


@router.put("/{key}", dependencies=[Depends(require_admin)])
async def put_site_setting(key: str, body: Any = Body(None), db: AsyncSession = Depends(get_db)):
    if not is_known_key(key):
        raise HTTPException(status_code=404, detail="Setting not found")
    if not isinstance(body, dict):
        raise HTTPException(status_code=400, detail="Settings object is required")
    return success(await update_setting(db, key, body))
