import logging
import math
from typing import Any, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile
from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from config import settings
from database import get_db
from dependencies import require_admin
from models import Media
from schemas.media import MediaUpdate
from services.media_storage import ALLOWED_MEDIA_TYPES, MSG_TYPE_NOT_ALLOWED, remove_upload, store_upload
from utils.case import row_to_camel
from utils.responses import success
from utils.uploads import read_limited

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/media", tags=["media"], dependencies=[Depends(require_admin)])

MSG_MEDIA_NOT_FOUND = "Media not found"

_MEDIA_FIELDS = (
    "id",
    "filename",
    "url",
    "alt",
    "label",
    "mime_type",
    "filesize",
    "width",
    "height",
    "focal_x",
    "focal_y",
    "created_at",
    "updated_at",
)


def _media_to_response(m: Media) -> dict[str, Any]:
    return row_to_camel(m, _MEDIA_FIELDS)


async def _get_media(db: AsyncSession, media_id: int) -> Media:
    media = await db.get(Media, media_id)
    if not media:
        raise HTTPException(status_code=404, detail=MSG_MEDIA_NOT_FOUND)
    return media


@router.get("")
async def list_media(
    page: int = Query(1, ge=1),
    limit: int = Query(24, ge=1, le=100),
    search: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
):
    q = select(Media)
    count_q = select(func.count(Media.id))
    if search:
        pattern = f"%{search.strip().lower()}%"
        cond = or_(
            func.lower(Media.filename).like(pattern),
            func.lower(Media.alt).like(pattern),
            func.lower(Media.label).like(pattern),
        )
        q = q.where(cond)
        count_q = count_q.where(cond)
    total = (await db.execute(count_q)).scalar() or 0
    rows = await db.execute(
        q.order_by(Media.created_at.desc(), Media.id.desc()).offset((page - 1) * limit).limit(limit)
    )
    return success(
        [_media_to_response(m) for m in rows.scalars().all()],
        pagination={
            "page": page,
            "limit": limit,
            "total": total,
            "totalPages": math.ceil(total / limit),
        },
    )


@router.post("", status_code=201)
async def upload_media(
    file: Optional[UploadFile] = File(None),
    alt: Optional[str] = Form(None),
    label: Optional[str] = Form(None),
    width: Optional[int] = Form(None),
    height: Optional[int] = Form(None),
    db: AsyncSession = Depends(get_db),
):
    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail="No file provided")
    if file.content_type not in ALLOWED_MEDIA_TYPES:
        raise HTTPException(status_code=400, detail=MSG_TYPE_NOT_ALLOWED)
    content = await read_limited(file, settings.max_media_file_bytes)
    if len(content) > settings.max_media_file_bytes:
        raise HTTPException(status_code=400, detail=f"File must be less than {settings.max_media_file_mb}MB")
    filename, url = store_upload(file.filename, content)
    media = Media(
        filename=filename,
        url=url,
        alt=alt or None,
        label=label or None,
        mime_type=file.content_type,
        filesize=len(content),
        width=width,
        height=height,
    )
    db.add(media)
    await db.flush()
    await db.refresh(media)
    logger.info("Uploaded media %s (%s, %d bytes)", media.id, filename, len(content))
    return success(_media_to_response(media))


@router.get("/{media_id:int}")
async def get_media(media_id: int, db: AsyncSession = Depends(get_db)):
    return success(_media_to_response(await _get_media(db, media_id)))


@router.patch("/{media_id:int}")
async def update_media(media_id: int, body: MediaUpdate, db: AsyncSession = Depends(get_db)):
    media = await _get_media(db, media_id)
    for key, value in body.changes().items():
        setattr(media, key, value)
    await db.flush()
    await db.refresh(media)
    return success(_media_to_response(media))


@router.delete("/{media_id:int}")
async def delete_media(media_id: int, db: AsyncSession = Depends(get_db)):
    media = await _get_media(db, media_id)
    filename = media.filename
    await db.delete(media)
    await db.flush()
    remove_upload(filename)
    logger.info("Deleted media %s (%s)", media_id, filename)
    return success()
