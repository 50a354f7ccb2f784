from fastapi import APIRouter, HTTPException, Query

from services import zip_lookup
from utils.responses import success

router = APIRouter(prefix="/api/zip-codes", tags=["zip-codes"])


@router.get("")
async def search_zip_codes(q: str = Query("", description="ZIP prefix or city name"), limit: int = Query(10, ge=1, le=50)):
    return success(zip_lookup.search(q, limit))


@router.get("/counties")
async def list_counties():
    return success(zip_lookup.all_counties())


@router.get("/{zip_code}")
async def get_zip_code(zip_code: str):
    record = zip_lookup.lookup(zip_code)
    if record is None:
        raise HTTPException(status_code=404, detail="No tax rate available for this ZIP code")
    return success(record)
