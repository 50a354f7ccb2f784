"""
ZIP code to county / property tax rate lookup over the static Arkansas table.
"""
from __future__ import annotations

from typing import Any

from data.arkansas_zip_data import COUNTY_TAX_RATES, ZIP_CODES


def _record(zip_code: str, city: str, county: str) -> dict[str, str]:
    return {"zip": zip_code, "city": city, "county": county}


def lookup(zip_code: str) -> dict[str, Any] | None:
    """
    Exact ZIP match -> {county, city, taxRate}. None means "no rate available":
    either the ZIP is unknown or its county has no configured rate.
    """
    zip_code = (zip_code or "").strip()
    for z, city, county in ZIP_CODES:
        if z == zip_code:
            rate = COUNTY_TAX_RATES.get(county)
            if rate is None:
                return None
            return {"county": county, "city": city, "taxRate": rate}
    return None


def search(query: str, limit: int = 10) -> list[dict[str, str]]:
    """
    ZIP-prefix matches first (table order), then city-name substring matches.
    An empty query matches every ZIP, so it returns the first `limit` rows.
    """
    query = (query or "").strip()
    if limit <= 0:
        return []
    lower = query.lower()
    prefix = [r for r in ZIP_CODES if r[0].startswith(query)]
    seen = set(prefix)
    by_city = [r for r in ZIP_CODES if lower in r[1].lower() and r not in seen]
    return [_record(*r) for r in (prefix + by_city)[:limit]]


def all_counties() -> list[str]:
    return sorted(COUNTY_TAX_RATES)
