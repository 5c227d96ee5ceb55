# 역지오코딩 API (지도에서 찍은 좌표 → 주소)

import httpx
from fastapi import APIRouter, Query

from app.errors import GeocodingError
from app.integrations.nominatim import reverse_geocode

router = APIRouter(prefix="/geocode", tags=["Geocoding"])


@router.get("/reverse")
async def get_reverse_geocode(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
):
    """Nominatim 조회 결과 {lat, lon, direccion, provider}. 외부 서비스 실패 시 502."""
    try:
        return await reverse_geocode(lat, lon)
    except (RuntimeError, httpx.HTTPError, ValueError):
        raise GeocodingError("Reverse geocoding failed")
