# OpenStreetMap Nominatim 역지오코딩 연동 (좌표 → 사람이 읽는 주소)

from typing import Any, Dict, Optional

import httpx

from app.config import get_settings

REVERSE_PATH = "/reverse"


def _standardize(lat: float, lon: float, data: Dict[str, Any]) -> Dict[str, Any]:
    """Nominatim 응답을 통일 필드(lat, lon, direccion, provider)로 변환. 결과 없음이면 direccion=None."""
    address: Optional[str] = None
    if "error" not in data:
        address = data.get("display_name") or None
    return {
        "lat": lat,
        "lon": lon,
        "direccion": address,
        "provider": "nominatim",
    }


async def reverse_geocode(
    lat: float,
    lon: float,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Dict[str, Any]:
    """
    좌표(lat, lon)에 해당하는 주소 조회.
    Nominatim 이용 정책상 User-Agent 필수. HTTP 오류 시 RuntimeError.
    """
    settings = get_settings()
    url = f"{settings.geocoder_base_url.rstrip('/')}{REVERSE_PATH}"
    params = {
        "format": "jsonv2",
        "lat": str(lat),
        "lon": str(lon),
    }
    headers = {"User-Agent": settings.geocoder_user_agent}

    async with httpx.AsyncClient(timeout=settings.geocoder_timeout, transport=transport) as client:
        resp = await client.get(url, params=params, headers=headers)
        if resp.status_code != 200:
            raise RuntimeError(f"Nominatim 오류: HTTP {resp.status_code}")
        return _standardize(lat, lon, resp.json())
