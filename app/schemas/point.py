# 재활용 지점 API 요청/응답 스키마 (JSON 키는 스페인어 alias)

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PointCreate(BaseModel):
    """지점 생성 요청. 주소/좌표는 선택. 프론트엔드 형식: {nombre, tipo_residuo, lat, lon}."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True, populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=150, alias="nombre")
    waste_type: str = Field(..., min_length=1, max_length=100, alias="tipo_residuo")
    address: Optional[str] = Field(default=None, alias="direccion")
    lat: Optional[float] = Field(default=None, ge=-90, le=90)
    lon: Optional[float] = Field(default=None, ge=-180, le=180)


class RatingSummary(BaseModel):
    """댓글 평점 집계 (저장하지 않고 매번 계산)."""

    average_rating: float = 0
    comment_count: int = 0


class PointResponse(BaseModel):
    """지점 응답: 작성자(creador_*) 정보 + 평점 집계 포함."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    owner_id: int = Field(..., alias="usuario_id")
    name: str = Field(..., alias="nombre")
    waste_type: str = Field(..., alias="tipo_residuo")
    address: Optional[str] = Field(default=None, alias="direccion")
    lat: Optional[float] = None
    lon: Optional[float] = None
    created_at: Optional[datetime] = Field(default=None, alias="creado_en")
    owner_name: str = Field(..., alias="creador_nombre")
    owner_email: str = Field(..., alias="creador_email")
    average_rating: float = 0
    comment_count: int = 0


class PointDeleted(BaseModel):
    message: str
    id: int
