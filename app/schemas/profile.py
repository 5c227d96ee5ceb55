from typing import List

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.auth import UserPublic
from app.schemas.point import PointResponse


class ProfileResponse(BaseModel):
    """GET /me 응답: {usuario, puntos} (본인이 등록한 지점 포함)."""

    model_config = ConfigDict(populate_by_name=True)

    user: UserPublic = Field(..., alias="usuario")
    points: List[PointResponse] = Field(..., alias="puntos")
