# 댓글/평점 API 요청/응답 스키마 (JSON 키는 스페인어 alias)

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.comment import RATING_MAX, RATING_MIN
from app.schemas.point import RatingSummary


class CommentCreate(BaseModel):
    """댓글 작성 요청. punto_id, calificacion 필수 / comentario 선택."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True, populate_by_name=True)

    point_id: int = Field(..., alias="punto_id")
    rating: int = Field(..., ge=RATING_MIN, le=RATING_MAX, alias="calificacion")
    body: Optional[str] = Field(default=None, alias="comentario")


class CommentResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    point_id: int = Field(..., alias="punto_id")
    user_id: int = Field(..., alias="usuario_id")
    body: Optional[str] = Field(default=None, alias="comentario")
    rating: int = Field(..., alias="calificacion")
    created_at: Optional[datetime] = Field(default=None, alias="creado_en")
    author_name: str = Field(..., alias="autor_nombre")


class UserCommentResponse(BaseModel):
    """내 댓글 목록용: 대상 지점 이름(punto_nombre) 포함."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    point_id: int = Field(..., alias="punto_id")
    user_id: int = Field(..., alias="usuario_id")
    body: Optional[str] = Field(default=None, alias="comentario")
    rating: int = Field(..., alias="calificacion")
    created_at: Optional[datetime] = Field(default=None, alias="creado_en")
    point_name: str = Field(..., alias="punto_nombre")


class CommentCreated(BaseModel):
    comment: CommentResponse
    rating: RatingSummary


class CommentDeleted(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    point_id: int = Field(..., alias="punto_id")
    rating: RatingSummary
