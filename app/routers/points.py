# 재활용 지점 생성/조회/삭제 API

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.crud.point_crud import (
    create_point,
    delete_point,
    get_point_or_404,
    list_points,
    rating_for_point,
    ratings_by_point,
)
from app.database import get_db
from app.errors import EcoMapError
from app.models.recycling_point import RecyclingPoint
from app.schemas.auth import TokenClaims
from app.schemas.point import PointCreate, PointDeleted, PointResponse, RatingSummary
from app.services.auth_service import get_current_user

router = APIRouter(prefix="/puntos", tags=["Points"])


def point_to_response(point: RecyclingPoint, summary: RatingSummary) -> PointResponse:
    """지점 + 소유자 + 평점 집계 → PointResponse."""
    return PointResponse(
        id=point.id,
        owner_id=point.owner_id,
        name=point.name,
        waste_type=point.waste_type,
        address=point.address,
        lat=point.lat,
        lon=point.lon,
        created_at=point.created_at,
        owner_name=point.owner.name,
        owner_email=point.owner.email,
        average_rating=summary.average_rating,
        comment_count=summary.comment_count,
    )


def points_to_response(db: Session, points: List[RecyclingPoint]) -> List[PointResponse]:
    summaries = ratings_by_point(db, [p.id for p in points])
    return [point_to_response(p, summaries[p.id]) for p in points]


@router.get("", response_model=List[PointResponse])
def get_points(db: Session = Depends(get_db)) -> List[PointResponse]:
    """전체 지점 최신순 (평점 평균/댓글 수 포함)."""
    return points_to_response(db, list_points(db))


@router.get("/{point_id}", response_model=PointResponse)
def get_point(point_id: int, db: Session = Depends(get_db)) -> PointResponse:
    """id로 지점 조회. 없으면 404."""
    point = get_point_or_404(db, point_id)
    return point_to_response(point, rating_for_point(db, point_id))


@router.post("", response_model=PointResponse, status_code=201)
def post_point(
    body: PointCreate,
    db: Session = Depends(get_db),
    current_user: TokenClaims = Depends(get_current_user),
) -> PointResponse:
    """지점 생성 (로그인 사용자 소유). 생성 직후 집계는 0/0."""
    try:
        point = create_point(
            db,
            owner_id=current_user.user_id,
            name=body.name,
            waste_type=body.waste_type,
            address=body.address,
            lat=body.lat,
            lon=body.lon,
        )
        db.commit()  # ✅ 트랜잭션 소유권: 라우터
    except EcoMapError:
        db.rollback()
        raise
    point = get_point_or_404(db, point.id)
    return point_to_response(point, RatingSummary())


@router.delete("/{point_id}", response_model=PointDeleted)
def delete_point_route(
    point_id: int,
    db: Session = Depends(get_db),
    current_user: TokenClaims = Depends(get_current_user),
) -> PointDeleted:
    """본인 지점 삭제. 없으면 404, 남의 지점이면 403. 댓글은 함께 삭제."""
    try:
        delete_point(db, point_id, current_user.user_id)
        db.commit()
    except EcoMapError:
        db.rollback()
        raise
    return PointDeleted(message="Point deleted", id=point_id)
