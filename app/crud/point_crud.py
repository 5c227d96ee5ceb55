# 재활용 지점 CRUD + 평점 집계 조회

import logging
from collections import defaultdict
from typing import Dict, List, Optional, Sequence

from sqlalchemy.orm import Session, joinedload

from app.errors import ForbiddenError, NotFoundError
from app.models.comment import Comment
from app.models.recycling_point import RecyclingPoint
from app.models.user import User
from app.schemas.point import RatingSummary
from app.services.rating import compute_rating_summary

logger = logging.getLogger(__name__)


def ratings_by_point(db: Session, point_ids: Sequence[int]) -> Dict[int, RatingSummary]:
    """
    여러 지점의 평점 집계를 한 번의 쿼리로 계산.
    댓글이 없는 지점도 0/0 집계를 포함해서 반환.
    """
    grouped: Dict[int, List[int]] = defaultdict(list)
    if point_ids:
        rows = (
            db.query(Comment.point_id, Comment.rating)
            .filter(Comment.point_id.in_(list(point_ids)))
            .all()
        )
        for point_id, rating in rows:
            grouped[point_id].append(rating)
    return {pid: compute_rating_summary(grouped.get(pid, [])) for pid in point_ids}


def rating_for_point(db: Session, point_id: int) -> RatingSummary:
    return ratings_by_point(db, [point_id])[point_id]


def _points_query(db: Session):
    # 소유자 정보까지 한 번에 로드, 최신순 (동시각이면 id 역순)
    return (
        db.query(RecyclingPoint)
        .options(joinedload(RecyclingPoint.owner))
        .order_by(RecyclingPoint.created_at.desc(), RecyclingPoint.id.desc())
    )


def list_points(db: Session) -> List[RecyclingPoint]:
    """전체 지점 최신순. 페이지네이션 없음."""
    return _points_query(db).all()


def list_points_by_owner(db: Session, owner_id: int) -> List[RecyclingPoint]:
    return _points_query(db).filter(RecyclingPoint.owner_id == owner_id).all()


def get_point(db: Session, point_id: int) -> Optional[RecyclingPoint]:
    return (
        db.query(RecyclingPoint)
        .options(joinedload(RecyclingPoint.owner))
        .filter(RecyclingPoint.id == point_id)
        .first()
    )


def get_point_or_404(db: Session, point_id: int) -> RecyclingPoint:
    point = get_point(db, point_id)
    if point is None:
        raise NotFoundError("Point not found")
    return point


def create_point(
    db: Session,
    owner_id: int,
    name: str,
    waste_type: str,
    address: Optional[str] = None,
    lat: Optional[float] = None,
    lon: Optional[float] = None,
) -> RecyclingPoint:
    """
    지점 생성 (owner_id 소유).

    - 토큰 발급 후 사용자가 삭제된 경우 → NotFoundError (FK 위반 500 방지)

    ⚠️ 이 함수는 commit 하지 않음. 호출자(라우터)가 트랜잭션을 제어.
    """
    if db.query(User.id).filter(User.id == owner_id).first() is None:
        raise NotFoundError("User not found")

    point = RecyclingPoint(
        owner_id=owner_id,
        name=name,
        waste_type=waste_type,
        address=address or None,
        lat=lat,
        lon=lon,
    )
    db.add(point)
    db.flush()
    db.refresh(point)
    logger.info("Created point id=%s owner=%s", point.id, owner_id)
    return point


def delete_point(db: Session, point_id: int, requester_id: int) -> None:
    """
    지점 삭제. 없으면 404, 소유자가 아니면 403 (존재 여부를 먼저 확인).
    해당 지점의 댓글은 FK ON DELETE CASCADE로 함께 삭제됨.

    ⚠️ 이 함수는 commit 하지 않음. 호출자(라우터)가 트랜잭션을 제어.
    """
    point = db.query(RecyclingPoint).filter(RecyclingPoint.id == point_id).first()
    if point is None:
        raise NotFoundError("Point not found")
    if point.owner_id != requester_id:
        raise ForbiddenError("You can only delete your own points")
    db.delete(point)
    db.flush()
    logger.info("Deleted point id=%s by user=%s", point_id, requester_id)
