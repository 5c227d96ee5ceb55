# 댓글/평점 CRUD (작성·삭제 후 평점 집계 재계산)

import logging
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session, joinedload

from app.errors import ForbiddenError, NotFoundError, ValidationError
from app.models.comment import RATING_MAX, RATING_MIN, Comment
from app.models.recycling_point import RecyclingPoint
from app.models.user import User
from app.crud.point_crud import rating_for_point
from app.schemas.point import RatingSummary

logger = logging.getLogger(__name__)


def list_comments_for_point(db: Session, point_id: int) -> List[Comment]:
    """지점의 댓글 최신순 (작성자 정보 포함). 지점이 없으면 404."""
    exists = db.query(RecyclingPoint.id).filter(RecyclingPoint.id == point_id).first()
    if exists is None:
        raise NotFoundError("Point not found")
    return (
        db.query(Comment)
        .options(joinedload(Comment.author))
        .filter(Comment.point_id == point_id)
        .order_by(Comment.created_at.desc(), Comment.id.desc())
        .all()
    )


def list_comments_by_user(db: Session, user_id: int) -> List[Comment]:
    """사용자가 작성한 댓글 최신순 (대상 지점 정보 포함) — 프로필 화면용."""
    return (
        db.query(Comment)
        .options(joinedload(Comment.point))
        .filter(Comment.user_id == user_id)
        .order_by(Comment.created_at.desc(), Comment.id.desc())
        .all()
    )


def create_comment(
    db: Session,
    author_id: int,
    point_id: int,
    rating: int,
    body: Optional[str] = None,
) -> Tuple[Comment, RatingSummary]:
    """
    댓글 작성.

    - rating 범위(1~5) 밖 → ValidationError
    - 작성자(토큰의 사용자)가 삭제됨 → NotFoundError
    - 지점 없음 → NotFoundError
    - 반환: (작성된 댓글, 방금 작성분까지 반영된 평점 집계)

    ⚠️ 이 함수는 commit 하지 않음. 호출자(라우터)가 트랜잭션을 제어.
    """
    if rating is None or not (RATING_MIN <= rating <= RATING_MAX):
        raise ValidationError(f"Rating must be between {RATING_MIN} and {RATING_MAX}")

    if db.query(User.id).filter(User.id == author_id).first() is None:
        raise NotFoundError("User not found")

    point = db.query(RecyclingPoint).filter(RecyclingPoint.id == point_id).first()
    if point is None:
        raise NotFoundError("Point not found")

    comment = Comment(user_id=author_id, point_id=point_id, body=body or None, rating=rating)
    db.add(comment)
    db.flush()
    db.refresh(comment)

    # 같은 트랜잭션 안에서 집계 재계산 → 방금 작성한 댓글 포함 (commit은 호출자가)
    summary = rating_for_point(db, point_id)
    logger.info("Created comment id=%s point=%s rating=%s", comment.id, point_id, rating)
    return comment, summary


def delete_comment(db: Session, comment_id: int, requester_id: int) -> Tuple[int, RatingSummary]:
    """
    댓글 삭제. 없으면 404, 작성자가 아니면 403.
    반환: (대상 지점 id, 삭제 후 평점 집계)

    ⚠️ 이 함수는 commit 하지 않음. 호출자(라우터)가 트랜잭션을 제어.
    """
    comment = db.query(Comment).filter(Comment.id == comment_id).first()
    if comment is None:
        raise NotFoundError("Comment not found")
    if comment.user_id != requester_id:
        raise ForbiddenError("You can only delete your own comments")

    point_id = comment.point_id
    db.delete(comment)
    db.flush()

    summary = rating_for_point(db, point_id)
    logger.info("Deleted comment id=%s point=%s by user=%s", comment_id, point_id, requester_id)
    return point_id, summary
