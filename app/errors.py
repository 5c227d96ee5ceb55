# 도메인 예외와 HTTP 응답 변환
#
# CRUD/서비스 계층은 아래 예외만 raise 하고, 상태 코드 매핑은 main.py에 등록된 핸들러가 담당.
# 응답 본문은 항상 {"error": <message>} 형태.

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class EcoMapError(Exception):
    """모든 도메인 예외의 기반 클래스."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(EcoMapError):
    """입력 누락/형식 오류."""

    status_code = 400


class UnauthorizedError(EcoMapError):
    """토큰 없음, 잘못된 로그인 정보."""

    status_code = 401


class ForbiddenError(EcoMapError):
    """인증은 되었으나 권한 없음 (소유자 아님, 토큰 검증 실패)."""

    status_code = 403


class NotFoundError(EcoMapError):
    status_code = 404


class ConflictError(EcoMapError):
    """유니크 키 중복 (이메일 등)."""

    status_code = 409


class GeocodingError(EcoMapError):
    """외부 역지오코딩 서비스 오류."""

    status_code = 502


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def _handle_ecomap_error(request: Request, exc: EcoMapError) -> JSONResponse:
    return _error_response(exc.status_code, exc.message)


async def _handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_response(exc.status_code, str(exc.detail))


async def _handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    """pydantic 검증 실패 → 400. 첫 번째 오류만 메시지로 사용."""
    errors = exc.errors()
    if not errors:
        return _error_response(400, "Invalid request")
    first = errors[0]
    # loc 예: ("body", "calificacion") → "calificacion". 첫 요소(위치)만 제외
    loc = [str(part) for part in first.get("loc", ())]
    if loc and loc[0] in ("body", "query", "path", "header"):
        loc = loc[1:]
    field = ".".join(loc)
    message = first.get("msg", "Invalid value")
    return _error_response(400, f"{field}: {message}" if field else message)


async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    # 내부 오류 내용(SQL 등)은 클라이언트에 노출하지 않고 서버 로그에만 남김
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(500, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EcoMapError, _handle_ecomap_error)
    app.add_exception_handler(StarletteHTTPException, _handle_http_exception)
    app.add_exception_handler(RequestValidationError, _handle_request_validation)
    app.add_exception_handler(Exception, _handle_unexpected)
