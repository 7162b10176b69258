"""Error handlers — 도메인 예외/검증 실패를 JSON 응답으로 변환.

- MovieNotFoundError     → 404 {"message": "Movie not found"}
- RequestValidationError → 400 {"error": [{path, message, type}, ...]}
- Exception (나머지)     → 500, 내부 정보는 노출하지 않음
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class MovieNotFoundError(Exception):
    """요청한 id의 영화가 저장소에 없음."""

    message = "Movie not found"

    def __init__(self, movie_id: str):
        super().__init__(f"Movie '{movie_id}' not found")
        self.movie_id = movie_id


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MovieNotFoundError, movie_not_found_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)


async def movie_not_found_handler(request: Request, exc: MovieNotFoundError):
    logger.warning(
        f"Movie not found on {request.method} {request.url.path}",
        extra={"movie_id": exc.movie_id, "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"message": exc.message},
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = build_validation_errors(exc.errors())
    logger.warning(
        f"Validation error on {request.method} {request.url.path}: {errors}",
        extra={"error_count": len(errors), "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": errors},
    )


async def generic_error_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc}",
        exc_info=True,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def build_validation_errors(raw_errors) -> list:
    """
    pydantic 오류 목록 → 클라이언트용 목록. 요약/생략 없이 전부 유지.

    loc의 첫 요소("body", "query", "path")는 위치 정보라 제외하고 나머지를 path로 둔다.
    본문 전체가 빠지면 path는 빈 리스트, JSON 파싱 실패 시에는 오류가 난 문자 위치.
    """
    errors = []
    for e in raw_errors:
        loc = list(e.get("loc", ()))
        if loc and loc[0] in ("body", "query", "path"):
            loc = loc[1:]
        errors.append({
            "path": loc,
            "message": e["msg"],
            "type": e["type"],
        })
    return errors
