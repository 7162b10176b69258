# ---------------------------------------------
# movies.py — 영화 CRUD 엔드포인트
# ---------------------------------------------

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from ..db import get_db
from ..errors import MovieNotFoundError
from ..repository import MovieRepository
from ..schemas import MovieCreate, MovieUpdate, MovieOut, MessageOut

logger = logging.getLogger(__name__)

# 이 라우터의 모든 엔드포인트는 "/movies"로 시작
router = APIRouter(prefix="/movies", tags=["movies"])


async def get_repository(db: Session = Depends(get_db)) -> MovieRepository:
    # 요청마다 세션 1개 → 저장소 1개
    # 핸들러/의존성은 모두 async: 저장소 접근은 이벤트 루프 스레드에서만 일어남
    return MovieRepository(db)


@router.get("", response_model=List[MovieOut])
async def list_movies(
    genre: Optional[str] = None,                        # ?genre=drama (대소문자 무시)
    repo: MovieRepository = Depends(get_repository),
):
    """전체 영화 목록 (삽입 순서). genre가 있으면 해당 장르만."""
    if genre:
        return repo.list_by_genre(genre)
    return repo.list()


@router.get("/{movie_id}", response_model=MovieOut)
async def get_movie(movie_id: str, repo: MovieRepository = Depends(get_repository)):
    movie = repo.find_by_id(movie_id)
    if movie is None:
        raise MovieNotFoundError(movie_id)
    return movie


@router.post("", response_model=MovieOut, status_code=status.HTTP_201_CREATED)
async def create_movie(payload: MovieCreate, repo: MovieRepository = Depends(get_repository)):
    """
    영화 생성.
    - 바디는 핸들러 실행 전에 MovieCreate로 전체 검증됨 (실패 시 400)
    - id는 서버에서 uuid4로 발급
    - 201과 함께 생성된 레코드를 그대로 반환 (클라이언트 캐시 갱신용)
    """
    movie = repo.append(payload.model_dump(mode="json"))
    logger.info(f"Created movie {movie.id}", extra={"movie_id": movie.id})
    return movie


@router.patch("/{movie_id}", response_model=MovieOut)
async def update_movie(
    movie_id: str,
    payload: Optional[MovieUpdate] = None,              # 바디 없음 = 빈 객체 {}
    repo: MovieRepository = Depends(get_repository),
):
    """
    영화 부분 수정.
    바디 검증(400)이 존재 여부 확인(404)보다 먼저 일어난다.
    보낸 필드만 기존 레코드 위에 병합하고 id는 유지.
    """
    if payload is None:
        payload = MovieUpdate()
    changes = payload.model_dump(mode="json", exclude_unset=True)
    movie = repo.replace(movie_id, changes)
    if movie is None:
        raise MovieNotFoundError(movie_id)
    logger.info(f"Updated movie {movie_id}: {sorted(changes)}", extra={"movie_id": movie_id})
    return movie


@router.delete("/{movie_id}", response_model=MessageOut)
async def delete_movie(movie_id: str, repo: MovieRepository = Depends(get_repository)):
    if not repo.remove_by_id(movie_id):
        raise MovieNotFoundError(movie_id)
    logger.info(f"Deleted movie {movie_id}", extra={"movie_id": movie_id})
    return {"message": "Movie deleted"}


@router.options("/{movie_id}")
async def preflight_movie(movie_id: str):
    # PATCH/DELETE 전에 브라우저가 보내는 preflight. CORS 헤더는 OriginGateMiddleware가 붙임
    return PlainTextResponse("OK")


# -----------------------------
# CORS 게이트 적용 라우트 {엔드포인트: preflight 여부}
# -----------------------------
# get_movie(GET /movies/{id})는 의도적으로 제외 → 오리진 헤더를 붙이지 않음
ORIGIN_GATED_ROUTES = {
    list_movies: False,
    create_movie: False,
    update_movie: False,
    delete_movie: False,
    preflight_movie: True,
}
