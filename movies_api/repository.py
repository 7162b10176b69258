# ------------------------------------------------------------
# repository.py — 영화 컬렉션 저장소 (라우터는 이 클래스만 사용)
# ------------------------------------------------------------
# 저장 백엔드(메모리 SQLite / 실제 DB)가 바뀌어도 라우트 로직은 그대로 유지됨.
# NOTE: 기본 설정은 메모리 DB이므로 프로세스가 재시작되면 모든 변경이 사라진다.

import uuid
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from .models import Movie


def new_movie_id() -> str:
    # uuid4: os.urandom 기반 128비트 난수. 순번을 쓰지 않으므로 건수 정보가 노출되지 않음
    return str(uuid.uuid4())


class MovieRepository:
    def __init__(self, db: Session):
        self.db = db

    def _commit(self):
        # 실패하면 즉시 롤백 → 공유 커넥션에 반쯤 쓴 상태가 남지 않음
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def list(self) -> List[Movie]:
        # 삽입 순서 그대로
        return self.db.query(Movie).order_by(Movie.seq).all()

    def list_by_genre(self, genre: str) -> List[Movie]:
        """장르 항목 중 하나가 genre와 대소문자 무시 완전 일치하는 영화만 반환 (부분 문자열 X)."""
        wanted = genre.lower()
        return [
            m for m in self.list()
            if any(g.lower() == wanted for g in m.genre)
        ]

    def find_by_id(self, movie_id: str) -> Optional[Movie]:
        return self.db.query(Movie).filter(Movie.id == movie_id).one_or_none()

    def count(self) -> int:
        return self.db.query(func.count(Movie.seq)).scalar()

    def append(self, data: dict) -> Movie:
        # data에 id가 없으면 새로 발급 (시드 데이터는 기존 id 유지)
        movie = Movie(**{"id": new_movie_id(), **data})
        self.db.add(movie)
        self._commit()
        return movie

    def remove_by_id(self, movie_id: str) -> bool:
        movie = self.find_by_id(movie_id)
        if movie is None:
            return False
        self.db.delete(movie)
        self._commit()
        return True

    def replace(self, movie_id: str, changes: dict) -> Optional[Movie]:
        """
        기존 레코드 위에 검증된 변경 필드만 덮어쓴다.
        - id는 절대 덮어쓰지 않음
        - 대상이 없으면 None
        """
        movie = self.find_by_id(movie_id)
        if movie is None:
            return None
        for field, value in changes.items():
            if field == "id":
                continue
            setattr(movie, field, value)
        self._commit()
        return movie
