# ------------------------------------------------------------
# models.py — SQLAlchemy ORM 모델 정의 (movies)
# ------------------------------------------------------------

from sqlalchemy import Column, Integer, String, Float, JSON
from .db import Base


# ------------------------------
# Movie: 영화 테이블
# ------------------------------
class Movie(Base):
    __tablename__ = "movies"

    # 삽입 순서. 목록 조회는 항상 이 순서로 정렬
    seq = Column(Integer, primary_key=True, autoincrement=True)

    # 외부에 노출되는 식별자(uuid4 문자열). 생성 후 변경 불가
    id = Column(String(36), unique=True, index=True, nullable=False)

    title = Column(String(255), nullable=False)
    year = Column(Integer, nullable=False)
    director = Column(String(255), nullable=False)
    duration = Column(Integer, nullable=False)  # 분 단위
    rate = Column(Float, nullable=False, default=5)
    poster = Column(String(500), nullable=False)

    # 장르 문자열 리스트 (예: ["Drama", "Crime"])
    genre = Column(JSON, nullable=False)

