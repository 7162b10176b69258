# -------------------------------------------------------
# db.py — SQLAlchemy 세션/엔진 및 FastAPI 의존성 정의
# -------------------------------------------------------

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from .config import DATABASE_URL


def make_engine(url: str = DATABASE_URL):
    """
    URL에 맞는 SQLAlchemy Engine 생성

    - "sqlite://" (메모리 DB):
        커넥션마다 별도의 DB가 생기므로 StaticPool로 커넥션 1개를 공유해야
        모든 요청이 같은 영화 목록을 본다.
        check_same_thread=False: 커넥션을 만든 스레드와 이벤트 루프 스레드가 다를 수 있음
    - 그 외 URL: 기본 풀 + pool_pre_ping
    """
    if url.startswith("sqlite"):
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(url, pool_pre_ping=True, pool_recycle=3600)


engine = make_engine()

# ----------------------------------------------
# 세션팩토리 생성
# ----------------------------------------------
# - autocommit=False: 핸들러에서 명시적으로 commit()
# - autoflush=False: 요청 단위 트랜잭션에서 예측 가능성을 높임
# - expire_on_commit=False: commit 후에도 응답 직렬화 시 추가 쿼리 없음
SessionLocal = sessionmaker(
    autocommit=False, autoflush=False, expire_on_commit=False, bind=engine,
)

# 모든 ORM 모델이 상속받는 베이스 클래스
Base = declarative_base()


async def get_db():
    """
    FastAPI 의존성 주입용 DB 세션 제공자(async Generator)

    async로 두어 스레드풀이 아닌 이벤트 루프에서 세션을 열고 닫는다.
    핸들러도 모두 async이고 저장소 연산 중간에 await가 없으므로,
    StaticPool로 공유하는 커넥션 하나를 두 요청이 동시에 쓰는 일이 없다.

    1) 요청이 들어오면 SessionLocal()로 세션 생성
    2) 핸들러에 주입(yield)
    3) 응답 후 finally 블록에서 세션 종료(close)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
