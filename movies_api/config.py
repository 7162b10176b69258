# -------------------------------------------------------
# config.py — 환경변수 기반 설정값 모음
# -------------------------------------------------------

import os
from pathlib import Path
from dotenv import load_dotenv

# .env 파일의 환경변수를 현재 프로세스 환경에 주입
# - 운영환경에서는 .env 대신 실제 환경변수로 주입해도 동일하게 동작
load_dotenv()

# -----------------------------
# 서버 바인딩
# -----------------------------
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))

# -----------------------------
# CORS 허용 오리진 목록
# -----------------------------
# 쉼표로 구분된 문자열. 앱 시작 시 한 번 읽고 이후 변경하지 않음
DEFAULT_ALLOWED_ORIGINS = (
    "https://localhost:3000,"
    "https://localhost:3001,"
    "http://localhost:8080"
)


def parse_origins(raw: str) -> tuple:
    # 공백/빈 항목 제거
    return tuple(o.strip() for o in raw.split(",") if o.strip())


ALLOWED_ORIGINS = parse_origins(os.getenv("ALLOWED_ORIGINS", DEFAULT_ALLOWED_ORIGINS))

# -----------------------------
# 저장소
# -----------------------------
# 기본값 "sqlite://" 는 메모리 전용 DB → 프로세스 재시작 시 모든 데이터가 사라짐
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite://")

# 시작 시 한 번 읽어들이는 초기 영화 목록(JSON 배열)
MOVIES_SEED_FILE = os.getenv(
    "MOVIES_SEED_FILE",
    str(Path(__file__).resolve().parent / "data" / "movies.json"),
)

# -----------------------------
# 로깅
# -----------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "text")  # "text" | "json"
