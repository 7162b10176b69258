# ------------------------------------------------------------
# seed.py — 시작 시 정적 JSON 파일에서 초기 영화 목록 적재
# ------------------------------------------------------------

import json
import logging
from typing import List

from sqlalchemy.orm import Session

from .repository import MovieRepository
from .schemas import MovieCreate

logger = logging.getLogger(__name__)


def load_seed_movies(path: str) -> List[dict]:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"Seed file {path} must contain a JSON array")
    return data


def seed_store(db: Session, movies: List[dict]) -> int:
    """
    저장소가 비어 있을 때만 초기 데이터를 넣는다. 넣은 건수를 반환.

    - 각 항목은 MovieCreate로 검증 (잘못된 레코드는 저장하지 않음 → pydantic ValidationError)
    - 파일에 id가 있으면 그대로 유지, 없으면 새로 발급
    """
    repo = MovieRepository(db)
    if repo.count() > 0:
        logger.info("Store already populated, skipping seed")
        return 0

    for raw in movies:
        data = MovieCreate.model_validate(raw).model_dump(mode="json")
        if raw.get("id"):
            data["id"] = str(raw["id"])
        repo.append(data)

    logger.info(f"Seeded {len(movies)} movies")
    return len(movies)
