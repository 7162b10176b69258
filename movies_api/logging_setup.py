"""Logging setup — 앱 시작 시 한 번 호출되는 로거 구성."""

import json
import logging
from datetime import datetime, timezone


class JSONFormatter(logging.Formatter):
    """로그 레코드를 한 줄 JSON으로 출력 (운영 환경 수집용)."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # extra={...}로 넘긴 필드 중 알려진 것만 노출
        for key in ("movie_id", "path", "origin", "error_count"):
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "text"):
    # 같은 프로세스에서 앱이 여러 번 시작돼도 핸들러는 하나만 (로그 중복 방지)
    if any(getattr(h, "_movies_api", False) for h in logging.root.handlers):
        logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
        return
    handler = logging.StreamHandler()
    handler._movies_api = True
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
