# python -m movies_api 로 실행
import uvicorn

from . import config

if __name__ == "__main__":
    # server_header=False: 응답에서 서버 식별 헤더(server: uvicorn) 제거
    uvicorn.run("movies_api.main:app", host=config.HOST, port=config.PORT, server_header=False)
