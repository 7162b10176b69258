# ------------------------------------------------------------
# cors.py — 오리진 허용 목록 기반 CORS 게이트
# ------------------------------------------------------------
# Starlette의 CORSMiddleware는 모든 라우트에 일괄 적용되고 preflight에 직접 응답한다.
# 여기서는 라우트별로 적용 여부를 지정하고, 허용되지 않은 오리진에도 응답 자체는 그대로 보낸다.
# (브라우저가 Access-Control-Allow-Origin 헤더가 없는 응답을 페이지에 노출하지 않음)

from typing import Dict, Iterable, Optional

from starlette.datastructures import Headers, MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

ALLOWED_METHODS = "GET, POST, PATCH, DELETE"


class CorsPolicyGate:
    def __init__(self, allowed_origins: Iterable[str]):
        # 시작 시 한 번 고정, 이후 변경 없음
        self.allowed_origins = frozenset(allowed_origins)

    def allows(self, origin: Optional[str]) -> bool:
        # 같은 오리진 요청이면 브라우저가 Origin 헤더를 보내지 않음 → 허용
        return origin is None or origin in self.allowed_origins

    def headers_for(self, origin: Optional[str], preflight: bool = False) -> Dict[str, str]:
        """
        응답에 붙일 CORS 헤더.
        - 허용 목록에 없으면 빈 dict
        - 허용된 오리진은 와일드카드(*)가 아니라 요청 값 그대로 되돌려줌
        - preflight면 허용 메서드 목록도 포함
        """
        if not self.allows(origin):
            return {}
        headers = {}
        if origin is not None:
            headers["Access-Control-Allow-Origin"] = origin
        if preflight:
            headers["Access-Control-Allow-Methods"] = ALLOWED_METHODS
        return headers


class OriginGateMiddleware:
    """
    routes: {엔드포인트 함수: preflight 여부}
    매칭된 엔드포인트가 routes에 있을 때만 게이트를 적용한다.
    예외 핸들러가 만든 400/404 응답에도 동일하게 적용됨.
    """

    def __init__(self, app: ASGIApp, gate: CorsPolicyGate, routes: dict):
        self.app = app
        self.gate = gate
        self.routes = routes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        origin = Headers(scope=scope).get("origin")

        async def send_with_cors(message: Message) -> None:
            if message["type"] == "http.response.start":
                # 라우터가 매칭 후 scope에 endpoint를 채워둠
                endpoint = scope.get("endpoint")
                if endpoint in self.routes:
                    headers = MutableHeaders(scope=message)
                    cors_headers = self.gate.headers_for(origin, preflight=self.routes[endpoint])
                    for name, value in cors_headers.items():
                        headers[name] = value
                    if "Access-Control-Allow-Origin" in cors_headers:
                        headers.add_vary_header("Origin")
            await send(message)

        await self.app(scope, receive, send_with_cors)
