"""
Page Route: 단일 요청 핸들러.

- 모든 method / 모든 path → 200 + 같은 HTML
- Content-Type: text/html; charset=UTF-8
- Cache-Control: no-store, max-age=0
- 요청 내용(query, header, body)은 보지 않음
"""

from fastapi import Request
from fastapi.responses import HTMLResponse
from starlette.types import Receive, Scope, Send

from cosmic_clock.domain.constants import RESPONSE_HEADERS
from cosmic_clock.render.page import generate_html

# 루트 포함 모든 path
CATCH_ALL_PATH = "/{path:path}"


def get_page_html(request: Request) -> str:
    """Request에서 시작 시 렌더된 문서 가져오기."""
    html: str | None = getattr(request.app.state, "page_html", None)
    if html is None:
        # lifespan 없이 띄운 앱 (기본 설정으로 렌더, 메모이즈됨)
        html = generate_html()
    return html


def build_page_response(html: str) -> HTMLResponse:
    """
    문서를 고정 헤더와 함께 응답으로 감싸기.

    Content-Type을 헤더로 직접 넘겨 charset 표기(UTF-8)를 그대로 유지.
    """
    return HTMLResponse(content=html, headers=dict(RESPONSE_HEADERS))


class ClockPage:
    """
    시계 페이지 ASGI endpoint (모든 요청 공통).

    함수 endpoint는 Starlette가 GET/HEAD로 제한하므로
    raw ASGI callable로 등록해 method를 보지 않는다.
    """

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        request = Request(scope, receive)
        response = build_page_response(get_page_html(request))
        await response(scope, receive, send)


clock_page = ClockPage()
