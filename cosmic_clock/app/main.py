"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run uvicorn cosmic_clock.app.main:app --reload
- 프로덕션: uv run uvicorn cosmic_clock.app.main:app
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from cosmic_clock import __version__
from cosmic_clock.app.routes import page
from cosmic_clock.core.config import build_settings, load_config
from cosmic_clock.domain.errors import ClockConfigError
from cosmic_clock.render.page import generate_html

logger = logging.getLogger(__name__)

# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    시작 시: 설정 로드, 문서 1회 렌더 (실패 시 시작 중단)
    종료 시: 정리할 리소스 없음
    """
    # Startup
    try:
        app.state.config = load_config()
        app.state.settings = build_settings(app.state.config)
        app.state.page_html = generate_html(app.state.settings)
    except ClockConfigError as e:
        logger.error(f"Startup aborted: {e.to_dict()}")
        raise

    yield

    # Shutdown


# =============================================================================
# App Instance
# =============================================================================

# 단일 페이지 외 라우트 없음 (docs/openapi 비활성화)
app = FastAPI(
    title="Cosmic Clock",
    description="별 배경 + 중국어 날짜/시계 단일 페이지",
    version=__version__,
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)


# =============================================================================
# Routes
# =============================================================================

# ASGI endpoint + methods 미지정 → 모든 HTTP method 허용
app.add_route(page.CATCH_ALL_PATH, page.clock_page, include_in_schema=False)


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    from cosmic_clock.core.config import server_address

    host, port = server_address(load_config())
    uvicorn.run(
        "cosmic_clock.app.main:app",
        host=host,
        port=port,
        reload=True,
    )
