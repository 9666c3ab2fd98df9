"""
Page Generator: Jinja2 기반 HTML 문서 생성.

- 입력: PageSettings (기본값 사용 시 인자 없음)
- 출력: style/script가 모두 인라인된 단일 HTML 문자열
- 순수 함수: 동일 설정 → 바이트 단위로 동일한 문서 (시각/난수 미포함)

내장 스크립트 구성 (partials/):
- starfield.js  → Starfield (canvas 애니메이션, resize 시 재생성)
- datetime.js   → DateTimeDisplay (1초마다 날짜/시계 갱신)
- fullscreen.js → FullscreenControl (전체화면 토글, 버튼 숨김)
- bootstrap.js  → 세 컴포넌트를 각자 상태로 생성/조립
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError, TemplateNotFound

from cosmic_clock.domain.constants import (
    CANVAS_ID,
    CLOCK_ID,
    DATE_ID,
    FULLSCREEN_BUTTON_ID,
    HIDDEN_CLASS,
    PAGE_TEMPLATE_NAME,
)
from cosmic_clock.domain.errors import ClockConfigError, ErrorCodes
from cosmic_clock.domain.schemas import PageSettings

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent.parent / "app" / "templates"

jinja_templates = Jinja2Templates(directory=TEMPLATES_DIR)
# 내장 스크립트에 한자를 그대로 남김 (<, >, &, ' 는 tojson이 계속 이스케이프)
jinja_templates.env.policies["json.dumps_kwargs"] = {
    "sort_keys": True,
    "ensure_ascii": False,
}


# =============================================================================
# Template Context
# =============================================================================


def dom_ids() -> dict[str, str]:
    """템플릿/스크립트가 공유하는 DOM id."""
    return {
        "canvas": CANVAS_ID,
        "date": DATE_ID,
        "clock": CLOCK_ID,
        "fullscreenButton": FULLSCREEN_BUTTON_ID,
        "hiddenClass": HIDDEN_CLASS,
    }


def client_config(settings: PageSettings) -> dict[str, Any]:
    """
    내장 스크립트 초기화 설정 (initCosmicClock 인자).

    Args:
        settings: 페이지 설정

    Returns:
        JSON 직렬화 가능한 dict (JS 쪽 camelCase 키)
    """
    starfield = settings.starfield
    clock = settings.clock
    return {
        "dom": dom_ids(),
        "starfield": {
            "count": starfield.count,
            "maxRadius": starfield.max_radius,
            "minOpacity": starfield.min_opacity,
            "opacityRange": starfield.opacity_range,
            "minSpeed": starfield.min_speed,
            "speedRange": starfield.speed_range,
        },
        "clock": {
            "tickIntervalMs": clock.tick_interval_ms,
            "weekdayNames": list(clock.weekday_names),
        },
    }


# =============================================================================
# Rendering
# =============================================================================


@lru_cache(maxsize=8)
def _render(settings: PageSettings) -> str:
    try:
        template = jinja_templates.get_template(PAGE_TEMPLATE_NAME)
    except TemplateNotFound as e:
        raise ClockConfigError(
            ErrorCodes.TEMPLATE_NOT_FOUND,
            template=e.name,
            directory=str(TEMPLATES_DIR),
        ) from e

    try:
        html = template.render(
            settings=settings,
            dom=dom_ids(),
            client_config=client_config(settings),
        )
    except TemplateError as e:
        logger.error(f"Page render failed: {e}", exc_info=True)
        raise ClockConfigError(
            ErrorCodes.RENDER_FAILED,
            template=PAGE_TEMPLATE_NAME,
            cause=str(e),
        ) from e

    logger.info(f"Page rendered: {len(html.encode('utf-8'))} bytes")
    return html


def generate_html(settings: PageSettings | None = None) -> str:
    """
    HTML 문서 생성.

    Args:
        settings: 페이지 설정 (None이면 기본값)

    Returns:
        완결된 HTML 문서 문자열

    Raises:
        ClockConfigError: TEMPLATE_NOT_FOUND, RENDER_FAILED
    """
    if settings is None:
        settings = PageSettings()
    return _render(settings)
