"""
Domain Constants: 페이지 전역 상수.

응답 헤더, DOM id, 요일 표, 별/시계 기본값 등
서버와 내장 스크립트가 함께 참조하는 값들.
"""

# =============================================================================
# Response Headers (응답 헤더 정책)
# =============================================================================
# 모든 요청에 동일한 값. 캐시는 명시적으로 비활성화.

CONTENT_TYPE_HTML = "text/html; charset=UTF-8"
CACHE_CONTROL_NO_STORE = "no-store, max-age=0"

RESPONSE_HEADERS = {
    "Content-Type": CONTENT_TYPE_HTML,
    "Cache-Control": CACHE_CONTROL_NO_STORE,
}

# =============================================================================
# Page
# =============================================================================

PAGE_TITLE = "宇宙时钟"
PAGE_LANG = "zh-CN"
PAGE_TEMPLATE_NAME = "clock.html"

# =============================================================================
# DOM Ids (내장 스크립트가 찾는 요소)
# =============================================================================

CANVAS_ID = "canvas"
DATE_ID = "date"
CLOCK_ID = "clock"
FULLSCREEN_BUTTON_ID = "fullscreenBtn"

# 전체화면 중 버튼에 붙는 클래스 (display: none)
HIDDEN_CLASS = "hidden"

# =============================================================================
# Starfield Defaults (별 배경)
# =============================================================================
# 별 하나: x, y, size, opacity, speed
# - size    ∈ [0, STAR_MAX_RADIUS)
# - opacity ∈ [STAR_MIN_OPACITY, STAR_MIN_OPACITY + STAR_OPACITY_RANGE)
# - speed   ∈ [STAR_MIN_SPEED, STAR_MIN_SPEED + STAR_SPEED_RANGE)  (px/frame)

STAR_COUNT = 150
STAR_MAX_RADIUS = 1.5
STAR_MIN_OPACITY = 0.3
STAR_OPACITY_RANGE = 0.5
STAR_MIN_SPEED = 0.05
STAR_SPEED_RANGE = 0.15

# =============================================================================
# Clock Defaults (날짜/시계)
# =============================================================================
# 날짜 포맷: YYYY年MM月DD日 星期<요일>
# 인덱스는 JS Date.getDay()와 동일 (0=일요일 ... 6=토요일)

CLOCK_TICK_INTERVAL_MS = 1000
WEEKDAY_NAMES = ("日", "一", "二", "三", "四", "五", "六")
DAYS_PER_WEEK = 7

# =============================================================================
# Fullscreen Control
# =============================================================================

FULLSCREEN_LABEL = "⛶ 全屏"
FULLSCREEN_TITLE = "切换全屏"

# =============================================================================
# Server (uvicorn 실행용)
# =============================================================================

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
