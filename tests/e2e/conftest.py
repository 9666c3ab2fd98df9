"""
E2E 테스트용 Playwright 설정.

설정 항목:
- 뷰포트: 1280x720
- 시간대: Asia/Shanghai (UTC+8, DST 없음)
- headless 모드
- 실패 시 스크린샷 + 콘솔 로그 저장

Playwright는 선택적 의존성:
- 미설치 또는 브라우저 실행 불가 → 브라우저 테스트 skip
"""

from collections.abc import Generator
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest

# Playwright는 선택적 의존성 - 설치되어 있을 때만 import
try:
    from playwright.sync_api import Error as PlaywrightError
    from playwright.sync_api import sync_playwright

    PLAYWRIGHT_AVAILABLE = True
except ImportError:
    PLAYWRIGHT_AVAILABLE = False
    PlaywrightError = Exception  # type: ignore[misc,assignment]

if TYPE_CHECKING:
    from playwright.sync_api import Browser, BrowserContext, Page

# =============================================================================
# 상수
# =============================================================================

ARTIFACTS_DIR = Path(__file__).parent / "artifacts"
VIEWPORT = {"width": 1280, "height": 720}
TIMEZONE_ID = "Asia/Shanghai"

# =============================================================================
# Fullscreen API 스텁
# =============================================================================
# headless 브라우저의 실제 전체화면 전환 대신 호출만 기록하고
# fullscreenchange 이벤트를 발생시킨다.

FULLSCREEN_STUB = """
(() => {
  window.__fullscreenCalls = [];
  let current = null;
  Object.defineProperty(Document.prototype, 'fullscreenElement', {
    configurable: true,
    get() { return current; },
  });
  Element.prototype.requestFullscreen = function () {
    window.__fullscreenCalls.push('request');
    current = this;
    document.dispatchEvent(new Event('fullscreenchange'));
    return Promise.resolve();
  };
  Document.prototype.exitFullscreen = function () {
    window.__fullscreenCalls.push('exit');
    current = null;
    document.dispatchEvent(new Event('fullscreenchange'));
    return Promise.resolve();
  };
})();
"""


# =============================================================================
# Browser Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def browser() -> "Generator[Browser, None, None]":
    """Chromium (headless). 사용할 수 없으면 skip."""
    if not PLAYWRIGHT_AVAILABLE:
        pytest.skip("playwright not installed")

    manager = sync_playwright().start()
    try:
        browser = manager.chromium.launch()
    except PlaywrightError as e:
        manager.stop()
        pytest.skip(f"chromium not available: {e}")

    yield browser

    browser.close()
    manager.stop()


@pytest.fixture
def browser_context_args() -> dict[str, Any]:
    """브라우저 컨텍스트 설정."""
    return {
        "viewport": dict(VIEWPORT),
        "timezone_id": TIMEZONE_ID,
        "locale": "zh-CN",
    }


@pytest.fixture
def context(
    browser: "Browser", browser_context_args: dict[str, Any]
) -> "Generator[BrowserContext, None, None]":
    """브라우저 컨텍스트 생성."""
    context = browser.new_context(**browser_context_args)
    yield context
    context.close()


@pytest.fixture
def page(context: "BrowserContext") -> "Generator[Page, None, None]":
    """
    페이지 fixture with 타임아웃 + 콘솔 로그 수집.

    타임아웃: 기본 액션/네비게이션 10초
    """
    page = context.new_page()
    page.set_default_timeout(10000)
    page.set_default_navigation_timeout(10000)

    # 콘솔 로그 수집
    console_logs: list[str] = []
    page.on("console", lambda msg: console_logs.append(f"[{msg.type}] {msg.text}"))
    page.on("pageerror", lambda err: console_logs.append(f"[PAGE_ERROR] {err}"))

    # 테스트에서 접근 가능하도록 저장
    page._console_logs = console_logs  # type: ignore[attr-defined]

    yield page

    page.close()


@pytest.fixture
def fullscreen_page(page: "Page") -> "Page":
    """Fullscreen API 스텁이 설치된 페이지."""
    page.add_init_script(FULLSCREEN_STUB)
    return page


# =============================================================================
# 실패 시 디버깅 정보 저장
# =============================================================================


def _generate_artifact_name(item_name: str) -> str:
    """고유한 artifact 파일명 생성 (테스트명 + 타임스탬프)."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    clean_name = item_name.split("[")[0]
    return f"{clean_name}_{timestamp}"


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """테스트 실패 시 스크린샷/콘솔 로그 저장."""
    outcome = yield
    rep = outcome.get_result()

    if rep.when != "call" or not rep.failed:
        return

    page = item.funcargs.get("page") or item.funcargs.get("fullscreen_page")
    if page is None:
        return

    ARTIFACTS_DIR.mkdir(exist_ok=True)
    base_name = _generate_artifact_name(item.name)

    screenshot_path = ARTIFACTS_DIR / f"{base_name}.png"
    try:
        page.screenshot(path=str(screenshot_path), full_page=True)
        print(f"\n📸 Screenshot: {screenshot_path}")
    except PlaywrightError as e:
        print(f"\n⚠️ Screenshot failed: {e}")

    console_logs = getattr(page, "_console_logs", [])
    if console_logs:
        log_path = ARTIFACTS_DIR / f"{base_name}.log"
        log_path.write_text("\n".join(console_logs), encoding="utf-8")
        print(f"📋 Console log: {log_path}")
