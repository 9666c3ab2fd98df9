"""
Page schemas.

규칙:
- 모든 설정은 frozen dataclass (해시 가능 → 렌더 결과 메모이즈 키)
- 생성 시점에 범위 검증, 위반 시 ClockConfigError(CONFIG_INVALID)
- 필드 기본값은 constants.py와 동일
"""

import math
from dataclasses import asdict, dataclass, field
from typing import Any

from cosmic_clock.domain.constants import (
    CLOCK_TICK_INTERVAL_MS,
    DAYS_PER_WEEK,
    FULLSCREEN_LABEL,
    FULLSCREEN_TITLE,
    PAGE_LANG,
    PAGE_TITLE,
    STAR_COUNT,
    STAR_MAX_RADIUS,
    STAR_MIN_OPACITY,
    STAR_MIN_SPEED,
    STAR_OPACITY_RANGE,
    STAR_SPEED_RANGE,
    WEEKDAY_NAMES,
)
from cosmic_clock.domain.errors import ClockConfigError, ErrorCodes


def _reject(field_name: str, value: Any, reason: str) -> ClockConfigError:
    return ClockConfigError(
        ErrorCodes.CONFIG_INVALID,
        field=field_name,
        value=value,
        reason=reason,
    )


# =============================================================================
# Starfield
# =============================================================================

@dataclass(frozen=True)
class StarfieldSettings:
    """
    별 배경 설정.

    viewport 크기는 브라우저가 정하므로 여기에는 별의 분포만 둔다.
    """
    count: int = STAR_COUNT
    max_radius: float = STAR_MAX_RADIUS
    min_opacity: float = STAR_MIN_OPACITY
    opacity_range: float = STAR_OPACITY_RANGE
    min_speed: float = STAR_MIN_SPEED  # px/frame
    speed_range: float = STAR_SPEED_RANGE

    def __post_init__(self) -> None:
        for name in (
            "max_radius",
            "min_opacity",
            "opacity_range",
            "min_speed",
            "speed_range",
        ):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise _reject(f"starfield.{name}", value, "NaN/Inf not allowed")
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise _reject("starfield.count", self.count, "must be an integer")
        if self.count <= 0:
            raise _reject("starfield.count", self.count, "must be positive")
        if self.max_radius <= 0:
            raise _reject("starfield.max_radius", self.max_radius, "must be positive")
        if self.min_opacity < 0 or self.opacity_range < 0:
            raise _reject(
                "starfield.min_opacity",
                self.min_opacity,
                "opacity bounds must be non-negative",
            )
        if self.min_opacity + self.opacity_range > 1:
            raise _reject(
                "starfield.opacity_range",
                self.opacity_range,
                "min_opacity + opacity_range must not exceed 1",
            )
        if self.min_speed < 0 or self.speed_range < 0:
            raise _reject(
                "starfield.min_speed",
                self.min_speed,
                "speed bounds must be non-negative",
            )


# =============================================================================
# Clock
# =============================================================================

@dataclass(frozen=True)
class ClockSettings:
    """날짜/시계 표시 설정."""
    tick_interval_ms: int = CLOCK_TICK_INTERVAL_MS
    # 0=일요일 ... 6=토요일 (Date.getDay() 인덱스)
    weekday_names: tuple[str, ...] = WEEKDAY_NAMES

    def __post_init__(self) -> None:
        if isinstance(self.tick_interval_ms, bool) or not isinstance(
            self.tick_interval_ms, int
        ):
            raise _reject(
                "clock.tick_interval_ms", self.tick_interval_ms, "must be an integer"
            )
        if self.tick_interval_ms <= 0:
            raise _reject(
                "clock.tick_interval_ms", self.tick_interval_ms, "must be positive"
            )
        if len(self.weekday_names) != DAYS_PER_WEEK:
            raise _reject(
                "clock.weekday_names",
                list(self.weekday_names),
                f"exactly {DAYS_PER_WEEK} names required (Sunday first)",
            )
        for name in self.weekday_names:
            if not isinstance(name, str) or not name:
                raise _reject(
                    "clock.weekday_names", name, "names must be non-empty strings"
                )


# =============================================================================
# Fullscreen
# =============================================================================

@dataclass(frozen=True)
class FullscreenSettings:
    """전체화면 토글 버튼."""
    label: str = FULLSCREEN_LABEL
    title: str = FULLSCREEN_TITLE

    def __post_init__(self) -> None:
        if not self.label:
            raise _reject("fullscreen.label", self.label, "must not be empty")
        if not self.title:
            raise _reject("fullscreen.title", self.title, "must not be empty")


# =============================================================================
# Page
# =============================================================================

@dataclass(frozen=True)
class PageSettings:
    """
    페이지 전체 설정.

    Page Generator의 유일한 입력. 동일한 PageSettings → 동일한 HTML.
    """
    title: str = PAGE_TITLE
    lang: str = PAGE_LANG
    starfield: StarfieldSettings = field(default_factory=StarfieldSettings)
    clock: ClockSettings = field(default_factory=ClockSettings)
    fullscreen: FullscreenSettings = field(default_factory=FullscreenSettings)

    def __post_init__(self) -> None:
        if not self.title:
            raise _reject("page.title", self.title, "must not be empty")

    def to_dict(self) -> dict[str, Any]:
        """JSON 직렬화용 (설정 로드 로그)."""
        data = asdict(self)
        data["clock"]["weekday_names"] = list(self.clock.weekday_names)
        return data
