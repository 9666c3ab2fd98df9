"""
설정 로드: default.yaml → PageSettings

규칙:
- 파일 없음 → 빈 설정 (모든 값 기본값)
- YAML 파싱 실패, 최상위가 mapping 아님 → CONFIG_UNREADABLE
- 값 타입/범위 위반 → CONFIG_INVALID (필드 경로 포함)
- 모르는 키는 무시
"""

import logging
import math
from pathlib import Path
from typing import Any

import yaml

from cosmic_clock.domain.constants import DEFAULT_HOST, DEFAULT_PORT
from cosmic_clock.domain.errors import ClockConfigError, ErrorCodes
from cosmic_clock.domain.schemas import (
    ClockSettings,
    FullscreenSettings,
    PageSettings,
    StarfieldSettings,
)

logger = logging.getLogger(__name__)

# 프로젝트 루트의 default.yaml
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "default.yaml"


# =============================================================================
# Loading
# =============================================================================


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """
    설정 파일 로드.

    Args:
        config_path: YAML 경로 (None이면 프로젝트 루트 default.yaml)

    Returns:
        설정 dict (파일이 없거나 비어 있으면 {})

    Raises:
        ClockConfigError: CONFIG_UNREADABLE
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        logger.debug(f"Config file not found, using defaults: {config_path}")
        return {}

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ClockConfigError(
            ErrorCodes.CONFIG_UNREADABLE,
            path=str(config_path),
            cause=str(e),
        ) from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ClockConfigError(
            ErrorCodes.CONFIG_UNREADABLE,
            path=str(config_path),
            cause=f"top level must be a mapping, got {type(data).__name__}",
        )

    return data


# =============================================================================
# Value Coercion
# =============================================================================


def _section(config: dict[str, Any], name: str) -> dict[str, Any]:
    """최상위 섹션 추출 (없으면 {})."""
    section = config.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ClockConfigError(
            ErrorCodes.CONFIG_INVALID,
            field=name,
            value=section,
            reason="section must be a mapping",
        )
    return section


def _as_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ClockConfigError(
            ErrorCodes.CONFIG_INVALID,
            field=field_name,
            value=value,
            reason="must be an integer",
        )
    return value


def _as_float(value: Any, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ClockConfigError(
            ErrorCodes.CONFIG_INVALID,
            field=field_name,
            value=value,
            reason="must be a number",
        )
    if not math.isfinite(value):
        raise ClockConfigError(
            ErrorCodes.CONFIG_INVALID,
            field=field_name,
            value=value,
            reason="NaN/Inf not allowed",
        )
    return float(value)


def _as_str(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ClockConfigError(
            ErrorCodes.CONFIG_INVALID,
            field=field_name,
            value=value,
            reason="must be a string",
        )
    return value


def _pick(
    section: dict[str, Any],
    section_name: str,
    converters: dict[str, Any],
) -> dict[str, Any]:
    """섹션에서 알려진 키만 골라 변환."""
    kwargs: dict[str, Any] = {}
    for key, convert in converters.items():
        if key in section:
            kwargs[key] = convert(section[key], f"{section_name}.{key}")
    return kwargs


def _as_weekday_names(value: Any, field_name: str) -> tuple[str, ...]:
    if not isinstance(value, list):
        raise ClockConfigError(
            ErrorCodes.CONFIG_INVALID,
            field=field_name,
            value=value,
            reason="must be a list",
        )
    # 길이/빈 문자열 검증은 ClockSettings에서
    return tuple(_as_str(name, field_name) for name in value)


# =============================================================================
# Settings
# =============================================================================


def build_settings(config: dict[str, Any]) -> PageSettings:
    """
    설정 dict → PageSettings.

    섹션: page, starfield, clock, fullscreen
    누락된 키는 constants.py 기본값.

    Raises:
        ClockConfigError: CONFIG_INVALID
    """
    starfield = StarfieldSettings(
        **_pick(
            _section(config, "starfield"),
            "starfield",
            {
                "count": _as_int,
                "max_radius": _as_float,
                "min_opacity": _as_float,
                "opacity_range": _as_float,
                "min_speed": _as_float,
                "speed_range": _as_float,
            },
        )
    )
    clock = ClockSettings(
        **_pick(
            _section(config, "clock"),
            "clock",
            {
                "tick_interval_ms": _as_int,
                "weekday_names": _as_weekday_names,
            },
        )
    )
    fullscreen = FullscreenSettings(
        **_pick(
            _section(config, "fullscreen"),
            "fullscreen",
            {"label": _as_str, "title": _as_str},
        )
    )

    page = _pick(_section(config, "page"), "page", {"title": _as_str, "lang": _as_str})

    settings = PageSettings(
        **page,
        starfield=starfield,
        clock=clock,
        fullscreen=fullscreen,
    )
    logger.info(
        f"Settings loaded: title={settings.title!r}, "
        f"stars={settings.starfield.count}, "
        f"tick={settings.clock.tick_interval_ms}ms"
    )
    logger.debug(f"Settings detail: {settings.to_dict()}")
    return settings


def load_settings(config_path: Path | None = None) -> PageSettings:
    """load_config + build_settings."""
    return build_settings(load_config(config_path))


def server_address(config: dict[str, Any]) -> tuple[str, int]:
    """
    uvicorn 실행 주소 (server.host, server.port).

    __main__ 진입점에서만 사용.
    """
    server = _section(config, "server")
    host = _as_str(server.get("host", DEFAULT_HOST), "server.host")
    port = _as_int(server.get("port", DEFAULT_PORT), "server.port")
    return host, port
