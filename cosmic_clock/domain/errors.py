"""
Error definitions for the clock server.

규칙:
- 에러는 시작 시점(설정 로드, 템플릿 렌더)에서만 발생
- 요청 처리 경로에는 에러 상태 없음
"""

from typing import Any


class ClockConfigError(Exception):
    """
    설정/렌더 단계에서 발생하는 에러.

    앱 시작을 중단해야 하는 경우에만 사용:
    - default.yaml 파싱 실패
    - 설정 값 범위 위반 (별 개수 0 이하, 요일 7개 아님 등)
    - 템플릿 누락/렌더 실패

    Usage:
        raise ClockConfigError("CONFIG_INVALID", field="starfield.count", value=0)
    """

    def __init__(self, code: str, **context: Any) -> None:
        self.code = code
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"[{self.code}] {ctx_str}" if ctx_str else f"[{self.code}]"

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            **self.context,
        }


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Config ===
    CONFIG_UNREADABLE = "CONFIG_UNREADABLE"  # YAML 파싱 실패, 최상위가 mapping 아님
    CONFIG_INVALID = "CONFIG_INVALID"  # 값 타입/범위 위반

    # === Render ===
    TEMPLATE_NOT_FOUND = "TEMPLATE_NOT_FOUND"
    RENDER_FAILED = "RENDER_FAILED"
