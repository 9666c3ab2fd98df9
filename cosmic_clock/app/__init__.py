"""
App layer: HTTP 서버 (FastAPI).

역할:
- 모든 요청에 같은 HTML 문서 반환
- 시작 시 설정 로드 + 문서 렌더 (요청 경로에는 에러 상태 없음)

주의: 폴더 구분
- cosmic_clock/app/templates/ → Jinja2 HTML + 인라인 partials (CSS/JS)
"""
