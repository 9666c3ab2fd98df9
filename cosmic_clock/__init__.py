"""
Cosmic Clock (宇宙时钟): 별 배경 + 중국어 날짜/시계 단일 페이지 서버.

레이어:
- domain: 상수, 설정 스키마, 에러
- core: 설정 로드
- render: HTML 문서 생성
- app: FastAPI 요청 핸들러
"""

__version__ = "0.1.0"
