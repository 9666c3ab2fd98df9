"""
Domain layer: 페이지를 구성하는 고정 값과 스키마.
"""
