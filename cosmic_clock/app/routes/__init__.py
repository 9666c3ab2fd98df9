"""
Routes: 페이지 핸들러.
"""
