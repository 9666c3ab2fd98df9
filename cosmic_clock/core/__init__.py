"""
Core layer: 설정 로드.

역할:
- default.yaml 읽기, PageSettings 구성
"""

from .config import build_settings, load_config, load_settings, server_address

__all__ = [
    "load_config",
    "build_settings",
    "load_settings",
    "server_address",
]
