"""
Render layer: HTML 문서 생성.
"""

from .page import client_config, generate_html

__all__ = ["generate_html", "client_config"]
