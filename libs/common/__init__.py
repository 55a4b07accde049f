"""
Dash 공통 라이브러리
모든 서비스에서 사용할 수 있는 공통 기능을 제공합니다.
"""

from libs.common.redis_client import create_redis_client
from libs.common.timezone import CST_TIMEZONE, now_cst, ensure_cst

__all__ = [
    "create_redis_client",
    "CST_TIMEZONE",
    "now_cst",
    "ensure_cst",
]
