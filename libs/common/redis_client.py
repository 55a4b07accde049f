"""
공통 Redis 클라이언트 생성 모듈
"""
import logging

from redis import asyncio as aioredis

logger = logging.getLogger(__name__)


def create_redis_client(redis_url: str) -> aioredis.Redis:
    """
    문자열 응답을 돌려주는 비동기 Redis 클라이언트를 생성합니다.
    실제 연결은 첫 명령 실행 시점에 이루어집니다.

    Args:
        redis_url: redis://host:port/db 형식의 접속 URL

    Raises:
        ValueError: URL이 비어있는 경우
    """
    if not redis_url:
        raise ValueError("Redis URL이 설정되지 않았습니다.")

    logger.info("Redis client created for %s", redis_url.split("@")[-1])
    return aioredis.from_url(redis_url, decode_responses=True)
