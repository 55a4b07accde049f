"""
인증번호 발급 시각 기록용 시간 유틸리티 (중국표준시, UTC+8).
"""
from datetime import datetime, timedelta, timezone

CST_TIMEZONE = timezone(timedelta(hours=8))


def now_cst() -> datetime:
    return datetime.now(CST_TIMEZONE)


def ensure_cst(dt: datetime | None) -> datetime | None:
    """
    Redis 등에서 읽은 시각을 CST로 맞춥니다. 시간대 정보가 없으면 CST로 간주합니다.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=CST_TIMEZONE)
    return dt.astimezone(CST_TIMEZONE)
