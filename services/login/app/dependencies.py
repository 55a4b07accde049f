from functools import lru_cache

from libs.common import create_redis_client
from services.login.app.core.CodeService import InMemoryVerificationCodeStore, VerificationCodeStorePort
from services.login.app.core.FormSessionRegistry import FormSessionRegistry
from services.login.app.db.connection import settings
from services.login.app.db.stores.verification_code import RedisVerificationCodeStore


@lru_cache
def _verification_code_store() -> VerificationCodeStorePort:
    if settings.use_redis_store:
        return RedisVerificationCodeStore(
            create_redis_client(settings.LOGIN_REDIS_URL),
            namespace=settings.LOGIN_REDIS_NAMESPACE,
        )
    return InMemoryVerificationCodeStore()


@lru_cache
def get_form_registry() -> FormSessionRegistry:
    return FormSessionRegistry(
        store=_verification_code_store(),
        countdown_seconds=settings.LOGIN_COUNTDOWN_SECONDS,
        countdown_interval=settings.LOGIN_COUNTDOWN_INTERVAL_SECONDS,
        submit_delay=settings.LOGIN_SUBMIT_DELAY_SECONDS,
        idle_timeout=settings.LOGIN_SESSION_IDLE_SECONDS,
        max_sessions=settings.LOGIN_MAX_SESSIONS,
    )
