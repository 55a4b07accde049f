"""
Tests for the Redis backed verification code store.
"""

from datetime import timedelta

import pytest
from fakeredis import FakeServer
from fakeredis import aioredis as fake_aioredis

from libs.common import now_cst
from libs.schemas import StoredCode
from services.login.app.core.CodeService import VERIFICATION_CODE_KEY, VerificationCodeSession
from services.login.app.db.stores.verification_code import RedisVerificationCodeStore


@pytest.fixture
def redis_client():
    return fake_aioredis.FakeRedis(server=FakeServer(), decode_responses=True)


@pytest.fixture
async def redis_store(redis_client):
    store = RedisVerificationCodeStore(redis_client, namespace="test-login")
    yield store
    await store.aclose()


class TestRedisVerificationCodeStore:
    """Tests for RedisVerificationCodeStore"""

    async def test_save_and_get(self, redis_store, redis_client):
        issued_at = now_cst()
        await redis_store.save_code(VERIFICATION_CODE_KEY, StoredCode(code="123456", issuedAt=issued_at))

        entry = await redis_store.get_code(VERIFICATION_CODE_KEY)

        assert entry.code == "123456"
        assert entry.issuedAt == issued_at
        assert entry.issuedAt.utcoffset() == timedelta(hours=8)
        assert await redis_client.hget("test-login:verificationCode", "code") == "123456"

    async def test_missing_key(self, redis_store):
        assert await redis_store.get_code(VERIFICATION_CODE_KEY) is None

    async def test_overwrite_and_delete(self, redis_store, redis_client):
        await redis_store.save_code("sid:verificationCode", StoredCode(code="111111", issuedAt=now_cst()))
        await redis_store.save_code("sid:verificationCode", StoredCode(code="222222", issuedAt=now_cst()))

        assert (await redis_store.get_code("sid:verificationCode")).code == "222222"

        await redis_store.delete_code("sid:verificationCode")

        assert await redis_store.get_code("sid:verificationCode") is None
        assert await redis_client.exists("test-login:sid:verificationCode") == 0

    async def test_no_expiry(self, redis_store, redis_client):
        await redis_store.save_code(VERIFICATION_CODE_KEY, StoredCode(code="123456", issuedAt=now_cst()))

        assert await redis_client.ttl("test-login:verificationCode") == -1

    async def test_session_on_redis(self, redis_store):
        session = VerificationCodeSession(redis_store)

        code = await session.issue()

        assert await session.verify(code)
        await session.clear()
        assert not await session.verify(code)
