from datetime import datetime

from redis import asyncio as aioredis

from libs.common import ensure_cst
from libs.schemas import StoredCode
from services.login.app.core.CodeService import VerificationCodeStorePort


class RedisVerificationCodeStore(VerificationCodeStorePort):
    """
    Redis 해시에 인증번호를 저장합니다. 만료 시간은 두지 않습니다.
    """

    def __init__(self, client: aioredis.Redis, namespace: str = "login-form"):
        self._client = client
        self._namespace = namespace

    def _key(self, key: str) -> str:
        return f"{self._namespace}:{key}"

    async def save_code(self, key: str, entry: StoredCode) -> None:
        await self._client.hset(
            self._key(key),
            mapping={
                "code": entry.code,
                "issuedAt": entry.issuedAt.isoformat(),
            },
        )

    async def get_code(self, key: str) -> StoredCode | None:
        row = await self._client.hgetall(self._key(key))
        if not row:
            return None
        return StoredCode(
            code=row["code"],
            issuedAt=ensure_cst(datetime.fromisoformat(row["issuedAt"])),
        )

    async def delete_code(self, key: str) -> None:
        await self._client.delete(self._key(key))

    async def aclose(self) -> None:
        await self._client.aclose()
