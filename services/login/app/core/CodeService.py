import asyncio
import logging
import secrets
from typing import Callable, Dict, Protocol

from libs.common import now_cst
from libs.schemas import StoredCode
from services.login.app.core.FormValidator import validate_mobile

logger = logging.getLogger(__name__)

VERIFICATION_CODE_KEY = "verificationCode"

CODE_MIN = 100_000
CODE_MAX = 999_999


class VerificationCodeStorePort(Protocol):
    async def save_code(self, key: str, entry: StoredCode) -> None: ...

    async def get_code(self, key: str) -> StoredCode | None: ...

    async def delete_code(self, key: str) -> None: ...

    async def aclose(self) -> None: ...


class InMemoryVerificationCodeStore(VerificationCodeStorePort):
    def __init__(self):
        self._store: Dict[str, StoredCode] = {}

    async def save_code(self, key: str, entry: StoredCode) -> None:
        self._store[key] = entry

    async def get_code(self, key: str) -> StoredCode | None:
        return self._store.get(key)

    async def delete_code(self, key: str) -> None:
        self._store.pop(key, None)

    async def aclose(self) -> None:
        self._store.clear()


class CodeRequestError(Exception):
    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code


def generate_code() -> str:
    return str(CODE_MIN + secrets.randbelow(CODE_MAX - CODE_MIN + 1))


def mask_mobile(mobile: str) -> str:
    if len(mobile) < 4:
        return "*" * len(mobile)
    return f"{mobile[:-4]}****"


def deliver_code(mobile: str, content: str) -> None:
    """
    인증번호 발송을 흉내내는 기본 발송 함수.
    실제 SMS는 보내지 않고 개발용 로그만 남깁니다.

    Args:
        mobile: 수신 휴대폰 번호
        content: 발송할 메시지 내용
    """
    logger.info("[SMS] 수신번호: %s, 내용: %s", mask_mobile(mobile), content)


class VerificationCodeSession:
    """
    폼 하나가 소유하는 인증번호.
    저장소 키 하나에 최대 하나의 코드만 유지하며, 새로 발급하면 이전 코드를 덮어씁니다.
    """

    def __init__(
        self,
        store: VerificationCodeStorePort | None = None,
        key: str = VERIFICATION_CODE_KEY,
        code_factory: Callable[[], str] | None = None,
    ):
        self.store = store if store is not None else InMemoryVerificationCodeStore()
        self.key = key
        self._code_factory = code_factory if code_factory is not None else generate_code

    async def issue(self) -> str:
        code = self._code_factory()
        await self.store.save_code(self.key, StoredCode(code=code, issuedAt=now_cst()))
        return code

    async def verify(self, candidate: str) -> bool:
        entry = await self.store.get_code(self.key)
        if entry is None:
            return False
        return entry.code == candidate

    async def peek(self) -> StoredCode | None:
        return await self.store.get_code(self.key)

    async def clear(self) -> None:
        await self.store.delete_code(self.key)


class Countdown:
    """
    인증번호 재요청 대기 타이머.

    타이머 태스크는 항상 하나만 유지합니다. start()는 이전 태스크를 취소한 뒤
    새로 시작하고, 매 틱마다 현재 남은 값을 읽어 1씩 줄입니다.
    """

    def __init__(
        self,
        seconds: int = 60,
        interval: float = 1.0,
        on_tick: Callable[[int], None] | None = None,
    ):
        self.seconds = seconds
        self.interval = interval
        self.remaining = 0
        self._on_tick = on_tick
        self._task: asyncio.Task | None = None

    @property
    def active(self) -> bool:
        return self.remaining > 0

    def start(self) -> None:
        self.cancel()
        self.remaining = self.seconds
        self._task = asyncio.get_running_loop().create_task(self._run())

    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
        self.remaining = 0

    async def wait(self) -> None:
        """카운트다운이 끝날 때까지 대기합니다. 도중에 재시작되면 새 타이머를 따라갑니다."""
        while self._task is not None and not self._task.done():
            await asyncio.wait({self._task})

    async def _run(self) -> None:
        while self.remaining > 0:
            await asyncio.sleep(self.interval)
            self.remaining = max(self.remaining - 1, 0)
            if self._on_tick is not None:
                self._on_tick(self.remaining)


class CodeService:
    """
    인증번호 요청을 처리하는 서비스.
    발급 중이거나 카운트다운이 남아있거나 휴대폰 번호가 유효하지 않으면 요청을 거부합니다.
    """

    def __init__(
        self,
        session: VerificationCodeSession | None = None,
        countdown: Countdown | None = None,
        code_sender: Callable[[str, str], None] | None = None,
    ):
        self.session = session if session is not None else VerificationCodeSession()
        self.countdown = countdown if countdown is not None else Countdown()
        self._code_sender = code_sender if code_sender is not None else deliver_code
        self.in_flight = False

    async def request_code(self, mobile: str) -> str:
        if self.in_flight:
            raise CodeRequestError("ERR-CODE-IN-FLIGHT", "正在获取验证码")
        if self.countdown.active:
            raise CodeRequestError("ERR-COUNTDOWN-ACTIVE", f"{self.countdown.remaining}秒后重试")
        mobile_error = validate_mobile(mobile)
        if mobile_error:
            raise CodeRequestError("ERR-IVD-MOBILE", mobile_error)

        self.in_flight = True
        try:
            code = await self.session.issue()
            self._send_code_message(mobile, code)
            self.countdown.start()
        finally:
            self.in_flight = False
        return code

    def close(self) -> None:
        self.countdown.cancel()

    def _send_code_message(self, mobile: str, code: str) -> None:
        content = f"生成的验证码为: {code}"
        logger.debug("Issued verification code for %s", mask_mobile(mobile))
        self._code_sender(mobile, content)
