import logging
import secrets
import time
from typing import Callable, Dict

from services.login.app.core.CodeService import (
    VERIFICATION_CODE_KEY,
    CodeService,
    Countdown,
    InMemoryVerificationCodeStore,
    VerificationCodeSession,
    VerificationCodeStorePort,
)
from services.login.app.core.LoginFormService import LoginForm

logger = logging.getLogger(__name__)


class FormSessionError(Exception):
    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code


class FormSessionRegistry:
    """
    브라우저 세션별 LoginForm 인스턴스를 보관합니다.
    인증번호 저장소는 공유하고, 세션 ID로 키를 구분합니다.

    idle_timeout 동안 접근이 없는 세션은 만료되고, 새 세션을 만들 때 정리됩니다.
    max_sessions에 도달하면 가장 오래 사용되지 않은 세션부터 닫습니다.
    """

    def __init__(
        self,
        store: VerificationCodeStorePort | None = None,
        countdown_seconds: int = 60,
        countdown_interval: float = 1.0,
        submit_delay: float = 1.0,
        code_sender: Callable[[str, str], None] | None = None,
        idle_timeout: float = 1800.0,
        max_sessions: int = 1000,
        clock: Callable[[], float] | None = None,
    ):
        self.store = store if store is not None else InMemoryVerificationCodeStore()
        self.countdown_seconds = countdown_seconds
        self.countdown_interval = countdown_interval
        self.submit_delay = submit_delay
        self.idle_timeout = idle_timeout
        self.max_sessions = max_sessions
        self._code_sender = code_sender
        self._clock = clock if clock is not None else time.monotonic
        self._forms: Dict[str, LoginForm] = {}
        self._last_seen: Dict[str, float] = {}

    def __len__(self) -> int:
        return len(self._forms)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._forms

    async def create(self) -> tuple[str, LoginForm]:
        await self.purge_expired()
        while self._forms and len(self._forms) >= self.max_sessions:
            oldest = min(self._last_seen, key=self._last_seen.__getitem__)
            logger.info("Session limit reached, closing least recently used form")
            await self.remove(oldest)

        session_id = secrets.token_urlsafe(16)
        code_service = CodeService(
            session=VerificationCodeSession(self.store, key=f"{session_id}:{VERIFICATION_CODE_KEY}"),
            countdown=Countdown(seconds=self.countdown_seconds, interval=self.countdown_interval),
            code_sender=self._code_sender,
        )
        form = LoginForm(code_service=code_service, submit_delay=self.submit_delay)
        self._forms[session_id] = form
        self._last_seen[session_id] = self._clock()
        logger.debug("Login form mounted (active=%d)", len(self._forms))
        return session_id, form

    def get(self, session_id: str | None) -> LoginForm:
        if not session_id:
            raise FormSessionError("ERR-MISSING-SESSION", "폼 세션 식별자가 없습니다.")
        form = self._forms.get(session_id)
        if form is None:
            raise FormSessionError("ERR-SESSION-NOT-FOUND", "폼 세션이 존재하지 않습니다.")
        if self._is_expired(session_id):
            # 실제 정리는 purge_expired()에서 수행
            raise FormSessionError("ERR-SESSION-EXPIRED", "폼 세션이 만료되었습니다.")
        self._last_seen[session_id] = self._clock()
        return form

    async def remove(self, session_id: str | None) -> None:
        if not session_id or session_id not in self._forms:
            raise FormSessionError("ERR-SESSION-NOT-FOUND", "폼 세션이 존재하지 않습니다.")
        form = self._forms.pop(session_id)
        self._last_seen.pop(session_id, None)
        # 세션이 끝나면 타이머를 정리하고 남은 인증번호도 삭제
        await form.aclose()
        await form.session.clear()
        logger.debug("Login form unmounted (active=%d)", len(self._forms))

    async def purge_expired(self) -> int:
        expired = [session_id for session_id in self._forms if self._is_expired(session_id)]
        for session_id in expired:
            await self.remove(session_id)
        if expired:
            logger.info("Expired %d idle login form session(s)", len(expired))
        return len(expired)

    async def aclose(self) -> None:
        forms = list(self._forms.values())
        self._forms.clear()
        self._last_seen.clear()
        for form in forms:
            await form.aclose()
        await self.store.aclose()

    def _is_expired(self, session_id: str) -> bool:
        return self._clock() - self._last_seen[session_id] > self.idle_timeout
