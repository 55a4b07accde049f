import asyncio
import contextlib
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from libs.schemas import FormErrors, FormState, SubmissionPhase
from services.login.app.core.CodeService import CodeService, VerificationCodeSession, mask_mobile
from services.login.app.core.FormValidator import (
    CODE_MISMATCH,
    FIELDS_REQUIRED,
    validate_code,
    validate_mobile,
)

logger = logging.getLogger(__name__)


class SubmitOutcome(str, Enum):
    ALERTED = "ALERTED"
    INVALID = "INVALID"
    MISMATCH = "MISMATCH"
    ACCEPTED = "ACCEPTED"
    BUSY = "BUSY"


@dataclass
class SubmissionResult:
    outcome: SubmitOutcome
    alert: str | None = None


def _log_alert(message: str) -> None:
    logger.info("[ALERT] %s", message)


class LoginForm:
    """
    휴대폰 번호 + 인증번호 로그인 폼.

    성공 다이얼로그는 제출 즉시 열리고(PENDING_CONFIRM), 지연 시간이 지나면
    제출 중 상태가 해제되고 저장된 인증번호가 삭제됩니다(CONFIRMED).
    타이머는 aclose() 또는 async with 블록 종료 시 모두 취소됩니다.
    """

    def __init__(
        self,
        code_service: CodeService | None = None,
        submit_delay: float = 1.0,
        alert_handler: Callable[[str], None] | None = None,
    ):
        self.code_service = code_service if code_service is not None else CodeService()
        self.submit_delay = submit_delay
        self._alert_handler = alert_handler if alert_handler is not None else _log_alert

        self.mobile = ""
        self.code = ""
        self.errors = FormErrors()
        self.submitting = False
        self.dialog_open = False
        self.phase = SubmissionPhase.IDLE
        self._confirm_task: asyncio.Task | None = None

    async def __aenter__(self) -> "LoginForm":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    @property
    def session(self) -> VerificationCodeSession:
        return self.code_service.session

    @property
    def can_request_code(self) -> bool:
        return (
            not validate_mobile(self.mobile)
            and not self.code_service.in_flight
            and not self.code_service.countdown.active
        )

    def set_mobile(self, value: str) -> None:
        self.mobile = value

    def set_code(self, value: str) -> None:
        self.code = value

    async def request_code(self) -> str:
        return await self.code_service.request_code(self.mobile)

    async def submit(self) -> SubmissionResult:
        if self.submitting:
            return SubmissionResult(SubmitOutcome.BUSY)

        if not self.mobile and not self.code:
            self._alert_handler(FIELDS_REQUIRED)
            return SubmissionResult(SubmitOutcome.ALERTED, alert=FIELDS_REQUIRED)

        mobile_error = validate_mobile(self.mobile)
        code_error = validate_code(self.code)
        if mobile_error or code_error:
            self.errors = FormErrors(mobile=mobile_error, code=code_error)
            return SubmissionResult(SubmitOutcome.INVALID)

        if not await self.session.verify(self.code):
            self.errors = FormErrors(code=CODE_MISMATCH)
            return SubmissionResult(SubmitOutcome.MISMATCH)

        self.errors = FormErrors()
        self.submitting = True
        self.dialog_open = True
        self.phase = SubmissionPhase.PENDING_CONFIRM
        self._confirm_task = asyncio.get_running_loop().create_task(
            self._confirm(self.mobile, self.code)
        )
        return SubmissionResult(SubmitOutcome.ACCEPTED)

    def close_dialog(self) -> None:
        self.dialog_open = False

    async def wait_for_confirmation(self) -> None:
        task = self._confirm_task
        if task is not None and not task.done():
            await asyncio.wait({task})

    def snapshot(self) -> FormState:
        return FormState(
            mobile=self.mobile,
            code=self.code,
            errors=self.errors.model_copy(),
            submitting=self.submitting,
            dialogOpen=self.dialog_open,
            gettingCode=self.code_service.in_flight,
            countdown=self.code_service.countdown.remaining,
            phase=self.phase,
        )

    async def aclose(self) -> None:
        self.code_service.close()
        task = self._confirm_task
        self._confirm_task = None
        if task is not None and not task.done():
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task

    async def _confirm(self, mobile: str, code: str) -> None:
        await asyncio.sleep(self.submit_delay)
        logger.info("提交成功 mobile=%s code=%s", mask_mobile(mobile), code)
        await self.session.clear()
        self.submitting = False
        self.phase = SubmissionPhase.CONFIRMED
