from enum import Enum

from pydantic import BaseModel, Field


class SubmissionPhase(str, Enum):
    IDLE = "IDLE"
    PENDING_CONFIRM = "PENDING_CONFIRM"
    CONFIRMED = "CONFIRMED"


class FormErrors(BaseModel):
    """
    필드별 검증 오류 메시지. 오류가 없는 필드는 None 또는 빈 문자열.
    """

    mobile: str | None = Field(None, description="휴대폰 번호 오류 메시지")
    code: str | None = Field(None, description="인증번호 오류 메시지")

    def is_empty(self) -> bool:
        return not self.mobile and not self.code


class FormState(BaseModel):
    """
    로그인 폼 한 개의 화면 상태 스냅샷.
    마운트 시 빈 값으로 만들어지며 저장되지 않습니다.
    """

    mobile: str = Field("", description="입력된 휴대폰 번호")
    code: str = Field("", description="입력된 인증번호")
    errors: FormErrors = Field(default_factory=FormErrors, description="필드별 오류")
    submitting: bool = Field(False, description="제출 처리 중 여부")
    dialogOpen: bool = Field(False, description="성공 다이얼로그 표시 여부")
    gettingCode: bool = Field(False, description="인증번호 발급 처리 중 여부")
    countdown: int = Field(0, ge=0, description="재요청까지 남은 초")
    phase: SubmissionPhase = Field(SubmissionPhase.IDLE, description="제출 단계")
