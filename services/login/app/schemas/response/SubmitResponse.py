from pydantic import BaseModel, Field

from services.login.app.core.LoginFormService import SubmitOutcome
from services.login.app.schemas.response.LoginFormResponse import LoginFormView


class SubmitResponse(BaseModel):
    """
    로그인 제출 응답.
    """

    outcome: SubmitOutcome = Field(..., description="제출 처리 결과")
    alert: str | None = Field(None, description="차단형 알림 문구 (두 필드가 모두 비었을 때)")
    view: LoginFormView = Field(..., description="제출 후 폼 렌더링 결과")
