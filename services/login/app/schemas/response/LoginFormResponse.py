from pydantic import BaseModel, ConfigDict, Field


class ButtonView(BaseModel):
    """
    버튼 하나의 표시 상태.
    """

    label: str = Field(..., description="버튼에 표시할 문구")
    disabled: bool = Field(..., description="비활성화 여부")
    loading: bool = Field(False, description="스피너 표시 여부")


class DialogView(BaseModel):
    """
    제출 성공 다이얼로그.
    """

    title: str = Field(..., description="다이얼로그 제목")
    body: str = Field(..., description="다이얼로그 본문")
    closeLabel: str = Field(..., description="닫기 버튼 문구")


class LoginFormView(BaseModel):
    """
    로그인 폼 렌더링 결과.
    오류 문구와 다이얼로그는 표시할 때만 값이 채워집니다.
    """

    mobile: str = Field(..., description="휴대폰 번호 입력값")
    mobileError: str | None = Field(None, description="휴대폰 번호 오류 문구")
    code: str = Field(..., description="인증번호 입력값")
    codeError: str | None = Field(None, description="인증번호 오류 문구")
    countdown: int = Field(..., description="재요청까지 남은 초")
    codeButton: ButtonView = Field(..., description="인증번호 요청 버튼")
    submitButton: ButtonView = Field(..., description="로그인 버튼")
    dialog: DialogView | None = Field(None, description="성공 다이얼로그 (열려 있을 때만)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "mobile": "13800138000",
                "mobileError": None,
                "code": "",
                "codeError": None,
                "countdown": 60,
                "codeButton": {"label": "60秒后重试", "disabled": True, "loading": False},
                "submitButton": {"label": "登录", "disabled": False, "loading": False},
                "dialog": None,
            }
        }
    )
