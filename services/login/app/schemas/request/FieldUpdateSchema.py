from pydantic import BaseModel, Field


class FieldUpdateSchema(BaseModel):
    """
    입력 이벤트. 전달된 필드만 갱신합니다.
    """

    mobile: str | None = Field(default=None, description="휴대폰 번호 입력값")
    code: str | None = Field(default=None, description="인증번호 입력값")
