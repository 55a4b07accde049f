from datetime import datetime

from pydantic import BaseModel, Field


class StoredCode(BaseModel):
    """
    제출 대기 중인 인증번호. 저장소 키 하나에 하나만 존재합니다.
    """

    code: str = Field(..., description="6자리 숫자 인증번호")
    issuedAt: datetime = Field(..., description="발급 일시 (CST)")

    class Config:
        from_attributes = True
