"""
로그인 폼 입력값 검증.

모든 함수는 순수 함수이며, 유효하면 빈 문자열을, 아니면 화면에 표시할 오류 메시지를 반환합니다.
"""
import re

MOBILE_PATTERN = re.compile(r"1\d{10}", re.ASCII)
CODE_PATTERN = re.compile(r"\d{6}", re.ASCII)

MOBILE_REQUIRED = "请输入手机号"
MOBILE_INVALID = "手机号格式错误,请输入中国大陆11位手机号"
CODE_REQUIRED = "请输入验证码"
CODE_INVALID = "验证码格式错误,请输入六位数字且正确验证码"
CODE_MISMATCH = "验证码错误，请重新输入"
FIELDS_REQUIRED = "请输入手机号码和验证码"


def validate_mobile(value: str) -> str:
    if not value:
        return MOBILE_REQUIRED
    # fullmatch: 끝의 개행 문자도 허용하지 않음
    if not MOBILE_PATTERN.fullmatch(value):
        return MOBILE_INVALID
    return ""


def validate_code(value: str) -> str:
    if not value:
        return CODE_REQUIRED
    if not CODE_PATTERN.fullmatch(value):
        return CODE_INVALID
    return ""
