"""
Tests for the mobile / verification code validators.
"""

import pytest

from services.login.app.core.FormValidator import (
    CODE_INVALID,
    CODE_REQUIRED,
    MOBILE_INVALID,
    MOBILE_REQUIRED,
    validate_code,
    validate_mobile,
)


class TestValidateMobile:
    """Tests for validate_mobile"""

    @pytest.mark.parametrize("value", ["13800138000", "19999999999", "10000000000"])
    def test_valid_mobile(self, value):
        assert validate_mobile(value) == ""

    def test_empty_mobile(self):
        assert validate_mobile("") == MOBILE_REQUIRED
        assert MOBILE_REQUIRED == "请输入手机号"

    @pytest.mark.parametrize(
        "value",
        [
            "23800138000",   # 1로 시작하지 않음
            "1380013800",    # 10자리
            "138001380000",  # 12자리
            "1380013800a",
            " 13800138000",
            "13800138000\n",
            "１３８００１３８０００",  # 전각 숫자
        ],
    )
    def test_invalid_mobile(self, value):
        assert validate_mobile(value) == MOBILE_INVALID
        assert MOBILE_INVALID == "手机号格式错误,请输入中国大陆11位手机号"


class TestValidateCode:
    """Tests for validate_code"""

    @pytest.mark.parametrize("value", ["000000", "123456", "999999"])
    def test_valid_code(self, value):
        assert validate_code(value) == ""

    def test_empty_code(self):
        assert validate_code("") == CODE_REQUIRED
        assert CODE_REQUIRED == "请输入验证码"

    @pytest.mark.parametrize("value", ["12345", "1234567", "12a456", "123456\n", "١٢٣٤٥٦"])
    def test_invalid_code(self, value):
        assert validate_code(value) == CODE_INVALID
        assert CODE_INVALID == "验证码格式错误,请输入六位数字且正确验证码"
