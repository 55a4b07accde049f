"""
Pytest configuration and fixtures for the login form service.
"""

import pytest

from services.login.app.core.CodeService import (
    CodeService,
    Countdown,
    InMemoryVerificationCodeStore,
    VerificationCodeSession,
)
from services.login.app.core.LoginFormService import LoginForm

FIXED_CODE = "123456"
VALID_MOBILE = "13800138000"


class SentMessages(list):
    """code_sender 대신 발송 내용을 모아두는 리스트."""

    def __call__(self, mobile, content):
        self.append((mobile, content))

    @property
    def last_code(self):
        return self[-1][1].rsplit(" ", 1)[-1]


@pytest.fixture
def sent():
    return SentMessages()


@pytest.fixture
def store():
    return InMemoryVerificationCodeStore()


@pytest.fixture
def code_session(store):
    return VerificationCodeSession(store, code_factory=lambda: FIXED_CODE)


@pytest.fixture
def code_service(code_session, sent):
    return CodeService(
        session=code_session,
        countdown=Countdown(seconds=60, interval=1.0),
        code_sender=sent,
    )


@pytest.fixture
async def form(code_service):
    async with LoginForm(code_service=code_service, submit_delay=0.01) as form:
        yield form
