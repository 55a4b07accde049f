"""
Tests for the login form submission flow.
"""

from libs.schemas import FormErrors, SubmissionPhase
from services.login.app.core.CodeService import CodeService, Countdown, VerificationCodeSession
from services.login.app.core.FormPresenter import render
from services.login.app.core.FormValidator import (
    CODE_INVALID,
    CODE_MISMATCH,
    CODE_REQUIRED,
    FIELDS_REQUIRED,
    MOBILE_INVALID,
    MOBILE_REQUIRED,
)
from services.login.app.core.LoginFormService import LoginForm, SubmitOutcome
from tests.conftest import FIXED_CODE, VALID_MOBILE


class TestInitialState:
    """Tests for a freshly mounted form"""

    async def test_snapshot_defaults(self, form):
        state = form.snapshot()

        assert state.mobile == ""
        assert state.code == ""
        assert state.errors.is_empty()
        assert state.submitting is False
        assert state.dialogOpen is False
        assert state.gettingCode is False
        assert state.countdown == 0
        assert state.phase == SubmissionPhase.IDLE

    async def test_can_request_code_follows_mobile(self, form):
        assert form.can_request_code is False
        form.set_mobile(VALID_MOBILE)
        assert form.can_request_code is True

        await form.request_code()
        assert form.can_request_code is False


class TestSubmitValidation:
    """Tests for submit() before the code comparison"""

    async def test_both_empty_alerts_once(self, code_service):
        alerts = []
        async with LoginForm(code_service=code_service, alert_handler=alerts.append) as form:
            form.set_mobile("123")
            await form.submit()
            previous_errors = form.errors.model_copy()

            form.set_mobile("")
            result = await form.submit()

            assert result.outcome == SubmitOutcome.ALERTED
            assert result.alert == FIELDS_REQUIRED == "请输入手机号码和验证码"
            assert alerts == [FIELDS_REQUIRED]
            assert form.errors == previous_errors
            assert form.dialog_open is False

    async def test_invalid_fields_record_both_errors(self, form):
        form.set_mobile("12345")
        result = await form.submit()

        assert result.outcome == SubmitOutcome.INVALID
        assert form.errors.mobile == MOBILE_INVALID
        assert form.errors.code == CODE_REQUIRED
        assert form.submitting is False
        assert form.dialog_open is False

    async def test_only_failing_field_has_message(self, form):
        form.set_code("12a")
        form.set_mobile(VALID_MOBILE)
        await form.submit()

        assert not form.errors.mobile
        assert form.errors.code == CODE_INVALID

    async def test_empty_mobile_with_code(self, form):
        form.set_code(FIXED_CODE)
        await form.submit()

        assert form.errors.mobile == MOBILE_REQUIRED
        assert not form.errors.code


class TestSubmitComparison:
    """Tests for comparing the entered code with the stored code"""

    async def test_mismatch_sets_only_code_error(self, form):
        form.set_mobile(VALID_MOBILE)
        await form.request_code()
        form.set_code("654321")

        result = await form.submit()

        assert result.outcome == SubmitOutcome.MISMATCH
        assert form.errors == FormErrors(code=CODE_MISMATCH)
        assert form.errors.code == "验证码错误，请重新输入"
        assert form.dialog_open is False
        assert form.submitting is False
        assert (await form.session.peek()).code == FIXED_CODE

    async def test_mismatch_without_requested_code(self, form):
        form.set_mobile(VALID_MOBILE)
        form.set_code(FIXED_CODE)

        result = await form.submit()

        assert result.outcome == SubmitOutcome.MISMATCH
        assert form.errors.code == CODE_MISMATCH

    async def test_match_opens_dialog_then_confirms(self, form):
        form.set_mobile(VALID_MOBILE)
        await form.request_code()
        form.set_code(FIXED_CODE)
        form.errors = FormErrors(code=CODE_MISMATCH)

        result = await form.submit()

        assert result.outcome == SubmitOutcome.ACCEPTED
        assert form.errors.is_empty()
        assert form.dialog_open is True
        assert form.submitting is True
        assert form.phase == SubmissionPhase.PENDING_CONFIRM
        assert (await form.session.peek()).code == FIXED_CODE

        await form.wait_for_confirmation()

        assert form.submitting is False
        assert form.phase == SubmissionPhase.CONFIRMED
        assert form.dialog_open is True
        assert await form.session.peek() is None

    async def test_submit_while_submitting_is_busy(self, form):
        form.set_mobile(VALID_MOBILE)
        await form.request_code()
        form.set_code(FIXED_CODE)
        await form.submit()

        result = await form.submit()

        assert result.outcome == SubmitOutcome.BUSY
        await form.wait_for_confirmation()

    async def test_close_dialog(self, form):
        form.set_mobile(VALID_MOBILE)
        await form.request_code()
        form.set_code(FIXED_CODE)
        await form.submit()
        await form.wait_for_confirmation()

        form.close_dialog()

        assert form.dialog_open is False
        assert form.phase == SubmissionPhase.CONFIRMED


class TestTeardown:
    """Tests for aclose()"""

    async def test_aclose_cancels_timers(self, code_session):
        form = LoginForm(
            code_service=CodeService(session=code_session, countdown=Countdown(interval=1.0)),
            submit_delay=10,
        )
        form.set_mobile(VALID_MOBILE)
        await form.request_code()
        form.set_code(FIXED_CODE)
        await form.submit()

        await form.aclose()

        assert form.snapshot().countdown == 0
        assert form.submitting is True
        assert (await form.session.peek()).code == FIXED_CODE
        await form.wait_for_confirmation()


class TestEndToEnd:
    """Request a code, type it in and log in"""

    async def test_login_flow(self, store):
        async with LoginForm(
            code_service=CodeService(session=VerificationCodeSession(store)),
            submit_delay=0.01,
        ) as form:
            form.set_mobile("13800138000")
            code = await form.request_code()

            state = form.snapshot()
            assert state.countdown == 60
            assert render(state).codeButton.label == "60秒后重试"
            assert (await form.session.peek()).code == code

            form.set_code(code)
            result = await form.submit()

            view = render(form.snapshot())
            assert result.outcome == SubmitOutcome.ACCEPTED
            assert view.dialog is not None
            assert view.dialog.body == "登录成功"
            assert view.submitButton.label == "submitting......"

            await form.wait_for_confirmation()

            assert form.snapshot().submitting is False
            assert await form.session.peek() is None
            assert render(form.snapshot()).submitButton.label == "登录"
