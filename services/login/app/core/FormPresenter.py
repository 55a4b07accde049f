from libs.schemas import FormState
from services.login.app.core.FormValidator import validate_mobile
from services.login.app.schemas.response import ButtonView, DialogView, LoginFormView

SPINNER = "◠"
CODE_BUTTON_LABEL = "获取验证码"
SUBMIT_LABEL = "登录"
SUBMITTING_LABEL = "submitting......"

DIALOG_TITLE = "🎉 提交成功"
DIALOG_BODY = "登录成功"
DIALOG_CLOSE_LABEL = "关闭"


def countdown_label(seconds: int) -> str:
    return f"{seconds}秒后重试"


def render(state: FormState) -> LoginFormView:
    """
    폼 상태를 화면 표시용 뷰로 변환합니다.
    """
    if state.gettingCode:
        code_label = SPINNER
    elif state.countdown > 0:
        code_label = countdown_label(state.countdown)
    else:
        code_label = CODE_BUTTON_LABEL

    code_button = ButtonView(
        label=code_label,
        disabled=bool(validate_mobile(state.mobile)) or state.gettingCode or state.countdown > 0,
        loading=state.gettingCode,
    )
    submit_button = ButtonView(
        label=SUBMITTING_LABEL if state.submitting else SUBMIT_LABEL,
        disabled=state.submitting,
        loading=state.submitting,
    )

    dialog = None
    if state.dialogOpen:
        dialog = DialogView(title=DIALOG_TITLE, body=DIALOG_BODY, closeLabel=DIALOG_CLOSE_LABEL)

    return LoginFormView(
        mobile=state.mobile,
        mobileError=state.errors.mobile or None,
        code=state.code,
        codeError=state.errors.code or None,
        countdown=state.countdown,
        codeButton=code_button,
        submitButton=submit_button,
        dialog=dialog,
    )
