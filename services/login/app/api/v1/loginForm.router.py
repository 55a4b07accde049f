from fastapi import APIRouter, Cookie, Depends, Header, HTTPException, Response, status

from services.login.app.core.CodeService import CodeRequestError
from services.login.app.core.FormPresenter import render
from services.login.app.core.FormSessionRegistry import FormSessionError, FormSessionRegistry
from services.login.app.core.LoginFormService import LoginForm
from services.login.app.db.connection import settings
from services.login.app.dependencies import get_form_registry
from services.login.app.schemas.request import FieldUpdateSchema
from services.login.app.schemas.response import LoginFormView, SubmitResponse

SESSION_COOKIE = "LOGIN-FORM-SESSION"

router = APIRouter(prefix="/login-form", tags=["LoginForm"])


def get_session_id(
    session_cookie: str | None = Cookie(
        default=None,
        alias=SESSION_COOKIE,
        description="폼 세션 ID (쿠키에서 자동으로 읽어옴)",
    ),
    session_header: str | None = Header(
        default=None,
        alias=SESSION_COOKIE,
        description="폼 세션 ID (헤더에서 읽어옴, Swagger 테스트용)",
    ),
) -> str | None:
    return session_cookie or session_header


def _session_not_found(exc: FormSessionError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail={"code": exc.code})


def get_login_form(
    session_id: str | None = Depends(get_session_id),
    registry: FormSessionRegistry = Depends(get_form_registry),
) -> LoginForm:
    try:
        return registry.get(session_id)
    except FormSessionError as exc:
        raise _session_not_found(exc) from exc


@router.post("", response_model=LoginFormView, status_code=status.HTTP_201_CREATED)
async def mount_login_form(
    response: Response,
    previous_session_id: str | None = Depends(get_session_id),
    registry: FormSessionRegistry = Depends(get_form_registry),
):
    """
    로그인 폼 마운트. 새 세션을 만들고 쿠키로 세션 ID를 내려줍니다.
    같은 브라우저에 이미 마운트된 폼이 있으면 먼저 닫습니다.
    """
    if previous_session_id in registry:
        await registry.remove(previous_session_id)

    session_id, form = await registry.create()
    response.set_cookie(
        key=SESSION_COOKIE,
        value=session_id,
        httponly=True,
        secure=settings.cookie_secure,  # 환경 변수에 따라 자동 설정
        samesite="lax",
    )
    response.headers[SESSION_COOKIE] = session_id
    return render(form.snapshot())


@router.get("", response_model=LoginFormView)
async def read_login_form(form: LoginForm = Depends(get_login_form)):
    return render(form.snapshot())


@router.patch("/fields", response_model=LoginFormView)
async def update_fields(payload: FieldUpdateSchema, form: LoginForm = Depends(get_login_form)):
    """
    입력 이벤트. 전달된 필드만 갱신하며 검증은 하지 않습니다.
    """
    if payload.mobile is not None:
        form.set_mobile(payload.mobile)
    if payload.code is not None:
        form.set_code(payload.code)
    return render(form.snapshot())


@router.post("/code", response_model=LoginFormView)
async def request_code(form: LoginForm = Depends(get_login_form)):
    """
    인증번호 요청. 버튼이 비활성화된 상태에서 호출되면 409를 반환합니다.
    """
    try:
        await form.request_code()
    except CodeRequestError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail={"code": exc.code}) from exc
    return render(form.snapshot())


@router.post("/submit", response_model=SubmitResponse)
async def submit_login_form(form: LoginForm = Depends(get_login_form)):
    result = await form.submit()
    return SubmitResponse(outcome=result.outcome, alert=result.alert, view=render(form.snapshot()))


@router.post("/dialog/close", response_model=LoginFormView)
async def close_dialog(form: LoginForm = Depends(get_login_form)):
    form.close_dialog()
    return render(form.snapshot())


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def unmount_login_form(
    session_id: str | None = Depends(get_session_id),
    registry: FormSessionRegistry = Depends(get_form_registry),
):
    """
    로그인 폼 언마운트. 타이머를 정리하고 세션 쿠키를 삭제합니다.
    """
    try:
        await registry.remove(session_id)
    except FormSessionError as exc:
        raise _session_not_found(exc) from exc

    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    response.delete_cookie(
        key=SESSION_COOKIE,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
    )
    return response
