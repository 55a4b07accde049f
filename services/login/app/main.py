import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from services.login.app.api.v1.router import router
from services.login.app.db.connection import settings
from services.login.app.dependencies import get_form_registry

logging.basicConfig(
    level=settings.LOGIN_LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # 종료 시 남아있는 모든 폼의 타이머 정리
    registry = app.dependency_overrides.get(get_form_registry, get_form_registry)()
    await registry.aclose()
    logger.info("Login form sessions closed")


app = FastAPI(
    title="Login Service (로그인 서비스)",
    description="Mobile number + verification code login form server",
    lifespan=lifespan,
)

# CORS 설정
# 환경 변수 LOGIN_ALLOWED_ORIGINS가 설정되어 있으면 우선 사용
# 없으면 개발 환경일 때 기본 localhost 리스트 사용
if settings.LOGIN_ALLOWED_ORIGINS:
    allowed_origins = [origin.strip() for origin in settings.LOGIN_ALLOWED_ORIGINS.split(",") if origin.strip()]
elif settings.is_development:
    allowed_origins = [
        "http://localhost:3000",
        "http://localhost:5173",  # Vite 기본 포트
        "http://localhost:8000",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:8000",
    ]
else:
    # 프로덕션 환경: 환경 변수가 없으면 빈 리스트 (모든 오리진 차단)
    allowed_origins = []

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,  # 세션 쿠키를 포함한 요청 허용
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


# 서비스가 살아있는지 확인하는 헬스 체크 엔드포인트
@app.get("/")
def read_root():
    return {"service": "Login Service", "status": "running"}
