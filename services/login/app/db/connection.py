from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    .env 파일에서 환경 변수를 읽어오는 Pydantic 설정 모델
    """

    # 'LOGIN_' 접두사를 추가하여 다른 서비스의 변수와 충돌 방지
    # 환경 설정
    LOGIN_ENVIRONMENT: str = "development"  # development, production
    LOGIN_DEBUG: bool = True
    LOGIN_LOG_LEVEL: str = "INFO"

    # CORS 설정 (쉼표로 구분된 오리진 목록)
    LOGIN_ALLOWED_ORIGINS: str = ""  # 예: "http://localhost:3000,http://localhost:5173"

    # 인증번호 저장소 (memory, redis)
    LOGIN_CODE_STORE_BACKEND: str = "memory"
    LOGIN_REDIS_URL: str = "redis://localhost:6379/0"
    LOGIN_REDIS_NAMESPACE: str = "login-form"

    # 타이머 설정
    LOGIN_COUNTDOWN_SECONDS: int = 60
    LOGIN_COUNTDOWN_INTERVAL_SECONDS: float = 1.0
    LOGIN_SUBMIT_DELAY_SECONDS: float = 1.0

    # 폼 세션 보관 정책 (유휴 만료, 최대 개수)
    LOGIN_SESSION_IDLE_SECONDS: float = 1800.0
    LOGIN_MAX_SESSIONS: int = 1000

    class Config:
        # 루트 디렉터리의 .env 파일을 읽도록 경로 수정
        env_file = Path(__file__).parent.parent.parent.parent.parent / ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        # .env 파일의 다른 환경 변수는 무시
        extra = "ignore"

    @property
    def is_development(self) -> bool:
        """개발 환경 여부 확인"""
        return self.LOGIN_ENVIRONMENT.lower() in ("development", "dev") or self.LOGIN_DEBUG

    @property
    def cookie_secure(self) -> bool:
        """쿠키 secure 옵션 (프로덕션 환경에서만 True)"""
        return not self.is_development

    @property
    def use_redis_store(self) -> bool:
        return self.LOGIN_CODE_STORE_BACKEND.lower() == "redis"


# settings 인스턴스를 생성하여 다른 파일에서 import 해서 사용
settings = Settings()
