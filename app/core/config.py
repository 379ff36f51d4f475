"""애플리케이션 전역 설정을 관리하는 모듈."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.schemas.enums import GeneratorBackend


class Settings(BaseSettings):
    """환경 변수 기반 설정 모델."""

    OPENAI_API_KEY: str
    SERVICE_SECRET: str
    LLM_MODEL_NAME: str
    LLM_TEMPERATURE: float = 0.4
    REQUEST_TIMEOUT_SECONDS: int = 60
    LLM_TIMEOUT_SECONDS: int = 45
    ACTIVITY_GENERATOR_BACKEND: GeneratorBackend = GeneratorBackend.LLM
    ACTIVITY_GENERATOR_URL: str | None = None
    ACTIVITY_GENERATOR_TIMEOUT_SECONDS: int = 20
    DOCS_MODE: str = "disabled"
    EXPOSE_INTERNAL_ERRORS: bool = False
    CORS_ALLOW_ORIGINS: str = ""
    CORS_ALLOW_METHODS: str = "GET,POST,OPTIONS"
    CORS_ALLOW_HEADERS: str = "Content-Type,x-service-secret"
    CORS_ALLOW_CREDENTIALS: bool = False
    SECURITY_HEADERS_ENABLED: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("ACTIVITY_GENERATOR_BACKEND", mode="before")
    @classmethod
    def _normalize_generator_backend(cls, value: object) -> str:
        normalized = str(value or "").strip().lower()
        if normalized in {backend.value for backend in GeneratorBackend}:
            return normalized
        return GeneratorBackend.LLM.value

    @field_validator("LLM_TEMPERATURE", mode="before")
    @classmethod
    def _clamp_llm_temperature(cls, value: object) -> float:
        try:
            numeric = float(value) if value is not None else 0.4
        except (TypeError, ValueError):
            numeric = 0.4
        return min(2.0, max(0.0, numeric))


@lru_cache
def get_settings() -> Settings:
    """Settings 인스턴스를 반환한다. 최초 호출 시에만 생성되고 이후 캐싱된다."""
    return Settings()
