"""FastAPI 애플리케이션 진입점."""

from __future__ import annotations

from fastapi import Depends, FastAPI, Request
from fastapi.openapi.docs import get_redoc_html, get_swagger_ui_html
from fastapi.responses import JSONResponse, Response
from starlette.middleware.cors import CORSMiddleware

from app.api import timeline
from app.api.dependencies import require_service_secret
from app.core.config import get_settings
from app.core.logger import get_logger
from app.core.logging_config import configure_logging

configure_logging()
logger = get_logger(__name__)
settings = get_settings()


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _resolve_docs_mode(mode: str) -> str:
    normalized = (mode or "").strip().lower()
    if normalized in {"disabled", "secret", "public"}:
        return normalized
    logger.warning("유효하지 않은 DOCS_MODE 값입니다. disabled로 대체합니다: %s", mode)
    return "disabled"


def _configure_cors(app_: FastAPI) -> None:
    origins = _split_csv(settings.CORS_ALLOW_ORIGINS)
    if not origins:
        return

    allow_credentials = settings.CORS_ALLOW_CREDENTIALS
    if "*" in origins and allow_credentials:
        logger.warning("CORS_ALLOW_ORIGINS에 '*'가 포함되어 allow_credentials를 false로 강제합니다.")
        allow_credentials = False

    app_.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=allow_credentials,
        allow_methods=_split_csv(settings.CORS_ALLOW_METHODS) or ["GET"],
        allow_headers=_split_csv(settings.CORS_ALLOW_HEADERS) or ["Content-Type"],
    )


docs_mode = _resolve_docs_mode(settings.DOCS_MODE)

app = FastAPI(
    title="Tabi Planner AI",
    docs_url="/docs" if docs_mode == "public" else None,
    redoc_url="/redoc" if docs_mode == "public" else None,
    openapi_url="/openapi.json" if docs_mode == "public" else None,
)

_configure_cors(app)

app.include_router(timeline.router)


@app.middleware("http")
async def add_security_headers(request: Request, call_next) -> Response:
    """기본 보안 헤더를 응답에 추가합니다."""
    response = await call_next(request)
    if not settings.SECURITY_HEADERS_ENABLED:
        return response

    response.headers.setdefault("X-Content-Type-Options", "nosniff")
    response.headers.setdefault("X-Frame-Options", "DENY")
    response.headers.setdefault("Referrer-Policy", "no-referrer")
    response.headers.setdefault("Cache-Control", "no-store")
    return response


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """예상하지 못한 예외를 표준 형식으로 처리합니다."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
    message = str(exc) if settings.EXPOSE_INTERNAL_ERRORS else "내부 서버 오류가 발생했습니다."
    return JSONResponse(status_code=500, content={"detail": message})


if docs_mode == "secret":

    @app.get("/openapi.json", include_in_schema=False, dependencies=[Depends(require_service_secret)])
    def openapi_json() -> JSONResponse:
        """서비스 시크릿 인증 후 OpenAPI 스키마를 반환합니다."""
        return JSONResponse(app.openapi())

    @app.get("/docs", include_in_schema=False, dependencies=[Depends(require_service_secret)])
    def swagger_ui() -> Response:
        """서비스 시크릿 인증 후 Swagger UI를 반환합니다."""
        return get_swagger_ui_html(openapi_url="/openapi.json", title=f"{app.title} - Swagger UI")

    @app.get("/redoc", include_in_schema=False, dependencies=[Depends(require_service_secret)])
    def redoc_ui() -> Response:
        """서비스 시크릿 인증 후 ReDoc UI를 반환합니다."""
        return get_redoc_html(openapi_url="/openapi.json", title=f"{app.title} - ReDoc")


@app.get("/")
def health_check() -> dict:
    """헬스 체크 엔드포인트."""
    return {"status": "ok", "message": "Tabi Planner AI Server is running"}
