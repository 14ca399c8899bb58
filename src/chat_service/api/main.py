"""
목적: FastAPI 앱 팩토리와 엔트리 포인트 제공
설명: 수명주기에서 DB 커넥션 풀 연결, 마이그레이션, 종료를 수행하고
      모든 오류 응답을 {"error", "message"} 형태로 통일한다.
디자인 패턴: 팩토리 메서드, 단일 책임 원칙(SRP)
참조: src/chat_service/api/chat/routers/router.py, src/chat_service/api/chat/services/container.py
"""
from __future__ import annotations

from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from chat_service.api.chat.routers import router as chat_router
from chat_service.api.chat.services import CHAT_API_STATE_KEY, build_chat_api_services
from chat_service.api.const import ERROR_INTERNAL, ERROR_INVALID_ID, ERROR_INVALID_JSON
from chat_service.api.health.routers import router as health_router
from chat_service.integrations.db import DBClient, create_db_client
from chat_service.shared.config import AppSettings, load_settings
from chat_service.shared.logging import Logger, create_default_logger

_VALUE_ERROR_PREFIX = "Value error, "


def _error_body(status_code: int, message: str) -> dict:
    try:
        error = HTTPStatus(status_code).name
    except ValueError:
        error = str(status_code)
    return {"error": error, "message": message}


def _validation_message(error: RequestValidationError) -> str:
    """검증 오류 목록에서 클라이언트 메시지 하나를 고른다. 경로 오류가 우선한다."""

    errors = error.errors()
    for item in errors:
        if item.get("loc", ())[:1] == ("path",):
            return ERROR_INVALID_ID
    for item in errors:
        if item.get("type") == "value_error":
            cause = (item.get("ctx") or {}).get("error")
            if cause is not None:
                return str(cause)
            return str(item.get("msg", "")).removeprefix(_VALUE_ERROR_PREFIX)
    return ERROR_INVALID_JSON


def _register_exception_handlers(app: FastAPI, logger: Logger) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.status_code, str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_body(status.HTTP_400_BAD_REQUEST, _validation_message(exc)),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            f"처리되지 않은 예외가 발생했습니다: {exc}",
            path=request.url.path,
            error_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body(status.HTTP_500_INTERNAL_SERVER_ERROR, ERROR_INTERNAL),
        )


def create_app(
    settings: AppSettings | None = None,
    db_client: DBClient | None = None,
    logger: Logger | None = None,
) -> FastAPI:
    """Chat API 앱을 생성한다.

    Args:
        settings: 애플리케이션 설정. 생략하면 환경 변수/.env에서 읽는다.
        db_client: 주입할 DB 클라이언트. 생략하면 설정으로 생성한다.
        logger: 로거. 생략하면 설정의 레벨/출력 옵션으로 생성한다.
    """

    settings = settings or load_settings()
    logger = logger or create_default_logger(
        settings.app_name,
        min_level=settings.log_level,
        emit_stdout=settings.log_stdout,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """기동 시 DB 연결/마이그레이션, 종료 시 연결 해제를 수행한다."""
        client = db_client or create_db_client(settings, logger.child("DBClient"))
        client.connect()
        try:
            if settings.migrate_on_startup:
                applied = client.migrate()
                logger.info(f"스키마 마이그레이션 완료 (applied={applied})")
            setattr(
                app.state,
                CHAT_API_STATE_KEY,
                build_chat_api_services(
                    client,
                    logger=logger.child("ChatAPI"),
                    request_timeout_seconds=settings.request_timeout_seconds,
                ),
            )
            logger.info(f"{settings.app_name} {settings.app_version} 기동 완료 (db={client.engine.name})")
            yield
        finally:
            setattr(app.state, CHAT_API_STATE_KEY, None)
            client.close()
            logger.info(f"{settings.app_name} 종료 완료")

    app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)
    _register_exception_handlers(app, logger)
    app.include_router(health_router)
    app.include_router(chat_router)

    @app.get("/", include_in_schema=False)
    def redirect_to_docs():
        """기본 접속 시 문서 페이지로 리다이렉트한다."""
        return RedirectResponse(url="/docs")

    return app


app = create_app()
