import logging
import time
from contextlib import asynccontextmanager
from datetime import timedelta

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.services.password_hasher import PasswordHasher
from src.app.services.reset_token_manager import ResetTokenManager
from src.app.services.session_token_codec import SessionTokenCodec
from .error import ClientError, ServerError, INTERNAL_ERROR, INVALID_REQUEST, error_body

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    logger.warning(f"Client error: {exc.base_error.code} on {request.url.path}")
    return JSONResponse(status_code=exc.status_code, content=exc.body)


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(f"Server error: {exc.base_error.code} ({exc.base_error.message})")
    return JSONResponse(status_code=exc.status_code, content=exc.body)


async def handle_validation_error(request: Request, exc: RequestValidationError):
    logger.warning(f"Request validation failed on {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(INVALID_REQUEST),
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(INTERNAL_ERROR),
    )


def create_app(ApplicationConfig) -> FastAPI:
    ApplicationConfig.validate()

    engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        if ApplicationConfig.CREATE_TABLES_ON_STARTUP:
            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
        try:
            yield
        finally:
            await engine.dispose()

    app = FastAPI(title="Session Auth API", version="0.1.0", lifespan=lifespan)

    # Process-wide collaborators, built once and read-only afterwards
    hasher = PasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)
    app.state.config = ApplicationConfig
    app.state.session_factory = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )
    app.state.password_hasher = hasher
    app.state.token_codec = SessionTokenCodec(
        ApplicationConfig.signing_secret(),
        ttl=timedelta(seconds=ApplicationConfig.SESSION_TTL_SECONDS),
    )
    app.state.reset_tokens = ResetTokenManager(
        hasher, ttl=timedelta(seconds=ApplicationConfig.RESET_TOKEN_TTL_SECONDS)
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:

        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            started = time.perf_counter()
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                f"{request.method} {request.url.path} -> {response.status_code} "
                f"({elapsed_ms:.1f} ms)"
            )
            return response

    from src.api.routes import auth, health_check, orders

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router, prefix=prefix, tags=["Health"])
    app.include_router(auth.router, prefix=prefix, tags=["Authentication"])
    app.include_router(orders.router, prefix=prefix, tags=["Orders"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
