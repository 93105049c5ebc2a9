# telemart/main.py
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from telemart.api.routers import carts, health, products, users
from telemart.data.database import init_db
from telemart.domain.errors import DependencyFailure, InvalidInput, ServiceError
from telemart.utils.logging import get_logger
from telemart.utils.settings import ALLOWED_ORIGINS, DEV_SESSION_SECRET, SESSION_SECRET

logger = get_logger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def service_error_handler(request: Request, exc: ServiceError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}", exc_info=exc.__cause__)
    return _error(exc.status_code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if not errors:
        return _error(InvalidInput.status_code, InvalidInput.default_message)

    err = errors[0]
    # loc zaczyna sie od "body"/"path"/"query"
    field = ".".join(str(p) for p in err.get("loc", ())[1:])
    message = f"{field}: {err.get('msg')}" if field else err.get("msg", InvalidInput.default_message)
    return _error(InvalidInput.status_code, message)


async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception(f"Database error on {request.method} {request.url.path}", exc_info=exc)
    return _error(DependencyFailure.status_code, DependencyFailure.default_message)


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return _error(500, "Internal server error")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if SESSION_SECRET == DEV_SESSION_SECRET:
        logger.warning("SESSION_SECRET not set, using development secret")
    logger.info("Initializing database")
    init_db()
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="TeleMart",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Include routers
    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(products.router)
    app.include_router(carts.router)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=3000)
