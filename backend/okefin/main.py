from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from okefin import __version__, schemas
from okefin.api import api_router
from okefin.core.config import settings
from okefin.core.exceptions import ErrorKind, ServiceError
from okefin.core.logger import setup_logger
from okefin.database.database import init_db

logger = setup_logger("main")

STATUS_BY_KIND = {
    ErrorKind.malformed_request: 400,
    ErrorKind.validation: 400,
    ErrorKind.unauthorized: 401,
    ErrorKind.forbidden: 403,
    ErrorKind.not_found: 404,
    ErrorKind.conflict: 409,
    ErrorKind.internal: 500,
}

KIND_BY_STATUS = {status: kind for kind, status in STATUS_BY_KIND.items() if kind != ErrorKind.malformed_request}


def error_response(status_code: int, kind: ErrorKind, message: str, errors) -> JSONResponse:
    body = schemas.ErrorResponse(message=message, kind=kind, errors=list(errors))
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def service_error_handler(request: Request, exc: ServiceError):
    status_code = STATUS_BY_KIND[exc.kind]
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.errors}")
    return error_response(status_code, exc.kind, exc.message, exc.errors or [exc.message])


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if any(error.get("type") == "json_invalid" for error in errors):
        return error_response(400, ErrorKind.malformed_request, "Invalid request body",
                              [error.get("msg", "Invalid JSON") for error in errors])

    messages = []
    for error in errors:
        field = ".".join(str(part) for part in error.get("loc", ())[1:]) or "body"
        messages.append(f"{field}: {error.get('msg')}")
    return error_response(400, ErrorKind.validation, "Validation failed", messages)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    kind = KIND_BY_STATUS.get(exc.status_code, ErrorKind.internal if exc.status_code >= 500 else ErrorKind.validation)
    return error_response(exc.status_code, kind, str(exc.detail), [str(exc.detail)])


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {str(exc)}", exc_info=True)
    return error_response(500, ErrorKind.internal, "Internal Server Error", [str(exc)])


def create_app() -> FastAPI:
    if not settings.JWT_SECRET:
        raise ValueError("JWT_SECRET is not set in environment variables.")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="E-commerce API for users, toko, produk and transaksi",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(api_router, prefix=settings.API_PREFIX)

    upload_dir = Path(settings.UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)
    app.mount("/uploads", StaticFiles(directory=upload_dir), name="uploads")

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    def welcome():
        return "Welcome to Okefin-Service!"

    @app.on_event("startup")
    async def on_startup():
        logger.info("Starting application...")
        init_db()

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("okefin.main:app", host="0.0.0.0", port=settings.PORT)
