# ihub/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api import (
    startups_router, projects_router, milestones_router, deliverables_router,
    meetings_router, resources_router, departments_router, dashboard_router
)
from .config import settings
from .database import create_store
from .errors import IHubError
from .utils.logging import api_logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    store = create_store(settings.DATABASE_URL, echo=settings.SQL_ECHO)
    store.init_schema()
    app.state.store = store
    api_logger.info("iHub API started", extra={"api_prefix": settings.API_PREFIX})
    try:
        yield
    finally:
        store.dispose()


app = FastAPI(title="iHub API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

for router in (
    startups_router, projects_router, milestones_router, deliverables_router,
    meetings_router, resources_router, departments_router, dashboard_router
):
    app.include_router(router, prefix=settings.API_PREFIX)


def _describe_validation_errors(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    return "; ".join(messages) or "Invalid request"


@app.exception_handler(IHubError)
async def handle_ihub_error(request: Request, exc: IHubError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    message = _describe_validation_errors(exc)
    api_logger.warning("Rejected invalid request", extra={
        "path": request.url.path,
        "validation_message": message
    })
    return JSONResponse(status_code=400, content={"message": message})


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception):
    api_logger.error("Unhandled error", extra={
        "path": request.url.path,
        "error_type": type(exc).__name__
    }, exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


@app.get("/")
async def root():
    return {"message": "iHub API is running"}
