# type: ignore
# pyright: reportGeneralTypeIssues=false
"""
Newsletter Subscription Service
===============================
Accepts newsletter sign-ups (sanitise -> validate -> duplicate check ->
persist) and exposes admin listing, lookup, delete and stats endpoints.

Every API body is an envelope with a ``success`` flag and either the payload
or an ``errors`` list. Admin endpoints are unauthenticated.

Port: 3000
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from newsletter.controllers import subscriber_controller, system_controller
from newsletter.core import messages
from newsletter.core.config import settings
from newsletter.core.dependencies import get_subscriber_repo, get_subscription_service
from newsletter.core.logging import get_logger
from newsletter.middleware import MetricsMiddleware, RequestIDMiddleware
from newsletter.schemas import error_body

logger = get_logger(settings.SERVICE_NAME)


def _resolve(application: FastAPI, dependency):
    return application.dependency_overrides.get(dependency, dependency)()


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    repo = _resolve(application, get_subscriber_repo)
    service = _resolve(application, get_subscription_service)
    try:
        repo.create_schema()
    except Exception:
        logger.exception("Could not initialise the subscriber store")
        raise
    try:
        service.seed_gauges()
    except Exception:
        logger.warning("Could not seed gauges, DB may not be ready yet")
    logger.info("%s v%s started", settings.SERVICE_NAME, settings.SERVICE_VERSION)
    yield
    repo.dispose()
    logger.info("Shutting down, connection pool disposed")


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="Newsletter Subscription Service",
    description="Newsletter sign-up API with admin read/delete endpoints.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
)

app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(system_controller.router)
app.include_router(subscriber_controller.router)


# ── Error envelopes ───────────────────────────────────────────────────────
@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = []
    for err in exc.errors():
        field = next(
            (str(p) for p in reversed(err.get("loc", ())) if isinstance(p, str) and p != "body"),
            None,
        )
        errors.append(f"{field}: {err['msg']}" if field else err["msg"])
    return JSONResponse(status_code=400, content=error_body(*errors))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return JSONResponse(status_code=404, content=error_body(messages.ROUTE_NOT_FOUND))
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=error_body(messages.INTERNAL_ERROR))


# ── Entrypoint ────────────────────────────────────────────────────────────
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.SERVICE_PORT, log_level="info")
