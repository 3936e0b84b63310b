import asyncio
import logging
import traceback
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from seo_checker import __version__
from seo_checker.analysis.nlp import prepare_resources
from seo_checker.api.v1.router import api_v1_router
from seo_checker.core.config import settings, validate_settings_for_production
from seo_checker.core.exceptions import GENERIC_ANALYSIS_ERROR, URL_REQUIRED, AppError
from seo_checker.core.logging import setup_logging
from seo_checker.core.metrics import ANALYSIS_RUNS, PrometheusMiddleware, metrics_response
from seo_checker.core.sentry import init_sentry

# Configure logging before anything else
setup_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    validate_settings_for_production()
    init_sentry()
    nltk_available = await asyncio.to_thread(prepare_resources)
    logger.info("nltk resources: %s", nltk_available)
    logger.info("Starting SEO checker (env=%s, fetch_timeout=%.1fs)", settings.app_env, settings.fetch_timeout)

    yield

    # Shutdown
    logger.info("SEO checker shut down")


app = FastAPI(
    title="SEO Checker",
    description="Single-page SEO and GEO (AI-readability) scoring",
    version=__version__,
    lifespan=lifespan,
    docs_url="/api/docs" if settings.app_debug else None,
    redoc_url="/api/redoc" if settings.app_debug else None,
)


@app.exception_handler(AppError)
async def _app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


ANALYZE_PATH = "/api/v1/analyze"

# Validation errors that mean "no url was given": no/null body, or the url field absent
_URL_MISSING_LOCS = {("body",), ("body", "url")}


def _url_missing(errors) -> bool:
    return any(e.get("type") == "missing" and tuple(e.get("loc", ())) in _URL_MISSING_LOCS for e in errors)


# The analyze endpoint answers bad input with its own error contract instead of 422
@app.exception_handler(RequestValidationError)
async def _validation_error_handler(request: Request, exc: RequestValidationError):
    if request.url.path != ANALYZE_PATH:
        return await request_validation_exception_handler(request, exc)

    errors = exc.errors()
    if _url_missing(errors):
        ANALYSIS_RUNS.labels(outcome="input_error").inc()
        return JSONResponse(status_code=400, content={"error": URL_REQUIRED})

    ANALYSIS_RUNS.labels(outcome="error").inc()
    logger.warning("[api.analyze] rejected request body: %s", [e.get("type") for e in errors])
    return JSONResponse(status_code=500, content={"error": GENERIC_ANALYSIS_ERROR})


# Log unhandled exceptions; the client only ever sees the generic message
@app.exception_handler(Exception)
async def _unhandled_exception_handler(request: Request, exc: Exception):
    tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
    logger.error("Unhandled %s on %s %s:\n%s", type(exc).__name__, request.method, request.url.path, "".join(tb))
    return JSONResponse(status_code=500, content={"error": GENERIC_ANALYSIS_ERROR})


# Request metrics
app.add_middleware(PrometheusMiddleware)

# CORS: parse allowed_origins from settings (comma-separated)
_origins = [o.strip() for o in settings.allowed_origins.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins,
    allow_credentials=_origins != ["*"],
    allow_methods=["POST", "GET"],
    allow_headers=["*"],
)

# API routes
app.include_router(api_v1_router)


@app.get("/api/v1/health")
async def health():
    return {"status": "ok", "version": __version__}


@app.get("/metrics", include_in_schema=False)
async def metrics():
    return metrics_response()
