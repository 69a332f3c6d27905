"""
Techfest Registration & Ticketing — FastAPI Application Entry Point

Aggregates all routers, configures middleware and error envelopes,
and initializes the database on startup.
"""
import logging
import time
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from techfest.config import get_settings
from techfest.database import init_db, check_connection
from techfest.errors import TechfestError
from techfest.routes import (
    registration_router, stall_router, sponsorship_router, contact_router, payment_router,
)
from techfest.utils.logging import configure_logging

settings = get_settings()
logger = logging.getLogger("techfest.server")

# ─── Application Instance ───────────────────────────────────────────
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description=(
        "Backend for the techfest site: competition registrations, stall bookings, "
        "sponsorship and contact forms, and Razorpay-backed entry fee and ticket payments."
    ),
    docs_url="/docs",
    redoc_url="/redoc",
)

# ─── Startup ─────────────────────────────────────────────────────────
BOOT_TIME = time.time()


@app.on_event("startup")
def on_startup():
    """Configure logging, create tables and make sure the database answers."""
    configure_logging(settings)

    try:
        init_db()
        check_connection()
    except Exception:
        logger.critical("Database connection failed; shutting down", exc_info=True)
        raise SystemExit(1)

    logger.info(
        "\n%s\n  %s v%s\n  TIME: %s\n  RAZORPAY KEY: %s\n  DEBUG: %s\n%s",
        "=" * 60,
        settings.APP_NAME,
        settings.APP_VERSION,
        datetime.now().isoformat(),
        "[OK] Loaded" if settings.RAZORPAY_KEY_ID and settings.RAZORPAY_KEY_SECRET else "[!] Missing",
        settings.DEBUG,
        "=" * 60,
    )


# ─── Middleware ──────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every API request with timing."""
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 1)

    if request.url.path.startswith("/api"):
        logger.info("%s %s -> %s (%sms)", request.method, request.url.path, response.status_code, duration)

    return response


# ─── Error Envelopes ─────────────────────────────────────────────────

@app.exception_handler(TechfestError)
async def techfest_error_handler(request: Request, exc: TechfestError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def _first_error_message(errors: list) -> str:
    """Client-facing message for the first schema violation."""
    if not errors:
        return "All fields are required"
    error = errors[0]
    kind = error.get("type", "")
    if kind == "value_error":
        return error.get("msg", "").removeprefix("Value error, ")
    if kind == "missing":
        return "All fields are required"
    if kind == "json_invalid":
        return "Invalid JSON body"
    field = error.get("loc", ("body",))[-1]
    return f"Invalid value for {field}"


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"message": _first_error_message(exc.errors())})


# ─── API Routers ─────────────────────────────────────────────────────
app.include_router(registration_router)
app.include_router(stall_router)
app.include_router(sponsorship_router)
app.include_router(contact_router)
app.include_router(payment_router)


@app.get("/", tags=["Health"], response_class=PlainTextResponse)
def root():
    return settings.WELCOME_MESSAGE


@app.get("/health", tags=["Health"])
def deep_health():
    """Detailed health check including dependency statuses."""
    db_ok = False
    try:
        db_ok = check_connection()
    except Exception:
        logger.warning("Health check could not reach the database", exc_info=True)

    return {
        "status": "healthy" if db_ok else "degraded",
        "database": "connected" if db_ok else "disconnected",
        "gateway": "configured" if settings.RAZORPAY_KEY_ID and settings.RAZORPAY_KEY_SECRET else "unconfigured",
        "uptime_seconds": round(time.time() - BOOT_TIME, 1),
        "version": settings.APP_VERSION,
    }
