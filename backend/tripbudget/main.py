import logging
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tripbudget.config import settings

# ─── Logging setup (console + optional rotating file) ───
_log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
_handlers: list[logging.Handler] = [logging.StreamHandler()]

if settings.log_to_file:
    _LOG_DIR = Path(settings.log_dir) if settings.log_dir else Path(__file__).resolve().parent.parent / "logs"
    _LOG_DIR.mkdir(parents=True, exist_ok=True)
    _handlers.append(
        RotatingFileHandler(
            _LOG_DIR / "tripbudget.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        )
    )

logging.basicConfig(
    level=_log_level,
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=_handlers,
)

# Quiet noisy libraries
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

from tripbudget.exceptions import BudgetEstimationError, TripRequestValidationError
from tripbudget.routers import budget
from tripbudget.services.request_validator import REQUIRED_FIELDS

logger = logging.getLogger(__name__)

AVAILABLE_ENDPOINTS = [
    "GET /",
    "GET /api/health",
    "POST /api/estimate-budget",
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    base_url = f"http://localhost:{settings.port}"
    logger.info(f"Server running on port {settings.port}")
    logger.info(f"Health check: {base_url}/")
    logger.info(f"Budget API: {base_url}/api/estimate-budget")
    yield
    logger.info("Server shutting down")


app = FastAPI(
    title="Trip Budget",
    description="Itemized travel budget estimates",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_methods=settings.cors_method_list,
    allow_headers=settings.cors_header_list,
)

app.include_router(budget.router, prefix="/api", tags=["budget"])


@app.exception_handler(TripRequestValidationError)
async def trip_request_validation_handler(request: Request, exc: TripRequestValidationError):
    return JSONResponse(
        status_code=400,
        content=jsonable_encoder({
            "error": exc.message,
            "required": list(REQUIRED_FIELDS),
            "received": exc.received,
            "fields": exc.fields,
        }),
    )


@app.exception_handler(RequestValidationError)
async def request_body_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed JSON or a body that is not an object."""
    fields = sorted({
        str(err["loc"][1]) for err in exc.errors()
        if len(err.get("loc", ())) > 1 and isinstance(err["loc"][1], str)
    })
    logger.warning(f"Unparseable budget request body on {request.url.path}")
    return JSONResponse(
        status_code=400,
        content=jsonable_encoder({
            "error": "Invalid request body",
            "required": list(REQUIRED_FIELDS),
            "received": exc.body,
            "fields": fields,
        }),
    )


@app.exception_handler(BudgetEstimationError)
async def budget_estimation_handler(request: Request, exc: BudgetEstimationError):
    return JSONResponse(
        status_code=500,
        content={"error": "Something went wrong", "details": str(exc)},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code in (404, 405):
        error = "Endpoint not found" if exc.status_code == 404 else "Method not allowed"
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": error,
                "message": f"{request.method} {request.url.path} is not available",
                "availableEndpoints": AVAILABLE_ENDPOINTS,
            },
            headers=getattr(exc, "headers", None),
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.get("/")
async def root():
    return {
        "message": "Trip Budget API is running!",
        "status": "healthy",
        "endpoints": ["/api/estimate-budget"],
    }


@app.get("/api/health")
async def health_check():
    return {"status": "ok", "service": "tripbudget"}
