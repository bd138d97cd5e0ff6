"""Main FastAPI application"""
import os
import logging
import logging.config
from pathlib import Path
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager
from dotenv import load_dotenv
from routes import router as api_router
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from models.expense import Expense
from models.group import Group
from services.document_store import DocumentStore
from services.errors import StoreError

# load_dotenv searches the current dir and parents; existing env vars win
load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# --- Logging: one RichHandler on the root logger; uvicorn's loggers propagate to it ---
LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "rich": {
            "class": "rich.logging.RichHandler",
            "rich_tracebacks": True,
            "show_path": False,
            "log_time_format": "%Y-%m-%d %H:%M:%S",
        },
    },
    "root": {
        "handlers": ["rich"],
        "level": LOG_LEVEL,
    },
}

logging.config.dictConfig(LOGGING_CONFIG)

logger = logging.getLogger(__name__)

EXPENSES_FILE = "expenses.json"
GROUPS_FILE = "groups.json"
MAX_BODY_SIZE = int(os.getenv("MAX_BODY_SIZE", str(64 * 1024)))
API_PREFIX = "/api"
STATIC_DIR = os.getenv("STATIC_DIR", "public")
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]
RATE_LIMIT = os.getenv("RATE_LIMIT", "120/minute")
RATE_LIMIT_ENABLED = os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"


def get_data_dir() -> Path:
    """Directory holding the JSON documents. Read at startup, not at import."""
    return Path(os.getenv("DATA_DIR", "data"))


# Application state to hold the document stores
app_state = {}

# --- Rate Limiter Setup ---
# In-memory storage, keyed by client address
limiter = Limiter(key_func=get_remote_address, default_limits=[RATE_LIMIT], enabled=RATE_LIMIT_ENABLED)


# --- Middleware for Request Body Size Limit ---
class LimitBodySizeMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        if request.url.path.startswith(API_PREFIX) and request.method in ("POST", "PUT", "PATCH"):
            content_length_header = request.headers.get("content-length")
            if content_length_header:
                try:
                    content_length = int(content_length_header)
                except ValueError:
                    logger.warning("Request rejected: Invalid Content-Length header.")
                    return Response("Invalid Content-Length header.", status_code=400)
                if content_length > MAX_BODY_SIZE:
                    logger.warning(f"Request rejected: body size {content_length} exceeds limit {MAX_BODY_SIZE}.")
                    return Response(f"Maximum request body size ({MAX_BODY_SIZE} bytes) exceeded.", status_code=413)

        response = await call_next(request)
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: open the document stores
    data_dir = get_data_dir()
    logger.info(f"Opening document stores in {data_dir.resolve()}...")
    expenses_store = DocumentStore(data_dir / EXPENSES_FILE, Expense)
    groups_store = DocumentStore(data_dir / GROUPS_FILE, Group)
    try:
        expenses_store.ensure_ready()
        groups_store.ensure_ready()
        app_state["expenses_store"] = expenses_store
        app_state["groups_store"] = groups_store
        logger.info(f"Document stores ready: {expenses_store.name}, {groups_store.name}")
    except StoreError as e:
        logger.error(f"Failed to initialize document stores: {e}")
        app_state["expenses_store"] = None
        app_state["groups_store"] = None
    logger.info(f"Configuration: MAX_BODY_SIZE = {MAX_BODY_SIZE}, RATE_LIMIT = {RATE_LIMIT if RATE_LIMIT_ENABLED else 'disabled'}")

    yield  # Application runs here

    app_state.clear()
    logger.info("Document stores released.")


app = FastAPI(
    title="Expense Tracker API",
    description="API for tracking individual and grouped expenses stored in JSON documents.",
    version="0.1.0",
    lifespan=lifespan
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# --- Middleware (last added runs first) ---
app.add_middleware(SlowAPIMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(LimitBodySizeMiddleware)


# Make app state accessible via middleware
@app.middleware("http")
async def add_stores_to_request(request: Request, call_next):
    """Adds the document stores to the request state."""
    request.state.expenses_store = app_state.get("expenses_store")
    request.state.groups_store = app_state.get("groups_store")
    response = await call_next(request)
    return response


app.include_router(api_router, prefix=API_PREFIX, tags=["api"])


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


# Mount the frontend (MUST be after API routes)
if Path(STATIC_DIR).is_dir():
    app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="static")
else:
    logger.info(f"Static directory '{STATIC_DIR}' not found; serving API only.")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        reload=os.getenv("RELOAD", "true").lower() == "true",
        log_config=LOGGING_CONFIG,
    )
