# skillswap/main.py

import logging

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.middleware import SlowAPIMiddleware
from slowapi.errors import RateLimitExceeded
from skillswap.common.database.database import connect_to_db, close_db_connection
from skillswap.common.config import settings
from skillswap.common.exceptions import CollaboratorUnavailable
from skillswap.common.rate_limit import limiter
from skillswap.router.routers import include_routers

# Initialize listeners
import skillswap.events.listeners.achievement_listener
import skillswap.events.listeners.notification_listener

# Centralized logging configuration
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)

# Lifespan context manager for startup and shutdown events
@asynccontextmanager
async def lifespan(app: FastAPI):
    await connect_to_db()
    yield
    await close_db_connection()

app = FastAPI(
    title="SkillSwap API",
    description="Peer-to-peer skill exchange: sessions, achievements, teachers and an AI learning mentor.",
    version="1.0.0",
    lifespan=lifespan
)

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

@app.exception_handler(CollaboratorUnavailable)
async def collaborator_unavailable_handler(request: Request, exc: CollaboratorUnavailable):
    logger.error(f"Unhandled collaborator failure on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "A backing service is unavailable. Please try again shortly."},
    )

# Middleware for CORS using allowed origins from settings
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

include_routers(app)

# Health check endpoint
@app.get("/health", tags=["Health"])
async def health_check():
    return {"status": "ok", "message": "API is running"}
