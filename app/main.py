# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Influencer Marketplace API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload --port 5000
# =============================================================================

import asyncio
import json
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.auth import AuthMiddleware, get_auth_provider
from app.websocket import websocket_manager, NOTIFICATION_CHANNEL
from app.exceptions import (
    MarketplaceException,
    marketplace_exception_handler,
    validation_exception_handler,
)
from app.routers import health, users, influencers, brands, sponsorships, categories, analytics
from app.auth import routes as auth_routes
from app.websocket import routes as websocket_routes
from lib.supabase_client import SupabaseClientError

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# Global state for the Redis listener task
_redis_listener_task = None
_shutdown_event = None


async def redis_pubsub_listener():
    """
    Background task that listens to Redis pub/sub and delivers to WebSockets.

    Any API process may publish a notification; every process runs this
    listener and forwards the event to its own connections of the recipient.
    """
    import redis.asyncio as aioredis

    logger.info("Starting Redis pub/sub listener for notifications")

    redis_client = None
    pubsub = None

    try:
        redis_client = aioredis.from_url(settings.REDIS_URL)
        pubsub = redis_client.pubsub()
        await pubsub.subscribe(NOTIFICATION_CHANNEL)

        async for message in pubsub.listen():
            if _shutdown_event and _shutdown_event.is_set():
                break

            if message["type"] == "message":
                try:
                    event = json.loads(message["data"])
                    user_id = event.pop("user_id", None)

                    if user_id:
                        await websocket_manager.send_to_user(user_id, event)

                except json.JSONDecodeError as e:
                    logger.warning(f"Invalid JSON in Redis message: {e}")
                except Exception as e:
                    logger.error(f"Error processing Redis message: {e}")

    except asyncio.CancelledError:
        logger.info("Redis pub/sub listener cancelled")
    except Exception as e:
        logger.error(f"Redis pub/sub listener error: {e}")
    finally:
        try:
            if pubsub is not None:
                await pubsub.unsubscribe(NOTIFICATION_CHANNEL)
            if redis_client is not None:
                await redis_client.close()
        except Exception as e:
            logger.debug(f"Error closing Redis listener: {e}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    - Startup: Log config, start the notification listener
    - Shutdown: Stop the listener
    """
    global _redis_listener_task, _shutdown_event

    logger.info(f"Starting Influencer Marketplace API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    if settings.NOTIFICATIONS_ENABLED:
        _shutdown_event = asyncio.Event()
        _redis_listener_task = asyncio.create_task(redis_pubsub_listener())
    else:
        logger.info("Notifications disabled; Redis listener not started")

    yield

    logger.info("Shutting down Influencer Marketplace API")

    if _shutdown_event:
        _shutdown_event.set()
    if _redis_listener_task:
        _redis_listener_task.cancel()
        try:
            await _redis_listener_task
        except asyncio.CancelledError:
            pass
        _redis_listener_task = None


# Create FastAPI application
app = FastAPI(
    title="Influencer Marketplace API",
    description="""
## Connecting brands with influencers

Brands browse influencer profiles and send sponsorship offers; influencers
accept or reject them and both sides follow progress in real time.

### Authentication

Register or log in via `/api/auth`, then send the returned token as
`Authorization: Bearer <token>`. Search, categories and public influencer
profiles need no token.

### Sponsorship lifecycle

| From | To | Who |
|------|----|-----|
| pending | accepted, rejected | Influencer |
| pending, accepted | cancelled | Brand |
| accepted | completed | Brand |
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "Auth", "description": "Register, log in and fetch the current user"},
        {"name": "Users", "description": "Public user profiles"},
        {"name": "Influencers", "description": "Influencer search and profiles"},
        {"name": "Brands", "description": "Brand profiles"},
        {"name": "Sponsorships", "description": "Offers between brands and influencers"},
        {"name": "Categories", "description": "Content categories"},
        {"name": "Analytics", "description": "Dashboard counts"},
        {"name": "WebSocket", "description": "Real-time notifications"},
        {"name": "Health", "description": "API health and readiness checks"},
    ],
)


# =============================================================================
# Middleware
# =============================================================================
# Added innermost first: CORS wraps auth so 401 responses carry CORS headers.

app.add_middleware(AuthMiddleware, auth_provider=get_auth_provider())

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(MarketplaceException)
async def handle_marketplace_exception(request: Request, exc: MarketplaceException):
    """Handle custom marketplace exceptions."""
    return await marketplace_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_error(request: Request, exc: RequestValidationError):
    """Handle invalid request bodies and parameters."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(SupabaseClientError)
async def handle_supabase_error(request: Request, exc: SupabaseClientError):
    """Handle database failures."""
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "A database error occurred",
            "code": exc.code,
        }
    )


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

app.include_router(auth_routes.router, prefix="/api/auth", tags=["Auth"])

app.include_router(users.router, prefix="/api/users", tags=["Users"])

app.include_router(influencers.router, prefix="/api/influencers", tags=["Influencers"])

app.include_router(brands.router, prefix="/api/brands", tags=["Brands"])

app.include_router(sponsorships.router, prefix="/api/sponsorships", tags=["Sponsorships"])

app.include_router(categories.router, prefix="/api/categories", tags=["Categories"])

app.include_router(analytics.router, prefix="/api/analytics", tags=["Analytics"])

app.include_router(health.router, tags=["Health"])

app.include_router(websocket_routes.router, tags=["WebSocket"])


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Influencer Marketplace API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health",
    }
