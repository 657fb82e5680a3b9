"""Text Maze API - Main FastAPI Application."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from maze_game.api.routes import maze, session
from maze_game.config import get_settings
from maze_game.core.maze_generator import MazeConfigError
from maze_game.core.maze_parser import MazeLoadError
from maze_game.logging_config import configure_logging
from maze_game.services.game_controller import GameFinishedError
from maze_game.services.session_store import get_session_store

settings = get_settings()

# Configure logging
logger = configure_logging(settings.log_level)


def maze_load_error_handler(request: Request, exc: MazeLoadError):
    """Report a rejected maze with its error category."""
    logger.warning(f"Rejected maze on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "category": exc.category},
    )


def maze_config_error_handler(request: Request, exc: MazeConfigError):
    """Report unusable generator settings."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )


def game_finished_handler(request: Request, exc: GameFinishedError):
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": str(exc)},
    )


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for logging requests with correlation IDs."""

    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid.uuid4())[:8]
        start_time = time.time()

        # Add request ID to request state for use in handlers
        request.state.request_id = request_id

        logger.info(
            f"[{request_id}] --> {request.method} {request.url.path} "
            f"from {request.client.host if request.client else 'unknown'}"
        )

        try:
            response = await call_next(request)
            process_time = (time.time() - start_time) * 1000

            logger.info(
                f"[{request_id}] <-- {response.status_code} "
                f"({process_time:.2f}ms)"
            )

            response.headers["X-Request-ID"] = request_id
            return response

        except Exception as e:
            process_time = (time.time() - start_time) * 1000
            logger.error(
                f"[{request_id}] <-- ERROR: {type(e).__name__}: {str(e)} "
                f"({process_time:.2f}ms)"
            )
            raise


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(f"Starting {settings.app_name} API...")
    yield
    store = get_session_store()
    logger.info(f"Shutting down, discarding {len(store)} sessions")
    store.clear()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Text maze game: load or generate a maze and walk from S to E",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_exception_handler(MazeLoadError, maze_load_error_handler)
app.add_exception_handler(MazeConfigError, maze_config_error_handler)
app.add_exception_handler(GameFinishedError, game_finished_handler)

# Add request logging middleware
app.add_middleware(RequestLoggingMiddleware)

# CORS middleware - configured based on environment
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "ok", "version": settings.app_version}


@app.get("/")
async def root() -> dict:
    """Root endpoint with API info."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }


# Include routers
app.include_router(maze.router, prefix="/v1")
app.include_router(session.router, prefix="/v1")
