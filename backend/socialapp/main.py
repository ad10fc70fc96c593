"""
FastAPI entrypoint for the social app backend.

``app`` serves the REST API; ``asgi_app`` wraps it with the Socket.IO
relay and is what the server should run.
"""
import logging
from contextlib import asynccontextmanager
import socketio
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from socialapp.core.config import settings
from socialapp.core.exceptions import AppError, InternalError
from socialapp.core.utils import format_error, format_validation_errors
from socialapp.api.router import api_router
from socialapp.db.session import init_db
from socialapp.realtime.registry import ConnectionRegistry
from socialapp.realtime.relay import RealtimeRelay, create_server

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info(f"{settings.APP_NAME} started")
    yield


app = FastAPI(
    title="Social App API",
    description="Backend API for posts, comments, pokes and global chat",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Realtime relay: one registry of connected clients shared with the REST side
sio = create_server()
relay = RealtimeRelay(sio, ConnectionRegistry())
relay.register_handlers()
app.state.relay = relay


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content=format_error(exc.message))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=format_error("Invalid input", format_validation_errors(exc.errors()))
    )


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}", exc_info=True)
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content=format_error(error.message))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=format_error("Server error")
    )


# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"message": f"{settings.APP_NAME} API is running"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


asgi_app = socketio.ASGIApp(sio, other_asgi_app=app, socketio_path=settings.SOCKETIO_PATH)
