"""
FastAPI application setup for the shiptivity API.
"""

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from contracts.v1 import MessageContract
from core.domain import MoveError, PersistenceError
from shiptivity_platform.runtime.config import WELCOME_MESSAGE, get_cors_origins

from . import __version__ as WEB_VERSION
from .routes import client_service, router

# Load .env file (if present) so SHIPTIVITY_* settings are available via os.environ
load_dotenv()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Don't leave the database connection open after shutdown
    client_service.close()


# App
app = FastAPI(
    title="shiptivity",
    description="Swimlane board API with contiguous per-lane priorities",
    version=WEB_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(MoveError)
async def move_error_handler(request: Request, exc: MoveError):
    """Report board errors as ``{message, long_message}`` with HTTP 400."""
    if not isinstance(exc, PersistenceError):
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.long_message)
    return JSONResponse(status_code=400, content=MessageContract(**exc.to_payload()).model_dump())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning("%s %s has an invalid body", request.method, request.url.path)
    long_message = "; ".join(err.get("msg", "") for err in exc.errors()) or "Malformed request."
    return JSONResponse(
        status_code=400,
        content=MessageContract(message="Invalid request body.", long_message=long_message).model_dump(),
    )


# Include API routes
app.include_router(router)


@app.get("/")
async def index():
    """API landing message."""
    return {"message": WELCOME_MESSAGE}
