"""
FastAPI application for the ASMS chat & auth service.

Run with:
    uvicorn asms_api.app.main:app --reload --port 8000
"""

import logging
import time

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import (
    APP_HOST,
    APP_PORT,
    APP_TITLE,
    APP_VERSION,
    CORS_ALLOWED_METHODS,
    CORS_MAX_AGE,
    get_allowed_origins,
)
from .dependencies import get_history_store
from .errors import register_exception_handlers
from .history import HistoryStore
from .logging_config import setup_logging
from .routers import auth, chat, chatbot

setup_logging()
logger = logging.getLogger(__name__)

# Looked up read-only; history stored under this id is left untouched
HEALTH_PROBE_USER_ID = -1


def create_app() -> FastAPI:
    application = FastAPI(title=APP_TITLE, version=APP_VERSION)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=get_allowed_origins(),
        allow_credentials=False,
        allow_methods=CORS_ALLOWED_METHODS,
        allow_headers=["*"],
        max_age=CORS_MAX_AGE,
    )
    register_exception_handlers(application)

    application.include_router(auth.router)
    application.include_router(chat.router)
    application.include_router(chatbot.router)
    application.add_api_route("/health", health, methods=["GET"], tags=["Health"])
    return application


def health(store: HistoryStore = Depends(get_history_store)):
    """Health check for monitoring"""
    health_status = {
        "status": "healthy",
        "timestamp": int(time.time()),
        "services": {},
    }
    try:
        store.get(HEALTH_PROBE_USER_ID)
        health_status["services"]["history_store"] = "healthy"
    except Exception as e:
        logger.error(f"History store health check failed: {e}", exc_info=True)
        health_status["services"]["history_store"] = "unhealthy"
        health_status["status"] = "degraded"
    return health_status


app = create_app()


def run() -> None:
    logger.info(f"Starting {APP_TITLE} on {APP_HOST}:{APP_PORT}")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)


if __name__ == "__main__":
    run()
