"""FastAPI application."""

from typing import Optional

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from qna.config import Settings
from qna.interface.api.error_handlers import register_error_handlers
from qna.interface.api.routes import (
    answers,
    comments,
    health,
    notifications,
    questions,
    users,
)
from qna.util.di.container import create_container, setup_di
from qna.util.observability import instrument_fastapi


def create_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to serve requests from; a production
            container is built when omitted (tests pass their own)

    Returns:
        Configured application
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Q&A API",
        description="Backend API for a question and answer community",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,  # The auth_token cookie
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
        ],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    setup_di(app_instance, container or create_container())

    register_error_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(questions.router)
    app_instance.include_router(answers.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(notifications.router)
    app_instance.include_router(users.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
