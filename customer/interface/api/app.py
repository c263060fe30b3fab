"""FastAPI application."""

from fastapi import FastAPI

from customer.interface.api.routes import customers, health
from customer.util.di.container import create_container, setup_di
from customer.util.observability import instrument_fastapi


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this; tests configure it in
    conftest.py.
    """
    app_instance = FastAPI(
        title="Customer Service",
        description="Customer records API",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    container = create_container()
    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(customers.router)

    return app_instance


# Create app instance for uvicorn
app = create_app()
