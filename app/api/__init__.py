# app/api/__init__.py
from fastapi import FastAPI

from app.api.errors import register_error_handlers
from app.api.routers import carts
from app.api.routers.health import router as health_router
from app.utils.logging import RequestLoggingMiddleware
from app.utils.settings import SERVICE_NAME


def create_app() -> FastAPI:
    app = FastAPI(title="Cart Service", version="1.0.0")

    app.add_middleware(RequestLoggingMiddleware, service_name=SERVICE_NAME)
    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(carts.router)
    return app
