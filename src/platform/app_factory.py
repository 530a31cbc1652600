"""
Shared FastAPI App Factory

Provides common app setup for production and test environments.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.platform.config.core_setting import settings
from src.platform.constant.route_constant import (
    PAYMENT_BASE,
    PING,
    SLOT_BASE,
    USER_BASE,
    VEHICLE_BASE,
)
from src.platform.exception.exception_handlers import register_exception_handlers
from src.service.parking.driving_adapter.http_controller.payment_controller import (
    router as payment_router,
)
from src.service.parking.driving_adapter.http_controller.reservation_controller import (
    router as reservation_router,
)
from src.service.parking.driving_adapter.http_controller.slot_controller import (
    router as slot_router,
)
from src.service.parking.driving_adapter.http_controller.user_controller import (
    router as user_router,
)
from src.service.parking.driving_adapter.http_controller.vehicle_controller import (
    router as vehicle_router,
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Campus Parking Reservation Service',
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    # Register exception handlers
    register_exception_handlers(app)

    # Include routers
    app.include_router(user_router, prefix=USER_BASE, tags=['user'])
    app.include_router(vehicle_router, prefix=VEHICLE_BASE, tags=['vehicle'])
    app.include_router(slot_router, prefix=SLOT_BASE, tags=['slot'])
    app.include_router(reservation_router, tags=['reservation'])
    app.include_router(payment_router, prefix=PAYMENT_BASE, tags=['payment'])

    # Register common endpoints
    _register_common_endpoints(app)

    return app


def _register_common_endpoints(app: FastAPI) -> None:
    @app.get(PING)
    async def ping() -> dict[str, Any]:
        """Liveness probe; the database is checked once at startup, not here."""
        return {
            'ok': True,
            'message': 'Server is running',
            'reservation_fee': settings.RESERVATION_FEE,
        }
