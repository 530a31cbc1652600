"""
Production FastAPI Application

Checks the database, picks the slot listing strategy, then serves the API.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dependency_injector import providers
from fastapi import FastAPI
from fastapi.responses import RedirectResponse
import uvicorn

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger
from src.service.parking.driven_adapter.repo.slot_reader_impl import select_slot_reader


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Parking Service] Starting up...')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Parking Service] Dependency injection wired')

    # Fail fast when the database is unreachable
    database = container.database()
    try:
        await database.check_connection()
    except Exception as e:
        Logger.base.critical(f'❌ [Parking Service] Could not connect to the database: {e}')
        raise
    Logger.base.info('🗄️  [Parking Service] Database connection established')

    # Choose the slot listing strategy once
    slot_reader = await select_slot_reader(database)
    container.slot_reader.override(providers.Object(slot_reader))
    Logger.base.info(f'🅿️  [Parking Service] Slot reader: {slot_reader.name}')

    Logger.base.info('✅ [Parking Service] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Parking Service] Shutting down...')

    container.slot_reader.reset_override()
    await database.dispose()
    Logger.base.info('🗄️  [Parking Service] Database engine disposed')

    # Unwire DI
    container.unwire()
    container.reset_singletons()

    Logger.base.info('👋 [Parking Service] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')


if __name__ == '__main__':
    uvicorn.run('src.main:app', host=settings.HOST, port=settings.PORT)
