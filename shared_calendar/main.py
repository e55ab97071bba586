# Copyright 2026 Dell Inc. or its subsidiaries. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Process entry point for the shared calendar API.

The storage handle is created here and its lifecycle is tied to the
application lifespan: connected on startup, disconnected on shutdown.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared_calendar import __version__
from shared_calendar.api.dependencies import CalendarServices
from shared_calendar.api.events.routes import router as events_router
from shared_calendar.api.profiles.routes import router as profiles_router
from shared_calendar.config import Settings, load_settings
from shared_calendar.core.events.repositories import CalendarStore, IdGenerator
from shared_calendar.infra import MemoryCalendarStore, SqlCalendarStore, UUIDv7Generator

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str) -> None:
    """Configure root logging for the process."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def build_store(settings: Settings) -> CalendarStore:
    """Create the storage handle selected by configuration."""
    if settings.store == "sql":
        return SqlCalendarStore(settings.database_url, echo=settings.database_echo)
    return MemoryCalendarStore()


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[CalendarStore] = None,
    id_generator: Optional[IdGenerator] = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Service settings; loaded from YAML/env when omitted.
        store: Storage handle; built from settings when omitted.
        id_generator: Identifier generator; UUID v7 when omitted.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = load_settings()
    store = store or build_store(settings)
    id_generator = id_generator or UUIDv7Generator()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store.connect()
        app.state.store = store
        app.state.services = CalendarServices.build(
            store, id_generator, settings.update_retry_limit
        )
        logger.info("Shared calendar API started")
        try:
            yield
        finally:
            store.disconnect()
            logger.info("Shared calendar API stopped")

    app = FastAPI(title="Shared Calendar", version=__version__, lifespan=lifespan)
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    api_router = APIRouter(prefix="/api/v1")
    api_router.include_router(profiles_router)
    api_router.include_router(events_router)
    app.include_router(api_router)

    @app.get("/health", tags=["health"])
    def health():
        return {"status": "ok"}

    return app


def run() -> None:
    """Serve the API with uvicorn using configured host and port."""
    settings = load_settings()
    configure_logging(settings.log_level)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
