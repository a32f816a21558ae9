import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Callable, Optional

import uvicorn
from fastapi import FastAPI

from woofmoo import __version__
from woofmoo.api.routers.core import router as core_router
from woofmoo.config import Settings, get_settings
from woofmoo.services.directory import ArchiveDirectory
from woofmoo.services.refresh_service import ArchiveRefresher, utcnow

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Run the archive refresh loop for the lifetime of the app."""
    settings: Settings = app.state.settings
    task = None
    if settings.refresh_enabled and app.state.refresher is not None:
        task = asyncio.create_task(app.state.refresher.run_forever())
    try:
        yield
    finally:
        if task is not None:
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass


def create_app(
    settings: Optional[Settings] = None,
    *,
    directory: Optional[ArchiveDirectory] = None,
    refresher: Optional[ArchiveRefresher] = None,
    clock: Callable = utcnow,
) -> FastAPI:
    settings = settings or get_settings()
    if directory is None:
        directory = ArchiveDirectory.with_defaults(settings)
    if refresher is None and settings.refresh_enabled:
        refresher = ArchiveRefresher.from_settings(directory, settings)

    app = FastAPI(title="Woof Moo", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.directory = directory
    app.state.refresher = refresher
    app.state.clock = clock
    app.include_router(core_router)
    return app


app = create_app()


def main() -> int:
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Woof Moo initializing on port %d ...", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
