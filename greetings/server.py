from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.templating import Jinja2Templates

from . import __version__
from .config import Settings, load_settings
from .domain import Greeter
from .greeter import GreeterService
from .log import configure_logging
from .routes import build_router, mount_static

logger = logging.getLogger(__name__)

HOST = "0.0.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("server startup complete (env=%s)", app.state.settings.env)
    yield
    logger.info("server shutdown complete")


def create_app(
    settings: Optional[Settings] = None,
    greeter: Optional[Greeter] = None,
) -> FastAPI:
    settings = settings or load_settings()

    app = FastAPI(title="Greetings", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.greeter = greeter or GreeterService()
    app.state.templates = Jinja2Templates(directory=str(settings.templates_dir))

    app.include_router(build_router())
    mount_static(app, settings.static_dir)
    return app


def run(settings: Optional[Settings] = None) -> None:
    settings = settings or load_settings()
    configure_logging(settings)
    logger.info("starting server on %s", settings.port)
    uvicorn.run(create_app(settings), host=HOST, port=int(settings.port), log_config=None)


def main() -> None:
    run()
