from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, FastAPI
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from . import handlers
from .schemas import Health

logger = logging.getLogger(__name__)

STATIC_PREFIX = "/static"


def build_router() -> APIRouter:
    router = APIRouter()
    router.add_api_route("/", handlers.index, methods=["GET"], response_class=HTMLResponse)
    router.add_api_route(
        "/hello-world", handlers.hello_world, methods=["GET"], response_class=HTMLResponse
    )
    router.add_api_route(
        "/hello-uk", handlers.hello_uk, methods=["GET"], response_class=HTMLResponse
    )
    router.add_api_route("/healthz", handlers.health, methods=["GET"], response_model=Health)
    return router


def mount_static(app: FastAPI, directory: Path) -> None:
    # Without a mount, /static/* falls through to the router's 404.
    if not Path(directory).is_dir():
        logger.warning("static directory %s not found, static files disabled", directory)
        return
    app.mount(STATIC_PREFIX, StaticFiles(directory=directory), name="static")
