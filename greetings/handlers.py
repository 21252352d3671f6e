from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import Depends, Request, Response
from fastapi.responses import PlainTextResponse
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from .config import Settings
from .domain import LOCATION_UK, LOCATION_WORLD, Greeter
from .schemas import Health

logger = logging.getLogger(__name__)

INDEX_TEMPLATE = "index.html"
GREETING_TEMPLATE = "partials/greeting.html"


# === Dependencies ===


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_greeter(request: Request) -> Greeter:
    return request.app.state.greeter


def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.templates


# === Helpers ===


def render(
    request: Request,
    templates: Jinja2Templates,
    settings: Settings,
    name: str,
    context: Optional[dict[str, Any]] = None,
) -> Response:
    """Render ``name`` or answer 500 when the template cannot be loaded.

    The raw error text is only sent back in the local environment.
    """
    try:
        return templates.TemplateResponse(request, name, context or {})
    except TemplateError as exc:
        logger.error("failed to render template %s: %s", name, exc)
        body = str(exc) if settings.is_local else "Internal Server Error"
        return PlainTextResponse(body, status_code=500)


def render_greeting(
    request: Request,
    templates: Jinja2Templates,
    settings: Settings,
    message: str,
) -> Response:
    return render(request, templates, settings, GREETING_TEMPLATE, {"Message": message})


# === Pages ===


def index(
    request: Request,
    templates: Jinja2Templates = Depends(get_templates),
    settings: Settings = Depends(get_settings),
) -> Response:
    return render(request, templates, settings, INDEX_TEMPLATE)


def hello_world(
    request: Request,
    greeter: Greeter = Depends(get_greeter),
    templates: Jinja2Templates = Depends(get_templates),
    settings: Settings = Depends(get_settings),
) -> Response:
    message = greeter.greet(LOCATION_WORLD)
    return render_greeting(request, templates, settings, message)


def hello_uk(
    request: Request,
    greeter: Greeter = Depends(get_greeter),
    templates: Jinja2Templates = Depends(get_templates),
    settings: Settings = Depends(get_settings),
) -> Response:
    message = greeter.greet(LOCATION_UK)
    return render_greeting(request, templates, settings, message)


# === Health ===


def health() -> Health:
    return Health()
