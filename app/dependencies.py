# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

import json
from typing import Annotated

from fastapi import Depends, Request
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError

from app.config import settings
from app.exceptions import InvalidPayloadError, NotAcceptableError
from core.models.bird import BirdWrite
from lib.negotiation import best_match

JSON = "application/json"
HTML = "text/html"

# Offered representations, in server preference order
JSON_OR_HTML = (JSON, HTML)

templates = Jinja2Templates(directory=str(settings.TEMPLATES_DIR))


async def get_bird_payload(request: Request) -> BirdWrite:
    """
    Read title/description from a JSON or form-encoded body.

    Raises:
        InvalidPayloadError: If the body is not a JSON object or the fields
            are not strings
    """
    content_type = request.headers.get("content-type", "")

    if content_type.startswith(JSON):
        body = await request.body()
        try:
            data = json.loads(body) if body else {}
        except ValueError as e:
            raise InvalidPayloadError(str(e))
        if not isinstance(data, dict):
            raise InvalidPayloadError("expected a JSON object")
    else:
        form = await request.form()
        data = dict(form)

    try:
        return BirdWrite.model_validate(data)
    except ValidationError as e:
        raise InvalidPayloadError(str(e))


def negotiate(request: Request, offered: tuple[str, ...] = JSON_OR_HTML) -> str:
    """
    Pick the representation to send back for this request.

    Raises:
        NotAcceptableError: If the client accepts none of ``offered``
    """
    accept = request.headers.get("accept")
    choice = best_match(accept, list(offered))
    if choice is None:
        raise NotAcceptableError(accept, list(offered))
    return choice


# Type alias for dependency injection
BirdPayloadDep = Annotated[BirdWrite, Depends(get_bird_payload)]
