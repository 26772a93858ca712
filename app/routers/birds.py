# =============================================================================
# app/routers/birds.py - Bird CRUD Endpoints
# =============================================================================
# Handles listing, creating, fetching, updating and deleting birds.
#
# List and fetch answer in JSON or HTML depending on the Accept header;
# create and update always answer in JSON.
#
# Handlers are plain functions: FastAPI runs them in its threadpool, so the
# blocking Supabase calls never stall the event loop.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path, Request, Response

from app.dependencies import HTML, BirdPayloadDep, negotiate, templates
from core.models.bird import Bird
from core.services.bird_service import BirdService

router = APIRouter()

BirdId = Annotated[int, Path(description="Bird ID")]


# =============================================================================
# Endpoints
# =============================================================================

@router.get("", response_model=list[Bird])
def list_birds(request: Request):
    """
    List all birds.

    Returns a JSON array, or the index page when the client prefers HTML.
    """
    birds = BirdService.list_birds()

    if negotiate(request) == HTML:
        return templates.TemplateResponse(
            request,
            "birds/index.html",
            {"birds": birds},
        )
    return birds


@router.post("", response_model=Bird)
def create_bird(payload: BirdPayloadDep):
    """
    Create a new bird.

    Only title and description are taken from the body; the database assigns
    the id and timestamps. The created bird is returned as JSON.
    """
    return BirdService.create_bird(payload)


@router.get("/forms", include_in_schema=False)
def new_bird_form(request: Request):
    """
    Render the empty bird creation form.

    Declared before /{bird_id} so "forms" is never parsed as an id.
    """
    return templates.TemplateResponse(
        request,
        "birds/form.html",
        {"bird": None},
    )


@router.get("/{bird_id}", response_model=Bird)
def get_bird(bird_id: BirdId, request: Request):
    """
    Get a bird.

    Returns the bird as JSON, or the form pre-filled with it when the client
    prefers HTML. Unknown ids answer 404.
    """
    bird = BirdService.get_bird(bird_id)

    if negotiate(request) == HTML:
        return templates.TemplateResponse(
            request,
            "birds/form.html",
            {"bird": bird},
        )
    return bird


@router.patch("/{bird_id}", response_model=Bird)
def update_bird(bird_id: BirdId, payload: BirdPayloadDep):
    """
    Replace a bird's title and description.

    This is a full replace: a field left out of the body is stored as null.
    Unknown ids and rejected writes answer 400.
    """
    return BirdService.update_bird(bird_id, payload)


@router.delete("/{bird_id}", status_code=204)
def delete_bird(bird_id: BirdId):
    """
    Delete a bird.

    Always answers 204, whether or not the bird existed.
    """
    BirdService.delete_bird(bird_id)
    return Response(status_code=204)
