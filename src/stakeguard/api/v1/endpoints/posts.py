# src/stakeguard/api/v1/endpoints/posts.py
"""Post-related endpoints for the Stakeguard API."""

from fastapi import APIRouter, status

from stakeguard.api.v1.dependencies import (
    ClockDep,
    CurrentPrincipalDep,
    EngineDep,
    to_http_exception,
)
from stakeguard.schemas.post import PostCreate, PostResponse
from stakeguard.services.errors import ModerationError

router = APIRouter(prefix="/posts", tags=["posts"])


@router.post("/", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    post_data: PostCreate,
    principal: CurrentPrincipalDep,
    engine: EngineDep,
    clock: ClockDep,
) -> PostResponse:
    """Register a post authored by the calling principal."""
    try:
        post = engine.create_post(principal, post_data.content_ref, clock.now())
    except ModerationError as err:
        raise to_http_exception(err) from err
    return PostResponse.model_validate(post)


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(post_id: int, engine: EngineDep) -> PostResponse:
    """Return a post and its moderation status."""
    try:
        post = engine.posts.get_post(post_id)
    except ModerationError as err:
        raise to_http_exception(err) from err
    return PostResponse.model_validate(post)
