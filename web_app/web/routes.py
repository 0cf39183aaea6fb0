"""Slug redirect and registration routes."""

from fastapi import APIRouter, Request, status
from fastapi.responses import RedirectResponse

from ..api.schemas import RegisterRequest, RegisterResponse, ErrorResponse

router = APIRouter()


@router.get("/{slug}", include_in_schema=False)
@router.get("/{slug}/", include_in_schema=False)
async def redirect_slug(request: Request, slug: str):
    """Redirect to the URL registered for the slug, or to the default URL."""
    resolver = request.app.state.resolver

    target = await resolver.resolve(slug)

    return RedirectResponse(url=target.url, status_code=target.status_code)


@router.post(
    "/{slug}",
    status_code=status.HTTP_201_CREATED,
    response_model=RegisterResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request or slug already registered"},
        401: {"model": ErrorResponse, "description": "Wrong API key"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Register slug",
    description="Register a new slug pointing at a URL. Requires the API key.",
)
async def register_slug(request: Request, slug: str, body: RegisterRequest):
    """Register a new slug. Errors are rendered by the registered exception handlers."""
    registrar = request.app.state.registrar

    mapping = await registrar.register(slug, body.url, body.api_key)

    return RegisterResponse(slug=mapping.slug, url=mapping.url)
