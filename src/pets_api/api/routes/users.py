"""User endpoints."""

from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, Request, Response, status

from pets_api.api.dependencies import get_pet_handler, get_user_handler
from pets_api.api.handlers import PetHandler, UserHandler, unwrap
from pets_api.api.schemas.common import INT32_MAX, ErrorResponse
from pets_api.api.schemas.pets import PetCreateRequest, PetResponse
from pets_api.api.schemas.users import (
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)

router = APIRouter()

UserId = Annotated[int, Path(ge=1, le=INT32_MAX, description="User ID")]

NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
BAD_REQUEST_RESPONSE = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}


@router.get("", response_model=List[UserResponse])
async def list_users(handler: UserHandler = Depends(get_user_handler)):
    """List all users."""
    return unwrap(await handler.get_all(), "User")


@router.get("/{user_id}", response_model=UserResponse, responses=NOT_FOUND_RESPONSE)
async def get_user(user_id: UserId, handler: UserHandler = Depends(get_user_handler)):
    """Get a user by ID."""
    return unwrap(await handler.get_by_id(user_id), "User", user_id)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST_RESPONSE,
)
async def create_user(
    user_data: UserCreateRequest,
    request: Request,
    response: Response,
    handler: UserHandler = Depends(get_user_handler),
):
    """Create a user.

    The ``Location`` header points at the new user.
    """
    user = unwrap(await handler.create(user_data), "User")
    response.headers["Location"] = str(request.url_for("get_user", user_id=user.id))
    return user


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    responses={**NOT_FOUND_RESPONSE, **BAD_REQUEST_RESPONSE},
)
async def update_user(
    user_id: UserId,
    user_data: UserUpdateRequest,
    handler: UserHandler = Depends(get_user_handler),
):
    """Update a user's first name, last name and age."""
    return unwrap(await handler.update(user_id, user_data), "User", user_id)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSE,
)
async def delete_user(user_id: UserId, handler: UserHandler = Depends(get_user_handler)):
    """Delete a user. Pets owned by the user are kept without an owner."""
    unwrap(await handler.delete(user_id), "User", user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{user_id}/pets",
    response_model=PetResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**NOT_FOUND_RESPONSE, **BAD_REQUEST_RESPONSE},
)
async def create_user_pet(
    user_id: UserId,
    pet_data: PetCreateRequest,
    request: Request,
    response: Response,
    handler: PetHandler = Depends(get_pet_handler),
):
    """Create a pet owned by the user in the path."""
    pet = unwrap(await handler.create_for_user(user_id, pet_data), "User", user_id)
    response.headers["Location"] = str(request.url_for("get_pet", pet_id=pet.id))
    return pet
