"""User resource handler."""

from typing import Dict

import structlog

from pets_api.api.handlers.base import HandlerResult
from pets_api.api.mappers.user_mapper import (
    apply_user_update_request,
    user_create_request_to_entity,
    user_to_response,
)
from pets_api.api.schemas.users import UserCreateRequest, UserUpdateRequest
from pets_api.models.user import User
from pets_api.repositories.base import Store, StoreError

logger = structlog.get_logger(__name__)


class UserHandler:
    """CRUD operations for users.

    Every write ends with exactly one ``commit`` on the store; reads never
    mutate.
    """

    def __init__(self, users: Store[User]):
        """Initialize the handler.

        Args:
            users: Store bound to the current request's session
        """
        self.users = users

    async def get_all(self) -> HandlerResult:
        """List every user in store order."""
        users = await self.users.list()
        return HandlerResult.ok([user_to_response(user) for user in users])

    async def get_by_id(self, user_id: int) -> HandlerResult:
        """Get one user."""
        user = await self.users.find(user_id)
        if user is None:
            return HandlerResult.not_found(f"User {user_id} not found")
        return HandlerResult.ok(user_to_response(user))

    async def create(self, dto: UserCreateRequest) -> HandlerResult:
        """Create a user from the request.

        Returns:
            CREATED with the new user, or VALIDATION_ERROR before any store
            access when a required name is blank
        """
        errors = self._validate_create(dto)
        if errors:
            return HandlerResult.validation_error(errors)

        try:
            user = await self.users.add(user_create_request_to_entity(dto))
            await self.users.commit()
        except StoreError as e:
            return HandlerResult.failure(str(e))

        logger.info("user_created", user_id=user.id)
        return HandlerResult.created(user_to_response(user))

    async def update(self, user_id: int, dto: UserUpdateRequest) -> HandlerResult:
        """Overwrite the writable fields of an existing user."""
        user = await self.users.find(user_id)
        if user is None:
            return HandlerResult.not_found(f"User {user_id} not found")

        apply_user_update_request(user, dto)
        try:
            await self.users.commit()
        except StoreError as e:
            return HandlerResult.failure(str(e))

        logger.info("user_updated", user_id=user.id)
        return HandlerResult.ok(user_to_response(user))

    async def delete(self, user_id: int) -> HandlerResult:
        """Delete a user. The user's pets are kept without an owner."""
        user = await self.users.find(user_id)
        if user is None:
            return HandlerResult.not_found(f"User {user_id} not found")

        try:
            await self.users.remove(user)
            await self.users.commit()
        except StoreError as e:
            return HandlerResult.failure(str(e))

        logger.info("user_deleted", user_id=user_id)
        return HandlerResult.no_content()

    @staticmethod
    def _validate_create(dto: UserCreateRequest) -> Dict[str, str]:
        errors = {}
        if not dto.first_name or not dto.first_name.strip():
            errors["first_name"] = "First name is required"
        if not dto.last_name or not dto.last_name.strip():
            errors["last_name"] = "Last name is required"
        return errors
