"""Per-resource handlers implementing the CRUD operations."""

from pets_api.api.handlers.base import HandlerResult, ResultStatus, unwrap
from pets_api.api.handlers.pet_handler import PetHandler
from pets_api.api.handlers.user_handler import UserHandler

__all__ = ["HandlerResult", "PetHandler", "ResultStatus", "UserHandler", "unwrap"]
