"""Handler result types.

Handlers never raise for expected outcomes. They return a ``HandlerResult``
whose status the routers turn into an HTTP response.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union

from pets_api.api.exceptions import (
    BadRequestError,
    ResourceNotFoundError,
    StoreFailureError,
)


class ResultStatus(Enum):
    """Outcome of a handler operation."""

    OK = "ok"
    CREATED = "created"
    NO_CONTENT = "no_content"
    NOT_FOUND = "not_found"
    VALIDATION_ERROR = "validation_error"
    FAILURE = "failure"


@dataclass
class HandlerResult:
    """Result of a handler operation."""

    status: ResultStatus
    data: Optional[Any] = None
    errors: Dict[str, str] = field(default_factory=dict)
    message: Optional[str] = None

    @property
    def is_success(self) -> bool:
        """Check if the operation succeeded."""
        return self.status in (
            ResultStatus.OK,
            ResultStatus.CREATED,
            ResultStatus.NO_CONTENT,
        )

    @classmethod
    def ok(cls, data: Any) -> "HandlerResult":
        return cls(status=ResultStatus.OK, data=data)

    @classmethod
    def created(cls, data: Any) -> "HandlerResult":
        return cls(status=ResultStatus.CREATED, data=data)

    @classmethod
    def no_content(cls) -> "HandlerResult":
        return cls(status=ResultStatus.NO_CONTENT)

    @classmethod
    def not_found(cls, message: str) -> "HandlerResult":
        return cls(status=ResultStatus.NOT_FOUND, message=message)

    @classmethod
    def validation_error(cls, errors: Dict[str, str]) -> "HandlerResult":
        return cls(
            status=ResultStatus.VALIDATION_ERROR,
            errors=errors,
            message="Request validation failed",
        )

    @classmethod
    def failure(cls, message: str) -> "HandlerResult":
        return cls(status=ResultStatus.FAILURE, message=message)


def unwrap(result: HandlerResult, resource: str, resource_id: Union[int, str, None] = None) -> Any:
    """Return the payload of a successful result or raise the matching API error.

    Args:
        result: Result returned by a handler
        resource: Resource name used in not-found messages
        resource_id: Identifier the request was about, if any

    Returns:
        The result payload

    Raises:
        ResourceNotFoundError: Result is NOT_FOUND
        BadRequestError: Result is VALIDATION_ERROR
        StoreFailureError: Result is FAILURE
    """
    if result.is_success:
        return result.data
    if result.status == ResultStatus.NOT_FOUND:
        raise ResourceNotFoundError(resource, resource_id if resource_id is not None else "")
    if result.status == ResultStatus.VALIDATION_ERROR:
        raise BadRequestError(result.message or "Request validation failed", result.errors)
    raise StoreFailureError(result.message or "Data store operation failed")
