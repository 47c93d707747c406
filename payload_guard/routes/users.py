"""
User payload validation endpoint.

Demonstrates the strict request flow:
- Step 1: Read body once (buffered for later consumers)
- Step 2: Reject unknown or mis-cased fields
- Step 3: Decode into UserPayload (type mismatches rejected)
- Step 4: Check declared constraints (all failures reported together)
- Step 5: Map to UserValidatedResponse
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from payload_guard.dependencies import strict_body
from payload_guard.schemas.users import UserPayload, UserValidatedResponse
from payload_guard.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "",
    response_model=UserValidatedResponse,
    status_code=status.HTTP_200_OK,
    summary="Validate a user payload",
    description="""
    Validate a user payload without persisting it.

    Errors:
    - 400: unreadable body, malformed JSON, or unknown/mis-cased field
    - 422: type mismatch or constraint violation
    """
)
async def validate_user(
    user: Annotated[UserPayload, Depends(strict_body(UserPayload))],
) -> UserValidatedResponse:
    """Echo back a user payload that passed strict decoding and validation."""
    logger.info("User payload accepted")

    return UserValidatedResponse(
        user=user,
        message="User payload is valid"
    )
