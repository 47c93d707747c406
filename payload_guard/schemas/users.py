"""
Pydantic schemas for the user validation endpoint.

UserPayload is the reference request shape: a nested address, bounded age,
formatted email and an optional E.164 phone number.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from payload_guard.validation.rules import Rules


class AddressPayload(BaseModel):
    """Postal address nested inside a user payload."""
    city: Annotated[str, Rules("required")] = Field(
        "",
        description="City name",
        examples=["New York"]
    )
    zip: Annotated[int, Rules("required", min=10000, max=99999)] = Field(
        0,
        description="Five digit postal code",
        examples=[12345]
    )


class UserPayload(BaseModel):
    """
    Request body for POST /users.

    Only these field names are accepted, with exact casing.
    """
    name: Annotated[str, Rules("required", "notblank")] = Field(
        "",
        description="Display name",
        examples=["Alice"]
    )
    email: Annotated[str, Rules("required", "email")] = Field(
        "",
        description="Contact email address",
        examples=["alice@example.com"]
    )
    age: Annotated[int, Rules("required", min=10, max=20)] = Field(
        0,
        description="Age in years (10-20)",
        examples=[15]
    )
    phone: Annotated[str, Rules("omitempty", "e164")] = Field(
        "",
        description="Optional phone number in E.164 format",
        examples=["+1234567890"]
    )
    address: Annotated[AddressPayload, Rules("required")] = Field(
        default_factory=AddressPayload,
        description="Postal address"
    )


class UserValidatedResponse(BaseModel):
    """Response after a user payload passed every check."""
    status: Literal["VALID"] = "VALID"
    user: UserPayload = Field(..., description="The decoded user payload")
    message: str = Field(
        ...,
        description="Success message",
        examples=["User payload is valid"]
    )
