"""Request bodies accepted by the HTTP API."""

from typing import Optional

from pydantic import AliasChoices, BaseModel, Field

# Range of integers the database can bind (signed 64-bit)
MIN_INT = -2**63
MAX_INT = 2**63 - 1


class AddUserRequest(BaseModel):
    document_number: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("documentNumber", "passportNumber"),
    )


class UpdateUserRequest(BaseModel):
    document_number: Optional[str] = Field(
        default="",
        validation_alias=AliasChoices("documentNumber", "passportNumber"),
    )


class StartTaskRequest(BaseModel):
    name: str = Field(..., min_length=1)


class StopTaskRequest(BaseModel):
    id: int = Field(..., ge=MIN_INT, le=MAX_INT)


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
