from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, field_validator, model_validator
from pydantic_core import PydanticCustomError

from app.schemas.common import CamelModel


ResourceStatus = Literal["active", "inactive"]

NAME_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 1000


def _check_name(value: str, empty_message: str) -> str:
    value = value.strip()
    if not value:
        raise PydanticCustomError("name_empty", empty_message)
    if len(value) > NAME_MAX_LENGTH:
        raise PydanticCustomError("name_too_long", "Name must be less than 255 characters")
    return value


def _check_description(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    if len(value) > DESCRIPTION_MAX_LENGTH:
        raise PydanticCustomError("description_too_long", "Description must be less than 1000 characters")
    # 空字符串按 null 存储
    return value or None


class ResourceCreate(BaseModel):
    name: str
    description: Optional[str] = None
    status: ResourceStatus = "active"

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _check_name(v, "Name is required")

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: Optional[str]) -> Optional[str]:
        return _check_description(v)


class ResourceUpdate(BaseModel):
    """Only the fields present in the request body are applied"""
    name: Optional[str] = None
    description: Optional[str] = None
    status: Optional[ResourceStatus] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: Optional[str]) -> str:
        if v is None:
            raise PydanticCustomError("name_empty", "Name cannot be empty")
        return _check_name(v, "Name cannot be empty")

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: Optional[str]) -> Optional[str]:
        return _check_description(v)

    @field_validator("status")
    @classmethod
    def validate_status(cls, v: Optional[str]) -> str:
        if v is None:
            raise PydanticCustomError("status_null", "Status must be 'active' or 'inactive'")
        return v

    @model_validator(mode="after")
    def check_not_empty(self) -> "ResourceUpdate":
        if not self.model_fields_set:
            raise PydanticCustomError("update_empty", "At least one field must be provided for update")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class ResourceResponse(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    status: ResourceStatus
    created_at: datetime
    updated_at: datetime
