from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
Email = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255, pattern=EMAIL_PATTERN)]


class RegisterRequest(BaseModel):
    name: Name
    email: Email
    # password보다 먼저 검증돼야 confirmed 체크에서 보인다
    password_confirmation: str | None = None
    password: Annotated[str, Field(min_length=1)]

    @field_validator("password")
    @classmethod
    def check_password(cls, value: str, info: ValidationInfo) -> str:
        if len(value) < 8:
            raise PydanticCustomError("password_min", "The password field must be at least 8 characters.")
        if info.data.get("password_confirmation") != value:
            raise PydanticCustomError("confirmed", "The password field confirmation does not match.")
        return value


class LoginRequest(BaseModel):
    email: Email
    password: Annotated[str, Field(min_length=1)]
