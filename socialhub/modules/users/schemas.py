"""Pydantic schemas for user endpoints."""

import re
from datetime import date

from pydantic import ConfigDict, EmailStr, Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from socialhub.shared.schemas import CamelSchema

MIN_AGE = 13
MAX_AGE = 120

USERNAME_PATTERN = r"^[a-zA-Z0-9_]+$"
PHONE_PATTERN = r"^\+?[0-9]{9,15}$"
URL_PATTERN = r"^https?://\S+$"
IMAGE_URL_PATTERN = r"^https?://\S+\.(png|jpe?g|gif|webp)$"

_PASSWORD_CLASSES = (r"[a-z]", r"[A-Z]", r"\d", r"[@$!%*?&]")


def calculate_age(birth_date: date, today: date | None = None) -> int:
    """Age in full years on ``today``."""
    today = today or date.today()
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


class RegisterUserRequest(CamelSchema):
    """Registration payload."""

    model_config = ConfigDict(extra="forbid")

    username: str = Field(
        ...,
        min_length=3,
        max_length=30,
        pattern=USERNAME_PATTERN,
        examples=["jane_doe"],
    )
    email: EmailStr = Field(..., examples=["jane@example.com"])
    password: str = Field(..., min_length=8, max_length=128)
    confirm_password: str
    date_of_birth: date = Field(..., examples=["2000-01-31"])
    phone: str | None = Field(default=None, pattern=PHONE_PATTERN, examples=["+84901234567"])

    @field_validator("password")
    @classmethod
    def check_password_complexity(cls, value: str) -> str:
        if not all(re.search(pattern, value) for pattern in _PASSWORD_CLASSES):
            raise PydanticCustomError(
                "custom",
                "Password must contain uppercase and lowercase letters, a digit and a special character",
            )
        return value

    @field_validator("date_of_birth")
    @classmethod
    def check_age(cls, value: date) -> date:
        age = calculate_age(value)
        if age < MIN_AGE:
            raise PydanticCustomError(
                "too_small",
                "You must be at least {minimum} years old",
                {"minimum": MIN_AGE, "type": "date", "inclusive": True},
            )
        if age > MAX_AGE:
            raise PydanticCustomError(
                "too_big",
                "Age must be at most {maximum} years",
                {"maximum": MAX_AGE, "type": "date", "inclusive": True},
            )
        return value

    @model_validator(mode="after")
    def check_passwords_match(self) -> "RegisterUserRequest":
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self


class UpdateProfileRequest(CamelSchema):
    """Partial profile update: only the fields sent are changed."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, min_length=1, max_length=50)
    bio: str | None = Field(default=None, max_length=500)
    website: str | None = Field(default=None, max_length=100, pattern=URL_PATTERN)
    location: str | None = Field(default=None, max_length=100)
    avatar: str | None = Field(default=None, pattern=IMAGE_URL_PATTERN)
    cover: str | None = Field(default=None, pattern=IMAGE_URL_PATTERN)


class UserIdParams(CamelSchema):
    """Path parameters of user endpoints."""

    user_id: int = Field(..., ge=1)


class UserResponse(CamelSchema):
    """Public view of a registered user."""

    username: str
    email: EmailStr
    date_of_birth: date
    phone: str | None = None
