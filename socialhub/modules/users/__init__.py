"""Users module - registration and profile request schemas."""

from .schemas import RegisterUserRequest, UpdateProfileRequest, UserIdParams, UserResponse

__all__ = [
    "RegisterUserRequest",
    "UpdateProfileRequest",
    "UserIdParams",
    "UserResponse",
]
