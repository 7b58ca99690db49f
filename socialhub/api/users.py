"""FastAPI router for user endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, status

from socialhub.modules.users.schemas import RegisterUserRequest, UpdateProfileRequest, UserIdParams, UserResponse
from socialhub.shared.errors import BadRequestError, ValidationError
from socialhub.shared.i18n import CommonTranslationKeys, I18nService, get_i18n_service
from socialhub.shared.schemas import SuccessResponse
from socialhub.shared.validation import RequestSource, validate, validate_multiple

router = APIRouter(prefix="/users", tags=["Users"])

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: BadRequestError.openapi_response(),
    422: ValidationError.openapi_response(),
}


@router.post(
    "/register",
    response_model=SuccessResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
    summary="Register a new user",
)
async def register_user(
    payload: Annotated[RegisterUserRequest, Depends(validate(RegisterUserRequest))],
    i18n: Annotated[I18nService, Depends(get_i18n_service)],
) -> SuccessResponse:
    """Validate a registration payload and echo the public user view."""
    user = UserResponse.model_validate(payload.model_dump())
    return SuccessResponse(
        message=i18n.translate(CommonTranslationKeys.CREATED),
        translation_key=CommonTranslationKeys.CREATED,
        data=user.model_dump(by_alias=True, mode="json"),
    )


@router.patch(
    "/{userId}/profile",
    response_model=SuccessResponse,
    responses=ERROR_RESPONSES,
    summary="Update a user profile",
)
async def update_profile(
    validated: Annotated[
        dict[str, Any],
        Depends(
            validate_multiple(
                {
                    RequestSource.PARAMS: UserIdParams,
                    RequestSource.BODY: UpdateProfileRequest,
                }
            )
        ),
    ],
    i18n: Annotated[I18nService, Depends(get_i18n_service)],
) -> SuccessResponse:
    """Validate path parameters and the profile changes together."""
    params: UserIdParams = validated[RequestSource.PARAMS]
    changes: UpdateProfileRequest = validated[RequestSource.BODY]
    return SuccessResponse(
        message=i18n.translate(CommonTranslationKeys.SUCCESS),
        translation_key=CommonTranslationKeys.SUCCESS,
        data={
            "userId": params.user_id,
            "changes": changes.model_dump(by_alias=True, exclude_unset=True, mode="json"),
        },
    )
