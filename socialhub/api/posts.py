"""FastAPI router for post endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query, status

from socialhub.modules.posts.schemas import CreatePostRequest, ListPostsQuery, PostIdParams, UpdatePostRequest
from socialhub.shared.errors import BadRequestError, ValidationError
from socialhub.shared.i18n import CommonTranslationKeys, I18nService, get_i18n_service
from socialhub.shared.schemas import SuccessResponse
from socialhub.shared.validation import RequestSource, ValidationOptions, validate, validate_multiple

router = APIRouter(prefix="/posts", tags=["Posts"])

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: BadRequestError.openapi_response(),
    422: ValidationError.openapi_response(),
}


@router.post(
    "",
    response_model=SuccessResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
    summary="Create a post",
)
async def create_post(
    payload: Annotated[CreatePostRequest, Depends(validate(CreatePostRequest))],
    i18n: Annotated[I18nService, Depends(get_i18n_service)],
) -> SuccessResponse:
    return SuccessResponse(
        message=i18n.translate(CommonTranslationKeys.CREATED),
        translation_key=CommonTranslationKeys.CREATED,
        data=payload.model_dump(by_alias=True, mode="json"),
    )


@router.get(
    "",
    response_model=SuccessResponse,
    responses=ERROR_RESPONSES,
    summary="List posts",
)
async def list_posts(
    query: Annotated[
        ListPostsQuery,
        Depends(validate(ListPostsQuery, RequestSource.QUERY, ValidationOptions(abort_early=True))),
    ],
    i18n: Annotated[I18nService, Depends(get_i18n_service)],
) -> SuccessResponse:
    """Validate the listing query; only the first query error is reported."""
    return SuccessResponse(
        message=i18n.translate(CommonTranslationKeys.SUCCESS),
        translation_key=CommonTranslationKeys.SUCCESS,
        data={"items": [], "query": query.model_dump(by_alias=True, mode="json"), "offset": query.offset},
    )


@router.get(
    "/search",
    response_model=SuccessResponse,
    responses=ERROR_RESPONSES,
    summary="Search posts",
)
async def search_posts(
    i18n: Annotated[I18nService, Depends(get_i18n_service)],
    q: Annotated[str, Query(min_length=2, max_length=100)],
    limit: Annotated[int, Query(ge=1, le=50)] = 10,
) -> SuccessResponse:
    """Native FastAPI query parameters; errors go through the same formatter."""
    return SuccessResponse(
        message=i18n.translate(CommonTranslationKeys.SUCCESS),
        translation_key=CommonTranslationKeys.SUCCESS,
        data={"items": [], "q": q, "limit": limit},
    )


@router.patch(
    "/{postId}",
    response_model=SuccessResponse,
    responses=ERROR_RESPONSES,
    summary="Update a post",
)
async def update_post(
    validated: Annotated[
        dict[str, Any],
        Depends(
            validate_multiple(
                {
                    RequestSource.PARAMS: PostIdParams,
                    RequestSource.BODY: UpdatePostRequest,
                }
            )
        ),
    ],
    i18n: Annotated[I18nService, Depends(get_i18n_service)],
) -> SuccessResponse:
    params: PostIdParams = validated[RequestSource.PARAMS]
    changes: UpdatePostRequest = validated[RequestSource.BODY]
    return SuccessResponse(
        message=i18n.translate(CommonTranslationKeys.SUCCESS),
        translation_key=CommonTranslationKeys.SUCCESS,
        data={
            "postId": str(params.post_id),
            "changes": changes.model_dump(by_alias=True, exclude_unset=True, mode="json"),
        },
    )
