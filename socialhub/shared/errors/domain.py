"""Standard domain error types.

Catalog of standard error types for use across the application.
"""

from typing import TYPE_CHECKING, Any

from socialhub.shared.i18n.keys import CommonTranslationKeys

from .base import AppError

if TYPE_CHECKING:
    from socialhub.shared.validation.types import FormattedValidationError


class BadRequestError(AppError):
    """Bad request - malformed or invalid."""

    status_code = 400
    translation_key = CommonTranslationKeys.BAD_REQUEST


class NotFoundError(AppError):
    """Resource not found."""

    status_code = 404
    translation_key = CommonTranslationKeys.NOT_FOUND


class ConflictError(AppError):
    """Resource conflict or duplicate."""

    status_code = 409
    translation_key = CommonTranslationKeys.CONFLICT


class UnprocessableEntityError(AppError):
    """Unprocessable entity."""

    status_code = 422
    translation_key = CommonTranslationKeys.UNPROCESSABLE_ENTITY


class InternalServerError(AppError):
    """Internal server error."""

    status_code = 500
    code = "INTERNAL_SERVER_ERROR"
    translation_key = CommonTranslationKeys.INTERNAL_SERVER_ERROR
    is_operational = False


class ValidationError(AppError):
    """Validation failed."""

    status_code = 422
    code = "VALIDATION_ERROR"
    translation_key = CommonTranslationKeys.VALIDATION_ERROR

    def __init__(
        self,
        formatted: "FormattedValidationError",
        source: str,
        sources: list[str] | None = None,
    ) -> None:
        metadata: dict[str, Any] = {
            "summary": formatted.summary.model_dump(by_alias=True, mode="json"),
            "source": str(source),
        }
        if sources is not None:
            metadata["sources"] = [str(s) for s in sources]

        super().__init__(
            message=formatted.message,
            metadata=metadata,
            errors={
                key: error.model_dump(by_alias=True, mode="json")
                for key, error in formatted.errors.items()
            },
        )
        self.formatted = formatted
        self.source = str(source)
