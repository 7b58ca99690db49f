"""Request validation dependencies.

``validate`` and ``validate_multiple`` build FastAPI dependencies that
validate one or several parts of the request against pydantic schemas:

    @router.post("/users")
    async def register(
        payload: Annotated[RegisterUserRequest, Depends(validate(RegisterUserRequest))],
    ) -> ...:

On failure the issues are formatted and raised as ``ValidationError`` (422);
any other failure while reading the request becomes ``BadRequestError`` (400).
"""

import json
from collections.abc import Awaitable, Callable, Mapping
from functools import lru_cache
from typing import Any

from fastapi import Request
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from socialhub.core.config import settings
from socialhub.shared.errors.base import AppError
from socialhub.shared.errors.domain import BadRequestError, ValidationError
from socialhub.shared.logging import get_logger

from .formatter import ValidationErrorFormatter
from .issues import issues_from_validation_error
from .types import FormattedValidationError, RequestSource, ValidationIssue, ValidationOptions

logger = get_logger(__name__)

Dependency = Callable[[Request], Awaitable[Any]]


def resolve_options(options: ValidationOptions | None = None) -> ValidationOptions:
    """Fill unset options from ``ValidationConfig``."""
    defaults = settings.validation
    options = options or ValidationOptions()
    return ValidationOptions(
        abort_early=defaults.abort_early if options.abort_early is None else options.abort_early,
        attach_validated=defaults.attach_validated if options.attach_validated is None else options.attach_validated,
        log_errors=defaults.log_errors if options.log_errors is None else options.log_errors,
    )


@lru_cache(maxsize=256)
def get_type_adapter(schema: Any) -> TypeAdapter[Any]:
    """Cached TypeAdapter per schema."""
    return TypeAdapter(schema)


async def read_request_source(request: Request, source: RequestSource) -> Any:
    """Read one part of the request as plain Python data.

    An empty body reads as ``{}``; repeated query keys read as lists.
    """
    match source:
        case RequestSource.BODY:
            raw = await request.body()
            return json.loads(raw) if raw.strip() else {}
        case RequestSource.QUERY:
            return {
                key: values if len(values) > 1 else values[0]
                for key in request.query_params.keys()
                if (values := request.query_params.getlist(key))
            }
        case RequestSource.PARAMS:
            return dict(request.path_params)
        case RequestSource.HEADERS:
            return dict(request.headers)
        case RequestSource.COOKIES:
            return dict(request.cookies)
    raise ValueError(f"Unsupported request source: {source}")


def _collect_issues(exc: PydanticValidationError, options: ValidationOptions) -> list[ValidationIssue]:
    issues = issues_from_validation_error(exc)
    return issues[:1] if options.abort_early else issues


def _log_failure(formatted: FormattedValidationError, data: Any, **context: Any) -> None:
    logger.warning(
        "Validation failed",
        message=formatted.message,
        errors=[
            {
                "message": error.message,
                "path": error.path_key,
                "code": error.code,
                "severity": str(error.severity),
                "suggestions": error.suggestions,
            }
            for error in formatted.errors.values()
        ],
        summary=formatted.summary.model_dump(by_alias=True),
        input_keys=list(data.keys()) if isinstance(data, Mapping) else [],
        **context,
    )


def validate_schema(
    schema: Any,
    data: Any,
    options: ValidationOptions | None = None,
    source: RequestSource = RequestSource.BODY,
) -> Any:
    """Validate ``data`` against ``schema`` outside a request.

    Logs the outcome when ``log_errors`` is on and re-raises pydantic's
    ValidationError on failure.
    """
    options = resolve_options(options)
    try:
        result = get_type_adapter(schema).validate_python(data)
    except PydanticValidationError as exc:
        if options.log_errors:
            formatted = ValidationErrorFormatter().format(
                _collect_issues(exc, options), source, original_data=data
            )
            _log_failure(formatted, data, source=str(source))
        raise

    if options.log_errors:
        logger.debug("Validation successful", schema=getattr(schema, "__name__", str(schema)))
    return result


def _attach(request: Request, source: str, value: Any) -> None:
    validated = getattr(request.state, "validated", None)
    if validated is None:
        validated = {}
        request.state.validated = validated
    validated[source] = value


def validate(
    schema: Any,
    source: RequestSource = RequestSource.BODY,
    options: ValidationOptions | None = None,
) -> Dependency:
    """Build a dependency validating one request source against ``schema``.

    Args:
        schema: pydantic model (or any type TypeAdapter accepts)
        source: Request part to read
        options: Overrides of the ValidationConfig defaults

    Returns:
        Async dependency returning the validated value
    """
    options = resolve_options(options)
    source = RequestSource(source)

    async def dependency(request: Request) -> Any:
        language = getattr(request.state, "language", None)
        data: Any = None
        try:
            data = await read_request_source(request, source)
            value = get_type_adapter(schema).validate_python(data)
        except PydanticValidationError as exc:
            formatted = ValidationErrorFormatter().format(
                _collect_issues(exc, options), source, language, original_data=data
            )
            if options.log_errors:
                _log_failure(formatted, data, source=str(source), method=request.method, path=request.url.path)
            raise ValidationError(formatted, source) from exc
        except AppError:
            raise
        except Exception as exc:
            raise BadRequestError(str(exc)) from exc

        if options.attach_validated:
            _attach(request, source, value)
        if options.log_errors:
            logger.debug("Validation successful", source=str(source), method=request.method, path=request.url.path)
        return value

    return dependency


def validate_multiple(
    schemas: Mapping[RequestSource | str, Any],
    options: ValidationOptions | None = None,
) -> Dependency:
    """Build a dependency validating several request sources in order.

    Stops at the first failing source. The reported source is the root of
    the first issue's path when it names one of the validated sources,
    otherwise ``body``.

    Returns:
        Async dependency returning ``{source: validated value}``
    """
    options = resolve_options(options)
    ordered = [(RequestSource(source), schema) for source, schema in schemas.items()]
    source_names = [str(source) for source, _ in ordered]

    async def dependency(request: Request) -> dict[str, Any]:
        language = getattr(request.state, "language", None)
        payloads: dict[str, Any] = {}
        results: dict[str, Any] = {}
        try:
            for source, schema in ordered:
                payloads[source] = await read_request_source(request, source)
                results[source] = get_type_adapter(schema).validate_python(payloads[source])
                if options.attach_validated:
                    _attach(request, source, results[source])
        except PydanticValidationError as exc:
            issues = _collect_issues(exc, options)
            root = str(issues[0].path[0]) if issues and issues[0].path else None
            reported = RequestSource(root) if root in source_names else RequestSource.BODY

            formatted = ValidationErrorFormatter().format(
                issues, reported, language, original_data=payloads.get(reported)
            )
            if options.log_errors:
                _log_failure(formatted, payloads.get(reported), sources=source_names, path=request.url.path)
            raise ValidationError(formatted, reported, sources=source_names) from exc
        except AppError:
            raise
        except Exception as exc:
            raise BadRequestError(str(exc)) from exc

        if options.log_errors:
            logger.debug("Multiple sources validation successful", sources=source_names, path=request.url.path)
        return results

    return dependency
