"""
Translation of use-case failures into HTTP errors.

    validation -> 422, not found -> 404, anything else -> 500
"""

import logging

from fastapi import HTTPException

from application.exceptions import (
    ApplicationError,
    ApplicationValidationError,
    NotFoundError,
)
from application.use_cases import UseCaseResult
from domain.exceptions import ValidationError

logger = logging.getLogger(__name__)


def raise_for_result(result: UseCaseResult) -> None:
    """Raise the matching HTTPException for a failed use-case result."""
    try:
        result.raise_for_error()
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except ApplicationValidationError as e:
        raise HTTPException(
            status_code=422,
            detail={"message": e.message, "errors": e.errors},
        )
    except ApplicationError as e:
        logger.error(f"Request failed: {e.message}")
        raise HTTPException(status_code=500, detail=e.message)


def validation_http_error(error: ValidationError) -> HTTPException:
    """HTTP 422 for a domain validation error raised outside a use case."""
    return HTTPException(
        status_code=422,
        detail={"message": error.message, "errors": error.errors},
    )
