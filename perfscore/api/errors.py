from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog
from fastapi import status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from perfscore.api.schemas import FieldError, ValidationErrorResponse

if TYPE_CHECKING:
    from collections.abc import Sequence

    from fastapi import FastAPI, Request

logger = structlog.get_logger(__name__)


def format_validation_errors(errors: Sequence[Any]) -> list[FieldError]:
    """Flatten pydantic error entries into ``{field, message}`` pairs.

    The leading ``body``/``query`` location segment is dropped so ``field`` is the
    dotted path inside the payload.
    """
    formatted = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ())]
        if loc and loc[0] in {"body", "query", "path"}:
            loc = loc[1:]
        formatted.append(FieldError(field=".".join(loc), message=err.get("msg", "")))
    return formatted


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = format_validation_errors(exc.errors())
    logger.warning("request_validation_failed", path=request.url.path, errors=len(errors))
    body = ValidationErrorResponse(errors=errors)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
