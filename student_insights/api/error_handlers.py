# Copyright 2026 Dell Inc. or its subsidiaries. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Error bodies and global exception handlers.

Client errors carry enough detail to fix the request. Server errors are
opaque to the client and logged with their traceback.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from student_insights.core.queries.exceptions import QueryDomainError

logger = logging.getLogger(__name__)

INVALID_JSON_MESSAGE = "Invalid JSON input"
INVALID_INPUT_MESSAGE = "Invalid input"
INTERNAL_ERROR_MESSAGE = "Internal server error"


def error_body(message: str, details: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
    """Build the JSON error body.

    Args:
        message: Short error message.
        details: Optional per-field problems.

    Returns:
        Dictionary with "error" and, when given, "details".
    """
    body: Dict[str, Any] = {"error": message}
    if details is not None:
        body["details"] = details
    return body


def validation_details(errors: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """Flatten pydantic errors into field/message/type entries.

    The leading "body" location FastAPI adds is dropped so that HTTP and
    event adapters report the same field paths.
    """
    details = []
    for error in errors:
        loc = list(error.get("loc", ()))
        if loc and loc[0] == "body":
            loc = loc[1:]
        details.append(
            {
                "field": ".".join(str(part) for part in loc),
                "message": error.get("msg", ""),
                "type": error.get("type", ""),
            }
        )
    return details


def is_malformed_json(errors: Iterable[Mapping[str, Any]]) -> bool:
    """Check if validation failed because the body was not JSON."""
    return any(error.get("type") == "json_invalid" for error in errors)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_validation_error_handler(app)
    _register_query_error_handler(app)
    _register_generic_error_handler(app)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register request validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        if is_malformed_json(errors):
            logger.warning("Invalid JSON input on %s", request.url.path)
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content=error_body(INVALID_JSON_MESSAGE),
            )

        details = validation_details(errors)
        logger.warning("Validation failed on %s: %s", request.url.path, details)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(INVALID_INPUT_MESSAGE, details),
        )


def _register_query_error_handler(app: FastAPI) -> None:
    """Register query domain error handler."""

    @app.exception_handler(QueryDomainError)
    async def query_error_handler(request: Request, exc: QueryDomainError):
        logger.error(
            "Query evaluation failed on %s: %s",
            request.url.path,
            exc.message,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(INTERNAL_ERROR_MESSAGE),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all handler. Never leaks internal details."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            "Unexpected error on %s: %s", request.url.path, exc, exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(INTERNAL_ERROR_MESSAGE),
        )
