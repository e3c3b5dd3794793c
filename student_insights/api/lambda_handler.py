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

"""API-Gateway style event adapter.

Accepts ``{"body": "<json>", "requestContext": {"requestId": ...}}`` events and
returns ``{"statusCode": int, "body": "<json>"}``, with the same bodies as the
HTTP API.
"""

import json
import logging
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from student_insights.orchestrator.students.commands import RunStudentQueriesCommand

from .error_handlers import (
    INTERNAL_ERROR_MESSAGE,
    INVALID_INPUT_MESSAGE,
    INVALID_JSON_MESSAGE,
    error_body,
    validation_details,
)
from .students.dependencies import get_run_queries_use_case, resolve_idempotency_key
from .students.schemas import StudentQueryRequest

logger = logging.getLogger(__name__)

_use_case = get_run_queries_use_case()


def _response(status_code: int, body: Dict[str, Any]) -> Dict[str, Any]:
    return {"statusCode": status_code, "body": json.dumps(body)}


def _request_id(event: Mapping[str, Any]) -> Optional[str]:
    request_context = event.get("requestContext") or {}
    return request_context.get("requestId")


def handler(event: Mapping[str, Any], context: Any = None) -> Dict[str, Any]:
    """Handle one API-Gateway proxy event.

    Args:
        event: Proxy event with a JSON string ``body``.
        context: Invocation context; ``aws_request_id`` is the fallback key.

    Returns:
        Proxy response with ``statusCode`` and a JSON string ``body``.
    """
    try:
        body = json.loads(event.get("body") or "{}")
    except (TypeError, ValueError):
        logger.warning("Invalid JSON input")
        return _response(400, error_body(INVALID_JSON_MESSAGE))

    try:
        payload = StudentQueryRequest.model_validate(body)
    except ValidationError as exc:
        details = validation_details(exc.errors())
        logger.warning("Validation failed: %s", details)
        return _response(400, error_body(INVALID_INPUT_MESSAGE, details))

    request_id = _request_id(event)
    try:
        key = resolve_idempotency_key(
            request_id, getattr(context, "aws_request_id", None)
        )
    except ValueError as exc:
        logger.warning("Rejected idempotency key: %s", exc)
        field = "requestContext.requestId" if request_id else "context.aws_request_id"
        return _response(
            400,
            error_body(
                INVALID_INPUT_MESSAGE,
                [{"field": field, "message": str(exc), "type": "value_error"}],
            ),
        )

    try:
        logger.info("Received event %s with %d records", key, len(payload.result))
        command = RunStudentQueriesCommand(
            idempotency_key=key, records=payload.to_records()
        )
        result = _use_case.execute(command)
    except Exception:  # pylint: disable=broad-except
        logger.exception("Unexpected error while handling event")
        return _response(500, error_body(INTERNAL_ERROR_MESSAGE))

    return _response(200, result.to_body())
